# greeter/greeting.py
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from jinja2 import Environment, FileSystemLoader, select_autoescape
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

FALLBACK_NAME = "stranger"
TEMPLATE_NAME = "greeting.txt"

env = Environment(
    loader=FileSystemLoader(Path(__file__).parent / "templates"),
    autoescape=select_autoescape(),
)

# RFC1123 names are fixed English abbreviations, never the process locale
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class InputReadError(Exception):
    """Reading the name from the input stream failed."""


# ---------- Pydantic Schemas ----------

class GreetRequest(BaseModel):
    name: str = Field(default="")
    shout: bool = Field(default=False)

    @field_validator("name")
    @classmethod
    def strip_or_fallback(cls, v: str) -> str:
        return v.strip() or FALLBACK_NAME


class Greeting(BaseModel):
    message: str
    generated_at: datetime = Field(default_factory=lambda: datetime.now().astimezone())

    def lines(self) -> list[str]:
        return [self.message, f"Generated at: {format_timestamp(self.generated_at)}"]


# ---------- Core ----------

def shout_case(text: str) -> str:
    # one code point in, one out: "ß" and ligatures with no single uppercase form stay put
    return "".join(u if len(u := c.upper()) == 1 else c for c in text)


def render_greeting(req: GreetRequest) -> str:
    msg = env.get_template(TEMPLATE_NAME).render(name=req.name)
    # case conversion applies to the composed message, not just the name
    if req.shout:
        msg = shout_case(msg)
    return msg


def greet(name: str, shout: bool = False) -> str:
    """
    Build the greeting for a raw name.

    Whitespace is trimmed and an empty name becomes "stranger"; with shout the
    whole message is uppercased. No trailing newline.
    """
    msg = render_greeting(GreetRequest(name=name, shout=shout))
    logger.debug("rendered greeting: %r", msg)
    return msg


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Format as RFC1123, e.g. 'Mon, 02 Jan 2006 15:04:05 MST'."""
    if moment is None:
        moment = datetime.now()
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return "{}, {:02d} {} {:04d} {}".format(
        _WEEKDAYS[moment.weekday()],
        moment.day,
        _MONTHS[moment.month - 1],
        moment.year,
        moment.strftime("%H:%M:%S %Z"),
    )


def read_line(stream: Optional[TextIO]) -> str:
    if stream is None:
        raise InputReadError("stdin is closed")
    try:
        line = stream.readline()
    except (OSError, ValueError) as e:
        raise InputReadError(str(e) or type(e).__name__) from e
    # a line that never reached its newline counts as a failed read
    if not line.endswith("\n"):
        raise InputReadError("EOF")
    return line
