import os
from dotenv import load_dotenv
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}

SHOUT_DEFAULT = os.getenv("GREETER_SHOUT", "false").strip().lower() in _TRUTHY
LOG_LEVEL = os.getenv("GREETER_LOG_LEVEL", "WARNING").strip().upper()
