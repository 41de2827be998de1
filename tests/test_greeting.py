from datetime import datetime, timedelta, timezone

from greeter.greeting import FALLBACK_NAME, GreetRequest, Greeting, format_timestamp, greet, shout_case

SUFFIX = "! Welcome to Go 🎉"
BLANKS = ["", " ", "   ", "\t", "\n", " \t\r\n ", "　"]
NAMES = ["Alice", "Straße", "ﬁne", "  Bob", "Carol  \n", "o'neil", "Zoë", "José María", "{{ name }}", "<b>x</b>"]


def test_blank_names_fall_back_to_stranger():
    for s in BLANKS:
        assert greet(s, False) == "Hello, stranger! Welcome to Go 🎉", repr(s)


def test_name_is_trimmed_into_template():
    for s in NAMES:
        assert greet(s, False) == "Hello, " + s.strip() + SUFFIX, repr(s)


def test_shout_uppercases_whole_message():
    for s in BLANKS + NAMES:
        assert greet(s, True) == shout_case(greet(s, False))


def test_uppercase_is_idempotent():
    for s in BLANKS + NAMES:
        loud = greet(s, True)
        assert shout_case(loud) == loud


def test_scenario_alice():
    assert greet("  Alice  ", False) == "Hello, Alice! Welcome to Go 🎉"


def test_scenario_empty_shout_keeps_emoji():
    assert greet("", True) == "HELLO, STRANGER! WELCOME TO GO 🎉"


def test_no_trailing_newline():
    assert not greet("Alice").endswith("\n")
    assert greet("Alice") == greet("Alice", False)


def test_template_syntax_in_name_is_literal():
    assert greet("{% if true %}x{% endif %}") == "Hello, {% if true %}x{% endif %}" + SUFFIX


def test_request_model_normalizes_name():
    assert GreetRequest(name="  Dana ").name == "Dana"
    assert GreetRequest(name=" ").name == FALLBACK_NAME
    assert GreetRequest().shout is False


def test_format_timestamp_rfc1123():
    moment = datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc)
    assert format_timestamp(moment) == "Mon, 02 Jan 2006 15:04:05 UTC"


def test_format_timestamp_local_default():
    out = format_timestamp()
    # "Mon, 02 Jan 2006 15:04:05 " + zone
    assert out[3:5] == ", "
    assert out[:3] in {"Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"}
    datetime.strptime(out[5:25], "%d %b %Y %H:%M:%S")


def test_greeting_lines():
    moment = datetime(2024, 2, 29, 23, 59, 1, tzinfo=timezone(timedelta(0), "UTC"))
    g = Greeting(message=greet("Eve"), generated_at=moment)
    assert g.lines() == [
        "Hello, Eve! Welcome to Go 🎉",
        "Generated at: Thu, 29 Feb 2024 23:59:01 UTC",
    ]


def test_shout_maps_one_character_at_a_time():
    assert greet("Straße", True) == "HELLO, STRAßE! WELCOME TO GO 🎉"
    assert greet("ﬁne", True) == "HELLO, ﬁNE! WELCOME TO GO 🎉"
    assert len(greet("Straße", True)) == len(greet("Straße", False))
    assert shout_case("ǆemal") == "ǄEMAL"
