from greeter.greeting import FALLBACK_NAME, InputReadError, format_timestamp, greet, read_line, shout_case

__all__ = ["FALLBACK_NAME", "InputReadError", "format_timestamp", "greet", "read_line", "shout_case"]
