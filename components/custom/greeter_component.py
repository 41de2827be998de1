# Greeter component for console greetings
from greeter.greeting import greet


class GreeterComponent:
    display_name = "Greeter"
    description = "Greets a name (or a stranger), optionally shouting the whole message."

    def build(self, name: str, shout: bool = False) -> str:
        # input validation; blank names are fine and fall back to "stranger"
        if not isinstance(name, str):
            raise ValueError("name must be a string")
        if not isinstance(shout, bool):
            raise ValueError("shout must be a boolean")
        return greet(name, shout)
