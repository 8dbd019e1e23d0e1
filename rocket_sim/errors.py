"""
Rocket Ascent Simulator - Exceptions

Command-level failures are recoverable: the console reports them and keeps
reading input. Reaching the Failed phase is a flight outcome, not an error,
and is never raised.
"""


class RocketSimError(Exception):
    """Base class for simulator errors."""
    pass


class CommandError(RocketSimError):
    """Raised when an operator command cannot be carried out."""
    pass


class InvalidArgumentError(CommandError, ValueError):
    """Raised for a missing or malformed command argument."""
    pass


class UnknownCommandError(CommandError, KeyError):
    """Raised when the command name is not registered."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Unknown command: {command}")

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return str(self.args[0])
