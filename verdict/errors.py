from dataclasses import dataclass

from .result import Result


class UserError(Exception):
    def __str__(self):
        return "Unknown user error."


@dataclass
class ConfigError(UserError):
    msg: str

    def __str__(self):
        return self.msg


@dataclass
class MatcherAssertionError(AssertionError):
    """Raised by the assertion entry points when a matcher does not hold.
    Subclasses `AssertionError`, so test runners report it as a failure."""
    message: str
    result: Result

    def __post_init__(self):
        AssertionError.__init__(self, self.message, self.result)

    def __str__(self):
        return self.message
