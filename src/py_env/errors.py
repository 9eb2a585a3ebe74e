"""Error taxonomy — every way an environment lookup can go wrong.

Four things can fail when reading a setting from the environment:

- **Not found** — the key has no value at all.
- **Parse failed** — a value exists but isn't a valid number.
- **Range error** — the number parsed but falls outside the allowed bounds.
- **Invalid port** — the value couldn't be read as a 16-bit port number.

Each kind gets its own exception class under a common ``EnvError`` base,
so callers can catch precisely what they care about.  The message text
(``str(error)``) is part of the contract: callers display it and tests
assert on it, so each class renders a fixed template.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Classify an environment failure without parsing its message."""

    NOT_FOUND = "not_found"
    PARSE_FAILED = "parse_failed"
    RANGE_ERROR = "range_error"
    INVALID_PORT = "invalid_port"


class EnvError(Exception):
    """Base class for recoverable environment failures.

    Attributes:
        kind: Which of the four failure kinds this is.
        key: The environment key involved, when known.

    """

    kind: ErrorKind

    def __init__(self, message: str, *, key: str | None = None) -> None:
        """Store the rendered message and the offending key."""
        super().__init__(message)
        self.key = key

    @property
    def message(self) -> str:
        """Return the rendered message text."""
        return str(self)


class NotFoundError(EnvError):
    """Raise when a key is not set in the environment."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, key: str) -> None:
        """Render ``No such environment {key}``."""
        super().__init__(f"No such environment {key}", key=key)


class ParseError(EnvError):
    """Raise when a value does not match the target integer grammar."""

    kind = ErrorKind.PARSE_FAILED

    def __init__(self, raw: str, *, key: str | None = None) -> None:
        """Render ``Failed to parse {raw}``.

        Args:
            raw: The unparsed text, exactly as found.
            key: The environment key the text came from, if any.

        """
        super().__init__(f"Failed to parse {raw}", key=key)
        self.raw = raw


class RangeError(EnvError):
    """Raise when a parsed integer falls outside an inclusive range."""

    kind = ErrorKind.RANGE_ERROR

    def __init__(self, value: int, minimum: int, maximum: int, *, key: str | None = None) -> None:
        """Render ``{value} is not in the range [{minimum}, {maximum}]``."""
        super().__init__(f"{value} is not in the range [{minimum}, {maximum}]", key=key)
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class InvalidPortError(EnvError):
    """Raise when a value can't be used as a port number.

    ``raw`` holds the offending text when the key was set, or ``None``
    when it was missing entirely.  The two cases only differ in the
    rendered message.
    """

    kind = ErrorKind.INVALID_PORT

    def __init__(self, raw: str | None, *, key: str | None = None) -> None:
        """Render ``invalid port: {raw}`` (or ``UNKNOWN`` when absent)."""
        shown = "UNKNOWN" if raw is None else raw
        super().__init__(f"invalid port: {shown}", key=key)
        self.raw = raw
