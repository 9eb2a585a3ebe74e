"""Integer parsing with a strict, canonical grammar.

Python's ``int()`` is forgiving: it strips whitespace, accepts
underscores (``"1_000"``), and understands non-ASCII digits.  Settings
read from the environment should be stricter than that, so
``parse_integer`` only accepts the plain base-10 form:

    [+|-]digits

with ``-`` allowed for signed types only.  Each ``IntegerType`` also
carries the bounds of a fixed-width machine integer, and a value that
doesn't fit is rejected the same way as malformed text.
"""

import re
from dataclasses import dataclass

from py_env.errors import ParseError

_SIGNED_PATTERN = re.compile(r"(?P<sign>[+-]?)0*(?P<digits>[0-9]+)", re.ASCII)
_UNSIGNED_PATTERN = re.compile(r"(?P<sign>\+?)0*(?P<digits>[0-9]+)", re.ASCII)


@dataclass(frozen=True)
class IntegerType:
    """A fixed-width integer type: a name and its inclusive bounds."""

    name: str
    minimum: int
    maximum: int

    @property
    def max_digits(self) -> int:
        """Return the number of decimal digits in the widest bound."""
        return len(str(max(-self.minimum, self.maximum)))

    @property
    def signed(self) -> bool:
        """Return True if negative values are representable."""
        return self.minimum < 0

    def __contains__(self, value: object) -> bool:
        """Return True if *value* is an int within this type's bounds."""
        return isinstance(value, int) and self.minimum <= value <= self.maximum


def _signed(bits: int) -> IntegerType:
    """Return the two's-complement integer type of the given width."""
    return IntegerType(name=f"i{bits}", minimum=-(2 ** (bits - 1)), maximum=2 ** (bits - 1) - 1)


def _unsigned(bits: int) -> IntegerType:
    """Return the unsigned integer type of the given width."""
    return IntegerType(name=f"u{bits}", minimum=0, maximum=2**bits - 1)


I8 = _signed(8)
I16 = _signed(16)
I32 = _signed(32)
I64 = _signed(64)
U8 = _unsigned(8)
U16 = _unsigned(16)
U32 = _unsigned(32)
U64 = _unsigned(64)


def parse_integer(text: str, int_type: IntegerType = I64, *, key: str | None = None) -> int:
    """Parse *text* as a base-10 integer of the given type.

    Args:
        text: The raw string to parse.
        int_type: Target type; decides whether a sign is allowed and
            which values fit.
        key: Environment key the text came from, recorded on the error.

    Returns:
        The parsed integer.

    Raises:
        ParseError: If *text* is malformed or out of bounds for *int_type*.

    """
    pattern = _SIGNED_PATTERN if int_type.signed else _UNSIGNED_PATTERN
    match = pattern.fullmatch(text)
    if match is None:
        raise ParseError(text, key=key)
    # Only significant digits no wider than the bounds reach int().
    digits = match["digits"]
    if len(digits) > int_type.max_digits:
        raise ParseError(text, key=key)
    value = int(match["sign"] + digits)
    if value not in int_type:
        raise ParseError(text, key=key)
    return value
