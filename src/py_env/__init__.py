"""Typed, fallback-aware access to environment variables.

Re-exports public symbols so callers can write::

    from py_env import get_port_or_die, EnvError

The library logs through the ``py_env`` logger and stays silent unless
the host application configures logging.
"""

import logging

from py_env.accessor import (
    EnvReader,
    get_int,
    get_int_in_range,
    get_int_with_default,
    get_or_die,
    get_port,
    get_port_or_die,
    get_port_with_default,
    get_with_default,
    has,
    lookup,
    parse,
    require,
)
from py_env.errors import (
    EnvError,
    ErrorKind,
    InvalidPortError,
    NotFoundError,
    ParseError,
    RangeError,
)
from py_env.parsing import I8, I16, I32, I64, U8, U16, U32, U64, IntegerType, parse_integer

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "I8",
    "I16",
    "I32",
    "I64",
    "U8",
    "U16",
    "U32",
    "U64",
    "EnvError",
    "EnvReader",
    "ErrorKind",
    "IntegerType",
    "InvalidPortError",
    "NotFoundError",
    "ParseError",
    "RangeError",
    "get_int",
    "get_int_in_range",
    "get_int_with_default",
    "get_or_die",
    "get_port",
    "get_port_or_die",
    "get_port_with_default",
    "get_with_default",
    "has",
    "lookup",
    "parse",
    "parse_integer",
    "require",
]
