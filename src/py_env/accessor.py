"""Environment accessor — typed, fallback-aware reads of environment variables.

Every process has an environment: a set of ``KEY=VALUE`` string pairs
inherited from its parent.  Services read their settings from it, and
each read ends in one of three ways when something is wrong:

    - **Raise** — ``get_*`` / ``lookup`` / ``parse`` raise an ``EnvError``
      describing the problem, and the caller decides what to do.
    - **Default** — ``*_with_default`` substitute a caller-supplied value.
    - **Die** — ``require`` / ``*_or_die`` terminate the process, because
      a missing required setting is unrecoverable.

``EnvReader`` binds these operations to one mapping.  It keeps a
*reference* to the mapping (``os.environ`` by default), never a copy, so
every lookup sees the environment as it is right now.  The module-level
functions delegate to a shared reader over ``os.environ``.
"""

import logging
import os
import sys
from collections.abc import Mapping
from typing import NoReturn

from py_env.errors import EnvError, InvalidPortError, NotFoundError, RangeError
from py_env.parsing import I64, U16, IntegerType, parse_integer

logger = logging.getLogger(__name__)


def _die(message: str) -> NoReturn:
    """Log *message* as fatal and terminate the process with status 1."""
    logger.critical(message)
    sys.exit(message)


def _notify_default(err: EnvError, default: object) -> None:
    """Log that *default* replaces a failed lookup."""
    logger.info("%s ... using default %s", err, default)


class EnvReader:
    """Read settings from an environment mapping.

    The reader never writes to the mapping and holds no state of its
    own, so it is safe to share between threads.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Create a reader over *environ*.

        Args:
            environ: The mapping to read (referenced, not copied).
                Defaults to the live ``os.environ``.

        """
        self._environ: Mapping[str, str] = os.environ if environ is None else environ

    def lookup(self, key: str) -> str:
        """Return the value of *key*, which may be the empty string.

        Raises:
            NotFoundError: If *key* is not set.

        """
        value = self._environ.get(key)
        if value is None:
            raise NotFoundError(key)
        return value

    def require(self, key: str) -> str:
        """Return the value of *key*, or terminate the process if it is unset."""
        try:
            return self.lookup(key)
        except NotFoundError:
            _die(f"Could not find required env: {key}")

    get_or_die = require

    def has(self, key: str) -> bool:
        """Return True if *key* is set (no parsing is attempted)."""
        return key in self._environ

    def get_with_default(self, key: str, default: str) -> str:
        """Return the value of *key*, or *default* (with a notice) if unset."""
        try:
            return self.lookup(key)
        except NotFoundError as err:
            _notify_default(err, default)
            return default

    def parse(self, key: str, int_type: IntegerType) -> int:
        """Look up *key* and parse it as an integer of *int_type*.

        Raises:
            NotFoundError: If *key* is not set.
            ParseError: If the value is not a valid *int_type*.

        """
        return parse_integer(self.lookup(key), int_type, key=key)

    def get_int(self, key: str) -> int:
        """Return *key* parsed as a signed 64-bit integer.

        Raises:
            NotFoundError: If *key* is not set.
            ParseError: If the value is not a valid integer.

        """
        return self.parse(key, I64)

    def get_int_with_default(self, key: str, default: int) -> int:
        """Return *key* as an integer, or *default* (with a notice) on any failure."""
        try:
            return self.get_int(key)
        except EnvError as err:
            _notify_default(err, default)
            return default

    def get_int_in_range(self, key: str, minimum: int, maximum: int) -> int:
        """Return *key* as an integer within ``[minimum, maximum]``.

        Both bounds are inclusive.

        Raises:
            NotFoundError: If *key* is not set.
            ParseError: If the value is not a valid integer.
            RangeError: If the integer falls outside the bounds.

        """
        value = self.get_int(key)
        if not minimum <= value <= maximum:
            raise RangeError(value, minimum, maximum, key=key)
        return value

    def get_port(self, key: str) -> int:
        """Return *key* as a port number (0-65535).

        On failure the environment is read a second time: the error
        shows the offending text if *key* is set, or ``UNKNOWN`` if not.

        Raises:
            InvalidPortError: If *key* is unset or not a valid port.

        """
        try:
            return self.parse(key, U16)
        except EnvError as err:
            raw = self._environ.get(key)
            raise InvalidPortError(raw, key=key) from err

    def get_port_with_default(self, key: str, default: int) -> int:
        """Return *key* as a port number, or *default* on any failure.

        Unlike the other ``*_with_default`` operations, no notice is logged.
        """
        try:
            return self.get_port(key)
        except InvalidPortError:
            return default

    def get_port_or_die(self, key: str) -> int:
        """Return *key* as a port number, or terminate the process."""
        try:
            return self.get_port(key)
        except InvalidPortError:
            _die(f"Invalid or missing port for: {key}")


_default_reader = EnvReader()

lookup = _default_reader.lookup
require = _default_reader.require
get_or_die = _default_reader.get_or_die
has = _default_reader.has
get_with_default = _default_reader.get_with_default
parse = _default_reader.parse
get_int = _default_reader.get_int
get_int_with_default = _default_reader.get_int_with_default
get_int_in_range = _default_reader.get_int_in_range
get_port = _default_reader.get_port
get_port_with_default = _default_reader.get_port_with_default
get_port_or_die = _default_reader.get_port_or_die
