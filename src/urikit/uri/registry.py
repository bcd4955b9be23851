"""src/urikit/uri/registry.py

Default port registry.

This module keeps the table of scheme to default port used when parsing
(to fill in a missing port) and when serializing (to leave out a port
that equals the default).
"""

import logging
import threading
from typing import Dict, Mapping, Optional

from urikit.exceptions import InvalidArgument

__all__ = [
    "DEFAULT_PORTS",
    "SchemePortRegistry",
    "default_registry",
    "default_port",
    "register_default_port",
]

logger = logging.getLogger(__name__)

DEFAULT_PORTS: Mapping[str, int] = {
    "ftp": 21,
    "http": 80,
    "https": 443,
    "ldap": 389,
    "sftp": 22,
    "tftp": 69,
}


def _check_port(port: object) -> None:
    if isinstance(port, bool) or not isinstance(port, int) or port <= 0:
        raise InvalidArgument(
            f"default port must be a positive integer, got: {port!r}"
        )


class SchemePortRegistry:
    """
    Table of lowercase scheme names to default ports.

    Writers are serialized with a lock and publish a new dict on every
    registration, so lookups never lock and always read a complete
    table. A lookup racing a registration sees either the old or the new
    port.
    """

    __slots__ = ("_ports", "_lock")

    def __init__(self, ports: Optional[Mapping[str, int]] = None) -> None:
        """
        Initialize the registry.

        Args:
            ports: Seed table. Defaults to :data:`DEFAULT_PORTS`. Every
                port is checked as in :meth:`register`.

        Raises:
            InvalidArgument: A seed port is not a positive integer.
        """
        seed = DEFAULT_PORTS if ports is None else ports
        for port in seed.values():
            _check_port(port)
        self._ports: Dict[str, int] = dict(seed)
        self._lock = threading.Lock()

    def lookup(self, scheme: str) -> Optional[int]:
        """
        Return the default port of ``scheme``, or None if unknown.

        The lookup is case-sensitive; schemes are expected to be
        normalized to lowercase already.
        """
        return self._ports.get(scheme)

    def register(self, scheme: str, port: int) -> None:
        """
        Register ``port`` as the default port of ``scheme``.

        An existing entry for the same scheme is overwritten.

        Raises:
            InvalidArgument: ``port`` is not a positive integer.
        """
        _check_port(port)

        with self._lock:
            previous = self._ports.get(scheme)
            ports = dict(self._ports)
            ports[scheme] = port
            self._ports = ports

        if previous is not None and previous != port:
            logger.debug(
                "Default port for %r changed from %d to %d", scheme, previous, port
            )
        else:
            logger.debug("Registered default port %d for %r", port, scheme)

    def snapshot(self) -> Dict[str, int]:
        """Return a copy of the current table."""
        return dict(self._ports)

    def __contains__(self, scheme: object) -> bool:
        return scheme in self._ports

    def __len__(self) -> int:
        return len(self._ports)

    def __repr__(self) -> str:
        return f"SchemePortRegistry({self._ports!r})"


default_registry = SchemePortRegistry()


def default_port(scheme: str) -> Optional[int]:
    """
    Return the default port for a given scheme.

    If the scheme is unknown, returns None. Any scheme may be registered
    via :func:`register_default_port`.

    Example::

        >>> default_port("ftp")
        21
        >>> default_port("ponzi") is None
        True
    """
    return default_registry.lookup(scheme)


def register_default_port(scheme: str, port: int) -> None:
    """
    Register a scheme with a default port in the process-wide registry.

    Best called once at application startup.
    """
    default_registry.register(scheme, port)
