"""src/urikit/uri/model.py

The URI value object.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional

from urikit.uri.serializer import to_string

__all__ = ["URI"]


@dataclass(frozen=True)
class URI:
    """
    A URI split into its components.

    Instances are immutable; use :meth:`replace` to derive a new one.

    Attributes:
        scheme: Lowercased scheme, or None.
        userinfo: Raw text before ``@`` in the authority, not decoded.
        host: Host without IPv6 brackets; ``""`` for an empty authority.
        port: Explicit port, or the scheme's default port.
        path: Path, possibly ``""``.
        query: Raw query string, not decoded.
        fragment: Fragment.
        authority: ``[userinfo@][host][:port]`` rebuilt from the fields
            above, present whenever the source had a ``//`` marker.
    """

    scheme: Optional[str] = None
    userinfo: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    path: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None
    authority: Optional[str] = None

    def replace(self, **changes: Any) -> "URI":
        """Return a copy of this URI with ``changes`` applied."""
        return dataclasses.replace(self, **changes)

    def __str__(self) -> str:
        return to_string(self)
