"""src/urikit/uri/serializer.py

Rendering of URI objects back to text.
"""

from typing import TYPE_CHECKING, Optional

from urikit.uri.registry import SchemePortRegistry, default_registry

if TYPE_CHECKING:
    from urikit.uri.model import URI

__all__ = ["Serializer", "to_string"]


class Serializer:
    """
    Render URIs as strings.

    Components are written as stored, without any escaping. A port equal
    to the default of the URI's scheme is left out of the text.
    """

    __slots__ = ("registry",)

    def __init__(self, registry: Optional[SchemePortRegistry] = None) -> None:
        """
        Initialize the serializer.

        Args:
            registry: Default port table. Defaults to the process-wide
                registry.
        """
        self.registry = default_registry if registry is None else registry

    def effective_port(self, uri: "URI") -> Optional[int]:
        """Return the port to write for ``uri``, None if it is implied."""
        if uri.scheme is not None and uri.port is not None:
            if uri.port == self.registry.lookup(uri.scheme):
                return None
        return uri.port

    def to_string(self, uri: "URI") -> str:
        """Return the textual form of ``uri``."""
        parts = []
        if uri.scheme is not None:
            parts.append(uri.scheme + "://")
        if uri.userinfo is not None:
            parts.append(uri.userinfo + "@")
        if uri.host is not None:
            parts.append(uri.host)

        port = self.effective_port(uri)
        if port is not None:
            parts.append(":" + str(port))

        if uri.path is not None:
            parts.append(uri.path)
        if uri.query is not None:
            parts.append("?" + uri.query)
        if uri.fragment is not None:
            parts.append("#" + uri.fragment)
        return "".join(parts)


def to_string(uri: "URI") -> str:
    """Render ``uri`` using the process-wide default port registry."""
    return Serializer().to_string(uri)
