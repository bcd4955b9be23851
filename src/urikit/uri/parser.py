"""src/urikit/uri/parser.py

Lenient URI parser.

Any string parses: the RFC 3986 appendix B pattern always matches, and
components that are missing come back as None. Checking the result for
validity is left to the caller.
"""

import re
from typing import Optional, cast

from urikit.uri.authority import join_authority, split_authority
from urikit.uri.model import URI
from urikit.uri.registry import SchemePortRegistry, default_registry

__all__ = ["URIParser", "parse", "normalize_scheme"]

# From https://tools.ietf.org/html/rfc3986#appendix-B
URI_PATTERN = re.compile(
    r"^(?:(?P<scheme>[^:/?#]+):)?"
    r"(?P<marker>//(?P<authority>[^/?#]*))?"
    r"(?P<path>[^?#]*)"
    r"(?:\?(?P<query>[^#]*))?"
    r"(?:#(?P<fragment>.*))?",
    re.DOTALL,
)


def _nillify(value: Optional[str]) -> Optional[str]:
    # The pattern reports unmatched and empty groups alike as missing.
    return value or None


def normalize_scheme(scheme: Optional[str]) -> Optional[str]:
    """Normalize ``scheme`` by lowercasing it. None passes through."""
    if scheme is None:
        return None
    return scheme.lower()


class URIParser:
    """
    Split URI strings into :class:`~urikit.uri.model.URI` objects.

    When the text carries no port, the port is looked up in the
    registry from the scheme.
    """

    __slots__ = ("registry",)

    def __init__(self, registry: Optional[SchemePortRegistry] = None) -> None:
        """
        Initialize the parser.

        Args:
            registry: Default port table. Defaults to the process-wide
                registry.
        """
        self.registry = default_registry if registry is None else registry

    def parse(self, text: str) -> URI:
        """
        Parse ``text`` into its components.

        Never fails: malformed input produces a URI with whatever
        components could be recognized.

        Example::

            >>> uri = URIParser().parse("http://elixir-lang.org/")
            >>> uri.host, uri.port, uri.path
            ('elixir-lang.org', 80, '/')
        """
        # The pattern matches every string, possibly with all groups empty.
        match = cast("re.Match[str]", URI_PATTERN.match(text))

        scheme = normalize_scheme(_nillify(match.group("scheme")))
        path = match.group("path")
        query = _nillify(match.group("query"))
        fragment = _nillify(match.group("fragment"))

        userinfo: Optional[str] = None
        host: Optional[str] = None
        port: Optional[int] = None
        authority: Optional[str] = None
        if match.group("marker") is not None:
            userinfo, host, port = split_authority(match.group("authority"))
            authority = join_authority(userinfo, host, port)

        if port is None and scheme is not None:
            port = self.registry.lookup(scheme)

        return URI(
            scheme=scheme,
            userinfo=userinfo,
            host=host,
            port=port,
            path=path,
            query=query,
            fragment=fragment,
            authority=authority,
        )


def parse(text: str) -> URI:
    """Parse ``text`` using the process-wide default port registry."""
    return URIParser().parse(text)
