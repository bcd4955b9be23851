"""src/urikit/uri/__init__.py

URI parsing, serialization and default ports.
"""

from urikit.uri.authority import join_authority, split_authority
from urikit.uri.model import URI
from urikit.uri.parser import URIParser, normalize_scheme, parse
from urikit.uri.registry import (
    DEFAULT_PORTS,
    SchemePortRegistry,
    default_port,
    default_registry,
    register_default_port,
)
from urikit.uri.serializer import Serializer, to_string

__all__ = [
    "URI",
    "URIParser",
    "Serializer",
    "SchemePortRegistry",
    "DEFAULT_PORTS",
    "default_registry",
    "default_port",
    "register_default_port",
    "normalize_scheme",
    "parse",
    "to_string",
    "split_authority",
    "join_authority",
]
