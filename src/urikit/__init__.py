"""src/urikit/__init__.py

urikit - URI parsing, serialization and percent-encoding for Python.

urikit splits URI strings into their RFC 3986 components, renders them
back to canonical text and provides the percent-encoding primitives
(plain and www-form) used for query strings. It has no dependencies
outside of Python's standard library.

Key Features:
    - Lenient parsing: any string parses, validation is up to the caller
    - Scheme lowercasing and default port resolution
    - Registry of default ports per scheme, extensible at runtime
    - Strict, byte oriented percent decoding
    - Eager and lazy query string decoding
    - Full type hints (PEP 561)

Example:
    Parsing and rendering::

        import urikit

        uri = urikit.parse("HTTP://user@example.com:80/search?q=uri#top")
        uri.scheme     # 'http'
        uri.port       # 80
        str(uri)       # 'http://user@example.com/search?q=uri#top'

    Query strings::

        from urikit import decode_query, encode_query

        encode_query({"q": "put it+й"})   # 'q=put+it%2B%D0%B9'
        decode_query("q=a+b&page=2")      # {'q': 'a b', 'page': '2'}

    Default ports::

        from urikit import default_port, register_default_port

        register_default_port("ws", 80)
        default_port("ws")                # 80
"""

import logging

from urikit.codec import (
    char_reserved,
    char_unescaped,
    char_unreserved,
    decode,
    decode_query,
    decode_to_bytes,
    decode_www_form,
    encode,
    encode_query,
    encode_www_form,
    query_decoder,
)
from urikit.exceptions import InvalidArgument, MalformedEncoding, UrikitError
from urikit.uri import (
    DEFAULT_PORTS,
    URI,
    SchemePortRegistry,
    Serializer,
    URIParser,
    default_port,
    default_registry,
    join_authority,
    normalize_scheme,
    parse,
    register_default_port,
    split_authority,
    to_string,
)
from urikit.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

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
    "char_reserved",
    "char_unreserved",
    "char_unescaped",
    "encode",
    "encode_www_form",
    "decode_to_bytes",
    "decode",
    "decode_www_form",
    "encode_query",
    "decode_query",
    "query_decoder",
    "UrikitError",
    "MalformedEncoding",
    "InvalidArgument",
    "__version__",
]
