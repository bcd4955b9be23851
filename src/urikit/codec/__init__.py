"""src/urikit/codec/__init__.py

Percent-encoding and query string codecs.
"""

from urikit.codec.percent import (
    char_reserved,
    char_unescaped,
    char_unreserved,
    decode,
    decode_to_bytes,
    decode_www_form,
    encode,
    encode_www_form,
)
from urikit.codec.query import decode_query, encode_query, query_decoder

__all__ = [
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
]
