"""src/urikit/codec/percent.py

Percent-encoding and decoding (RFC 3986, section 2.1).

Encoding works on octets: a ``str`` argument is UTF-8 encoded before
each byte is checked against a predicate. Decoding is strict: every
``%`` must be followed by two hexadecimal digits, otherwise
:class:`~urikit.exceptions.MalformedEncoding` is raised.
"""

from typing import Callable, Union

from urikit.exceptions import MalformedEncoding

__all__ = [
    "char_reserved",
    "char_unreserved",
    "char_unescaped",
    "encode",
    "encode_www_form",
    "decode_to_bytes",
    "decode",
    "decode_www_form",
]

Predicate = Callable[[int], bool]

RESERVED = frozenset(b":/?#[]@!$&'()*+,;=")
UNRESERVED = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789~_-."
)

_PERCENT = ord("%")
_SPACE = ord(" ")

# Byte value of every accepted hex digit, both cases.
_HEX_VALUES = {
    **{ord(c): int(c, 16) for c in "0123456789abcdef"},
    **{ord(c): int(c, 16) for c in "ABCDEF"},
}

_pct_encode = "%{:02X}".format


def _octet(c: Union[int, str]) -> int:
    if isinstance(c, str):
        return ord(c)
    return c


def _as_bytes(data: Union[str, bytes]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", "surrogateescape")
    return bytes(data)


def char_reserved(c: Union[int, str]) -> bool:
    """Check if ``c`` is a reserved character (RFC 3986, section 2.2)."""
    return _octet(c) in RESERVED


def char_unreserved(c: Union[int, str]) -> bool:
    """Check if ``c`` is an unreserved character (RFC 3986, section 2.3)."""
    return _octet(c) in UNRESERVED


def char_unescaped(c: Union[int, str]) -> bool:
    """
    Check if ``c`` may be left unescaped in a URI.

    This is the default predicate of :func:`encode`: both reserved and
    unreserved characters are kept as is.
    """
    octet = _octet(c)
    return octet in RESERVED or octet in UNRESERVED


def encode(data: Union[str, bytes], predicate: Predicate = char_unescaped) -> str:
    """
    Percent-escape ``data``.

    Args:
        data: Text (UTF-8 encoded first, surrogate escapes from the
            decoders map back to their octets) or raw bytes.
        predicate: Called with each byte value; a true result keeps the
            byte as is, a false one escapes it as ``%XX``.

    Returns:
        The escaped text, hex digits in uppercase. Kept octets that are
        not valid UTF-8 appear as surrogate escapes.

    Example::

        >>> encode("ftp://s-ite.tld/?value=put it+й")
        'ftp://s-ite.tld/?value=put%20it+%D0%B9'
    """
    out = bytearray()
    for octet in _as_bytes(data):
        if predicate(octet):
            out.append(octet)
        else:
            out += b"%%%02X" % octet
    return out.decode("utf-8", "surrogateescape")


def encode_www_form(data: Union[str, bytes]) -> str:
    """
    Encode ``data`` as ``application/x-www-form-urlencoded``.

    Only unreserved characters are kept; a space becomes ``+``.

    Example::

        >>> encode_www_form("put: it+й")
        'put%3A+it%2B%D0%B9'
    """
    return "".join(_www_form_octet(octet) for octet in _as_bytes(data))


def _www_form_octet(octet: int) -> str:
    if octet in UNRESERVED:
        return chr(octet)
    if octet == _SPACE:
        return "+"
    return _pct_encode(octet)


def decode_to_bytes(data: Union[str, bytes]) -> bytes:
    """
    Percent-unescape ``data`` into raw octets.

    Multi-byte sequences such as ``%D0%B9`` come back as the original
    bytes; no character set validation is performed.

    Raises:
        MalformedEncoding: A ``%`` is not followed by two hex digits.
    """
    out = bytearray()
    _unpercent(_as_bytes(data), out, data, 0)
    return bytes(out)


def _unpercent(
    raw: bytes, out: bytearray, data: Union[str, bytes], offset: int
) -> None:
    """
    Append the unescaped octets of ``raw`` to ``out``.

    ``data`` and ``offset`` locate ``raw`` inside the caller's input for
    error reporting.
    """
    end = len(raw)
    pos = 0
    while pos < end:
        newpos = raw.find(_PERCENT, pos)
        if newpos == -1:
            out += raw[pos:]
            return
        out += raw[pos:newpos]

        if newpos + 2 >= end:
            # Fewer than two characters left after the '%'.
            raise MalformedEncoding(data, offset + newpos)
        high = _HEX_VALUES.get(raw[newpos + 1])
        low = _HEX_VALUES.get(raw[newpos + 2])
        if high is None or low is None:
            raise MalformedEncoding(data, offset + newpos)
        out.append(high << 4 | low)
        pos = newpos + 3


def decode(data: Union[str, bytes]) -> str:
    """
    Percent-unescape ``data`` into text.

    Decoded octets that are not valid UTF-8 are kept as surrogate
    escapes, so ``decoded.encode("utf-8", "surrogateescape")`` gives back
    the exact bytes.

    Example::

        >>> decode("http%3A%2F%2Felixir-lang.org")
        'http://elixir-lang.org'
    """
    return decode_to_bytes(data).decode("utf-8", "surrogateescape")


def decode_www_form(data: Union[str, bytes]) -> str:
    """
    Decode an ``application/x-www-form-urlencoded`` string.

    The input is split on ``+`` first and each piece is unescaped on its
    own, so ``%2B`` stays a literal plus while every ``+`` is a space.

    Example::

        >>> decode_www_form("%3Call+in%2F")
        '<all in/'
    """
    out = bytearray()
    offset = 0
    for index, piece in enumerate(_as_bytes(data).split(b"+")):
        if index:
            out.append(_SPACE)
        _unpercent(piece, out, data, offset)
        offset += len(piece) + 1
    return out.decode("utf-8", "surrogateescape")
