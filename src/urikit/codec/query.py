"""src/urikit/codec/query.py

Query string serialization on top of www-form encoding.
"""

from typing import (
    Any,
    Iterable,
    Iterator,
    Mapping,
    MutableMapping,
    Optional,
    Tuple,
    Union,
)

from urikit.codec.percent import decode_www_form, encode_www_form
from urikit.exceptions import InvalidArgument

__all__ = ["encode_query", "decode_query", "query_decoder"]

QueryPairs = Union[Mapping[Any, Any], Iterable[Tuple[Any, Any]]]


def _stringify(value: Any, role: str) -> Union[str, bytes]:
    if isinstance(value, (list, tuple)):
        raise InvalidArgument(
            f"encode_query {role}s cannot be lists, got: {value!r}"
        )
    if isinstance(value, (str, bytes)):
        return value
    return str(value)


def _pair(key: Any, value: Any) -> str:
    return (
        encode_www_form(_stringify(key, "key"))
        + "="
        + encode_www_form(_stringify(value, "value"))
    )


def encode_query(pairs: QueryPairs) -> str:
    """
    Encode key/value pairs into a query string.

    Produces ``"key1=value1&key2=value2..."`` with keys and values
    www-form encoded, in the iteration order of ``pairs``.

    Args:
        pairs: A mapping or an iterable of two-item pairs. Keys and values
            may be anything ``str()`` accepts, except lists and tuples.

    Raises:
        InvalidArgument: A key or value is a list or tuple.

    Example::

        >>> encode_query({"foo": 1, "bar": 2})
        'foo=1&bar=2'
    """
    if isinstance(pairs, Mapping):
        pairs = pairs.items()
    return "&".join(_pair(key, value) for key, value in pairs)


def query_decoder(query: str) -> Iterator[Tuple[str, Optional[str]]]:
    """
    Iterate over the decoded pairs of ``query`` one at a time.

    Each ``&`` separated segment is split on its first ``=``; a segment
    without ``=`` produces a ``None`` value. Calling again on the same
    string starts over.

    Example::

        >>> list(query_decoder("foo=1&bar=2"))
        [('foo', '1'), ('bar', '2')]
    """
    rest = query
    while rest:
        segment, _, rest = rest.partition("&")
        key, sep, value = segment.partition("=")
        if sep:
            yield decode_www_form(key), decode_www_form(value)
        else:
            yield decode_www_form(key), None


def decode_query(
    query: str, into: Optional[MutableMapping[str, Optional[str]]] = None
) -> MutableMapping[str, Optional[str]]:
    """
    Decode a query string into a mapping.

    When a key repeats, the last occurrence wins.

    Args:
        query: The raw query string, without the leading ``?``.
        into: Mapping to accumulate into; a new ``dict`` if omitted.

    Returns:
        ``into`` (or the new dict) updated with the decoded pairs.
    """
    result: MutableMapping[str, Optional[str]]
    result = {} if into is None else into
    for key, value in query_decoder(query):
        result[key] = value
    return result
