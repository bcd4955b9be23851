"""src/urikit/uri/authority.py

Authority splitting: ``[userinfo@]host[:port]``.
"""

import re
from typing import Optional, Tuple

__all__ = ["split_authority", "join_authority"]

_PORT_DIGITS = re.compile(r"[0-9]*")


def _port(text: str) -> Optional[int]:
    # Only the leading run of digits counts; anything after is ignored.
    digits = _PORT_DIGITS.match(text).group()  # type: ignore[union-attr]
    if not digits:
        return None
    return int(digits)


def split_authority(authority: str) -> Tuple[Optional[str], str, Optional[int]]:
    """
    Split an authority into its userinfo, host and port parts.

    The userinfo is whatever precedes the rightmost ``@`` and is None when
    there is no ``@``. A host written as an IPv6 literal (``[::1]``) is
    returned without its brackets. The host is ``""`` when the authority
    names none.

    Args:
        authority: The text between ``//`` and the path.

    Returns:
        ``(userinfo, host, port)``.

    Example::

        >>> split_authority("[::1]:8080")
        (None, '::1', 8080)
    """
    userinfo: Optional[str]
    userinfo, sep, remainder = authority.rpartition("@")
    if not sep:
        userinfo = None

    if remainder.startswith("["):
        close = remainder.find("]")
        if close != -1:
            rest = remainder[close + 1 :]
            port = _port(rest[1:]) if rest.startswith(":") else None
            return userinfo, remainder[1:close], port

    host, _, rest = remainder.partition(":")
    return userinfo, host, _port(rest)


def join_authority(
    userinfo: Optional[str], host: Optional[str], port: Optional[int]
) -> str:
    """
    Render ``[userinfo@][host][:port]``.

    Parts are written as given; an IPv6 host is not bracketed again.
    """
    authority = ""
    if userinfo is not None:
        authority += userinfo + "@"
    if host is not None:
        authority += host
    if port is not None:
        authority += ":" + str(port)
    return authority
