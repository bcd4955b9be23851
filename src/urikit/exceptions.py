"""src/urikit/exceptions.py

urikit Exceptions hierarchy.
"""

from typing import Optional, Union


class UrikitError(Exception):
    """Base exception for all urikit errors."""


class MalformedEncoding(UrikitError, ValueError):
    """
    A percent escape is not followed by two hexadecimal digits.

    Raised by every percent-decoding entry point, including when the
    input is truncated right after a ``%``.
    """

    def __init__(
        self,
        data: Union[str, bytes],
        position: Optional[int] = None,
        message: Optional[str] = None,
    ):
        self.data = data
        self.position = position
        if message is None:
            message = f"malformed URI encoding {data!r}"
            if position is not None:
                message += f" at offset {position}"
        super().__init__(message)


class InvalidArgument(UrikitError, ValueError):
    """
    A value outside of what an operation accepts.

    Used for list-valued query pairs and non-positive default ports.
    """
