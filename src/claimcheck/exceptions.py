"""Exceptions raised by ClaimCheck's I/O boundary."""


class ClaimCheckError(Exception):
    """Base class for ClaimCheck errors."""


class RetrievalError(ClaimCheckError):
    """The article provider was unreachable, refused the request, or sent a malformed payload."""
