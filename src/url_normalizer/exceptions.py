"""
Exceptions raised by the URL normalizer.

Only input that cannot be read as a URI reference at all is an error.
Malformed percent-encoding, unknown schemes and host-less URIs are handled
locally and never surface here.
"""


class URLNormalizerError(Exception):
    """Base exception for the URL normalizer."""

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class InvalidUriError(URLNormalizerError, ValueError):
    """Raised when input cannot be parsed as a URI (or URL)."""

    def __init__(self, uri: object, reason: str = "Invalid URI"):
        self.uri = uri
        self.reason = reason
        super().__init__(f"Invalid URI {uri!r}: {reason}")
