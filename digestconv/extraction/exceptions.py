class DigestError(Exception):
    """Base exception for all digest extraction and decoding errors."""


class MissingStatusLineError(DigestError):
    """Raised when multi-line input does not start with an HTTP/1 status line."""


class MissingDigestHeaderError(DigestError):
    """Raised when an HTTP response has no Content-MD5 header."""


class MalformedDigestEncodingError(DigestError):
    """Raised when the digest string cannot be decoded in the chosen encoding."""
