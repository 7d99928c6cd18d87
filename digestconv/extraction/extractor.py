import re

from digestconv.extraction.exceptions import MissingDigestHeaderError, MissingStatusLineError
from digestconv.extraction.models import BASE64, HEX, ExtractionResult
from digestconv.logging.logger import Log
from digestconv.reader.bounded_reader import DEFAULT_MAX_BUFFER

_LINE_SPLIT = re.compile(r"\r?\n")
_CONTENT_MD5 = re.compile(r"^content-md5:", re.IGNORECASE)
_STATUS_LINE = re.compile(r"^HTTP/1")
_HEX_DIGEST = re.compile(r"[a-zA-Z0-9]{32}")


def infer_encoding(extraction: ExtractionResult) -> str:
    """Pick the encoding of an extracted digest string.

    Header values are always base64. A bare string of exactly 32
    alphanumerics is taken as hex, anything else as base64. A base64 string
    that happens to be 32 alphanumerics (an unpadded 24-byte value) is
    therefore read as hex.
    """
    if extraction.forced_base64:
        return BASE64
    if _HEX_DIGEST.fullmatch(extraction.digest_string):
        return HEX
    return BASE64


class DigestExtractor:
    """Locates the digest in a bare string or an HTTP response."""

    def __init__(self, max_buffer: int = DEFAULT_MAX_BUFFER) -> None:
        self._max_buffer = max_buffer

    def extract(self, text: str, truncated: bool = False) -> ExtractionResult:
        """Extract the digest substring from decoded input text.

        Args:
            text: Decoded input, either a single line or an HTTP response.
            truncated: Whether the input was cut at the byte cap. Only used
                to explain a missing header.

        Raises:
            MissingStatusLineError: multi-line input not starting with HTTP/1.
            MissingDigestHeaderError: no Content-MD5 line in the header section.
        """
        lines = _LINE_SPLIT.split(text.strip())
        if len(lines) == 1:
            return self._extract_single_line(lines[0])
        return self._extract_from_response(lines, truncated)

    def _extract_single_line(self, line: str) -> ExtractionResult:
        if _CONTENT_MD5.match(line):
            Log.debug("Single-line input is a Content-MD5 header")
            return ExtractionResult(digest_string=_header_value(line), forced_base64=True)
        Log.debug("Single-line input is a bare digest")
        return ExtractionResult(digest_string=line.strip(), forced_base64=False)

    def _extract_from_response(self, lines: list[str], truncated: bool) -> ExtractionResult:
        if not _STATUS_LINE.match(lines[0]):
            raise MissingStatusLineError(
                f"multi-line input must be an HTTP response starting with 'HTTP/1', "
                f"got first line: {lines[0]!r}"
            )
        for line in lines[1:]:
            if not line.strip():
                break
            if _CONTENT_MD5.match(line):
                Log.debug("Found Content-MD5 header in HTTP response")
                return ExtractionResult(digest_string=_header_value(line), forced_base64=True)

        message = "no Content-MD5 header found in HTTP response headers"
        if truncated:
            message += (
                f"; input was truncated to {self._max_buffer} bytes, "
                "so the header may have been cut off"
            )
        raise MissingDigestHeaderError(message)


def _header_value(line: str) -> str:
    return line.split(":", 1)[1].strip()
