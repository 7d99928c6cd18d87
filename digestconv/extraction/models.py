from dataclasses import dataclass

HEX = "hex"
BASE64 = "base64"


@dataclass(frozen=True)
class ExtractionResult:
    """Digest substring located in the input."""

    digest_string: str
    forced_base64: bool  # taken from a Content-MD5 header line


@dataclass(frozen=True)
class Digest:
    """Decoded digest value and its two textual renderings."""

    value: bytes
    hex_text: str
    base64_text: str


@dataclass(frozen=True)
class ConversionResult:
    """Final output of the conversion pipeline."""

    input_string: str
    encoding: str  # HEX or BASE64
    digest: Digest
