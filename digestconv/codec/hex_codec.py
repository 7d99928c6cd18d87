from digestconv.codec.base import BaseDigestCodec
from digestconv.extraction.exceptions import MalformedDigestEncodingError
from digestconv.extraction.models import HEX


class HexCodec(BaseDigestCodec):
    """Lowercase hexadecimal, as printed by md5sum."""

    name = HEX

    def decode(self, text: str) -> bytes:
        try:
            return bytes.fromhex(text)
        except ValueError as exc:
            raise MalformedDigestEncodingError(
                f"cannot decode {text!r} as {self.name}: {exc}"
            ) from exc

    def encode(self, value: bytes) -> str:
        return value.hex()
