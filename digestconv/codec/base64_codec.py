import base64
import binascii

from digestconv.codec.base import BaseDigestCodec
from digestconv.extraction.exceptions import MalformedDigestEncodingError
from digestconv.extraction.models import BASE64


class Base64Codec(BaseDigestCodec):
    """Standard padded base64, as carried by the Content-MD5 header."""

    name = BASE64

    def decode(self, text: str) -> bytes:
        try:
            return base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise MalformedDigestEncodingError(
                f"cannot decode {text!r} as {self.name}: {exc}"
            ) from exc

    def encode(self, value: bytes) -> str:
        return base64.b64encode(value).decode("ascii")
