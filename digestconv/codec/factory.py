from digestconv.codec.base import BaseDigestCodec
from digestconv.codec.base64_codec import Base64Codec
from digestconv.codec.hex_codec import HexCodec


class CodecFactory:
    """Creates the codec for an encoding name."""

    CODECS: dict[str, type[BaseDigestCodec]] = {
        HexCodec.name: HexCodec,
        Base64Codec.name: Base64Codec,
    }

    @classmethod
    def create(cls, encoding: str) -> BaseDigestCodec:
        name = encoding.lower()
        codec_cls = cls.CODECS.get(name)
        if codec_cls is None:
            raise ValueError(
                f"Unknown encoding '{encoding}'. Choose from: {list(cls.CODECS)}"
            )
        return codec_cls()
