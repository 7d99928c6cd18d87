from abc import ABC, abstractmethod


class BaseDigestCodec(ABC):
    """Contract for all digest text encodings."""

    name: str

    @abstractmethod
    def decode(self, text: str) -> bytes:
        """Decode a digest string into its binary value.

        Raises:
            MalformedDigestEncodingError: if text is not valid in this encoding.
        """

    @abstractmethod
    def encode(self, value: bytes) -> str:
        """Render a binary digest value as text."""
