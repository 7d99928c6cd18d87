from dataclasses import dataclass


@dataclass(frozen=True)
class RawInput:
    """Bytes captured from the input stream, bounded by capacity."""

    data: bytes
    capacity: int
    truncated: bool  # True iff input bytes were dropped at capacity

    @property
    def text(self) -> str:
        """UTF-8 decoding of the captured bytes.

        A capture cut inside a multi-byte sequence yields U+FFFD for the
        partial character instead of raising.
        """
        return self.data.decode("utf-8", errors="replace")
