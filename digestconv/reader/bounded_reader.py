from collections.abc import Callable
from typing import BinaryIO

from digestconv.logging.logger import Log
from digestconv.reader.models import RawInput

DEFAULT_MAX_BUFFER = 16384
DEFAULT_CHUNK_SIZE = 4096


class BoundedReader:
    """Accumulates stream chunks into a fixed-size buffer.

    The reader completes exactly once: when a chunk carries more bytes than
    the buffer can still hold (truncated), or when the stream ends
    (not truncated). A buffer filled exactly stays open until the next
    event decides which of the two it is. Chunks fed after completion are
    ignored.

    Because of that, a producer that writes exactly max_buffer bytes and
    keeps its end open blocks read_stream on the read that follows the
    fill.
    """

    def __init__(
        self,
        max_buffer: int = DEFAULT_MAX_BUFFER,
        on_complete: Callable[[RawInput], None] | None = None,
    ) -> None:
        if max_buffer <= 0:
            raise ValueError(f"max_buffer must be positive, got {max_buffer}")
        self._max_buffer = max_buffer
        self._buffer = bytearray(max_buffer)
        self._filled = 0
        self._on_complete = on_complete
        self._result: RawInput | None = None

    @property
    def done(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> RawInput | None:
        return self._result

    @property
    def filled(self) -> int:
        return self._filled

    def feed(self, chunk: bytes) -> None:
        """Copy as much of chunk as fits; complete as truncated on overflow."""
        if self.done or not chunk:
            return
        count = max(0, min(self._max_buffer - self._filled, len(chunk)))
        self._buffer[self._filled : self._filled + count] = chunk[:count]
        self._filled += count
        if count < len(chunk):
            self._complete(truncated=True)

    def end(self) -> None:
        """Signal end of stream. No-op if the reader already completed."""
        if self.done:
            return
        self._complete(truncated=False)

    def _complete(self, truncated: bool) -> None:
        self._result = RawInput(
            data=bytes(self._buffer[: self._filled]),
            capacity=self._max_buffer,
            truncated=truncated,
        )
        Log.debug(
            f"Captured {self._filled} of {self._max_buffer} bytes "
            f"(truncated={truncated})"
        )
        if self._on_complete is not None:
            self._on_complete(self._result)


def read_stream(
    stream: BinaryIO,
    max_buffer: int = DEFAULT_MAX_BUFFER,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> RawInput:
    """Drain a binary stream through a BoundedReader.

    Reading stops as soon as the reader completes, so a producer that keeps
    writing past the cap is never consumed further. I/O errors propagate.
    """
    reader = BoundedReader(max_buffer)
    while True:
        chunk = stream.read(chunk_size)
        if chunk:
            reader.feed(chunk)
        else:
            reader.end()
        if reader.result is not None:
            return reader.result
