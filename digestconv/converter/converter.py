from typing import BinaryIO

from digestconv.config.settings import Settings
from digestconv.converter.pipeline import ConversionContext, PipelineStep
from digestconv.converter.steps import DecodeDigestStep, ExtractDigestStep, ReadInputStep
from digestconv.extraction.extractor import DigestExtractor
from digestconv.extraction.models import ConversionResult
from digestconv.logging.logger import Log


class Converter:
    """Runs the conversion pipeline: read -> extract -> decode."""

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def convert(self, stream: BinaryIO) -> ConversionResult:
        """Convert the digest found on stream into both encodings.

        Step errors are re-raised unchanged.
        """
        context = ConversionContext(stream=stream)
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                Log.debug(f"{type(step).__name__} failed: {exc}")
                raise

        if context.extraction is None or context.digest is None:
            raise ValueError("Pipeline finished without producing a digest")
        return ConversionResult(
            input_string=context.extraction.digest_string,
            encoding=context.encoding,
            digest=context.digest,
        )


def build_converter(settings: Settings) -> Converter:
    """Build a Converter with the default steps."""
    return Converter(
        steps=[
            ReadInputStep(
                max_buffer=settings.max_buffer_bytes,
                chunk_size=settings.read_chunk_size,
            ),
            ExtractDigestStep(DigestExtractor(max_buffer=settings.max_buffer_bytes)),
            DecodeDigestStep(),
        ]
    )
