from digestconv.codec.factory import CodecFactory
from digestconv.converter.pipeline import ConversionContext, PipelineStep
from digestconv.extraction.extractor import DigestExtractor, infer_encoding
from digestconv.extraction.models import BASE64, HEX, Digest
from digestconv.logging.logger import Log
from digestconv.reader.bounded_reader import read_stream


class ReadInputStep(PipelineStep):
    def __init__(self, max_buffer: int, chunk_size: int) -> None:
        self._max_buffer = max_buffer
        self._chunk_size = chunk_size

    def run(self, context: ConversionContext) -> ConversionContext:
        context.raw_input = read_stream(
            context.stream,
            max_buffer=self._max_buffer,
            chunk_size=self._chunk_size,
        )
        Log.debug(f"Read {len(context.raw_input.data)} bytes of input")
        return context


class ExtractDigestStep(PipelineStep):
    def __init__(self, extractor: DigestExtractor) -> None:
        self._extractor = extractor

    def run(self, context: ConversionContext) -> ConversionContext:
        if context.raw_input is None:
            raise ValueError("ConversionContext.raw_input must be set before extraction")
        context.extraction = self._extractor.extract(
            context.raw_input.text,
            truncated=context.raw_input.truncated,
        )
        context.encoding = infer_encoding(context.extraction)
        Log.debug(
            f"Extracted {context.extraction.digest_string!r} as {context.encoding} "
            f"(forced_base64={context.extraction.forced_base64})"
        )
        return context


class DecodeDigestStep(PipelineStep):
    def __init__(self, codec_factory: type[CodecFactory] = CodecFactory) -> None:
        self._codec_factory = codec_factory

    def run(self, context: ConversionContext) -> ConversionContext:
        if context.extraction is None:
            raise ValueError("ConversionContext.extraction must be set before decoding")
        codec = self._codec_factory.create(context.encoding)
        value = codec.decode(context.extraction.digest_string)
        context.digest = Digest(
            value=value,
            hex_text=self._codec_factory.create(HEX).encode(value),
            base64_text=self._codec_factory.create(BASE64).encode(value),
        )
        Log.debug(f"Decoded {len(value)}-byte digest")
        return context
