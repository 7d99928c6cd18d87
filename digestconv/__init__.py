from digestconv.converter.converter import Converter, build_converter
from digestconv.extraction.exceptions import (
    DigestError,
    MalformedDigestEncodingError,
    MissingDigestHeaderError,
    MissingStatusLineError,
)
from digestconv.extraction.extractor import DigestExtractor, infer_encoding
from digestconv.reader.bounded_reader import BoundedReader, read_stream

__all__ = [
    "BoundedReader",
    "Converter",
    "DigestError",
    "DigestExtractor",
    "MalformedDigestEncodingError",
    "MissingDigestHeaderError",
    "MissingStatusLineError",
    "build_converter",
    "infer_encoding",
    "read_stream",
]
