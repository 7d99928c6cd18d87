from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO

from digestconv.extraction.models import Digest, ExtractionResult
from digestconv.reader.models import RawInput


@dataclass(slots=True)
class ConversionContext:
    stream: BinaryIO
    raw_input: RawInput | None = None
    extraction: ExtractionResult | None = None
    encoding: str = ""
    digest: Digest | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: ConversionContext) -> ConversionContext:
        raise NotImplementedError
