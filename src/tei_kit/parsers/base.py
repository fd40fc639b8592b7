# src/tei_kit/parsers/base.py

from abc import ABC, abstractmethod

from .models import ParsedDocument


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, raw: str | bytes) -> ParsedDocument:
        """
        Parse raw document text into a structured, immutable representation.

        Requirements:
        - Deterministic output for same input
        - Fresh result per call, nothing shared between calls
        - Raises MalformedDocument when no usable root element exists
        """
        raise NotImplementedError
