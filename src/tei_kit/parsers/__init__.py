from .base import DocumentParser
from .chapters import build_chapter, build_chapters
from .metadata import extract_keywords, extract_metadata
from .models import Chapter, Metadata, ParsedDocument
from .tei_parser import TeiParser, extract_plain_text, parse

__all__ = [
    "Chapter",
    "DocumentParser",
    "Metadata",
    "ParsedDocument",
    "TeiParser",
    "build_chapter",
    "build_chapters",
    "extract_keywords",
    "extract_metadata",
    "extract_plain_text",
    "parse",
]
