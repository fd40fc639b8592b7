# src/tei_kit/formatting/vocabulary.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class DisplayVocabulary(BaseModel):
    """Target markup for each recognised TEI construct."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    paragraph_open: str = '<p class="mb-4">'
    paragraph_close: str = "</p>"
    italic_open: str = "<em>"
    italic_close: str = "</em>"
    bold_open: str = "<strong>"
    bold_close: str = "</strong>"
    quote_open: str = '<blockquote class="border-l-4 border-gray-300 pl-4 italic">'
    quote_close: str = "</blockquote>"
    verse_group_open: str = '<div class="poem my-4">'
    verse_group_close: str = "</div>"
    verse_line_open: str = '<div class="verse">'
    verse_line_close: str = "</div>"
    page_break: str = '<div class="page-break border-t border-gray-200 my-6 pt-4"></div>'
    line_break: str = "<br>"
    empty_placeholder: str = '<p class="text-gray-500 italic">No content available.</p>'

    @classmethod
    def from_yaml(cls, file_path: str | Path) -> "DisplayVocabulary":
        with open(file_path) as f:
            data = yaml.safe_load(f) or {}
        vocabulary = cls(**data)
        logger.debug("Loaded display vocabulary from %s", file_path)
        return vocabulary


DEFAULT_VOCABULARY = DisplayVocabulary()


def load_vocabulary(file_path: str | Path) -> DisplayVocabulary:
    """Load a vocabulary; keys left out of the file keep their defaults."""
    return DisplayVocabulary.from_yaml(file_path)
