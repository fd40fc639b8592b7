from .formatter import format_for_display
from .vocabulary import DEFAULT_VOCABULARY, DisplayVocabulary, load_vocabulary

__all__ = [
    "DEFAULT_VOCABULARY",
    "DisplayVocabulary",
    "format_for_display",
    "load_vocabulary",
]
