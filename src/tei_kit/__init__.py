# Errors
from .errors import MalformedDocument

# Formatting
from .formatting import DisplayVocabulary, format_for_display, load_vocabulary

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsing
from .parsers import (
    Chapter,
    Metadata,
    ParsedDocument,
    TeiParser,
    extract_plain_text,
    parse,
)

# Table of contents
from .toc import TocEntry, table_of_contents

# Tree access
from .trees import TreeConfig, create_tree_backend, default_tree_backend

__all__ = [
    # Errors
    "MalformedDocument",
    # Formatting
    "DisplayVocabulary",
    "format_for_display",
    "load_vocabulary",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsing
    "Chapter",
    "Metadata",
    "ParsedDocument",
    "TeiParser",
    "extract_plain_text",
    "parse",
    # Table of contents
    "TocEntry",
    "table_of_contents",
    # Tree access
    "TreeConfig",
    "create_tree_backend",
    "default_tree_backend",
]
