# src/tei_kit/observability/names.py

"""Standard metric names for tei-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parsing Metrics
# ============================================================================

# Duration
TEI_PARSE_DURATION = "tei_parse_duration"

# Counters
TEI_DOCUMENTS_PARSED_TOTAL = "tei_documents_parsed_total"
TEI_PARSE_ERRORS_TOTAL = "tei_parse_errors_total"
TEI_CHAPTERS_EXTRACTED = "tei_chapters_extracted"

# Gauges
TEI_CHAPTER_TREE_DEPTH = "tei_chapter_tree_depth"


# ============================================================================
# Display Formatting Metrics
# ============================================================================

# Duration
FORMAT_DURATION = "format_duration"

# Counters
FORMAT_REQUESTS_TOTAL = "format_requests_total"


# ============================================================================
# Table of Contents Metrics
# ============================================================================

# Counters
TOC_ENTRIES_CREATED = "toc_entries_created"
