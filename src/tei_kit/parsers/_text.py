import re

_WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def clean(text: str | None) -> str | None:
    """Collapse whitespace; empty results become ``None``."""
    if text is None:
        return None
    return collapse_whitespace(text) or None
