# src/tei_kit/formatting/formatter.py

import html
import logging
import re
from bisect import bisect_left
from time import monotonic

from tei_kit.observability import names
from tei_kit.observability.base import MetricsHook, NoOpMetricsHook

from .vocabulary import DEFAULT_VOCABULARY, DisplayVocabulary

logger = logging.getLogger(__name__)

_BLANK_LINE = re.compile(r"\n[ \t\r\f\v]*\n")

_ITALIC_OPEN = re.compile(r"""<hi\s+rend=["']italic["']\s*>""")
_BOLD_OPEN = re.compile(r"""<hi\s+rend=["']bold["']\s*>""")
_HI_CLOSE = re.compile(r"</hi\s*>")


def format_for_display(
    raw: str,
    *,
    vocabulary: DisplayVocabulary = DEFAULT_VOCABULARY,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    """Turn stored TEI markup (or plain prose) into display markup.

    Never raises. Markup it does not recognise passes through unchanged.
    """
    start = monotonic()
    if "<" in raw.strip():
        mode = "markup"
        result = _rewrite_tags(raw, vocabulary)
    else:
        mode = "plain"
        result = _wrap_paragraphs(raw, vocabulary)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.FORMAT_DURATION, elapsed_ms, {"mode": mode})
    metrics_hook.increment(names.FORMAT_REQUESTS_TOTAL, labels={"mode": mode})
    logger.debug("Formatted %d chars as %s", len(raw), mode)
    return result


def _wrap_paragraphs(raw: str, vocabulary: DisplayVocabulary) -> str:
    blocks = [block.strip() for block in _BLANK_LINE.split(raw.strip())]
    blocks = [block for block in blocks if block]
    if not blocks:
        return vocabulary.empty_placeholder

    return "\n".join(
        f"{vocabulary.paragraph_open}{html.escape(block, quote=False)}"
        f"{vocabulary.paragraph_close}"
        for block in blocks
    )


def _rewrite_tags(raw: str, v: DisplayVocabulary) -> str:
    # Closers are resolved first, against opener positions in the source.
    italic_starts = [m.start() for m in _ITALIC_OPEN.finditer(raw)]
    bold_starts = [m.start() for m in _BOLD_OPEN.finditer(raw)]
    text = _HI_CLOSE.sub(
        lambda m: _close_emphasis(m.start(), italic_starts, bold_starts, v), raw
    )
    text = _ITALIC_OPEN.sub(lambda _: v.italic_open, text)
    text = _BOLD_OPEN.sub(lambda _: v.bold_open, text)

    rules = (
        (r"<p>", v.paragraph_open),
        (r"<quote(?:\s[^>]*)?>", v.quote_open),
        (r"</quote\s*>", v.quote_close),
        (r"<lg(?:\s[^>]*)?>", v.verse_group_open),
        (r"</lg\s*>", v.verse_group_close),
        (r"<l(?:\s[^>]*)?>", v.verse_line_open),
        (r"</l\s*>", v.verse_line_close),
        (r"<pb[^>]*>", v.page_break),
        (r"<lb[^>]*>", v.line_break),
    )
    for pattern, replacement in rules:
        text = re.sub(pattern, lambda _, r=replacement: r, text)
    return text


def _close_emphasis(
    position: int,
    italic_starts: list[int],
    bold_starts: list[int],
    v: DisplayVocabulary,
) -> str:
    """Close whichever emphasis opened most recently before this tag.

    Positional, not a stack: overlapping or nested spans of different
    kinds get the wrong closer.
    """
    if _last_before(italic_starts, position) > _last_before(bold_starts, position):
        return v.italic_close
    return v.bold_close


def _last_before(starts: list[int], position: int) -> int:
    index = bisect_left(starts, position)
    return starts[index - 1] if index else -1
