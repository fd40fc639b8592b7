# src/tei_kit/toc/toc.py

from collections.abc import Sequence
from dataclasses import dataclass

from tei_kit.observability import names
from tei_kit.observability.base import MetricsHook, NoOpMetricsHook
from tei_kit.parsers.models import Chapter


@dataclass(frozen=True)
class TocEntry:
    id: str
    title: str
    level: int
    order: int


def table_of_contents(
    chapters: Sequence[Chapter],
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[TocEntry]:
    """Flatten a chapter tree in pre-order.

    ``level`` is the traversal depth (roots are 1), recomputed here rather
    than copied from ``Chapter.level``.
    """
    entries: list[TocEntry] = []
    pending = [(chapter, 1) for chapter in reversed(chapters)]
    while pending:
        chapter, depth = pending.pop()
        entries.append(
            TocEntry(
                id=chapter.id,
                title=chapter.title,
                level=depth,
                order=chapter.order,
            )
        )
        pending.extend((child, depth + 1) for child in reversed(chapter.children))

    metrics_hook.increment(names.TOC_ENTRIES_CREATED, len(entries))
    return entries
