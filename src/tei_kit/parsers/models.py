# src/tei_kit/parsers/models.py

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Metadata:
    """Header fields. Anything the header lacks stays ``None``."""

    title: str | None = None
    author: str | None = None
    editor: str | None = None
    publisher: str | None = None
    pub_date: str | None = None
    language: str | None = None
    description: str | None = None
    keywords: tuple[str, ...] = ()
    genre: str | None = None


@dataclass(frozen=True)
class Chapter:
    id: str
    title: str
    content: str
    level: int
    order: int
    children: tuple[Chapter, ...] = ()
    division_type: str = "chapter"

    def walk(self) -> Iterator[Chapter]:
        """Yield this chapter, then every descendant in pre-order."""
        pending = [self]
        while pending:
            chapter = pending.pop()
            yield chapter
            pending.extend(reversed(chapter.children))


@dataclass(frozen=True)
class ParsedDocument:
    title: str
    author: str | None
    plain_content: str
    chapters: tuple[Chapter, ...] = ()
    metadata: Metadata = field(default_factory=Metadata)
