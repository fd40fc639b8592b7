# src/tei_kit/parsers/tei_parser.py

import logging
from time import monotonic

from tei_kit.errors import MalformedDocument
from tei_kit.observability import names
from tei_kit.observability.base import MetricsHook, NoOpMetricsHook
from tei_kit.trees.base import DocumentTree, Exclusion, TreeBackend
from tei_kit.trees.factory import default_tree_backend

from ._text import collapse_whitespace
from .base import DocumentParser
from .chapters import build_chapters, find_body
from .metadata import HEADER_TAG, extract_metadata
from .models import Chapter, ParsedDocument

logger = logging.getLogger(__name__)

UNTITLED = "Untitled Document"

# Footnotes and break milestones carry no running prose.
_NON_PROSE = (
    Exclusion("note", "place", "foot"),
    Exclusion("pb"),
    Exclusion("lb"),
)


class TeiParser(DocumentParser):
    """
    TEI document parser.
    - Metadata and chapters are read independently from one tree
    - Backend is fixed at construction and shared read-only
    - Returns immutable results; raises MalformedDocument on bad input
    """

    def __init__(
        self,
        backend: TreeBackend | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._backend = backend if backend is not None else default_tree_backend()
        self.metrics_hook = metrics_hook

    @property
    def backend(self) -> TreeBackend:
        return self._backend

    def parse(self, raw: str | bytes) -> ParsedDocument:
        start = monotonic()
        tree = self._load(raw)

        metadata = extract_metadata(tree)
        chapters = build_chapters(tree)
        body = find_body(tree)
        plain_content = (
            collapse_whitespace(tree.text(body, _NON_PROSE)) if body is not None else ""
        )

        document = ParsedDocument(
            title=metadata.title or UNTITLED,
            author=metadata.author,
            plain_content=plain_content,
            chapters=chapters,
            metadata=metadata,
        )

        chapter_count = sum(1 for c in chapters for _ in c.walk())
        elapsed_ms = 1000 * (monotonic() - start)
        labels = {"backend": self._backend.name}
        self.metrics_hook.record_latency(names.TEI_PARSE_DURATION, elapsed_ms, labels)
        self.metrics_hook.increment(names.TEI_DOCUMENTS_PARSED_TOTAL, labels=labels)
        self.metrics_hook.increment(names.TEI_CHAPTERS_EXTRACTED, chapter_count)
        self.metrics_hook.record_gauge(
            names.TEI_CHAPTER_TREE_DEPTH, _tree_depth(chapters)
        )
        logger.info(
            "Parsed document %r: %d root chapters, %d chapters total, %d keywords",
            document.title,
            len(chapters),
            chapter_count,
            len(metadata.keywords),
        )
        return document

    def extract_plain_text(self, raw: str | bytes) -> str:
        """Whole-document prose without header, footnotes and break milestones."""
        tree = self._load(raw)
        return collapse_whitespace(
            tree.text(tree.root, (Exclusion(HEADER_TAG),) + _NON_PROSE)
        )

    def _load(self, raw: str | bytes) -> DocumentTree:
        try:
            return self._backend.load(raw)
        except MalformedDocument as exc:
            self.metrics_hook.increment(
                names.TEI_PARSE_ERRORS_TOTAL, labels={"backend": self._backend.name}
            )
            logger.error("Rejected malformed document: %s", exc)
            raise


def _tree_depth(chapters: tuple[Chapter, ...]) -> int:
    return max((c.level for root in chapters for c in root.walk()), default=0)


def parse(
    raw: str | bytes,
    *,
    backend: TreeBackend | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParsedDocument:
    return TeiParser(backend=backend, metrics_hook=metrics_hook).parse(raw)


def extract_plain_text(
    raw: str | bytes,
    *,
    backend: TreeBackend | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    return TeiParser(backend=backend, metrics_hook=metrics_hook).extract_plain_text(
        raw
    )
