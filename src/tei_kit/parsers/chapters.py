# src/tei_kit/parsers/chapters.py

import logging

from tei_kit.trees.base import DocumentTree, Exclusion, Node

from ._text import collapse_whitespace
from .models import Chapter

logger = logging.getLogger(__name__)

DIVISION_TAG = "div"
HEADING_TAG = "head"
DEFAULT_DIVISION_TYPE = "chapter"

_NESTED_DIVISIONS = (Exclusion(DIVISION_TAG),)


def find_body(tree: DocumentTree) -> Node | None:
    text = tree.find(tree.root, "text")
    if text is None:
        return None
    return tree.find(text, "body")


def build_chapters(tree: DocumentTree) -> tuple[Chapter, ...]:
    """Every direct division child of the body becomes a level-1 chapter."""
    body = find_body(tree)
    if body is None:
        logger.debug("Document has no text/body, no chapters extracted")
        return ()

    return tuple(
        build_chapter(tree, division, level=1, order=order)
        for order, division in enumerate(tree.children(body, DIVISION_TAG), start=1)
    )


def build_chapter(
    tree: DocumentTree, division: Node, *, level: int, order: int
) -> Chapter:
    """Build one chapter and, recursively, its sub-chapters.

    ``level`` and ``order`` are supplied by the caller; nothing is inferred
    from iteration state. Children are built before the parent record.
    """
    chapter_id = (
        tree.attribute(division, "xml:id")
        or tree.attribute(division, "id")
        or f"chapter-{order}"
    )
    division_type = (tree.attribute(division, "type") or "").strip()
    division_type = division_type or DEFAULT_DIVISION_TYPE

    # Recursion depth is bounded by the backends' nesting limit.
    children: list[Chapter] = []
    for child_order, child in enumerate(tree.children(division, DIVISION_TAG), 1):
        children.append(
            build_chapter(tree, child, level=level + 1, order=child_order)
        )

    return Chapter(
        id=chapter_id,
        title=_chapter_title(tree, division, division_type, order),
        content=collapse_whitespace(tree.text(division, _NESTED_DIVISIONS)),
        level=level,
        order=order,
        children=tuple(children),
        division_type=division_type,
    )


def _chapter_title(
    tree: DocumentTree, division: Node, division_type: str, order: int
) -> str:
    headings = tree.children(division, HEADING_TAG)
    if headings:
        title = collapse_whitespace(tree.text(headings[0]))
        if title:
            return title
    return f"{division_type[:1].upper()}{division_type[1:]} {order}"
