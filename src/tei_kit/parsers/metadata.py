# src/tei_kit/parsers/metadata.py

import logging

from tei_kit.trees.base import DocumentTree, Node

from ._text import clean
from .models import Metadata

logger = logging.getLogger(__name__)

HEADER_TAG = "teiHeader"


def extract_metadata(tree: DocumentTree) -> Metadata:
    """Read header fields into a flat record.

    Every field is independently optional. A document without a header
    gets an all-empty record, not an error.
    """
    header = tree.find(tree.root, HEADER_TAG)
    if header is None:
        logger.debug("No %s found, returning empty metadata", HEADER_TAG)
        return Metadata()

    title_stmt = tree.find(header, "titleStmt")
    publication_stmt = tree.find(header, "publicationStmt")
    source_desc = tree.find(header, "sourceDesc")

    return Metadata(
        title=_first_text(tree, title_stmt, "title"),
        author=_first_text(tree, title_stmt, "author"),
        editor=_first_text(tree, title_stmt, "editor"),
        publisher=_first_text(tree, publication_stmt, "publisher"),
        pub_date=_first_text(tree, publication_stmt, "date"),
        language=clean(tree.attribute(tree.root, "xml:lang")),
        description=_first_text(tree, source_desc, "p"),
        keywords=extract_keywords(tree, header),
        genre=_extract_genre(tree, header),
    )


def extract_keywords(tree: DocumentTree, header: Node) -> tuple[str, ...]:
    keywords: list[str] = []
    for block in tree.find_all(header, "keywords"):
        for term in tree.find_all(block, "term"):
            keyword = clean(tree.text(term))
            if keyword and keyword not in keywords:
                keywords.append(keyword)
    return tuple(keywords)


def _extract_genre(tree: DocumentTree, header: Node) -> str | None:
    # Best effort: first textClass/catRef target, e.g. "#fiction".
    text_class = tree.find(header, "textClass")
    if text_class is None:
        return None
    cat_ref = tree.find(text_class, "catRef")
    if cat_ref is None:
        return None
    target = clean(tree.attribute(cat_ref, "target"))
    if target is None:
        return None
    return target.lstrip("#") or None


def _first_text(tree: DocumentTree, parent: Node | None, tag: str) -> str | None:
    if parent is None:
        return None
    element = tree.find(parent, tag)
    if element is None:
        return None
    return clean(tree.text(element))
