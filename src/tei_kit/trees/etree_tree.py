# src/tei_kit/trees/etree_tree.py

import logging
import xml.etree.ElementTree as ET
from collections.abc import Sequence

from tei_kit.errors import MalformedDocument

from .base import (
    MAX_TREE_DEPTH,
    DocumentTree,
    Exclusion,
    Node,
    forced_encoding,
    qualify_attribute,
    to_bytes,
)

logger = logging.getLogger(__name__)


def local_name(node: Node) -> str:
    tag = node.tag
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


class ElementTreeDocumentTree(DocumentTree):
    """Tree queries over the standard-library ElementTree.

    Only plain iteration is used: one level for children, the whole subtree
    for descendants, filtered by local name by hand.
    """

    def find(self, node: Node, tag: str) -> Node | None:
        for element in self._descendants(node):
            if local_name(element) == tag:
                return element
        return None

    def find_all(self, node: Node, tag: str) -> list[Node]:
        return [e for e in self._descendants(node) if local_name(e) == tag]

    def children(self, node: Node, tag: str) -> list[Node]:
        return [child for child in node if local_name(child) == tag]

    def attribute(self, node: Node, name: str) -> str | None:
        return node.get(qualify_attribute(name))

    def text(self, node: Node, exclude: Sequence[Exclusion] = ()) -> str:
        parts: list[str] = [node.text or ""]
        # Pending elements and tails; a tail is pushed under its element's
        # children so it comes out after them.
        pending: list[Node] = list(reversed(node))
        while pending:
            item = pending.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            if item.tail:
                pending.append(item.tail)
            if not self._is_excluded(item, exclude):
                parts.append(item.text or "")
                pending.extend(reversed(item))
        return "".join(parts)

    def _descendants(self, node: Node):
        iterator = node.iter()
        next(iterator)  # node itself
        return iterator

    def _is_excluded(self, node: Node, exclude: Sequence[Exclusion]) -> bool:
        name = local_name(node)
        for exclusion in exclude:
            if exclusion.tag != name:
                continue
            if exclusion.attribute is None:
                return True
            found = node.get(qualify_attribute(exclusion.attribute))
            if found is None:
                continue
            if exclusion.value is None or found == exclusion.value:
                return True
        return False


class ElementTreeBackend:
    name = "etree"

    def load(self, raw: str | bytes) -> ElementTreeDocumentTree:
        data = to_bytes(raw)
        if not data.strip():
            raise MalformedDocument("Document is empty")

        try:
            root = ET.fromstring(data, ET.XMLParser(encoding=forced_encoding(raw)))
        except ET.ParseError as exc:
            logger.debug("ElementTree rejected document: %s", exc)
            raise MalformedDocument(f"Document is not well-formed: {exc}") from exc

        depth = _depth(root)
        if depth > MAX_TREE_DEPTH:
            raise MalformedDocument(
                f"Document nesting depth {depth} exceeds {MAX_TREE_DEPTH}"
            )
        return ElementTreeDocumentTree(root)


def _depth(root: Node) -> int:
    deepest = 0
    pending = [(root, 1)]
    while pending:
        element, depth = pending.pop()
        deepest = max(deepest, depth)
        pending.extend((child, depth + 1) for child in element)
    return deepest
