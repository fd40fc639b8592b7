# src/tei_kit/trees/lxml_tree.py

import logging
from collections.abc import Sequence

from lxml import etree

from tei_kit.errors import MalformedDocument

from .base import (
    DocumentTree,
    Exclusion,
    Node,
    forced_encoding,
    qualify_attribute,
    to_bytes,
)

logger = logging.getLogger(__name__)

_DESCENDANTS = "descendant::*[local-name()=$tag]"
_CHILDREN = "*[local-name()=$tag]"


class LxmlDocumentTree(DocumentTree):
    """
    Tree queries answered by XPath 1.0.

    - tag names and attribute values are bound as XPath variables,
      never interpolated
    - text exclusion is a single XPath over descendant text nodes
    """

    def find(self, node: Node, tag: str) -> Node | None:
        matches = node.xpath(_DESCENDANTS + "[1]", tag=tag)
        return matches[0] if matches else None

    def find_all(self, node: Node, tag: str) -> list[Node]:
        return list(node.xpath(_DESCENDANTS, tag=tag))

    def children(self, node: Node, tag: str) -> list[Node]:
        return list(node.xpath(_CHILDREN, tag=tag))

    def attribute(self, node: Node, name: str) -> str | None:
        return node.get(qualify_attribute(name))

    def text(self, node: Node, exclude: Sequence[Exclusion] = ()) -> str:
        if not exclude:
            return str(node.xpath("string()"))

        variables: dict[str, object] = {"depth": node.xpath("count(ancestor::*)")}
        predicates = []
        for i, exclusion in enumerate(exclude):
            clause = f"local-name()=$tag{i}"
            variables[f"tag{i}"] = exclusion.tag
            if exclusion.attribute is not None:
                variables[f"attr{i}"] = exclusion.attribute
                if exclusion.value is None:
                    clause += f" and @*[name()=$attr{i}]"
                else:
                    clause += f" and @*[name()=$attr{i}]=$value{i}"
                    variables[f"value{i}"] = exclusion.value
            predicates.append(f"({clause})")

        # An excluding ancestor only counts when it sits below ``node``.
        expression = (
            "descendant::text()[not(ancestor::*["
            + " or ".join(predicates)
            + "][count(ancestor::*) > $depth])]"
        )
        return "".join(node.xpath(expression, **variables))


class LxmlTreeBackend:
    name = "lxml"

    def __init__(self, huge_tree: bool = False) -> None:
        self._huge_tree = huge_tree

    def load(self, raw: str | bytes) -> LxmlDocumentTree:
        data = to_bytes(raw)
        if not data.strip():
            raise MalformedDocument("Document is empty")

        # Parsers hold state, so each call gets its own.
        parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            huge_tree=self._huge_tree,
            encoding=forced_encoding(raw),
        )
        try:
            root = etree.fromstring(data, parser)
        except etree.XMLSyntaxError as exc:
            logger.debug("lxml rejected document: %s", exc)
            raise MalformedDocument(f"Document is not well-formed: {exc}") from exc

        if root is None:
            raise MalformedDocument("Document has no root element")
        return LxmlDocumentTree(root)
