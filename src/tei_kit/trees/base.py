# src/tei_kit/trees/base.py

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

# libxml2's default element nesting limit; both backends reject deeper trees.
MAX_TREE_DEPTH = 256

# Backend-specific element handle. Only the DocumentTree that produced a
# node may interpret it.
Node = Any


@dataclass(frozen=True)
class Exclusion:
    """Descendant elements whose subtree text is skipped by ``DocumentTree.text``.

    ``attribute`` and ``value`` narrow the match, e.g.
    ``Exclusion("note", "place", "foot")``.
    """

    tag: str
    attribute: str | None = None
    value: str | None = None


def qualify_attribute(name: str) -> str:
    """Map ``xml:``-prefixed names to Clark notation, leave others as-is."""
    if name.startswith("xml:"):
        return f"{{{XML_NAMESPACE}}}{name[4:]}"
    return name


class DocumentTree(ABC):
    """Uniform query surface over a parsed document.

    Tags are matched by local name, so namespaced and un-namespaced
    documents answer identically. Every "descendant" query excludes the
    node itself.
    """

    def __init__(self, root: Node) -> None:
        self._root = root

    @property
    def root(self) -> Node:
        return self._root

    @abstractmethod
    def find(self, node: Node, tag: str) -> Node | None:
        """First descendant with local name ``tag`` in document order."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self, node: Node, tag: str) -> list[Node]:
        """All descendants with local name ``tag`` in document order."""
        raise NotImplementedError

    @abstractmethod
    def children(self, node: Node, tag: str) -> list[Node]:
        """Direct children with local name ``tag``, non-recursive."""
        raise NotImplementedError

    @abstractmethod
    def attribute(self, node: Node, name: str) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def text(self, node: Node, exclude: Sequence[Exclusion] = ()) -> str:
        """Concatenated descendant text, skipping excluded descendant subtrees.

        Tail text following an excluded element still belongs to its parent
        and is kept.
        """
        raise NotImplementedError


class TreeBackend(Protocol):
    name: str

    def load(self, raw: str | bytes) -> DocumentTree: ...


def to_bytes(raw: str | bytes) -> bytes:
    # XML parsers reject str input carrying an encoding declaration, and an
    # XML declaration must be the very first thing in the document.
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    return raw.lstrip()


def forced_encoding(raw: str | bytes) -> str | None:
    """Encoding that overrides the declaration, or None to honour it.

    Text arrives already decoded and ``to_bytes`` re-encodes it as UTF-8, so
    a declared ``encoding="ISO-8859-1"`` no longer describes the bytes.
    """
    return "utf-8" if isinstance(raw, str) else None
