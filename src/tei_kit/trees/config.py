# src/tei_kit/trees/config.py

from dataclasses import dataclass
from typing import Literal

Backend = Literal["lxml", "etree"]


@dataclass(frozen=True)
class TreeConfig:
    """Selects which tree-query realization parses documents.

    ``lxml`` answers queries with XPath. ``etree`` is the standard-library
    ElementTree, limited to tag-name traversal.
    """

    backend: Backend = "lxml"

    # lxml only: lift libxml2's depth and text-node size limits
    huge_tree: bool = False
