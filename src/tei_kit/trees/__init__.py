# src/tei_kit/trees/__init__.py

"""Document tree access layer.

Hides which tree-query engine parsed a document. Extraction code talks to
``DocumentTree`` only and never branches on the backend.

Example:
    >>> from tei_kit.trees import TreeConfig, create_tree_backend
    >>>
    >>> backend = create_tree_backend(TreeConfig(backend="lxml"))
    >>> tree = backend.load(raw_xml)
    >>> body = tree.find(tree.root, "body")
"""

from .base import DocumentTree, Exclusion, TreeBackend
from .config import TreeConfig
from .etree_tree import ElementTreeBackend
from .factory import create_tree_backend, default_tree_backend
from .lxml_tree import LxmlTreeBackend

__all__ = [
    # Factory
    "create_tree_backend",
    "default_tree_backend",
    # Protocol
    "DocumentTree",
    "TreeBackend",
    # Config
    "TreeConfig",
    # Backends
    "ElementTreeBackend",
    "LxmlTreeBackend",
    # Types
    "Exclusion",
]
