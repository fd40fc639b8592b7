# src/tei_kit/trees/factory.py

from functools import lru_cache

from .base import TreeBackend
from .config import TreeConfig


def create_tree_backend(config: TreeConfig) -> TreeBackend:
    """Create a tree backend from config.

    Args:
        config: Tree configuration naming the backend.

    Returns:
        Configured TreeBackend implementation.

    Raises:
        ValueError: If backend is unknown.

    Example:
        >>> backend = create_tree_backend(TreeConfig(backend="etree"))
        >>> tree = backend.load("<TEI><text><body/></text></TEI>")
    """
    if config.backend == "lxml":
        from .lxml_tree import LxmlTreeBackend

        return LxmlTreeBackend(huge_tree=config.huge_tree)

    if config.backend == "etree":
        from .etree_tree import ElementTreeBackend

        return ElementTreeBackend()

    raise ValueError(f"Unknown tree backend: {config.backend}")


@lru_cache(maxsize=1)
def default_tree_backend() -> TreeBackend:
    """Process-wide default backend, built on first use and never replaced."""
    return create_tree_backend(TreeConfig())
