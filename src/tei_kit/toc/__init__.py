from .toc import TocEntry, table_of_contents

__all__ = [
    "TocEntry",
    "table_of_contents",
]
