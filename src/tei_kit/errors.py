# src/tei_kit/errors.py


class MalformedDocument(ValueError):
    """Raised when raw text cannot yield a usable root element.

    Distinct from a well-formed document that simply lacks optional
    structure (no header, no body): those parse into sparse results.
    """
