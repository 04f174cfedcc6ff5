from __future__ import annotations

from .model import BodyElement, ParsedDocument
from .parser import DocumentFormatError, Parser

def parse(document_bytes: bytes) -> ParsedDocument:
    """Public API (Parser)

    Contract:
    - Opens a .docx byte stream using python-docx.
    - Paragraphs and tables in document order.
    - Tables always kept; paragraphs kept only if non-blank after NBSP removal.
    - Unreadable container -> DocumentFormatError.
    """
    return Parser().parse(document_bytes)
