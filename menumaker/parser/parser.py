from __future__ import annotations

import io
from typing import Iterator, List, Union

import docx
from docx.document import Document
from docx.oxml.ns import qn
from docx.table import Table, _Cell
from docx.text.paragraph import Paragraph

from menumaker.normalizer.api import is_blank
from .model import PARAGRAPH, TABLE, BodyElement, ParsedDocument


class DocumentFormatError(RuntimeError):
    pass


class Parser:
    """Internal parser implementation (body elements in document order)."""

    def parse(self, document_bytes: bytes) -> ParsedDocument:
        try:
            with io.BytesIO(document_bytes) as stream:
                elements = self._extract_body_elements(docx.Document(stream))
        except Exception as e:
            raise DocumentFormatError(f"Cannot open document: {e}") from e

        kept = [el for el in elements if self._has_content(el)]
        meta = {
            "element_count": len(kept),
            "dropped_count": len(elements) - len(kept),
            "engine": "python-docx",
        }
        return ParsedDocument(elements=tuple(kept), meta=meta)

    def _extract_body_elements(self, document: Document) -> List[BodyElement]:
        elements: List[BodyElement] = []
        for block in self._iter_blocks(document):
            if isinstance(block, Table):
                elements.append(self._table_element(block))
            else:
                elements.append(BodyElement(kind=PARAGRAPH, text=block.text))
        return elements

    def _iter_blocks(self, document: Document) -> Iterator[Union[Paragraph, Table]]:
        body = document.element.body
        for child in body.iterchildren():
            if child.tag == qn("w:p"):
                yield Paragraph(child, document)
            elif child.tag == qn("w:tbl"):
                yield Table(child, document)

    def _table_element(self, table: Table) -> BodyElement:
        # w:tc elements as written, not grid columns: a merged cell counts once
        rows = tuple(tuple(_Cell(tc, table).text for tc in row._tr.tc_lst) for row in table.rows)
        text = "\n".join("\t".join(r) for r in rows)
        return BodyElement(kind=TABLE, text=text, rows=rows)

    def _has_content(self, element: BodyElement) -> bool:
        return element.is_table or not is_blank(element.text)
