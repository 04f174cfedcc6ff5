from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from menumaker.layout.api import DocumentLayout
from menumaker.normalizer.api import parse_amount, ratio, sanitize_text
from menumaker.parser.api import BodyElement, DocumentFormatError, ParsedDocument
from menumaker.parser.api import parse as parse_document
from .model import IngredientRecord, RecipeRecord

logger = logging.getLogger(__name__)


class Extractor:
    def __init__(self, layout: DocumentLayout) -> None:
        self.layout = layout

    def parse(self, document_bytes: bytes) -> RecipeRecord:
        try:
            return self.extract_record(parse_document(document_bytes))
        except Exception as e:
            logger.error("Can't parse recipe document: %s", e)
            if isinstance(e, DocumentFormatError):
                raise
            raise DocumentFormatError(f"Unexpected document structure: {e}") from e

    def parse_file(self, path: str) -> RecipeRecord:
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            logger.error("Can't read recipe document %s: %s", path, e)
            raise DocumentFormatError(f"Cannot read document file: {e}") from e
        return self.parse(data)

    def extract_record(self, doc: ParsedDocument) -> RecipeRecord:
        elements = doc.elements
        name = self._paragraph_text(elements, self.layout.recipe_name_index, "recipe name")
        rows = self._table_rows(elements, self.layout.table_index)
        description = self._paragraph_text(
            elements, self.layout.recipe_description_index, "recipe description"
        )
        return RecipeRecord(name=name, description=description, ingredients=tuple(self._ingredients(rows)))

    def _paragraph_text(self, elements: Sequence[BodyElement], index: int, role: str) -> str:
        el = self._element_at(elements, index, role)
        if el.is_table:
            raise DocumentFormatError(f"{role}: expected paragraph at element {index}, found table")
        return sanitize_text(el.text)

    def _table_rows(self, elements: Sequence[BodyElement], index: int) -> Sequence[Sequence[str]]:
        el = self._element_at(elements, index, "ingredient table")
        if not el.is_table:
            raise DocumentFormatError(f"ingredient table: expected table at element {index}, found paragraph")
        return el.rows

    def _element_at(self, elements: Sequence[BodyElement], index: int, role: str) -> BodyElement:
        if index >= len(elements):
            raise DocumentFormatError(
                f"{role}: element {index} missing, document has {len(elements)} non-empty elements"
            )
        return elements[index]

    def _ingredients(self, rows: Sequence[Sequence[str]]) -> List[IngredientRecord]:
        first = self.layout.header_rows
        last = len(rows) - self.layout.footer_rows
        return [self._ingredient(rows[i], i) for i in range(first, last)]

    def _ingredient(self, row: Sequence[str], row_index: int) -> IngredientRecord:
        def cell(role: str) -> str:
            col = self.layout.column(role)
            if col >= len(row):
                raise DocumentFormatError(
                    f"row {row_index}: column {col} ({role}) missing, row has {len(row)} cells"
                )
            return row[col]

        nursery_net = parse_amount(cell("nursery_net"))
        scale = self.layout.scale
        return IngredientRecord(
            name=sanitize_text(cell("ingredient_name")),
            nursery_gross_amount=parse_amount(cell("nursery_gross")),
            kindergarten_gross_amount=parse_amount(cell("kindergarten_gross")),
            nursery_net_amount=nursery_net,
            kindergarten_net_amount=parse_amount(cell("kindergarten_net")),
            protein=ratio(parse_amount(cell("protein")), nursery_net, scale),
            fat=ratio(parse_amount(cell("fat")), nursery_net, scale),
            carbohydrate=ratio(parse_amount(cell("carbohydrate")), nursery_net, scale),
        )
