from __future__ import annotations

from typing import Optional

from menumaker.layout.api import DocumentLayout, default_layout
from menumaker.parser.api import DocumentFormatError
from .extractor import Extractor
from .model import IngredientRecord, RecipeRecord


def parse(document_bytes: bytes, layout: Optional[DocumentLayout] = None) -> RecipeRecord:
    """Public API (Extractor)

    Contract:
    - Name / description / ingredient table read at fixed positions of the
      non-empty body elements (see DocumentLayout).
    - Header rows and the trailing totals row are skipped.
    - Malformed numeric cells -> 0; protein/fat/carbohydrate are ratios to
      the nursery net amount, None when that amount is 0.
    - Any structural problem -> DocumentFormatError, logged once. No partial record.
    """
    return Extractor(layout or default_layout()).parse(document_bytes)


def parse_file(path: str, layout: Optional[DocumentLayout] = None) -> RecipeRecord:
    return Extractor(layout or default_layout()).parse_file(path)
