from __future__ import annotations

from menumaker.extractor.api import RecipeRecord
from .model import WriteResult
from .writer import Writer, WriterError


def write_recipe(record: RecipeRecord, output_dir: str, filename: str = "recipes.xlsx") -> WriteResult:
    """Public API (Writer)

    Contract:
    - One Excel workbook per output dir (recipe book).
    - One sheet per recipe, one row per ingredient.
    - Dedupe by sheet name (sanitized recipe name).
    - Global recipe writer lock file in output dir.
    """
    return Writer().write_recipe(record, output_dir, filename)
