from __future__ import annotations

import os
from pathlib import Path
from typing import Any, List, Tuple

from openpyxl import Workbook, load_workbook
from openpyxl.worksheet.worksheet import Worksheet

from menumaker.extractor.api import IngredientRecord, RecipeRecord
from .model import WriteResult

INGREDIENT_HEADERS = [
    "ingredient",
    "nursery_gross",
    "kindergarten_gross",
    "nursery_net",
    "kindergarten_net",
    "protein",
    "fat",
    "carbohydrate",
]
RECIPE_CELL = "B1"
DESCRIPTION_CELL = "B2"
HEADER_ROW = 4
MAX_SHEETNAME = 31


class WriterError(RuntimeError):
    pass


class Writer:
    def write_recipe(self, record: RecipeRecord, output_dir: str, filename: str) -> WriteResult:
        out_dir = Path(output_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        excel_path = out_dir / self._sanitize_filename(filename)

        lock_path = out_dir / ".recipe_writer.lock"
        self._acquire_lock(lock_path)
        try:
            sheet_name, status = self._write_with_dedupe(excel_path, record)
        finally:
            self._release_lock(lock_path)

        return WriteResult(excel_path=str(excel_path), sheet_name=sheet_name, status=status)

    def _write_with_dedupe(self, excel_path: Path, record: RecipeRecord) -> Tuple[str, str]:
        if excel_path.exists():
            wb = load_workbook(excel_path)
            status = "appended"
        else:
            wb = Workbook()
            # Default-Sheet entfernen
            if "Sheet" in wb.sheetnames and len(wb.sheetnames) == 1:
                wb.remove(wb["Sheet"])
            status = "created"

        # dedupe by the full recipe name; sheet titles are truncated
        for ws in wb.worksheets:
            if ws[RECIPE_CELL].value == record.name:
                return ws.title, "skipped"

        ws = wb.create_sheet(self._unique_sheetname(record.name, wb.sheetnames))
        self._write_sheet(ws, record)
        wb.save(excel_path)
        return ws.title, status

    def _unique_sheetname(self, recipe_name: str, existing: List[str]) -> str:
        # Excel compares sheet titles case-insensitively
        taken = {t.lower() for t in existing}
        base = self._sanitize_sheetname(recipe_name)
        title = base
        n = 1
        while title.lower() in taken:
            n += 1
            suffix = f" ({n})"
            title = base[:MAX_SHEETNAME - len(suffix)] + suffix
        return title

    def _write_sheet(self, ws: Worksheet, record: RecipeRecord) -> None:
        ws["A1"] = "recipe"
        ws[RECIPE_CELL] = record.name
        ws["A2"] = "description"
        ws[DESCRIPTION_CELL] = record.description
        for col, header in enumerate(INGREDIENT_HEADERS, start=1):
            ws.cell(row=HEADER_ROW, column=col).value = header
        for offset, ingredient in enumerate(record.ingredients, start=1):
            for col, value in enumerate(self._row_values(ingredient), start=1):
                ws.cell(row=HEADER_ROW + offset, column=col).value = value

    def _row_values(self, ingredient: IngredientRecord) -> List[Any]:
        # None stays an empty cell so "not computed" differs from 0
        return [
            ingredient.name,
            ingredient.nursery_gross_amount,
            ingredient.kindergarten_gross_amount,
            ingredient.nursery_net_amount,
            ingredient.kindergarten_net_amount,
            ingredient.protein,
            ingredient.fat,
            ingredient.carbohydrate,
        ]

    def _sanitize_filename(self, s: str) -> str:
        cleaned = "".join(ch for ch in str(s) if ch.isalnum() or ch in (" ", "_", "-", ".")).strip().replace(" ", "_")
        if not cleaned:
            raise WriterError("empty workbook filename")
        return cleaned if cleaned.endswith(".xlsx") else cleaned + ".xlsx"

    def _sanitize_sheetname(self, s: str) -> str:
        invalid = set(':\\/?"*[]')
        cleaned = "".join(ch for ch in str(s) if ch not in invalid).strip()
        return cleaned[:MAX_SHEETNAME] if cleaned else "RECIPE"

    def _acquire_lock(self, lock_path: Path) -> None:
        try:
            fd = os.open(str(lock_path), os.O_CREAT | os.O_EXCL | os.O_WRONLY)
            os.close(fd)
        except FileExistsError:
            raise WriterError("recipe_writer_lock_exists")

    def _release_lock(self, lock_path: Path) -> None:
        lock_path.unlink(missing_ok=True)
