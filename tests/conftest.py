from __future__ import annotations

import io
from typing import Callable, List, Optional, Sequence, Tuple

import pytest
from docx import Document
from docx.oxml.ns import qn

NBSP = "\u00a0"

HEADER_ROWS = [
    ["Product", "Gross", "", "Net", "", "Protein", "", "Fat", "", "Carbohydrate"],
    ["", "1-3 y", "3-7 y", "1-3 y", "3-7 y", "1-3 y", "3-7 y", "1-3 y", "3-7 y", "1-3 y"],
    ["1", "2", "3", "4", "5", "6", "7", "8", "9", "10"],
]
TOTALS_ROW = ["Total", "", "", "", "", "9", "", "3", "", "30"]

POTATO = ["Potato", "100", "90", "95", "85", "5", "", "2", "", "20"]
ONION = ["Onion", "12,5", "15", "10", "12", "1,4", "", "0", "", "8,2"]


def build_recipe_docx(
    ingredient_rows: Sequence[Sequence[str]] = (POTATO, ONION),
    name: str = "Soup",
    description: str = "Tasty soup",
    header_rows: Optional[Sequence[Sequence[str]]] = None,
    totals_row: Optional[Sequence[str]] = None,
    merged_cells: Sequence[Tuple[int, int, int]] = (),
) -> bytes:
    doc = Document()
    body = doc.element.body
    for child in list(body):
        if child.tag != qn("w:sectPr"):
            body.remove(child)

    doc.add_paragraph("Kindergarten No. 5")
    doc.add_paragraph("")
    doc.add_paragraph("Approved by the head")
    doc.add_paragraph(NBSP)
    doc.add_paragraph("Technological card No. 12")
    doc.add_paragraph("   ")
    doc.add_paragraph("Dish name:")
    doc.add_paragraph(NBSP + name + NBSP)

    rows: List[Sequence[str]] = list(HEADER_ROWS if header_rows is None else header_rows)
    rows.extend(ingredient_rows)
    rows.append(TOTALS_ROW if totals_row is None else totals_row)
    table = doc.add_table(rows=len(rows), cols=max(len(r) for r in rows))
    for r, values in enumerate(rows):
        for c, value in enumerate(values):
            table.cell(r, c).text = value
    # (row, first column, last column); the merged cell keeps the first text
    for r, first, last in merged_cells:
        merged = table.cell(r, first).merge(table.cell(r, last))
        merged.text = rows[r][first]

    doc.add_paragraph(NBSP + NBSP)
    doc.add_paragraph("Technology of preparation:")
    doc.add_paragraph("")
    doc.add_paragraph("  " + description + "  ")

    out = io.BytesIO()
    doc.save(out)
    return out.getvalue()


@pytest.fixture
def make_recipe_docx() -> Callable[..., bytes]:
    return build_recipe_docx
