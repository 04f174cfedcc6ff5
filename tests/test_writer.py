from pathlib import Path

import pytest
from openpyxl import load_workbook

from menumaker.extractor.api import IngredientRecord, RecipeRecord
from menumaker.writer.api import write_recipe
from menumaker.writer.writer import WriterError


def _recipe(name: str = "Soup") -> RecipeRecord:
    return RecipeRecord(
        name=name,
        description="Tasty soup",
        ingredients=(
            IngredientRecord("Potato", 100, 90, 95, 85, 0.05, 0.02, 0.21),
            IngredientRecord("Salt", 1, 2, 0, 1),
        ),
    )


def test_write_creates_workbook_with_sheet_per_recipe(tmp_path: Path):
    res = write_recipe(_recipe(), str(tmp_path))
    assert res.status == "created"
    assert res.sheet_name == "Soup"

    ws = load_workbook(res.excel_path)["Soup"]
    assert ws["B1"].value == "Soup"
    assert ws["B2"].value == "Tasty soup"
    assert ws.cell(row=4, column=1).value == "ingredient"
    assert [c.value for c in ws[5]] == ["Potato", 100, 90, 95, 85, 0.05, 0.02, 0.21]
    # absent ratios stay empty
    assert ws.cell(row=6, column=6).value is None
    assert ws.cell(row=6, column=4).value == 0


def test_write_appends_and_dedupes(tmp_path: Path):
    write_recipe(_recipe(), str(tmp_path))
    res2 = write_recipe(_recipe("Porridge: milk/rice"), str(tmp_path))
    assert res2.status == "appended"
    assert res2.sheet_name == "Porridge milkrice"

    res3 = write_recipe(_recipe(), str(tmp_path))
    assert res3.status == "skipped"
    assert load_workbook(res3.excel_path).sheetnames == ["Soup", "Porridge milkrice"]
    assert not (tmp_path / ".recipe_writer.lock").exists()


def test_write_fails_when_locked(tmp_path: Path):
    (tmp_path / ".recipe_writer.lock").write_text("", encoding="utf-8")
    with pytest.raises(WriterError):
        write_recipe(_recipe(), str(tmp_path))


def test_long_names_sharing_prefix_both_written(tmp_path: Path):
    first = "Суп картопляний з вермішеллю та зеленню"
    second = "Суп картопляний з вермішеллю та сметаною"
    assert first[:31] == second[:31]

    res1 = write_recipe(_recipe(first), str(tmp_path))
    res2 = write_recipe(_recipe(second), str(tmp_path))
    assert (res1.status, res2.status) == ("created", "appended")
    assert res1.sheet_name == first[:31]
    assert res2.sheet_name != res1.sheet_name
    assert len(res2.sheet_name) <= 31

    wb = load_workbook(res2.excel_path)
    assert wb[res2.sheet_name]["B1"].value == second

    res3 = write_recipe(_recipe(second), str(tmp_path))
    assert res3.status == "skipped"
    assert res3.sheet_name == res2.sheet_name


def test_sheet_names_differing_in_case(tmp_path: Path):
    statuses = [write_recipe(_recipe(n), str(tmp_path)) for n in ("Soup", "soup", "soup")]
    assert [r.status for r in statuses] == ["created", "appended", "skipped"]
    assert statuses[1].sheet_name == "soup (2)"
    assert statuses[2].sheet_name == "soup (2)"

    wb = load_workbook(statuses[0].excel_path)
    assert wb.sheetnames == ["Soup", "soup (2)"]
    assert wb["soup (2)"]["B1"].value == "soup"
