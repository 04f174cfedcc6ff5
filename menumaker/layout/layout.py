from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .model import DEFAULT_COLUMNS, DocumentLayout


class LayoutError(RuntimeError):
    pass


_INDEX_KEYS = (
    "recipe_name_index",
    "table_index",
    "recipe_description_index",
    "header_rows",
    "footer_rows",
    "scale",
)


class LayoutResolver:
    def resolve_layout(self, layout_path: Optional[str]) -> DocumentLayout:
        if layout_path is None:
            return DocumentLayout()

        try:
            data = json.loads(Path(layout_path).read_text(encoding="utf-8"))
        except Exception as e:
            raise LayoutError(f"Cannot read layout file: {e}") from e

        if not isinstance(data, dict):
            raise LayoutError("Layout file must contain a JSON object")

        unknown = set(data) - set(_INDEX_KEYS) - {"columns"}
        if unknown:
            raise LayoutError(f"Unknown layout keys: {sorted(unknown)}")

        values: Dict[str, Any] = {}
        for key in _INDEX_KEYS:
            if key in data:
                values[key] = self._require_index(data[key], key)

        columns = dict(DEFAULT_COLUMNS)
        overrides = data.get("columns", {})
        if not isinstance(overrides, dict):
            raise LayoutError("layout.columns must be an object")
        for role, idx in overrides.items():
            if role not in DEFAULT_COLUMNS:
                raise LayoutError(f"Unknown column role: {role}")
            columns[role] = self._require_index(idx, f"columns.{role}")

        return DocumentLayout(columns=columns, **values)

    def _require_index(self, v: Any, key: str) -> int:
        # bool is an int subclass; reject it explicitly
        if isinstance(v, bool) or not isinstance(v, int) or v < 0:
            raise LayoutError(f"{key} must be a non-negative integer, got {v!r}")
        return v
