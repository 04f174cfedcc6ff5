from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

DEFAULT_COLUMNS: Mapping[str, int] = MappingProxyType({
    "ingredient_name": 0,
    "nursery_gross": 1,
    "kindergarten_gross": 2,
    "nursery_net": 3,
    "kindergarten_net": 4,
    "protein": 5,
    "fat": 7,
    "carbohydrate": 9,
})

@dataclass(frozen=True)
class DocumentLayout:
    recipe_name_index: int = 4
    table_index: int = 5
    recipe_description_index: int = 7
    header_rows: int = 3
    footer_rows: int = 1  # totals row
    scale: int = 2
    columns: Mapping[str, int] = field(default_factory=lambda: DEFAULT_COLUMNS)

    def __post_init__(self) -> None:
        # read-only copy, callers keep no handle on the layout's columns
        object.__setattr__(self, "columns", MappingProxyType(dict(self.columns)))

    def column(self, role: str) -> int:
        return self.columns[role]
