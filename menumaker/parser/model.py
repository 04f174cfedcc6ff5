from dataclasses import dataclass
from typing import Dict, Tuple

PARAGRAPH = "paragraph"
TABLE = "table"

@dataclass(frozen=True)
class BodyElement:
    kind: str  # paragraph|table
    text: str
    rows: Tuple[Tuple[str, ...], ...] = ()

    @property
    def is_table(self) -> bool:
        return self.kind == TABLE

@dataclass(frozen=True)
class ParsedDocument:
    elements: Tuple[BodyElement, ...]
    meta: Dict[str, object]
