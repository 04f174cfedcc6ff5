from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

@dataclass(frozen=True)
class IngredientRecord:
    name: str
    nursery_gross_amount: float = 0.0
    kindergarten_gross_amount: float = 0.0
    nursery_net_amount: float = 0.0
    kindergarten_net_amount: float = 0.0
    # per unit of nursery net mass; None when nursery net is 0
    protein: Optional[float] = None
    fat: Optional[float] = None
    carbohydrate: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass(frozen=True)
class RecipeRecord:
    name: str
    description: str
    ingredients: Tuple[IngredientRecord, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "ingredients": [i.to_dict() for i in self.ingredients],
        }
