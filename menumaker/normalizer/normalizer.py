from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

NBSP = "\u00a0"


class Normalizer:
    def sanitize_text(self, text: Optional[str]) -> str:
        if text is None:
            return ""
        return text.replace(NBSP, "").strip()

    def is_blank(self, text: Optional[str]) -> bool:
        return not self.sanitize_text(text)

    def parse_amount(self, text: Optional[str]) -> float:
        value = self.sanitize_text(text).replace(",", ".")
        # float() also takes digit separators ("1_000"); a cell never does
        if "_" in value:
            return 0.0
        try:
            amount = float(value)
        except ValueError:
            return 0.0
        if not math.isfinite(amount) or amount < 0:
            return 0.0
        return amount

    def ratio(self, amount: float, divisor: float, scale: int) -> Optional[float]:
        if divisor == 0:
            return None
        # half-up on the shortest decimal repr, not on the binary value
        quantum = Decimal(1).scaleb(-scale)
        return float(Decimal(repr(amount / divisor)).quantize(quantum, rounding=ROUND_HALF_UP))
