from __future__ import annotations

from typing import Optional

from .normalizer import Normalizer

_normalizer = Normalizer()


def sanitize_text(text: Optional[str]) -> str:
    """Remove non-breaking spaces and trim. None -> ""."""
    return _normalizer.sanitize_text(text)


def is_blank(text: Optional[str]) -> bool:
    return _normalizer.is_blank(text)


def parse_amount(text: Optional[str]) -> float:
    """Public API (Normalizer)

    Contract:
    - Comma decimal separator accepted ("12,5" -> 12.5).
    - Unparsable, non-finite or negative cell -> 0.0, never raises.
    """
    return _normalizer.parse_amount(text)


def ratio(amount: float, divisor: float, scale: int = 2) -> Optional[float]:
    """amount / divisor rounded half-up to `scale` decimals; None when divisor is 0."""
    return _normalizer.ratio(amount, divisor, scale)
