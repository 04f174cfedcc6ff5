from __future__ import annotations

from typing import Optional

from .layout import LayoutError, LayoutResolver
from .model import DocumentLayout

DEFAULT_LAYOUT = DocumentLayout()


def default_layout() -> DocumentLayout:
    return DEFAULT_LAYOUT


def resolve_layout(layout_path: Optional[str] = None) -> DocumentLayout:
    """Public API (Layout)

    Contract:
    - None -> default positional layout of the recipe documents.
    - JSON file keys override the defaults; columns merge role by role.
    - Invalid file / unknown key / negative or non-integer index -> LayoutError.
    """
    return LayoutResolver().resolve_layout(layout_path)
