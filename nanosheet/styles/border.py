"""Border component."""

from __future__ import annotations

from typing import ClassVar, Optional, Tuple

from pydantic import field_validator

from ..enums import BorderStyle
from ..validators import validate_color
from .base import StyleComponent


class Border(StyleComponent):
    """Edge styles and colors of a cell border."""

    TAG: ClassVar[str] = "Border"
    APPEND_FIELDS: ClassVar[Tuple[str, ...]] = (
        "bottom_color",
        "bottom_style",
        "diagonal_color",
        "diagonal_down",
        "diagonal_up",
        "diagonal_style",
        "left_color",
        "left_style",
        "right_color",
        "right_style",
        "top_color",
        "top_style",
    )

    bottom_color: Optional[str] = None  # ARGB, None = no color
    bottom_style: BorderStyle = BorderStyle.NONE
    diagonal_color: Optional[str] = None
    diagonal_down: bool = False
    diagonal_up: bool = False
    diagonal_style: BorderStyle = BorderStyle.NONE
    left_color: Optional[str] = None
    left_style: BorderStyle = BorderStyle.NONE
    right_color: Optional[str] = None
    right_style: BorderStyle = BorderStyle.NONE
    top_color: Optional[str] = None
    top_style: BorderStyle = BorderStyle.NONE

    @field_validator(
        "bottom_color", "diagonal_color", "left_color", "right_color", "top_color"
    )
    @classmethod
    def _check_color(cls, value: Optional[str], info) -> Optional[str]:
        return validate_color(info.field_name, value, allow_empty=True)

    def is_empty(self) -> bool:
        """True when no edge has a style, color or diagonal flag."""
        return self == Border()
