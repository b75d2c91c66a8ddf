"""Fill component."""

from __future__ import annotations

from typing import ClassVar, Tuple

from pydantic import field_validator

from ..enums import FillType, PatternValue
from ..validators import validate_color, validate_range
from .base import StyleComponent

DEFAULT_COLOR = "FF000000"
DEFAULT_INDEXED_COLOR = 64  # unset sentinel
MAX_INDEXED_COLOR = 65


class Fill(StyleComponent):
    """Pattern and colors of a cell background."""

    TAG: ClassVar[str] = "Fill"
    APPEND_FIELDS: ClassVar[Tuple[str, ...]] = (
        "background_color",
        "foreground_color",
        "indexed_color",
        "pattern_fill",
    )

    background_color: str = DEFAULT_COLOR
    foreground_color: str = DEFAULT_COLOR
    indexed_color: int = DEFAULT_INDEXED_COLOR
    pattern_fill: PatternValue = PatternValue.NONE

    @field_validator("background_color", "foreground_color")
    @classmethod
    def _check_color(cls, value: str, info) -> str:
        return validate_color(info.field_name, value)

    @field_validator("indexed_color")
    @classmethod
    def _check_indexed_color(cls, value: int) -> int:
        return validate_range("indexed_color", value, 0, MAX_INDEXED_COLOR)

    @classmethod
    def from_colors(cls, foreground: str, background: str = DEFAULT_COLOR) -> "Fill":
        """Solid fill with explicit foreground and background colors."""
        return cls(
            foreground_color=foreground,
            background_color=background,
            pattern_fill=PatternValue.SOLID,
        )

    def set_color(self, color: str, role: FillType) -> None:
        """Set one color slot, reset the other, and force a solid pattern."""
        if role == FillType.FILL_COLOR:
            self.foreground_color = color
            self.background_color = DEFAULT_COLOR
        else:
            self.background_color = color
            self.foreground_color = DEFAULT_COLOR
        self.pattern_fill = PatternValue.SOLID
