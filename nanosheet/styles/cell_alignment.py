"""Cell alignment and protection component."""

from __future__ import annotations

from typing import Any, ClassVar, Tuple

from pydantic import field_validator

from ..enums import (
    HorizontalAlignValue,
    TextBreakValue,
    TextDirectionValue,
    VerticalAlignValue,
)
from ..validators import validate_range
from .base import StyleComponent

MAX_INDENT = 64
MIN_ROTATION = -90
MAX_ROTATION = 90
VERTICAL_TEXT_ROTATION = 255

# Indent only applies to these horizontal alignments.
INDENT_ALIGNMENTS = frozenset(
    {
        HorizontalAlignValue.LEFT,
        HorizontalAlignValue.RIGHT,
        HorizontalAlignValue.DISTRIBUTED,
    }
)


class CellAlignment(StyleComponent):
    """Text alignment, rotation and protection flags of a cell."""

    TAG: ClassVar[str] = "CellAlignment"
    # horizontal_align must precede indent
    APPEND_FIELDS: ClassVar[Tuple[str, ...]] = (
        "force_apply_alignment",
        "hidden",
        "horizontal_align",
        "indent",
        "locked",
        "text_break",
        "text_direction",
        "text_rotation",
        "vertical_align",
    )

    force_apply_alignment: bool = False
    hidden: bool = False
    horizontal_align: HorizontalAlignValue = HorizontalAlignValue.NONE
    indent: int = 0
    locked: bool = False
    text_break: TextBreakValue = TextBreakValue.NONE
    text_direction: TextDirectionValue = TextDirectionValue.HORIZONTAL
    text_rotation: int = 0
    vertical_align: VerticalAlignValue = VerticalAlignValue.NONE

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        self._reset_indent()

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name in ("horizontal_align", "indent"):
            self._reset_indent()

    def _reset_indent(self) -> None:
        if self.indent != 0 and self.horizontal_align not in INDENT_ALIGNMENTS:
            super().__setattr__("indent", 0)

    @field_validator("indent")
    @classmethod
    def _check_indent(cls, value: int) -> int:
        return validate_range("indent", value, 0, MAX_INDENT)

    @field_validator("text_rotation")
    @classmethod
    def _check_text_rotation(cls, value: int) -> int:
        return validate_range("text_rotation", value, MIN_ROTATION, MAX_ROTATION)

    @property
    def internal_rotation(self) -> int:
        """Rotation as stored in OOXML: 255 for vertical text, 91-180 for negative angles."""
        if self.text_direction == TextDirectionValue.VERTICAL:
            return VERTICAL_TEXT_ROTATION
        if self.text_rotation >= 0:
            return self.text_rotation
        return 90 - self.text_rotation
