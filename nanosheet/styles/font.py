"""Font component."""

from __future__ import annotations

from typing import Any, ClassVar, Optional, Tuple

from pydantic import field_validator

from ..enums import (
    CharsetValue,
    FontFamilyValue,
    SchemeValue,
    UnderlineValue,
    VerticalTextAlignValue,
)
from ..exceptions import InvalidAttributeError
from ..validators import validate_color, validate_range
from .base import StyleComponent

DEFAULT_FONT_NAME = "Calibri"
DEFAULT_MAJOR_FONT_NAME = "Calibri Light"
DEFAULT_FONT_SIZE = 11.0
MIN_FONT_SIZE = 1.0
MAX_FONT_SIZE = 409.0
DEFAULT_COLOR_THEME = 1
MAX_COLOR_THEME = 11

# Theme slot and explicit color are mutually exclusive.
_EXCLUSIVE = {"color_theme": "color_value", "color_value": "color_theme"}


def scheme_for_font_name(name: Any) -> SchemeValue:
    """Theme scheme implied by a font face: the theme fonts map to minor/major."""
    if name == DEFAULT_FONT_NAME:
        return SchemeValue.MINOR
    if name == DEFAULT_MAJOR_FONT_NAME:
        return SchemeValue.MAJOR
    return SchemeValue.NONE


class Font(StyleComponent):
    """Typeface, size, decoration and color of cell text."""

    TAG: ClassVar[str] = "Font"
    APPEND_FIELDS: ClassVar[Tuple[str, ...]] = (
        "bold",
        "charset",
        "color_theme",
        "color_value",
        "family",
        "italic",
        "name",
        "scheme",
        "size",
        "strike",
        "underline",
        "vertical_align",
    )

    bold: bool = False
    charset: CharsetValue = CharsetValue.DEFAULT
    color_theme: Optional[int] = DEFAULT_COLOR_THEME
    color_value: Optional[str] = None  # ARGB
    family: FontFamilyValue = FontFamilyValue.SWISS
    italic: bool = False
    name: str = DEFAULT_FONT_NAME
    scheme: SchemeValue = SchemeValue.MINOR
    size: float = DEFAULT_FONT_SIZE
    strike: bool = False
    underline: UnderlineValue = UnderlineValue.NONE
    vertical_align: VerticalTextAlignValue = VerticalTextAlignValue.NONE

    def __init__(self, **data: Any) -> None:
        if data.get("color_value") is not None:
            if data.get("color_theme") is not None:
                raise InvalidAttributeError(
                    "color_value",
                    data["color_value"],
                    "a font takes either a theme color or an explicit color, not both",
                )
            data["color_theme"] = None
        if "name" in data and "scheme" not in data:
            data["scheme"] = scheme_for_font_name(data["name"])
        super().__init__(**data)

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name == "name":
            super().__setattr__("scheme", scheme_for_font_name(self.name))
        partner = _EXCLUSIVE.get(name)
        if partner is not None and value is not None:
            super().__setattr__(partner, None)

    @field_validator("color_theme")
    @classmethod
    def _check_color_theme(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return value
        return validate_range("color_theme", value, 0, MAX_COLOR_THEME)

    @field_validator("color_value")
    @classmethod
    def _check_color_value(cls, value: Optional[str]) -> Optional[str]:
        return validate_color("color_value", value, allow_empty=True)

    @field_validator("size")
    @classmethod
    def _check_size(cls, value: float) -> float:
        return validate_range("size", value, MIN_FONT_SIZE, MAX_FONT_SIZE)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value:
            raise InvalidAttributeError("name", value, "font name must not be empty")
        return value

    @property
    def is_default_font(self) -> bool:
        return self == Font()
