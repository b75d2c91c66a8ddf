"""Built-in style presets.

The masters are internal and frozen; every accessor hands out a mutable
copy that can be appended to or interned directly.
"""

from __future__ import annotations

from ..enums import (
    BorderStyle,
    FillType,
    FormatNumber,
    PatternValue,
    UnderlineValue,
)
from .border import Border
from .cell_alignment import CellAlignment
from .fill import Fill
from .font import DEFAULT_FONT_SIZE, Font
from .number_format import NumberFormat
from .style import Style


def _master(**components) -> Style:
    style = Style(is_internal=True, **components)
    style.freeze()
    return style


_THIN_FRAME = dict(
    top_style=BorderStyle.THIN,
    bottom_style=BorderStyle.THIN,
    left_style=BorderStyle.THIN,
    right_style=BorderStyle.THIN,
)

_BOLD = _master(font=Font(bold=True))
_ITALIC = _master(font=Font(italic=True))
_BOLD_ITALIC = _master(font=Font(bold=True, italic=True))
_UNDERLINE = _master(font=Font(underline=UnderlineValue.SINGLE))
_DOUBLE_UNDERLINE = _master(font=Font(underline=UnderlineValue.DOUBLE))
_STRIKE = _master(font=Font(strike=True))
_DATE_FORMAT = _master(number_format=NumberFormat(number=FormatNumber.FORMAT_14))
_TIME_FORMAT = _master(number_format=NumberFormat(number=FormatNumber.FORMAT_21))
_ROUND_FORMAT = _master(number_format=NumberFormat(number=FormatNumber.FORMAT_1))
_BORDER_FRAME = _master(border=Border(**_THIN_FRAME))
_BORDER_FRAME_HEADER = _master(
    border=Border(**{**_THIN_FRAME, "bottom_style": BorderStyle.MEDIUM}),
    font=Font(bold=True),
)
_DOTTED_FILL_0_125 = _master(fill=Fill(pattern_fill=PatternValue.GRAY_125))
_MERGE_CELL_STYLE = _master(cell_alignment=CellAlignment(force_apply_alignment=True))


def bold() -> Style:
    return _BOLD.copy()


def italic() -> Style:
    return _ITALIC.copy()


def bold_italic() -> Style:
    return _BOLD_ITALIC.copy()


def underline() -> Style:
    return _UNDERLINE.copy()


def double_underline() -> Style:
    return _DOUBLE_UNDERLINE.copy()


def strike() -> Style:
    return _STRIKE.copy()


def date_format() -> Style:
    """Built-in date format 14 (mm-dd-yy)."""
    return _DATE_FORMAT.copy()


def time_format() -> Style:
    """Built-in time format 21 (h:mm:ss)."""
    return _TIME_FORMAT.copy()


def round_format() -> Style:
    """Built-in number format 1 (integer)."""
    return _ROUND_FORMAT.copy()


def border_frame() -> Style:
    return _BORDER_FRAME.copy()


def border_frame_header() -> Style:
    """Thin frame with a medium bottom edge and bold text."""
    return _BORDER_FRAME_HEADER.copy()


def dotted_fill_0_125() -> Style:
    return _DOTTED_FILL_0_125.copy()


def merge_cell_style() -> Style:
    return _MERGE_CELL_STYLE.copy()


def colorized_text(rgb: str) -> Style:
    """Style with an explicit, fully opaque font color. ``rgb`` is RRGGBB."""
    style = Style()
    style.font.color_value = "FF" + rgb.upper()
    return style


def colorized_background(rgb: str) -> Style:
    """Style with a solid, fully opaque background. ``rgb`` is RRGGBB."""
    style = Style()
    style.fill.set_color("FF" + rgb.upper(), FillType.FILL_COLOR)
    return style


def font(
    name: str,
    size: float = DEFAULT_FONT_SIZE,
    is_bold: bool = False,
    is_italic: bool = False,
) -> Style:
    """Style with a user-defined font face."""
    style = Style()
    style.font.name = name
    style.font.size = size
    style.font.bold = is_bold
    style.font.italic = is_italic
    return style


def internal_masters() -> tuple:
    """The frozen preset masters, in declaration order."""
    return (
        _BOLD,
        _ITALIC,
        _BOLD_ITALIC,
        _UNDERLINE,
        _DOUBLE_UNDERLINE,
        _STRIKE,
        _DATE_FORMAT,
        _TIME_FORMAT,
        _ROUND_FORMAT,
        _BORDER_FRAME,
        _BORDER_FRAME_HEADER,
        _DOTTED_FILL_0_125,
        _MERGE_CELL_STYLE,
    )
