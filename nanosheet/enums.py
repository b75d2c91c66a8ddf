"""Enumerations for cell formatting attributes.

String values match the OOXML attribute vocabulary so readers and writers
can map them directly.
"""

from __future__ import annotations

from enum import Enum, IntEnum


# =============================================================================
# BORDER
# =============================================================================

class BorderStyle(str, Enum):
    """Line style of a border edge."""
    NONE = "none"
    HAIR = "hair"
    DOTTED = "dotted"
    DASHED = "dashed"
    DASH_DOT = "dashDot"
    DASH_DOT_DOT = "dashDotDot"
    SLANT_DASH_DOT = "slantDashDot"
    THIN = "thin"
    MEDIUM = "medium"
    THICK = "thick"
    DOUBLE = "double"
    MEDIUM_DASHED = "mediumDashed"
    MEDIUM_DASH_DOT = "mediumDashDot"
    MEDIUM_DASH_DOT_DOT = "mediumDashDotDot"


# =============================================================================
# FILL
# =============================================================================

class PatternValue(str, Enum):
    """Pattern of a cell fill."""
    NONE = "none"
    SOLID = "solid"
    DARK_GRAY = "darkGray"
    MEDIUM_GRAY = "mediumGray"
    LIGHT_GRAY = "lightGray"
    GRAY_0625 = "gray0625"
    GRAY_125 = "gray125"


class FillType(str, Enum):
    """Which color slot of a fill a color is meant for."""
    PATTERN_COLOR = "patternColor"  # background slot
    FILL_COLOR = "fillColor"  # foreground slot


# =============================================================================
# FONT
# =============================================================================

class UnderlineValue(str, Enum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"
    SINGLE_ACCOUNTING = "singleAccounting"
    DOUBLE_ACCOUNTING = "doubleAccounting"


class VerticalTextAlignValue(str, Enum):
    """Baseline shift of font text."""
    NONE = "none"
    SUBSCRIPT = "subscript"
    SUPERSCRIPT = "superscript"


class SchemeValue(str, Enum):
    """Theme font scheme a font belongs to."""
    MAJOR = "major"
    MINOR = "minor"
    NONE = "none"


class FontFamilyValue(IntEnum):
    """Font family classification (OOXML ST_FontFamily)."""
    NOT_APPLICABLE = 0
    ROMAN = 1
    SWISS = 2
    MODERN = 3
    SCRIPT = 4
    DECORATIVE = 5


class CharsetValue(IntEnum):
    """Character set of a font (OOXML ST_Charset subset)."""
    APPLICATION_DEFINED = -1
    ANSI = 0
    DEFAULT = 1
    SYMBOLS = 2
    MACINTOSH = 77
    JIS = 128
    HANGUL = 129
    JOHAB = 130
    GBK = 134
    BIG5 = 136
    GREEK = 161
    TURKISH = 162
    VIETNAMESE = 163
    HEBREW = 177
    ARABIC = 178
    BALTIC = 186
    RUSSIAN = 204
    THAI = 222
    EASTERN_EUROPEAN = 238
    OEM = 255


# =============================================================================
# NUMBER FORMAT
# =============================================================================

class FormatNumber(IntEnum):
    """Built-in number format ids, plus the ``CUSTOM`` sentinel."""
    NONE = 0
    FORMAT_1 = 1  # 0
    FORMAT_2 = 2  # 0.00
    FORMAT_3 = 3  # #,##0
    FORMAT_4 = 4  # #,##0.00
    FORMAT_5 = 5
    FORMAT_6 = 6
    FORMAT_7 = 7
    FORMAT_8 = 8
    FORMAT_9 = 9  # 0%
    FORMAT_10 = 10  # 0.00%
    FORMAT_11 = 11  # 0.00E+00
    FORMAT_12 = 12  # # ?/?
    FORMAT_13 = 13  # # ??/??
    FORMAT_14 = 14  # mm-dd-yy
    FORMAT_15 = 15  # d-mmm-yy
    FORMAT_16 = 16  # d-mmm
    FORMAT_17 = 17  # mmm-yy
    FORMAT_18 = 18  # h:mm AM/PM
    FORMAT_19 = 19  # h:mm:ss AM/PM
    FORMAT_20 = 20  # h:mm
    FORMAT_21 = 21  # h:mm:ss
    FORMAT_22 = 22  # m/d/yy h:mm
    FORMAT_37 = 37
    FORMAT_38 = 38
    FORMAT_39 = 39
    FORMAT_40 = 40
    FORMAT_45 = 45  # mm:ss
    FORMAT_46 = 46  # [h]:mm:ss
    FORMAT_47 = 47  # mmss.0
    FORMAT_48 = 48  # ##0.0E+0
    FORMAT_49 = 49  # @
    CUSTOM = 164


class FormatRange(str, Enum):
    """Classification of a raw numFmtId."""
    DEFINED_FORMAT = "defined_format"
    CUSTOM_FORMAT = "custom_format"
    INVALID = "invalid"
    UNDEFINED = "undefined"


# =============================================================================
# ALIGNMENT
# =============================================================================

class HorizontalAlignValue(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    FILL = "fill"
    JUSTIFY = "justify"
    GENERAL = "general"
    CENTER_CONTINUOUS = "centerContinuous"
    DISTRIBUTED = "distributed"
    NONE = "none"  # not specified


class VerticalAlignValue(str, Enum):
    BOTTOM = "bottom"
    TOP = "top"
    CENTER = "center"
    JUSTIFY = "justify"
    DISTRIBUTED = "distributed"
    NONE = "none"  # not specified


class TextBreakValue(str, Enum):
    WRAP_TEXT = "wrapText"
    SHRINK_TO_FIT = "shrinkToFit"
    NONE = "none"


class TextDirectionValue(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
