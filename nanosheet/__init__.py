"""nanosheet - XLSX style canonicalization engine.

This package handles:
1. Structured cell formatting components (border, fill, font, number format, alignment)
2. Deduplicating styles into canonical instances with stable order ids
3. Differential overlay of non-default attributes (append)
4. Reading XLSX style tables into canonical styles
"""

from .config import EngineSettings, get_settings, reload_settings
from .logger_config import get_logger, reset_logging, setup_logging
from .enums import (
    BorderStyle,
    CharsetValue,
    FillType,
    FontFamilyValue,
    FormatNumber,
    FormatRange,
    HorizontalAlignValue,
    PatternValue,
    SchemeValue,
    TextBreakValue,
    TextDirectionValue,
    UnderlineValue,
    VerticalAlignValue,
    VerticalTextAlignValue,
)
from .exceptions import (
    FrozenStyleError,
    InvalidAttributeError,
    MissingComponentError,
    StyleError,
    StyleImportError,
    StyleInUseError,
    StyleNotFoundError,
    StyleTypeMismatchError,
)
from .styles import (
    Border,
    CellAlignment,
    Fill,
    Font,
    NumberFormat,
    Style,
    StyleComponent,
    StyleRepository,
    presets,
)
from .style_table import StyleTable
from .workbook import Workbook, Worksheet
from .reader import load_workbook, parse_styles_xml, read_styles

__version__ = "0.1.0"

__all__ = [
    # Components
    "StyleComponent",
    "Border",
    "CellAlignment",
    "Fill",
    "Font",
    "NumberFormat",
    # Styles
    "Style",
    "StyleRepository",
    "StyleTable",
    "presets",
    # Workbook boundary
    "Workbook",
    "Worksheet",
    "load_workbook",
    "parse_styles_xml",
    "read_styles",
    # Enumerations
    "BorderStyle",
    "CharsetValue",
    "FillType",
    "FontFamilyValue",
    "FormatNumber",
    "FormatRange",
    "HorizontalAlignValue",
    "PatternValue",
    "SchemeValue",
    "TextBreakValue",
    "TextDirectionValue",
    "UnderlineValue",
    "VerticalAlignValue",
    "VerticalTextAlignValue",
    # Errors
    "StyleError",
    "StyleTypeMismatchError",
    "MissingComponentError",
    "InvalidAttributeError",
    "FrozenStyleError",
    "StyleNotFoundError",
    "StyleInUseError",
    "StyleImportError",
    # Config
    "EngineSettings",
    "get_settings",
    "reload_settings",
    # Logging
    "setup_logging",
    "reset_logging",
    "get_logger",
]
