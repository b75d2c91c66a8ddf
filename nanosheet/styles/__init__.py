"""Style components, the Style aggregate and the canonicalizing repository."""

from . import presets
from .base import StyleComponent, encode_value
from .border import Border
from .cell_alignment import CellAlignment
from .fill import Fill
from .font import Font
from .number_format import (
    NumberFormat,
    is_date_format,
    is_time_format,
    try_parse_format_number,
)
from .repository import StyleRepository
from .style import Style

__all__ = [
    # Components
    "StyleComponent",
    "Border",
    "CellAlignment",
    "Fill",
    "Font",
    "NumberFormat",
    # Aggregate and store
    "Style",
    "StyleRepository",
    # Helpers
    "encode_value",
    "is_date_format",
    "is_time_format",
    "try_parse_format_number",
    "presets",
]
