"""Minimal workbook model holding canonical style references per cell."""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from .exceptions import StyleNotFoundError
from .logger_config import get_logger
from .style_table import StyleTable
from .styles.repository import StyleRepository
from .styles.style import Style

logger = get_logger(__name__)

_CELL_REF_RE = re.compile(r'^([A-Z]+)(\d+)$')


def normalize_cell_ref(ref: str) -> str:
    """Upper-case and validate a cell reference like 'a1' -> 'A1'."""
    normalized = ref.strip().upper()
    if not _CELL_REF_RE.match(normalized):
        raise ValueError(f"Invalid cell reference: {ref}")
    return normalized


class Worksheet:
    """A named sheet mapping cell references to canonical styles."""

    def __init__(self, name: str, workbook: "Workbook") -> None:
        self.name = name
        self.workbook = workbook
        self._styles: Dict[str, Style] = {}

    def __repr__(self) -> str:
        return f"Worksheet(name={self.name!r}, styled_cells={len(self._styles)})"

    def set_style(self, ref: str, style: Style) -> Style:
        """Intern ``style`` and attach the canonical instance to a cell."""
        canonical = self.workbook.styles.intern(style)
        self._styles[normalize_cell_ref(ref)] = canonical
        return canonical

    def get_style(self, ref: str) -> Optional[Style]:
        return self._styles.get(normalize_cell_ref(ref))

    def clear_style(self, ref: str) -> None:
        self._styles.pop(normalize_cell_ref(ref), None)

    def style_references(self) -> Dict[str, Style]:
        return dict(self._styles)


class Workbook:
    """Owns one StyleRepository shared by all of its worksheets."""

    def __init__(self, styles: Optional[StyleRepository] = None) -> None:
        self.styles = styles if styles is not None else StyleRepository()
        self.worksheets: List[Worksheet] = []

    def add_worksheet(self, name: Optional[str] = None) -> Worksheet:
        if name is None:
            name = f"Sheet{len(self.worksheets) + 1}"
        if any(ws.name == name for ws in self.worksheets):
            raise ValueError(f"Worksheet '{name}' already exists")
        worksheet = Worksheet(name, self)
        self.worksheets.append(worksheet)
        return worksheet

    def get_worksheet(self, name: str) -> Worksheet:
        for worksheet in self.worksheets:
            if worksheet.name == name:
                return worksheet
        raise KeyError(name)

    def is_style_referenced(self, style: Style) -> bool:
        """True if any cell of any worksheet points at ``style`` (by identity)."""
        return any(
            referenced is style
            for worksheet in self.worksheets
            for referenced in worksheet._styles.values()
        )

    def remove_style(self, style: Style) -> Style:
        """Remove an unreferenced canonical style from the repository."""
        removed = self.styles.remove(style, is_referenced=self.is_style_referenced)
        logger.debug("Workbook dropped style %r", removed)
        return removed

    def style_table(self, reserved_entries: Optional[int] = None) -> StyleTable:
        return StyleTable(self.styles, reserved_entries)

    def style_index(
        self,
        ref: str,
        worksheet: Optional[str] = None,
        table: Optional[StyleTable] = None,
    ) -> int:
        """Style-table index of a cell, as a writer would emit it in ``s``.

        Defaults to the first worksheet. Pass a ``table`` built once with
        style_table() to look up many cells against the same snapshot.
        """
        if worksheet:
            sheet = self.get_worksheet(worksheet)
        elif self.worksheets:
            sheet = self.worksheets[0]
        else:
            raise KeyError("Workbook has no worksheets")
        style = sheet.get_style(ref)
        if style is None:
            raise StyleNotFoundError(ref)
        if table is None:
            table = self.style_table()
        return table.index_of(style)
