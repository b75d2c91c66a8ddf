"""Style table snapshot handed to an XLSX writer.

The writer emits ``cellXfs`` in repository order. Index 0.. ``reserved``-1
belong to built-in entries the writer emits itself; canonical styles follow
in ascending order id.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .config import get_settings
from .exceptions import StyleNotFoundError
from .styles.repository import StyleRepository
from .styles.style import Style


class StyleTable:
    """Immutable mapping of canonical styles to style-table indices."""

    def __init__(
        self,
        repository: StyleRepository,
        reserved_entries: Optional[int] = None,
    ) -> None:
        if reserved_entries is None:
            reserved_entries = get_settings().reserved_style_entries
        if reserved_entries < 0:
            raise ValueError("reserved_entries must be >= 0")
        self.reserved_entries = reserved_entries
        self._styles: List[Style] = repository.enumerate()
        self._index_by_order: Dict[int, int] = {
            style.order_id: reserved_entries + position
            for position, style in enumerate(self._styles)
        }

    def __len__(self) -> int:
        return self.reserved_entries + len(self._styles)

    @property
    def styles(self) -> List[Style]:
        return list(self._styles)

    def index_of(self, style: Style) -> int:
        """Table index of a canonical style."""
        if style.order_id is None or style.order_id not in self._index_by_order:
            raise StyleNotFoundError(style)
        index = self._index_by_order[style.order_id]
        if self._styles[index - self.reserved_entries] is not style:
            raise StyleNotFoundError(style)
        return index
