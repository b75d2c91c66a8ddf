"""Workbook-scoped store of canonical styles."""

from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Optional

from ..exceptions import StyleInUseError, StyleNotFoundError, StyleTypeMismatchError
from ..logger_config import get_logger
from .style import Style

logger = get_logger(__name__)


class StyleRepository:
    """Deduplicates styles into one canonical, frozen instance per fingerprint.

    Canonical styles receive strictly increasing order ids in interning
    order. Ids are never reused, including after ``remove``. The repository
    does no locking; callers sharing it across threads must serialize access.
    """

    def __init__(self) -> None:
        self._by_fingerprint: Dict[str, Style] = {}
        self._by_order: Dict[int, Style] = {}
        self._next_order_id = 0

    def __len__(self) -> int:
        return len(self._by_order)

    def __iter__(self) -> Iterator[Style]:
        return iter(self.enumerate())

    def __contains__(self, style: object) -> bool:
        return isinstance(style, Style) and self._resolve(style) is not None

    # =========================================================================
    # INTERNING
    # =========================================================================

    def intern(self, style: Style) -> Style:
        """Return the canonical instance for ``style``, registering it if new.

        A new style is frozen and stored as is, unless it already carries an
        order id or is a built-in preset; those are registered via a copy.
        """
        if not isinstance(style, Style):
            raise StyleTypeMismatchError("Style", style)

        if style.order_id is not None and self._by_order.get(style.order_id) is style:
            return style

        key = style.content_fingerprint()
        canonical = self._by_fingerprint.get(key)
        if canonical is not None:
            return canonical

        if style.order_id is not None or style.is_internal or style.is_frozen:
            style = style.copy()

        order_id = self._next_order_id
        self._next_order_id += 1
        style._assign_order_id(order_id)
        style.freeze()
        self._by_fingerprint[key] = style
        self._by_order[order_id] = style
        logger.debug("Interned style %s as order id %d", style._name or "<unnamed>", order_id)
        return style

    def _resolve(self, style: Style) -> Optional[Style]:
        if style.order_id is not None and self._by_order.get(style.order_id) is style:
            return style
        return self._by_fingerprint.get(style.content_fingerprint())

    # =========================================================================
    # QUERIES
    # =========================================================================

    def enumerate(self) -> List[Style]:
        """All canonical styles in ascending order id."""
        return [self._by_order[order_id] for order_id in sorted(self._by_order)]

    def get_by_order_id(self, order_id: int) -> Optional[Style]:
        return self._by_order.get(order_id)

    def get_by_fingerprint(self, fingerprint: str) -> Optional[Style]:
        """Look up by content fingerprint or by full (order id bearing) fingerprint."""
        style = self._by_fingerprint.get(fingerprint)
        if style is not None:
            return style
        for candidate in self._by_order.values():
            if candidate.fingerprint() == fingerprint:
                return candidate
        return None

    def find_by_name(self, name: str) -> Optional[Style]:
        """First canonical style (by order id) whose name matches."""
        for style in self.enumerate():
            if style.name == name:
                return style
        return None

    # =========================================================================
    # REMOVAL
    # =========================================================================

    def remove(self, style: Style, is_referenced: Callable[[Style], bool]) -> Style:
        """Drop a canonical style that is no longer referenced.

        ``is_referenced`` answers whether any cell still uses the canonical
        style. Returns the removed instance.
        """
        if not isinstance(style, Style):
            raise StyleTypeMismatchError("Style", style)
        canonical = self._resolve(style)
        if canonical is None:
            raise StyleNotFoundError(style)
        if is_referenced(canonical):
            raise StyleInUseError(canonical)

        del self._by_fingerprint[canonical.content_fingerprint()]
        del self._by_order[canonical.order_id]
        logger.debug("Removed style with order id %d", canonical.order_id)
        return canonical

    def clear(self) -> None:
        """Forget every style. Order ids keep counting from where they were."""
        logger.debug("Clearing %d styles", len(self._by_order))
        self._by_fingerprint.clear()
        self._by_order.clear()
