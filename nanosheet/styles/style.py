"""Style aggregate: one of each component plus identity and ordering."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple, Type

from ..exceptions import (
    FrozenStyleError,
    MissingComponentError,
    StyleError,
    StyleTypeMismatchError,
)
from .base import StyleComponent
from .border import Border
from .cell_alignment import CellAlignment
from .fill import Fill
from .font import Font
from .number_format import NumberFormat

STYLE_PREFIX = "Style:"

# Fingerprint order of the component slots.
COMPONENT_SLOTS: Tuple[Tuple[str, Type[StyleComponent]], ...] = (
    ("border", Border),
    ("cell_alignment", CellAlignment),
    ("fill", Fill),
    ("font", Font),
    ("number_format", NumberFormat),
)


class Style:
    """A complete cell style.

    Two styles are the same style when their fingerprints are equal. The
    ``order_id`` is assigned once, by ``StyleRepository.intern``, and is
    part of the fingerprint from then on. Interned styles are frozen;
    derive new styles with ``copy()`` and ``append()``.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        border: Optional[Border] = None,
        cell_alignment: Optional[CellAlignment] = None,
        fill: Optional[Fill] = None,
        font: Optional[Font] = None,
        number_format: Optional[NumberFormat] = None,
        is_internal: bool = False,
    ) -> None:
        object.__setattr__(self, "_frozen", False)
        object.__setattr__(self, "_order_id", None)
        self._name = name
        self.border = border if border is not None else Border()
        self.cell_alignment = (
            cell_alignment if cell_alignment is not None else CellAlignment()
        )
        self.fill = fill if fill is not None else Fill()
        self.font = font if font is not None else Font()
        self.number_format = (
            number_format if number_format is not None else NumberFormat()
        )
        self.is_internal = is_internal

    def __setattr__(self, name: str, value: Any) -> None:
        if self._frozen:
            raise FrozenStyleError("Style", name.lstrip("_"))
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"Style(name={self._name!r}, order_id={self._order_id!r})"

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Explicit name, or the fingerprint when none was set."""
        if self._name is not None:
            return self._name
        return self.fingerprint()

    @name.setter
    def name(self, value: Optional[str]) -> None:
        self._name = value

    @property
    def has_explicit_name(self) -> bool:
        return self._name is not None

    @property
    def order_id(self) -> Optional[int]:
        return self._order_id

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def _assign_order_id(self, order_id: int) -> None:
        if self._order_id is not None:
            raise StyleError(
                f"Style already carries order id {self._order_id}; order ids never change"
            )
        object.__setattr__(self, "_order_id", order_id)

    def freeze(self) -> None:
        """Freeze the style and its components."""
        self._require_components("freeze")
        for slot, _ in COMPONENT_SLOTS:
            getattr(self, slot).freeze()
        object.__setattr__(self, "_frozen", True)

    def _require_components(self, operation: str) -> List[StyleComponent]:
        components = [getattr(self, slot) for slot, _ in COMPONENT_SLOTS]
        missing = [
            slot for (slot, _), component in zip(COMPONENT_SLOTS, components)
            if component is None
        ]
        if missing:
            raise MissingComponentError(operation, missing)
        return components

    def content_fingerprint(self) -> str:
        """Fingerprint of the five components, without the order id."""
        components = self._require_components("fingerprint")
        return STYLE_PREFIX + "".join(c.fingerprint() for c in components)

    def fingerprint(self) -> str:
        components = self._require_components("fingerprint")
        parts = [STYLE_PREFIX]
        if self._order_id is not None:
            parts.append(f"{self._order_id}:")
        parts.extend(c.fingerprint() for c in components)
        return "".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Style):
            return False
        return self.fingerprint() == other.fingerprint()

    def __hash__(self) -> int:
        return hash(self.fingerprint())

    # -------------------------------------------------------------------------
    # Ordering
    # -------------------------------------------------------------------------

    def _order_key(self, other: object) -> Tuple[int, int]:
        if not isinstance(other, Style):
            raise StyleTypeMismatchError("Style", other)
        mine = -1 if self._order_id is None else self._order_id
        theirs = -1 if other._order_id is None else other._order_id
        return mine, theirs

    def __lt__(self, other: object) -> bool:
        mine, theirs = self._order_key(other)
        return mine < theirs

    def __le__(self, other: object) -> bool:
        mine, theirs = self._order_key(other)
        return mine <= theirs

    def __gt__(self, other: object) -> bool:
        mine, theirs = self._order_key(other)
        return mine > theirs

    def __ge__(self, other: object) -> bool:
        mine, theirs = self._order_key(other)
        return mine >= theirs

    # -------------------------------------------------------------------------
    # Derivation
    # -------------------------------------------------------------------------

    def copy(self) -> "Style":
        """Deep clone without order id. The copy is mutable and never internal."""
        components = self._require_components("copy")
        slots = {
            slot: component.copy()
            for (slot, _), component in zip(COMPONENT_SLOTS, components)
        }
        return Style(name=self._name, **slots)

    def append(self, other) -> "Style":
        """Overlay the non-default attributes of ``other`` onto this style.

        ``other`` may be a single component, applied to the matching slot, or
        a whole Style, applied slot by slot. Name, order id and internal flag
        are left untouched. Returns ``self``.
        """
        if isinstance(other, Style):
            if self._frozen:
                raise FrozenStyleError("Style")
            targets = self._require_components("append")
            sources = other._require_components("append")
            for target in targets:
                if target.is_frozen:
                    raise FrozenStyleError(type(target).__name__)
            for (_, component_type), target, source in zip(
                COMPONENT_SLOTS, targets, sources
            ):
                target.apply_non_default(source, component_type())
            return self

        for slot, component_type in COMPONENT_SLOTS:
            if type(other) is component_type:
                if self._frozen:
                    raise FrozenStyleError("Style")
                target = getattr(self, slot)
                if target is None:
                    raise MissingComponentError("append", [slot])
                target.apply_non_default(other, component_type())
                return self

        raise StyleTypeMismatchError("Style or style component", other)
