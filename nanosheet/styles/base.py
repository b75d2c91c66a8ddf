"""Common contract for style components.

Every component (Border, CellAlignment, Fill, Font, NumberFormat) is a
pydantic model with assignment validation, a structural fingerprint and a
differential overlay (``apply_non_default``). Components become read-only
once the style owning them is interned.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Tuple

from pydantic import BaseModel, ConfigDict, PrivateAttr

from ..exceptions import FrozenStyleError, StyleTypeMismatchError


# =============================================================================
# FINGERPRINT ENCODING
# =============================================================================

NULL_MARKER = "#"
ESCAPED_NULL_MARKER = "_#_"
ATTRIBUTE_DELIMITER = "|"


def encode_value(value: Any) -> str:
    """Encode a single attribute value for a fingerprint.

    ``None`` encodes as ``#``; a string that is literally ``#`` encodes as
    ``_#_``. Backslash, the delimiter and underscores are escaped in every
    other string so no attribute can forge either marker or a delimiter.
    """
    if value is None:
        return NULL_MARKER
    if isinstance(value, Enum):
        return encode_value(value.value)
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)

    text = str(value)
    if text == NULL_MARKER:
        return ESCAPED_NULL_MARKER
    return (
        text.replace("\\", "\\\\")
        .replace(ATTRIBUTE_DELIMITER, "\\" + ATTRIBUTE_DELIMITER)
        .replace("_", "\\_")
    )


# =============================================================================
# BASE COMPONENT
# =============================================================================

class StyleComponent(BaseModel):
    """Base class of the five style components.

    Subclasses declare ``TAG`` (fingerprint prefix) and ``APPEND_FIELDS``,
    the ordered attribute table used by both ``fingerprint()`` and
    ``apply_non_default()``.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    TAG: ClassVar[str] = "Component"
    APPEND_FIELDS: ClassVar[Tuple[str, ...]] = ()

    _frozen: bool = PrivateAttr(default=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in type(self).model_fields and self.is_frozen:
            raise FrozenStyleError(type(self).__name__, name)
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self.fingerprint() == other.fingerprint()

    def __hash__(self) -> int:
        return hash(self.fingerprint())

    @property
    def is_frozen(self) -> bool:
        return bool(getattr(self, "_frozen", False))

    def freeze(self) -> None:
        """Make the component read-only."""
        self._frozen = True

    def fingerprint(self) -> str:
        parts = [f"{self.TAG}:"]
        for field in self.APPEND_FIELDS:
            parts.append(encode_value(getattr(self, field)))
            parts.append(ATTRIBUTE_DELIMITER)
        return "".join(parts)

    def copy(self):  # type: ignore[override]
        """Return an independent, mutable clone."""
        clone = self.model_copy(deep=True)
        clone._frozen = False
        return clone

    def apply_non_default(
        self, source: "StyleComponent", fresh_default: "StyleComponent"
    ) -> None:
        """Copy every attribute of ``source`` that differs from ``fresh_default``.

        Attributes are visited in ``APPEND_FIELDS`` order, so dependent
        attributes (alignment before indent) are listed after the attribute
        they depend on.
        """
        for operand in (source, fresh_default):
            if type(operand) is not type(self):
                raise StyleTypeMismatchError(type(self).__name__, operand)
        if self.is_frozen:
            raise FrozenStyleError(type(self).__name__)

        for field in self.APPEND_FIELDS:
            value = getattr(source, field)
            if value != getattr(fresh_default, field):
                setattr(self, field, value)
