"""Custom exceptions for the nanosheet style engine."""

from __future__ import annotations

from typing import Any, Optional


class StyleError(Exception):
    """Base exception for style-related errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class StyleTypeMismatchError(StyleError, TypeError):
    """Raised when two style operands are not of the same concrete type.

    Happens when a component is appended onto the wrong slot, when
    ``apply_non_default`` receives a foreign component, or when a Style is
    ordered against something that is not a Style.
    """

    def __init__(self, expected: str, actual: Any) -> None:
        self.expected = expected
        self.actual = type(actual).__name__
        super().__init__(
            f"Expected {expected}, got {self.actual}"
        )


class MissingComponentError(StyleError):
    """Raised when a Style is missing one of its five components.

    This points at a construction bug upstream, not at user input.
    """

    def __init__(self, operation: str, missing: list[str]) -> None:
        self.operation = operation
        self.missing = missing
        super().__init__(
            f"Cannot {operation} style: missing component(s) {', '.join(missing)}"
        )


class InvalidAttributeError(StyleError):
    """Raised when an attribute is assigned an out-of-range value."""

    def __init__(self, attribute: str, value: Any, reason: str) -> None:
        self.attribute = attribute
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value {value!r} for '{attribute}': {reason}")


class FrozenStyleError(StyleError):
    """Raised when an interned (canonical) style is mutated.

    Interned styles are shared by every cell that references them.
    Call ``copy()`` and modify the copy instead.
    """

    def __init__(self, target: str, attribute: Optional[str] = None) -> None:
        self.target = target
        self.attribute = attribute
        detail = f" (attribute '{attribute}')" if attribute else ""
        super().__init__(
            f"{target} is interned and cannot be modified{detail}. "
            "Use copy() to derive a new style."
        )


class StyleNotFoundError(StyleError, KeyError):
    """Raised when a style is not registered in a repository or table."""

    def __init__(self, style: Any) -> None:
        self.style = style
        super().__init__(f"Style {style!r} is not registered")

    def __str__(self) -> str:
        return self.message


class StyleInUseError(StyleError):
    """Raised when removing a style that is still referenced by cells."""

    def __init__(self, style: Any) -> None:
        self.style = style
        super().__init__(
            f"Style {style!r} is still referenced and cannot be removed"
        )


class StyleImportError(StyleError):
    """Raised when a style table part cannot be read."""

    def __init__(self, part: str, reason: str) -> None:
        self.part = part
        self.reason = reason
        super().__init__(f"Invalid style data in '{part}': {reason}")
