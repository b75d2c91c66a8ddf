"""Number format component and format-id classification helpers."""

from __future__ import annotations

from typing import ClassVar, Optional, Tuple

from pydantic import field_validator

from ..enums import FormatNumber, FormatRange
from ..exceptions import InvalidAttributeError
from .base import StyleComponent

CUSTOM_FORMAT_START_NUMBER = 164

_DATE_FORMATS = {
    FormatNumber.FORMAT_14,
    FormatNumber.FORMAT_15,
    FormatNumber.FORMAT_16,
    FormatNumber.FORMAT_17,
    FormatNumber.FORMAT_22,
}
_TIME_FORMATS = {
    FormatNumber.FORMAT_18,
    FormatNumber.FORMAT_19,
    FormatNumber.FORMAT_20,
    FormatNumber.FORMAT_21,
    FormatNumber.FORMAT_45,
    FormatNumber.FORMAT_46,
    FormatNumber.FORMAT_47,
}


def is_date_format(number: FormatNumber) -> bool:
    return number in _DATE_FORMATS


def is_time_format(number: FormatNumber) -> bool:
    return number in _TIME_FORMATS


def try_parse_format_number(raw: int) -> Tuple[FormatRange, FormatNumber]:
    """Classify a raw ``numFmtId``.

    Returns ``(DEFINED_FORMAT, member)`` for built-in ids,
    ``(CUSTOM_FORMAT, CUSTOM)`` from 164 upwards, ``(INVALID, NONE)`` for
    negative ids and ``(UNDEFINED, NONE)`` for gaps in the built-in range.
    """
    if raw < 0:
        return FormatRange.INVALID, FormatNumber.NONE
    if raw >= CUSTOM_FORMAT_START_NUMBER:
        return FormatRange.CUSTOM_FORMAT, FormatNumber.CUSTOM
    try:
        return FormatRange.DEFINED_FORMAT, FormatNumber(raw)
    except ValueError:
        return FormatRange.UNDEFINED, FormatNumber.NONE


class NumberFormat(StyleComponent):
    """Built-in or custom number format of a cell."""

    TAG: ClassVar[str] = "NumberFormat"
    APPEND_FIELDS: ClassVar[Tuple[str, ...]] = ("custom_format_code", "number")

    custom_format_code: Optional[str] = None  # only used when number == CUSTOM
    number: FormatNumber = FormatNumber.NONE

    @field_validator("custom_format_code")
    @classmethod
    def _check_custom_format_code(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value == "":
            raise InvalidAttributeError(
                "custom_format_code", value, "custom format code must not be empty"
            )
        return value

    @field_validator("number", mode="before")
    @classmethod
    def _check_number(cls, value):
        if isinstance(value, int) and not isinstance(value, FormatNumber):
            format_range, number = try_parse_format_number(value)
            if format_range in (FormatRange.INVALID, FormatRange.UNDEFINED):
                raise InvalidAttributeError(
                    "number", value, f"not a known format number ({format_range.value})"
                )
            return number
        return value

    @property
    def is_custom_format(self) -> bool:
        return self.number == FormatNumber.CUSTOM

    @property
    def is_date(self) -> bool:
        return is_date_format(self.number)

    @property
    def is_time(self) -> bool:
        return is_time_format(self.number)
