"""Tests for the Style aggregate.

Covers structural equality, copy semantics, overlay (append) and ordering.
"""

import pytest

from nanosheet.enums import BorderStyle, FillType, FormatNumber, PatternValue
from nanosheet.exceptions import (
    FrozenStyleError,
    MissingComponentError,
    StyleTypeMismatchError,
)
from nanosheet.styles import (
    Border,
    CellAlignment,
    Fill,
    Font,
    NumberFormat,
    Style,
    StyleRepository,
    presets,
)


def bold_style():
    style = Style()
    style.font.bold = True
    return style


class TestStyleEquality:
    """Test fingerprint-based sameness."""

    def test_independent_styles_with_equal_attributes_are_equal(self):
        """Test that construction order does not affect equality."""
        a = Style()
        a.font.bold = True
        a.fill.pattern_fill = PatternValue.SOLID

        b = Style()
        b.fill.pattern_fill = PatternValue.SOLID
        b.font.bold = True

        assert a is not b
        assert a.fingerprint() == b.fingerprint()
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_components_passed_to_constructor(self):
        a = Style(font=Font(bold=True), border=Border(top_style=BorderStyle.THIN))
        b = Style()
        b.font.bold = True
        b.border.top_style = BorderStyle.THIN
        assert a == b

    def test_fingerprint_layout(self):
        """Test that the fingerprint lists components in a fixed order."""
        style = Style()
        expected = (
            "Style:"
            + Border().fingerprint()
            + CellAlignment().fingerprint()
            + Fill().fingerprint()
            + Font().fingerprint()
            + NumberFormat().fingerprint()
        )
        assert style.fingerprint() == expected
        assert style.content_fingerprint() == expected

    def test_single_component_change_only_affects_its_segment(self):
        """Test that one attribute change leaves other components' segments intact."""
        a = Style()
        b = Style()
        b.number_format.number = FormatNumber.FORMAT_3

        assert a.fingerprint() != b.fingerprint()
        for segment in (
            Border().fingerprint(),
            CellAlignment().fingerprint(),
            Fill().fingerprint(),
            Font().fingerprint(),
        ):
            assert segment in b.fingerprint()

    def test_not_equal_to_other_types(self):
        assert Style() != "Style:"
        assert Style() != Font()

    def test_name_defaults_to_fingerprint(self):
        style = Style()
        assert not style.has_explicit_name
        assert style.name == style.fingerprint()
        style.name = "Header"
        assert style.name == "Header"
        assert style.has_explicit_name

    def test_name_is_not_part_of_fingerprint(self):
        assert Style(name="A") == Style(name="B")


class TestStyleCopy:
    """Test deep copies."""

    def test_copy_is_equal_but_distinct(self):
        original = bold_style()
        clone = original.copy()
        assert clone == original
        assert clone is not original
        assert clone.font is not original.font
        assert clone.order_id is None

    def test_mutating_copy_leaves_original(self):
        original = bold_style()
        before = original.fingerprint()
        clone = original.copy()
        clone.fill.foreground_color = "FFFF0000"
        clone.font.italic = True
        assert clone.fingerprint() != original.fingerprint()
        assert original.fingerprint() == before

    def test_copy_keeps_explicit_name(self):
        original = Style(name="Currency")
        assert original.copy().name == "Currency"

    def test_copy_of_interned_style(self, repository):
        """Test that copies of interned styles drop order id and freezing."""
        canonical = repository.intern(bold_style())
        clone = canonical.copy()
        assert canonical.order_id == 0
        assert clone.order_id is None
        assert not clone.is_frozen
        assert not clone.is_internal
        clone.font.italic = True
        assert canonical.font.italic is False

    def test_missing_component(self):
        """Test that an emptied slot is reported instead of silently skipped."""
        style = Style()
        style.fill = None
        with pytest.raises(MissingComponentError) as exc_info:
            style.copy()
        assert exc_info.value.missing == ["fill"]
        with pytest.raises(MissingComponentError):
            style.fingerprint()


class TestStyleAppend:
    """Test differential overlay of components and styles."""

    def test_append_component(self):
        style = Style()
        result = style.append(Font(bold=True))
        assert result is style
        assert style.font.bold is True

    def test_append_is_directional(self):
        """Test that append leaves unrelated attributes and the source untouched."""
        target = Style()
        fragment = Style()
        fragment.number_format.number = FormatNumber.FORMAT_14

        target.append(fragment)
        assert target.font.bold is False
        assert target.number_format.number == FormatNumber.FORMAT_14
        assert fragment.font.bold is False

    def test_append_is_idempotent(self):
        target = bold_style()
        fragment = Style()
        fragment.number_format.number = FormatNumber.FORMAT_14
        fragment.border.bottom_style = BorderStyle.THICK

        once = target.append(fragment).fingerprint()
        twice = target.append(fragment).fingerprint()
        assert once == twice

    def test_append_fresh_style_is_noop(self):
        """Test that overlaying an all-default style never changes the target."""
        target = Style()
        target.font.bold = True
        target.font.color_value = "FF112233"
        target.fill.set_color("FF00FF00", FillType.FILL_COLOR)
        target.cell_alignment.text_rotation = -30
        before = target.fingerprint()

        target.append(Style())
        for component_type in (Border, CellAlignment, Fill, Font, NumberFormat):
            target.append(component_type())
        assert target.fingerprint() == before

    def test_append_does_not_touch_identity(self):
        target = Style(name="Target")
        target.append(Style(name="Source"))
        assert target.name == "Target"
        assert target.order_id is None
        assert target.is_internal is False

    @pytest.mark.parametrize("other", [None, "bold", 42, object()])
    def test_append_rejects_unknown_types(self, other):
        """Test that unsupported operands raise without modifying the style."""
        style = bold_style()
        before = style.fingerprint()
        with pytest.raises(StyleTypeMismatchError):
            style.append(other)
        assert style.fingerprint() == before

    def test_append_to_interned_style_fails(self, repository):
        canonical = repository.intern(Style())
        with pytest.raises(FrozenStyleError):
            canonical.append(Font(bold=True))
        with pytest.raises(FrozenStyleError):
            canonical.append(bold_style())
        with pytest.raises(FrozenStyleError):
            canonical.font.bold = True
        with pytest.raises(FrozenStyleError):
            canonical.name = "renamed"

    def test_append_into_style_sharing_a_frozen_component(self, repository):
        """Test that a frozen component blocks the whole overlay."""
        canonical = repository.intern(bold_style())
        borrower = Style(font=canonical.font)
        with pytest.raises(FrozenStyleError):
            borrower.append(presets.date_format())
        assert borrower.number_format.number == FormatNumber.NONE


class TestStyleOrdering:
    """Test order-id based comparisons."""

    def test_unassigned_sorts_before_assigned(self, repository):
        interned = repository.intern(bold_style())
        loose = Style()
        assert loose < interned
        assert interned > loose
        assert loose <= interned

    def test_two_unassigned_compare_equal_in_order(self):
        a = Style()
        b = bold_style()
        assert not a < b
        assert not b < a
        assert a <= b and b <= a

    def test_sorting_by_order_id(self, repository):
        first = repository.intern(bold_style())
        second = repository.intern(presets.italic())
        third = repository.intern(presets.strike())
        assert sorted([third, first, second]) == [first, second, third]

    def test_compare_with_non_style(self):
        with pytest.raises(StyleTypeMismatchError):
            Style() < 1
        with pytest.raises(StyleTypeMismatchError):
            Style() >= "x"

    def test_interned_fingerprint_contains_order_id(self, repository):
        style = bold_style()
        content = style.content_fingerprint()
        canonical = repository.intern(style)
        assert canonical.fingerprint().startswith("Style:0:")
        assert canonical.content_fingerprint() == content


class TestConcreteScenario:
    """End-to-end scenario: equality, copy divergence and preset composition."""

    def test_bold_copy_date_format(self):
        a = Style()
        a.font.bold = True
        b = Style()
        b.font.bold = True
        assert a.fingerprint() == b.fingerprint()

        a_before = a.fingerprint()
        c = a.copy()
        c.fill.foreground_color = "FFFF0000"
        assert c.fingerprint() != a.fingerprint()
        assert a.fingerprint() == a_before

        combined = presets.bold().append(presets.date_format())
        assert combined.font.bold is True
        assert combined.number_format.number == FormatNumber.FORMAT_14
        assert combined.border == Border()
        assert combined.fill == Fill()
        assert combined.cell_alignment == CellAlignment()

    def test_repository_round_trip(self):
        repository = StyleRepository()
        combined = repository.intern(presets.bold().append(presets.date_format()))
        again = repository.intern(presets.bold().append(presets.date_format()))
        assert combined is again
        assert len(repository) == 1
