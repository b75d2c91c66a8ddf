"""Tests for StyleRepository interning, enumeration and removal."""

import pytest

from nanosheet.enums import BorderStyle, FormatNumber
from nanosheet.exceptions import (
    FrozenStyleError,
    StyleInUseError,
    StyleNotFoundError,
    StyleTypeMismatchError,
)
from nanosheet.styles import Font, Style, StyleRepository, presets


def numbered_style(number):
    style = Style()
    style.number_format.number = number
    return style


SEQUENCE = [
    FormatNumber.FORMAT_1,
    FormatNumber.FORMAT_14,
    FormatNumber.FORMAT_2,
    FormatNumber.FORMAT_49,
    FormatNumber.FORMAT_10,
]


class TestInterning:
    """Test deduplication into canonical instances."""

    def test_equal_styles_share_one_instance(self, repository):
        """Test that two equal styles consume exactly one order id."""
        a = Style()
        a.font.bold = True
        b = Style()
        b.font.bold = True

        first = repository.intern(a)
        second = repository.intern(b)
        assert first is second
        assert first is a
        assert first.order_id == 0
        assert len(repository) == 1
        assert repository.enumerate() == [first]

    def test_interning_freezes(self, repository):
        canonical = repository.intern(Style())
        assert canonical.is_frozen
        assert canonical.font.is_frozen
        with pytest.raises(FrozenStyleError):
            canonical.fill.pattern_fill = "solid"

    def test_interning_an_interned_style_is_stable(self, repository):
        canonical = repository.intern(Style())
        assert repository.intern(canonical) is canonical
        assert canonical.order_id == 0
        assert len(repository) == 1

    def test_order_ids_increase_in_insertion_order(self, repository):
        """Test that enumerate returns styles in insertion order."""
        interned = [repository.intern(numbered_style(n)) for n in SEQUENCE]
        assert [s.order_id for s in interned] == [0, 1, 2, 3, 4]
        assert repository.enumerate() == interned
        assert list(repository) == interned

    def test_order_assignment_is_deterministic(self):
        """Test that the same construction sequence reproduces the same ids."""
        runs = []
        for _ in range(2):
            repository = StyleRepository()
            for n in SEQUENCE + SEQUENCE[:2]:
                repository.intern(numbered_style(n))
            runs.append([(s.order_id, s.fingerprint()) for s in repository.enumerate()])
        assert runs[0] == runs[1]
        assert len(runs[0]) == len(SEQUENCE)

    def test_preset_is_interned_via_copy(self, repository):
        """Test that frozen internal masters are never numbered."""
        master = presets.internal_masters()[0]
        canonical = repository.intern(master)
        assert canonical is not master
        assert master.order_id is None
        assert canonical.order_id == 0
        assert not canonical.is_internal

    def test_foreign_interned_style_is_copied(self, repository):
        """Test that a style interned elsewhere keeps its own order id."""
        other = StyleRepository()
        other.intern(Style())
        foreign = other.intern(presets.bold())
        assert foreign.order_id == 1

        local = repository.intern(foreign)
        assert local is not foreign
        assert local.order_id == 0
        assert foreign.order_id == 1
        assert local.content_fingerprint() == foreign.content_fingerprint()

    def test_intern_rejects_non_styles(self, repository):
        with pytest.raises(StyleTypeMismatchError):
            repository.intern(Font())

    def test_repositories_are_independent(self):
        a = StyleRepository()
        b = StyleRepository()
        a.intern(presets.bold())
        assert len(b) == 0
        assert b.intern(presets.italic()).order_id == 0


class TestLookups:
    """Test read access to canonical styles."""

    def test_get_by_order_id(self, repository):
        canonical = repository.intern(presets.bold())
        assert repository.get_by_order_id(0) is canonical
        assert repository.get_by_order_id(7) is None

    def test_get_by_fingerprint(self, repository):
        style = presets.bold()
        content = style.content_fingerprint()
        canonical = repository.intern(style)
        assert repository.get_by_fingerprint(content) is canonical
        assert repository.get_by_fingerprint(canonical.fingerprint()) is canonical
        assert repository.get_by_fingerprint("Style:nothing") is None

    def test_find_by_name(self, repository):
        named = presets.border_frame()
        named.name = "Frame"
        canonical = repository.intern(named)
        assert repository.find_by_name("Frame") is canonical
        assert repository.find_by_name("Missing") is None

    def test_contains(self, repository):
        canonical = repository.intern(presets.bold())
        assert canonical in repository
        assert presets.bold() in repository
        assert presets.italic() not in repository
        assert "bold" not in repository


class TestRemoval:
    """Test explicit, liveness-checked removal."""

    def test_remove_unreferenced(self, repository):
        canonical = repository.intern(presets.bold())
        removed = repository.remove(canonical, is_referenced=lambda style: False)
        assert removed is canonical
        assert len(repository) == 0
        assert canonical not in repository

    def test_remove_referenced_fails(self, repository):
        canonical = repository.intern(presets.bold())
        with pytest.raises(StyleInUseError):
            repository.remove(canonical, is_referenced=lambda style: style is canonical)
        assert canonical in repository

    def test_remove_unknown_fails(self, repository):
        with pytest.raises(StyleNotFoundError):
            repository.remove(presets.bold(), is_referenced=lambda style: False)
        with pytest.raises(KeyError):
            repository.remove(presets.bold(), is_referenced=lambda style: False)

    def test_order_ids_not_reused(self, repository):
        """Test that ids keep increasing after removal and clear."""
        first = repository.intern(presets.bold())
        repository.remove(first, is_referenced=lambda style: False)
        second = repository.intern(presets.bold())
        assert second is not first
        assert second.order_id == 1

        repository.clear()
        assert len(repository) == 0
        third = repository.intern(presets.italic())
        assert third.order_id == 2

    def test_remove_keeps_other_ids(self, repository):
        styles = [repository.intern(numbered_style(n)) for n in SEQUENCE]
        repository.remove(styles[1], is_referenced=lambda style: False)
        assert [s.order_id for s in repository.enumerate()] == [0, 2, 3, 4]

    def test_remove_by_equal_copy(self, repository):
        style = Style()
        style.border.top_style = BorderStyle.DASHED
        canonical = repository.intern(style)
        removed = repository.remove(canonical.copy(), is_referenced=lambda s: False)
        assert removed is canonical
