"""Tests for the fragment model."""

import dataclasses

import pytest

from selectorkit.model import Fragment, FragmentKind


class TestFragmentKind:
    def test_values(self):
        assert FragmentKind("pseudo-class") is FragmentKind.PSEUDO_CLASS
        assert FragmentKind.COMBINATOR.value == "combinator"

    def test_member_count(self):
        assert len(FragmentKind) == 7


class TestFragment:
    def test_str_is_text(self):
        assert str(Fragment(kind=FragmentKind.ID, text="#main")) == "#main"

    def test_equality(self):
        a = Fragment(kind=FragmentKind.CLASS, text=".x")
        b = Fragment(kind=FragmentKind.CLASS, text=".x")
        assert a == b
        assert hash(a) == hash(b)

    def test_frozen(self):
        fragment = Fragment(kind=FragmentKind.CLASS, text=".x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            fragment.text = ".y"
