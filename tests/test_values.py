"""
Tests for letlang runtime values and type tags.
"""

import dataclasses

import pytest

from letlang import (
    Value, int_val, real_val, bool_val, wrap_python,
    INTEGER, REAL, BOOLEAN,
)
from letlang.runtime import widen


class TestValues:
    """Test runtime value wrappers."""

    def test_int_value(self):
        """Test integer value creation."""
        v = int_val(42)
        assert v.data == 42
        assert v.type == INTEGER
        assert v.is_integer and v.is_numeric
        assert not v.is_real and not v.is_boolean

    def test_real_value(self):
        """Test real value creation."""
        v = real_val(3)
        assert v.data == 3.0
        assert isinstance(v.data, float)
        assert v.type == REAL
        assert v.is_real and v.is_numeric

    def test_bool_value(self):
        """Test boolean value creation."""
        v_true = bool_val(True)
        v_false = bool_val(False)
        assert v_true.data is True
        assert v_false.data is False
        assert v_true.type == BOOLEAN
        assert v_true.is_boolean
        assert not v_true.is_numeric

    def test_tags_take_part_in_equality(self):
        """Equal data with different tags are different values."""
        assert int_val(1) == int_val(1)
        assert int_val(1) != real_val(1.0)
        assert int_val(1) != bool_val(True)

    def test_values_are_immutable(self):
        """Values cannot be changed once produced."""
        v = int_val(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.data = 2

    def test_str(self):
        """Test display form of each variant."""
        assert str(int_val(-7)) == "-7"
        assert str(real_val(1.5)) == "1.5"
        assert str(real_val(2)) == "2.0"
        assert str(bool_val(True)) == "true"
        assert str(bool_val(False)) == "false"

    def test_repr(self):
        assert repr(int_val(3)) == "Value(3, int)"


class TestWrapPython:
    """Test wrapping raw Python scalars."""

    def test_bool_is_not_an_int(self):
        """bool must map to BOOLEAN even though it subclasses int."""
        assert wrap_python(True) == bool_val(True)

    def test_int_and_float(self):
        assert wrap_python(5) == int_val(5)
        assert wrap_python(2.5) == real_val(2.5)

    def test_rejects_other_types(self):
        with pytest.raises(ValueError, match="str"):
            wrap_python("five")


class TestWiden:
    """Test numeric widening used by relational comparisons."""

    def test_widen_integer(self):
        result = widen(int_val(3))
        assert result == 3.0
        assert isinstance(result, float)

    def test_widen_real(self):
        assert widen(real_val(0.25)) == 0.25

    def test_widen_out_of_range(self):
        with pytest.raises(OverflowError):
            widen(int_val(10**400))
