"""Tests for recognition of scalars and coordinate vectors"""

from hypothesis import given, strategies as st
import numpy as np
import pytest

from affinespaces import DimensionalityError
from affinespaces.numeric_types import as_coordinate_vector, is_number_like
from affinespaces.utilities import check_all_of_type


@given(st.one_of(st.integers(), st.floats()))
def test_python_numbers_are_number_like(x):
    assert is_number_like(x)


@pytest.mark.parametrize("x", [np.int8(1), np.uint64(2), np.float32(0.5), np.float64(-1.0)])
def test_numpy_scalars_are_number_like(x):
    assert is_number_like(x)


@pytest.mark.parametrize("x", [True, False, np.bool_(True), "1", None, [1], np.array([1.0]), 1j])
def test_other_objects_are_not_number_like(x):
    assert not is_number_like(x)


def test_array_is_not_copied():
    arr = np.array([1, 2, 3])
    assert as_coordinate_vector(arr) is arr


@pytest.mark.parametrize(
    ["obj", "expected_message"], [
        (np.zeros((1, 3)), "Coordinate vector must be 1D, not 2D (shape (1, 3))"),
        (np.array(2), "Coordinate vector must be 1D, not 0D (shape ())"),
    ])
def test_non_1d_array_is_dimensionality_error(obj, expected_message):
    with pytest.raises(DimensionalityError) as err_ctx:
        as_coordinate_vector(obj)
    assert str(err_ctx.value) == expected_message


def test_check_all_of_type_names_first_offender():
    with pytest.raises(TypeError) as err_ctx:
        check_all_of_type(int)([1, 2, "three", 4.0])
    assert str(err_ctx.value) == "First item not of type int is of type str"


def test_check_all_of_type_accepts_empty_and_uniform_collections():
    check_all_of_type(int)([])
    check_all_of_type(int)(iter([1, 2, 3]))
