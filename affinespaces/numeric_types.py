"""Groupings of numeric types and tools for working with them"""

from typing import Any, TypeAlias, Union

import numpy as np
import numpy.typing as npt

from affinespaces.exceptions import DimensionalityError

__all__ = [
    "CoordinateVector",
    "FloatLike",
    "IntegerLike",
    "NumberLike",
    "as_coordinate_vector",
    "is_number_like",
    ]


FloatLike = Union[float, np.float16, np.float32, np.float64]
IntegerLike = Union[int, np.int8, np.uint8, np.int16, np.uint16, np.int32, np.uint32, np.int64, np.uint64]
NumberLike = Union[IntegerLike, FloatLike]

CoordinateVector: TypeAlias = npt.NDArray[np.number]


def is_number_like(obj: Any) -> bool:
    """Determine whether the given object is a real scalar (Boolean values excluded)."""
    if isinstance(obj, (bool, np.bool_)):
        return False
    return isinstance(obj, (int, float, np.integer, np.floating))


def as_coordinate_vector(obj: Any) -> CoordinateVector:
    """
    Interpret the given object as a 1D numeric array.

    Parameters
    ----------
    obj : Any
        The candidate vector, typically a numpy array, list, or tuple of numbers

    Returns
    -------
    np.ndarray
        Array view of (or new array from) the given object

    Raises
    ------
    TypeError
        If the given object isn't array-like or its elements aren't numeric
    DimensionalityError
        If the array isn't 1D
    """
    if not isinstance(obj, (np.ndarray, list, tuple)):
        raise TypeError(f"Coordinate vector must be array, list, or tuple, not {type(obj).__name__}")
    arr = np.asarray(obj)
    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.number):
        raise TypeError(f"Coordinate vector must have numeric elements, not dtype {arr.dtype}")
    if arr.ndim != 1:
        raise DimensionalityError(f"Coordinate vector must be 1D, not {arr.ndim}D (shape {arr.shape})")
    return arr
