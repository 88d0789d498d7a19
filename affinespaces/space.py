"""
The capabilities of a point in an affine space, and the arithmetic permitted on such points

A point in an affine space is much like a point in Cartesian space, except that no special
meaning may be given to the origin. Consequently, a point has none of the abilities of a vector
which depend on the origin: it can't be scaled (that's relative to the origin), negated
(reflection about the origin), or added to another point (coordinates being relative to the origin).

What remains is displacement: a vector may be added to or subtracted from a point, giving another
point, and the difference between two points is the vector which displaces one to the other.
Each forbidden operation raises its own error type, so that the mistake is named where it's made.
"""

import abc
from typing import Any, Iterator, Optional, TypeVar

import numpy as np

from affinespaces.exceptions import (
    CoordinateIndexError,
    DimensionalityError,
    PointAdditionError,
    PointNegationError,
    PointScalingError,
    VectorMinusPointError,
)
from affinespaces.numeric_types import CoordinateVector, NumberLike, as_coordinate_vector, is_number_like

__all__ = ["AffineSpace"]

_S = TypeVar("_S", bound="AffineSpace")


def _as_displacement(obj: Any) -> Optional[CoordinateVector]:
    # Only array-likes are candidate vectors; anything else is left to the NotImplemented protocol.
    if isinstance(obj, (np.ndarray, list, tuple)):
        return as_coordinate_vector(obj)
    return None


class AffineSpace(abc.ABC):
    """
    Abstraction of a point in an affine space, with coordinates stored in a 1D numeric array.

    Concrete types provide the coordinates (pos) and a way to build a new instance of the same
    type at other coordinates (moved_to). In return they get coordinate access, display, and the
    restricted arithmetic of affine points.
    """

    # Make numpy arrays on the left of an operator defer to the reflected operators here.
    __array_ufunc__ = None

    @property
    @abc.abstractmethod
    def pos(self) -> CoordinateVector:
        """The coordinates of this point, relative to an arbitrary origin"""

    @abc.abstractmethod
    def moved_to(self: _S, pos: CoordinateVector) -> _S:
        """Build a point of this same type, located at the given coordinates."""

    @property
    def dimension(self) -> int:
        return len(self.pos)

    @property
    def shape(self) -> tuple[int, ...]:
        return self.pos.shape

    def size(self, dim: Optional[int] = None) -> int | tuple[int, ...]:
        """The shape of the coordinates, or the extent along a single axis if one is given."""
        return self.shape if dim is None else np.size(self.pos, dim)

    def __len__(self) -> int:
        return len(self.pos)

    def __iter__(self) -> Iterator[NumberLike]:
        return iter(self.pos)

    def __getitem__(self, i: int) -> NumberLike:
        return self.pos[self._validate_index(i)]

    def __setitem__(self, i: int, value: NumberLike) -> None:
        i = self._validate_index(i)
        if not is_number_like(value):
            raise TypeError(f"Coordinate value must be a real number, not {type(value).__name__}")
        if np.issubdtype(self.pos.dtype, np.integer):
            try:
                converted = self.pos.dtype.type(value)
            except (OverflowError, ValueError) as e:
                raise ValueError(f"Coordinate value {value} can't be stored as {self.pos.dtype}") from e
            if converted != value:
                raise ValueError(f"Coordinate value {value} can't be stored as {self.pos.dtype} without loss")
        self.pos[i] = value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.shape == other.shape \
            and bool(np.array_equal(self.pos, other.pos)) \
            and self._fields_beyond_coordinates() == other._fields_beyond_coordinates()

    def __str__(self) -> str:
        return np.array2string(self.pos, separator=", ")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"

    def __add__(self, other: Any) -> "AffineSpace":
        if isinstance(other, AffineSpace):
            raise PointAdditionError()
        vec = _as_displacement(other)
        if vec is None:
            return NotImplemented
        return self.moved_to(self.pos + self._check_displacement(vec))

    def __radd__(self, other: Any) -> "AffineSpace":
        vec = _as_displacement(other)
        if vec is None:
            return NotImplemented
        return self.moved_to(self._check_displacement(vec) + self.pos)

    def __sub__(self, other: Any) -> "AffineSpace | CoordinateVector":
        if isinstance(other, AffineSpace):
            if other.dimension != self.dimension:
                raise DimensionalityError(
                    f"Cannot find displacement between points of different dimension: {self.dimension} and {other.dimension}"
                )
            return self.pos - other.pos
        vec = _as_displacement(other)
        if vec is None:
            return NotImplemented
        return self.moved_to(self.pos - self._check_displacement(vec))

    def __rsub__(self, other: Any) -> "AffineSpace":
        if _as_displacement(other) is None:
            return NotImplemented
        raise VectorMinusPointError()

    def __mul__(self, other: Any) -> "AffineSpace":
        if is_number_like(other):
            raise PointScalingError()
        return NotImplemented

    def __rmul__(self, other: Any) -> "AffineSpace":
        if is_number_like(other):
            raise PointScalingError()
        return NotImplemented

    def __truediv__(self, other: Any) -> "AffineSpace":
        if is_number_like(other):
            raise PointScalingError()
        return NotImplemented

    def __neg__(self) -> "AffineSpace":
        raise PointNegationError()

    def __or__(self, other: Any):
        from affinespaces.subspace import span
        if isinstance(other, AffineSpace):
            return span(self, other)
        return NotImplemented

    def _fields_beyond_coordinates(self) -> tuple[Any, ...]:
        """Values other than the coordinates which also determine equality of points of this type"""
        return ()

    def _check_displacement(self, vec: CoordinateVector) -> CoordinateVector:
        if len(vec) != self.dimension:
            raise DimensionalityError(
                f"Displacement vector length ({len(vec)}) doesn't match point dimension ({self.dimension})"
            )
        return vec

    def _validate_index(self, i: Any) -> int:
        if isinstance(i, (bool, np.bool_)) or not isinstance(i, (int, np.integer)):
            raise TypeError(f"Coordinate index must be an integer, not {type(i).__name__}")
        if not -self.dimension <= i < self.dimension:
            raise CoordinateIndexError(index=i, dimension=self.dimension)
        return i
