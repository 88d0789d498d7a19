"""The concrete affine point type"""

from typing import Any

import attrs
import numpy as np
from expression import Result

from affinespaces.exceptions import DimensionalityError
from affinespaces.numeric_types import CoordinateVector, as_coordinate_vector
from affinespaces.space import AffineSpace
from affinespaces.utilities import wrap_error_message, wrap_exception

__all__ = ["AffinePoint"]


def _own_coordinates(obj: Any) -> CoordinateVector:
    # Copy, so that the point never aliases the caller's array.
    return np.array(as_coordinate_vector(obj), copy=True)


@attrs.define(frozen=True, eq=False, repr=False)
class AffinePoint(AffineSpace):
    """
    A point in an affine space, with Cartesian coordinates stored in a 1D numpy array.

    The coordinates can't be rebound, but a single coordinate may be overwritten in place,
    e.g. point[0] = 1.5, which keeps both the dimension and the element type of the point.
    A value the element type can't hold exactly, like 1.5 in an integer point, is a ValueError.
    See AffineSpace for the arithmetic which is and isn't permitted.
    """
    pos = attrs.field(converter=_own_coordinates) # type: CoordinateVector

    def moved_to(self, pos: CoordinateVector) -> "AffinePoint":
        return attrs.evolve(self, pos=pos)

    def _fields_beyond_coordinates(self) -> tuple[Any, ...]:
        # Subtypes declaring further fields have those compared too.
        return tuple(getattr(self, a.name) for a in attrs.fields(type(self)) if a.name != "pos")

    @classmethod
    def from_coordinates(cls, values: Any) -> Result["AffinePoint", str]:
        @wrap_error_message(f"Building {cls.__name__} from coordinates")
        @wrap_exception((TypeError, DimensionalityError))
        def safe_build(vs: Any) -> "AffinePoint":
            return cls(vs)

        return safe_build(values)

    @classmethod
    def unsafe_from_coordinates(cls, values: Any) -> "AffinePoint":
        return cls(values)
