"""
Points in affine spaces, where no special meaning can be given to the origin

Points here lack the origin-dependent abilities of vectors: they can't be scaled, negated, or
added together. What they can do is be displaced by a vector, be subtracted from one another
to give the displacement vector between them, and be combined with weights summing to 1, e.g.
(p1 | p2)[0.5] for the midpoint of p1 and p2. The aim is some programmer safety, turning
conceptual mistakes about an arbitrary origin into errors at the call site.
"""

from affinespaces.exceptions import (
    AffineSpaceException,
    CoordinateIndexError,
    DimensionalityError,
    InvalidAffineOperationError,
    PointAdditionError,
    PointNegationError,
    PointScalingError,
    VectorMinusPointError,
    WeightCountError,
    WeightSumError,
)
from affinespaces.point import AffinePoint
from affinespaces.space import AffineSpace
from affinespaces.subspace import WEIGHT_SUM_TOLERANCE, AffineSubSpace, mean, span

__all__ = [
    "WEIGHT_SUM_TOLERANCE",
    "AffinePoint",
    "AffineSpace",
    "AffineSpaceException",
    "AffineSubSpace",
    "CoordinateIndexError",
    "DimensionalityError",
    "InvalidAffineOperationError",
    "PointAdditionError",
    "PointNegationError",
    "PointScalingError",
    "VectorMinusPointError",
    "WeightCountError",
    "WeightSumError",
    "mean",
    "span",
    ]
