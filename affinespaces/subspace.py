"""Spans of affine points, and the affine combinations which they define"""

import logging
import math
from typing import Any, Final, Iterable, Iterator

import attrs
import numpy as np
from expression import Result
from numpydoc_decorator import doc

from affinespaces.exceptions import AffineSpaceException, DimensionalityError, WeightCountError, WeightSumError
from affinespaces.numeric_types import CoordinateVector, NumberLike, is_number_like
from affinespaces.space import AffineSpace
from affinespaces.utilities import check_all_of_type, wrap_exception

__all__ = ["WEIGHT_SUM_TOLERANCE", "AffineSubSpace", "mean", "span"]

# Approximate equality for the sum of a full set of weights, as square root of machine epsilon
WEIGHT_SUM_TOLERANCE: Final[float] = math.sqrt(np.finfo(np.float64).eps)


def _check_uniform_points(points: Iterable[Any]) -> None:
    points = list(points)
    check_all_of_type(AffineSpace)(points)
    types = {type(p) for p in points}
    if len(types) > 1:
        raise TypeError(f"Points must all be of the same type; got: {', '.join(sorted(t.__name__ for t in types))}")
    dimensions = {p.dimension for p in points}
    if len(dimensions) > 1:
        raise DimensionalityError(f"Points must all have the same dimension; got: {', '.join(map(str, sorted(dimensions)))}")


def _widened(pos: CoordinateVector) -> CoordinateVector:
    # Sums of small integer coordinates would otherwise wrap around.
    return pos.astype(np.result_type(pos, np.float64))


@attrs.define(frozen=True)
class AffineSubSpace:
    """
    An ordered, fixed-size collection of points, defining the set of all their affine combinations

    Build one by spanning points, e.g. p1 | p2 | p3, and index it with weights to get a point:
    for two points, (p1 | p2)[0] is p1, (p1 | p2)[1] is p2, and other values trace the line through
    the two. Generally, (p1 | ... | pn)[w1, ..., wn] requires weights summing to 1, while
    (p1 | ... | pn)[w2, ..., wn] leaves out the weight for p1, taking it to be 1 minus the rest.

    The points are shared rather than copied, so overwriting a coordinate of a member point
    is visible through the subspace.
    """
    points = attrs.field(validator=[
        attrs.validators.instance_of(tuple),
        attrs.validators.min_len(1),
        lambda _1, _2, points: _check_uniform_points(points),
    ]) # type: tuple[AffineSpace, ...]

    @property
    def dimension(self) -> int:
        """Dimension of the space in which the spanning points live"""
        return self.points[0].dimension

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[AffineSpace]:
        return iter(self.points)

    def __or__(self, other: Any) -> "AffineSubSpace":
        if isinstance(other, AffineSpace):
            return self.extend(other)
        return NotImplemented

    def __getitem__(self, weights: NumberLike | tuple[NumberLike, ...]) -> AffineSpace:
        match weights:
            case tuple():
                return self.combine(*weights)
            case _:
                return self.combine(weights)

    def extend(self, *points: AffineSpace) -> "AffineSubSpace":
        """Build the subspace spanned by this one's points followed by the given ones."""
        logging.debug("Extending span of %d point(s) with %d more", len(self), len(points))
        return AffineSubSpace(self.points + points)

    def combine(self, *weights: NumberLike) -> AffineSpace:
        """
        Take the affine combination of the spanning points with the given weights.

        Parameters
        ----------
        weights : sequence of NumberLike
            Either one weight per point, summing to 1 (up to WEIGHT_SUM_TOLERANCE), or one weight
            for each point after the first, in which case the first point gets 1 minus their sum

        Returns
        -------
        AffineSpace
            Point of the same type as the spanning points, at the weighted sum of their coordinates,
            computed in floating point so that integer coordinates can't overflow

        Raises
        ------
        TypeError
            If any weight isn't a real number
        WeightCountError
            If the number of weights is neither the number of points nor one less
        WeightSumError
            If there's a weight for each point, but the weights don't sum to 1
        """
        for w in weights:
            if not is_number_like(w):
                raise TypeError(f"Weight for affine combination must be a real number, not {type(w).__name__}")
        num_points = len(self)
        if len(weights) == num_points:
            total = math.fsum(weights)
            if not math.isclose(total, 1.0, rel_tol=WEIGHT_SUM_TOLERANCE, abs_tol=WEIGHT_SUM_TOLERANCE):
                raise WeightSumError(total=total, tolerance=WEIGHT_SUM_TOLERANCE)
        elif len(weights) == num_points - 1:
            first_weight = 1 - sum(weights)
            logging.debug("Derived weight for first of %d point(s): %s", num_points, first_weight)
            weights = (first_weight, *weights)
        else:
            raise WeightCountError(num_points=num_points, num_weights=len(weights))
        coordinates = sum(w * _widened(p.pos) for w, p in zip(weights, self.points, strict=True))
        return self.points[0].moved_to(coordinates)

    def try_combine(self, *weights: NumberLike) -> Result[AffineSpace, Exception]:
        """
        Take the affine combination of the spanning points, wrapping the outcome rather than raising.

        Every failure of combine is caught: the library's own errors, and the TypeError of a weight
        which isn't a real number.
        """
        return wrap_exception((AffineSpaceException, TypeError))(self.combine)(*weights)

    def mean(self) -> AffineSpace:
        """The unweighted centroid of the spanning points"""
        return mean(self.points)


def span(*points: AffineSpace) -> AffineSubSpace:
    """Build the subspace spanned by the given points, in the given order."""
    if len(points) < 2:
        raise ValueError(f"Need at least 2 points to span a subspace, got {len(points)}")
    return AffineSubSpace(points)


@doc(
    summary="Compute the unweighted centroid of the given points",
    extended_summary="""
        This is the affine combination with every weight equal to 1/N, but computed directly
        from the coordinates, with no need to first build a subspace from the points.
    """,
    parameters=dict(points="The points to average, all of the same type and dimension"),
    raises=dict(
        ValueError="If no points are given",
        TypeError="If the points aren't all affine points of the same type",
        DimensionalityError="If the points don't all have the same dimension",
    ),
    returns="Point of the same type as those given, located at their centroid",
)
def mean(points: Iterable[AffineSpace]) -> AffineSpace:
    points = tuple(points)
    if len(points) == 0:
        raise ValueError("Cannot take the mean of an empty collection of points")
    _check_uniform_points(points)
    return points[0].moved_to(sum(_widened(p.pos) for p in points) / len(points))
