"""Custom exception types to more accurately represent misuse of affine points"""

__all__ = [
    "AffineSpaceException",
    "CoordinateIndexError",
    "DimensionalityError",
    "InvalidAffineOperationError",
    "PointAdditionError",
    "PointNegationError",
    "PointScalingError",
    "VectorMinusPointError",
    "WeightCountError",
    "WeightSumError",
    ]


class AffineSpaceException(Exception):
    "General base for exceptional situations related to the specifics of this project"
    pass


class DimensionalityError(AffineSpaceException):
    """Error subtype for when one or more dimensions of an object are unexpected"""
    pass


class CoordinateIndexError(AffineSpaceException, IndexError):
    """Error subtype for when a coordinate index is out of bounds for a point"""

    def __init__(self, index: int, dimension: int):
        super().__init__(f"Coordinate index {index} is out-of-bounds [{-dimension}, {dimension}) for point of dimension {dimension}")
        self.index = index
        self.dimension = dimension


class InvalidAffineOperationError(AffineSpaceException, TypeError):
    """
    Error subtype for arithmetic which is meaningless without an origin
    
    Each subtype carries a fixed message, so that the violated rule is named at the call site.
    """
    message: str = "Invalid operation on affine point"

    def __init__(self):
        super().__init__(self.message)


class PointAdditionError(InvalidAffineOperationError):
    message = "Cannot add affine points; add a displacement vector instead"


class PointScalingError(InvalidAffineOperationError):
    message = "Cannot scale affine points; scaling is relative to the origin"


class PointNegationError(InvalidAffineOperationError):
    message = "The additive inverse of an affine point is not defined"


class VectorMinusPointError(InvalidAffineOperationError):
    message = "Cannot subtract an affine point from a vector"


class WeightCountError(AffineSpaceException, TypeError):
    """Error subtype for when the number of weights can't define an affine combination of the spanning points"""

    def __init__(self, *, num_points: int, num_weights: int):
        super().__init__(
            f"Wrong number of weights for affine combination of {num_points} point(s): need {num_points} or {num_points - 1}, got {num_weights}"
        )
        self.num_points = num_points
        self.num_weights = num_weights


class WeightSumError(AffineSpaceException, ValueError):
    """Error subtype for when a full set of combination weights doesn't sum to 1"""

    def __init__(self, *, total: float, tolerance: float):
        super().__init__(f"Weights for affine combination must sum to 1 (tolerance {tolerance}), but sum to {total}")
        self.total = total
        self.tolerance = tolerance
