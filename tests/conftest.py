"""Test fixtures and utilities"""

import numpy as np
import pytest

from affinespaces import AffinePoint


#################################################################
# Fixtures
#################################################################
@pytest.fixture
def origin_2d() -> AffinePoint:
    return AffinePoint(np.array([0, 0]))


@pytest.fixture
def diagonal_2d() -> AffinePoint:
    return AffinePoint(np.array([2, 2]))


@pytest.fixture
def triangle_2d() -> tuple[AffinePoint, AffinePoint, AffinePoint]:
    return AffinePoint([0, 0]), AffinePoint([3, 0]), AffinePoint([0, 6])
