"""
Tests for the Vector value type

Checks:
1. Construction and aggregates
2. Zero-padded element-wise operations
3. Dot and cross products
4. Degenerate results (NaN sentinels)
"""

import math

import pytest
from pydantic import ValidationError

from fermat.core.domain import Vector
from fermat.core.math.exceptions import InvalidArgument, InvalidShape


@pytest.fixture
def v123():
    return Vector.of([1, 2, 3])


class TestVectorConstruction:
    """Tests for constructors and sequence access"""

    def test_of(self, v123):
        assert v123.values == (1.0, 2.0, 3.0)
        assert len(v123) == 3
        assert v123[1] == 2.0

    def test_filled(self):
        assert Vector.filled(3, 2.0).values == (2.0, 2.0, 2.0)
        assert len(Vector.filled(0)) == 0

    def test_filled_negative_length(self):
        with pytest.raises(InvalidArgument):
            Vector.filled(-1)

    def test_immutable(self, v123):
        with pytest.raises(ValidationError):
            v123.values = (0.0,)

    def test_str(self):
        assert str(Vector.of([1, 2])) == "(1.0, 2.0)"


class TestVectorAggregates:
    """Tests for total, average, norm, min, max"""

    def test_aggregates(self, v123):
        assert v123.total == 6.0
        assert v123.average == 2.0
        assert v123.min == 1.0
        assert v123.max == 3.0

    def test_norm(self):
        assert Vector.of([3, 4]).norm == 5.0

    def test_empty_average_is_nan(self):
        assert math.isnan(Vector().average)


class TestVectorOperations:
    """Tests for scale, normalize and element-wise arithmetic"""

    def test_scale(self, v123):
        assert v123.scale(2).values == (2.0, 4.0, 6.0)

    def test_normalize(self):
        unit = Vector.of([3, 4]).normalize()
        assert unit.values == pytest.approx((0.6, 0.8))
        assert unit.norm == pytest.approx(1.0)

    def test_normalize_zero_vector(self):
        """Zero vector normalizes to NaN entries"""
        result = Vector.of([0, 0]).normalize()
        assert len(result) == 2
        assert all(math.isnan(x) for x in result.values)

    def test_add_subtract(self, v123):
        other = Vector.of([1, 1, 1])
        assert (v123 + other).values == (2.0, 3.0, 4.0)
        assert (v123 - other).values == (0.0, 1.0, 2.0)

    def test_shorter_operand_padded_with_zeros(self, v123):
        """Result length is the longer operand's length"""
        assert v123.add(Vector.of([1])).values == (2.0, 2.0, 3.0)
        assert Vector.of([1]).subtract(v123).values == (0.0, -2.0, -3.0)
        assert v123.product(Vector.of([2, 2])).values == (2.0, 4.0, 0.0)

    def test_product(self, v123):
        assert v123.product(v123).values == (1.0, 4.0, 9.0)


class TestVectorProducts:
    """Tests for dot, cross2d, cross"""

    def test_dot(self, v123):
        assert v123.dot(Vector.of([4, 5, 6])) == 32.0

    def test_dot_padded(self, v123):
        assert v123.dot(Vector.of([1, 1])) == 3.0

    def test_cross2d(self):
        assert Vector.of([1, 0]).cross2d(Vector.of([0, 1])) == 1.0
        assert Vector.of([0, 1]).cross2d(Vector.of([1, 0])) == -1.0

    def test_cross2d_too_short(self):
        with pytest.raises(InvalidShape):
            Vector.of([1]).cross2d(Vector.of([1, 2]))

    def test_cross(self):
        x = Vector.of([1, 0, 0])
        y = Vector.of([0, 1, 0])
        assert x.cross(y).values == (0.0, 0.0, 1.0)
        assert y.cross(x).values == (0.0, 0.0, -1.0)

    def test_cross_is_orthogonal(self, v123):
        w = v123.cross(Vector.of([-2, 0.5, 4]))
        assert w.dot(v123) == pytest.approx(0.0)

    def test_cross_requires_3d(self):
        with pytest.raises(InvalidShape, match="size 3"):
            Vector.of([1, 2]).cross(Vector.of([3, 4]))


class TestVectorEquality:
    """Tests for tolerant equality"""

    def test_equals(self, v123):
        assert v123.equals(Vector.of([1, 2, 3 + 1e-9]))
        assert not v123.equals(Vector.of([1, 2, 3.1]))

    def test_different_length(self, v123):
        assert not v123.equals(Vector.of([1, 2]))
