"""
Tests for the Complex value type

Checks:
1. Magnitude, phase, conjugate
2. Arithmetic with Complex and plain real operands
3. Division by (near) zero returns the (inf, inf) sentinel
4. Immutability
"""

import math

import pytest
from pydantic import ValidationError

from fermat.core.domain import Complex


class TestComplexProperties:
    """Tests for derived properties"""

    def test_magnitude(self):
        assert Complex(re=3, im=4).magnitude == 5.0
        assert Complex().magnitude == 0.0

    def test_phase(self):
        assert Complex(re=0, im=1).phase == pytest.approx(math.pi / 2)
        assert Complex(re=-1, im=0).phase == pytest.approx(math.pi)

    def test_conjugate(self):
        assert Complex(re=1, im=2).conjugate == Complex(re=1, im=-2)

    def test_str(self):
        assert str(Complex(re=1, im=2)) == "1.0 + 2.0i"
        assert str(Complex(re=0, im=2)) == "2.0i"
        assert str(Complex(re=3, im=0)) == "3.0"


class TestComplexArithmetic:
    """Tests for add/subtract/multiply/divide"""

    def test_add_subtract(self):
        a = Complex(re=1, im=2)
        b = Complex(re=3, im=-1)
        assert a + b == Complex(re=4, im=1)
        assert a - b == Complex(re=-2, im=3)

    def test_multiply(self):
        """(1 + 2i)(3 + 4i) = -5 + 10i"""
        assert Complex(re=1, im=2) * Complex(re=3, im=4) == Complex(re=-5, im=10)

    def test_divide(self):
        q = Complex(re=-5, im=10) / Complex(re=3, im=4)
        assert q.re == pytest.approx(1.0)
        assert q.im == pytest.approx(2.0)

    def test_divide_by_imaginary_unit(self):
        q = Complex(re=1).divide(Complex(im=1))
        assert q.re == pytest.approx(0.0)
        assert q.im == pytest.approx(-1.0)

    def test_real_operands_promoted(self):
        """Plain numbers act as (x, 0), on either side"""
        z = Complex(re=1, im=1)
        assert z + 1 == Complex(re=2, im=1)
        assert 1 + z == Complex(re=2, im=1)
        assert 2 * z == Complex(re=2, im=2)
        assert 3 - z == Complex(re=2, im=-1)
        assert -z == Complex(re=-1, im=-1)

    def test_promote_rejects_non_numbers(self):
        with pytest.raises(TypeError):
            Complex.promote("1+2i")
        with pytest.raises(TypeError):
            Complex(re=1).add(None)

    def test_multiplication_matches_builtin(self):
        """Results agree with Python's complex type"""
        for a, b in [((1.5, -2.0), (0.5, 3.0)), ((-4.0, 1.0), (2.0, 2.0))]:
            expected = complex(*a) * complex(*b)
            result = Complex(re=a[0], im=a[1]) * Complex(re=b[0], im=b[1])
            assert result.re == pytest.approx(expected.real)
            assert result.im == pytest.approx(expected.imag)


class TestComplexDivisionByZero:
    """Division by a near-zero divisor"""

    def test_zero_divisor_sentinel(self):
        q = Complex(re=1, im=1).divide(Complex())
        assert q.re == math.inf
        assert q.im == math.inf

    def test_near_zero_divisor_sentinel(self):
        q = Complex(re=1) / Complex(re=1e-9, im=-1e-9)
        assert q == Complex(re=math.inf, im=math.inf)

    def test_one_zero_component_is_not_zero(self):
        """Only a divisor with both parts ≈ 0 triggers the sentinel"""
        q = Complex(re=2).divide(Complex(re=2, im=0))
        assert q == Complex(re=1, im=0)

    def test_explicit_tolerance(self):
        q = Complex(re=1).divide(Complex(re=0.01, im=0.01), tol=0.1)
        assert q == Complex(re=math.inf, im=math.inf)


class TestComplexImmutability:
    """Complex is a frozen model"""

    def test_cannot_modify(self):
        z = Complex(re=1, im=2)
        with pytest.raises(ValidationError):
            z.re = 5

    def test_hashable(self):
        assert len({Complex(re=1), Complex(re=1), Complex(im=1)}) == 2
