"""
Тесты для элементарных функций

Проверяет:
1. sqrt в principal branch (re >= 0) без переполнения
2. sin/cos: совпадение с real функциями при im = 0
3. expi и его точность
"""

import math

import numpy as np
import pytest

from src.core.domain.complex_value import Complex
from src.core.domain.operations import cos, expi, sin, sqrt
from src.core.domain.precision import Precision
from src.core.math.elementary import coshisinh_parts, sqrt_parts
from src.core.math.tolerance import approx_equal

EPS = float(np.finfo(np.float64).eps)


class TestSqrt:
    """Тесты для sqrt"""

    def test_zero(self) -> None:
        """sqrt(0) = 0"""
        assert sqrt(Complex(0.0, 0.0)) == 0

    def test_one(self) -> None:
        """sqrt(1) = 1"""
        assert sqrt(Complex(1.0, 0.0)) == 1

    def test_minus_one(self) -> None:
        """sqrt(-1) = i"""
        assert sqrt(Complex(-1.0, 0.0)) == Complex(0.0, 1.0)

    def test_perfect_square(self) -> None:
        """sqrt(-3 + 4i) = 1 + 2i"""
        z = sqrt(Complex(-3.0, 4.0))
        assert z.re == pytest.approx(1.0, rel=1e-15)
        assert z.im == pytest.approx(2.0, rel=1e-15)

    @pytest.mark.parametrize(
        "re, im",
        [(4.0, 1.0), (1.0, 4.0), (-4.0, 1.0), (-1.0, -4.0), (0.0, -2.0), (-2.5, 0.0)],
    )
    def test_matches_reference(self, re: float, im: float) -> None:
        """Все четыре квадранта совпадают с эталонным principal sqrt"""
        z = sqrt(Complex(re, im))
        expected = complex(re, im) ** 0.5
        assert z.re >= 0
        assert z.re == pytest.approx(expected.real, rel=1e-14, abs=1e-15)
        assert z.im == pytest.approx(expected.imag, rel=1e-14, abs=1e-15)

    def test_no_overflow(self) -> None:
        """Большие компоненты не переполняют промежуточные квадраты"""
        big = np.finfo(np.float64).max / 2
        z = sqrt(Complex(big, big))
        assert np.isfinite(z.re)
        assert np.isfinite(z.im)

    def test_float32_no_overflow(self) -> None:
        """В float32 1e30² переполнился бы"""
        z = sqrt(Complex(np.float32(1e30), np.float32(0)))
        assert z.precision is Precision.SINGLE
        assert float(z.re) == pytest.approx(1e15, rel=1e-6)

    def test_square_of_root(self) -> None:
        """sqrt(z)² ≈ z"""
        z = Complex(0.5, -2.0)
        root = sqrt(z)
        back = root * root
        assert approx_equal(float(back.re), 0.5, EPS)
        assert approx_equal(float(back.im), -2.0, EPS)

    def test_keeps_precision(self) -> None:
        """Результат в точности аргумента"""
        z = Complex(np.longdouble(2), np.longdouble(0))
        assert sqrt(z).precision is Precision.EXTENDED

    def test_kernel_zero_dtype(self) -> None:
        """Нулевой аргумент → нули того же dtype"""
        re, im = sqrt_parts(np.float32(0), np.float32(0))
        assert type(re) is np.float32
        assert type(im) is np.float32


class TestSinCos:
    """Тесты для sin и cos"""

    @pytest.mark.parametrize("x", [0.0, 0.5, 1.0, -2.0, 3.0])
    def test_real_argument(self, x: float) -> None:
        """При im = 0 совпадают с real sin/cos"""
        s = sin(Complex(x, 0.0))
        c = cos(Complex(x, 0.0))
        assert approx_equal(float(s.re), math.sin(x), EPS)
        assert approx_equal(float(c.re), math.cos(x), EPS)
        assert s.im == 0.0
        assert c.im == 0.0

    def test_cos_imaginary_is_cosh(self) -> None:
        """cos(5.2i) = cosh(5.2)"""
        z = cos(Complex(0.0, 5.2))
        assert approx_equal(float(z.re), math.cosh(5.2), EPS)
        assert z.im == 0.0

    def test_sin_imaginary_is_sinh(self) -> None:
        """sin(2i) = i·sinh(2)"""
        z = sin(Complex(0.0, 2.0))
        assert z.re == 0.0
        assert approx_equal(float(z.im), math.sinh(2.0), EPS)

    @pytest.mark.parametrize("re, im", [(1.0, 1.0), (-0.5, 2.0), (3.0, -0.25)])
    def test_matches_euler(self, re: float, im: float) -> None:
        """sin/cos совпадают с разложением через exp"""
        w = complex(re, im)
        expected_sin = (np.exp(1j * w) - np.exp(-1j * w)) / 2j
        expected_cos = (np.exp(1j * w) + np.exp(-1j * w)) / 2
        s = sin(Complex(re, im))
        c = cos(Complex(re, im))
        assert float(s.re) == pytest.approx(expected_sin.real, rel=1e-13)
        assert float(s.im) == pytest.approx(expected_sin.imag, rel=1e-13)
        assert float(c.re) == pytest.approx(expected_cos.real, rel=1e-13)
        assert float(c.im) == pytest.approx(expected_cos.imag, rel=1e-13)

    def test_keeps_precision(self) -> None:
        """Результат в точности аргумента"""
        z = Complex(np.float32(1), np.float32(1))
        assert sin(z).precision is Precision.SINGLE
        assert cos(z).precision is Precision.SINGLE

    def test_coshisinh_kernel(self) -> None:
        """coshisinh(0) = (1, 0)"""
        assert coshisinh_parts(np.float64(0)) == (1.0, 0.0)


class TestExpi:
    """Тесты для expi"""

    def test_zero(self) -> None:
        """expi(0) = 1"""
        assert expi(0.0) == 1

    def test_large_argument(self) -> None:
        """expi(1.3e5) = (cos, sin) от того же аргумента"""
        value = 1.3e5
        z = expi(value)
        assert approx_equal(float(z.re), math.cos(value), EPS)
        assert approx_equal(float(z.im), math.sin(value), EPS)

    def test_unit_modulus(self) -> None:
        """|expi(y)| = 1"""
        assert float(abs(expi(2.7))) == pytest.approx(1.0, rel=1e-15)

    def test_precision_of_argument(self) -> None:
        """Точность результата — точность аргумента"""
        assert expi(np.float32(1)).precision is Precision.SINGLE
        assert expi(1.0).precision is Precision.DOUBLE
        assert expi(np.longdouble(1)).precision is Precision.EXTENDED

    def test_integer_argument_is_double(self) -> None:
        """Не-floating аргумент → DOUBLE"""
        z = expi(0)
        assert z.precision is Precision.DOUBLE
        assert z == 1
