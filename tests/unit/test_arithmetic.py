"""
Тесты для kernels комплексной арифметики

Проверяет:
1. Формулы сложения/вычитания/умножения на уровне компонент
2. Обе ветки алгоритма Smith'а
3. Отсутствие ложного overflow/underflow при делении
4. Деление real на complex (знак мнимой части)
5. Сохранение dtype компонент
"""

import numpy as np
import pytest

from src.core.math.arithmetic import (
    add_parts,
    div_parts,
    mul_parts,
    rdiv_parts,
    scale_parts,
    sub_parts,
    unscale_parts,
)

f64 = np.float64


class TestAddSubMul:
    """Тесты сложения, вычитания и умножения"""

    def test_add(self) -> None:
        """Покомпонентное сложение"""
        assert add_parts(f64(1), f64(2), f64(3), f64(4)) == (4.0, 6.0)

    def test_sub(self) -> None:
        """Покомпонентное вычитание"""
        assert sub_parts(f64(1), f64(2), f64(3), f64(5)) == (-2.0, -3.0)

    def test_mul(self) -> None:
        """(1+2i)(3+4i) = -5 + 10i"""
        assert mul_parts(f64(1), f64(2), f64(3), f64(4)) == (-5.0, 10.0)

    def test_mul_i_squared(self) -> None:
        """i·i = -1"""
        assert mul_parts(f64(0), f64(1), f64(0), f64(1)) == (-1.0, 0.0)

    def test_scale_unscale(self) -> None:
        """Масштабирование на real scalar"""
        assert scale_parts(f64(1), f64(-2), f64(3)) == (3.0, -6.0)
        assert unscale_parts(f64(3), f64(-6), f64(3)) == (1.0, -2.0)

    def test_dtype_preserved(self) -> None:
        """float32 на входе → float32 на выходе"""
        re, im = mul_parts(np.float32(1), np.float32(2), np.float32(3), np.float32(4))
        assert type(re) is np.float32
        assert type(im) is np.float32


class TestSmithDivision:
    """Тесты деления по алгоритму Smith'а"""

    @pytest.mark.parametrize(
        "n, d",
        [
            (1 + 1j, 0.5 + 2j),  # |d.re| < |d.im|
            (1 + 1j, 2 + 0.5j),  # |d.re| >= |d.im|
            (-3 + 7j, 4 - 4j),  # |d.re| == |d.im|
            (2 - 5j, -1 + 0j),  # чисто real делитель
            (2 - 5j, 0 - 3j),  # чисто мнимый делитель
        ],
    )
    def test_matches_reference(self, n: complex, d: complex) -> None:
        """Обе ветки совпадают с эталонным делением"""
        re, im = div_parts(f64(n.real), f64(n.imag), f64(d.real), f64(d.imag))
        expected = n / d
        assert re == pytest.approx(expected.real, rel=1e-15, abs=1e-300)
        assert im == pytest.approx(expected.imag, rel=1e-15, abs=1e-300)

    def test_no_spurious_overflow(self) -> None:
        """Большие компоненты: d_re² + d_im² переполнился бы"""
        big = f64(1e300)
        re, im = div_parts(big, big, big, big)
        assert re == 1.0
        assert im == 0.0

    def test_no_spurious_underflow(self) -> None:
        """Малые компоненты: d_re² + d_im² ушёл бы в ноль"""
        tiny = f64(1e-300)
        re, im = div_parts(f64(1), f64(1), tiny, tiny)
        assert re == pytest.approx(1e300, rel=1e-15)
        assert im == 0.0

    def test_zero_divisor_not_special_cased(self) -> None:
        """d = 0 → NaN/Inf без исключений и warnings"""
        re, im = div_parts(f64(1), f64(1), f64(0), f64(0))
        assert not np.isfinite(re)
        assert not np.isfinite(im)

    def test_float32_large_values(self) -> None:
        """В float32 1e30² переполнился бы, Smith — нет"""
        big = np.float32(1e30)
        re, im = div_parts(big, np.float32(0), big, big)
        assert type(re) is np.float32
        assert re == pytest.approx(0.5, rel=1e-6)
        assert im == pytest.approx(-0.5, rel=1e-6)


class TestRealDividedByComplex:
    """Тесты rdiv_parts"""

    @pytest.mark.parametrize("d", [3 + 4j, 4 + 3j, -1 + 0.25j, 0.25 - 1j])
    def test_matches_reference(self, d: complex) -> None:
        """a / d совпадает с эталоном в обеих ветках"""
        re, im = rdiv_parts(f64(2.5), f64(d.real), f64(d.imag))
        expected = 2.5 / d
        assert re == pytest.approx(expected.real, rel=1e-15)
        assert im == pytest.approx(expected.imag, rel=1e-15)

    def test_imag_sign_negated(self) -> None:
        """1 / (1 + i) = 0.5 - 0.5i"""
        assert rdiv_parts(f64(1), f64(1), f64(1)) == (0.5, -0.5)

    def test_matches_complex_division(self) -> None:
        """a / d == (a + 0i) / d"""
        a, d_re, d_im = f64(7.0), f64(-2.0), f64(9.0)
        assert rdiv_parts(a, d_re, d_im) == pytest.approx(div_parts(a, f64(0), d_re, d_im))

    def test_no_spurious_overflow(self) -> None:
        """Большой делитель"""
        re, im = rdiv_parts(f64(1e300), f64(1e300), f64(1e300))
        assert re == 0.5
        assert im == -0.5
