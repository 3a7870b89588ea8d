"""
Operations — Функциональный API комплексных чисел

Именованные чистые функции поверх Complex:
- Арифметика: add, sub, mul, div, power, neg, eq
- Polar: modulus, sq_abs, arg, conj, from_polar
- Элементарные функции: expi, sqrt, sin, cos
- Приближённое сравнение: is_close

Функции не мутируют аргументы. Арифметические функции принимают
Complex ⊗ Complex, Complex ⊗ real и real ⊗ Complex; если оба операнда
real, левый поднимается до Complex.
"""

from typing import Final, Optional

import numpy as np

from src.core.domain.complex_value import Complex
from src.core.domain.precision import (
    Precision,
    PrecisionError,
    cast,
    is_real_scalar,
    resolve_construction,
    scalar_precision,
)
from src.core.math.elementary import cos_parts, expi_parts, sin_parts, sqrt_parts
from src.core.math.polar import (
    argument_parts,
    from_polar_parts,
    modulus_parts,
    sq_modulus_parts,
)

# Толерантности is_close по умолчанию
REL_TOL_DEFAULT: Final[float] = 1e-9
ABS_TOL_DEFAULT: Final[float] = 0.0


def _lift(value: object):
    """Complex как есть; пара real ⊗ real — левый операнд поднимается до Complex"""
    if isinstance(value, Complex):
        return value
    if is_real_scalar(value):
        return Complex(value)
    raise PrecisionError(f"Expected Complex or real scalar, got {type(value).__name__}")


def _operands(a: object, b: object) -> tuple:
    if isinstance(a, Complex) or isinstance(b, Complex):
        return a, b
    return _lift(a), b


# =============================================================================
# ФАБРИКА
# =============================================================================


def complex_number(re: object, im: object = 0) -> Complex:
    """
    Complex из real scalar'ов с выводом точности.

    Если ни re, ни im не floating → DOUBLE, иначе самая широкая
    из floating точностей.

    Examples:
        >>> complex_number(2).precision
        <Precision.DOUBLE: 'double'>
        >>> complex_number(1, np.longdouble(3.14)).precision
        <Precision.EXTENDED: 'extended'>
    """
    return Complex(re, im)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: object, b: object) -> Complex:
    """a + b"""
    a, b = _operands(a, b)
    return a + b


def sub(a: object, b: object) -> Complex:
    """a - b"""
    a, b = _operands(a, b)
    return a - b


def mul(a: object, b: object) -> Complex:
    """a · b"""
    a, b = _operands(a, b)
    return a * b


def div(a: object, b: object) -> Complex:
    """a / b (Smith's algorithm, деление на ноль → Inf/NaN)"""
    a, b = _operands(a, b)
    return a / b


def power(base: object, exponent: object) -> Complex:
    """
    base ** exponent.

    - Complex ** int     → быстрые пути для 0..3, точность base
    - Complex ** real    → полярная формула
    - Complex ** Complex → principal value
    - real ** Complex    → branch cut вдоль отрицательной полуоси
    """
    base, exponent = _operands(base, exponent)
    return base ** exponent


def neg(z: Complex) -> Complex:
    """-z"""
    return -z


def eq(a: object, b: object) -> bool:
    """Точное равенство (без толерантности)"""
    a, b = _operands(a, b)
    return a == b


# =============================================================================
# POLAR
# =============================================================================


def modulus(z: Complex) -> np.floating:
    """|z| = hypot(re, im)"""
    return modulus_parts(z.re, z.im)


def sq_abs(z: object):
    """
    Квадрат модуля.

    Для Complex: re² + im². Для real scalar: x² — позволяет generic-коду
    вызывать sq_abs единообразно.
    """
    if isinstance(z, Complex):
        return sq_modulus_parts(z.re, z.im)
    if is_real_scalar(z):
        with np.errstate(all="ignore"):
            return z * z
    raise PrecisionError(f"Expected Complex or real scalar, got {type(z).__name__}")


def arg(z: Complex) -> np.floating:
    """Аргумент atan2(im, re) в диапазоне (-π, π]"""
    return argument_parts(z.re, z.im)


def conj(z: Complex) -> Complex:
    """Комплексно сопряжённое"""
    return z.conjugate()


def from_polar(modulus: object, argument: object) -> Complex:
    """
    Complex по модулю и аргументу.

    Точность: резолвинг как при конструировании из двух scalar'ов.

    Examples:
        from_polar(sqrt(2), π/4) ≈ 1 + 1i
    """
    precision = resolve_construction(modulus, argument)
    re, im = from_polar_parts(cast(modulus, precision), cast(argument, precision))
    return Complex._from_parts(re, im, precision)


# =============================================================================
# ЭЛЕМЕНТАРНЫЕ ФУНКЦИИ
# =============================================================================


def expi(y: object) -> Complex:
    """
    cos(y) + i·sin(y).

    Точность результата — точность y (DOUBLE для не-floating y).
    """
    precision = scalar_precision(y)
    if precision is None:
        precision = Precision.DOUBLE
    re, im = expi_parts(cast(y, precision))
    return Complex._from_parts(re, im, precision)


def sqrt(z: Complex) -> Complex:
    """Квадратный корень в principal branch (re >= 0)"""
    re, im = sqrt_parts(z.re, z.im)
    return Complex._from_parts(re, im, z.precision)


def sin(z: Complex) -> Complex:
    """Комплексный синус"""
    re, im = sin_parts(z.re, z.im)
    return Complex._from_parts(re, im, z.precision)


def cos(z: Complex) -> Complex:
    """Комплексный косинус"""
    re, im = cos_parts(z.re, z.im)
    return Complex._from_parts(re, im, z.precision)


# =============================================================================
# ПРИБЛИЖЁННОЕ СРАВНЕНИЕ
# =============================================================================


def is_close(
    a: object,
    b: object,
    rel_tol: float = REL_TOL_DEFAULT,
    abs_tol: float = ABS_TOL_DEFAULT,
    precision: Optional[Precision] = None,
) -> bool:
    """
    Приближённое равенство комплексных чисел.

    Алгоритм (как math.isclose, но по расстоянию на плоскости):
        |a - b| <= max(rel_tol · max(|a|, |b|), abs_tol)

    Args:
        a, b: Complex или real scalar
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 0.0)
        precision: Если задана, rel_tol не меньше машинного epsilon этой точности

    Returns:
        True если значения близки (точное равенство, включая Inf, — всегда True)
    """
    a, b = _lift(a), _lift(b)
    if a == b:
        return True

    if precision is not None:
        rel_tol = max(rel_tol, float(Precision(precision).eps))

    with np.errstate(all="ignore"):
        diff = abs(a - b)
        scale = max(abs(a), abs(b))
        return bool(diff <= max(rel_tol * scale, abs_tol))
