"""
Power — Complex Exponentiation Kernels

Модуль вычисляет степени комплексных чисел в principal branch:
- z^n для целого n: быстрые точные пути для n = 0..3 (без трансцендентных
  функций), иначе полярная формула
- z^r для real r: |z|^r · (cos(r·θ), sin(r·θ))
- z^w для complex w: ρ^(w.re)·exp(-θ·w.im) · (cos φ, sin φ),
  φ = θ·w.re + ln(ρ)·w.im
- b^w для real b: branch cut complex log вдоль отрицательной полуоси,
  arg(b) = π для b < 0

ФОРМУЛЫ:
    ρ = |z| = hypot(re, im),  θ = arg(z) = atan2(im, re)

    b >= 0:  ab = b^(w.re),                    ar = ln(b)·w.im
    b <  0:  ab = (-b)^(w.re)·exp(-π·w.im),    ar = π·w.re + ln(-b)·w.im
    результат = ab · (cos ar, sin ar)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0^0 = (1, 0) для целого показателя
2. ln(0) = -Inf не обрабатывается особо: -Inf·x даёт Inf/NaN по IEEE
3. Все входы kernel'а уже приведены к dtype результата
"""

import numpy as np

from src.core.math.arithmetic import mul_parts
from src.core.math.polar import argument_parts, modulus_parts, pi_of

Parts = tuple[np.floating, np.floating]


def _from_modulus_and_angle(ab, ar) -> Parts:
    return ab * np.cos(ar), ab * np.sin(ar)


# =============================================================================
# ЦЕЛЫЙ ПОКАЗАТЕЛЬ
# =============================================================================


def pow_int_parts(re, im, n: int) -> Parts:
    """
    z^n для целого n.

    Быстрые пути (точные, без трансцендентных функций):
        n = 0 → (1, 0), включая 0^0
        n = 1 → z
        n = 2 → z·z
        n = 3 → z·z·z
    Остальные n (включая отрицательные) → pow_real_parts с n,
    приведённым к dtype компонент.

    Args:
        re, im: Основание
        n: Целый показатель

    Returns:
        (re, im) результата в dtype основания
    """
    dtype = type(re)
    n = int(n)

    if n == 0:
        return dtype(1), dtype(0)
    if n == 1:
        return re, im
    if n == 2:
        return mul_parts(re, im, re, im)
    if n == 3:
        sq_re, sq_im = mul_parts(re, im, re, im)
        return mul_parts(sq_re, sq_im, re, im)

    return pow_real_parts(re, im, _int_exponent(n, dtype))


def _int_exponent(n: int, dtype: type) -> np.floating:
    """Целый показатель в dtype; |n| за пределами float насыщается до ±Inf"""
    with np.errstate(all="ignore"):
        try:
            return dtype(n)
        except OverflowError:
            return dtype(np.inf if n > 0 else -np.inf)


# =============================================================================
# REAL ПОКАЗАТЕЛЬ
# =============================================================================


def pow_real_parts(re, im, r) -> Parts:
    """
    z^r для real r в полярной форме.

    ab = |z|^r
    ar = arg(z)·r
    """
    with np.errstate(all="ignore"):
        ab = np.power(modulus_parts(re, im), r)
        ar = argument_parts(re, im) * r
        return _from_modulus_and_angle(ab, ar)


# =============================================================================
# COMPLEX ПОКАЗАТЕЛЬ
# =============================================================================


def pow_complex_parts(re, im, w_re, w_im) -> Parts:
    """
    z^w для комплексного w (principal value).

    ab = ρ^(w.re) · exp(-θ·w.im)
    ar = θ·w.re + ln(ρ)·w.im
    """
    with np.errstate(all="ignore"):
        rho = modulus_parts(re, im)
        theta = argument_parts(re, im)
        ab = np.power(rho, w_re) * np.exp(-theta * w_im)
        ar = theta * w_re + np.log(rho) * w_im
        return _from_modulus_and_angle(ab, ar)


def rpow_parts(base, w_re, w_im) -> Parts:
    """
    b^w: real основание, комплексный показатель.

    Branch rule по знаку основания:
        b >= 0 (θ = 0): ab = b^(w.re),                  ar = ln(b)·w.im
        b <  0 (θ = π): ab = (-b)^(w.re)·exp(-π·w.im),  ar = π·w.re + ln(-b)·w.im

    При b = 0 ln(b) = -Inf, и произведение с w.im даёт Inf или NaN
    по правилам IEEE — особый случай не выделяется.

    Examples:
        (-1)^(1+0i): |result| = 1, arg(result) = ±π
        (-1)^(0.5+2i): |result| = exp(-2π), arg(result) = π/2
    """
    with np.errstate(all="ignore"):
        if base >= 0:
            ab = np.power(base, w_re)
            ar = np.log(base) * w_im
        else:
            pi = pi_of(type(w_re))
            ab = np.power(-base, w_re) * np.exp(-pi * w_im)
            ar = pi * w_re + np.log(-base) * w_im
        return _from_modulus_and_angle(ab, ar)
