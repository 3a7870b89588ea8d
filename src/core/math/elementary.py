"""
Elementary — Branch-Correct Elementary Function Kernels

Модуль вычисляет элементарные функции комплексного аргумента:
- expi(y) = cos(y) + i·sin(y)
- coshisinh(y) = cosh(y) + i·sinh(y)
- sqrt(z): principal branch, re(sqrt(z)) >= 0, без переполнения
- sin(z), cos(z) через разложение Эйлера

ФОРМУЛЫ:
    cs  = (cos re, sin re)
    csh = (cosh im, sinh im)
    sin(z) = (cs.im·csh.re,  cs.re·csh.im)
    cos(z) = (cs.re·csh.re, -cs.im·csh.im)

При im = 0 sin/cos сводятся к real sin/cos (разложение точное, погрешность
только от нижележащих трансцендентных функций).
"""

import numpy as np

Parts = tuple[np.floating, np.floating]


# =============================================================================
# EXPI / COSHISINH
# =============================================================================


def expi_parts(y) -> Parts:
    """(cos y, sin y)"""
    with np.errstate(all="ignore"):
        return np.cos(y), np.sin(y)


def coshisinh_parts(y) -> Parts:
    """(cosh y, sinh y)"""
    with np.errstate(all="ignore"):
        return np.cosh(y), np.sinh(y)


# =============================================================================
# SQRT
# =============================================================================


def sqrt_parts(re, im) -> Parts:
    """
    Квадратный корень в principal branch.

    Промежуточное w считается от большей по модулю компоненты, поэтому
    квадраты больших компонент не переполняются. Вычисления ведутся
    в longdouble, результат приводится к dtype аргумента.

    Алгоритм:
        z = 0 → (0, 0)
        x = |re|, y = |im|
        x >= y: r = y/x, w = sqrt(x)·sqrt(0.5·(1 + sqrt(1 + r²)))
        x <  y: r = x/y, w = sqrt(y)·sqrt(0.5·(r + sqrt(1 + r²)))
        re >= 0: (w, im/(2w))
        re <  0: w = -w если im < 0; (im/(2w), w)

    Гарантия: re(результата) >= 0.

    Examples:
        sqrt(-1 + 0i) = (0, 1)
        sqrt(4 + 0i) = (2, 0)
    """
    dtype = type(re)

    if re == 0 and im == 0:
        return dtype(0), dtype(0)

    z_re = np.longdouble(re)
    z_im = np.longdouble(im)
    one = np.longdouble(1)
    half = np.longdouble(0.5)

    with np.errstate(all="ignore"):
        x = np.fabs(z_re)
        y = np.fabs(z_im)
        if x >= y:
            r = y / x
            w = np.sqrt(x) * np.sqrt(half * (one + np.sqrt(one + r * r)))
        else:
            r = x / y
            w = np.sqrt(y) * np.sqrt(half * (r + np.sqrt(one + r * r)))

        if z_re >= 0:
            return dtype(w), dtype(z_im / (w + w))

        if z_im < 0:
            w = -w
        return dtype(z_im / (w + w)), dtype(w)


# =============================================================================
# SIN / COS
# =============================================================================


def sin_parts(re, im) -> Parts:
    """sin(z) = sin(re)·cosh(im) + i·cos(re)·sinh(im)"""
    cs_re, cs_im = expi_parts(re)
    csh_re, csh_im = coshisinh_parts(im)
    with np.errstate(all="ignore"):
        return cs_im * csh_re, cs_re * csh_im


def cos_parts(re, im) -> Parts:
    """cos(z) = cos(re)·cosh(im) - i·sin(re)·sinh(im)"""
    cs_re, cs_im = expi_parts(re)
    csh_re, csh_im = coshisinh_parts(im)
    with np.errstate(all="ignore"):
        return cs_re * csh_re, -cs_im * csh_im
