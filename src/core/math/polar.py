"""
Polar — Polar/Rectangular Conversion Kernels

Модуль обеспечивает переход между алгебраической и полярной формой:
- modulus: hypot(re, im) без переполнения промежуточного re² + im²
- squared modulus: re² + im² (для real scalar — x²)
- argument: atan2(im, re), диапазон (-π, π]
- from_polar: (modulus·cos(argument), modulus·sin(argument))

Все функции сохраняют numpy dtype аргументов (float32/float64/longdouble).
"""

from typing import Final

import numpy as np

Parts = tuple[np.floating, np.floating]


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# π в каждой поддерживаемой точности (arccos(-1) считается в самом dtype,
# поэтому для longdouble не теряются дополнительные биты)
_PI: Final[dict] = {
    dtype: np.arccos(dtype(-1)) for dtype in (np.float32, np.float64, np.longdouble)
}


def pi_of(dtype: type) -> np.floating:
    """π в точности dtype"""
    return _PI[dtype]


# =============================================================================
# POLAR
# =============================================================================


def modulus_parts(re, im) -> np.floating:
    """|z| = hypot(re, im)"""
    return np.hypot(re, im)


def sq_modulus_parts(re, im) -> np.floating:
    """|z|² = re² + im² (может переполниться там, где hypot не переполняется)"""
    with np.errstate(all="ignore"):
        return re * re + im * im


def argument_parts(re, im) -> np.floating:
    """arg(z) = atan2(im, re) в диапазоне (-π, π]"""
    return np.arctan2(im, re)


def from_polar_parts(modulus, argument) -> Parts:
    """
    Построение комплексного числа по модулю и аргументу.

    Args:
        modulus: |z| (уже приведённый к dtype результата)
        argument: arg(z) в радианах (тот же dtype)

    Returns:
        (modulus·cos(argument), modulus·sin(argument))
    """
    with np.errstate(all="ignore"):
        return modulus * np.cos(argument), modulus * np.sin(argument)
