"""
Tolerance — Approximate Floating-Point Comparison

Равенство Complex точное (без толерантности). Модуль даёт вызывающей
стороне инструменты приближённого сравнения:
- approx_equal: относительная разность с абсолютным порогом
- is_identical: побитовое совпадение значения и знака (NaN == NaN)
- machine_epsilon: epsilon для каждой точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Одинаковые значения (включая ±Inf) всегда approx_equal
2. NaN никогда не approx_equal, но is_identical(NaN, NaN) = True
3. is_identical различает +0.0 и -0.0
"""

from typing import Final

import numpy as np

from src.core.domain.precision import Precision

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность approx_equal по умолчанию
MAX_REL_DIFF_DEFAULT: Final[float] = 1e-2

# Абсолютная толерантность approx_equal по умолчанию
MAX_ABS_DIFF_DEFAULT: Final[float] = 1e-5

EPS_SINGLE: Final[float] = float(np.finfo(np.float32).eps)
EPS_DOUBLE: Final[float] = float(np.finfo(np.float64).eps)


def machine_epsilon(precision: Precision) -> np.floating:
    """
    Машинный epsilon точности.

    Examples:
        >>> float(machine_epsilon(Precision.DOUBLE)) == 2.0 ** -52
        True
    """
    return precision.eps


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def approx_equal(
    lhs,
    rhs,
    max_rel_diff: float = MAX_REL_DIFF_DEFAULT,
    max_abs_diff: float = MAX_ABS_DIFF_DEFAULT,
) -> bool:
    """
    Приближённое сравнение двух real scalar'ов.

    Алгоритм:
        lhs == rhs                        → True (покрывает ±Inf)
        rhs == 0                          → |lhs| <= max_abs_diff
        lhs == 0                          → |rhs| <= max_abs_diff
        |(lhs - rhs) / rhs| <= max_rel_diff
        или |lhs - rhs| <= max_abs_diff   → True

    Args:
        lhs: Проверяемое значение
        rhs: Эталонное значение (относительная разность считается к нему)
        max_rel_diff: Относительная толерантность (default: 1e-2)
        max_abs_diff: Абсолютная толерантность (default: 1e-5, 0 — отключить)

    Returns:
        True если значения близки

    Examples:
        >>> approx_equal(1.0, 1.0 + 1e-10, max_rel_diff=1e-9)
        True
        >>> approx_equal(1.0, 1.1, max_rel_diff=1e-3, max_abs_diff=0.0)
        False
    """
    if lhs == rhs:
        return True

    with np.errstate(all="ignore"):
        diff = abs(lhs - rhs)
        if rhs == 0:
            return bool(abs(lhs) <= max_abs_diff)
        if lhs == 0:
            return bool(abs(rhs) <= max_abs_diff)
        if abs(diff / rhs) <= max_rel_diff:
            return True
        return bool(max_abs_diff != 0 and diff <= max_abs_diff)


def is_identical(lhs, rhs) -> bool:
    """
    Побитовое совпадение: то же значение и тот же знаковый бит.

    В отличие от ==, различает +0.0 и -0.0 и считает NaN равным NaN.
    """
    if np.isnan(lhs) or np.isnan(rhs):
        return bool(np.isnan(lhs) and np.isnan(rhs))
    return bool(lhs == rhs and np.signbit(lhs) == np.signbit(rhs))
