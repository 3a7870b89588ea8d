"""
Precision — Резолвер точности для смешанных операндов

Модуль определяет точность результата при комбинировании операндов:
- Complex ⊗ Complex: более широкая из двух точностей
- Complex ⊗ real scalar: расширяется, только если scalar — floating
- Конструирование из scalar'ов: DOUBLE, если ни один не floating

Порядок ширины: EXTENDED > DOUBLE > SINGLE.

Соответствие Python-типов:
- numpy.float32             → SINGLE
- numpy.float64, float      → DOUBLE
- numpy.longdouble          → EXTENDED
- int, bool, Fraction, numpy integer → не floating (None)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Компонента Complex никогда не бывает Complex (complex-of-complex запрещён)
2. Резолвер детерминирован и не зависит от значений, только от типов
"""

import numbers
from enum import Enum
from typing import Final, Optional

import numpy as np


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PrecisionError(TypeError):
    """
    Недопустимый тип компоненты или операнда.

    Возникает для не-real объектов, для floating-типов вне
    {float32, float64, longdouble} и при попытке использовать Complex
    как компоненту другого Complex.
    """


# =============================================================================
# PRECISION
# =============================================================================


class Precision(str, Enum):
    """Точность IEEE floating-point"""

    SINGLE = "single"
    DOUBLE = "double"
    EXTENDED = "extended"

    @property
    def dtype(self) -> type:
        """numpy scalar type для этой точности"""
        return _DTYPES[self]

    @property
    def rank(self) -> int:
        """Ранг ширины (больше — шире)"""
        return _RANKS[self]

    @property
    def eps(self) -> np.floating:
        """Машинный epsilon в этой точности"""
        return np.finfo(self.dtype).eps

    @property
    def mant_dig(self) -> int:
        """Количество бит мантиссы (включая неявный бит)"""
        return int(np.finfo(self.dtype).nmant) + 1

    @classmethod
    def of_dtype(cls, dtype: type) -> "Precision":
        """
        Точность по numpy scalar type.

        Raises:
            PrecisionError: Если dtype не одна из трёх поддерживаемых точностей
        """
        try:
            return _BY_DTYPE[dtype]
        except KeyError:
            raise PrecisionError(f"Unsupported floating type: {dtype!r}") from None


_DTYPES: Final[dict] = {
    Precision.SINGLE: np.float32,
    Precision.DOUBLE: np.float64,
    Precision.EXTENDED: np.longdouble,
}

_RANKS: Final[dict] = {
    Precision.SINGLE: 1,
    Precision.DOUBLE: 2,
    Precision.EXTENDED: 3,
}

_BY_DTYPE: Final[dict] = {dtype: precision for precision, dtype in _DTYPES.items()}

# Точность по умолчанию, если ни один scalar не floating
DEFAULT_PRECISION: Final[Precision] = Precision.DOUBLE


# =============================================================================
# РЕЗОЛВЕР
# =============================================================================


def is_real_scalar(value: object) -> bool:
    """
    Проверка, является ли value допустимым real scalar.

    numpy integer/floating scalar'ы зарегистрированы в numbers.Real,
    поэтому проверка покрывает и builtin, и numpy типы.
    """
    return isinstance(value, numbers.Real)


def scalar_precision(value: object) -> Optional[Precision]:
    """
    Точность floating scalar'а.

    Args:
        value: Real scalar

    Returns:
        Precision для floating scalar'а, None для не-floating (int, Fraction, ...)

    Raises:
        PrecisionError: Если value не real scalar или floating-тип не поддерживается

    Examples:
        >>> scalar_precision(np.float32(1.0))
        <Precision.SINGLE: 'single'>
        >>> scalar_precision(1.0)
        <Precision.DOUBLE: 'double'>
        >>> scalar_precision(1) is None
        True
    """
    if isinstance(value, np.floating):
        return Precision.of_dtype(type(value))
    if isinstance(value, float):
        return Precision.DOUBLE
    if is_real_scalar(value):
        return None
    if hasattr(value, "re") and hasattr(value, "im"):
        raise PrecisionError(
            "Complex components must be real scalars, not complex values"
        )
    raise PrecisionError(f"Expected a real scalar, got {type(value).__name__}")


def widest(*precisions: Precision) -> Precision:
    """
    Самая широкая из точностей.

    Raises:
        ValueError: Если не передано ни одной точности
    """
    if not precisions:
        raise ValueError("widest() requires at least one precision")
    return max(precisions, key=lambda p: p.rank)


def resolve_binary(left: Precision, right: Precision) -> Precision:
    """Точность результата Complex ⊗ Complex"""
    return widest(left, right)


def resolve_with_scalar(precision: Precision, scalar: object) -> Precision:
    """
    Точность результата Complex ⊗ real scalar.

    Если scalar floating — расширяется до более широкой точности,
    иначе остаётся точность Complex без изменений.
    """
    other = scalar_precision(scalar)
    if other is None:
        return precision
    return widest(precision, other)


def resolve_construction(*scalars: object) -> Precision:
    """
    Точность Complex, построенного из real scalar'ов.

    Returns:
        Самая широкая floating точность среди scalar'ов,
        либо DEFAULT_PRECISION (DOUBLE), если ни один не floating

    Examples:
        >>> resolve_construction(1, 2)
        <Precision.DOUBLE: 'double'>
        >>> resolve_construction(3, np.longdouble(4.0))
        <Precision.EXTENDED: 'extended'>
    """
    found = [p for p in (scalar_precision(s) for s in scalars) if p is not None]
    if not found:
        return DEFAULT_PRECISION
    return widest(*found)


def cast(value: object, precision: Precision) -> np.floating:
    """
    Конверсия real scalar'а в dtype точности.

    Может терять точность (narrowing), никогда не бросает для real scalar'ов:
    значение вне диапазона dtype (в том числе большой int или Fraction,
    на которых Python бросает OverflowError) насыщается до ±Inf.

    Examples:
        >>> bool(np.isposinf(cast(10 ** 400, Precision.DOUBLE)))
        True
    """
    with np.errstate(all="ignore"):
        try:
            return precision.dtype(value)
        except OverflowError:
            return precision.dtype(np.inf if value > 0 else -np.inf)
