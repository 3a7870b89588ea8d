"""
Complex — Параметрический тип комплексного числа

Пара (re, im) floating-point чисел одной точности:
SINGLE (float32), DOUBLE (float64) или EXTENDED (longdouble).

Способы создания:
- Complex(re, im)            — из двух real scalar'ов
- Complex(x)                 — promotion real scalar'а (im = 0)
- z.astype(precision)        — конверсия в другую точность (field-wise cast)

Точность результата операций определяет резолвер (src.core.domain.precision):
- Complex ⊗ Complex      → более широкая точность
- Complex ⊗ floating     → более широкая точность
- Complex ⊗ int          → точность Complex
- из двух int            → DOUBLE

Мутация только через compound-операторы (+=, -=, *=, /=, **=) и assign();
они заменяют обе компоненты получателя, сохраняя его точность.
Не потокобезопасно: конкурентная мутация одного значения требует внешней
синхронизации.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. re и im всегда numpy scalar'ы одного dtype из трёх поддерживаемых
2. NaN/Inf распространяются по IEEE 754, операции никогда не бросают
   исключений для числовых значений
3. Равенство структурное и точное (без толерантности)
"""

import logging
import numbers
from typing import Optional

import numpy as np

from src.core.domain.precision import (
    Precision,
    PrecisionError,
    cast,
    is_real_scalar,
    resolve_binary,
    resolve_construction,
    resolve_with_scalar,
    scalar_precision,
)
from src.core.domain.rendering import DEFAULT_FORMATTER
from src.core.math.arithmetic import (
    add_parts,
    div_parts,
    mul_parts,
    rdiv_parts,
    scale_parts,
    sub_parts,
    unscale_parts,
)
from src.core.math.polar import modulus_parts
from src.core.math.power import (
    pow_complex_parts,
    pow_int_parts,
    pow_real_parts,
    rpow_parts,
)

logger = logging.getLogger(__name__)


def _is_complex_operand(value: object) -> bool:
    return isinstance(value, Complex)


def _is_integral(value: object) -> bool:
    return isinstance(value, numbers.Integral)


def _as_operand(value: object, fallback: Precision) -> np.floating:
    """
    Real операнд в его собственной точности.

    Floating scalar сохраняет свою точность (float → float64), не-floating
    приводится к точности получателя.
    """
    own = scalar_precision(value)
    return cast(value, own if own is not None else fallback)


# =============================================================================
# COMPLEX
# =============================================================================


class Complex:
    """
    Комплексное число фиксированной точности.

    Examples:
        >>> z = Complex(1, 2)
        >>> z.precision
        <Precision.DOUBLE: 'double'>
        >>> Complex(np.float32(1.0), 2).precision
        <Precision.SINGLE: 'single'>
        >>> str(Complex(1.2, -3.4))
        '1.2-3.4i'
    """

    __slots__ = ("_re", "_im")

    # Мутабельный тип (compound-операторы): не хешируется
    __hash__ = None  # type: ignore[assignment]

    # numpy scalar ⊗ Complex уходит в отражённые операторы Complex
    __array_ufunc__ = None

    def __init__(self, re: object = 0, im: object = 0, precision: Optional[Precision] = None):
        """
        Args:
            re: Действительная часть (real scalar)
            im: Мнимая часть (real scalar, default: 0)
            precision: Точность (default: выводится из re и im)

        Raises:
            PrecisionError: Если компонента не real scalar (в том числе Complex)
        """
        if precision is None:
            precision = resolve_construction(re, im)
        else:
            # проверка типов компонент
            scalar_precision(re)
            scalar_precision(im)
            precision = Precision(precision)

        self._re = cast(re, precision)
        self._im = cast(im, precision)

    @classmethod
    def _from_parts(cls, re: np.floating, im: np.floating, precision: Precision) -> "Complex":
        """Сборка из компонент без резолвинга (внутренний путь операторов)"""
        obj = cls.__new__(cls)
        obj._re = cast(re, precision)
        obj._im = cast(im, precision)
        return obj

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def re(self) -> np.floating:
        """Действительная часть"""
        return self._re

    @property
    def im(self) -> np.floating:
        """Мнимая часть"""
        return self._im

    @property
    def precision(self) -> Precision:
        """Точность компонент"""
        return Precision.of_dtype(type(self._re))

    # -------------------------------------------------------------------------
    # Конверсия и присваивание
    # -------------------------------------------------------------------------

    def astype(self, precision: Precision) -> "Complex":
        """
        Копия в другой точности (field-wise cast).

        Narrowing (например, EXTENDED → SINGLE) может терять точность,
        но никогда не бросает.
        """
        precision = Precision(precision)
        if precision.rank < self.precision.rank:
            logger.debug("Narrowing complex %s -> %s", self.precision.value, precision.value)
        return Complex._from_parts(self._re, self._im, precision)

    def copy(self) -> "Complex":
        """Независимая копия в той же точности"""
        return Complex._from_parts(self._re, self._im, self.precision)

    def assign(self, value: object) -> "Complex":
        """
        Присваивание in-place с сохранением точности получателя.

        - real scalar → (value, 0)
        - Complex     → field-wise конверсия

        Returns:
            self

        Raises:
            TypeError: Если value не real scalar и не Complex
        """
        precision = self.precision
        if _is_complex_operand(value):
            if value.precision.rank > precision.rank:
                logger.debug("Narrowing assignment %s -> %s", value.precision.value, precision.value)
            self._re, self._im = cast(value.re, precision), cast(value.im, precision)
        elif is_real_scalar(value):
            self._re, self._im = cast(value, precision), cast(0, precision)
        else:
            raise TypeError(f"Cannot assign {type(value).__name__} to Complex")
        return self

    def conjugate(self) -> "Complex":
        """Комплексно сопряжённое (re, -im)"""
        return Complex._from_parts(self._re, -self._im, self.precision)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """
        Точное равенство.

        Complex == Complex: обе компоненты равны
        Complex == real:    im == 0 и re == real
        """
        if _is_complex_operand(other):
            return bool(self._re == other.re and self._im == other.im)
        if is_real_scalar(other):
            return bool(self._re == _as_operand(other, self.precision) and self._im == 0)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __bool__(self) -> bool:
        return bool(self._re != 0 or self._im != 0)

    # -------------------------------------------------------------------------
    # Унарные операторы
    # -------------------------------------------------------------------------

    def __pos__(self) -> "Complex":
        return self.copy()

    def __neg__(self) -> "Complex":
        return Complex._from_parts(-self._re, -self._im, self.precision)

    def __abs__(self) -> np.floating:
        """|z| = hypot(re, im)"""
        return modulus_parts(self._re, self._im)

    def __complex__(self) -> complex:
        return complex(float(self._re), float(self._im))

    # -------------------------------------------------------------------------
    # Compound-операторы (мутируют получателя, сохраняя точность)
    # -------------------------------------------------------------------------

    def __iadd__(self, other: object) -> "Complex":
        precision = self.precision
        if _is_complex_operand(other):
            re, im = add_parts(self._re, self._im, other.re, other.im)
            self._re, self._im = cast(re, precision), cast(im, precision)
        elif is_real_scalar(other):
            re, _ = add_parts(self._re, self._im, _as_operand(other, precision), 0)
            self._re = cast(re, precision)
        else:
            return NotImplemented
        return self

    def __isub__(self, other: object) -> "Complex":
        precision = self.precision
        if _is_complex_operand(other):
            re, im = sub_parts(self._re, self._im, other.re, other.im)
            self._re, self._im = cast(re, precision), cast(im, precision)
        elif is_real_scalar(other):
            re, _ = sub_parts(self._re, self._im, _as_operand(other, precision), 0)
            self._re = cast(re, precision)
        else:
            return NotImplemented
        return self

    def __imul__(self, other: object) -> "Complex":
        precision = self.precision
        if _is_complex_operand(other):
            re, im = mul_parts(self._re, self._im, other.re, other.im)
        elif is_real_scalar(other):
            re, im = scale_parts(self._re, self._im, _as_operand(other, precision))
        else:
            return NotImplemented
        self._re, self._im = cast(re, precision), cast(im, precision)
        return self

    def __itruediv__(self, other: object) -> "Complex":
        precision = self.precision
        if _is_complex_operand(other):
            re, im = div_parts(self._re, self._im, other.re, other.im)
        elif is_real_scalar(other):
            re, im = unscale_parts(self._re, self._im, _as_operand(other, precision))
        else:
            return NotImplemented
        self._re, self._im = cast(re, precision), cast(im, precision)
        return self

    def __ipow__(self, other: object) -> "Complex":
        precision = self.precision
        if _is_complex_operand(other):
            re, im = pow_complex_parts(
                self._re, self._im, cast(other.re, precision), cast(other.im, precision)
            )
        elif _is_integral(other):
            re, im = pow_int_parts(self._re, self._im, other)
        elif is_real_scalar(other):
            re, im = pow_real_parts(self._re, self._im, cast(other, precision))
        else:
            return NotImplemented
        self._re, self._im = cast(re, precision), cast(im, precision)
        return self

    # -------------------------------------------------------------------------
    # Бинарные операторы: копия в общей точности + compound-оператор
    # -------------------------------------------------------------------------

    def _promoted(self, other: object) -> Optional["Complex"]:
        """Копия self в точности результата операции с other (None — неподдерживаемый тип)"""
        if _is_complex_operand(other):
            return self.astype(resolve_binary(self.precision, other.precision))
        if is_real_scalar(other):
            return self.astype(resolve_with_scalar(self.precision, other))
        return None

    def __add__(self, other: object) -> "Complex":
        result = self._promoted(other)
        if result is None:
            return NotImplemented
        result += other
        return result

    def __sub__(self, other: object) -> "Complex":
        result = self._promoted(other)
        if result is None:
            return NotImplemented
        result -= other
        return result

    def __mul__(self, other: object) -> "Complex":
        result = self._promoted(other)
        if result is None:
            return NotImplemented
        result *= other
        return result

    def __truediv__(self, other: object) -> "Complex":
        result = self._promoted(other)
        if result is None:
            return NotImplemented
        result /= other
        return result

    def __pow__(self, other: object, modulo: object = None) -> "Complex":
        if modulo is not None:
            return NotImplemented
        if _is_integral(other):
            # целый показатель не расширяет точность
            result = self.copy()
        else:
            result = self._promoted(other)
            if result is None:
                return NotImplemented
        result **= other
        return result

    # -------------------------------------------------------------------------
    # Отражённые операторы: real ⊗ Complex
    # -------------------------------------------------------------------------

    def __radd__(self, other: object) -> "Complex":
        return self.__add__(other)

    def __rmul__(self, other: object) -> "Complex":
        return self.__mul__(other)

    def __rsub__(self, other: object) -> "Complex":
        """real - z = (real - re, -im)"""
        if not is_real_scalar(other):
            return NotImplemented
        precision = resolve_with_scalar(self.precision, other)
        re, _ = sub_parts(_as_operand(other, precision), 0, cast(self._re, precision), 0)
        return Complex._from_parts(re, -cast(self._im, precision), precision)

    def __rtruediv__(self, other: object) -> "Complex":
        """real / z (масштабированное деление)"""
        if not is_real_scalar(other):
            return NotImplemented
        precision = resolve_with_scalar(self.precision, other)
        re, im = rdiv_parts(
            cast(other, precision), cast(self._re, precision), cast(self._im, precision)
        )
        return Complex._from_parts(re, im, precision)

    def __rpow__(self, other: object) -> "Complex":
        """real ** z (branch cut вдоль отрицательной полуоси)"""
        if not is_real_scalar(other):
            return NotImplemented
        precision = resolve_with_scalar(self.precision, other)
        re, im = rpow_parts(
            cast(other, precision), cast(self._re, precision), cast(self._im, precision)
        )
        return Complex._from_parts(re, im, precision)

    # -------------------------------------------------------------------------
    # Текстовое представление
    # -------------------------------------------------------------------------

    def __format__(self, format_spec: str) -> str:
        return DEFAULT_FORMATTER.render(self._re, self._im, format_spec)

    def __str__(self) -> str:
        return DEFAULT_FORMATTER.render(self._re, self._im)

    def __repr__(self) -> str:
        return f"Complex({self._re!s}, {self._im!s}, precision={self.precision.value!r})"
