"""
Arithmetic — Core Complex Arithmetic Kernels

Ядро комплексной арифметики на уровне компонент (re, im).

Kernels принимают numpy floating scalar'ы и возвращают кортеж (re, im).
Приведение к точности результата выполняет вызывающая сторона
(src.core.domain.complex_value), kernels только считают.

Модуль обеспечивает:
- Сложение/вычитание/умножение комплексных чисел
- Масштабирование на real scalar
- Деление по алгоритму Smith'а (без ложного overflow/underflow)
- Деление real scalar на комплексное число

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль НЕ обрабатывается особо: результат Inf/NaN по IEEE 754
2. Умножение использует временную переменную (in-place форма не читает
   частично обновлённое поле)
3. Ошибки floating-point не превращаются в исключения и warnings
"""

import numpy as np

Parts = tuple[np.floating, np.floating]


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_parts(a_re, a_im, b_re, b_im) -> Parts:
    """(a_re + b_re, a_im + b_im)"""
    with np.errstate(all="ignore"):
        return a_re + b_re, a_im + b_im


def sub_parts(a_re, a_im, b_re, b_im) -> Parts:
    """(a_re - b_re, a_im - b_im)"""
    with np.errstate(all="ignore"):
        return a_re - b_re, a_im - b_im


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul_parts(a_re, a_im, b_re, b_im) -> Parts:
    """
    Комплексное умножение.

    Формула:
        re = a_re*b_re - a_im*b_im
        im = a_im*b_re + a_re*b_im

    Обе компоненты считаются из исходных значений до присваивания,
    поэтому вызов вида z *= z корректен.
    """
    with np.errstate(all="ignore"):
        temp = a_re * b_re - a_im * b_im
        im = a_im * b_re + a_re * b_im
    return temp, im


def scale_parts(re, im, factor) -> Parts:
    """Умножение обеих компонент на real scalar"""
    with np.errstate(all="ignore"):
        return re * factor, im * factor


def unscale_parts(re, im, divisor) -> Parts:
    """Деление обеих компонент на real scalar (divisor = 0 → Inf/NaN)"""
    with np.errstate(all="ignore"):
        return re / divisor, im / divisor


# =============================================================================
# ДЕЛЕНИЕ (SMITH'S ALGORITHM)
# =============================================================================


def div_parts(n_re, n_im, d_re, d_im) -> Parts:
    """
    Комплексное деление n / d по алгоритму Smith'а.

    Знаменатель масштабируется отношением своих компонент, что исключает
    переполнение промежуточного d_re² + d_im² при больших |d| и потерю
    значимости при малых.

    Алгоритм:
        |d_re| >= |d_im|:
            ratio = d_im / d_re
            denom = d_re + d_im*ratio
            re = (n_re + n_im*ratio) / denom
            im = (n_im - n_re*ratio) / denom
        иначе:
            ratio = d_re / d_im
            denom = d_re*ratio + d_im
            re = (n_re*ratio + n_im) / denom
            im = (n_im*ratio - n_re) / denom

    Args:
        n_re, n_im: Числитель
        d_re, d_im: Знаменатель

    Returns:
        (re, im) частного; при d = 0 — Inf/NaN по IEEE

    Пример: (1e300 + 1e300i) / (1e300 + 1e300i) = (1, 0) без переполнения,
    тогда как наивная формула через d_re² + d_im² даёт Inf/Inf = NaN.
    """
    with np.errstate(all="ignore"):
        if np.fabs(d_re) < np.fabs(d_im):
            ratio = d_re / d_im
            denom = d_re * ratio + d_im
            re = (n_re * ratio + n_im) / denom
            im = (n_im * ratio - n_re) / denom
        else:
            ratio = d_im / d_re
            denom = d_re + d_im * ratio
            re = (n_re + n_im * ratio) / denom
            im = (n_im - n_re * ratio) / denom
    return re, im


def rdiv_parts(numerator, d_re, d_im) -> Parts:
    """
    Деление real scalar на комплексное число: numerator / d.

    Тот же приём масштабирования, что и в div_parts, с n_im = 0.
    Результат — обратная величина 1/d, умноженная на numerator, поэтому
    знак мнимой части противоположен.

    Алгоритм:
        |d_re| < |d_im|:
            ratio = d_re / d_im
            rdivd = numerator / (d_re*ratio + d_im)
            result = (rdivd*ratio, -rdivd)
        иначе:
            ratio = d_im / d_re
            rdivd = numerator / (d_re + d_im*ratio)
            result = (rdivd, -rdivd*ratio)
    """
    with np.errstate(all="ignore"):
        if np.fabs(d_re) < np.fabs(d_im):
            ratio = d_re / d_im
            rdivd = numerator / (d_re * ratio + d_im)
            return rdivd * ratio, -rdivd
        ratio = d_im / d_re
        rdivd = numerator / (d_re + d_im * ratio)
        return rdivd, -rdivd * ratio
