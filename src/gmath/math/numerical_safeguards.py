"""
Numerical Safeguards — IEEE-семантика и целые фиксированной ширины

Python отличается от IEEE 754 / C в нескольких местах, важных для gmath:
- Деление float на ноль бросает ZeroDivisionError вместо ±inf/nan
- int не имеет фиксированной ширины и не переполняется
- int(nan) и int(inf) бросают исключение

Модуль восстанавливает семантику, на которую опираются алгоритмы:
- ieee_divide: деление с результатом ±inf/nan при нулевом делителе
- wrap_int64 / wrap_uint64: переполнение с wraparound (two's complement)
- truncate_to_int64: приведение (int64_t)x с усечением к нулю

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции модуля никогда не бросают исключений для числовых входов
2. NaN/Inf пропагируют по правилам IEEE 754 (не санитизируются)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

from src.gmath.math.constants import DOMAIN_ERROR

# =============================================================================
# ГРАНИЦЫ ЦЕЛЫХ ФИКСИРОВАННОЙ ШИРИНЫ
# =============================================================================

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
UINT64_MAX: Final[int] = 2**64 - 1

_UINT64_MODULUS: Final[int] = 2**64

INF: Final[float] = float("inf")
NAN: Final[float] = float("nan")


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_domain_error(value: float) -> bool:
    """
    Проверка, равен ли результат sentinel-значению DOMAIN_ERROR (-1).

    Для sqrt, ln, asin и acos -1 означает аргумент вне области определения.
    """
    return value == DOMAIN_ERROR


# =============================================================================
# IEEE ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с IEEE 754 семантикой для нулевого делителя.

    Вместо ZeroDivisionError возвращает:
    - ±inf если числитель ненулевой (знак = знак числителя * знак нуля)
    - nan если числитель 0 или nan

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0:
        return numerator / denominator

    if numerator == 0 or math.isnan(numerator):
        return NAN

    # Знак нуля в знаменателе учитывается: 1 / -0.0 = -inf
    negative = (numerator < 0) != (math.copysign(1.0, denominator) < 0)
    return -INF if negative else INF


# =============================================================================
# ЦЕЛЫЕ ФИКСИРОВАННОЙ ШИРИНЫ
# =============================================================================


def wrap_uint64(value: int) -> int:
    """
    Приведение int к диапазону uint64 с wraparound.

    Examples:
        >>> wrap_uint64(2**64 + 5)
        5
        >>> wrap_uint64(-1)
        18446744073709551615
    """
    return value % _UINT64_MODULUS


def wrap_int64(value: int) -> int:
    """
    Приведение int к диапазону int64 с wraparound (two's complement).

    Examples:
        >>> wrap_int64(2**63)
        -9223372036854775808
        >>> wrap_int64(-(2**63) - 1)
        9223372036854775807
    """
    unsigned = value % _UINT64_MODULUS
    if unsigned > INT64_MAX:
        return unsigned - _UINT64_MODULUS
    return unsigned


def truncate_to_int64(value: float) -> int:
    """
    Приведение float к int64 с усечением к нулю, как (int64_t)x в C.

    NaN, ±inf и значения вне диапазона int64 дают INT64_MIN
    (значение "integer indefinite" на x86-64).

    Args:
        value: Исходное значение (float или int)

    Returns:
        Целая часть value в диапазоне int64

    Examples:
        >>> truncate_to_int64(3.75)
        3
        >>> truncate_to_int64(-3.75)
        -3
        >>> truncate_to_int64(float("nan"))
        -9223372036854775808
    """
    if isinstance(value, int):
        return wrap_int64(value)

    if not is_valid_float(value):
        return INT64_MIN

    truncated = int(value)
    if truncated < INT64_MIN or truncated > INT64_MAX:
        return INT64_MIN

    return truncated
