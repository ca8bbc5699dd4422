"""
Rounding — модуль, округление, дробная часть, факториал

Функции возвращают целые фиксированной ширины:
- ceil / floor / modf: int64 (усечение к нулю, как (int64_t)x)
- factorial: uint64 с молчаливым wraparound при переполнении

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверка "x уже целое" выполняется точным сравнением, без толерантности
2. Переполнение factorial не является ошибкой: результат берётся по модулю 2^64
"""

from src.gmath.math.numerical_safeguards import (
    truncate_to_int64,
    wrap_int64,
    wrap_uint64,
)


def absolute(x: float) -> float:
    """
    Модуль числа: -x если x < 0, иначе x.

    Examples:
        >>> absolute(-2.5)
        2.5
        >>> absolute(3.0)
        3.0
    """
    return -x if x < 0 else x


def ceil(x: float) -> int:
    """
    Округление вверх до ближайшего целого (int64).

    Алгоритм:
        int_part = trunc(x)
        x == int_part       → int_part
        x > 0 (с остатком)  → int_part + 1
        x < 0 (с остатком)  → int_part

    Examples:
        >>> ceil(2.5)
        3
        >>> ceil(-2.5)
        -2
        >>> ceil(3.0)
        3
    """
    int_part = truncate_to_int64(x)
    if x == int_part:
        return int_part
    return wrap_int64(int_part + 1) if x > 0 else int_part


def floor(x: float) -> int:
    """
    Округление вниз до ближайшего целого (int64).

    Зеркально ceil: для x > 0 с остатком возвращает trunc(x),
    для x < 0 с остатком trunc(x) - 1.

    Examples:
        >>> floor(2.5)
        2
        >>> floor(-2.5)
        -3
    """
    int_part = truncate_to_int64(x)
    if x == int_part:
        return int_part
    return int_part if x > 0 else wrap_int64(int_part - 1)


def modf(x: float) -> tuple[float, int]:
    """
    Разделение числа на дробную и целую часть.

    Целая часть (int64, усечение к нулю) возвращается вторым элементом
    вместо записи в выходной параметр.

    Args:
        x: Исходное значение

    Returns:
        (fraction, integer_part):
            - fraction: x - integer_part (со знаком x)
            - integer_part: trunc(x)

    Examples:
        >>> modf(3.75)
        (0.75, 3)
        >>> modf(-3.75)
        (-0.75, -3)
    """
    integer_part = truncate_to_int64(x)
    return x - integer_part, integer_part


def factorial(n: int) -> int:
    """
    Факториал n! в арифметике uint64.

    Итеративное произведение 2 * 3 * ... * n; при переполнении результат
    молча берётся по модулю 2^64. Начиная с n = 66 произведение содержит
    множитель 2^64 и равно 0, после чего цикл можно прервать.

    Args:
        n: Неотрицательное целое (отрицательные приводятся к uint64)

    Returns:
        n! mod 2^64

    Examples:
        >>> factorial(5)
        120
        >>> factorial(21)
        14197454024290336768
    """
    n = wrap_uint64(int(n))
    if n == 0 or n == 1:
        return 1

    value = 1
    for i in range(2, n + 1):
        value = wrap_uint64(value * i)
        if value == 0:
            break

    return value
