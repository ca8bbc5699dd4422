"""
Exponents — корень, степень, экспонента, натуральный логарифм

Каждая функция вычисляется явным численным алгоритмом:
- sqrt: метод Ньютона-Рафсона (вавилонский метод)
- power: возведение в степень через возведение в квадрат, O(log n)
- exp: power(E, x), только целые x
- ln: сведение аргумента делением на 2 + ряд 2*atanh(z)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Аргумент вне области определения → DOMAIN_ERROR (-1), без исключений
2. Деление на ноль даёт ±inf/nan по IEEE 754
3. Показатель power приводится к int64 усечением к нулю
"""

from src.gmath.math.constants import (
    DOMAIN_ERROR,
    E,
    LN2,
    LN_SERIES_MAX_POWER,
    SQRT_MAX_ITERATIONS,
    SQRT_TOLERANCE,
)
from src.gmath.math.numerical_safeguards import INF, ieee_divide, truncate_to_int64
from src.gmath.math.rounding import absolute


def sqrt(x: float) -> float:
    """
    Квадратный корень методом Ньютона-Рафсона.

    Алгоритм:
        guess_0 = x / 2
        guess_{k+1} = 0.5 * (guess_k + x / guess_k)
        стоп при |guess_{k+1} - guess_k| <= SQRT_TOLERANCE

    Толерантность абсолютная, поэтому для малых x результат грубый.
    Число итераций ограничено SQRT_MAX_ITERATIONS.

    Args:
        x: Подкоренное значение

    Returns:
        sqrt(x), x для x in {0, 1}, DOMAIN_ERROR для x < 0

    Examples:
        >>> sqrt(4.0)
        2.0
        >>> sqrt(-1.0)
        -1.0
    """
    if x < 0:
        return DOMAIN_ERROR
    if x == 0 or x == 1:
        return x

    guess = x / 2
    for _ in range(SQRT_MAX_ITERATIONS):
        new_guess = 0.5 * (guess + ieee_divide(x, guess))
        diff = new_guess - guess
        guess = new_guess
        # NaN в diff также завершает итерацию
        if not (diff > SQRT_TOLERANCE or diff < -SQRT_TOLERANCE):
            break

    return guess


def power(base: float, exponent: int) -> float:
    """
    Возведение в целую степень через возведение в квадрат.

    Показатель — int64; дробный показатель усекается к нулю.
    Для отрицательного показателя возвращается 1 / base^|exponent|.

    Args:
        base: Основание
        exponent: Целый показатель (int64)

    Returns:
        base^exponent

    Examples:
        >>> power(2.0, 10)
        1024.0
        >>> power(2.0, -2)
        0.25
        >>> power(-3.0, 3)
        -27.0
    """
    exponent = truncate_to_int64(exponent)
    if exponent == 0:
        return 1.0

    result = 1.0
    current_base = float(base)
    current_exp = absolute(exponent)

    while current_exp > 0:
        if current_exp % 2 == 1:
            result *= current_base
        current_base *= current_base
        current_exp //= 2

    return ieee_divide(1.0, result) if exponent < 0 else result


def exp(x: float) -> float:
    """
    e^x через power(E, x).

    ВНИМАНИЕ: power принимает только целый показатель, поэтому x усекается
    к нулю: exp(2.9) == exp(2). Точен только для целых x.
    """
    return power(E, x)


def ln(x: float) -> float:
    """
    Натуральный логарифм через сведение аргумента и ряд.

    Алгоритм:
        1. Делим x на 2, пока x > 2, считая k делений → x in (0, 2]
        2. z = (x - 1) / (x + 1)
        3. ln(x) = k * LN2 + 2 * (z + z^3/3 + z^5/5 + z^7/7 + z^9/9)

    Для x близких к 0 ряд сходится медленно, точность падает.

    Args:
        x: Аргумент логарифма

    Returns:
        ln(x), 0 для x == 1, DOMAIN_ERROR для x <= 0

    Examples:
        >>> ln(1.0)
        0.0
        >>> ln(0.0)
        -1.0
    """
    if x <= 0:
        return DOMAIN_ERROR
    if x == 1:
        return 0.0
    if x == INF:
        # Деление inf на 2 никогда не опустит аргумент ниже 2
        return INF

    count = 0
    while x > 2:
        x /= 2
        count += 1

    result = count * LN2

    z = (x - 1) / (x + 1)
    term = z
    series_sum = 0.0
    for i in range(1, LN_SERIES_MAX_POWER + 1, 2):
        series_sum += term / i
        term *= z * z

    result += 2 * series_sum
    return result
