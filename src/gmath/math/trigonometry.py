"""
Trigonometry — тригонометрия в градусах и радианах, обратные функции

Алгоритмы:
- cosr / sinr: сведение угла в [0, 2*PI], точные значения в канонических
  углах, иначе ряд Маклорена из SERIES_TERMS членов
- atan: ряд для |x| <= 1, тождество atan(x) = ±PI/2 - atan(1/x) для |x| > 1
- asin: биномиальный ряд, acos = PI/2 - asin

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Канонические углы 0, PI/2, PI, 3*PI/2, 2*PI сравниваются точно (==),
   без толерантности
2. Углы внутри [0, 2*PI] не изменяются при сведении (бит-в-бит)
3. asin / acos вне [-1, 1] → DOMAIN_ERROR (-1)
4. tanr при cosr == 0 даёт ±inf/nan по IEEE 754, без исключения

Точность ряда падает к концу периода: при угле около 2*PI ошибка
cos достигает ~4e-3.
"""

from src.gmath.math.constants import (
    DOMAIN_ERROR,
    HALF_PI,
    PI,
    SERIES_TERMS,
    THREE_HALVES_PI,
    TWO_PI,
)
from src.gmath.math.exponents import power
from src.gmath.math.numerical_safeguards import ieee_divide
from src.gmath.math.rounding import factorial

# =============================================================================
# СВЕДЕНИЕ УГЛА
# =============================================================================


def reduce_angle(radians: float) -> float:
    """
    Сведение угла в диапазон [0, 2*PI] по периодичности.

    Эквивалентно многократному вычитанию/прибавлению 2*PI, но за O(1):
    - radians > 2*PI → radians % (2*PI)
    - radians < 0    → radians % (2*PI) (результат неотрицательный)
    - иначе угол возвращается без изменений (включая сам 2*PI)

    Examples:
        >>> reduce_angle(1.0)
        1.0
        >>> reduce_angle(PI) == PI
        True
    """
    if radians > TWO_PI or radians < 0:
        return radians % TWO_PI
    return radians


# =============================================================================
# РАДИАНЫ
# =============================================================================


def cosr(radians: float) -> float:
    """
    Косинус угла в радианах.

    Ряд: cos(x) = Σ (-1)^i * x^(2i) / (2i)!,  i = 0..SERIES_TERMS-1
    """
    radians = reduce_angle(radians)

    if radians == 0 or radians == TWO_PI:
        return 1.0
    if radians == HALF_PI or radians == THREE_HALVES_PI:
        return 0.0
    if radians == PI:
        return -1.0

    value = 0.0
    for i in range(SERIES_TERMS):
        value += power(-1, i) * power(radians, 2 * i) / factorial(2 * i)
    return value


def sinr(radians: float) -> float:
    """
    Синус угла в радианах.

    Ряд: sin(x) = Σ (-1)^i * x^(2i+1) / (2i+1)!,  i = 0..SERIES_TERMS-1
    """
    radians = reduce_angle(radians)

    if radians == 0 or radians == TWO_PI or radians == PI:
        return 0.0
    if radians == HALF_PI:
        return 1.0
    if radians == THREE_HALVES_PI:
        return -1.0

    value = 0.0
    for i in range(SERIES_TERMS):
        value += power(-1, i) * power(radians, 2 * i + 1) / factorial(2 * i + 1)
    return value


def tanr(radians: float) -> float:
    """Тангенс угла в радианах: sinr / cosr (±inf при cosr == 0)."""
    return ieee_divide(sinr(radians), cosr(radians))


# =============================================================================
# ГРАДУСЫ
# =============================================================================


def cos(degrees: float) -> float:
    """Косинус угла в градусах."""
    radians = degrees * PI / 180
    return cosr(radians)


def sin(degrees: float) -> float:
    """Синус угла в градусах."""
    radians = degrees * PI / 180
    return sinr(radians)


def tan(degrees: float) -> float:
    """Тангенс угла в градусах."""
    radians = degrees * PI / 180
    return tanr(radians)


# =============================================================================
# ОБРАТНЫЕ ФУНКЦИИ (результат в радианах)
# =============================================================================


def atan(x: float) -> float:
    """
    Арктангенс.

    Для |x| > 1 используется тождество:
        atan(x) =  PI/2 - atan(1/x),  x > 1
        atan(x) = -PI/2 - atan(1/x),  x < -1
    После него |1/x| < 1, поэтому хватает одного уровня рекурсии.

    Для |x| <= 1: Σ (-1)^i * x^(2i+1) / (2i+1),  i = 0..SERIES_TERMS-1.
    При |x| == 1 ряд сходится медленно (atan(1) ≈ 0.760 вместо 0.785).

    Examples:
        >>> atan(0.0)
        0.0
    """
    if x == 0:
        return 0.0

    if x > 1:
        return HALF_PI - atan(1.0 / x)
    if x < -1:
        return -HALF_PI - atan(1.0 / x)

    value = 0.0
    for i in range(SERIES_TERMS):
        value += power(-1, i) * power(x, 2 * i + 1) / (2 * i + 1)
    return value


def asin(x: float) -> float:
    """
    Арксинус через биномиальный ряд.

    Член i: (2i)! * x^(2i+1) / (4^i * (i!)^2 * (2i+1)),  i = 0..SERIES_TERMS-1

    Ряд обрезан, поэтому около ±1 ошибка велика: asin(1) ≈ 1.392 вместо PI/2.

    Args:
        x: Значение в [-1, 1]

    Returns:
        asin(x) в радианах, DOMAIN_ERROR вне [-1, 1]
    """
    if x < -1 or x > 1:
        return DOMAIN_ERROR

    value = 0.0
    for i in range(SERIES_TERMS):
        value += (factorial(2 * i) * power(x, 2 * i + 1)) / (
            power(4, i) * power(factorial(i), 2) * (2 * i + 1)
        )
    return value


def acos(x: float) -> float:
    """
    Арккосинус: PI/2 - asin(x).

    Returns:
        acos(x) в радианах, DOMAIN_ERROR вне [-1, 1]
    """
    if x < -1 or x > 1:
        return DOMAIN_ERROR
    return HALF_PI - asin(x)
