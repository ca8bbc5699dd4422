"""
Constants — фиксированные параметры численных алгоритмов

Все значения заданы литералами и не меняются во время выполнения
(конфигурируемая точность не поддерживается).
"""

from typing import Final

# =============================================================================
# МАТЕМАТИЧЕСКИЕ КОНСТАНТЫ
# =============================================================================

PI: Final[float] = 3.14159265358979323

# Число Эйлера
E: Final[float] = 2.718281828459045235

# ln(2), используется в ln() после сведения аргумента в (0, 2]
LN2: Final[float] = 0.6931471805599453

TWO_PI: Final[float] = 2 * PI
HALF_PI: Final[float] = PI / 2
THREE_HALVES_PI: Final[float] = 3 * PI / 2


# =============================================================================
# ПАРАМЕТРЫ СХОДИМОСТИ
# =============================================================================

# Порог остановки итераций Ньютона-Рафсона в sqrt: |g' - g| <= tolerance
SQRT_TOLERANCE: Final[float] = 1e-6

# Ограничение числа итераций sqrt. Старт с x/2 сходится примерно
# за log2(x)/2 шагов (до ~520 для float); для больших x соседние float
# могут отличаться больше чем на SQRT_TOLERANCE и итерация зацикливается
SQRT_MAX_ITERATIONS: Final[int] = 2000

# Количество членов ряда Маклорена для sin/cos/atan/asin
SERIES_TERMS: Final[int] = 10

# Максимальная степень в ряду ln: z + z^3/3 + ... + z^9/9 (5 членов)
LN_SERIES_MAX_POWER: Final[int] = 9


# =============================================================================
# SENTINEL
# =============================================================================

# Возвращается при аргументе вне области определения (sqrt, ln, asin, acos)
DOMAIN_ERROR: Final[float] = -1.0
