"""
Scalar math modules для gmath

Скалярные функции, вычисляемые явными численными алгоритмами
без обращения к платформенной math-библиотеке.
"""

# Constants
from src.gmath.math.constants import (
    DOMAIN_ERROR,
    E,
    LN2,
    LN_SERIES_MAX_POWER,
    PI,
    SERIES_TERMS,
    SQRT_MAX_ITERATIONS,
    SQRT_TOLERANCE,
)

# Numerical Safeguards
from src.gmath.math.numerical_safeguards import (
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    ieee_divide,
    is_domain_error,
    is_valid_float,
    truncate_to_int64,
    wrap_int64,
    wrap_uint64,
)

# Rounding
from src.gmath.math.rounding import absolute, ceil, factorial, floor, modf

# Exponents
from src.gmath.math.exponents import exp, ln, power, sqrt

# Trigonometry
from src.gmath.math.trigonometry import (
    acos,
    asin,
    atan,
    cos,
    cosr,
    reduce_angle,
    sin,
    sinr,
    tan,
    tanr,
)

# Quadratic
from src.gmath.math.quadratic import QuadraticRoots, solve_quadratic

__all__ = [
    # Constants
    "DOMAIN_ERROR",
    "E",
    "LN2",
    "LN_SERIES_MAX_POWER",
    "PI",
    "SERIES_TERMS",
    "SQRT_MAX_ITERATIONS",
    "SQRT_TOLERANCE",
    # Numerical Safeguards — Fixed-width integers
    "INT64_MAX",
    "INT64_MIN",
    "UINT64_MAX",
    "truncate_to_int64",
    "wrap_int64",
    "wrap_uint64",
    # Numerical Safeguards — Floats
    "ieee_divide",
    "is_domain_error",
    "is_valid_float",
    # Rounding
    "absolute",
    "ceil",
    "factorial",
    "floor",
    "modf",
    # Exponents
    "exp",
    "ln",
    "power",
    "sqrt",
    # Trigonometry — Degrees
    "cos",
    "sin",
    "tan",
    # Trigonometry — Radians
    "cosr",
    "reduce_angle",
    "sinr",
    "tanr",
    # Trigonometry — Inverse
    "acos",
    "asin",
    "atan",
    # Quadratic
    "QuadraticRoots",
    "solve_quadratic",
]
