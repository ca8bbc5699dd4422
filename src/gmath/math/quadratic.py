"""
Quadratic — решение квадратного уравнения a*x^2 + b*x + c = 0

Корни всегда возвращаются как пара ComplexNumber: при D >= 0 мнимые части
равны нулю. Вызывающий код может передать собственные экземпляры root1/root2,
тогда решатель только записывает в них результат.
"""

from typing import NamedTuple, Optional

from src.gmath.domain.complex_number import ComplexNumber
from src.gmath.math.exponents import sqrt
from src.gmath.math.numerical_safeguards import ieee_divide
from src.gmath.math.rounding import absolute


class QuadraticRoots(NamedTuple):
    """Пара корней квадратного уравнения."""

    root1: ComplexNumber  # -b/2 + sqrt(D)/2 (или + i*sqrt(|D|)/2)
    root2: ComplexNumber  # -b/2 - sqrt(D)/2 (или - i*sqrt(|D|)/2)


def solve_quadratic(
    a: float,
    b: float,
    c: float,
    root1: Optional[ComplexNumber] = None,
    root2: Optional[ComplexNumber] = None,
) -> QuadraticRoots:
    """
    Корни квадратного уравнения a*x^2 + b*x + c = 0.

    Алгоритм:
        1. Нормализация: если a != 1, то b /= a, c /= a, a = 1
        2. D = b^2 - 4*c
        3. D < 0:  root = -b/2 ± i * sqrt(|D|)/2
           D >= 0: root = (-b ± sqrt(D)) / 2, мнимая часть 0

    При a == 0 нормализация делит на ноль и корни содержат inf/nan.

    Args:
        a, b, c: Коэффициенты уравнения
        root1: Экземпляр для первого корня (optional, заполняется на месте)
        root2: Экземпляр для второго корня (optional, заполняется на месте)

    Returns:
        QuadraticRoots(root1, root2), те же экземпляры, если они переданы

    Examples:
        >>> roots = solve_quadratic(1.0, -3.0, 2.0)
        >>> (roots.root1.real, roots.root2.real)
        (2.0, 1.0)
        >>> roots = solve_quadratic(1.0, 0.0, 1.0)
        >>> (roots.root1.imaginary, roots.root2.imaginary)
        (1.0, -1.0)
    """
    if root1 is None:
        root1 = ComplexNumber()
    if root2 is None:
        root2 = ComplexNumber()

    if a != 1:
        b = ieee_divide(b, a)
        c = ieee_divide(c, a)
        a = 1.0

    discriminant = b * b - 4 * a * c

    if discriminant < 0:
        half_width = sqrt(absolute(discriminant)) / (2 * a)
        root1.real = (-b) / (2 * a)
        root1.imaginary = half_width
        root2.real = (-b) / (2 * a)
        root2.imaginary = -1 * half_width
    else:
        root1.real = (-b + sqrt(discriminant)) / (2 * a)
        root2.real = (-b - sqrt(discriminant)) / (2 * a)
        root1.imaginary = 0.0
        root2.imaginary = 0.0

    return QuadraticRoots(root1=root1, root2=root2)
