"""
ComplexNumber — Модель комплексного числа a + bi

Mutable Pydantic модель: операции add_complex / multiply_complex создают новый
экземпляр, а add_real_in_place / scale_by_real_in_place изменяют экземпляр
вызывающего кода на месте и ничего не возвращают.

Переполнение и NaN пропагируют по правилам IEEE 754 (не обрабатываются).
"""

from typing import Any

from pydantic import BaseModel, Field

# =============================================================================
# COMPLEX NUMBER MODEL
# =============================================================================


class ComplexNumber(BaseModel):
    """
    Комплексное число real + imaginary * i.

    Модель не frozen: in-place операции меняют поля напрямую,
    validate_assignment гарантирует, что поля остаются float.
    """

    real: float = Field(0.0, description="Действительная часть")
    imaginary: float = Field(0.0, description="Мнимая часть")

    model_config = {"validate_assignment": True, "extra": "forbid"}

    def __str__(self) -> str:
        return format_complex(self)


# =============================================================================
# ОТОБРАЖЕНИЕ
# =============================================================================


def format_complex(c: ComplexNumber) -> str:
    """
    Текстовое представление "a + bi" / "a - |b|i".

    Формат как у %f: 6 знаков после запятой.

    Examples:
        >>> format_complex(ComplexNumber(real=1.0, imaginary=2.0))
        '1.000000 + 2.000000i'
        >>> format_complex(ComplexNumber(real=1.5, imaginary=-0.25))
        '1.500000 - 0.250000i'
    """
    if c.imaginary >= 0:
        return "%f + %fi" % (c.real, c.imaginary)
    return "%f - %fi" % (c.real, -c.imaginary)


def print_complex(c: ComplexNumber) -> None:
    """Вывод комплексного числа в stdout одной строкой."""
    print(format_complex(c))


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add_complex(c1: ComplexNumber, c2: ComplexNumber) -> ComplexNumber:
    """
    Сумма двух комплексных чисел (покомпонентно).

    Examples:
        >>> add_complex(ComplexNumber(real=1, imaginary=2), ComplexNumber(real=3, imaginary=4))
        ComplexNumber(real=4.0, imaginary=6.0)
    """
    return ComplexNumber(
        real=c1.real + c2.real,
        imaginary=c1.imaginary + c2.imaginary,
    )


def multiply_complex(c1: ComplexNumber, c2: ComplexNumber) -> ComplexNumber:
    """
    Произведение двух комплексных чисел.

    Формула: (a + bi)(c + di) = (ac - bd) + (ad + bc)i

    Examples:
        >>> multiply_complex(ComplexNumber(real=1, imaginary=2), ComplexNumber(real=3, imaginary=4))
        ComplexNumber(real=-5.0, imaginary=10.0)
    """
    return ComplexNumber(
        real=c1.real * c2.real - c1.imaginary * c2.imaginary,
        imaginary=c1.imaginary * c2.real + c1.real * c2.imaginary,
    )


def add_real_in_place(c: ComplexNumber, r: float) -> None:
    """Прибавление действительного числа к real части (на месте)."""
    c.real += r


def scale_by_real_in_place(c: ComplexNumber, r: float) -> None:
    """Умножение обеих частей на действительное число (на месте)."""
    c.real *= r
    c.imaginary *= r


# =============================================================================
# СЕРИАЛИЗАЦИЯ
# =============================================================================


def complex_to_contract(c: ComplexNumber) -> dict[str, float]:
    """Сериализация в dict по схеме complex_number.json."""
    return c.model_dump()


def complex_from_contract(data: dict[str, Any]) -> ComplexNumber:
    """
    Десериализация из dict с валидацией Pydantic.

    Raises:
        pydantic.ValidationError: Если поля не приводятся к float
    """
    return ComplexNumber.model_validate(data)
