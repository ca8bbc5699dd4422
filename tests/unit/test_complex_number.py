"""
Тесты для модели ComplexNumber и операций над ней

Проверяет:
1. Создание и валидацию модели Pydantic
2. Арифметику (сумма, произведение)
3. In-place операции над экземпляром вызывающего кода
4. Формат вывода "a + bi" / "a - |b|i"
5. Сериализацию/десериализацию
"""

import math

import pytest
from pydantic import ValidationError

from src.gmath.domain import (
    ComplexNumber,
    add_complex,
    add_real_in_place,
    complex_from_contract,
    complex_to_contract,
    format_complex,
    multiply_complex,
    print_complex,
    scale_by_real_in_place,
)


@pytest.fixture
def c12() -> ComplexNumber:
    """1 + 2i"""
    return ComplexNumber(real=1.0, imaginary=2.0)


@pytest.fixture
def c34() -> ComplexNumber:
    """3 + 4i"""
    return ComplexNumber(real=3.0, imaginary=4.0)


# =============================================================================
# MODEL TESTS
# =============================================================================


class TestComplexNumberModel:
    """Тесты для модели ComplexNumber"""

    def test_defaults_to_zero(self) -> None:
        c = ComplexNumber()
        assert c.real == 0.0
        assert c.imaginary == 0.0

    def test_ints_coerced_to_float(self) -> None:
        c = ComplexNumber(real=1, imaginary=2)
        assert isinstance(c.real, float)
        assert isinstance(c.imaginary, float)

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ComplexNumber(real="abc", imaginary=0.0)

    def test_non_numeric_assignment_rejected(self, c12: ComplexNumber) -> None:
        with pytest.raises(ValidationError):
            c12.real = "abc"

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ComplexNumber(real=1.0, imaginary=2.0, modulus=3.0)

    def test_nan_inf_allowed(self) -> None:
        c = ComplexNumber(real=math.inf, imaginary=math.nan)
        assert c.real == math.inf
        assert math.isnan(c.imaginary)


# =============================================================================
# ARITHMETIC TESTS
# =============================================================================


class TestArithmetic:
    """Тесты add_complex / multiply_complex"""

    def test_add(self, c12: ComplexNumber, c34: ComplexNumber) -> None:
        result = add_complex(c12, c34)
        assert (result.real, result.imaginary) == (4.0, 6.0)

    def test_multiply(self, c12: ComplexNumber, c34: ComplexNumber) -> None:
        """(1 + 2i)(3 + 4i) = -5 + 10i"""
        result = multiply_complex(c12, c34)
        assert (result.real, result.imaginary) == (-5.0, 10.0)

    def test_multiply_i_squared(self) -> None:
        i = ComplexNumber(real=0.0, imaginary=1.0)
        result = multiply_complex(i, i)
        assert (result.real, result.imaginary) == (-1.0, 0.0)

    def test_operands_not_mutated(self, c12: ComplexNumber, c34: ComplexNumber) -> None:
        add_complex(c12, c34)
        multiply_complex(c12, c34)
        assert (c12.real, c12.imaginary) == (1.0, 2.0)
        assert (c34.real, c34.imaginary) == (3.0, 4.0)

    def test_returns_new_instance(self, c12: ComplexNumber) -> None:
        zero = ComplexNumber()
        assert add_complex(c12, zero) is not c12


# =============================================================================
# IN-PLACE TESTS
# =============================================================================


class TestInPlace:
    """Тесты add_real_in_place / scale_by_real_in_place"""

    def test_add_real(self, c12: ComplexNumber) -> None:
        result = add_real_in_place(c12, 3.0)
        assert result is None
        assert (c12.real, c12.imaginary) == (4.0, 2.0)

    def test_scale_by_real(self, c12: ComplexNumber) -> None:
        result = scale_by_real_in_place(c12, 2.0)
        assert result is None
        assert (c12.real, c12.imaginary) == (2.0, 4.0)

    def test_scale_by_negative(self, c34: ComplexNumber) -> None:
        scale_by_real_in_place(c34, -0.5)
        assert (c34.real, c34.imaginary) == (-1.5, -2.0)


# =============================================================================
# DISPLAY TESTS
# =============================================================================


class TestDisplay:
    """Тесты format_complex / print_complex"""

    def test_positive_imaginary(self, c12: ComplexNumber) -> None:
        assert format_complex(c12) == "1.000000 + 2.000000i"

    def test_negative_imaginary(self) -> None:
        c = ComplexNumber(real=-1.5, imaginary=-0.25)
        assert format_complex(c) == "-1.500000 - 0.250000i"

    def test_zero_imaginary_uses_plus(self) -> None:
        c = ComplexNumber(real=3.0, imaginary=0.0)
        assert format_complex(c) == "3.000000 + 0.000000i"

    def test_six_fraction_digits(self) -> None:
        c = ComplexNumber(real=1.0 / 3.0, imaginary=2.0 / 3.0)
        assert format_complex(c) == "0.333333 + 0.666667i"

    def test_str(self, c34: ComplexNumber) -> None:
        assert str(c34) == "3.000000 + 4.000000i"

    def test_print_writes_line_to_stdout(
        self, c12: ComplexNumber, capsys: pytest.CaptureFixture[str]
    ) -> None:
        print_complex(c12)
        print_complex(ComplexNumber(real=0.5, imaginary=-7.0))

        captured = capsys.readouterr()
        assert captured.out == "1.000000 + 2.000000i\n0.500000 - 7.000000i\n"


# =============================================================================
# SERIALIZATION TESTS
# =============================================================================


class TestSerialization:
    """Тесты complex_to_contract / complex_from_contract"""

    def test_to_contract(self, c12: ComplexNumber) -> None:
        assert complex_to_contract(c12) == {"real": 1.0, "imaginary": 2.0}

    def test_from_contract(self) -> None:
        c = complex_from_contract({"real": -5, "imaginary": 10})
        assert (c.real, c.imaginary) == (-5.0, 10.0)

    def test_from_contract_missing_field_uses_default(self) -> None:
        c = complex_from_contract({"real": 2.0})
        assert c.imaginary == 0.0

    def test_from_contract_invalid(self) -> None:
        with pytest.raises(ValidationError):
            complex_from_contract({"real": "x", "imaginary": 0.0})

    def test_json_roundtrip(self, c34: ComplexNumber) -> None:
        restored = ComplexNumber.model_validate_json(c34.model_dump_json())
        assert (restored.real, restored.imaginary) == (3.0, 4.0)
