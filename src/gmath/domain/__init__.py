"""
Domain models and value objects.

Contains the ComplexNumber value type and its operations.
"""

from src.gmath.domain.complex_number import (
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

__all__ = [
    # Model
    "ComplexNumber",
    # Display
    "format_complex",
    "print_complex",
    # Arithmetic
    "add_complex",
    "multiply_complex",
    "add_real_in_place",
    "scale_by_real_in_place",
    # Serialization
    "complex_to_contract",
    "complex_from_contract",
]
