"""
Contract Validation Module

Валидация сериализованных значений gmath против JSON Schema контрактов.
"""

from .validators import (
    ComplexNumberValidator,
    ContractValidator,
    QuadraticRootsValidator,
    SchemaLoader,
    quadratic_roots_to_contract,
    validate_complex_number,
    validate_quadratic_roots,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexNumberValidator",
    "QuadraticRootsValidator",
    # Functions
    "quadratic_roots_to_contract",
    "validate_complex_number",
    "validate_quadratic_roots",
]
