"""
Core math modules для dynamic_domain

Проверка и форматирование чисел-границ.
"""

from dynamic_domain.core.math.numerical_safeguards import (
    BOUND_NUMBER_TYPES,
    BoundNumber,
    NonComparableBoundError,
    format_number,
    is_valid_bound_number,
    validate_bound_number,
)

__all__ = [
    # Types
    "BOUND_NUMBER_TYPES",
    "BoundNumber",
    # Exceptions
    "NonComparableBoundError",
    # Functions
    "format_number",
    "is_valid_bound_number",
    "validate_bound_number",
]
