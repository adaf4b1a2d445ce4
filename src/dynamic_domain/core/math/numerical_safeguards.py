"""
Numerical Safeguards — проверка и форматирование чисел-границ

Модуль обеспечивает корректность чисел, которые становятся границами доменов:
- Только сравнимые числа: int, float, Decimal (bool запрещён)
- NaN/Inf никогда не попадают в границы (бесконечность — это отдельный Value)
- Каноническая текстовая форма числа для нотации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любая граница totally ordered относительно любой другой границы
2. Целые значения печатаются без дробной части (5.0 → "5")
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from decimal import Decimal
from typing import Final, Union

BoundNumber = Union[int, float, Decimal]

# Допустимые типы чисел для границ
BOUND_NUMBER_TYPES: Final[tuple[type, ...]] = (int, float, Decimal)

# Выше 2**53 float не представляет все целые точно: печатаем в repr-форме
FLOAT_EXACT_INT_LIMIT: Final[float] = 2.0**53


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NonComparableBoundError(ValueError):
    """
    Число не может быть границей домена.

    Возникает для NaN, ±Inf, bool и нечисловых значений. Неограниченная
    сторона интервала задаётся через Value.unbounded(), а не через float('inf').
    """

    pass


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_bound_number(value: object) -> bool:
    """
    Проверка, может ли значение быть конечной границей домена.

    Args:
        value: Проверяемое значение

    Returns:
        True если value — конечное int/float/Decimal (не bool)

    Examples:
        >>> is_valid_bound_number(5)
        True
        >>> is_valid_bound_number(float('nan'))
        False
        >>> is_valid_bound_number(True)
        False
    """
    if isinstance(value, bool) or not isinstance(value, BOUND_NUMBER_TYPES):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return True


def validate_bound_number(value: object, name: str = "number") -> BoundNumber:
    """
    Валидация числа-границы.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        NonComparableBoundError: Если value не является конечным числом
    """
    if isinstance(value, bool) or not isinstance(value, BOUND_NUMBER_TYPES):
        raise NonComparableBoundError(
            f"{name} must be int, float or Decimal, got {type(value).__name__}"
        )

    if not is_valid_bound_number(value):
        raise NonComparableBoundError(
            f"{name} must be finite (not NaN/Inf), got {value}. "
            f"Use Value.unbounded() for an infinite side"
        )

    return value


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_number(value: BoundNumber) -> str:
    """
    Каноническая текстовая форма числа-границы.

    Целые значения печатаются без дробной части, дробные — в кратчайшей
    точной форме.

    Examples:
        >>> format_number(5)
        '5'
        >>> format_number(5.0)
        '5'
        >>> format_number(2.5)
        '2.5'
        >>> format_number(Decimal("2.50"))
        '2.5'
    """
    validate_bound_number(value)

    if isinstance(value, int):
        return str(value)

    if isinstance(value, float):
        if value.is_integer() and abs(value) <= FLOAT_EXACT_INT_LIMIT:
            return str(int(value))
        return repr(value)

    # Decimal
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")
