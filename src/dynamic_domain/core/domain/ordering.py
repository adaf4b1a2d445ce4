"""
Ordering — порядок границ с учётом стороны интервала

Value сам по себе не знает знак бесконечности, поэтому сравнение границ
делается через ключи, зависящие от стороны:

    lower_key: −∞ < [x < (x < [y  (x < y)
    upper_key: x) < x] < y)  (x < y) < +∞

"Более жёсткая" (tighter) граница сужает множество:
- для левой стороны это больший lower_key
- для правой стороны это меньший upper_key
При равном числе исключённая граница всегда жёстче включённой.
"""

from typing import Any

from dynamic_domain.core.domain.value import Value


def lower_key(value: Value) -> tuple[int, Any, int]:
    """Ключ сортировки левой границы (возрастание = сдвиг вправо)."""
    if value.is_unbounded:
        return (0, 0, 0)
    return (1, value.number, 0 if value.inclusive else 1)


def upper_key(value: Value) -> tuple[int, Any, int]:
    """Ключ сортировки правой границы (возрастание = сдвиг вправо)."""
    if value.is_unbounded:
        return (1, 0, 0)
    return (0, value.number, 1 if value.inclusive else 0)


def tighter_lower(a: Value, b: Value) -> Value:
    """Наиболее жёсткая из двух левых границ."""
    return a if lower_key(a) >= lower_key(b) else b


def tighter_upper(a: Value, b: Value) -> Value:
    """Наиболее жёсткая из двух правых границ."""
    return a if upper_key(a) <= upper_key(b) else b


def looser_upper(a: Value, b: Value) -> Value:
    """Наиболее свободная из двух правых границ."""
    return a if upper_key(a) >= upper_key(b) else b


def is_valid_span(lower: Value, upper: Value) -> bool:
    """
    Непуст ли интервал [lower; upper].

    Равные границы дают точку {x} только если обе включены.
    """
    if lower.is_unbounded or upper.is_unbounded:
        return True
    if lower.number < upper.number:
        return True
    if lower.number == upper.number:
        return lower.inclusive and upper.inclusive
    return False


def touches_or_overlaps(upper: Value, next_lower: Value) -> bool:
    """
    Сливаются ли интервал с правой границей upper и следующий за ним интервал
    с левой границей next_lower (next_lower не левее начала первого).

    Касание в одной точке сливается, только если хотя бы одна из двух
    касающихся границ включена: [1;5] ⋃ (5;8) = [1;8), но (1;5) ⋃ (5;8)
    остаётся объединением.
    """
    if upper.is_unbounded or next_lower.is_unbounded:
        return True
    if next_lower.number < upper.number:
        return True
    if next_lower.number == upper.number:
        return upper.inclusive or next_lower.inclusive
    return False


def contains_number(lower: Value, upper: Value, x: Any) -> bool:
    """Принадлежит ли число x интервалу [lower; upper]."""
    if not lower.is_unbounded:
        if x < lower.number or (x == lower.number and not lower.inclusive):
            return False
    if not upper.is_unbounded:
        if x > upper.number or (x == upper.number and not upper.inclusive):
            return False
    return True
