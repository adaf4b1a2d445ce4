"""
Notation — каноническое текстовое представление домена

Нотация:
- пустое множество: ∅
- левая граница: [x (включена), (x (исключена), (-∞ (без ограничения)
- правая граница: x] (включена), x) (исключена), ∞) (без ограничения)
- объединение: интервалы через ⋃ в порядке возрастания левой границы

Примеры: "[5;10)", "(3;5]", "(-∞;5)⋃[8;100]", "∅"

render() не сортирует и не нормализует: порядок интервалов гарантируется
нормализацией при построении домена.
"""

from dataclasses import dataclass
from typing import Any, Final

from dynamic_domain.core.domain.value import Value
from dynamic_domain.core.math.numerical_safeguards import format_number

# =============================================================================
# СИМВОЛЫ НОТАЦИИ
# =============================================================================

EMPTY_SYMBOL: Final[str] = "∅"
UNION_SYMBOL: Final[str] = "⋃"
INFINITY_SYMBOL: Final[str] = "∞"
NEGATIVE_SIGN: Final[str] = "-"
BOUND_SEPARATOR: Final[str] = ";"


@dataclass(frozen=True)
class NotationConfig:
    """Конфигурация символов нотации."""

    empty_symbol: str = EMPTY_SYMBOL
    union_symbol: str = UNION_SYMBOL
    infinity_symbol: str = INFINITY_SYMBOL
    negative_sign: str = NEGATIVE_SIGN
    separator: str = BOUND_SEPARATOR


DEFAULT_NOTATION: Final[NotationConfig] = NotationConfig()


# =============================================================================
# RENDER
# =============================================================================


def render_lower(value: Value, notation: NotationConfig = DEFAULT_NOTATION) -> str:
    if value.is_unbounded:
        return f"({notation.negative_sign}{notation.infinity_symbol}"
    bracket = "[" if value.inclusive else "("
    return f"{bracket}{format_number(value.number)}"


def render_upper(value: Value, notation: NotationConfig = DEFAULT_NOTATION) -> str:
    if value.is_unbounded:
        return f"{notation.infinity_symbol})"
    bracket = "]" if value.inclusive else ")"
    return f"{format_number(value.number)}{bracket}"


def render_span(lower: Value, upper: Value, notation: NotationConfig = DEFAULT_NOTATION) -> str:
    return f"{render_lower(lower, notation)}{notation.separator}{render_upper(upper, notation)}"


def render(domain: Any, notation: NotationConfig | None = None) -> str:
    """
    Текстовое представление нормализованного домена.

    Args:
        domain: EmptyDomain, Interval или UnionDomain
        notation: Символы нотации (default: DEFAULT_NOTATION)

    Returns:
        Строка в математической нотации

    Raises:
        TypeError: Если domain не является доменом
    """
    notation = notation or DEFAULT_NOTATION
    kind = getattr(domain, "kind", None)

    if kind == "empty":
        return notation.empty_symbol
    if kind == "interval":
        return render_span(domain.lower, domain.upper, notation)
    if kind == "union":
        return notation.union_symbol.join(
            render_span(member.lower, member.upper, notation) for member in domain.members
        )

    raise TypeError(f"Cannot render {type(domain).__name__} as a domain")
