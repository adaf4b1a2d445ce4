"""
DomainBuilder — пошаговое уточнение границ

Builder начинает с (−∞;+∞) и накапливает ограничения:
- lt(v) — ограничение сверху, побеждает самая жёсткая правая граница
- gt(v) — ограничение снизу, побеждает самая жёсткая левая граница
- при равном числе исключённая граница (Secluded) жёстче включённой

build() возвращает Interval или EmptyDomain. Состояние builder локально
для одной цепочки вызовов; готовый домен immutable.

Пример:
    >>> new().lt(Value.included(5)).gt(Value.secluded(3)).repr()
    '(3;5]'
"""

from dynamic_domain.core.domain.domain import Domain, interval
from dynamic_domain.core.domain.notation import NotationConfig
from dynamic_domain.core.domain.ordering import tighter_lower, tighter_upper
from dynamic_domain.core.domain.value import Value


class DomainBuilder:
    """Mutable builder одного интервала."""

    def __init__(self):
        self._lower = Value.unbounded()
        self._upper = Value.unbounded()

    @property
    def lower(self) -> Value:
        return self._lower

    @property
    def upper(self) -> Value:
        return self._upper

    def lt(self, value: Value) -> "DomainBuilder":
        """
        Пересечение с {x < v} или {x ≤ v} (по value.inclusive).

        Value.unbounded() ничего не меняет: это пересечение со всей прямой.
        """
        self._upper = tighter_upper(self._upper, value)
        return self

    def gt(self, value: Value) -> "DomainBuilder":
        """Пересечение с {x > v} или {x ≥ v} (по value.inclusive)."""
        self._lower = tighter_lower(self._lower, value)
        return self

    def build(self) -> Domain:
        """Финализация: Interval, либо EmptyDomain для пустого пересечения."""
        return interval(self._lower, self._upper)

    def repr(self, notation: NotationConfig | None = None) -> str:
        return self.build().repr(notation)

    def __repr__(self) -> str:
        return f"DomainBuilder(lower={self._lower}, upper={self._upper})"


def new() -> DomainBuilder:
    """Новый builder с доменом (−∞;+∞)."""
    return DomainBuilder()
