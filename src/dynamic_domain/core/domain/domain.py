"""
Domain — Множество вещественных чисел в виде объединения интервалов

Три варианта (discriminated union по полю kind):
- EmptyDomain  — пустое множество ∅
- Interval     — один непрерывный интервал [lower; upper]
- UnionDomain  — ≥2 попарно несмежных интервала по возрастанию

Immutable Pydantic модели. Все операции возвращают новый нормализованный
домен; фабрики empty(), interval(), union() никогда не падают на вырожденных
границах, а схлопывают их в EmptyDomain.

Прямое создание Interval/UnionDomain с нарушенными инвариантами запрещено
(ValidationError) — используйте фабрики.
"""

from typing import Annotated, Any, Iterable, Literal, Union

from pydantic import BaseModel, Field, model_validator

from dynamic_domain.core.domain.normalization import Span, is_canonical, normalize_spans
from dynamic_domain.core.domain.notation import NotationConfig, render
from dynamic_domain.core.domain.ordering import (
    contains_number,
    is_valid_span,
    tighter_lower,
    tighter_upper,
)
from dynamic_domain.core.domain.value import Value


# =============================================================================
# BASE
# =============================================================================


class _DomainBase(BaseModel):
    """Общее поведение всех вариантов домена."""

    model_config = {"frozen": True}  # Immutable

    def spans(self) -> list[Span]:
        raise NotImplementedError

    def intervals(self) -> tuple["Interval", ...]:
        """Интервалы домена в порядке возрастания."""
        raise NotImplementedError

    @property
    def is_empty(self) -> bool:
        return False

    def repr(self, notation: NotationConfig | None = None) -> str:
        """Каноническая нотация домена, например "(-∞;5)⋃[8;100]"."""
        return render(self, notation)

    def __str__(self) -> str:
        return self.repr()

    # -------------------------------------------------------------------------
    # Операции над множествами
    # -------------------------------------------------------------------------

    def contains(self, x: Any) -> bool:
        """Принадлежит ли число x домену."""
        return any(contains_number(lower, upper, x) for lower, upper in self.spans())

    def __contains__(self, x: Any) -> bool:
        return self.contains(x)

    def union(self, other: "Domain") -> "Domain":
        return union([self, other])

    def __or__(self, other: "Domain") -> "Domain":
        return self.union(other)

    def intersect(self, other: "Domain") -> "Domain":
        """
        Пересечение двух доменов.

        Попарное пересечение интервалов с последующей нормализацией.
        """
        pieces = []
        for a_lower, a_upper in self.spans():
            for b_lower, b_upper in other.spans():
                pieces.append((tighter_lower(a_lower, b_lower), tighter_upper(a_upper, b_upper)))
        return _from_spans(pieces)

    def __and__(self, other: "Domain") -> "Domain":
        return self.intersect(other)

    def lt(self, value: Value) -> "Domain":
        """Новый домен, ограниченный сверху значением value (< или ≤)."""
        return self.intersect(Interval(lower=Value.unbounded(), upper=value))

    def gt(self, value: Value) -> "Domain":
        """Новый домен, ограниченный снизу значением value (> или ≥)."""
        return self.intersect(Interval(lower=value, upper=Value.unbounded()))


# =============================================================================
# VARIANTS
# =============================================================================


class EmptyDomain(_DomainBase):
    """Пустое множество ∅ — нейтральный элемент объединения."""

    kind: Literal["empty"] = "empty"

    def spans(self) -> list[Span]:
        return []

    def intervals(self) -> tuple["Interval", ...]:
        return ()

    @property
    def is_empty(self) -> bool:
        return True


class Interval(_DomainBase):
    """
    Непрерывный интервал.

    Инвариант: интервал непуст. lower == upper допускается только при обеих
    включённых границах (точка {x}).
    """

    kind: Literal["interval"] = "interval"
    lower: Value = Field(..., description="Левая граница (unbounded = −∞)")
    upper: Value = Field(..., description="Правая граница (unbounded = +∞)")

    @model_validator(mode="after")
    def validate_span(self) -> "Interval":
        if not is_valid_span(self.lower, self.upper):
            raise ValueError(
                f"Interval bounds are inverted or degenerate: {self.lower} .. {self.upper}"
            )
        return self

    def spans(self) -> list[Span]:
        return [(self.lower, self.upper)]

    def intervals(self) -> tuple["Interval", ...]:
        return (self,)

    @property
    def is_point(self) -> bool:
        """Одноточечное множество {x}."""
        return (
            not self.lower.is_unbounded
            and not self.upper.is_unbounded
            and self.lower.number == self.upper.number
        )


class UnionDomain(_DomainBase):
    """
    Объединение ≥2 интервалов в канонической форме.

    Инвариант: интервалы отсортированы по левой границе, попарно не
    пересекаются и не касаются. Вложенные объединения и ∅ запрещены.
    """

    kind: Literal["union"] = "union"
    members: tuple[Interval, ...] = Field(..., min_length=2, description="Интервалы объединения")

    @model_validator(mode="after")
    def validate_canonical(self) -> "UnionDomain":
        if not is_canonical(self.spans()):
            raise ValueError("UnionDomain members must be sorted, disjoint and non-adjacent")
        return self

    def spans(self) -> list[Span]:
        return [(member.lower, member.upper) for member in self.members]

    def intervals(self) -> tuple[Interval, ...]:
        return self.members


Domain = Annotated[Union[EmptyDomain, Interval, UnionDomain], Field(discriminator="kind")]


# =============================================================================
# ФАБРИКИ
# =============================================================================


def _from_spans(spans: Iterable[Span]) -> Domain:
    merged = normalize_spans(spans)
    if not merged:
        return EmptyDomain()
    if len(merged) == 1:
        lower, upper = merged[0]
        return Interval(lower=lower, upper=upper)
    return UnionDomain(members=tuple(Interval(lower=lower, upper=upper) for lower, upper in merged))


def empty() -> EmptyDomain:
    """Пустое множество."""
    return EmptyDomain()


def interval(lower: Value, upper: Value) -> Domain:
    """
    Один интервал [lower; upper].

    Args:
        lower: Левая граница (unbounded = −∞)
        upper: Правая граница (unbounded = +∞)

    Returns:
        Interval, либо EmptyDomain если lower > upper или границы равны и
        хотя бы одна исключена
    """
    if not is_valid_span(lower, upper):
        return EmptyDomain()
    return Interval(lower=lower, upper=upper)


def union(domains: Iterable[Domain]) -> Domain:
    """
    Объединение произвольного набора доменов в канонической форме.

    Args:
        domains: Домены (EmptyDomain, Interval, UnionDomain) в любом порядке

    Returns:
        EmptyDomain для пустого результата, Interval для одного интервала,
        иначе UnionDomain
    """
    spans: list[Span] = []
    for domain in domains:
        spans.extend(domain.spans())
    return _from_spans(spans)


def normalize(domain: Domain) -> Domain:
    """Каноническая форма домена (идемпотентна)."""
    return union([domain])
