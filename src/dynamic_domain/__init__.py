"""
dynamic_domain — алгебра числовых доменов

Домены — множества вещественных чисел в виде объединения интервалов с
открытыми/закрытыми и неограниченными границами.

    >>> from dynamic_domain import Value, interval, new, union
    >>> interval(Value.included(5), Value.secluded(10)).repr()
    '[5;10)'
    >>> new().lt(Value.included(5)).gt(Value.secluded(3)).repr()
    '(3;5]'
    >>> union([
    ...     interval(Value.unbounded(), Value.secluded(5)),
    ...     interval(Value.included(8), Value.included(100)),
    ... ]).repr()
    '(-∞;5)⋃[8;100]'
"""

from dynamic_domain.core.domain import (
    DEFAULT_NOTATION,
    Domain,
    DomainBuilder,
    EmptyDomain,
    Interval,
    NotationConfig,
    UnionDomain,
    Value,
    empty,
    interval,
    new,
    normalize,
    render,
    union,
)
from dynamic_domain.core.math import NonComparableBoundError

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_NOTATION",
    "Domain",
    "DomainBuilder",
    "EmptyDomain",
    "Interval",
    "NonComparableBoundError",
    "NotationConfig",
    "UnionDomain",
    "Value",
    "empty",
    "interval",
    "new",
    "normalize",
    "render",
    "union",
]
