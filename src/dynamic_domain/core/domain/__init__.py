"""
Domain models and value objects.

Contains the interval-set algebra: Value endpoints, Domain variants,
normalization, builder and canonical notation.
"""

from dynamic_domain.core.domain.builder import DomainBuilder, new
from dynamic_domain.core.domain.domain import (
    Domain,
    EmptyDomain,
    Interval,
    UnionDomain,
    empty,
    interval,
    normalize,
    union,
)
from dynamic_domain.core.domain.notation import (
    BOUND_SEPARATOR,
    DEFAULT_NOTATION,
    EMPTY_SYMBOL,
    INFINITY_SYMBOL,
    NEGATIVE_SIGN,
    UNION_SYMBOL,
    NotationConfig,
    render,
)
from dynamic_domain.core.domain.value import Value

__all__ = [
    # Value
    "Value",
    # Domain variants
    "Domain",
    "EmptyDomain",
    "Interval",
    "UnionDomain",
    # Factories
    "empty",
    "interval",
    "union",
    "normalize",
    # Builder
    "DomainBuilder",
    "new",
    # Notation
    "BOUND_SEPARATOR",
    "DEFAULT_NOTATION",
    "EMPTY_SYMBOL",
    "INFINITY_SYMBOL",
    "NEGATIVE_SIGN",
    "UNION_SYMBOL",
    "NotationConfig",
    "render",
]
