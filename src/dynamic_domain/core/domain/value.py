"""
Value — Граница (endpoint) домена

Immutable Pydantic модель границы интервала:
- Included(x) — граница входит в множество (≤ / ≥)
- Secluded(x) — граница исключена (< / >)
- Unbounded — сторона без ограничения (−∞ слева, +∞ справа)

Знак бесконечности определяется стороной интервала, на которой стоит Value,
а не самим Value.
"""

from decimal import Decimal
from typing import Annotated, Optional, Union

from pydantic import (
    BaseModel,
    Field,
    Strict,
    StrictFloat,
    StrictInt,
    field_validator,
    model_validator,
)

from dynamic_domain.core.math.numerical_safeguards import (
    BoundNumber,
    format_number,
    validate_bound_number,
)


# =============================================================================
# VALUE MODEL
# =============================================================================


class Value(BaseModel):
    """
    Граница домена.

    number=None означает бесконечность; такая граница никогда не inclusive.
    """

    number: Optional[Union[StrictInt, StrictFloat, Annotated[Decimal, Strict()]]] = Field(
        None, description="Конечное значение границы (None = бесконечность)"
    )
    inclusive: bool = Field(False, description="Входит ли граница в множество")

    model_config = {"frozen": True}  # Immutable

    @field_validator("number", mode="before")
    @classmethod
    def reject_bool(cls, v: object) -> object:
        """bool — подкласс int, но не число-граница."""
        if isinstance(v, bool):
            raise ValueError("Value.number must not be bool")
        return v

    @field_validator("number")
    @classmethod
    def validate_number(cls, v: Optional[BoundNumber]) -> Optional[BoundNumber]:
        """NaN/Inf запрещены: бесконечность задаётся через number=None."""
        if v is None:
            return v
        return validate_bound_number(v, "Value.number")

    @model_validator(mode="after")
    def validate_unbounded_not_inclusive(self) -> "Value":
        """Бесконечность не может принадлежать множеству."""
        if self.number is None and self.inclusive:
            raise ValueError("unbounded Value cannot be inclusive")
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def included(cls, number: BoundNumber) -> "Value":
        """Граница, входящая в множество: [x или x]."""
        return cls(number=number, inclusive=True)

    @classmethod
    def secluded(cls, number: BoundNumber) -> "Value":
        """Исключённая граница: (x или x)."""
        return cls(number=number, inclusive=False)

    @classmethod
    def unbounded(cls) -> "Value":
        """Неограниченная сторона: −∞ или +∞ в зависимости от стороны."""
        return cls(number=None, inclusive=False)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_unbounded(self) -> bool:
        return self.number is None

    def __str__(self) -> str:
        if self.is_unbounded:
            return "Unbounded"
        kind = "Included" if self.inclusive else "Secluded"
        return f"{kind}({format_number(self.number)})"
