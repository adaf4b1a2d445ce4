"""
Тесты для базовых доменных моделей: Value, EmptyDomain, Interval, UnionDomain

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Инварианты: бесконечность не inclusive, интервал непуст, объединение канонично
3. Immutability (frozen=True)
4. Фабрики empty()/interval(): вырожденные интервалы схлопываются в ∅
5. Операции над множествами: contains, intersect, union, lt/gt
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from dynamic_domain.core.domain import (
    EmptyDomain,
    Interval,
    UnionDomain,
    Value,
    empty,
    interval,
    union,
)


# =============================================================================
# VALUE TESTS
# =============================================================================


class TestValue:
    """Тесты для модели Value"""

    def test_included(self) -> None:
        v = Value.included(5)
        assert v.number == 5
        assert v.inclusive is True
        assert not v.is_unbounded

    def test_secluded(self) -> None:
        v = Value.secluded(2.5)
        assert v.number == 2.5
        assert v.inclusive is False

    def test_unbounded(self) -> None:
        v = Value.unbounded()
        assert v.number is None
        assert v.inclusive is False
        assert v.is_unbounded

    def test_unbounded_cannot_be_inclusive(self) -> None:
        """Бесконечность не может принадлежать множеству"""
        with pytest.raises(ValidationError, match="unbounded"):
            Value(number=None, inclusive=True)

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Value.included(float("nan"))

    def test_inf_rejected(self) -> None:
        """float('inf') запрещён: используйте Value.unbounded()"""
        with pytest.raises(ValidationError):
            Value.secluded(float("inf"))

    def test_bool_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Value.included(True)

    def test_numeric_string_rejected(self) -> None:
        """Строка не является числом-границей, даже если похожа на число"""
        with pytest.raises(ValidationError):
            Value.included("5")
        with pytest.raises(ValidationError):
            Value.secluded("2.5")

    def test_decimal_accepted(self) -> None:
        v = Value.included(Decimal("1.5"))
        assert v.number == Decimal("1.5")

    def test_int_not_coerced_to_float(self) -> None:
        """int остаётся int"""
        assert type(Value.included(5).number) is int

    def test_immutable(self) -> None:
        v = Value.included(5)
        with pytest.raises(ValidationError):
            v.number = 6

    def test_equality_and_hash(self) -> None:
        assert Value.included(5) == Value.included(5)
        assert Value.included(5) != Value.secluded(5)
        assert hash(Value.included(5)) == hash(Value.included(5))

    def test_str(self) -> None:
        assert str(Value.included(5)) == "Included(5)"
        assert str(Value.secluded(3.0)) == "Secluded(3)"
        assert str(Value.unbounded()) == "Unbounded"


# =============================================================================
# INTERVAL TESTS
# =============================================================================


class TestIntervalFactory:
    """Тесты для фабрики interval()"""

    def test_regular_interval(self) -> None:
        d = interval(Value.included(5), Value.secluded(10))
        assert isinstance(d, Interval)
        assert d.lower == Value.included(5)
        assert d.upper == Value.secluded(10)

    def test_inverted_collapses_to_empty(self) -> None:
        """lower > upper → ∅"""
        assert interval(Value.included(10), Value.included(5)) == EmptyDomain()

    def test_equal_exclusive_collapses_to_empty(self) -> None:
        """(3;3), [3;3), (3;3] → ∅"""
        assert interval(Value.secluded(3), Value.secluded(3)) == EmptyDomain()
        assert interval(Value.included(3), Value.secluded(3)) == EmptyDomain()
        assert interval(Value.secluded(3), Value.included(3)) == EmptyDomain()

    def test_single_point(self) -> None:
        """[3;3] — точка {3}"""
        d = interval(Value.included(3), Value.included(3))
        assert isinstance(d, Interval)
        assert d.is_point
        assert 3 in d
        assert 3.0001 not in d

    def test_unbounded_sides(self) -> None:
        d = interval(Value.unbounded(), Value.unbounded())
        assert isinstance(d, Interval)
        assert not d.is_point
        assert -1e300 in d
        assert 1e300 in d

    def test_mixed_number_types(self) -> None:
        d = interval(Value.included(1), Value.included(Decimal("2.5")))
        assert isinstance(d, Interval)
        assert 2 in d


class TestIntervalModel:
    """Тесты прямого создания модели Interval"""

    def test_direct_inverted_rejected(self) -> None:
        """Прямое создание вырожденного интервала запрещено"""
        with pytest.raises(ValidationError, match="inverted or degenerate"):
            Interval(lower=Value.included(5), upper=Value.included(1))

    def test_direct_degenerate_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Interval(lower=Value.secluded(3), upper=Value.secluded(3))

    def test_immutable(self) -> None:
        d = Interval(lower=Value.included(1), upper=Value.included(2))
        with pytest.raises(ValidationError):
            d.lower = Value.included(0)

    def test_intervals_introspection(self) -> None:
        d = Interval(lower=Value.included(1), upper=Value.included(2))
        assert d.intervals() == (d,)
        assert not d.is_empty


# =============================================================================
# EMPTY / UNION TESTS
# =============================================================================


class TestEmptyDomain:
    """Тесты для EmptyDomain"""

    def test_empty_factory(self) -> None:
        d = empty()
        assert isinstance(d, EmptyDomain)
        assert d.is_empty
        assert d.intervals() == ()

    def test_contains_nothing(self) -> None:
        assert 0 not in empty()

    def test_all_empties_equal(self) -> None:
        assert empty() == EmptyDomain()


class TestUnionDomainModel:
    """Тесты прямого создания UnionDomain"""

    @pytest.fixture
    def left(self) -> Interval:
        return Interval(lower=Value.unbounded(), upper=Value.secluded(5))

    @pytest.fixture
    def right(self) -> Interval:
        return Interval(lower=Value.included(8), upper=Value.included(100))

    def test_canonical_union_accepted(self, left: Interval, right: Interval) -> None:
        d = UnionDomain(members=(left, right))
        assert d.intervals() == (left, right)

    def test_unsorted_rejected(self, left: Interval, right: Interval) -> None:
        with pytest.raises(ValidationError, match="sorted"):
            UnionDomain(members=(right, left))

    def test_single_member_rejected(self, left: Interval) -> None:
        """Объединение содержит минимум два интервала"""
        with pytest.raises(ValidationError):
            UnionDomain(members=(left,))

    def test_adjacent_rejected(self) -> None:
        """[1;5] и (5;8) должны быть слиты, а не храниться раздельно"""
        with pytest.raises(ValidationError):
            UnionDomain(
                members=(
                    Interval(lower=Value.included(1), upper=Value.included(5)),
                    Interval(lower=Value.secluded(5), upper=Value.secluded(8)),
                )
            )

    def test_gap_at_single_point_accepted(self) -> None:
        """(1;5) и (5;8) не смежны: точка 5 не входит в множество"""
        d = UnionDomain(
            members=(
                Interval(lower=Value.secluded(1), upper=Value.secluded(5)),
                Interval(lower=Value.secluded(5), upper=Value.secluded(8)),
            )
        )
        assert 5 not in d
        assert 4.9 in d
        assert 5.1 in d


# =============================================================================
# SET OPERATIONS
# =============================================================================


class TestSetOperations:
    """Тесты contains / intersect / union / lt / gt"""

    @pytest.fixture
    def split(self):
        """(-∞;5) ⋃ [8;100]"""
        return union(
            [
                interval(Value.unbounded(), Value.secluded(5)),
                interval(Value.included(8), Value.included(100)),
            ]
        )

    def test_contains(self, split) -> None:
        assert -1000 in split
        assert 5 not in split
        assert 6 not in split
        assert 8 in split
        assert 100 in split
        assert 100.5 not in split

    def test_intersect_interval(self, split) -> None:
        window = interval(Value.included(0), Value.included(10))
        result = split & window
        assert result.repr() == "[0;5)⋃[8;10]"

    def test_intersect_disjoint_is_empty(self, split) -> None:
        window = interval(Value.included(5), Value.secluded(8))
        assert split.intersect(window) == empty()

    def test_intersect_with_empty(self, split) -> None:
        assert split & empty() == empty()
        assert empty() & split == empty()

    def test_intersect_touching_points(self) -> None:
        """[1;5] ∩ [5;8] = {5}"""
        a = interval(Value.included(1), Value.included(5))
        b = interval(Value.included(5), Value.included(8))
        result = a & b
        assert isinstance(result, Interval)
        assert result.is_point

    def test_union_operator(self) -> None:
        a = interval(Value.included(1), Value.included(5))
        b = interval(Value.secluded(5), Value.secluded(8))
        assert (a | b).repr() == "[1;8)"

    def test_refinement_returns_new_domain(self, split) -> None:
        """lt/gt на домене не меняют исходный домен"""
        refined = split.gt(Value.included(0)).lt(Value.secluded(50))
        assert refined.repr() == "[0;5)⋃[8;50)"
        assert split.repr() == "(-∞;5)⋃[8;100]"

    def test_refinement_with_unbounded_is_noop(self, split) -> None:
        assert split.lt(Value.unbounded()) == split
        assert split.gt(Value.unbounded()) == split

    def test_refinement_to_empty(self) -> None:
        d = interval(Value.included(1), Value.included(2))
        assert d.gt(Value.secluded(2)) == empty()
