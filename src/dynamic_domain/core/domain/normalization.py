"""
Normalization — каноническая форма набора интервалов

Алгоритм:
1. Отбросить вырожденные интервалы (lower > upper, равные границы с исключением)
2. Отсортировать по левой границе: −∞ первым, при равном числе [x раньше (x
3. Пройти слева направо, сливая текущий интервал со следующим при
   пересечении или касании с хотя бы одной включённой границей
4. Несливающиеся интервалы остаются отдельными

Результат: интервалы строго по возрастанию левой границы, попарно
непересекающиеся и несмежные. Сложность O(n log n) (сортировка), проход O(n).
"""

import logging
from typing import Iterable

from dynamic_domain.core.domain.ordering import (
    is_valid_span,
    looser_upper,
    lower_key,
    touches_or_overlaps,
)
from dynamic_domain.core.domain.value import Value

logger = logging.getLogger(__name__)

Span = tuple[Value, Value]


def normalize_spans(spans: Iterable[Span]) -> list[Span]:
    """
    Нормализация набора интервалов, заданных парами (lower, upper).

    Args:
        spans: Интервалы в произвольном порядке, возможно пересекающиеся

    Returns:
        Отсортированный список попарно несмежных интервалов
    """
    valid: list[Span] = []
    for lower, upper in spans:
        if not is_valid_span(lower, upper):
            logger.debug("Dropping degenerate span %s..%s", lower, upper)
            continue
        valid.append((lower, upper))

    valid.sort(key=lambda span: lower_key(span[0]))

    merged: list[Span] = []
    for lower, upper in valid:
        if merged:
            acc_lower, acc_upper = merged[-1]
            if touches_or_overlaps(acc_upper, lower):
                merged[-1] = (acc_lower, looser_upper(acc_upper, upper))
                logger.debug(
                    "Merged span %s..%s into %s..%s", lower, upper, acc_lower, merged[-1][1]
                )
                continue
        merged.append((lower, upper))

    return merged


def is_canonical(spans: list[Span]) -> bool:
    """
    Проверка канонической формы: каждый интервал непуст, и каждый следующий
    начинается строго правее конца предыдущего без касания.
    """
    for lower, upper in spans:
        if not is_valid_span(lower, upper):
            return False
    for (_, upper), (next_lower, _) in zip(spans, spans[1:]):
        if touches_or_overlaps(upper, next_lower):
            return False
    return True
