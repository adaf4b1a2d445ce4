"""
Domain Contract — обмен доменами в виде простых данных

Домен передаётся внешним потребителям как JSON-совместимый dict и
проверяется по схеме schema/domain.json (jsonschema, Draft 2020-12).

Формат:
    {"kind": "empty"}
    {"kind": "interval", "lower": {"number": 5, "inclusive": true},
                         "upper": {"number": null, "inclusive": false}}
    {"kind": "union", "members": [<interval>, ...]}

Decimal-границы передаются строкой, чтобы не терять точность. Ошибка
валидации указывает место в данных: "members[1].lower.number".
"""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from dynamic_domain.core.domain import Domain, Value, empty, interval, union

logger = logging.getLogger(__name__)

DOMAIN_SCHEMA_PATH = Path(__file__).parent / "schema" / "domain.json"


# =============================================================================
# ЛОКАЛИЗАЦИЯ ОШИБОК
# =============================================================================


def format_location(path: Iterable[Any]) -> str:
    """
    Путь внутри данных домена в читаемом виде.

    Examples:
        >>> format_location(["members", 1, "lower", "number"])
        'members[1].lower.number'
        >>> format_location([])
        '<root>'
    """
    location = ""
    for key in path:
        if isinstance(key, int):
            location += f"[{key}]"
        else:
            location += f".{key}" if location else str(key)
    return location or "<root>"


def _leaf_errors(error: ValidationError):
    # oneOf/anyOf складывают ошибки веток в context
    if not error.context:
        yield error
        return
    for sub_error in error.context:
        yield from _leaf_errors(sub_error)


# =============================================================================
# VALIDATOR
# =============================================================================


class DomainContractValidator:
    """
    Валидатор dict-представления домена.

    Схема загружается и проходит meta-валидацию один раз при создании.
    Из всех ошибок веток oneOf выбирается самая глубокая: она указывает на
    конкретный член объединения или границу.
    """

    def __init__(self, schema_path: Path = DOMAIN_SCHEMA_PATH):
        """
        Args:
            schema_path: Путь к JSON Schema домена

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e}") from e

        logger.debug("Loaded domain schema from %s", schema_path)
        self.schema = schema
        self._validator = Draft202012Validator(schema)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def find_error(self, data: Dict[str, Any]) -> Optional[ValidationError]:
        """
        Самая глубокая ошибка валидации, либо None для валидных данных.
        """
        leaves = [
            leaf for error in self._validator.iter_errors(data) for leaf in _leaf_errors(error)
        ]
        if not leaves:
            return None
        return max(leaves, key=lambda leaf: len(leaf.absolute_path))

    def locate(self, data: Dict[str, Any]) -> Optional[str]:
        """Место ошибки в данных ("members[1].lower.number"), либо None."""
        error = self.find_error(data)
        if error is None:
            return None
        return format_location(error.absolute_path)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме; сообщение
                начинается с места ошибки
        """
        error = self.find_error(data)
        if error is not None:
            raise ValidationError(f"{format_location(error.absolute_path)}: {error.message}")


# Глобальный экземпляр валидатора
_DOMAIN_VALIDATOR = DomainContractValidator()


# =============================================================================
# CONVERSION
# =============================================================================


def validate_domain_contract(data: Dict[str, Any]) -> None:
    """
    Валидация данных домена.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _DOMAIN_VALIDATOR.validate(data)


def domain_to_contract(domain: Domain) -> Dict[str, Any]:
    """
    Домен → dict по схеме domain.json.

    Args:
        domain: Нормализованный домен

    Returns:
        JSON-совместимый dict
    """
    return domain.model_dump(mode="json")


def _value_from_contract(data: Dict[str, Any]) -> Value:
    number = data["number"]
    # Decimal передаётся строкой; Value принимает только числа
    if isinstance(number, str):
        number = Decimal(number)
    return Value(number=number, inclusive=data["inclusive"])


def domain_from_contract(data: Dict[str, Any]) -> Domain:
    """
    dict по схеме domain.json → нормализованный домен.

    Интервалы собираются через фабрики, поэтому вырожденные интервалы
    схлопываются в ∅, а пересекающиеся члены объединения сливаются.

    Raises:
        ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если граница невалидна (например, inclusive бесконечность)
    """
    validate_domain_contract(data)

    kind = data["kind"]
    if kind == "empty":
        return empty()
    if kind == "interval":
        return interval(_value_from_contract(data["lower"]), _value_from_contract(data["upper"]))

    return union(
        interval(_value_from_contract(member["lower"]), _value_from_contract(member["upper"]))
        for member in data["members"]
    )
