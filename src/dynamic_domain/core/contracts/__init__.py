"""
Contract Validation Module

Модуль для валидации и конверсии доменов в JSON-совместимые данные.
"""

from .validators import (
    DOMAIN_SCHEMA_PATH,
    DomainContractValidator,
    domain_from_contract,
    domain_to_contract,
    format_location,
    validate_domain_contract,
)

__all__ = [
    # Classes
    "DomainContractValidator",
    # Constants
    "DOMAIN_SCHEMA_PATH",
    # Functions
    "format_location",
    "validate_domain_contract",
    "domain_to_contract",
    "domain_from_contract",
]
