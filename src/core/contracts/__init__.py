"""
Contract Validation Module

Модуль для валидации JSON контрактов BigInt.
"""

from .validators import (
    BigIntContractValidator,
    ContractValidator,
    SchemaLoader,
    validate_bigint_json,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntContractValidator",
    # Functions
    "validate_bigint_json",
]
