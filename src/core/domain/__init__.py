"""
Domain models and value objects.

Contains the BigInt arbitrary-precision integer value type.
"""

from src.core.domain.bigint import BigInt, BigIntLike
from src.core.math.decimal_text import DigitLimitExceeded, InvalidFormat

__all__ = [
    "BigInt",
    "BigIntLike",
    # Re-exported construction errors
    "InvalidFormat",
    "DigitLimitExceeded",
]
