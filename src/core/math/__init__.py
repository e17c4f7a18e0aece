"""
Core math modules для BigInt

Алгоритмы над десятичными magnitude и конверсия в/из текста.
"""

# Digit Arithmetic (magnitude primitives)
from src.core.math.digit_arithmetic import (
    # Constants
    DIGIT_BASE,
    MAX_DIGIT,
    ZERO_DIGITS,
    # Exceptions
    MagnitudeOrderViolation,
    # Normalization
    is_zero_magnitude,
    normalize_digits,
    # Comparison
    compare_magnitudes,
    magnitude_less,
    # Arithmetic
    add_magnitudes,
    mul_magnitudes,
    sub_magnitudes,
)

# Decimal Text (parsing & rendering)
from src.core.math.decimal_text import (
    ASCII_DIGITS,
    DEFAULT_PARSE_CONFIG,
    MINUS_SIGN,
    DecimalParseConfig,
    DigitLimitExceeded,
    InvalidFormat,
    digits_from_int,
    parse_decimal,
    render_decimal,
)

__all__ = [
    # Digit Arithmetic — Constants
    "DIGIT_BASE",
    "MAX_DIGIT",
    "ZERO_DIGITS",
    # Digit Arithmetic — Exceptions
    "MagnitudeOrderViolation",
    # Digit Arithmetic — Normalization
    "is_zero_magnitude",
    "normalize_digits",
    # Digit Arithmetic — Comparison
    "compare_magnitudes",
    "magnitude_less",
    # Digit Arithmetic — Arithmetic
    "add_magnitudes",
    "mul_magnitudes",
    "sub_magnitudes",
    # Decimal Text — Constants
    "ASCII_DIGITS",
    "DEFAULT_PARSE_CONFIG",
    "MINUS_SIGN",
    # Decimal Text — Config
    "DecimalParseConfig",
    # Decimal Text — Exceptions
    "DigitLimitExceeded",
    "InvalidFormat",
    # Decimal Text — Functions
    "digits_from_int",
    "parse_decimal",
    "render_decimal",
]
