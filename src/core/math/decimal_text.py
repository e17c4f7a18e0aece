"""
Decimal Text — конверсия BigInt ↔ десятичный текст и native int

Единственный допустимый способ построения magnitude из внешнего ввода:
- parse_decimal: строка формата -?[0-9]+ → (digits, negative)
- digits_from_int: Python int → (digits, negative)
- render_decimal: (digits, negative) → каноническая строка

Формат строки:
    [-]<ASCII цифры 0-9>, минимум одна цифра
    Ведущие нули допустимы на входе и поглощаются нормализацией
    "+", пробелы, подчёркивания и не-ASCII цифры ЗАПРЕЩЕНЫ
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional, Sequence

from src.core.math.digit_arithmetic import (
    DIGIT_BASE,
    is_zero_magnitude,
    normalize_digits,
)

logger = logging.getLogger(__name__)

# Символ знака минус
MINUS_SIGN: Final[str] = "-"

# Допустимые символы цифр (только ASCII, str.isdigit() принимает и Unicode)
ASCII_DIGITS: Final[str] = "0123456789"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormat(ValueError):
    """
    Строка не является десятичным целым формата -?[0-9]+.

    Attributes:
        text: Исходная строка
        position: Индекс первого недопустимого символа (None если строка
            отклонена целиком, например пустая часть цифр)
    """

    def __init__(self, message: str, *, text: str, position: Optional[int] = None):
        super().__init__(message)
        self.text = text
        self.position = position


class DigitLimitExceeded(InvalidFormat):
    """Количество цифр превышает DecimalParseConfig.max_digits."""

    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DecimalParseConfig:
    """Конфигурация разбора десятичных строк.

    max_digits ограничивает длину части цифр (ведущие нули считаются),
    аналогично sys.set_int_max_str_digits в CPython. None означает без ограничения.
    """

    max_digits: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_digits is not None and self.max_digits <= 0:
            raise ValueError(f"max_digits must be positive, got {self.max_digits}")


DEFAULT_PARSE_CONFIG: Final[DecimalParseConfig] = DecimalParseConfig()


# =============================================================================
# PARSING
# =============================================================================


def parse_decimal(
    text: str,
    config: DecimalParseConfig = DEFAULT_PARSE_CONFIG,
) -> tuple[list[int], bool]:
    """
    Разбор десятичной строки в (digits, negative).

    Цифры собираются в порядке чтения, затем список разворачивается
    (младший разряд первым) и нормализуется: "00012345" → 12345,
    "-000" → канонический ноль (negative=False).

    Args:
        text: Строка формата -?[0-9]+
        config: Ограничения разбора (default: без ограничений)

    Returns:
        (digits, negative): нормализованный magnitude и знак

    Raises:
        InvalidFormat: Пустая часть цифр ("" или "-") или недопустимый символ
        DigitLimitExceeded: Цифр больше, чем config.max_digits

    Examples:
        >>> parse_decimal("-120")
        ([0, 2, 1], True)
        >>> parse_decimal("0007")
        ([7], False)
    """
    negative = text.startswith(MINUS_SIGN)
    start = 1 if negative else 0

    if start == len(text):
        logger.debug("Rejected decimal string %r: empty digit portion", text)
        raise InvalidFormat(f"Decimal string has no digits: {text!r}", text=text)

    digit_count = len(text) - start
    if config.max_digits is not None and digit_count > config.max_digits:
        logger.debug(
            "Rejected decimal string: %d digits exceeds limit %d",
            digit_count,
            config.max_digits,
        )
        raise DigitLimitExceeded(
            f"Decimal string has {digit_count} digits, limit is {config.max_digits}",
            text=text,
        )

    digits: list[int] = []
    for position in range(start, len(text)):
        char = text[position]
        if char not in ASCII_DIGITS:
            logger.debug(
                "Rejected decimal string %r: non-digit %r at position %d",
                text,
                char,
                position,
            )
            raise InvalidFormat(
                f"Decimal string contains non-digit character {char!r} "
                f"at position {position}: {text!r}",
                text=text,
                position=position,
            )
        digits.append(ord(char) - ord("0"))

    digits.reverse()
    digits = normalize_digits(digits)

    if is_zero_magnitude(digits):
        negative = False

    return digits, negative


def digits_from_int(value: int) -> tuple[list[int], bool]:
    """
    Конверсия Python int → (digits, negative).

    Python int не переполняется, поэтому abs() корректен для любого значения,
    включая -2**63 (минимум int64). Цикл выполняется минимум один раз,
    поэтому 0 → [0].

    Args:
        value: Целое число (bool не допускается)

    Returns:
        (digits, negative)

    Raises:
        TypeError: Если value не int или является bool

    Examples:
        >>> digits_from_int(-305)
        ([5, 0, 3], True)
        >>> digits_from_int(0)
        ([0], False)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")

    negative = value < 0
    remaining = abs(value)
    digits: list[int] = []

    while True:
        remaining, digit = divmod(remaining, DIGIT_BASE)
        digits.append(digit)
        if remaining == 0:
            break

    return digits, negative


# =============================================================================
# RENDERING
# =============================================================================


def render_decimal(digits: Sequence[int], negative: bool) -> str:
    """
    Каноническое десятичное представление.

    Опциональный "-", затем цифры от старшей к младшей. Ожидается
    нормализованный вход, поэтому ведущих нулей нет (кроме "0").

    Examples:
        >>> render_decimal([5, 7], True)
        '-75'
        >>> render_decimal([0], False)
        '0'
    """
    body = "".join(ASCII_DIGITS[d] for d in reversed(digits))
    return MINUS_SIGN + body if negative else body
