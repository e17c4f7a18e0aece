"""
BigInt — целое число произвольной точности со знаком

Pydantic модель sign-magnitude представления:
- digits: десятичные цифры, младший разряд первым (никогда не пустой)
- negative: True только для строго отрицательных значений

Все операторы собираются из примитивов src.core.math.digit_arithmetic
плюс правила разрешения знака. Сложение и вычитание: две формы одного
примитива: a - b вычисляется как a + (-b).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (восстанавливаются normalize() при любом построении,
присваивании полей и model_copy):
1. Нет лишних старших нулей: len(digits) == 1 или digits[-1] != 0
2. Канонический ноль: digits == [0] → negative == False ("-0" не существует)
3. Каждая цифра в диапазоне [0, 9]

Изменение "на месте" доступно только через +=, -=, *= и семейство
increment/decrement. Каждое из них вычисляет новое значение и заменяет
им состояние получателя. Поэтому модель не хешируема (как list).
"""

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    Field,
    StrictBool,
    StrictInt,
    field_validator,
    model_serializer,
    model_validator,
)

from src.core.math.decimal_text import (
    DEFAULT_PARSE_CONFIG,
    DecimalParseConfig,
    digits_from_int,
    parse_decimal,
    render_decimal,
)
from src.core.math.digit_arithmetic import (
    DIGIT_BASE,
    MAX_DIGIT,
    ZERO_DIGITS,
    add_magnitudes,
    is_zero_magnitude,
    magnitude_less,
    mul_magnitudes,
    normalize_digits,
    sub_magnitudes,
)

logger = logging.getLogger(__name__)

BigIntLike = Union["BigInt", int, str]


def _fields_from_value(value: Any) -> dict[str, Any]:
    """Поля модели из int, десятичной строки или другого BigInt (глубокая копия)."""
    if isinstance(value, BigInt):
        return {"digits": list(value.digits), "negative": value.negative}
    if isinstance(value, str):
        digits, negative = parse_decimal(value)
        return {"digits": digits, "negative": negative}
    if isinstance(value, int):
        digits, negative = digits_from_int(value)
        return {"digits": digits, "negative": negative}
    raise TypeError(f"Cannot construct BigInt from {type(value).__name__}")


# =============================================================================
# BIGINT MODEL
# =============================================================================


class BigInt(BaseModel):
    """
    Целое число произвольной точности со знаком.

    Построение:
        BigInt()                   → 0
        BigInt(-100)               → из Python int (любой величины)
        BigInt("-00123")           → из десятичной строки, -123
        BigInt(other)              → независимая копия
        BigInt(digits=[5, 7], negative=True)  → -75

    Examples:
        >>> BigInt(-100) + BigInt(25)
        BigInt('-75')
        >>> BigInt("987654321") * BigInt("123456789")
        BigInt('121932631112635269')
    """

    digits: list[StrictInt] = Field(
        default_factory=lambda: list(ZERO_DIGITS),
        min_length=1,
        description="Десятичные цифры, младший разряд первым",
    )
    negative: StrictBool = Field(default=False, description="True если значение < 0")

    # Присваивание полей проходит валидацию и нормализацию
    model_config = {"extra": "forbid", "validate_assignment": True}

    def __init__(self, value: Optional[BigIntLike] = None, /, **data: Any) -> None:
        """
        Args:
            value: int, десятичная строка формата -?[0-9]+ или BigInt
            **data: Поля модели (digits, negative), если value не передан

        Raises:
            InvalidFormat: Строка не соответствует формату -?[0-9]+
            TypeError: Неподдерживаемый тип value (float, bool, bytes, ...)
            pydantic.ValidationError: Невалидные поля (цифра вне [0, 9], пустой digits)
        """
        if value is not None:
            if data:
                raise TypeError("BigInt() accepts either a value or field keywords, not both")
            data = _fields_from_value(value)
        super().__init__(**data)

    # -------------------------------------------------------------------------
    # Validation & normalization
    # -------------------------------------------------------------------------

    @model_validator(mode="before")
    @classmethod
    def coerce_scalar_input(cls, data: Any) -> Any:
        """
        model_validate принимает int и десятичную строку наравне с dict.

        Нужно для использования BigInt как поля других моделей и для
        обратного разбора model_dump_json().
        """
        if isinstance(data, (int, str)) and not isinstance(data, bool):
            logger.debug("Coercing %s input to BigInt", type(data).__name__)
            return _fields_from_value(data)
        return data

    @field_validator("digits")
    @classmethod
    def validate_digit_range(cls, v: list[int]) -> list[int]:
        """Каждая цифра должна быть в диапазоне [0, 9]."""
        for position, digit in enumerate(v):
            if digit < 0 or digit > MAX_DIGIT:
                raise ValueError(f"digit {digit} at position {position} is outside [0, {MAX_DIGIT}]")
        return v

    @model_validator(mode="after")
    def enforce_invariants(self) -> "BigInt":
        return self.normalize()

    def normalize(self) -> "BigInt":
        """
        Восстановление инвариантов на месте.

        Удаляет старшие нули до одной цифры и сбрасывает знак у нуля.
        Идемпотентна. Вызывается after-валидатором, в том числе при
        присваивании полей, поэтому пишет напрямую в __dict__ (повторное
        присваивание через setattr снова запустило бы валидацию).

        Returns:
            self
        """
        self.__dict__["digits"] = normalize_digits(self.digits)
        if is_zero_magnitude(self.digits):
            self.__dict__["negative"] = False
        return self

    @model_serializer
    def serialize_decimal(self) -> str:
        """JSON-представление: каноническая десятичная строка."""
        return self.to_string()

    # -------------------------------------------------------------------------
    # Alternate constructors
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str, config: DecimalParseConfig = DEFAULT_PARSE_CONFIG) -> "BigInt":
        """
        Разбор десятичной строки с явной конфигурацией.

        Raises:
            InvalidFormat: Строка не соответствует формату -?[0-9]+
            DigitLimitExceeded: Цифр больше config.max_digits
        """
        digits, negative = parse_decimal(text, config)
        return cls(digits=digits, negative=negative)

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        digits, negative = digits_from_int(value)
        return cls(digits=digits, negative=negative)

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        return render_decimal(self.digits, self.negative)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInt({self.to_string()!r})"

    def __int__(self) -> int:
        magnitude = 0
        for digit in reversed(self.digits):
            magnitude = magnitude * DIGIT_BASE + digit
        return -magnitude if self.negative else magnitude

    def __bool__(self) -> bool:
        return not self.is_zero()

    def is_zero(self) -> bool:
        return self.digits == [0]

    def copy(self) -> "BigInt":  # type: ignore[override]
        """Независимая копия (собственный список digits)."""
        return BigInt(digits=list(self.digits), negative=self.negative)

    def __copy__(self) -> "BigInt":
        return self.copy()

    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False) -> "BigInt":
        """
        Копия с заменой полей. Результат проходит полную валидацию.

        digits всегда копируется, поэтому deep не меняет результат.

        Raises:
            pydantic.ValidationError: update содержит невалидные или лишние поля
        """
        data: dict[str, Any] = {"digits": list(self.digits), "negative": self.negative}
        if update:
            data.update(update)
        return BigInt(**data)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rhs = _coerce_operand(other)
        if rhs is None:
            return NotImplemented
        return self.negative == rhs.negative and self.digits == rhs.digits

    def __lt__(self, other: object) -> bool:
        """
        Порядок:
        - Разные знаки → отрицательное меньше
        - Одинаковые знаки → сравнение модулей, инвертированное для отрицательных
        """
        rhs = _coerce_operand(other)
        if rhs is None:
            return NotImplemented
        if self.negative != rhs.negative:
            return self.negative
        if self.negative:
            return magnitude_less(rhs.digits, self.digits)
        return magnitude_less(self.digits, rhs.digits)

    def __gt__(self, other: object) -> bool:
        rhs = _coerce_operand(other)
        if rhs is None:
            return NotImplemented
        return rhs < self

    def __le__(self, other: object) -> bool:
        rhs = _coerce_operand(other)
        if rhs is None:
            return NotImplemented
        return not rhs < self

    def __ge__(self, other: object) -> bool:
        rhs = _coerce_operand(other)
        if rhs is None:
            return NotImplemented
        return not self < rhs

    # -------------------------------------------------------------------------
    # Unary operators
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigInt":
        # Ноль остаётся неотрицательным
        return BigInt(digits=list(self.digits), negative=not self.negative and not self.is_zero())

    def __pos__(self) -> "BigInt":
        return self.copy()

    def __abs__(self) -> "BigInt":
        return BigInt(digits=list(self.digits), negative=False)

    # -------------------------------------------------------------------------
    # Binary arithmetic
    # -------------------------------------------------------------------------

    def _signed_add(self, other: "BigInt") -> "BigInt":
        """
        Единый примитив сложения со знаком.

        - Знаки совпадают → сумма модулей с общим знаком
        - Знаки различны → разность (больший - меньший) со знаком большего
          по модулю операнда; равные модули → канонический ноль

        Порядок модулей определяется одним вызовом magnitude_less и
        передаётся в sub_magnitudes (ordered=True), повторной проверки нет.
        """
        if self.negative == other.negative:
            return BigInt(
                digits=add_magnitudes(self.digits, other.digits),
                negative=self.negative,
            )

        if magnitude_less(self.digits, other.digits):
            larger, smaller = other, self
        else:
            larger, smaller = self, other

        # Равные модули дают [0], знак сбрасывается нормализацией
        return BigInt(
            digits=sub_magnitudes(larger.digits, smaller.digits, ordered=True),
            negative=larger.negative,
        )

    def __add__(self, other: object) -> "BigInt":
        rhs = _coerce_operand(other)
        if rhs is None:
            return NotImplemented
        return self._signed_add(rhs)

    def __radd__(self, other: object) -> "BigInt":
        return self.__add__(other)

    def __sub__(self, other: object) -> "BigInt":
        rhs = _coerce_operand(other)
        if rhs is None:
            return NotImplemented
        return self._signed_add(-rhs)

    def __rsub__(self, other: object) -> "BigInt":
        lhs = _coerce_operand(other)
        if lhs is None:
            return NotImplemented
        return lhs._signed_add(-self)

    def __mul__(self, other: object) -> "BigInt":
        rhs = _coerce_operand(other)
        if rhs is None:
            return NotImplemented
        # Знак нуля сбрасывается нормализацией
        return BigInt(
            digits=mul_magnitudes(self.digits, rhs.digits),
            negative=self.negative != rhs.negative,
        )

    def __rmul__(self, other: object) -> "BigInt":
        return self.__mul__(other)

    # -------------------------------------------------------------------------
    # Compound assignment (replace receiver)
    # -------------------------------------------------------------------------

    def _replace_with(self, value: "BigInt") -> "BigInt":
        # value уже валиден и нормализован
        self.__dict__["digits"] = list(value.digits)
        self.__dict__["negative"] = value.negative
        return self

    def __iadd__(self, other: object) -> "BigInt":
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._replace_with(result)

    def __isub__(self, other: object) -> "BigInt":
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._replace_with(result)

    def __imul__(self, other: object) -> "BigInt":
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._replace_with(result)

    # -------------------------------------------------------------------------
    # Increment / decrement
    # -------------------------------------------------------------------------

    def increment(self) -> "BigInt":
        """Префиксный инкремент (++x): self = self + 1, возвращает self."""
        return self._replace_with(self + BigInt(1))

    def decrement(self) -> "BigInt":
        """Префиксный декремент (--x): self = self - 1, возвращает self."""
        return self._replace_with(self - BigInt(1))

    def post_increment(self) -> "BigInt":
        """
        Постфиксный инкремент (x++).

        Returns:
            Независимая копия значения ДО изменения
        """
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "BigInt":
        """
        Постфиксный декремент (x--).

        Returns:
            Независимая копия значения ДО изменения
        """
        previous = self.copy()
        self.decrement()
        return previous


def _coerce_operand(value: object) -> Optional[BigInt]:
    """BigInt как есть, int → BigInt, остальное → None (NotImplemented)."""
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInt.from_int(value)
    return None
