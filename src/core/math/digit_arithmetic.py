"""
Digit Arithmetic — Magnitude Primitives для BigInt

Модуль содержит все алгоритмы над модулями (magnitudes) целых чисел
произвольной точности. Magnitude это список десятичных цифр, младший
разряд первым (least-significant first):

    12345 → [5, 4, 3, 2, 1]
    0     → [0]

Модуль обеспечивает:
- Нормализацию: удаление лишних старших нулей
- Сравнение модулей (без учёта знака)
- Сложение с переносом (carry)
- Вычитание с заёмом (borrow)
- Умножение "в столбик" (schoolbook)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой функции нормализован: len == 1 или старшая цифра != 0
2. Все цифры результата в диапазоне [0, 9]
3. Входные списки никогда не изменяются (функции чистые)
4. sub_magnitudes никогда не "заворачивает" результат: нарушение порядка
   операндов → MagnitudeOrderViolation
"""

from typing import Final, Sequence

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание внутреннего представления
DIGIT_BASE: Final[int] = 10

# Максимальное значение одной цифры
MAX_DIGIT: Final[int] = DIGIT_BASE - 1

# Канонический ноль
ZERO_DIGITS: Final[tuple[int, ...]] = (0,)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MagnitudeOrderViolation(ValueError):
    """
    Нарушение контракта sub_magnitudes: |larger| < |smaller|.

    Вызывающий код обязан определить больший операнд через magnitude_less
    до вызова вычитания. Публичные операторы BigInt этот контракт соблюдают,
    поэтому исключение сигнализирует об ошибке в вызывающем коде.
    """

    pass


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_digits(digits: Sequence[int]) -> list[int]:
    """
    Удаление лишних старших нулей.

    Старшие разряды хранятся в конце списка, поэтому удаляются хвостовые нули,
    пока не останется одна цифра. Пустой вход трактуется как ноль.

    Args:
        digits: Цифры, младший разряд первым

    Returns:
        Новый нормализованный список

    Examples:
        >>> normalize_digits([5, 4, 3, 0, 0])
        [5, 4, 3]
        >>> normalize_digits([0, 0, 0])
        [0]
        >>> normalize_digits([])
        [0]
    """
    result = list(digits)
    while len(result) > 1 and result[-1] == 0:
        result.pop()
    if not result:
        result.append(0)
    return result


def is_zero_magnitude(digits: Sequence[int]) -> bool:
    """
    Проверка, что magnitude равен нулю.

    Args:
        digits: Цифры (не обязательно нормализованные)

    Returns:
        True если все цифры равны 0
    """
    return all(d == 0 for d in digits)


# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


def magnitude_less(a: Sequence[int], b: Sequence[int]) -> bool:
    """
    Проверка |a| < |b| без учёта знака.

    Алгоритм:
        1. Более короткий список → меньший модуль
        2. Равная длина → сравнение от старшего разряда к младшему,
           первое несовпадение решает
        3. Полностью равные последовательности → False

    Операнды должны быть нормализованы, иначе сравнение по длине некорректно.

    Args:
        a: Первый magnitude (нормализованный)
        b: Второй magnitude (нормализованный)

    Returns:
        True если |a| < |b|

    Examples:
        >>> magnitude_less([9, 9], [0, 0, 1])  # 99 < 100
        True
        >>> magnitude_less([1, 2, 3], [1, 2, 3])
        False
        >>> magnitude_less([0, 0, 2], [9, 9, 1])  # 200 vs 199
        False
    """
    if len(a) != len(b):
        return len(a) < len(b)

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return a[i] < b[i]

    return False


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Трёхзначное сравнение модулей.

    Returns:
        -1 если |a| < |b|
         0 если |a| == |b|
        +1 если |a| > |b|
    """
    if magnitude_less(a, b):
        return -1
    if magnitude_less(b, a):
        return 1
    return 0


# =============================================================================
# АРИФМЕТИКА МОДУЛЕЙ
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Сложение модулей с переносом.

    Поразрядно: sum = a[i] + b[i] + carry; digit = sum % 10; carry = sum // 10.
    После более короткого операнда используются нули. Ненулевой финальный
    перенос добавляется старшей цифрой.

    Сумма двух нормализованных модулей не может иметь лишних старших нулей,
    поэтому нормализация не требуется.

    Args:
        a: Первое слагаемое (нормализованное)
        b: Второе слагаемое (нормализованное)

    Returns:
        |a| + |b|

    Examples:
        >>> add_magnitudes([9, 9, 9], [1])  # 999 + 1
        [0, 0, 0, 1]
        >>> add_magnitudes([0], [0])
        [0]
    """
    result: list[int] = []
    carry = 0

    for i in range(max(len(a), len(b))):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        result.append(total % DIGIT_BASE)
        carry = total // DIGIT_BASE

    if carry:
        result.append(carry)

    return result


def sub_magnitudes(
    larger: Sequence[int],
    smaller: Sequence[int],
    *,
    ordered: bool = False,
) -> list[int]:
    """
    Вычитание модулей с заёмом: |larger| - |smaller|.

    Поразрядно: diff = larger[i] - borrow - smaller[i]; если diff < 0,
    то diff += 10 и borrow = 1, иначе borrow = 0. Результат нормализуется
    (вычитание может породить старшие нули).

    ВАЖНО: вызывающий код определяет больший операнд через magnitude_less.
    Обратный порядок не "заворачивается", а считается нарушением контракта.

    Args:
        larger: Уменьшаемое (|larger| >= |smaller|)
        smaller: Вычитаемое
        ordered: Порядок уже установлен вызывающим кодом, проверка
            через magnitude_less пропускается

    Returns:
        |larger| - |smaller| (нормализованный)

    Raises:
        MagnitudeOrderViolation: Если |larger| < |smaller| (только при ordered=False)

    Examples:
        >>> sub_magnitudes([0, 0, 0, 1], [9, 9, 9])  # 1000 - 999
        [1]
        >>> sub_magnitudes([5, 4], [5, 4])
        [0]
    """
    if not ordered and magnitude_less(larger, smaller):
        raise MagnitudeOrderViolation(
            f"sub_magnitudes requires |larger| >= |smaller|, "
            f"got {len(larger)}-digit minuend and {len(smaller)}-digit subtrahend"
        )

    result: list[int] = []
    borrow = 0

    for i in range(len(larger)):
        diff = larger[i] - borrow - (smaller[i] if i < len(smaller) else 0)
        if diff < 0:
            diff += DIGIT_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return normalize_digits(result)


def mul_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Умножение модулей "в столбик" (schoolbook, O(n·m)).

    Буфер результата длиной len(a) + len(b). Для каждой пары разрядов (i, j)
    в позицию i + j накапливается a[i] * b[j] + carry, перенос
    распространяется дальше, пока не исчерпается. В конце нормализация
    (умножение на ноль даёт [0]).

    Args:
        a: Первый множитель (нормализованный)
        b: Второй множитель (нормализованный)

    Returns:
        |a| * |b| (нормализованный)

    Examples:
        >>> mul_magnitudes([2, 1], [2, 1])  # 12 * 12
        [4, 4, 1]
        >>> mul_magnitudes([5, 4, 3], [0])
        [0]
    """
    result = [0] * (len(a) + len(b))

    for i, a_digit in enumerate(a):
        carry = 0
        j = 0
        while j < len(b) or carry:
            b_digit = b[j] if j < len(b) else 0
            current = result[i + j] + a_digit * b_digit + carry
            result[i + j] = current % DIGIT_BASE
            carry = current // DIGIT_BASE
            j += 1

    return normalize_digits(result)
