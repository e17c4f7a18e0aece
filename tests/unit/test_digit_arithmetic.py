"""
Тесты для модуля Digit Arithmetic

Проверяет:
1. Нормализацию magnitude (старшие нули, пустой вход, идемпотентность)
2. Сравнение модулей (длина, поразрядное сравнение, равенство)
3. Сложение с переносом
4. Вычитание с заёмом, контракт порядка операндов и пропуск проверки (ordered)
5. Умножение "в столбик", включая умножение на ноль
6. Неизменность входных списков
"""

import pytest

from src.core.math.digit_arithmetic import (
    DIGIT_BASE,
    MAX_DIGIT,
    MagnitudeOrderViolation,
    add_magnitudes,
    compare_magnitudes,
    is_zero_magnitude,
    magnitude_less,
    mul_magnitudes,
    normalize_digits,
    sub_magnitudes,
)


def digits_of(n: int) -> list[int]:
    """Вспомогательная функция: неотрицательный int → digits (младший первым)."""
    return [int(c) for c in reversed(str(n))]


# =============================================================================
# ТЕСТЫ КОНСТАНТ
# =============================================================================


def test_digit_constants() -> None:
    """Основание 10, максимальная цифра 9"""
    assert DIGIT_BASE == 10
    assert MAX_DIGIT == 9


# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestNormalizeDigits:
    """Тесты для normalize_digits"""

    def test_strips_most_significant_zeros(self) -> None:
        """Хвостовые нули (старшие разряды) удаляются"""
        assert normalize_digits([5, 4, 3, 0, 0]) == [5, 4, 3]

    def test_keeps_internal_zeros(self) -> None:
        """Нули внутри числа сохраняются"""
        assert normalize_digits([0, 0, 1]) == [0, 0, 1]

    def test_all_zeros_collapse_to_single_zero(self) -> None:
        """Все нули → [0]"""
        assert normalize_digits([0, 0, 0, 0]) == [0]

    def test_empty_is_zero(self) -> None:
        """Пустой вход трактуется как ноль"""
        assert normalize_digits([]) == [0]

    def test_idempotent(self) -> None:
        """Повторная нормализация ничего не меняет"""
        once = normalize_digits([7, 0, 2, 0, 0])
        assert normalize_digits(once) == once

    def test_input_not_mutated(self) -> None:
        """Входной список не изменяется"""
        source = [1, 0, 0]
        normalize_digits(source)
        assert source == [1, 0, 0]


class TestIsZeroMagnitude:
    """Тесты для is_zero_magnitude"""

    def test_zero(self) -> None:
        assert is_zero_magnitude([0]) is True
        assert is_zero_magnitude([0, 0]) is True

    def test_non_zero(self) -> None:
        assert is_zero_magnitude([1]) is False
        assert is_zero_magnitude([0, 0, 3]) is False


# =============================================================================
# ТЕСТЫ СРАВНЕНИЯ
# =============================================================================


class TestMagnitudeLess:
    """Тесты для magnitude_less"""

    def test_shorter_is_smaller(self) -> None:
        """Более короткий magnitude меньше"""
        assert magnitude_less(digits_of(99), digits_of(100)) is True
        assert magnitude_less(digits_of(100), digits_of(99)) is False

    def test_same_length_most_significant_decides(self) -> None:
        """При равной длине решает первое несовпадение от старшего разряда"""
        assert magnitude_less(digits_of(199), digits_of(200)) is True
        assert magnitude_less(digits_of(200), digits_of(199)) is False

    def test_same_length_least_significant_decides(self) -> None:
        """Несовпадение только в младшем разряде"""
        assert magnitude_less(digits_of(120), digits_of(121)) is True
        assert magnitude_less(digits_of(121), digits_of(120)) is False

    def test_equal_is_not_less(self) -> None:
        """Равные значения не меньше друг друга"""
        assert magnitude_less(digits_of(12345), digits_of(12345)) is False
        assert magnitude_less([0], [0]) is False

    def test_single_digit(self) -> None:
        assert magnitude_less([3], [7]) is True
        assert magnitude_less([7], [3]) is False


class TestCompareMagnitudes:
    """Тесты для compare_magnitudes"""

    def test_three_way(self) -> None:
        assert compare_magnitudes(digits_of(5), digits_of(50)) == -1
        assert compare_magnitudes(digits_of(50), digits_of(5)) == 1
        assert compare_magnitudes(digits_of(50), digits_of(50)) == 0


# =============================================================================
# ТЕСТЫ СЛОЖЕНИЯ
# =============================================================================


class TestAddMagnitudes:
    """Тесты для add_magnitudes"""

    def test_no_carry(self) -> None:
        assert add_magnitudes(digits_of(123), digits_of(456)) == digits_of(579)

    def test_carry_propagates_to_new_digit(self) -> None:
        """999 + 1 = 1000: перенос создаёт новый старший разряд"""
        assert add_magnitudes(digits_of(999), digits_of(1)) == digits_of(1000)

    def test_different_lengths(self) -> None:
        """Короткий операнд дополняется нулями (в любом порядке)"""
        assert add_magnitudes(digits_of(5), digits_of(99995)) == digits_of(100000)
        assert add_magnitudes(digits_of(99995), digits_of(5)) == digits_of(100000)

    def test_zero_identity(self) -> None:
        assert add_magnitudes([0], digits_of(42)) == digits_of(42)
        assert add_magnitudes([0], [0]) == [0]

    def test_large_values(self) -> None:
        a = 10**40 - 1
        b = 987654321987654321
        assert add_magnitudes(digits_of(a), digits_of(b)) == digits_of(a + b)


# =============================================================================
# ТЕСТЫ ВЫЧИТАНИЯ
# =============================================================================


class TestSubMagnitudes:
    """Тесты для sub_magnitudes"""

    def test_no_borrow(self) -> None:
        assert sub_magnitudes(digits_of(579), digits_of(123)) == digits_of(456)

    def test_borrow_chain(self) -> None:
        """1000 - 999 = 1: заём через все разряды, старшие нули удаляются"""
        assert sub_magnitudes(digits_of(1000), digits_of(999)) == [1]

    def test_equal_operands_give_zero(self) -> None:
        assert sub_magnitudes(digits_of(12345), digits_of(12345)) == [0]

    def test_subtract_zero(self) -> None:
        assert sub_magnitudes(digits_of(700), [0]) == digits_of(700)

    def test_result_normalized(self) -> None:
        """Результат не содержит старших нулей"""
        result = sub_magnitudes(digits_of(10001), digits_of(10000))
        assert result == [1]

    def test_order_violation_raises(self) -> None:
        """|larger| < |smaller|: нарушение контракта, без заворачивания"""
        with pytest.raises(MagnitudeOrderViolation, match="requires"):
            sub_magnitudes(digits_of(999), digits_of(1000))

    def test_order_violation_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            sub_magnitudes([1], [2])

    def test_ordered_skips_comparison(self, monkeypatch) -> None:
        """ordered=True: порядок известен вызывающему коду, magnitude_less не вызывается"""
        from src.core.math import digit_arithmetic

        def fail_magnitude_less(a, b):
            raise AssertionError("magnitude_less must not be called")

        monkeypatch.setattr(digit_arithmetic, "magnitude_less", fail_magnitude_less)
        assert sub_magnitudes(digits_of(1000), digits_of(999), ordered=True) == [1]
        assert sub_magnitudes(digits_of(4242), digits_of(4242), ordered=True) == [0]

    def test_ordered_matches_checked(self) -> None:
        a, b = digits_of(10**25 + 7), digits_of(98765432109876543)
        assert sub_magnitudes(a, b, ordered=True) == sub_magnitudes(a, b)


# =============================================================================
# ТЕСТЫ УМНОЖЕНИЯ
# =============================================================================


class TestMulMagnitudes:
    """Тесты для mul_magnitudes"""

    def test_single_digits(self) -> None:
        assert mul_magnitudes([9], [9]) == digits_of(81)

    def test_reference_product(self) -> None:
        """987654321 * 123456789 = 121932631112635269"""
        result = mul_magnitudes(digits_of(987654321), digits_of(123456789))
        assert result == digits_of(121932631112635269)

    def test_zero_operand(self) -> None:
        """Умножение на ноль → [0] после нормализации"""
        assert mul_magnitudes(digits_of(12345), [0]) == [0]
        assert mul_magnitudes([0], digits_of(12345)) == [0]

    def test_one_is_identity(self) -> None:
        assert mul_magnitudes(digits_of(4096), [1]) == digits_of(4096)

    def test_carry_cascades(self) -> None:
        """99999 * 99999: длинные цепочки переносов"""
        assert mul_magnitudes(digits_of(99999), digits_of(99999)) == digits_of(99999 * 99999)

    def test_result_length_bounded(self) -> None:
        """Длина результата не превышает len(a) + len(b)"""
        a, b = digits_of(10**20 - 1), digits_of(10**15 - 1)
        assert len(mul_magnitudes(a, b)) <= len(a) + len(b)

    def test_inputs_not_mutated(self) -> None:
        a, b = digits_of(123), digits_of(45)
        mul_magnitudes(a, b)
        assert a == digits_of(123)
        assert b == digits_of(45)
