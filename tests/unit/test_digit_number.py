"""
Тесты для доменной модели DigitNumber

Проверяет:
1. Создание и валидацию модели Pydantic (strict int, диапазон int_type)
2. Immutability (frozen=True)
3. Делегирование операций над цифрами
4. Сохранение int_type/overflow в результатах перестановок
5. Сериализацию/десериализацию JSON
"""

import json

import pytest
from pydantic import ValidationError

from src.core.domain import DigitNumber
from src.core.math import IntegerOverflow, InvalidRadix, IntType, OverflowPolicy

# =============================================================================
# СОЗДАНИЕ И ВАЛИДАЦИЯ
# =============================================================================


class TestDigitNumberCreation:
    """Тесты создания DigitNumber"""

    def test_defaults(self) -> None:
        """По умолчанию: без ограничения ширины, политика WRAP"""
        number = DigitNumber(value=12345)
        assert number.value == 12345
        assert number.int_type is None
        assert number.overflow is OverflowPolicy.WRAP

    def test_int_type_from_string(self) -> None:
        number = DigitNumber(value=200, int_type="u8")
        assert number.int_type is IntType.U8

    def test_value_out_of_type_range(self) -> None:
        """Значение вне int_type отклоняется"""
        with pytest.raises(ValidationError, match="out of range for i8"):
            DigitNumber(value=200, int_type=IntType.I8)

        with pytest.raises(ValidationError):
            DigitNumber(value=-1, int_type=IntType.U64)

    def test_strict_int(self) -> None:
        """Строки, float и bool не приводятся к int"""
        with pytest.raises(ValidationError):
            DigitNumber(value="12345")

        with pytest.raises(ValidationError):
            DigitNumber(value=12.0)

        with pytest.raises(ValidationError):
            DigitNumber(value=True)

    def test_immutable(self) -> None:
        """frozen=True запрещает изменение полей"""
        number = DigitNumber(value=12345)
        with pytest.raises(ValidationError):
            number.value = 54321  # type: ignore[misc]

    def test_int_conversion(self) -> None:
        assert int(DigitNumber(value=-42)) == -42

    def test_from_digits(self) -> None:
        number = DigitNumber.from_digits([1, 2, 3], int_type=IntType.U16)
        assert number.value == 123
        assert number.int_type is IntType.U16

    def test_from_digits_generator(self) -> None:
        number = DigitNumber.from_digits(d for d in [2, 0, 2, 6])
        assert number.value == 2026

    def test_from_digits_radix(self) -> None:
        assert DigitNumber.from_digits_radix([1, 1, 0], 2).value == 6
        assert DigitNumber.from_digits_radix([2, 5, 6], 10, IntType.U8).value == 0


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


class TestDigitNumberOperations:
    """Методы DigitNumber делегируют в digit_ops"""

    def test_decomposition(self) -> None:
        number = DigitNumber(value=12345)
        assert number.digits() == [1, 2, 3, 4, 5]
        assert number.digits_len() == 5
        assert number.nth_digit(2) == 3
        assert number.nth_digit(5) is None
        assert DigitNumber(value=6).digits_radix(2) == [1, 1, 0]
        assert DigitNumber(value=16).digits_len_radix(2) == 5
        assert DigitNumber(value=6).nth_digit_radix(1, 2) == 1

    def test_aggregates(self) -> None:
        assert DigitNumber(value=123).digit_sum() == 6
        assert DigitNumber(value=123).digit_product() == 6
        assert DigitNumber(value=6).digit_sum_radix(2) == 2
        assert DigitNumber(value=7).digit_product_radix(2) == 1
        assert DigitNumber(value=0).digit_product() == 0

    def test_checks(self) -> None:
        assert DigitNumber(value=12345).contains_digit(3)
        assert not DigitNumber(value=12345).contains_digit(9)
        assert DigitNumber(value=12321).is_palindrome()
        assert DigitNumber(value=5).is_palindrome_radix(2)
        assert DigitNumber(value=255).contains_digit_radix(15, 16)

    def test_rearrangements(self) -> None:
        assert DigitNumber(value=12345).reverse() == DigitNumber(value=54321)
        assert DigitNumber(value=2026).make_max().value == 6220
        assert DigitNumber(value=2026).make_min().value == 226
        assert DigitNumber(value=6).reverse_radix(2).value == 3
        assert DigitNumber(value=5).make_max_radix(2).value == 6
        assert DigitNumber(value=6).make_min_radix(2).value == 3

    def test_concat(self) -> None:
        assert DigitNumber(value=12).concat(34).value == 1234
        assert DigitNumber(value=-12).concat(DigitNumber(value=34)).value == -1234
        assert DigitNumber(value=2).concat_radix(3, 2).value == 11

    def test_invalid_radix(self) -> None:
        with pytest.raises(InvalidRadix):
            DigitNumber(value=10).digits_radix(1)


# =============================================================================
# ТИП И ПЕРЕПОЛНЕНИЕ
# =============================================================================


class TestDigitNumberOverflow:
    """Результаты перестановок сохраняют int_type и overflow"""

    def test_result_keeps_type(self) -> None:
        number = DigitNumber(value=120, int_type=IntType.I8, overflow=OverflowPolicy.RAISE)
        reversed_number = number.reverse()

        assert reversed_number.value == 21
        assert reversed_number.int_type is IntType.I8
        assert reversed_number.overflow is OverflowPolicy.RAISE

    def test_wrap(self) -> None:
        assert DigitNumber(value=109, int_type=IntType.I8).reverse().value == -123

    def test_saturate(self) -> None:
        number = DigitNumber(value=109, int_type=IntType.I8, overflow=OverflowPolicy.SATURATE)
        assert number.reverse().value == 127
        assert number.make_max().value == 127

    def test_raise(self) -> None:
        number = DigitNumber(value=109, int_type=IntType.I8, overflow=OverflowPolicy.RAISE)
        with pytest.raises(IntegerOverflow):
            number.reverse()

        with pytest.raises(IntegerOverflow):
            number.concat(9)


# =============================================================================
# СЕРИАЛИЗАЦИЯ
# =============================================================================


class TestDigitNumberSerialization:
    """JSON сериализация/десериализация"""

    def test_json_round_trip(self) -> None:
        number = DigitNumber(value=2026, int_type=IntType.U32, overflow=OverflowPolicy.SATURATE)
        payload = json.loads(number.model_dump_json())

        assert payload == {"value": 2026, "int_type": "u32", "overflow": "saturate"}
        assert DigitNumber.model_validate_json(number.model_dump_json()) == number

    def test_json_validation_checks_range(self) -> None:
        with pytest.raises(ValidationError):
            DigitNumber.model_validate_json('{"value": 300, "int_type": "u8"}')
