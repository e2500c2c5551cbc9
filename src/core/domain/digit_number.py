"""
DigitNumber — Integer Value Object with Digit Operations

Immutable Pydantic модель, связывающая целое значение с его типом
фиксированной ширины и политикой переполнения. Все операции модуля
src.core.math.digit_ops доступны как методы.

Целочисленные результаты перестановок (reverse, make_max, make_min,
concat) возвращаются как новый DigitNumber того же int_type и overflow.
"""

from typing import Iterable, Optional, Union

from pydantic import BaseModel, Field, model_validator

from src.core.math import digit_ops as ops
from src.core.math.int_types import (
    DEFAULT_OVERFLOW_POLICY,
    IntType,
    OverflowPolicy,
    validate_in_type,
)


# =============================================================================
# DIGIT NUMBER MODEL
# =============================================================================


class DigitNumber(BaseModel):
    """
    Целое число с операциями над цифрами.

    Immutable модель (frozen=True): каждая перестановка создаёт новый экземпляр.
    """

    value: int = Field(..., strict=True, description="Целое значение")
    int_type: Optional[IntType] = Field(
        default=None, description="Тип фиксированной ширины (None → Python int)"
    )
    overflow: OverflowPolicy = Field(
        default=DEFAULT_OVERFLOW_POLICY,
        description="Политика при выходе результата за диапазон int_type",
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_value_in_type(self) -> "DigitNumber":
        """Проверка, что value представимо в int_type."""
        validate_in_type(self.value, self.int_type)
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_digits_radix(
        cls,
        digits: Iterable[int],
        radix: int,
        int_type: Optional[IntType] = None,
        overflow: OverflowPolicy = DEFAULT_OVERFLOW_POLICY,
    ) -> "DigitNumber":
        """Сборка из цифр (старшая первой) в системе счисления radix."""
        value = ops.from_digits_radix(digits, radix, int_type=int_type, overflow=overflow)
        return cls(value=value, int_type=int_type, overflow=overflow)

    @classmethod
    def from_digits(
        cls,
        digits: Iterable[int],
        int_type: Optional[IntType] = None,
        overflow: OverflowPolicy = DEFAULT_OVERFLOW_POLICY,
    ) -> "DigitNumber":
        return cls.from_digits_radix(digits, ops.DEFAULT_RADIX, int_type, overflow)

    def _derive(self, value: int) -> "DigitNumber":
        return DigitNumber(value=value, int_type=self.int_type, overflow=self.overflow)

    def __int__(self) -> int:
        return self.value

    # -------------------------------------------------------------------------
    # Декомпозиция и агрегаты
    # -------------------------------------------------------------------------

    def digits_radix(self, radix: int) -> list[int]:
        return ops.digits_radix(self.value, radix, int_type=self.int_type)

    def digits(self) -> list[int]:
        return self.digits_radix(ops.DEFAULT_RADIX)

    def digits_len_radix(self, radix: int) -> int:
        return ops.digits_len_radix(self.value, radix, int_type=self.int_type)

    def digits_len(self) -> int:
        return self.digits_len_radix(ops.DEFAULT_RADIX)

    def nth_digit_radix(self, index: int, radix: int) -> Optional[int]:
        return ops.nth_digit_radix(self.value, index, radix, int_type=self.int_type)

    def nth_digit(self, index: int) -> Optional[int]:
        return self.nth_digit_radix(index, ops.DEFAULT_RADIX)

    def digit_sum_radix(self, radix: int) -> int:
        return ops.digit_sum_radix(self.value, radix, int_type=self.int_type)

    def digit_sum(self) -> int:
        return self.digit_sum_radix(ops.DEFAULT_RADIX)

    def digit_product_radix(self, radix: int) -> int:
        return ops.digit_product_radix(self.value, radix, int_type=self.int_type)

    def digit_product(self) -> int:
        return self.digit_product_radix(ops.DEFAULT_RADIX)

    # -------------------------------------------------------------------------
    # Перестановки
    # -------------------------------------------------------------------------

    def reverse_radix(self, radix: int) -> "DigitNumber":
        """
        Разворот цифр с сохранением знака.

        Переполнение int_type обрабатывается согласно self.overflow.
        """
        return self._derive(
            ops.reverse_radix(
                self.value, radix, int_type=self.int_type, overflow=self.overflow
            )
        )

    def reverse(self) -> "DigitNumber":
        return self.reverse_radix(ops.DEFAULT_RADIX)

    def make_max_radix(self, radix: int) -> "DigitNumber":
        return self._derive(
            ops.make_max_radix(
                self.value, radix, int_type=self.int_type, overflow=self.overflow
            )
        )

    def make_max(self) -> "DigitNumber":
        return self.make_max_radix(ops.DEFAULT_RADIX)

    def make_min_radix(self, radix: int) -> "DigitNumber":
        return self._derive(
            ops.make_min_radix(
                self.value, radix, int_type=self.int_type, overflow=self.overflow
            )
        )

    def make_min(self) -> "DigitNumber":
        return self.make_min_radix(ops.DEFAULT_RADIX)

    def concat_radix(self, other: Union["DigitNumber", int], radix: int) -> "DigitNumber":
        """
        Дописывание цифр other справа.

        Args:
            other: DigitNumber или int; должен быть представим в self.int_type
            radix: Основание (>= 2)
        """
        other_value = other.value if isinstance(other, DigitNumber) else other
        return self._derive(
            ops.concat_radix(
                self.value,
                other_value,
                radix,
                int_type=self.int_type,
                overflow=self.overflow,
            )
        )

    def concat(self, other: Union["DigitNumber", int]) -> "DigitNumber":
        return self.concat_radix(other, ops.DEFAULT_RADIX)

    # -------------------------------------------------------------------------
    # Проверки
    # -------------------------------------------------------------------------

    def contains_digit_radix(self, digit: int, radix: int) -> bool:
        return ops.contains_digit_radix(self.value, digit, radix, int_type=self.int_type)

    def contains_digit(self, digit: int) -> bool:
        return self.contains_digit_radix(digit, ops.DEFAULT_RADIX)

    def is_palindrome_radix(self, radix: int) -> bool:
        return ops.is_palindrome_radix(self.value, radix, int_type=self.int_type)

    def is_palindrome(self) -> bool:
        return self.is_palindrome_radix(ops.DEFAULT_RADIX)
