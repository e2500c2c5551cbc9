"""
IntTypes — Fixed-Width Integer Types & Overflow Policies

Модуль моделирует встроенные целочисленные типы фиксированной ширины
поверх Python int:
- IntType: набор ширин (8/16/32/64/128/pointer) со знаком и без
- OverflowPolicy: поведение при выходе результата за диапазон типа
- Проверка, что входное значение представимо в типе
- Приведение результата к ширине типа (wrap / saturate / raise)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. int_type=None означает обычный Python int без ограничения ширины
2. WRAP эквивалентен two's complement усечению (как wrapping-арифметика)
3. SATURATE всегда возвращает значение в [min_value, max_value]
4. RAISE никогда не возвращает непредставимое значение
"""

import struct
from enum import Enum
from typing import Final, Optional

# =============================================================================
# ПАРАМЕТРЫ ПЛАТФОРМЫ
# =============================================================================

# Ширина указателя (бит) для ISIZE/USIZE
POINTER_BITS: Final[int] = struct.calcsize("P") * 8


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerOutOfRange(ValueError):
    """Входное значение не представимо в заданном IntType."""

    pass


class IntegerOverflow(OverflowError):
    """
    Результат операции не помещается в IntType.

    Возникает только при OverflowPolicy.RAISE; WRAP и SATURATE
    всегда возвращают представимое значение.
    """

    pass


# =============================================================================
# ТИПЫ
# =============================================================================


class IntType(str, Enum):
    """Целочисленный тип фиксированной ширины"""

    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    ISIZE = "isize"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    USIZE = "usize"

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def bits(self) -> int:
        if self.value.endswith("size"):
            return POINTER_BITS
        return int(self.value[1:])

    @property
    def min_value(self) -> int:
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Проверка, что value лежит в [min_value, max_value]."""
        return self.min_value <= value <= self.max_value


class OverflowPolicy(str, Enum):
    """Поведение при выходе результата за диапазон IntType"""

    WRAP = "wrap"
    SATURATE = "saturate"
    RAISE = "raise"


# Политика по умолчанию: усечение, как wrapping-арифметика фиксированной ширины
DEFAULT_OVERFLOW_POLICY: Final[OverflowPolicy] = OverflowPolicy.WRAP


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_int(value: int, name: str) -> None:
    """
    Валидация, что значение является int (bool не допускается).

    Raises:
        TypeError: Если value не int или является bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_in_type(
    value: int,
    int_type: Optional[IntType],
    name: str = "value",
) -> None:
    """
    Валидация, что значение представимо в int_type.

    Args:
        value: Проверяемое значение
        int_type: Целевой тип (None → без ограничения ширины)
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int
        IntegerOutOfRange: Если value вне [min_value, max_value] типа
    """
    validate_int(value, name)

    if int_type is None:
        return

    int_type = IntType(int_type)
    if not int_type.contains(value):
        raise IntegerOutOfRange(
            f"{name}={value} out of range for {int_type.value} "
            f"[{int_type.min_value}, {int_type.max_value}]"
        )


# =============================================================================
# ПРИВЕДЕНИЕ К ШИРИНЕ
# =============================================================================


def wrap_to_type(value: int, int_type: IntType) -> int:
    """
    Two's complement усечение значения до ширины типа.

    Examples:
        >>> wrap_to_type(901, IntType.I8)
        -123
        >>> wrap_to_type(256, IntType.U8)
        0
        >>> wrap_to_type(-1, IntType.U8)
        255
    """
    mask = (1 << int_type.bits) - 1
    wrapped = value & mask

    if int_type.signed and wrapped > int_type.max_value:
        wrapped -= 1 << int_type.bits

    return wrapped


def saturate_to_type(value: int, int_type: IntType) -> int:
    """
    Ограничение значения диапазоном типа.

    Examples:
        >>> saturate_to_type(901, IntType.I8)
        127
        >>> saturate_to_type(-901, IntType.I8)
        -128
    """
    return max(int_type.min_value, min(value, int_type.max_value))


def fit_to_type(
    value: int,
    int_type: Optional[IntType],
    overflow: OverflowPolicy = DEFAULT_OVERFLOW_POLICY,
) -> int:
    """
    Приведение результата операции к int_type согласно политике.

    Args:
        value: Результат, вычисленный без ограничения ширины
        int_type: Целевой тип (None → value возвращается без изменений)
        overflow: Политика при выходе за диапазон

    Returns:
        Значение, представимое в int_type

    Raises:
        ValueError: Если overflow не является OverflowPolicy
        IntegerOverflow: Если overflow=RAISE и value не помещается в тип
    """
    policy = OverflowPolicy(overflow)

    if int_type is None:
        return value

    int_type = IntType(int_type)
    if int_type.contains(value):
        return value

    if policy is OverflowPolicy.WRAP:
        return wrap_to_type(value, int_type)

    if policy is OverflowPolicy.SATURATE:
        return saturate_to_type(value, int_type)

    raise IntegerOverflow(
        f"Result {value} does not fit in {int_type.value} "
        f"[{int_type.min_value}, {int_type.max_value}]"
    )
