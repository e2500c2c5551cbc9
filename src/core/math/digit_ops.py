"""
Digit Ops — Digit-Level Integer Operations

Модуль раскладывает целое число на цифры в произвольной системе счисления
и отвечает на производные вопросы о нём:
- Декомпозиция (digits) и обратная сборка (from_digits)
- Агрегаты: сумма и произведение цифр, количество цифр
- Перестановки: reverse, make_max, make_min, concat
- Проверки: contains_digit, is_palindrome, nth_digit

Каждая операция имеет десятичную форму (DEFAULT_RADIX) и форму *_radix.
Десятичные формы делегируют в *_radix.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Раскладывается модуль числа, старшая цифра первой; 0 → [0]
2. radix < 2 → InvalidRadix (до любых вычислений)
3. Знак исходного значения сохраняется в reverse/make_max/make_min/concat
4. Целочисленный результат приводится к int_type согласно OverflowPolicy
5. Сумма и произведение цифр не приводятся к int_type (Python int не переполняется)
"""

import math
from typing import Final, Iterable, Optional

from src.core.math.int_types import (
    DEFAULT_OVERFLOW_POLICY,
    IntType,
    OverflowPolicy,
    fit_to_type,
    validate_in_type,
    validate_int,
)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Система счисления для операций без суффикса _radix
DEFAULT_RADIX: Final[int] = 10

# Минимальное допустимое основание
MIN_RADIX: Final[int] = 2


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidRadix(ValueError):
    """Основание системы счисления меньше MIN_RADIX."""

    pass


class InvalidDigit(ValueError):
    """
    Цифра вне диапазона [0, radix).

    Возникает в contains_digit* для аргумента digit и в from_digits*
    для любого элемента последовательности.
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_radix(radix: int) -> None:
    """
    Валидация основания системы счисления.

    Raises:
        TypeError: Если radix не int
        InvalidRadix: Если radix < MIN_RADIX
    """
    validate_int(radix, "radix")

    if radix < MIN_RADIX:
        raise InvalidRadix(f"radix must be >= {MIN_RADIX}, got {radix}")


def validate_digit(digit: int, radix: int) -> None:
    """
    Валидация цифры для заданного основания.

    Raises:
        TypeError: Если digit не int
        InvalidDigit: Если digit вне [0, radix)
    """
    validate_int(digit, "digit")

    if digit < 0 or digit >= radix:
        raise InvalidDigit(f"digit must be in [0, {radix}), got {digit}")


# =============================================================================
# ВНУТРЕННИЕ ПРИМИТИВЫ
# =============================================================================


def _reconstruct(digits: Iterable[int], radix: int) -> int:
    # digits уже провалидированы вызывающей стороной
    result = 0
    for digit in digits:
        result = result * radix + digit
    return result


def _with_sign_of(value: int, magnitude: int) -> int:
    return -magnitude if value < 0 else magnitude


# =============================================================================
# ДЕКОМПОЗИЦИЯ
# =============================================================================


def digits_radix(
    value: int,
    radix: int,
    *,
    int_type: Optional[IntType] = None,
) -> list[int]:
    """
    Разложение модуля числа на цифры в системе счисления radix.

    Старшая цифра идёт первой. Отрицательные числа раскладываются по модулю.

    Args:
        value: Исходное целое (любого знака)
        radix: Основание (>= 2)
        int_type: Тип входного значения (None → без ограничения ширины)

    Returns:
        Список цифр, каждая в [0, radix); для 0 → [0]

    Raises:
        InvalidRadix: Если radix < 2
        IntegerOutOfRange: Если value не представимо в int_type

    Examples:
        >>> digits_radix(6, 2)
        [1, 1, 0]
        >>> digits_radix(255, 16)
        [15, 15]
        >>> digits_radix(-123, 10)
        [1, 2, 3]
    """
    validate_radix(radix)
    validate_in_type(value, int_type)

    n = abs(value)
    if n == 0:
        return [0]

    result: list[int] = []
    while n > 0:
        n, digit = divmod(n, radix)
        result.append(digit)

    result.reverse()
    return result


def digits(value: int, *, int_type: Optional[IntType] = None) -> list[int]:
    """
    Разложение на десятичные цифры.

    Examples:
        >>> digits(12345)
        [1, 2, 3, 4, 5]
        >>> digits(0)
        [0]
    """
    return digits_radix(value, DEFAULT_RADIX, int_type=int_type)


def from_digits_radix(
    digits: Iterable[int],
    radix: int,
    *,
    int_type: Optional[IntType] = None,
    overflow: OverflowPolicy = DEFAULT_OVERFLOW_POLICY,
) -> int:
    """
    Сборка неотрицательного числа из цифр (старшая первой).

    Обратная операция к digits_radix для неотрицательных чисел:
    from_digits_radix(digits_radix(n, r), r) == n.

    Args:
        digits: Последовательность цифр, каждая в [0, radix)
        radix: Основание (>= 2)
        int_type: Тип результата (None → без ограничения ширины)
        overflow: Политика при выходе результата за диапазон int_type

    Returns:
        Собранное число; для пустой последовательности → 0

    Raises:
        InvalidRadix: Если radix < 2
        InvalidDigit: Если любой элемент вне [0, radix)
        IntegerOverflow: Если overflow=RAISE и результат не помещается в int_type

    Examples:
        >>> from_digits_radix([1, 1, 0], 2)
        6
        >>> from_digits_radix([], 10)
        0
    """
    validate_radix(radix)
    digits = list(digits)
    for digit in digits:
        validate_digit(digit, radix)

    return fit_to_type(_reconstruct(digits, radix), int_type, overflow)


def from_digits(
    digits: Iterable[int],
    *,
    int_type: Optional[IntType] = None,
    overflow: OverflowPolicy = DEFAULT_OVERFLOW_POLICY,
) -> int:
    """Сборка числа из десятичных цифр."""
    return from_digits_radix(digits, DEFAULT_RADIX, int_type=int_type, overflow=overflow)


def digits_len_radix(
    value: int,
    radix: int,
    *,
    int_type: Optional[IntType] = None,
) -> int:
    """
    Количество цифр модуля числа в системе счисления radix.

    Examples:
        >>> digits_len_radix(16, 2)
        5
        >>> digits_len_radix(0, 2)
        1
    """
    return len(digits_radix(value, radix, int_type=int_type))


def digits_len(value: int, *, int_type: Optional[IntType] = None) -> int:
    return digits_len_radix(value, DEFAULT_RADIX, int_type=int_type)


def nth_digit_radix(
    value: int,
    index: int,
    radix: int,
    *,
    int_type: Optional[IntType] = None,
) -> Optional[int]:
    """
    Цифра на позиции index, считая от старшей (0-indexed).

    Args:
        value: Исходное целое
        index: Позиция (>= 0)
        radix: Основание (>= 2)
        int_type: Тип входного значения

    Returns:
        Цифра или None, если index >= количества цифр

    Raises:
        ValueError: Если index < 0

    Examples:
        >>> nth_digit_radix(12345, 0, 10)
        1
        >>> nth_digit_radix(12345, 100, 10) is None
        True
    """
    sequence = digits_radix(value, radix, int_type=int_type)

    validate_int(index, "index")
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")

    if index >= len(sequence):
        return None
    return sequence[index]


def nth_digit(
    value: int,
    index: int,
    *,
    int_type: Optional[IntType] = None,
) -> Optional[int]:
    return nth_digit_radix(value, index, DEFAULT_RADIX, int_type=int_type)


# =============================================================================
# АГРЕГАТЫ
# =============================================================================


def digit_sum_radix(
    value: int,
    radix: int,
    *,
    int_type: Optional[IntType] = None,
) -> int:
    """
    Сумма цифр в системе счисления radix.

    Результат не приводится к int_type: Python int вмещает сумму
    для любой ширины входа.

    Examples:
        >>> digit_sum_radix(6, 2)
        2
    """
    return sum(digits_radix(value, radix, int_type=int_type))


def digit_sum(value: int, *, int_type: Optional[IntType] = None) -> int:
    """
    Сумма десятичных цифр.

    Examples:
        >>> digit_sum(123)
        6
    """
    return digit_sum_radix(value, DEFAULT_RADIX, int_type=int_type)


def digit_product_radix(
    value: int,
    radix: int,
    *,
    int_type: Optional[IntType] = None,
) -> int:
    """
    Произведение цифр в системе счисления radix.

    Для 0 → 0 (произведение [0]). Результат не приводится к int_type:
    для min_value знакового типа произведение считается по модулю,
    который сам не помещается в тип (-128 в I8 по основанию 256 → 128).

    Examples:
        >>> digit_product_radix(7, 2)
        1
        >>> digit_product_radix(6, 2)
        0
    """
    return math.prod(digits_radix(value, radix, int_type=int_type))


def digit_product(value: int, *, int_type: Optional[IntType] = None) -> int:
    """
    Произведение десятичных цифр.

    Examples:
        >>> digit_product(1234)
        24
        >>> digit_product(103)
        0
    """
    return digit_product_radix(value, DEFAULT_RADIX, int_type=int_type)


# =============================================================================
# ПЕРЕСТАНОВКИ
# =============================================================================


def reverse_radix(
    value: int,
    radix: int,
    *,
    int_type: Optional[IntType] = None,
    overflow: OverflowPolicy = DEFAULT_OVERFLOW_POLICY,
) -> int:
    """
    Разворот порядка цифр модуля с сохранением знака.

    Нули в конце исходного числа становятся ведущими и поглощаются
    (1200 → 21), поэтому reverse(reverse(n)) == n только для n без
    завершающих нулей и без переполнения.

    Args:
        value: Исходное целое
        radix: Основание (>= 2)
        int_type: Тип входа и результата (None → без ограничения ширины)
        overflow: Политика, если развёрнутое значение не помещается в int_type

    Returns:
        Число с развёрнутыми цифрами и знаком value

    Raises:
        InvalidRadix: Если radix < 2
        IntegerOutOfRange: Если value не представимо в int_type
        IntegerOverflow: Если overflow=RAISE и результат не помещается в int_type

    Examples:
        >>> reverse_radix(6, 2)  # 110 → 011
        3
        >>> reverse_radix(109, 10, int_type=IntType.I8)  # 901 → wrap
        -123
    """
    sequence = digits_radix(value, radix, int_type=int_type)
    magnitude = _reconstruct(reversed(sequence), radix)
    return fit_to_type(_with_sign_of(value, magnitude), int_type, overflow)


def reverse(
    value: int,
    *,
    int_type: Optional[IntType] = None,
    overflow: OverflowPolicy = DEFAULT_OVERFLOW_POLICY,
) -> int:
    """
    Разворот десятичных цифр.

    Examples:
        >>> reverse(12345)
        54321
        >>> reverse(-123)
        -321
    """
    return reverse_radix(value, DEFAULT_RADIX, int_type=int_type, overflow=overflow)


def make_max_radix(
    value: int,
    radix: int,
    *,
    int_type: Optional[IntType] = None,
    overflow: OverflowPolicy = DEFAULT_OVERFLOW_POLICY,
) -> int:
    """
    Перестановка цифр модуля по убыванию.

    Для отрицательных чисел переставляется модуль и знак возвращается:
    make_max(-2026) == -6220.
    """
    sequence = sorted(digits_radix(value, radix, int_type=int_type), reverse=True)
    magnitude = _reconstruct(sequence, radix)
    return fit_to_type(_with_sign_of(value, magnitude), int_type, overflow)


def make_max(
    value: int,
    *,
    int_type: Optional[IntType] = None,
    overflow: OverflowPolicy = DEFAULT_OVERFLOW_POLICY,
) -> int:
    """
    Examples:
        >>> make_max(2026)
        6220
    """
    return make_max_radix(value, DEFAULT_RADIX, int_type=int_type, overflow=overflow)


def make_min_radix(
    value: int,
    radix: int,
    *,
    int_type: Optional[IntType] = None,
    overflow: OverflowPolicy = DEFAULT_OVERFLOW_POLICY,
) -> int:
    """
    Перестановка цифр модуля по возрастанию.

    Ведущие нули поглощаются при сборке ([0, 2, 2, 6] → 226).
    Знак отрицательного value возвращается, как в make_max_radix.
    """
    sequence = sorted(digits_radix(value, radix, int_type=int_type))
    magnitude = _reconstruct(sequence, radix)
    return fit_to_type(_with_sign_of(value, magnitude), int_type, overflow)


def make_min(
    value: int,
    *,
    int_type: Optional[IntType] = None,
    overflow: OverflowPolicy = DEFAULT_OVERFLOW_POLICY,
) -> int:
    """
    Examples:
        >>> make_min(2026)
        226
    """
    return make_min_radix(value, DEFAULT_RADIX, int_type=int_type, overflow=overflow)


def concat_radix(
    value: int,
    other: int,
    radix: int,
    *,
    int_type: Optional[IntType] = None,
    overflow: OverflowPolicy = DEFAULT_OVERFLOW_POLICY,
) -> int:
    """
    Дописывание цифр модуля other справа к value.

    Знак берётся от value, знак other игнорируется.

    Examples:
        >>> concat_radix(12, 34, 10)
        1234
        >>> concat_radix(-12, 34, 10)
        -1234
        >>> concat_radix(0b10, 0b11, 2)
        11
    """
    head = digits_radix(value, radix, int_type=int_type)
    tail = digits_radix(other, radix, int_type=int_type)

    magnitude = _reconstruct(head + tail, radix)
    # Значение 0 даёт ведущий ноль, который поглощается при сборке
    return fit_to_type(_with_sign_of(value, magnitude), int_type, overflow)


def concat(
    value: int,
    other: int,
    *,
    int_type: Optional[IntType] = None,
    overflow: OverflowPolicy = DEFAULT_OVERFLOW_POLICY,
) -> int:
    return concat_radix(value, other, DEFAULT_RADIX, int_type=int_type, overflow=overflow)


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def contains_digit_radix(
    value: int,
    digit: int,
    radix: int,
    *,
    int_type: Optional[IntType] = None,
) -> bool:
    """
    Проверка, встречается ли digit среди цифр value.

    Args:
        value: Исходное целое
        digit: Искомая цифра, в [0, radix)
        radix: Основание (>= 2)
        int_type: Тип входного значения

    Returns:
        True если digit присутствует в разложении

    Raises:
        InvalidRadix: Если radix < 2
        InvalidDigit: Если digit вне [0, radix); цифра, которой нет
            в системе счисления, считается ошибкой вызывающего, а не False
    """
    validate_radix(radix)
    validate_digit(digit, radix)

    return digit in digits_radix(value, radix, int_type=int_type)


def contains_digit(
    value: int,
    digit: int,
    *,
    int_type: Optional[IntType] = None,
) -> bool:
    """
    Examples:
        >>> contains_digit(12345, 3)
        True
        >>> contains_digit(12345, 9)
        False
    """
    return contains_digit_radix(value, digit, DEFAULT_RADIX, int_type=int_type)


def is_palindrome_radix(
    value: int,
    radix: int,
    *,
    int_type: Optional[IntType] = None,
) -> bool:
    """
    Проверка, читается ли последовательность цифр одинаково в обе стороны.

    Сравниваются сами цифры, а не reverse(value) == value, поэтому
    результат не зависит от переполнения int_type.
    Однозначные числа (включая 0) — палиндромы.
    """
    sequence = digits_radix(value, radix, int_type=int_type)
    return sequence == sequence[::-1]


def is_palindrome(value: int, *, int_type: Optional[IntType] = None) -> bool:
    """
    Examples:
        >>> is_palindrome(12321)
        True
        >>> is_palindrome(123)
        False
    """
    return is_palindrome_radix(value, DEFAULT_RADIX, int_type=int_type)
