"""
Core math modules для keta

Операции над цифрами целых чисел и модель целочисленных типов фиксированной ширины.
"""

# Fixed-width integer types
from src.core.math.int_types import (
    DEFAULT_OVERFLOW_POLICY,
    POINTER_BITS,
    IntegerOutOfRange,
    IntegerOverflow,
    IntType,
    OverflowPolicy,
    fit_to_type,
    saturate_to_type,
    validate_in_type,
    validate_int,
    wrap_to_type,
)

# Digit operations
from src.core.math.digit_ops import (
    DEFAULT_RADIX,
    MIN_RADIX,
    InvalidDigit,
    InvalidRadix,
    concat,
    concat_radix,
    contains_digit,
    contains_digit_radix,
    digit_product,
    digit_product_radix,
    digit_sum,
    digit_sum_radix,
    digits,
    digits_len,
    digits_len_radix,
    digits_radix,
    from_digits,
    from_digits_radix,
    is_palindrome,
    is_palindrome_radix,
    make_max,
    make_max_radix,
    make_min,
    make_min_radix,
    nth_digit,
    nth_digit_radix,
    reverse,
    reverse_radix,
    validate_digit,
    validate_radix,
)

__all__ = [
    # Int types — Constants
    "DEFAULT_OVERFLOW_POLICY",
    "POINTER_BITS",
    # Int types — Exceptions
    "IntegerOutOfRange",
    "IntegerOverflow",
    # Int types — Types
    "IntType",
    "OverflowPolicy",
    # Int types — Functions
    "fit_to_type",
    "saturate_to_type",
    "validate_in_type",
    "validate_int",
    "wrap_to_type",
    # Digit ops — Constants
    "DEFAULT_RADIX",
    "MIN_RADIX",
    # Digit ops — Exceptions
    "InvalidDigit",
    "InvalidRadix",
    # Digit ops — Validation
    "validate_digit",
    "validate_radix",
    # Digit ops — Decomposition
    "digits",
    "digits_radix",
    "from_digits",
    "from_digits_radix",
    "digits_len",
    "digits_len_radix",
    "nth_digit",
    "nth_digit_radix",
    # Digit ops — Aggregation
    "digit_sum",
    "digit_sum_radix",
    "digit_product",
    "digit_product_radix",
    # Digit ops — Rearrangement
    "reverse",
    "reverse_radix",
    "make_max",
    "make_max_radix",
    "make_min",
    "make_min_radix",
    "concat",
    "concat_radix",
    # Digit ops — Checks
    "contains_digit",
    "contains_digit_radix",
    "is_palindrome",
    "is_palindrome_radix",
]
