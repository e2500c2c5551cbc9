"""
Domain models and value objects.

Contains DigitNumber — an integer bound to a fixed-width type with digit operations.
"""

from src.core.domain.digit_number import DigitNumber

__all__ = [
    "DigitNumber",
]
