"""
Test suite for keta

Contains:
- tests/unit/          : Unit tests for digit operations, int types and DigitNumber
"""
