"""
Core mathematical primitives and value objects for digit-level integer operations.

This module contains pure, stateless building blocks with no external
state (no I/O, no configuration files, no shared mutable data).
"""
