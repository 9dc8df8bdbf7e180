"""
Core domain models, number-theory primitives, and contracts.

This module contains the foundational building blocks of math_numbers.
"""
