"""
Test suite for math_numbers

Contains:
- tests/unit/          : Unit tests for individual modules
"""
