"""
Test suite for exact-numbers

Contains:
- tests/unit/          : Unit tests for individual modules
"""
