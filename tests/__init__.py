"""
Test suite for exact-arithmetic

Contains:
- tests/unit/          : Unit tests for individual modules
"""
