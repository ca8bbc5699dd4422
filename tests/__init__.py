"""
Test suite for gmath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
