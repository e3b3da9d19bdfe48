"""
Test suite for fermat

Contains:
- tests/unit/          : Unit tests for individual modules
"""
