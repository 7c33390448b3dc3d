"""
Test suite for levin-numbers

Contains:
- tests/unit/          : Unit tests for individual modules
"""
