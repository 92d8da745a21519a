"""
Test suite for strmath

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
