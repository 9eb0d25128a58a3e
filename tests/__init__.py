"""
Test suite for css-filter-functions

Contains:
- tests/unit/          : Unit tests for individual modules
"""
