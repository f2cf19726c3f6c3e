"""
Test suite for core_graphics

Contains:
- tests/unit/          : Unit tests for individual modules and property-based tests
"""
