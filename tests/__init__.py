"""
Test suite for the number-theory toolkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
