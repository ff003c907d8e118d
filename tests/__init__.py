"""
Test suite for closurekit

Contains:
- tests/unit/          : Unit tests for individual modules and the demo driver
"""
