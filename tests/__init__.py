"""
Test suite for dynamic_domain

Contains:
- tests/unit/          : Unit tests for individual modules
"""
