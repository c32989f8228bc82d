"""
Test suite for epochdate

Contains:
- tests/unit/          : Unit tests for individual modules
"""
