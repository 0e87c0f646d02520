"""
Test suite for splitledger

Contains:
- tests/unit/          : Unit tests for individual modules
"""
