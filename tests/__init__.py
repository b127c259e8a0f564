"""
Test suite for the deterministic numeric kernel

Contains:
- tests/unit/          : Unit tests for individual modules
"""
