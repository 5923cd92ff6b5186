"""
Test suite for average-distribution

Contains:
- tests/unit/          : Unit tests for exact arithmetic, algorithms, runner, CLI
"""
