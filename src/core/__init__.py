"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks that are independent
of the algorithms that consume them: exact decimal arithmetic, the rational
reducer, summary statistics, and JSON contracts.
"""
