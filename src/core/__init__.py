"""
Core domain models, mathematical primitives, and invariants.

This module contains the number-theory building blocks: primality tests,
factorization, modular arithmetic and positional base encoding, all on top
of Python's arbitrary-precision int.
"""
