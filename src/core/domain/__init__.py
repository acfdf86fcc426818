"""
Domain models and value objects.

Contains immutable number-theory values: FactorMultiset, CRTSystem.
"""

from src.core.domain.crt import CRTSystem
from src.core.domain.factorization import FactorMultiset

__all__ = [
    "CRTSystem",
    "FactorMultiset",
]
