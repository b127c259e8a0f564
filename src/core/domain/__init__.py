"""
Domain models and value objects.

Contains the exp2 decomposition and the reference vector suite models.
"""

from src.core.domain.exp2_decomposition import Z_ABS_BOUND, Exp2Decomposition
from src.core.domain.vector_suite import (
    Base32zVector,
    Exp2Vector,
    RoundVector,
    VectorSuite,
)

__all__ = [
    # Exp2 decomposition
    "Exp2Decomposition",
    "Z_ABS_BOUND",
    # Vector suite
    "Base32zVector",
    "Exp2Vector",
    "RoundVector",
    "VectorSuite",
]
