"""
Core math modules

Детерминированные численные примитивы с побитовой воспроизводимостью.
"""

# Float Format (IEEE-754 binary64)
from src.core.math.float_format import (
    # Format constants
    DBL_MANT_DIG,
    DBL_MAX_EXP,
    DBL_MIN_EXP,
    MINUS_ZERO,
    TWO_MANT_DIG,
    # Bit views
    bits_to_float,
    float_to_bits,
    float_to_hex_bits,
    hex_bits_to_float,
    # Utilities
    is_integral,
    ulp_distance,
)

# Deterministic Rounding
from src.core.math.rounding import round_half_away

# Deterministic Exp2
from src.core.math.exp2 import (
    EXP2_OVERFLOW_THRESHOLD,
    EXP2_UNDERFLOW_THRESHOLD,
    LOG2_BY_256,
    TANH_COEFF_1,
    TANH_COEFF_3,
    TANH_COEFF_5,
    decompose_exp2,
    exp2,
)
from src.core.math.exp2_table import EXP2_TABLE, EXP2_TABLE_OFFSET

__all__ = [
    # Float Format — Constants
    "DBL_MANT_DIG",
    "DBL_MAX_EXP",
    "DBL_MIN_EXP",
    "MINUS_ZERO",
    "TWO_MANT_DIG",
    # Float Format — Bit views
    "bits_to_float",
    "float_to_bits",
    "float_to_hex_bits",
    "hex_bits_to_float",
    # Float Format — Utilities
    "is_integral",
    "ulp_distance",
    # Rounding
    "round_half_away",
    # Exp2 — Constants
    "EXP2_OVERFLOW_THRESHOLD",
    "EXP2_UNDERFLOW_THRESHOLD",
    "EXP2_TABLE",
    "EXP2_TABLE_OFFSET",
    "LOG2_BY_256",
    "TANH_COEFF_1",
    "TANH_COEFF_3",
    "TANH_COEFF_5",
    # Exp2 — Functions
    "decompose_exp2",
    "exp2",
]
