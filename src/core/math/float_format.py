"""
Float Format — IEEE-754 binary64 Parameters & Bit Views

Модуль фиксирует параметры формата double и даёт побитовый доступ к float:
- Константы формата (DBL_MANT_DIG, DBL_MAX_EXP, DBL_MIN_EXP)
- Порог TWO_MANT_DIG = 2^(DBL_MANT_DIG-1), используемый детерминированным round
- Преобразования float <-> 64-битный паттерн (int / hex-строка)
- Расстояние в ULP между двумя double

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. float в CPython — это IEEE-754 binary64, каждая промежуточная операция
   округляется до double (нет x87 excess precision)
2. Сравнение результатов выполняется по битам, а не через epsilon
3. -0.0 и +0.0 различаются побитово, но находятся на расстоянии 0 ULP
"""

import math
import struct
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ФОРМАТА binary64
# =============================================================================

# Точность мантиссы в битах (включая неявную единицу)
DBL_MANT_DIG: Final[int] = 53

# Максимальная экспонента: 2^DBL_MAX_EXP уже не представимо
DBL_MAX_EXP: Final[int] = 1024

# Минимальная экспонента нормализованного числа (в нотации C <float.h>)
DBL_MIN_EXP: Final[int] = -1021

# 2^(DBL_MANT_DIG-1): начиная с этого порога каждый double — целое число
TWO_MANT_DIG: Final[float] = float(2 ** (DBL_MANT_DIG - 1))

# Отрицательный ноль
MINUS_ZERO: Final[float] = -0.0

_DOUBLE: Final[struct.Struct] = struct.Struct(">d")
_UINT64: Final[struct.Struct] = struct.Struct(">Q")
_SIGN_BIT: Final[int] = 1 << 63
_HEX_DIGITS: Final[frozenset] = frozenset("0123456789abcdefABCDEF")


# =============================================================================
# ПОБИТОВЫЕ ПРЕДСТАВЛЕНИЯ
# =============================================================================


def float_to_bits(value: float) -> int:
    """
    Паттерн IEEE-754 для double как беззнаковое 64-битное целое.

    Examples:
        >>> hex(float_to_bits(1.0))
        '0x3ff0000000000000'
        >>> hex(float_to_bits(-0.0))
        '0x8000000000000000'
    """
    return _UINT64.unpack(_DOUBLE.pack(value))[0]


def bits_to_float(bits: int) -> float:
    """
    Обратное преобразование: 64-битный паттерн → double.

    Raises:
        ValueError: Если bits вне диапазона [0, 2^64)
    """
    if not 0 <= bits < (1 << 64):
        raise ValueError(f"bits must fit in 64 bits, got {bits}")
    return _DOUBLE.unpack(_UINT64.pack(bits))[0]


def float_to_hex_bits(value: float) -> str:
    """
    Паттерн double как 16 hex-символов в нижнем регистре.

    Examples:
        >>> float_to_hex_bits(2.0)
        '4000000000000000'
    """
    return f"{float_to_bits(value):016x}"


def hex_bits_to_float(text: str) -> float:
    """
    Разбор 16 hex-символов в double.

    Raises:
        ValueError: Если строка не состоит ровно из 16 hex-символов
    """
    if len(text) != 16:
        raise ValueError(f"hex bit pattern must have 16 digits, got {len(text)}")
    if any(ch not in _HEX_DIGITS for ch in text):
        raise ValueError(f"hex bit pattern contains non-hex characters: {text!r}")
    return bits_to_float(int(text, 16))


# =============================================================================
# ULP-РАССТОЯНИЕ
# =============================================================================


def _ordered_bits(value: float) -> int:
    # Монотонное отображение double → int: соседние double отличаются на 1
    bits = float_to_bits(value)
    if bits & _SIGN_BIT:
        return -(bits & ~_SIGN_BIT)
    return bits


def ulp_distance(a: float, b: float) -> int:
    """
    Количество представимых double между a и b.

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        0 если a и b побитово равны (или это +0.0 и -0.0),
        1 для соседних double и т.д. Бесконечности считаются соседями
        максимального конечного значения.

    Raises:
        ValueError: Если a или b — NaN

    Examples:
        >>> ulp_distance(1.0, 1.0)
        0
        >>> ulp_distance(0.0, -0.0)
        0
        >>> ulp_distance(1.0, math.nextafter(1.0, 2.0))
        1
    """
    if math.isnan(a) or math.isnan(b):
        raise ValueError(f"ulp_distance is undefined for NaN, got {a}, {b}")
    return abs(_ordered_bits(a) - _ordered_bits(b))


def is_integral(value: float) -> bool:
    """True если value — конечное целое значение (включая -0.0)."""
    return math.isfinite(value) and value == math.floor(value)
