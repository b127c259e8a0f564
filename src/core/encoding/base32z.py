"""
z-base-32 Encoder

Кодирование последовательности байт в z-base-32: 5 бит на символ,
старшие биты первыми, последняя неполная группа дополняется нулями справа.

    ybndrfg8ejkmcpqxot1uwisza345h769

Длина результата: ceil(len(data) * 8 / 5)
    32 байта (публичный ключ) → 52 символа

Ёмкость результата ограничена параметром capacity (по умолчанию 64 символа).
Если результат не помещается, кодирование завершается неудачей (None)
вместо усечения.
"""

from typing import Final, Optional

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

BASE32Z_ALPHABET: Final[str] = "ybndrfg8ejkmcpqxot1uwisza345h769"

# Ёмкость выходного буфера по умолчанию (символы)
BASE32Z_DEFAULT_CAPACITY: Final[int] = 64

_GROUP_BITS: Final[int] = 5
_GROUP_MASK: Final[int] = 0x1F


# =============================================================================
# EXCEPTIONS
# =============================================================================


class Base32zCapacityExceeded(Exception):
    """
    Результат кодирования не помещается в выходной буфер.

    Поднимается только encode_base32z_strict; encode_base32z в этой
    ситуации возвращает None.
    """

    def __init__(self, required: int, capacity: int):
        self.required = required
        self.capacity = capacity
        super().__init__(
            f"base32z output needs {required} chars, capacity is {capacity}"
        )


# =============================================================================
# ENCODER
# =============================================================================


def encoded_length(byte_count: int) -> int:
    """
    Количество символов z-base-32 для byte_count байт.

    Examples:
        >>> encoded_length(32)
        52
        >>> encoded_length(1)
        2
    """
    if byte_count < 0:
        raise ValueError(f"byte_count must be non-negative, got {byte_count}")
    return (byte_count * 8 + _GROUP_BITS - 1) // _GROUP_BITS


def encode_base32z(
    data: bytes,
    capacity: int = BASE32Z_DEFAULT_CAPACITY,
) -> Optional[str]:
    """
    Кодирование байт в z-base-32.

    Args:
        data: Непустая последовательность байт
        capacity: Максимальное число символов результата (default: 64)

    Returns:
        Закодированная строка или None, если результат превышает capacity

    Raises:
        ValueError: Если data пусто или capacity < 1

    Examples:
        >>> encode_base32z(b"\\x00")
        'yy'
        >>> encode_base32z(b"\\xff")
        '9h'
        >>> encode_base32z(bytes(64)) is None
        True
    """
    if len(data) == 0:
        raise ValueError("data must be non-empty")
    if capacity < 1:
        raise ValueError(f"capacity must be positive, got {capacity}")

    out: list[str] = []
    acc = data[0]
    bits = 8
    pos = 1

    while bits > 0 or pos < len(data):
        if bits < _GROUP_BITS:
            if pos < len(data):
                acc = (acc << 8) | (data[pos] & 0xFF)
                pos += 1
                bits += 8
            else:
                # Последняя группа: добиваем нулями справа
                acc <<= _GROUP_BITS - bits
                bits = _GROUP_BITS

        if len(out) >= capacity:
            return None

        bits -= _GROUP_BITS
        out.append(BASE32Z_ALPHABET[(acc >> bits) & _GROUP_MASK])
        acc &= (1 << bits) - 1

    return "".join(out)


def encode_base32z_strict(
    data: bytes,
    capacity: int = BASE32Z_DEFAULT_CAPACITY,
) -> str:
    """
    То же, что encode_base32z, но переполнение буфера — исключение.

    Raises:
        Base32zCapacityExceeded: Если результат не помещается в capacity
        ValueError: Если data пусто или capacity < 1
    """
    encoded = encode_base32z(data, capacity)
    if encoded is None:
        raise Base32zCapacityExceeded(encoded_length(len(data)), capacity)
    return encoded
