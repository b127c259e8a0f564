"""
Encoding modules

z-base-32 кодирование и адаптер hex-ключей.
"""

from src.core.encoding.base32z import (
    BASE32Z_ALPHABET,
    BASE32Z_DEFAULT_CAPACITY,
    Base32zCapacityExceeded,
    encode_base32z,
    encode_base32z_strict,
    encoded_length,
)
from src.core.encoding.hex_adapter import (
    HEX64_MAX_CHARS,
    HexInputTooLong,
    decode_hex_lenient,
    hex64_to_base32z,
    hex_char_to_nibble,
    hex_to_base32z,
)

__all__ = [
    # Base32z — Constants
    "BASE32Z_ALPHABET",
    "BASE32Z_DEFAULT_CAPACITY",
    # Base32z — Exceptions
    "Base32zCapacityExceeded",
    # Base32z — Functions
    "encode_base32z",
    "encode_base32z_strict",
    "encoded_length",
    # Hex adapter — Constants
    "HEX64_MAX_CHARS",
    # Hex adapter — Exceptions
    "HexInputTooLong",
    # Hex adapter — Functions
    "decode_hex_lenient",
    "hex64_to_base32z",
    "hex_char_to_nibble",
    "hex_to_base32z",
]
