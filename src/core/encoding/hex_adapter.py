"""
Hex → z-base-32 Adapter

Преобразование hex-представления публичного ключа (до 64 символов)
в z-base-32:

    hex string → nibbles → bytes (старший nibble первым) → encode_base32z

Декодирование hex намеренно снисходительное: символы вне 0-9a-fA-F
превращаются в nibble 0 без ошибки (совместимость с существующими
ключами). Такие символы пишутся в DEBUG лог.
"""

import logging
from typing import Final

from src.core.encoding.base32z import BASE32Z_DEFAULT_CAPACITY, encode_base32z

logger = logging.getLogger(__name__)

# Максимальная длина hex-ключа (32 байта)
HEX64_MAX_CHARS: Final[int] = 64


class HexInputTooLong(ValueError):
    """
    Нарушение предусловия: hex строка длиннее допустимой.

    Это ошибка вызывающего кода, а не данных; поднимается до кодирования.
    """

    def __init__(self, length: int, max_chars: int):
        self.length = length
        self.max_chars = max_chars
        super().__init__(f"hex input has {length} chars, at most {max_chars} allowed")


def hex_char_to_nibble(ch: str) -> int:
    """
    Значение hex-символа (0..15); любой другой символ → 0.

    Examples:
        >>> hex_char_to_nibble("a"), hex_char_to_nibble("F"), hex_char_to_nibble("z")
        (10, 15, 0)
    """
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "f":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "F":
        return ord(ch) - ord("A") + 10
    return 0


def decode_hex_lenient(text: str) -> bytes:
    """
    Упаковка hex-строки в байты, старший nibble первым.

    Нечётная длина: последний байт дополняется нулевым младшим nibble.
    Невалидные символы декодируются как 0.

    Examples:
        >>> decode_hex_lenient("0aFF")
        b'\\n\\xff'
        >>> decode_hex_lenient("abc")
        b'\\xab\\xc0'
    """
    invalid = [ch for ch in text if hex_char_to_nibble(ch) == 0 and ch != "0"]
    if invalid:
        logger.debug("hex input contains %d non-hex chars decoded as 0", len(invalid))

    nibbles = [hex_char_to_nibble(ch) for ch in text]
    if len(nibbles) % 2:
        nibbles.append(0)

    return bytes((hi << 4) | lo for hi, lo in zip(nibbles[0::2], nibbles[1::2]))


def hex_to_base32z(
    text: str,
    max_hex_chars: int = HEX64_MAX_CHARS,
    capacity: int = BASE32Z_DEFAULT_CAPACITY,
) -> str:
    """
    Hex строка → z-base-32 с настраиваемыми ограничениями.

    Args:
        text: Hex строка длиной не более max_hex_chars
        max_hex_chars: Максимальная длина входа
        capacity: Ёмкость выходного буфера (символы)

    Returns:
        Закодированная строка; "" для пустого входа или при переполнении
        выходного буфера

    Raises:
        HexInputTooLong: Если len(text) > max_hex_chars
        ValueError: Если max_hex_chars или capacity < 1
    """
    if max_hex_chars < 1:
        raise ValueError(f"max_hex_chars must be positive, got {max_hex_chars}")
    if len(text) > max_hex_chars:
        raise HexInputTooLong(len(text), max_hex_chars)
    if not text:
        return ""

    encoded = encode_base32z(decode_hex_lenient(text), capacity)
    if encoded is None:
        logger.warning(
            "base32z output for %d hex chars exceeds capacity %d", len(text), capacity
        )
        return ""

    return encoded


def hex64_to_base32z(text: str) -> str:
    """
    Hex-ключ (до 64 символов) → z-base-32 в буфер на 64 символа.

    Examples:
        >>> hex64_to_base32z("0" * 64) == "y" * 52
        True
        >>> hex64_to_base32z("")
        ''
    """
    return hex_to_base32z(text, HEX64_MAX_CHARS, BASE32Z_DEFAULT_CAPACITY)
