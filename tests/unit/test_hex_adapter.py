"""
Тесты для Hex → z-base-32 Adapter

Проверяет:
1. Снисходительное декодирование hex (невалидные символы → 0)
2. Нечувствительность к регистру
3. Упаковку nibble → байты (старший первым, нечётная длина)
4. Предусловие длины (HexInputTooLong)
5. Пустой результат при переполнении ёмкости
"""

import logging

import pytest

from src.core.encoding.base32z import BASE32Z_ALPHABET, encode_base32z
from src.core.encoding.hex_adapter import (
    HEX64_MAX_CHARS,
    HexInputTooLong,
    decode_hex_lenient,
    hex64_to_base32z,
    hex_char_to_nibble,
    hex_to_base32z,
)

# 64-символьный hex ключ
SAMPLE_KEY = "4f1a9c0e7b2d58f3a6c1e904b7d2f8a35c6e1b09d4f7a2c8e3b5d0f6a19c7e42"


# =============================================================================
# ТЕСТЫ: Декодирование hex
# =============================================================================


class TestHexDecoding:
    """Декодирование символов и упаковка nibble."""

    @pytest.mark.parametrize(
        "ch, nibble",
        [("0", 0), ("9", 9), ("a", 10), ("f", 15), ("A", 10), ("F", 15)],
    )
    def test_valid_chars(self, ch, nibble):
        """0-9, a-f, A-F"""
        assert hex_char_to_nibble(ch) == nibble

    @pytest.mark.parametrize("ch", ["g", "G", "z", " ", "-", "x", "é"])
    def test_invalid_chars_decode_to_zero(self, ch):
        """Любой другой символ → 0 без ошибки."""
        assert hex_char_to_nibble(ch) == 0

    def test_pack_high_nibble_first(self):
        """Старший nibble первым."""
        assert decode_hex_lenient("0aff") == b"\x0a\xff"
        assert decode_hex_lenient(SAMPLE_KEY) == bytes.fromhex(SAMPLE_KEY)

    def test_odd_length_padded(self):
        """Нечётная длина: младший nibble последнего байта — 0."""
        assert decode_hex_lenient("abc") == b"\xab\xc0"
        assert decode_hex_lenient("f") == b"\xf0"

    def test_case_insensitive(self):
        """'aB' и 'Ab' декодируются одинаково."""
        assert decode_hex_lenient("aB") == decode_hex_lenient("Ab") == b"\xab"

    def test_invalid_chars_logged(self, caplog):
        """Невалидные символы пишутся в DEBUG лог."""
        with caplog.at_level(logging.DEBUG, logger="src.core.encoding.hex_adapter"):
            assert decode_hex_lenient("zz") == b"\x00"
        assert "2 non-hex chars" in caplog.text


# =============================================================================
# ТЕСТЫ: hex64_to_base32z
# =============================================================================


class TestHex64ToBase32z:
    """Кодирование 64-символьных ключей."""

    def test_all_zero_key(self):
        """64 нуля → 52 символа 'y'."""
        encoded = hex64_to_base32z("0" * 64)
        assert encoded == "y" * 52
        assert set(encoded) <= set(BASE32Z_ALPHABET)

    def test_all_ones_key(self):
        """64 'f' → 51 символ '9' и завершающий 'o'."""
        assert hex64_to_base32z("f" * 64) == "9" * 51 + "o"

    def test_sample_key(self):
        """Результат совпадает с кодированием байт ключа."""
        encoded = hex64_to_base32z(SAMPLE_KEY)
        assert len(encoded) == 52
        assert encoded == encode_base32z(bytes.fromhex(SAMPLE_KEY))

    def test_deterministic(self):
        """Повторные вызовы дают одинаковый результат."""
        results = {hex64_to_base32z(SAMPLE_KEY) for _ in range(10)}
        assert len(results) == 1

    def test_case_insensitive(self):
        """Верхний и нижний регистр дают одинаковый результат."""
        assert hex64_to_base32z(SAMPLE_KEY.upper()) == hex64_to_base32z(SAMPLE_KEY)
        assert hex64_to_base32z("aB" * 32) == hex64_to_base32z("Ab" * 32)

    def test_lenient_invalid_chars(self):
        """Невалидные символы кодируются как '0'."""
        assert hex64_to_base32z("zz" + "0" * 62) == hex64_to_base32z("0" * 64)
        assert hex64_to_base32z("g1") == hex64_to_base32z("01")

    def test_short_input(self):
        """Короткие ключи допустимы."""
        assert hex64_to_base32z("00") == "yy"
        assert hex64_to_base32z("ff") == "9h"

    def test_empty_input(self):
        """Пустая строка → пустой результат."""
        assert hex64_to_base32z("") == ""

    def test_too_long_rejected(self):
        """Больше 64 символов → HexInputTooLong"""
        with pytest.raises(HexInputTooLong, match="65 chars, at most 64"):
            hex64_to_base32z("0" * 65)

    def test_too_long_is_value_error(self):
        """HexInputTooLong — подкласс ValueError."""
        with pytest.raises(ValueError):
            hex64_to_base32z("f" * 128)


# =============================================================================
# ТЕСТЫ: hex_to_base32z (параметризованная ёмкость)
# =============================================================================


class TestHexToBase32z:
    """Настраиваемые ограничения."""

    def test_defaults_match_hex64(self):
        """Значения по умолчанию совпадают с hex64_to_base32z."""
        assert HEX64_MAX_CHARS == 64
        assert hex_to_base32z(SAMPLE_KEY) == hex64_to_base32z(SAMPLE_KEY)

    def test_larger_bound(self):
        """128 hex символов (64 байта) при capacity=103."""
        encoded = hex_to_base32z("0" * 128, max_hex_chars=128, capacity=103)
        assert encoded == "y" * 103

    def test_capacity_exceeded_returns_empty(self, caplog):
        """Переполнение ёмкости → пустая строка и WARNING."""
        with caplog.at_level(logging.WARNING, logger="src.core.encoding.hex_adapter"):
            assert hex_to_base32z("0" * 128, max_hex_chars=128, capacity=64) == ""
        assert "exceeds capacity 64" in caplog.text

    def test_capacity_exceeded_small_buffer(self):
        """64-символьный ключ в буфер на 51 символ не помещается."""
        assert hex_to_base32z(SAMPLE_KEY, capacity=51) == ""
        assert hex_to_base32z(SAMPLE_KEY, capacity=52) == hex64_to_base32z(SAMPLE_KEY)

    def test_custom_max_chars(self):
        """Пользовательский предел длины."""
        with pytest.raises(HexInputTooLong) as exc:
            hex_to_base32z("abcdef", max_hex_chars=4)
        assert exc.value.length == 6
        assert exc.value.max_chars == 4

    def test_invalid_max_chars(self):
        """max_hex_chars < 1 → ValueError"""
        with pytest.raises(ValueError, match="max_hex_chars must be positive"):
            hex_to_base32z("ab", max_hex_chars=0)

    def test_invalid_capacity(self):
        """capacity < 1 → ValueError"""
        with pytest.raises(ValueError, match="capacity must be positive"):
            hex_to_base32z("ab", capacity=0)
