"""
Тесты для z-base-32 Encoder

Проверяет:
1. Алфавит и длину результата
2. Упаковку бит (MSB first, дополнение нулями)
3. Отказ при превышении ёмкости (без усечения)
4. Валидацию параметров
"""

import base64

import pytest

from src.core.encoding.base32z import (
    BASE32Z_ALPHABET,
    BASE32Z_DEFAULT_CAPACITY,
    Base32zCapacityExceeded,
    encode_base32z,
    encode_base32z_strict,
    encoded_length,
)

_RFC4648_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
_TO_ZBASE32 = str.maketrans(_RFC4648_ALPHABET, BASE32Z_ALPHABET)


def _via_rfc4648(data: bytes) -> str:
    """Та же упаковка бит через base64.b32encode с заменой алфавита."""
    return base64.b32encode(data).decode("ascii").rstrip("=").translate(_TO_ZBASE32)


# =============================================================================
# ТЕСТЫ: Алфавит и длина
# =============================================================================


class TestAlphabet:
    """Алфавит z-base-32."""

    def test_alphabet_shape(self):
        """32 уникальных символа."""
        assert len(BASE32Z_ALPHABET) == 32
        assert len(set(BASE32Z_ALPHABET)) == 32

    def test_alphabet_order(self):
        """Порядок символов z-base-32."""
        assert BASE32Z_ALPHABET == "ybndrfg8ejkmcpqxot1uwisza345h769"

    @pytest.mark.parametrize("byte_count, length", [(1, 2), (2, 4), (5, 8), (20, 32), (32, 52)])
    def test_encoded_length(self, byte_count, length):
        """ceil(8n/5) символов."""
        assert encoded_length(byte_count) == length
        assert len(encode_base32z(bytes(byte_count))) == length

    def test_encoded_length_rejects_negative(self):
        """Отрицательное количество байт → ValueError"""
        with pytest.raises(ValueError, match="non-negative"):
            encoded_length(-1)


# =============================================================================
# ТЕСТЫ: Кодирование
# =============================================================================


class TestEncoding:
    """Упаковка бит."""

    @pytest.mark.parametrize(
        "data, expected",
        [
            (b"\x00", "yy"),
            (b"\xff", "9h"),
            (b"\x80", "oy"),
            (b"\x07", "yh"),
            (b"\x00" * 32, "y" * 52),
            (b"\xff" * 32, "9" * 51 + "o"),
        ],
    )
    def test_known_outputs(self, data, expected):
        """Известные результаты."""
        assert encode_base32z(data) == expected

    def test_each_symbol_reachable(self):
        """Каждый 5-битный индекс отображается в свой символ."""
        for index, symbol in enumerate(BASE32Z_ALPHABET):
            # 5 бит индекса в старших разрядах байта, 3 младших бита — нули
            assert encode_base32z(bytes([index << 3]))[0] == symbol

    def test_matches_rfc4648_bit_packing(self):
        """Упаковка бит совпадает с RFC 4648 base32 (отличается только алфавит)."""
        samples = [
            bytes(range(32)),
            bytes(range(255, 223, -1)),
            b"hello world",
            bytes.fromhex("deadbeef"),
            b"\x01\x02\x03",
        ]
        for data in samples:
            assert encode_base32z(data) == _via_rfc4648(data)

    def test_accepts_bytearray(self):
        """bytearray кодируется так же, как bytes."""
        assert encode_base32z(bytearray(b"\xab\xcd")) == encode_base32z(b"\xab\xcd")

    def test_deterministic(self):
        """Повторные вызовы дают одинаковый результат."""
        data = bytes(range(7, 39))
        assert encode_base32z(data) == encode_base32z(data)

    def test_output_uses_alphabet_only(self):
        """Результат состоит только из символов алфавита."""
        encoded = encode_base32z(bytes(range(0, 256, 9)))
        assert set(encoded) <= set(BASE32Z_ALPHABET)


# =============================================================================
# ТЕСТЫ: Ёмкость
# =============================================================================


class TestCapacity:
    """Отказ при превышении ёмкости выходного буфера."""

    def test_default_capacity(self):
        """Ёмкость по умолчанию — 64 символа."""
        assert BASE32Z_DEFAULT_CAPACITY == 64

    def test_exact_fit(self):
        """40 байт → ровно 64 символа, помещается."""
        encoded = encode_base32z(bytes(40))
        assert encoded == "y" * 64

    def test_one_byte_over(self):
        """41 байт → 66 символов, отказ."""
        assert encode_base32z(bytes(41)) is None

    def test_no_truncation(self):
        """При отказе не возвращается усечённый результат."""
        assert encode_base32z(bytes(64)) is None
        assert encode_base32z(b"\xff" * 4, capacity=6) is None

    def test_custom_capacity(self):
        """Пользовательская ёмкость."""
        assert encode_base32z(b"\xff\xff", capacity=4) == "999o"
        assert encode_base32z(b"\xff\xff", capacity=3) is None

    def test_strict_raises(self):
        """encode_base32z_strict поднимает Base32zCapacityExceeded."""
        with pytest.raises(Base32zCapacityExceeded, match="needs 66 chars, capacity is 64") as exc:
            encode_base32z_strict(bytes(41))
        assert exc.value.required == 66
        assert exc.value.capacity == 64

    def test_strict_success(self):
        """encode_base32z_strict без переполнения совпадает с encode_base32z."""
        assert encode_base32z_strict(b"\x00") == "yy"


# =============================================================================
# ТЕСТЫ: Валидация
# =============================================================================


class TestValidation:
    """Предусловия."""

    def test_empty_input_rejected(self):
        """Пустой вход → ValueError"""
        with pytest.raises(ValueError, match="non-empty"):
            encode_base32z(b"")

    @pytest.mark.parametrize("capacity", [0, -5])
    def test_invalid_capacity(self, capacity):
        """capacity < 1 → ValueError"""
        with pytest.raises(ValueError, match="capacity must be positive"):
            encode_base32z(b"\x00", capacity=capacity)
