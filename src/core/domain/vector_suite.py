"""
VectorSuite — Эталонные векторы детерминизма

Immutable Pydantic модели документа эталонных векторов.
Полная совместимость с JSON Schema (src/core/contracts/schema/vector_suite.json).

Double значения хранятся как 16-символьные hex паттерны IEEE-754,
чтобы сравнение выполнялось побитово и не зависело от
десятичного форматирования.
"""

from pydantic import BaseModel, Field

HEX_BITS_PATTERN = "^[0-9a-f]{16}$"


# =============================================================================
# VECTORS
# =============================================================================


class RoundVector(BaseModel):
    """Вектор для round_half_away: x → expected (оба как битовые паттерны)."""

    x_bits: str = Field(..., pattern=HEX_BITS_PATTERN, description="Аргумент (IEEE-754 hex)")
    expected_bits: str = Field(
        ..., pattern=HEX_BITS_PATTERN, description="Ожидаемый результат (IEEE-754 hex)"
    )

    model_config = {"frozen": True}


class Exp2Vector(BaseModel):
    """Вектор для exp2: x → expected (оба как битовые паттерны)."""

    x_bits: str = Field(..., pattern=HEX_BITS_PATTERN, description="Аргумент (IEEE-754 hex)")
    expected_bits: str = Field(
        ..., pattern=HEX_BITS_PATTERN, description="Ожидаемый результат (IEEE-754 hex)"
    )

    model_config = {"frozen": True}


class Base32zVector(BaseModel):
    """Вектор для hex64_to_base32z."""

    hex: str = Field(..., max_length=64, description="Hex вход (до 64 символов)")
    expected: str = Field(
        ...,
        pattern="^[ybndrfg8ejkmcpqxot1uwisza345h769]*$",
        max_length=64,
        description="Ожидаемая z-base-32 строка",
    )

    model_config = {"frozen": True}


# =============================================================================
# SUITE
# =============================================================================


class VectorSuite(BaseModel):
    """
    Документ эталонных векторов.

    Immutable модель (frozen=True). Пустые секции допустимы.
    """

    schema_version: str = Field(..., pattern="^1$", description="Версия схемы документа")
    description: str = Field("", description="Произвольное описание набора")

    round: tuple[RoundVector, ...] = Field(default=(), description="Векторы round_half_away")
    exp2: tuple[Exp2Vector, ...] = Field(default=(), description="Векторы exp2")
    base32z: tuple[Base32zVector, ...] = Field(
        default=(), description="Векторы hex64_to_base32z"
    )

    model_config = {"frozen": True}

    @property
    def total(self) -> int:
        """Общее количество векторов."""
        return len(self.round) + len(self.exp2) + len(self.base32z)
