"""
Exp2Decomposition — Разложение аргумента exp2

Immutable Pydantic модель, фиксирующая range reduction для exp2(x):

    x = n + m/256 + y/log(2),   y = 2z

    exp2(x) = 2^n * EXP2_TABLE[128 + m] * exp(2z)

Используется для диагностики и тестов: позволяет увидеть, какой элемент
таблицы и какой масштаб 2^n участвуют в вычислении.
"""

from pydantic import BaseModel, Field


# Граница остатка: |z| <= log(2)/1024 < 0.0007
Z_ABS_BOUND = 0.0007


class Exp2Decomposition(BaseModel):
    """
    Разложение x для детерминированного exp2.

    Immutable модель (frozen=True).
    """

    x: float = Field(..., description="Исходный аргумент")
    nm: float = Field(..., description="round(x * 256) = 256 * n + m")
    n: int = Field(..., ge=-1075, le=1024, description="Показатель масштаба 2^n")
    m: int = Field(..., ge=-128, le=128, description="Смещение индекса таблицы")
    z: float = Field(
        ...,
        ge=-Z_ABS_BOUND,
        le=Z_ABS_BOUND,
        description="Остаток (x*256 - nm) * log(2)/512",
    )

    model_config = {"frozen": True}

    @property
    def table_index(self) -> int:
        """Индекс в EXP2_TABLE."""
        return 128 + self.m
