"""Vector Check — проверка ядра по эталонным векторам детерминизма.

Загрузка документа векторов (JSON Schema + Pydantic), прогон каждого вектора
через round_half_away / exp2 / hex64_to_base32z и побитовое сравнение.
Любое расхождение означает, что платформа не воспроизводит эталон.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from src.core.contracts import validate_vector_suite
from src.core.domain.vector_suite import VectorSuite
from src.core.encoding import hex64_to_base32z
from src.core.math import exp2, float_to_hex_bits, hex_bits_to_float, round_half_away

logger = logging.getLogger(__name__)

# Документ, поставляемый вместе с библиотекой
REFERENCE_VECTORS_PATH = Path(__file__).parent / "vectors" / "reference_vectors.json"


class VectorKind(str, Enum):
    """Проверяемая операция."""
    ROUND = "round"
    EXP2 = "exp2"
    BASE32Z = "base32z"


@dataclass(frozen=True)
class VectorMismatch:
    """Расхождение результата с эталоном."""

    kind: VectorKind
    index: int
    argument: str
    expected: str
    actual: str


@dataclass(frozen=True)
class VerificationReport:
    """Результат прогона набора векторов."""

    checked: int
    mismatches: tuple[VectorMismatch, ...]

    @property
    def passed(self) -> bool:
        return not self.mismatches


def load_vector_suite(path: Optional[Path] = None) -> VectorSuite:
    """Чтение документа векторов с валидацией по схеме.

    Args:
        path: Путь к JSON документу (default: эталонный документ)

    Raises:
        FileNotFoundError: Если файл не найден
        jsonschema.ValidationError: Если документ не соответствует схеме
    """
    path = path or REFERENCE_VECTORS_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    validate_vector_suite(data)
    return VectorSuite.model_validate(data)


def verify_vector_suite(suite: VectorSuite) -> VerificationReport:
    """Прогон всех векторов набора.

    round/exp2 сравниваются по битовому паттерну, base32z — по строке.
    """
    mismatches: list[VectorMismatch] = []

    for kind, vectors, fn in (
        (VectorKind.ROUND, suite.round, round_half_away),
        (VectorKind.EXP2, suite.exp2, exp2),
    ):
        for index, vector in enumerate(vectors):
            actual = float_to_hex_bits(fn(hex_bits_to_float(vector.x_bits)))
            if actual != vector.expected_bits:
                mismatches.append(
                    VectorMismatch(kind, index, vector.x_bits, vector.expected_bits, actual)
                )

    for index, vector in enumerate(suite.base32z):
        actual = hex64_to_base32z(vector.hex)
        if actual != vector.expected:
            mismatches.append(
                VectorMismatch(VectorKind.BASE32Z, index, vector.hex, vector.expected, actual)
            )

    for mismatch in mismatches:
        logger.warning(
            "%s vector #%d mismatch: arg=%s expected=%s actual=%s",
            mismatch.kind.value,
            mismatch.index,
            mismatch.argument,
            mismatch.expected,
            mismatch.actual,
        )
    logger.info("checked %d vectors, %d mismatches", suite.total, len(mismatches))

    return VerificationReport(checked=suite.total, mismatches=tuple(mismatches))


def verify_reference_vectors() -> VerificationReport:
    """Прогон эталонного документа, поставляемого с библиотекой."""
    return verify_vector_suite(load_vector_suite())
