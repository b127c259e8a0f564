"""Verification — проверка воспроизводимости ядра по эталонным векторам.

- Загрузка и валидация документа векторов
- Побитовое сравнение результатов round_half_away / exp2 / hex64_to_base32z
"""

from .vector_check import (
    REFERENCE_VECTORS_PATH,
    VectorKind,
    VectorMismatch,
    VerificationReport,
    load_vector_suite,
    verify_reference_vectors,
    verify_vector_suite,
)

__all__ = [
    "REFERENCE_VECTORS_PATH",
    "VectorKind",
    "VectorMismatch",
    "VerificationReport",
    "load_vector_suite",
    "verify_reference_vectors",
    "verify_vector_suite",
]
