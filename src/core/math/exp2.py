"""
Deterministic Exp2 — Bit-Reproducible Base-2 Exponential

Модуль вычисляет 2^x так, что один и тот же x даёт один и тот же битовый
паттерн на любой платформе с IEEE-754 double. Результат используется
в расчётах, по которым независимые узлы должны совпадать побитово,
поэтому math.exp2/math.pow (зависящие от libm) не используются.

РАЗЛОЖЕНИЕ:
    x = n + m/256 + y/log(2)
        n — целое,
        m — целое, -128 <= m <= 128,
        |y| <= log(2)/512

    exp2(x) = 2^n * exp(m * log(2)/256) * exp(y)

    - Первый множитель — повторное удвоение (или деление пополам)
    - Второй множитель — элемент EXP2_TABLE
    - Третий множитель — exp(2z) = (1 + tanh(z)) / (1 - tanh(z)), z = y/2

РЯД ДЛЯ tanh(z):
    tanh(z) = z - 1/3 z^3 + 2/15 z^5 - 17/315 z^7 + ...

    |z| <= log(2)/1024 < 0.0007, относительный вклад члена z^7
    меньше 0.0007^6 < 2^-60 < 2^-53, поэтому ряд обрывается после z^5.

ТОЧНОСТЬ:
    Ошибка таблицы (<= 0.5 ULP), вычисление exp(2z) (<= 3 округления)
    и итоговое умножение дают не более 6 ULP от корректно округлённого 2^x
    в нормализованном диапазоне; на практике ошибка не превышает 1-2 ULP.

    Денормализованный результат: каждое деление пополам при n < 0 округляет
    заново (round-half-even на каждом шаге), поэтому результат может отличаться
    от ldexp. Суммарная ошибка шагов меньше 1 ULP результата; при x <= -1030
    (сдвиг не меньше 8 бит) результат не дальше 1 ULP от корректно
    округлённого 2^x.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Литералы EXP2_TABLE и коэффициенты tanh не пересчитываются
2. exp2(k) для целого k точно равен 2^k (m = 0, z = 0)
3. x > 1024 → +inf, x < -1075 → 0.0
4. NaN → NaN
"""

import math
from typing import Final

from src.core.domain.exp2_decomposition import Exp2Decomposition
from src.core.math.exp2_table import EXP2_TABLE, EXP2_TABLE_OFFSET
from src.core.math.float_format import DBL_MANT_DIG, DBL_MAX_EXP, DBL_MIN_EXP
from src.core.math.rounding import round_half_away

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Наилучшее double-приближение log(2)/256
LOG2_BY_256: Final[float] = 0.00270760617406228636491106297444600221904

# Коэффициенты ряда tanh(z) (z, z^3, z^5)
TANH_COEFF_1: Final[float] = 1.0
TANH_COEFF_3: Final[float] = -0.333333333333333333333333333333333333334
TANH_COEFF_5: Final[float] = 0.133333333333333333333333333333333333334

# x > DBL_MAX_EXP → 2^x > 2^DBL_MAX_EXP, переполнение в +inf
EXP2_OVERFLOW_THRESHOLD: Final[float] = float(DBL_MAX_EXP)

# x < DBL_MIN_EXP - 1 - DBL_MANT_DIG → 2^x меньше половины минимального
# денормализованного числа, результат 0.0
EXP2_UNDERFLOW_THRESHOLD: Final[float] = float(DBL_MIN_EXP - 1 - DBL_MANT_DIG)


# =============================================================================
# RANGE REDUCTION
# =============================================================================


def _reduce(x: float) -> tuple[float, int, int, float]:
    nm = round_half_away(x * 256.0)  # = 256 * n + m
    z = (x * 256.0 - nm) * (LOG2_BY_256 * 0.5)
    n = int(round_half_away(nm * (1.0 / 256.0)))
    m = int(nm) - 256 * n
    return nm, n, m, z


def _exp_2z(z: float) -> float:
    z2 = z * z
    tanh_z = ((TANH_COEFF_5 * z2 + TANH_COEFF_3) * z2 + TANH_COEFF_1) * z
    return (1.0 + tanh_z) / (1.0 - tanh_z)


def decompose_exp2(x: float) -> Exp2Decomposition:
    """
    Разложение x на (n, m, z) так, как его выполняет exp2.

    Args:
        x: Конечный аргумент в диапазоне [-1075, 1024]

    Returns:
        Exp2Decomposition

    Raises:
        ValueError: Если x — NaN/Inf или вне рабочего диапазона exp2

    Examples:
        >>> d = decompose_exp2(0.5)
        >>> (d.n, d.m, d.z)
        (1, -128, 0.0)
    """
    if not math.isfinite(x):
        raise ValueError(f"x must be finite, got {x}")
    if x > EXP2_OVERFLOW_THRESHOLD or x < EXP2_UNDERFLOW_THRESHOLD:
        raise ValueError(
            f"x must be in [{EXP2_UNDERFLOW_THRESHOLD}, {EXP2_OVERFLOW_THRESHOLD}], got {x}"
        )

    nm, n, m, z = _reduce(x)
    return Exp2Decomposition(x=x, nm=nm, n=n, m=m, z=z)


# =============================================================================
# EXP2
# =============================================================================


def exp2(x: float) -> float:
    """
    Детерминированное 2^x.

    Args:
        x: Любое double значение

    Returns:
        2^x; +inf при x > 1024; 0.0 при x < -1075; NaN при NaN

    Examples:
        >>> exp2(10.0)
        1024.0
        >>> exp2(-1.0)
        0.5
        >>> exp2(1100.0)
        inf
    """
    if math.isnan(x):
        return x

    if x > EXP2_OVERFLOW_THRESHOLD:
        return math.inf

    if x < EXP2_UNDERFLOW_THRESHOLD:
        return 0.0

    _, n, m, z = _reduce(x)

    result = EXP2_TABLE[EXP2_TABLE_OFFSET + m] * _exp_2z(z)

    # Масштаб 2^n: повторное умножение вместо ldexp
    if n > 0:
        for _ in range(n):
            result *= 2.0
    else:
        for _ in range(-n):
            result *= 0.5

    return result
