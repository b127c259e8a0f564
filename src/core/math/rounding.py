"""
Deterministic Rounding — Round Half Away From Zero

Модуль реализует округление до ближайшего целого с разрешением ничьих
от нуля (0.5 → 1.0, -0.5 → -1.0, 2.5 → 3.0) без обращения к round/floor/rint
стандартной библиотеки, поведение которых может зависеть от платформы
и текущего floating-point окружения.

АЛГОРИТМ:
    Для 0.5 <= |x| < 2^52 к модулю прибавляется 0.5, затем значение
    прибавляется и вычитается 2^52: формат double сам отбрасывает дробную часть.
    Если при этом произошло округление вверх (z > y), результат корректируется
    на 1.0 в сторону нуля.

    Для |x| >= 2^52 любое double уже целое и возвращается без изменений.
    Для |x| < 0.5 результат — ноль со знаком x.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда целочисленный (для конечных x)
2. Знак нуля сохраняется: round_half_away(-0.4) и round_half_away(-0.0) дают -0.0
3. NaN и ±inf возвращаются без изменений
4. Каждая промежуточная операция — отдельная double-операция CPython,
   поэтому защита от excess precision (volatile в C) не требуется
"""

from src.core.math.float_format import MINUS_ZERO, TWO_MANT_DIG


def round_half_away(x: float) -> float:
    """
    Округление до ближайшего целого, ничьи — от нуля.

    Args:
        x: Любое double значение

    Returns:
        Ближайшее целое как float

    Examples:
        >>> round_half_away(0.5)
        1.0
        >>> round_half_away(-2.5)
        -3.0
        >>> round_half_away(2.4999999999999996)
        2.0
        >>> round_half_away(-0.4)
        -0.0
    """
    z = x

    if z > 0.0:
        # Защита от ошибки округления для x = 0.5 - 2^-54
        if z < 0.5:
            z = 0.0
        elif z < TWO_MANT_DIG:
            z += 0.5
            y = z
            # Округление к целому силами самого формата
            z += TWO_MANT_DIG
            z -= TWO_MANT_DIG
            # Принудительно вниз
            if z > y:
                z -= 1.0
    elif z < 0.0:
        if z > -0.5:
            z = MINUS_ZERO
        elif z > -TWO_MANT_DIG:
            z -= 0.5
            y = z
            z -= TWO_MANT_DIG
            z += TWO_MANT_DIG
            # Принудительно вверх
            if z < y:
                z += 1.0

    return z
