"""
Numerical Safeguards — односторонние clamp и float-проверки

Модуль содержит примитивы, через которые проходят все amount/length значения
filter functions перед попаданием в filter primitive:
- Односторонние clamp (только сверху или только снизу)
- NaN/Inf проверки
- Epsilon-сравнения float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Направление clamp задаётся вызывающим кодом явно (clamp_max / clamp_min).
   Двусторонний clamp для filter functions не используется.
2. NaN в clamp ведёт себя как IEEE fmin/fmax: возвращается граница.
3. Все операции детерминированы и не имеют побочных эффектов.
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close (коэффициенты матриц около нуля)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Examples:
        >>> is_valid_float(1.0)
        True
        >>> is_valid_float(float("nan"))
        False
        >>> is_valid_float(float("inf"))
        False
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Использует и относительную, и абсолютную толерантность: коэффициенты
    матриц часто равны нулю, где относительная толерантность бесполезна.
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ОДНОСТОРОННИЕ CLAMP
# =============================================================================


def clamp_max(value: float, max_value: float) -> float:
    """
    Ограничение только сверху: min(value, max_value).

    Нижняя граница не применяется, отрицательные значения проходят как есть.
    NaN заменяется на max_value (семантика IEEE fmin).

    Args:
        value: Исходное значение
        max_value: Верхняя граница

    Returns:
        value если value <= max_value, иначе max_value

    Examples:
        >>> clamp_max(1.5, 1.0)
        1.0
        >>> clamp_max(-0.5, 1.0)
        -0.5
        >>> clamp_max(float("nan"), 1.0)
        1.0
    """
    if math.isnan(value):
        return max_value
    return min(value, max_value)


def clamp_min(value: float, min_value: float) -> float:
    """
    Ограничение только снизу: max(value, min_value).

    Верхняя граница не применяется. NaN заменяется на min_value
    (семантика IEEE fmax).

    Examples:
        >>> clamp_min(-2.0, 0.0)
        0.0
        >>> clamp_min(7.5, 0.0)
        7.5
        >>> clamp_min(float("nan"), 0.0)
        0.0
    """
    if math.isnan(value):
        return min_value
    return max(value, min_value)

