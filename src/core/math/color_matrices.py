"""
Color Matrices — коэффициенты feColorMatrix для filter functions

Модуль содержит точные числовые формулы, из которых строятся color matrix
primitives:
- grayscale / sepia: интерполяция между identity и целевой 3x3 матрицей
- saturate / hueRotate: развёртка специальных видов матрицы в 20 коэффициентов
  (используется renderer-стороной и тестами; converter эмитит сами виды)

ФОРМАТ МАТРИЦЫ:
    4 строки x 5 столбцов, row-major, применяется к вектору (R, G, B, A, 1).
    Строка alpha у всех матриц модуля равна (0, 0, 0, 1, 0).

ФОРМУЛЫ:
    interpolated[i][j] = target[i][j] + (identity[i][j] - target[i][j]) * (1 - amount)

    grayscale target: каждая строка = (0.2126, 0.7152, 0.0722)  (ITU-R BT.709)
    sepia target:     (0.393, 0.769, 0.189)
                      (0.349, 0.686, 0.168)
                      (0.272, 0.534, 0.131)

    saturate(s) и hueRotate(θ) используют округлённые веса (0.213, 0.715, 0.072).
"""

import math
from typing import Final

from src.core.domain.primitives import (
    ColorMatrixKind,
    HueRotateKind,
    MatrixKind,
    SaturateKind,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Веса яркости ITU-R BT.709 (grayscale)
LUMINANCE_R: Final[float] = 0.2126
LUMINANCE_G: Final[float] = 0.7152
LUMINANCE_B: Final[float] = 0.0722

LUMINANCE_MATRIX_3X3: Final[tuple[tuple[float, float, float], ...]] = (
    (LUMINANCE_R, LUMINANCE_G, LUMINANCE_B),
    (LUMINANCE_R, LUMINANCE_G, LUMINANCE_B),
    (LUMINANCE_R, LUMINANCE_G, LUMINANCE_B),
)

SEPIA_MATRIX_3X3: Final[tuple[tuple[float, float, float], ...]] = (
    (0.393, 0.769, 0.189),
    (0.349, 0.686, 0.168),
    (0.272, 0.534, 0.131),
)

# Округлённые веса для saturate / hueRotate
SVG_LUMINANCE_R: Final[float] = 0.213
SVG_LUMINANCE_G: Final[float] = 0.715
SVG_LUMINANCE_B: Final[float] = 0.072

ALPHA_ROW: Final[tuple[float, ...]] = (0.0, 0.0, 0.0, 1.0, 0.0)

IDENTITY_MATRIX: Final[tuple[float, ...]] = (
    1.0, 0.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 0.0, 1.0, 0.0,
)


# =============================================================================
# СБОРКА МАТРИЦ
# =============================================================================


def _rgb_rows_to_matrix(rows: list[tuple[float, float, float]]) -> tuple[float, ...]:
    """3 RGB строки → 20 коэффициентов (offset = 0, alpha строка без изменений)."""
    values: list[float] = []
    for r, g, b in rows:
        values.extend((r, g, b, 0.0, 0.0))
    values.extend(ALPHA_ROW)
    return tuple(values)


def interpolate_rgb_matrix(
    target: tuple[tuple[float, float, float], ...],
    amount: float,
) -> tuple[float, ...]:
    """
    Линейная интерполяция между identity (amount=0) и target (amount=1).

    amount не ограничивается: clamp выполняет вызывающий converter.

    Args:
        target: Целевая 3x3 матрица (строки R, G, B)
        amount: Доля эффекта

    Returns:
        20 коэффициентов 4x5 матрицы
    """
    t = 1.0 - amount
    rows = []
    for i, target_row in enumerate(target):
        row = []
        for j, coefficient in enumerate(target_row):
            identity = 1.0 if i == j else 0.0
            row.append(coefficient + (identity - coefficient) * t)
        rows.append(tuple(row))
    return _rgb_rows_to_matrix(rows)


def grayscale_matrix(amount: float) -> tuple[float, ...]:
    """Матрица grayscale(amount) без clamp."""
    return interpolate_rgb_matrix(LUMINANCE_MATRIX_3X3, amount)


def sepia_matrix(amount: float) -> tuple[float, ...]:
    """Матрица sepia(amount) без clamp."""
    return interpolate_rgb_matrix(SEPIA_MATRIX_3X3, amount)


def saturate_matrix(saturation: float) -> tuple[float, ...]:
    """
    Развёртка feColorMatrix type="saturate".

    saturate(1) = identity, saturate(0) = полная десатурация.
    """
    s = saturation
    r, g, b = SVG_LUMINANCE_R, SVG_LUMINANCE_G, SVG_LUMINANCE_B
    return _rgb_rows_to_matrix([
        (r + (1.0 - r) * s, g - g * s, b - b * s),
        (r - r * s, g + (1.0 - g) * s, b - b * s),
        (r - r * s, g - g * s, b + (1.0 - b) * s),
    ])


def hue_rotate_matrix(degrees: float) -> tuple[float, ...]:
    """
    Развёртка feColorMatrix type="hueRotate".

    Угол не нормализуется: cos/sin периодичны, 360° и 0° дают одну матрицу.
    """
    rad = math.radians(degrees)
    c = math.cos(rad)
    s = math.sin(rad)
    return _rgb_rows_to_matrix([
        (
            0.213 + c * 0.787 - s * 0.213,
            0.715 - c * 0.715 - s * 0.715,
            0.072 - c * 0.072 + s * 0.928,
        ),
        (
            0.213 - c * 0.213 + s * 0.143,
            0.715 + c * 0.285 + s * 0.140,
            0.072 - c * 0.072 - s * 0.283,
        ),
        (
            0.213 - c * 0.213 - s * 0.787,
            0.715 - c * 0.715 + s * 0.715,
            0.072 + c * 0.928 + s * 0.072,
        ),
    ])


def expand_color_matrix(kind: ColorMatrixKind) -> tuple[float, ...]:
    """
    Любой вид color matrix → 20 коэффициентов.

    Raises:
        TypeError: Если kind не является ColorMatrixKind
    """
    if isinstance(kind, MatrixKind):
        return tuple(kind.values)
    if isinstance(kind, SaturateKind):
        return saturate_matrix(kind.value)
    if isinstance(kind, HueRotateKind):
        return hue_rotate_matrix(kind.degrees)
    raise TypeError(f"Unknown color matrix kind: {type(kind).__name__}")
