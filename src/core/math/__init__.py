"""
Core math modules

Числовые формулы filter functions и односторонние clamp-примитивы.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    clamp_max,
    clamp_min,
    is_close,
    is_valid_float,
)

# Color Matrices
from src.core.math.color_matrices import (
    IDENTITY_MATRIX,
    LUMINANCE_B,
    LUMINANCE_G,
    LUMINANCE_MATRIX_3X3,
    LUMINANCE_R,
    SEPIA_MATRIX_3X3,
    expand_color_matrix,
    grayscale_matrix,
    hue_rotate_matrix,
    interpolate_rgb_matrix,
    saturate_matrix,
    sepia_matrix,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Clamp
    "clamp_max",
    "clamp_min",
    # Numerical Safeguards — Comparisons
    "is_close",
    "is_valid_float",
    # Color Matrices — Constants
    "IDENTITY_MATRIX",
    "LUMINANCE_B",
    "LUMINANCE_G",
    "LUMINANCE_MATRIX_3X3",
    "LUMINANCE_R",
    "SEPIA_MATRIX_3X3",
    # Color Matrices — Functions
    "expand_color_matrix",
    "grayscale_matrix",
    "hue_rotate_matrix",
    "interpolate_rgb_matrix",
    "saturate_matrix",
    "sepia_matrix",
]
