"""Filter functions — конверсия CSS filter functions в filter primitives.

Функции:
- grayscale, sepia, saturate, hue-rotate → feColorMatrix
- invert, opacity, brightness, contrast → feComponentTransfer
- blur → feGaussianBlur
- drop-shadow → feDropShadow
"""

from .converter import (
    convert_blur,
    convert_brightness,
    convert_contrast,
    convert_drop_shadow,
    convert_grayscale,
    convert_hue_rotate,
    convert_invert,
    convert_opacity,
    convert_saturate,
    convert_sepia,
    resolve_shadow_color,
)
from .dispatch import (
    UnsupportedFilterFunction,
    convert_filter_function,
    convert_filter_functions,
)
from .functions import (
    Blur,
    Brightness,
    Contrast,
    DropShadowFunction,
    FilterFunction,
    Grayscale,
    HueRotate,
    Invert,
    Opacity,
    Saturate,
    Sepia,
)

__all__ = [
    "convert_blur",
    "convert_brightness",
    "convert_contrast",
    "convert_drop_shadow",
    "convert_grayscale",
    "convert_hue_rotate",
    "convert_invert",
    "convert_opacity",
    "convert_saturate",
    "convert_sepia",
    "resolve_shadow_color",
    "UnsupportedFilterFunction",
    "convert_filter_function",
    "convert_filter_functions",
    "Blur",
    "Brightness",
    "Contrast",
    "DropShadowFunction",
    "FilterFunction",
    "Grayscale",
    "HueRotate",
    "Invert",
    "Opacity",
    "Saturate",
    "Sepia",
]
