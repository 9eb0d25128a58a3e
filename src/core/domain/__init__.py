"""
Domain models and value objects.

Contains filter primitives, typed lengths/angles, colors and the read-only
conversion context consumed by the filter function converter.
"""

from src.core.domain.color import Color, ColorChannel
from src.core.domain.context import (
    DEFAULT_DPI,
    DEFAULT_FONT_SIZE,
    ColorLookup,
    ConversionContext,
    DocumentNode,
    LengthResolver,
    ViewportConfig,
    ViewportContext,
)
from src.core.domain.primitives import (
    COLOR_MATRIX_SIZE,
    ColorMatrix,
    ColorMatrixKind,
    ComponentTransfer,
    DropShadow,
    FilterInput,
    FilterPrimitive,
    GaussianBlur,
    HueRotateKind,
    IdentityTransfer,
    LinearTransfer,
    MatrixKind,
    Opacity,
    PositiveNumber,
    SaturateKind,
    TableTransfer,
    TransferFunction,
    primitive_from_dict,
)
from src.core.domain.units import (
    Angle,
    AngleUnit,
    AttributeId,
    Length,
    LengthUnit,
    ReferenceAxis,
    Units,
)

__all__ = [
    # Color
    "Color",
    "ColorChannel",
    # Units
    "Angle",
    "AngleUnit",
    "AttributeId",
    "Length",
    "LengthUnit",
    "ReferenceAxis",
    "Units",
    # Context
    "DEFAULT_DPI",
    "DEFAULT_FONT_SIZE",
    "ColorLookup",
    "ConversionContext",
    "DocumentNode",
    "LengthResolver",
    "ViewportConfig",
    "ViewportContext",
    # Primitives
    "COLOR_MATRIX_SIZE",
    "ColorMatrix",
    "ColorMatrixKind",
    "ComponentTransfer",
    "DropShadow",
    "FilterInput",
    "FilterPrimitive",
    "GaussianBlur",
    "HueRotateKind",
    "IdentityTransfer",
    "LinearTransfer",
    "MatrixKind",
    "Opacity",
    "PositiveNumber",
    "SaturateKind",
    "TableTransfer",
    "TransferFunction",
    "primitive_from_dict",
]
