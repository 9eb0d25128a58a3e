"""
Dispatch — FilterFunction → FilterPrimitive

Точка входа для pipeline: по типу аргументов выбирает converter и
возвращает ровно один primitive на функцию. Порядок списка сохраняется,
цепочку primitives собирает вызывающая сторона.
"""

import logging
from typing import Callable, Iterable, Union

from src.core.domain.context import ConversionContext, DocumentNode
from src.core.domain.primitives import (
    ColorMatrix,
    ComponentTransfer,
    DropShadow,
    GaussianBlur,
)
from src.core.math.numerical_safeguards import is_valid_float
from src.filter_functions import converter
from src.filter_functions.functions import (
    Blur,
    Brightness,
    Contrast,
    DropShadowFunction,
    Grayscale,
    HueRotate,
    Invert,
    Opacity,
    Saturate,
    Sepia,
)

logger = logging.getLogger(__name__)

Primitive = Union[ColorMatrix, ComponentTransfer, GaussianBlur, DropShadow]


class UnsupportedFilterFunction(Exception):
    """Объект не является ни одной из известных filter functions."""


# Функции, которым нужен только amount
_AMOUNT_CONVERTERS: dict[type, Callable[[float], Primitive]] = {
    Grayscale: converter.convert_grayscale,
    Sepia: converter.convert_sepia,
    Saturate: converter.convert_saturate,
    Invert: converter.convert_invert,
    Opacity: converter.convert_opacity,
    Brightness: converter.convert_brightness,
    Contrast: converter.convert_contrast,
}


def convert_filter_function(
    function,
    node: DocumentNode,
    context: ConversionContext,
) -> Primitive:
    """
    Конверсия одной filter function.

    Args:
        function: Одна из моделей FilterFunction
        node: Узел документа, к которому применён filter
        context: Контекст разрешения длин и inherited цвета

    Returns:
        Один FilterPrimitive

    Raises:
        UnsupportedFilterFunction: Если function не является FilterFunction
    """
    amount_converter = _AMOUNT_CONVERTERS.get(type(function))
    if amount_converter is not None:
        if not is_valid_float(function.amount):
            logger.debug("%s() got non-finite amount %r", function.name, function.amount)
        primitive = amount_converter(function.amount)
    elif isinstance(function, HueRotate):
        primitive = converter.convert_hue_rotate(function.angle)
    elif isinstance(function, Blur):
        primitive = converter.convert_blur(node, function.std_dev, context)
    elif isinstance(function, DropShadowFunction):
        primitive = converter.convert_drop_shadow(
            node,
            function.color,
            function.dx,
            function.dy,
            function.std_dev,
            context,
        )
    else:
        raise UnsupportedFilterFunction(
            f"Unsupported filter function: {type(function).__name__}"
        )

    logger.debug("%s() -> %s", function.name, primitive.type)
    return primitive


def convert_filter_functions(
    functions: Iterable,
    node: DocumentNode,
    context: ConversionContext,
) -> list[Primitive]:
    """Конверсия списка filter functions с сохранением порядка."""
    return [convert_filter_function(f, node, context) for f in functions]
