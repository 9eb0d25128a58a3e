"""
Filter Function Converter — filter functions → filter primitives

Каждая функция чистая: аргументы (+ read-only контекст для длин/цвета)
→ ровно один FilterPrimitive с input = SourceGraphic. Ошибок нет:
выход за диапазон нормализуется clamp, направление clamp своё у каждой функции.

CLAMP ПО ФУНКЦИЯМ:
    grayscale, sepia, invert, opacity  → amount <= 1   (только сверху)
    saturate                           → amount >= 0   (только снизу)
    hue-rotate, brightness, contrast   → без clamp
    blur, drop-shadow stdDeviation     → >= 0 после разрешения длины

Отрицательные amount у grayscale/sepia/invert/opacity проходят как есть:
нижнюю границу отсекает валидация синтаксиса выше по pipeline.
"""

import logging
from typing import Optional

from src.core.domain.color import Color
from src.core.domain.context import ColorLookup, ConversionContext, DocumentNode
from src.core.domain.primitives import (
    ColorMatrix,
    ComponentTransfer,
    DropShadow,
    FilterInput,
    GaussianBlur,
    HueRotateKind,
    IdentityTransfer,
    LinearTransfer,
    MatrixKind,
    SaturateKind,
    TableTransfer,
)
from src.core.domain.units import Angle, AttributeId, Length, Units
from src.core.math.color_matrices import grayscale_matrix, sepia_matrix
from src.core.math.numerical_safeguards import clamp_max, clamp_min

logger = logging.getLogger(__name__)

# =============================================================================
# COLOR MATRIX
# =============================================================================


def convert_grayscale(amount: float) -> ColorMatrix:
    amount = clamp_max(amount, 1.0)
    return ColorMatrix(
        input=FilterInput.SOURCE_GRAPHIC,
        kind=MatrixKind(values=grayscale_matrix(amount)),
    )


def convert_sepia(amount: float) -> ColorMatrix:
    amount = clamp_max(amount, 1.0)
    return ColorMatrix(
        input=FilterInput.SOURCE_GRAPHIC,
        kind=MatrixKind(values=sepia_matrix(amount)),
    )


def convert_saturate(amount: float) -> ColorMatrix:
    """Saturate эмитится видом SaturateKind, развёртку делает renderer."""
    amount = clamp_min(amount, 0.0)
    return ColorMatrix(
        input=FilterInput.SOURCE_GRAPHIC,
        kind=SaturateKind(value=amount),
    )


def convert_hue_rotate(angle: Angle) -> ColorMatrix:
    """Угол переводится в градусы, без нормализации в [0, 360)."""
    return ColorMatrix(
        input=FilterInput.SOURCE_GRAPHIC,
        kind=HueRotateKind(degrees=angle.to_degrees()),
    )


# =============================================================================
# COMPONENT TRANSFER
# =============================================================================


def convert_invert(amount: float) -> ComponentTransfer:
    amount = clamp_max(amount, 1.0)
    table = TableTransfer(values=(amount, 1.0 - amount))
    return ComponentTransfer(
        input=FilterInput.SOURCE_GRAPHIC,
        func_r=table,
        func_g=table,
        func_b=table,
        func_a=IdentityTransfer(),
    )


def convert_opacity(amount: float) -> ComponentTransfer:
    amount = clamp_max(amount, 1.0)
    return ComponentTransfer(
        input=FilterInput.SOURCE_GRAPHIC,
        func_r=IdentityTransfer(),
        func_g=IdentityTransfer(),
        func_b=IdentityTransfer(),
        func_a=TableTransfer(values=(0.0, amount)),
    )


def convert_brightness(amount: float) -> ComponentTransfer:
    linear = LinearTransfer(slope=amount, intercept=0.0)
    return ComponentTransfer(
        input=FilterInput.SOURCE_GRAPHIC,
        func_r=linear,
        func_g=linear,
        func_b=linear,
        func_a=IdentityTransfer(),
    )


def convert_contrast(amount: float) -> ComponentTransfer:
    linear = LinearTransfer(slope=amount, intercept=-(0.5 * amount) + 0.5)
    return ComponentTransfer(
        input=FilterInput.SOURCE_GRAPHIC,
        func_r=linear,
        func_g=linear,
        func_b=linear,
        func_a=IdentityTransfer(),
    )


# =============================================================================
# LENGTH-BEARING
# =============================================================================


def _resolve_std_dev(
    std_dev: Length,
    node: DocumentNode,
    context: ConversionContext,
) -> float:
    # stdDeviation всегда разрешается относительно оси dx
    value = context.convert_length(std_dev, node, AttributeId.DX, Units.USER_SPACE_ON_USE)
    return clamp_min(value, 0.0)


def convert_blur(
    node: DocumentNode,
    std_dev: Length,
    context: ConversionContext,
) -> GaussianBlur:
    std_dev_value = _resolve_std_dev(std_dev, node, context)
    return GaussianBlur(
        input=FilterInput.SOURCE_GRAPHIC,
        std_dev_x=std_dev_value,
        std_dev_y=std_dev_value,
    )


def resolve_shadow_color(
    node: DocumentNode,
    color: Optional[Color],
    context: ColorLookup,
) -> Color:
    """
    Цвет тени: явный → inherited `color` от узла вверх → непрозрачный чёрный.
    """
    if color is not None:
        return color
    inherited = context.find_inherited_color(node)
    if inherited is not None:
        logger.debug("drop-shadow color inherited from <%s>", node.tag)
        return inherited
    logger.debug("drop-shadow color defaults to black for <%s>", node.tag)
    return Color.black()


def convert_drop_shadow(
    node: DocumentNode,
    color: Optional[Color],
    dx: Length,
    dy: Length,
    std_dev: Length,
    context: ConversionContext,
) -> DropShadow:
    """
    drop-shadow([color] dx dy [stdDeviation]).

    dx, dy и stdDeviation разрешаются независимо, каждый по своей оси.
    opacity остаётся 1.0, pipeline может переопределить её позже.
    """
    std_dev_value = _resolve_std_dev(std_dev, node, context)
    return DropShadow(
        input=FilterInput.SOURCE_GRAPHIC,
        dx=context.convert_length(dx, node, AttributeId.DX, Units.USER_SPACE_ON_USE),
        dy=context.convert_length(dy, node, AttributeId.DY, Units.USER_SPACE_ON_USE),
        std_dev_x=std_dev_value,
        std_dev_y=std_dev_value,
        color=resolve_shadow_color(node, color, context),
    )
