"""
Units — длины, углы и системы координат для filter functions

Типизированные аргументы, которые tokenizer передаёт в converter:
- Length: число + единица (px, em, %, ...)
- Angle: число + единица (deg, grad, rad, turn)
- Units: система координат для разрешения длины
- AttributeId: атрибут, от оси которого зависит разрешение процентов

Разрешение Length → user space выполняет внешний контекст
(см. src.core.domain.context). Этот модуль только описывает значения.
"""

import math
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DEGREES_PER_TURN: Final[float] = 360.0
DEGREES_PER_GRAD: Final[float] = 180.0 / 200.0


# =============================================================================
# ENUMS
# =============================================================================


class LengthUnit(str, Enum):
    """Единица длины."""

    NONE = ""
    PX = "px"
    EM = "em"
    EX = "ex"
    IN = "in"
    CM = "cm"
    MM = "mm"
    PT = "pt"
    PC = "pc"
    PERCENT = "%"


class AngleUnit(str, Enum):
    """Единица угла."""

    DEGREES = "deg"
    GRADIANS = "grad"
    RADIANS = "rad"
    TURNS = "turn"


class Units(str, Enum):
    """Система координат, в которой разрешается длина."""

    USER_SPACE_ON_USE = "userSpaceOnUse"
    OBJECT_BOUNDING_BOX = "objectBoundingBox"


class ReferenceAxis(str, Enum):
    """Ось viewport, относительно которой считаются проценты."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"


class AttributeId(str, Enum):
    """
    Атрибуты документа, которые читает converter.

    dx/dy/stdDeviation — опорные атрибуты для разрешения длин,
    color/font-size — inherited значения из дерева.
    """

    X = "x"
    Y = "y"
    DX = "dx"
    DY = "dy"
    WIDTH = "width"
    HEIGHT = "height"
    STD_DEVIATION = "stdDeviation"
    COLOR = "color"
    FONT_SIZE = "font-size"

    @property
    def reference_axis(self) -> ReferenceAxis:
        if self in (AttributeId.X, AttributeId.DX, AttributeId.WIDTH):
            return ReferenceAxis.HORIZONTAL
        if self in (AttributeId.Y, AttributeId.DY, AttributeId.HEIGHT):
            return ReferenceAxis.VERTICAL
        return ReferenceAxis.DIAGONAL


# =============================================================================
# MODELS
# =============================================================================


class Length(BaseModel):
    """Длина в единицах документа (ещё не разрешённая в user space)."""

    number: float = Field(..., description="Числовое значение")
    unit: LengthUnit = Field(LengthUnit.NONE, description="Единица длины")

    model_config = {"frozen": True}

    @classmethod
    def zero(cls) -> "Length":
        return cls(number=0.0)


class Angle(BaseModel):
    """Угол hue-rotate."""

    number: float = Field(..., description="Числовое значение")
    unit: AngleUnit = Field(AngleUnit.DEGREES, description="Единица угла")

    model_config = {"frozen": True}

    def to_degrees(self) -> float:
        """
        Конверсия в градусы без нормализации в [0, 360).

        Examples:
            >>> Angle(number=0.5, unit=AngleUnit.TURNS).to_degrees()
            180.0
            >>> Angle(number=-720.0).to_degrees()
            -720.0
        """
        if self.unit == AngleUnit.DEGREES:
            return self.number
        if self.unit == AngleUnit.GRADIANS:
            return self.number * DEGREES_PER_GRAD
        if self.unit == AngleUnit.RADIANS:
            return math.degrees(self.number)
        return self.number * DEGREES_PER_TURN
