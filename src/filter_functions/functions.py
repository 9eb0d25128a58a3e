"""
FilterFunction — типизированные аргументы filter functions

Tokenizer передаёт каждую функцию из `filter:` значения как одну из
моделей ниже. Значения по умолчанию совпадают с пропущенными аргументами
CSS синтаксиса (grayscale() == grayscale(1), blur() == blur(0), ...).

Immutable Pydantic модели, discriminated union по полю `name`.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from src.core.domain.color import Color
from src.core.domain.units import Angle, Length


class Grayscale(BaseModel):
    name: Literal["grayscale"] = "grayscale"
    amount: float = 1.0

    model_config = {"frozen": True}


class Sepia(BaseModel):
    name: Literal["sepia"] = "sepia"
    amount: float = 1.0

    model_config = {"frozen": True}


class Saturate(BaseModel):
    name: Literal["saturate"] = "saturate"
    amount: float = 1.0

    model_config = {"frozen": True}


class HueRotate(BaseModel):
    name: Literal["hue-rotate"] = "hue-rotate"
    angle: Angle = Field(default_factory=lambda: Angle(number=0.0))

    model_config = {"frozen": True}


class Invert(BaseModel):
    name: Literal["invert"] = "invert"
    amount: float = 1.0

    model_config = {"frozen": True}


class Opacity(BaseModel):
    name: Literal["opacity"] = "opacity"
    amount: float = 1.0

    model_config = {"frozen": True}


class Brightness(BaseModel):
    name: Literal["brightness"] = "brightness"
    amount: float = 1.0

    model_config = {"frozen": True}


class Contrast(BaseModel):
    name: Literal["contrast"] = "contrast"
    amount: float = 1.0

    model_config = {"frozen": True}


class Blur(BaseModel):
    name: Literal["blur"] = "blur"
    std_dev: Length = Field(default_factory=Length.zero)

    model_config = {"frozen": True}


class DropShadowFunction(BaseModel):
    """drop-shadow(): color опционален, stdDeviation по умолчанию 0."""

    name: Literal["drop-shadow"] = "drop-shadow"
    color: Optional[Color] = None
    dx: Length
    dy: Length
    std_dev: Length = Field(default_factory=Length.zero)

    model_config = {"frozen": True}


FilterFunction = Annotated[
    Union[
        Grayscale,
        Sepia,
        Saturate,
        HueRotate,
        Invert,
        Opacity,
        Brightness,
        Contrast,
        Blur,
        DropShadowFunction,
    ],
    Field(discriminator="name"),
]
