"""
FilterPrimitive — нормализованные filter primitives

Immutable Pydantic модели, которые converter возвращает в pipeline.
Каждый union смоделирован как discriminated union по полю `type`:
- FilterPrimitive: ColorMatrix | ComponentTransfer | GaussianBlur | DropShadow
- ColorMatrixKind: MatrixKind | SaturateKind | HueRotateKind
- TransferFunction: IdentityTransfer | TableTransfer | LinearTransfer

Варианты не образуют иерархию: у каждого свой набор данных, потребитель
разбирает их исчерпывающе по `type` или isinstance.
Полная совместимость с JSON Schema (src/core/contracts/schema/filter_primitive.json).
"""

from enum import Enum
from typing import Annotated, Final, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from .color import Color

# =============================================================================
# CONSTRAINED SCALARS
# =============================================================================

PositiveNumber = Annotated[float, Field(ge=0.0)]
Opacity = Annotated[float, Field(ge=0.0, le=1.0)]

COLOR_MATRIX_SIZE: Final[int] = 20


# =============================================================================
# ENUMS
# =============================================================================


class FilterInput(str, Enum):
    """Источник изображения для primitive."""

    SOURCE_GRAPHIC = "SourceGraphic"


# =============================================================================
# COLOR MATRIX KINDS
# =============================================================================


class MatrixKind(BaseModel):
    """Явная 4x5 матрица, row-major."""

    type: Literal["matrix"] = "matrix"
    values: tuple[float, ...] = Field(..., description="20 коэффициентов row-major")

    model_config = {"frozen": True}

    @field_validator("values")
    @classmethod
    def validate_matrix_size(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        if len(v) != COLOR_MATRIX_SIZE:
            raise ValueError(
                f"color matrix must have {COLOR_MATRIX_SIZE} values, got {len(v)}"
            )
        return v


class SaturateKind(BaseModel):
    """feColorMatrix type="saturate", развёртку выполняет renderer."""

    type: Literal["saturate"] = "saturate"
    value: PositiveNumber = Field(..., description="Насыщенность (>= 0)")

    model_config = {"frozen": True}


class HueRotateKind(BaseModel):
    """feColorMatrix type="hueRotate", угол в градусах без нормализации."""

    type: Literal["hue_rotate"] = "hue_rotate"
    degrees: float = Field(..., description="Угол поворота (градусы)")

    model_config = {"frozen": True}


ColorMatrixKind = Annotated[
    Union[MatrixKind, SaturateKind, HueRotateKind],
    Field(discriminator="type"),
]


# =============================================================================
# TRANSFER FUNCTIONS
# =============================================================================


class IdentityTransfer(BaseModel):
    """Канал без изменений."""

    type: Literal["identity"] = "identity"

    model_config = {"frozen": True}


class TableTransfer(BaseModel):
    """Кусочно-линейная кривая по равномерным отсчётам на [0, 1]."""

    type: Literal["table"] = "table"
    values: tuple[float, ...] = Field(..., description="Отсчёты кривой")

    model_config = {"frozen": True}


class LinearTransfer(BaseModel):
    """C' = slope * C + intercept."""

    type: Literal["linear"] = "linear"
    slope: float = Field(..., description="Наклон")
    intercept: float = Field(..., description="Смещение")

    model_config = {"frozen": True}


TransferFunction = Annotated[
    Union[IdentityTransfer, TableTransfer, LinearTransfer],
    Field(discriminator="type"),
]


# =============================================================================
# PRIMITIVES
# =============================================================================


class ColorMatrix(BaseModel):
    """feColorMatrix."""

    type: Literal["color_matrix"] = "color_matrix"
    input: FilterInput = Field(FilterInput.SOURCE_GRAPHIC, description="Источник")
    kind: ColorMatrixKind = Field(..., description="Вид матрицы")

    model_config = {"frozen": True}


class ComponentTransfer(BaseModel):
    """feComponentTransfer: независимая кривая на каждый канал."""

    type: Literal["component_transfer"] = "component_transfer"
    input: FilterInput = Field(FilterInput.SOURCE_GRAPHIC, description="Источник")
    func_r: TransferFunction = Field(default_factory=IdentityTransfer)
    func_g: TransferFunction = Field(default_factory=IdentityTransfer)
    func_b: TransferFunction = Field(default_factory=IdentityTransfer)
    func_a: TransferFunction = Field(default_factory=IdentityTransfer)

    model_config = {"frozen": True}


class GaussianBlur(BaseModel):
    """feGaussianBlur."""

    type: Literal["gaussian_blur"] = "gaussian_blur"
    input: FilterInput = Field(FilterInput.SOURCE_GRAPHIC, description="Источник")
    std_dev_x: PositiveNumber = Field(..., description="Std deviation по X")
    std_dev_y: PositiveNumber = Field(..., description="Std deviation по Y")

    model_config = {"frozen": True}


class DropShadow(BaseModel):
    """
    feDropShadow.

    opacity по умолчанию 1.0; pipeline может заменить её позже,
    создав новый экземпляр через model_copy.
    """

    type: Literal["drop_shadow"] = "drop_shadow"
    input: FilterInput = Field(FilterInput.SOURCE_GRAPHIC, description="Источник")
    dx: float = Field(..., description="Смещение по X (user space)")
    dy: float = Field(..., description="Смещение по Y (user space)")
    std_dev_x: PositiveNumber = Field(..., description="Std deviation по X")
    std_dev_y: PositiveNumber = Field(..., description="Std deviation по Y")
    color: Color = Field(..., description="Цвет тени")
    opacity: Opacity = Field(1.0, description="Непрозрачность тени [0, 1]")

    model_config = {"frozen": True}


FilterPrimitive = Annotated[
    Union[ColorMatrix, ComponentTransfer, GaussianBlur, DropShadow],
    Field(discriminator="type"),
]

FILTER_PRIMITIVE_ADAPTER: Final[TypeAdapter] = TypeAdapter(FilterPrimitive)


def primitive_from_dict(data: dict) -> Union[ColorMatrix, ComponentTransfer, GaussianBlur, DropShadow]:
    """
    Восстановление primitive из сериализованного dict.

    Raises:
        pydantic.ValidationError: Если данные не соответствуют ни одному варианту
    """
    return FILTER_PRIMITIVE_ADAPTER.validate_python(data)
