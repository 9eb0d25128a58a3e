"""
Color — RGB цвет тени и inherited `color` атрибута

Immutable Pydantic модель. Альфа здесь не хранится: прозрачность тени
задаётся отдельным полем DropShadow.opacity.
"""

from typing import Annotated

from pydantic import BaseModel, Field

ColorChannel = Annotated[int, Field(ge=0, le=255)]


class Color(BaseModel):
    """RGB triple, 0..255 на канал."""

    red: ColorChannel = Field(..., description="Красный канал")
    green: ColorChannel = Field(..., description="Зелёный канал")
    blue: ColorChannel = Field(..., description="Синий канал")

    model_config = {"frozen": True}

    @classmethod
    def black(cls) -> "Color":
        """Непрозрачный чёрный (fallback для drop-shadow)."""
        return cls(red=0, green=0, blue=0)

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
