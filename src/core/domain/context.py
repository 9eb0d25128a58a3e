"""
ConversionContext — read-only контекст для length/color-зависимых функций

Converter не знает структуру документа. Он обращается к двум возможностям:
- LengthResolver.convert_length: Length → float в user space
- ColorLookup.find_inherited_color: inherited `color` от узла вверх по дереву

ViewportContext — эталонная реализация поверх DocumentNode, используемая
тестами и простыми вызывающими сторонами. Владелец контекста отвечает за
потокобезопасность чтения; сам ViewportContext после создания не мутирует.

ФОРМУЛЫ РАЗРЕШЕНИЯ ДЛИНЫ:
    px, none  → n
    in        → n * dpi
    cm        → n * dpi / 2.54
    mm        → n * dpi / 25.4
    pt        → n * dpi / 72
    pc        → n * dpi / 6
    em        → n * font_size
    ex        → n * font_size / 2
    %  (objectBoundingBox) → n / 100
    %  (userSpaceOnUse)    → n * basis / 100, basis по оси атрибута:
        horizontal → width, vertical → height,
        diagonal   → sqrt(width² + height²) / sqrt(2)
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Final, Optional, Protocol

from .color import Color
from .units import AttributeId, Length, LengthUnit, ReferenceAxis, Units

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DEFAULT_DPI: Final[float] = 96.0
DEFAULT_FONT_SIZE: Final[float] = 12.0
DEFAULT_VIEWPORT_SIZE: Final[float] = 100.0

CM_PER_INCH: Final[float] = 2.54
MM_PER_INCH: Final[float] = 25.4
PT_PER_INCH: Final[float] = 72.0
PC_PER_INCH: Final[float] = 6.0


# =============================================================================
# CAPABILITIES
# =============================================================================


class LengthResolver(Protocol):
    def convert_length(
        self,
        length: Length,
        node: "DocumentNode",
        aid: AttributeId,
        units: Units,
    ) -> float:
        ...


class ColorLookup(Protocol):
    def find_inherited_color(self, node: "DocumentNode") -> Optional[Color]:
        ...


class ConversionContext(LengthResolver, ColorLookup, Protocol):
    """Полный контекст, который принимают blur и drop-shadow."""


# =============================================================================
# DOCUMENT TREE
# =============================================================================


@dataclass(eq=False)
class DocumentNode:
    """
    Минимальный узел документа: атрибуты + ссылка на родителя.

    Значения атрибутов типизированы: COLOR → Color, FONT_SIZE → Length.
    """

    tag: str
    attributes: dict[AttributeId, Any] = field(default_factory=dict)
    parent: Optional["DocumentNode"] = None
    children: list["DocumentNode"] = field(default_factory=list)

    def append_child(self, child: "DocumentNode") -> "DocumentNode":
        """Добавить дочерний узел и вернуть его."""
        child.parent = self
        self.children.append(child)
        return child

    def ancestors(self):
        """Узел и все его предки, от ближнего к корню."""
        node: Optional[DocumentNode] = self
        while node is not None:
            yield node
            node = node.parent

    def find_attribute(self, aid: AttributeId) -> Any:
        """Первое значение атрибута на узле или его предках, иначе None."""
        for node in self.ancestors():
            if aid in node.attributes:
                return node.attributes[aid]
        return None


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ViewportConfig:
    """Конфигурация ViewportContext."""

    dpi: float = DEFAULT_DPI
    font_size: float = DEFAULT_FONT_SIZE

    # Размеры viewBox для процентов в userSpaceOnUse
    width: float = DEFAULT_VIEWPORT_SIZE
    height: float = DEFAULT_VIEWPORT_SIZE

    def __post_init__(self) -> None:
        if not self.dpi > 0:
            raise ValueError(f"dpi must be positive, got {self.dpi}")
        if not self.font_size > 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"viewport size must be non-negative, got {self.width}x{self.height}"
            )


# =============================================================================
# VIEWPORT CONTEXT
# =============================================================================


class ViewportContext:
    """Эталонный ConversionContext поверх DocumentNode и ViewportConfig."""

    def __init__(self, config: Optional[ViewportConfig] = None):
        self.config = config or ViewportConfig()

    def resolve_font_size(self, node: DocumentNode) -> float:
        """
        Ближайший inherited font-size в px.

        Относительные единицы font-size (em, ex, %) не поддерживаются
        и заменяются font_size из конфигурации.
        """
        value = node.find_attribute(AttributeId.FONT_SIZE)
        if value is None:
            return self.config.font_size
        if isinstance(value, (int, float)):
            return float(value)
        if value.unit in (LengthUnit.EM, LengthUnit.EX, LengthUnit.PERCENT):
            logger.debug("relative font-size %s ignored, using default", value)
            return self.config.font_size
        return self._convert_absolute(value.number, value.unit)

    def _convert_absolute(self, n: float, unit: LengthUnit) -> float:
        dpi = self.config.dpi
        if unit == LengthUnit.IN:
            return n * dpi
        if unit == LengthUnit.CM:
            return n * dpi / CM_PER_INCH
        if unit == LengthUnit.MM:
            return n * dpi / MM_PER_INCH
        if unit == LengthUnit.PT:
            return n * dpi / PT_PER_INCH
        if unit == LengthUnit.PC:
            return n * dpi / PC_PER_INCH
        return n

    def _percent_basis(self, aid: AttributeId) -> float:
        width, height = self.config.width, self.config.height
        axis = aid.reference_axis
        if axis == ReferenceAxis.HORIZONTAL:
            return width
        if axis == ReferenceAxis.VERTICAL:
            return height
        return math.sqrt(width * width + height * height) / math.sqrt(2.0)

    def convert_length(
        self,
        length: Length,
        node: DocumentNode,
        aid: AttributeId,
        units: Units,
    ) -> float:
        """
        Разрешение длины в user space.

        Args:
            length: Длина в единицах документа
            node: Узел, для которого разрешается длина (font-size для em/ex)
            aid: Атрибут, задающий ось для процентов
            units: Система координат

        Returns:
            Числовое значение в user space (может быть отрицательным)
        """
        n = length.number
        unit = length.unit

        if unit == LengthUnit.PERCENT:
            if units == Units.OBJECT_BOUNDING_BOX:
                return n / 100.0
            return n * self._percent_basis(aid) / 100.0

        if unit == LengthUnit.EM:
            return n * self.resolve_font_size(node)
        if unit == LengthUnit.EX:
            return n * self.resolve_font_size(node) / 2.0

        return self._convert_absolute(n, unit)

    def find_inherited_color(self, node: DocumentNode) -> Optional[Color]:
        return node.find_attribute(AttributeId.COLOR)
