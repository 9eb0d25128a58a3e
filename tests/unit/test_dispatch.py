"""
Тесты для dispatch: FilterFunction → FilterPrimitive

Проверяет:
1. Каждая функция попадает в свой converter
2. Значения по умолчанию для пропущенных аргументов
3. Список функций → список primitives в том же порядке
4. Неизвестный объект → UnsupportedFilterFunction
"""

import logging

import pytest
from pydantic import TypeAdapter

from src.core.domain import (
    Color,
    ColorMatrix,
    ComponentTransfer,
    DocumentNode,
    DropShadow,
    GaussianBlur,
    HueRotateKind,
    Length,
    LengthUnit,
    MatrixKind,
    SaturateKind,
    ViewportContext,
)
from src.core.domain.units import Angle
from src.filter_functions import (
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
    UnsupportedFilterFunction,
    convert_brightness,
    convert_contrast,
    convert_filter_function,
    convert_filter_functions,
    convert_grayscale,
    convert_invert,
    convert_opacity,
    convert_sepia,
)


@pytest.fixture
def node() -> DocumentNode:
    return DocumentNode(tag="rect")


@pytest.fixture
def context() -> ViewportContext:
    return ViewportContext()


class TestConvertFilterFunction:
    """Тесты для convert_filter_function"""

    @pytest.mark.parametrize(
        "function, expected",
        [
            (Grayscale(amount=0.3), convert_grayscale(0.3)),
            (Sepia(amount=2.0), convert_sepia(1.0)),
            (Invert(amount=0.5), convert_invert(0.5)),
            (Opacity(amount=0.25), convert_opacity(0.25)),
            (Brightness(amount=1.2), convert_brightness(1.2)),
            (Contrast(amount=0.8), convert_contrast(0.8)),
        ],
    )
    def test_amount_functions(self, node, context, function, expected) -> None:
        assert convert_filter_function(function, node, context) == expected

    def test_saturate(self, node, context) -> None:
        primitive = convert_filter_function(Saturate(amount=-1.0), node, context)
        assert isinstance(primitive, ColorMatrix)
        assert primitive.kind == SaturateKind(value=0.0)

    def test_hue_rotate(self, node, context) -> None:
        primitive = convert_filter_function(HueRotate(angle=Angle(number=360.0)), node, context)
        assert primitive.kind == HueRotateKind(degrees=360.0)

    def test_blur(self, node, context) -> None:
        primitive = convert_filter_function(
            Blur(std_dev=Length(number=2.0, unit=LengthUnit.PX)), node, context
        )
        assert isinstance(primitive, GaussianBlur)
        assert primitive.std_dev_x == 2.0

    def test_drop_shadow(self, node, context) -> None:
        function = DropShadowFunction(
            color=Color(red=0, green=0, blue=255),
            dx=Length(number=1.0),
            dy=Length(number=2.0),
            std_dev=Length(number=3.0),
        )
        primitive = convert_filter_function(function, node, context)
        assert isinstance(primitive, DropShadow)
        assert (primitive.dx, primitive.dy, primitive.std_dev_x) == (1.0, 2.0, 3.0)
        assert primitive.color == Color(red=0, green=0, blue=255)

    def test_unsupported(self, node, context) -> None:
        with pytest.raises(UnsupportedFilterFunction, match="str"):
            convert_filter_function("blur(2px)", node, context)

    def test_debug_logging(self, node, context, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.filter_functions.dispatch"):
            convert_filter_function(Invert(), node, context)
        assert "invert() -> component_transfer" in caplog.text


class TestDefaults:
    """Пропущенные аргументы"""

    def test_amount_defaults_to_one(self, node, context) -> None:
        assert convert_filter_function(Grayscale(), node, context) == convert_grayscale(1.0)
        assert convert_filter_function(Invert(), node, context) == convert_invert(1.0)

    def test_blur_defaults_to_zero(self, node, context) -> None:
        primitive = convert_filter_function(Blur(), node, context)
        assert primitive.std_dev_x == 0.0

    def test_hue_rotate_defaults_to_zero(self, node, context) -> None:
        assert convert_filter_function(HueRotate(), node, context).kind.degrees == 0.0

    def test_drop_shadow_without_color_is_black(self, node, context) -> None:
        function = DropShadowFunction(dx=Length(number=1.0), dy=Length(number=1.0))
        primitive = convert_filter_function(function, node, context)
        assert primitive.color == Color.black()
        assert primitive.std_dev_x == 0.0


class TestConvertFilterFunctions:
    """Тесты для convert_filter_functions"""

    def test_order_preserved(self, node, context) -> None:
        primitives = convert_filter_functions(
            [Blur(), Grayscale(amount=0.5), Opacity(amount=0.5)], node, context
        )
        assert [type(p) for p in primitives] == [GaussianBlur, ColorMatrix, ComponentTransfer]
        assert isinstance(primitives[1].kind, MatrixKind)

    def test_empty(self, node, context) -> None:
        assert convert_filter_functions([], node, context) == []

    def test_from_tokenized_dicts(self, node, context) -> None:
        """Аргументы, пришедшие как dict, валидируются discriminated union"""
        adapter = TypeAdapter(list[FilterFunction])
        functions = adapter.validate_python(
            [
                {"name": "sepia", "amount": 0.5},
                {"name": "hue-rotate", "angle": {"number": 0.5, "unit": "turn"}},
                {"name": "drop-shadow", "dx": {"number": 2}, "dy": {"number": 3, "unit": "px"}},
            ]
        )
        primitives = convert_filter_functions(functions, node, context)
        assert primitives[0] == convert_sepia(0.5)
        assert primitives[1].kind.degrees == pytest.approx(180.0)
        assert primitives[2].dx == 2.0
        assert primitives[2].dy == 3.0
