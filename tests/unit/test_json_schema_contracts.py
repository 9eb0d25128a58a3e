"""
Tests for JSON Schema Contract Validators

Тестирование контракта filter_primitive:
- Валидность самой схемы
- Валидация выходов converter
- Детекция нарушений required полей, типов и constraints
- Интеграция с Pydantic моделями
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    ContractValidator,
    FilterPrimitiveValidator,
    SchemaLoader,
    validate_filter_primitive,
)
from src.core.domain import (
    Color,
    DocumentNode,
    Length,
    ViewportContext,
)
from src.core.domain.units import Angle
from src.filter_functions import (
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
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_blur():
    """Валидный gaussian_blur для тестирования."""
    return {
        "type": "gaussian_blur",
        "input": "SourceGraphic",
        "std_dev_x": 2.0,
        "std_dev_y": 2.0,
    }


@pytest.fixture
def valid_shadow():
    """Валидный drop_shadow для тестирования."""
    return {
        "type": "drop_shadow",
        "input": "SourceGraphic",
        "dx": -1.0,
        "dy": 4.0,
        "std_dev_x": 0.0,
        "std_dev_y": 0.0,
        "color": {"red": 0, "green": 0, "blue": 0},
        "opacity": 1.0,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_load_filter_primitive(self) -> None:
        schema = SchemaLoader().load_schema("filter_primitive")
        assert schema["title"] == "FilterPrimitive"

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("filter_primitive") is loader.load_schema("filter_primitive")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_custom_loader(self, tmp_path: Path) -> None:
        (tmp_path / "anything.json").write_text(json.dumps({"type": "object"}), encoding="utf-8")
        validator = ContractValidator("anything", loader=SchemaLoader(tmp_path))
        assert validator.is_valid({})
        assert not validator.is_valid([])


# =============================================================================
# CONVERTER OUTPUTS
# =============================================================================


class TestConverterOutputsMatchContract:
    """Все выходы converter соответствуют контракту"""

    @pytest.fixture
    def node(self) -> DocumentNode:
        return DocumentNode(tag="rect")

    @pytest.fixture
    def context(self) -> ViewportContext:
        return ViewportContext()

    def test_amount_functions(self) -> None:
        primitives = [
            convert_grayscale(0.5),
            convert_sepia(1.5),
            convert_saturate(-2.0),
            convert_hue_rotate(Angle(number=720.0)),
            convert_invert(0.2),
            convert_opacity(0.9),
            convert_brightness(3.0),
            convert_contrast(-1.0),
        ]
        for primitive in primitives:
            validate_filter_primitive(primitive.model_dump(mode="json"))

    def test_length_functions(self, node, context) -> None:
        blur = convert_blur(node, Length(number=-3.0), context)
        shadow = convert_drop_shadow(
            node,
            Color(red=1, green=2, blue=3),
            Length(number=-5.0),
            Length(number=5.0),
            Length(number=-1.0),
            context,
        )
        validate_filter_primitive(blur.model_dump(mode="json"))
        validate_filter_primitive(shadow.model_dump(mode="json"))


# =============================================================================
# VIOLATIONS
# =============================================================================


class TestContractViolations:
    """Детекция нарушений контракта"""

    def test_valid_samples(self, valid_blur, valid_shadow) -> None:
        validate_filter_primitive(valid_blur)
        validate_filter_primitive(valid_shadow)

    def test_negative_std_dev(self, valid_blur) -> None:
        valid_blur["std_dev_x"] = -0.5
        with pytest.raises(ValidationError):
            validate_filter_primitive(valid_blur)

    def test_missing_required(self, valid_shadow) -> None:
        del valid_shadow["color"]
        with pytest.raises(ValidationError):
            validate_filter_primitive(valid_shadow)

    def test_opacity_out_of_range(self, valid_shadow) -> None:
        valid_shadow["opacity"] = 1.5
        assert not FilterPrimitiveValidator().is_valid(valid_shadow)

    def test_unknown_input(self, valid_blur) -> None:
        valid_blur["input"] = "BackgroundImage"
        assert not FilterPrimitiveValidator().is_valid(valid_blur)

    def test_matrix_size(self) -> None:
        data = {
            "type": "color_matrix",
            "input": "SourceGraphic",
            "kind": {"type": "matrix", "values": [1.0] * 19},
        }
        assert not FilterPrimitiveValidator().is_valid(data)

    def test_unknown_transfer_function(self) -> None:
        identity = {"type": "identity"}
        data = {
            "type": "component_transfer",
            "input": "SourceGraphic",
            "func_r": {"type": "gamma", "amplitude": 1.0},
            "func_g": identity,
            "func_b": identity,
            "func_a": identity,
        }
        errors = list(FilterPrimitiveValidator().iter_errors(data))
        assert errors
