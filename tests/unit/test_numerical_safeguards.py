"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Односторонние clamp (clamp_max / clamp_min)
2. NaN/Inf поведение clamp
3. Epsilon-сравнения float
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    clamp_max,
    clamp_min,
    is_close,
    is_valid_float,
)

# =============================================================================
# ТЕСТЫ CLAMP
# =============================================================================


class TestClampMax:
    """Тесты для clamp_max"""

    def test_value_above_bound_clamped(self) -> None:
        assert clamp_max(1.5, 1.0) == 1.0
        assert clamp_max(math.inf, 1.0) == 1.0

    def test_value_below_bound_unchanged(self) -> None:
        """Нижняя граница не применяется"""
        assert clamp_max(0.5, 1.0) == 0.5
        assert clamp_max(-3.0, 1.0) == -3.0
        assert clamp_max(-math.inf, 1.0) == -math.inf

    def test_boundary(self) -> None:
        assert clamp_max(1.0, 1.0) == 1.0

    def test_nan_returns_bound(self) -> None:
        """NaN → граница (IEEE fmin)"""
        assert clamp_max(math.nan, 1.0) == 1.0


class TestClampMin:
    """Тесты для clamp_min"""

    def test_value_below_bound_clamped(self) -> None:
        assert clamp_min(-0.1, 0.0) == 0.0
        assert clamp_min(-math.inf, 0.0) == 0.0

    def test_value_above_bound_unchanged(self) -> None:
        """Верхняя граница не применяется"""
        assert clamp_min(5.0, 0.0) == 5.0
        assert clamp_min(math.inf, 0.0) == math.inf

    def test_nan_returns_bound(self) -> None:
        """NaN → граница (IEEE fmax)"""
        assert clamp_min(math.nan, 0.0) == 0.0

    def test_negative_zero(self) -> None:
        """-0.0 не меньше 0.0, результат равен нулю"""
        assert clamp_min(-0.0, 0.0) == 0.0


# =============================================================================
# ТЕСТЫ FLOAT ПРОВЕРОК
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)

    def test_non_finite(self) -> None:
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


class TestIsClose:
    """Тесты для is_close"""

    def test_exact(self) -> None:
        assert is_close(0.5, 0.5)

    def test_float_rounding(self) -> None:
        assert is_close(0.1 + 0.2, 0.3)

    def test_near_zero_uses_absolute_tolerance(self) -> None:
        assert is_close(0.0, EPS_FLOAT_COMPARE_ABS / 2)
        assert not is_close(0.0, 1e-6)

    def test_different(self) -> None:
        assert not is_close(1.0, 1.001)
