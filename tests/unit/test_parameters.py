"""Tests for BoxParameters validation."""

from __future__ import annotations

import pytest

from boxmaker.domain import (
    BoxParameterError,
    BoxParameters,
    FingerJointSettings,
    collect_parameter_errors,
)
from boxmaker.domain.parameters import adjust_size


class TestBoxParametersValidation:
    """Invalid parameters are rejected on construction."""

    def test_defaults_are_valid(self) -> None:
        params = BoxParameters()

        assert params.x == 100.0
        assert params.thickness == 3.0
        assert params.burn == 0.1

    @pytest.mark.parametrize("field", ["x", "y", "h"])
    def test_dimension_too_small(self, field: str) -> None:
        with pytest.raises(BoxParameterError) as exc_info:
            BoxParameters(**{field: 10.0})

        assert exc_info.value.category == "dimension_too_small"

    def test_minimum_dimension_accepted(self) -> None:
        params = BoxParameters(x=20.0, y=20.0, h=20.0)
        assert params.x == 20.0

    @pytest.mark.parametrize("thickness", [0.5, 25.0])
    def test_thickness_out_of_range(self, thickness: float) -> None:
        with pytest.raises(BoxParameterError) as exc_info:
            BoxParameters(thickness=thickness)

        assert exc_info.value.category == "thickness_out_of_range"

    @pytest.mark.parametrize("thickness", [1.0, 20.0])
    def test_thickness_bounds_accepted(self, thickness: float) -> None:
        assert BoxParameters(thickness=thickness).thickness == thickness

    def test_degenerate_finger_ratio(self) -> None:
        settings = FingerJointSettings(finger=0.0, space=0.0)
        with pytest.raises(BoxParameterError) as exc_info:
            BoxParameters(finger_joint=settings)

        assert exc_info.value.category == "degenerate_finger_ratio"

    def test_negative_burn_rejected(self) -> None:
        with pytest.raises(BoxParameterError) as exc_info:
            BoxParameters(burn=-0.1)

        assert exc_info.value.category == "invalid_value"

    def test_outside_dimensions_must_leave_an_inner_size(self) -> None:
        with pytest.raises(BoxParameterError) as exc_info:
            BoxParameters(x=30.0, y=30.0, h=30.0, thickness=20.0, outside=True)

        assert exc_info.value.category == "dimension_too_small"

    def test_outside_inner_size_of_zero_rejected(self) -> None:
        with pytest.raises(BoxParameterError):
            BoxParameters(x=100.0, y=100.0, h=20.0, thickness=10.0, outside=True)

    def test_same_size_accepted_as_inside_dimensions(self) -> None:
        params = BoxParameters(x=30.0, y=30.0, h=30.0, thickness=20.0)

        assert params.inner_dimensions() == (30.0, 30.0, 30.0)

    def test_negative_dividers_rejected(self) -> None:
        with pytest.raises(BoxParameterError):
            BoxParameters(dividers_x=-1)

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            BoxParameters(x=1.0)

    def test_parameters_are_frozen(self) -> None:
        params = BoxParameters()
        with pytest.raises(AttributeError):
            params.x = 50.0  # type: ignore[misc]


class TestCollectParameterErrors:
    def test_valid_values_have_no_errors(self) -> None:
        assert collect_parameter_errors(100.0, 100.0, 100.0, 3.0) == []

    def test_reports_every_problem(self) -> None:
        errors = collect_parameter_errors(
            10.0, 100.0, 100.0, 25.0, FingerJointSettings(finger=0.0, space=0.0)
        )

        assert len(errors) == 3
        assert any("20mm" in e for e in errors)
        assert any("thickness" in e.lower() for e in errors)
        assert any("finger" in e.lower() for e in errors)

    def test_outside_flag_checked(self) -> None:
        assert collect_parameter_errors(30.0, 30.0, 30.0, 20.0) == []

        errors = collect_parameter_errors(30.0, 30.0, 30.0, 20.0, outside=True)

        assert len(errors) == 1
        assert "twice the material thickness" in errors[0]


class TestInnerDimensions:
    def test_inside_dimensions_unchanged(self) -> None:
        assert BoxParameters(x=120.0, y=80.0, h=60.0).inner_dimensions() == (
            120.0,
            80.0,
            60.0,
        )

    def test_outside_dimensions_subtract_two_thicknesses(self) -> None:
        params = BoxParameters(x=120.0, y=80.0, h=60.0, thickness=4.0, outside=True)

        assert params.inner_dimensions() == (112.0, 72.0, 52.0)

    def test_adjust_size(self) -> None:
        assert adjust_size(100.0, 3.0) == 94.0
