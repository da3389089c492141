"""Pytest configuration and shared fixtures for box tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from boxmaker.application.factory import reset_factory
from boxmaker.domain import BoxParameters, FingerJointSettings, LayoutConfig

if TYPE_CHECKING:
    from boxmaker.application import BoxOutput, GenerateBoxCommand


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Factory isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_service_factory():
    """Give every test a fresh default ServiceFactory."""
    reset_factory()
    yield
    reset_factory()


# =============================================================================
# Shared domain fixtures
# =============================================================================


@pytest.fixture
def default_settings() -> FingerJointSettings:
    """Default joint: 2t fingers, 2t spaces, rectangular."""
    return FingerJointSettings()


@pytest.fixture
def default_params() -> BoxParameters:
    """100mm cube in 3mm material with 0.1mm kerf."""
    return BoxParameters(x=100.0, y=100.0, h=100.0, thickness=3.0, burn=0.1)


@pytest.fixture
def default_layout() -> LayoutConfig:
    return LayoutConfig(spacing=5.0)


@pytest.fixture
def generate_command() -> "GenerateBoxCommand":
    """Create a GenerateBoxCommand through the service factory."""
    from boxmaker.application.factory import get_factory

    return get_factory().create_generate_command()


@pytest.fixture
def box_output(generate_command: "GenerateBoxCommand") -> "BoxOutput":
    """Generated output for the default 100mm cube."""
    from boxmaker.application import BoxInput

    output = generate_command.execute(BoxInput())
    assert output.is_valid
    return output


@pytest.fixture
def invalid_output(generate_command: "GenerateBoxCommand") -> "BoxOutput":
    """Output of a box that fails validation (x below the minimum)."""
    from boxmaker.application import BoxInput

    return generate_command.execute(BoxInput(x=10.0))
