"""Shared pytest fixtures for themegen tests."""

import pytest

from themegen.core import GeneratorConfig
from themegen.core.ir import RGBA, ColorSpec, ColorVariantSpec, OpacityVariantSpec


@pytest.fixture
def channel_config() -> GeneratorConfig:
    """Return the default (channel list) configuration."""
    return GeneratorConfig()


@pytest.fixture
def hex_config() -> GeneratorConfig:
    """Return a configuration that emits hexadecimal values."""
    return GeneratorConfig(hexadecimal=True)


@pytest.fixture
def opaque_color() -> ColorSpec:
    """Return a fully opaque color."""
    return ColorSpec(key_name="primary", computed=RGBA(r=0, g=102, b=204))


@pytest.fixture
def translucent_color() -> ColorSpec:
    """Return a half transparent color."""
    return ColorSpec(key_name="overlay", computed=RGBA(r=17, g=24, b=39, a=0.5))


@pytest.fixture
def hover_variant() -> ColorVariantSpec:
    """Return an opaque color variant scoped to the primary color."""
    return ColorVariantSpec(name="hover", colors=["primary"], color=RGBA(r=0, g=82, b=163))


@pytest.fixture
def muted_opacity() -> OpacityVariantSpec:
    """Return an unscoped opacity variant."""
    return OpacityVariantSpec(name="muted", opacity=0.6)
