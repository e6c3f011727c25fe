"""Tests for the themegen IR models."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from themegen.core.ir import (
    RGBA,
    AnyVariant,
    ColorVariantSpec,
    CustomPropertySpec,
    OpacityVariantSpec,
    ThemeScheme,
    ThemeSpec,
)


class TestThemeSpec:
    def test_defaults(self):
        theme = ThemeSpec()
        assert theme.is_default() is False
        assert theme.has_name() is False
        assert theme.has_scheme() is False
        assert theme.get_scheme() is None

    def test_scheme_from_string(self):
        theme = ThemeSpec(name="night", scheme="dark")
        assert theme.get_scheme() == ThemeScheme.DARK
        assert theme.has_scheme() is True

    def test_frozen(self):
        theme = ThemeSpec(name="base", default=True)
        with pytest.raises(ValidationError):
            theme.name = "other"  # type: ignore[misc]


class TestRGBA:
    def test_alpha_defaults_to_opaque(self):
        assert RGBA(r=1, g=2, b=3).a == 1

    @pytest.mark.parametrize("fields", [{"r": 256, "g": 0, "b": 0}, {"r": 0, "g": 0, "b": 0, "a": 1.5}])
    def test_out_of_range(self, fields):
        with pytest.raises(ValidationError):
            RGBA(**fields)


class TestVariants:
    def test_discriminated_union(self):
        """Test raw dicts validate into the variant named by `kind`."""
        adapter = TypeAdapter(list[AnyVariant])
        variants = adapter.validate_python(
            [
                {"kind": "color", "name": "hover", "colors": ["primary"], "color": {"r": 0, "g": 0, "b": 0}},
                {"kind": "opacity", "name": "muted", "opacity": 0.5},
            ]
        )
        assert isinstance(variants[0], ColorVariantSpec)
        assert isinstance(variants[1], OpacityVariantSpec)
        assert variants[1].colors == []


class TestCustomPropertySpec:
    def test_prefix_defaults_to_empty(self):
        prop = CustomPropertySpec(name="gap")
        assert prop.get_prefix() == ""
        assert prop.get_name() == "gap"

    def test_fields(self):
        """Test the model carries only what variable naming reads."""
        assert set(CustomPropertySpec.model_fields) == {"name", "prefix"}
