"""Tests for brandspec.yaml loading, saving, and applying."""

from __future__ import annotations

from pathlib import Path

import pytest

from tincture.core.brandspec_loader import (
    apply_brandspec,
    brandspec_exists,
    build_context_from_brandspec,
    create_default_brandspec,
    get_brandspec_path,
    load_brandspec,
    save_brandspec,
)
from tincture.core.context import BuildContext
from tincture.core.errors import BrandSpecError, NotFound
from tincture.core.ir.brandspec import BrandSpecYAML, ColorSpec, MixSpec, UsecaseSpec
from tincture.core.ir.registry import Property

BRANDSPEC_YAML = """\
brand: master
namespace: o-example
colors:
  brand:
    value: "#0d7680"
    allow_tones: true
  ink: "#262a33"
tones:
  brand: [40]
mixes:
  brand-wash:
    color: brand
    background: paper
    percentage: 20
usecases:
  stripe:
    background: brand
  quote:
    background: brand-wash
    text: ink
    deprecated: use stripe
"""


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project directory with a brandspec.yaml."""
    (tmp_path / "brandspec.yaml").write_text(BRANDSPEC_YAML, encoding="utf-8")
    return tmp_path


class TestBrandSpecModel:
    """Test the BrandSpec schema."""

    def test_short_form_colors(self):
        spec = BrandSpecYAML.model_validate({"colors": {"brand": "#0d7680"}})
        assert spec.colors["brand"] == ColorSpec(value="#0d7680")

    def test_defaults(self):
        spec = BrandSpecYAML()
        assert spec.brand == "master"
        assert spec.namespace == "o-colors"
        assert spec.colors == {}

    def test_qualify(self):
        spec = BrandSpecYAML(namespace="o-example")
        assert spec.qualify("brand") == "o-example/brand"
        assert spec.qualify("o-other/brand") == "o-other/brand"

    def test_usecase_colors(self):
        usecase = UsecaseSpec(background="brand", outline="teal")
        assert usecase.colors() == {"background": "brand", "outline": "teal"}

    def test_mix_defaults(self):
        mix = MixSpec(color="brand")
        assert mix.background == "paper"
        assert mix.percentage == 50.0


class TestLoadBrandSpec:
    """Test reading brandspec.yaml."""

    def test_paths(self, project):
        assert get_brandspec_path(project) == project / "brandspec.yaml"
        assert brandspec_exists(project)

    def test_load(self, project):
        spec = load_brandspec(project)
        assert spec.namespace == "o-example"
        assert spec.colors["brand"].allow_tones
        assert spec.colors["ink"].value == "#262a33"
        assert spec.tones == {"brand": [40.0]}
        assert spec.mixes["brand-wash"].percentage == 20
        assert spec.usecases["quote"].deprecated == "use stripe"

    def test_missing_file_uses_defaults(self, tmp_path):
        assert not brandspec_exists(tmp_path)
        assert load_brandspec(tmp_path) == create_default_brandspec()

    def test_missing_file_without_defaults(self, tmp_path):
        with pytest.raises(BrandSpecError, match="not found"):
            load_brandspec(tmp_path, use_defaults=False)

    def test_empty_file_uses_defaults(self, tmp_path):
        (tmp_path / "brandspec.yaml").write_text("", encoding="utf-8")
        assert load_brandspec(tmp_path) == create_default_brandspec()

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / "brandspec.yaml").write_text("colors: [unclosed\n", encoding="utf-8")
        with pytest.raises(BrandSpecError, match="Invalid YAML"):
            load_brandspec(tmp_path)

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "brandspec.yaml").write_text(
            "mixes:\n  wash:\n    percentage: 200\n", encoding="utf-8"
        )
        with pytest.raises(BrandSpecError, match="Invalid BrandSpec schema"):
            load_brandspec(tmp_path)

    def test_top_level_must_be_a_mapping(self, tmp_path):
        (tmp_path / "brandspec.yaml").write_text("- brand\n", encoding="utf-8")
        with pytest.raises(BrandSpecError, match="mapping"):
            load_brandspec(tmp_path)

    def test_save_and_reload(self, project, tmp_path_factory):
        spec = load_brandspec(project)
        target = tmp_path_factory.mktemp("saved")
        path = save_brandspec(target, spec)
        assert path == target / "brandspec.yaml"
        assert "brand: master" not in path.read_text(encoding="utf-8")
        assert load_brandspec(target) == spec


class TestApplyBrandSpec:
    """Test registering a BrandSpec into a build context."""

    def test_apply(self, project):
        ctx = build_context_from_brandspec(project)
        assert ctx.brand == "master"
        assert ctx.get_by_name("o-example/brand").to_hex() == "#0d7680"
        assert ctx.palette.exists("o-example/brand-40")
        assert ctx.get_by_name("o-example/brand-wash").to_hex() == "#cfd8d1"
        assert ctx.get_usecase("o-example/stripe").colors == {
            Property.BACKGROUND: "o-example/brand"
        }

    def test_references_fall_back_to_built_ins(self, project):
        ctx = build_context_from_brandspec(project)
        # "paper" is not in o-example, so the mix used the built-in.
        assert ctx.get_by_name("o-example/brand-wash") == ctx.mix("teal", "paper", 20)

    def test_resolution_after_apply(self, project):
        ctx = build_context_from_brandspec(project)
        result = ctx.resolve_for("o-example/stripe")
        assert result[Property.TEXT].synthesized
        assert result[Property.TEXT].value.to_hex() == "#ffffff"

    def test_deprecated_usecase(self, project):
        ctx = build_context_from_brandspec(project)
        ctx.resolve_color_for("o-example/quote", "text")
        assert ctx.warnings == ["Usecase 'o-example/quote' (text) is deprecated: use stripe"]

    def test_unknown_reference(self):
        spec = BrandSpecYAML(
            namespace="o-example",
            usecases={"stripe": UsecaseSpec(background="missing")},
        )
        with pytest.raises(NotFound):
            apply_brandspec(BuildContext.create(), spec)

    def test_default_namespace_override(self):
        spec = BrandSpecYAML(colors={"paper": ColorSpec(value="#ffffff")})
        ctx = apply_brandspec(BuildContext.create(), spec)
        assert ctx.get_by_name("paper").to_hex() == "#ffffff"

    def test_brand_from_spec(self, tmp_path):
        (tmp_path / "brandspec.yaml").write_text("brand: whitelabel\n", encoding="utf-8")
        ctx = build_context_from_brandspec(tmp_path)
        assert ctx.brand == "whitelabel"
        assert not ctx.palette.exists("paper")
