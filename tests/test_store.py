"""
Tests for the token store.

Tests cover:
- Node classification into the tagged union
- TokenStore construction, lookup and validation
- CSS variable naming
- TokenStoreLoader discovery and YAML loading
"""

from pathlib import Path

import pytest
import yaml

from mond_tokens.constants import Theme
from mond_tokens.models import (
    BrandTheme,
    GroupNode,
    PlainLeaf,
    StoreMetadata,
    ThemeVariantLeaf,
    TokenStore,
    TokenStoreError,
    build_node,
    css_var_name,
)
from mond_tokens.tokens import DEFAULT_TOKENS, TokenStoreLoader, default_store


class TestBuildNode:
    """Tests for raw value classification."""

    def test_string_is_plain_leaf(self):
        """Strings become plain leaves."""
        node = build_node("#ffffff")
        assert isinstance(node, PlainLeaf)
        assert node.value == "#ffffff"

    def test_number_is_coerced(self):
        """Numbers from YAML are kept as strings."""
        node = build_node(700)
        assert isinstance(node, PlainLeaf)
        assert node.value == "700"

    def test_light_dark_mapping_is_variant_leaf(self):
        """A mapping with string light/dark values is a theme-variant leaf."""
        node = build_node({"light": "gray.900", "dark": "gray.100"})
        assert isinstance(node, ThemeVariantLeaf)
        assert node.value_for(Theme.LIGHT) == "gray.900"
        assert node.value_for(Theme.DARK) == "gray.100"

    def test_single_theme_key_is_variant_leaf(self):
        """A leaf defining only one theme is still a variant leaf."""
        node = build_node({"light": "#ffffff"})
        assert isinstance(node, ThemeVariantLeaf)
        assert node.value_for(Theme.DARK) is None

    def test_nested_mapping_is_group(self):
        """Other mappings become groups."""
        node = build_node({"text": {"primary": "#000000"}})
        assert isinstance(node, GroupNode)
        child = node.get("text")
        assert isinstance(child, GroupNode)
        assert isinstance(child.get("primary"), PlainLeaf)

    def test_group_with_light_dark_subgroups(self):
        """Children named light/dark holding groups do not make a leaf."""
        node = build_node({"light": {"bg": "#ffffff"}, "dark": {"bg": "#000000"}})
        assert isinstance(node, GroupNode)
        assert isinstance(node.get("light"), GroupNode)

    def test_mixed_theme_and_other_keys_rejected(self):
        """Theme keys mixed with other keys are malformed."""
        with pytest.raises(TokenStoreError, match="unexpected keys"):
            build_node({"light": "#fff", "dark": "#000", "hover": "#111"})

    def test_empty_value_rejected(self):
        """Empty strings are malformed."""
        with pytest.raises(TokenStoreError):
            build_node({"text": {"primary": "  "}})

    def test_list_rejected(self):
        """Lists are not token values."""
        with pytest.raises(TokenStoreError, match="Unsupported"):
            build_node(["#fff"])


class TestCSSVarName:
    """Tests for variable name derivation."""

    def test_dots_become_hyphens(self):
        """Path segments are joined with hyphens."""
        assert css_var_name("text", "primary") == "--mond-text-primary"

    def test_camel_case_becomes_kebab(self):
        """camelCase segments are split."""
        assert (
            css_var_name("brand", "interactive", "backgroundHover")
            == "--mond-brand-interactive-background-hover"
        )

    def test_numeric_keys(self):
        """Numeric scale keys are kept."""
        assert css_var_name("spacing", "16") == "--mond-spacing-16"
        assert css_var_name("spacing", "0.5") == "--mond-spacing-0-5"


class TestTokenStore:
    """Tests for TokenStore model."""

    def test_minimal_store(self, minimal_store: TokenStore):
        """Missing categories default to empty."""
        assert minimal_store.name == "mond"
        assert minimal_store.spacing == {"4": "1rem"}
        assert minimal_store.radii == {}
        assert minimal_store.semantic_paths() == ["text.primary"]

    def test_find(self, minimal_store: TokenStore):
        """Finds nodes by dotted path or segments."""
        assert isinstance(minimal_store.find("text.primary"), ThemeVariantLeaf)
        assert isinstance(minimal_store.find(["text"]), GroupNode)
        assert minimal_store.find("text.missing") is None
        assert minimal_store.find("text.primary.light") is None
        assert minimal_store.find("") is None

    def test_camel_case_aliases(self):
        """Accepts the camelCase category names of the token source."""
        store = TokenStore.from_dict({"fontSizes": {"base": "1rem"}, "lineHeights": {"none": 1}})
        assert store.font_sizes == {"base": "1rem"}
        assert store.line_heights == {"none": "1"}

    def test_numeric_keys_coerced(self):
        """Integer keys and values from YAML become strings."""
        store = TokenStore.from_dict(
            {"colors": {"gray": {900: "#0f172a"}}, "fontWeights": {"bold": 700}}
        )
        assert store.lookup_color("gray.900") == "#0f172a"
        assert store.font_weights == {"bold": "700"}

    def test_lookup_color(self):
        """Palette lookup by family.shade."""
        store = TokenStore.from_dict({"colors": {"blue": {"500": "#0ea5e9"}}})
        assert store.lookup_color("blue.500") == "#0ea5e9"
        assert store.lookup_color("blue.950") is None
        assert store.lookup_color("teal.500") is None

    def test_name_collision_rejected(self):
        """Paths that map to the same variable are rejected."""
        with pytest.raises(TokenStoreError, match="both map to"):
            TokenStore.from_dict(
                {
                    "semantic": {
                        "text": {"backgroundHover": "#fff", "background-hover": "#000"},
                    }
                }
            )

    def test_invalid_name_rejected(self):
        """Keys that cannot form a valid variable name are rejected."""
        with pytest.raises(TokenStoreError):
            TokenStore.from_dict({"semantic": {"text": {"prim/ary": "#fff"}}})

    def test_semantic_scale_collision_rejected(self):
        """A semantic token cannot share a name with a scale entry."""
        with pytest.raises(TokenStoreError, match="--mond-spacing-4"):
            TokenStore.from_dict(
                {"semantic": {"spacing": {"4": "2rem"}}, "spacing": {"4": "1rem"}}
            )

    def test_scale_key_collision_rejected(self):
        """Scale keys that kebab-case to the same name are rejected."""
        with pytest.raises(TokenStoreError, match="both map to"):
            TokenStore.from_dict({"spacing": {"0.5": "0.125rem", "0_5": "0.125rem"}})

    def test_semantic_brand_collision_rejected(self):
        """A semantic token cannot shadow a flattened brand color."""
        with pytest.raises(TokenStoreError, match="--mond-color-brand-primary-500"):
            TokenStore.from_dict(
                {
                    "brand": {"primary": {"500": "#0ea5e9"}},
                    "semantic": {"color": {"brand": {"primary": {"500": "#ff0000"}}}},
                }
            )

    def test_distinct_categories_accepted(self):
        """Semantic groups beside same-named scale categories are fine when names differ."""
        store = TokenStore.from_dict(
            {"semantic": {"spacing": {"gutter": "2rem"}}, "spacing": {"4": "1rem"}}
        )
        assert store.find("spacing.gutter") is not None

    def test_leaf_root_rejected(self):
        """The semantic root must be a group."""
        with pytest.raises(TokenStoreError):
            TokenStore.from_dict({"semantic": {"light": "#fff", "dark": "#000"}})

    def test_immutable(self, minimal_store: TokenStore):
        """Stores are frozen."""
        with pytest.raises(Exception):
            minimal_store.name = "changed"

    def test_static_scales(self, minimal_store: TokenStore):
        """Scales are keyed by variable category."""
        scales = minimal_store.static_scales()
        assert list(scales) == [
            "spacing",
            "radii",
            "shadow",
            "font-family",
            "font-size",
            "font-weight",
            "line-height",
            "letter-spacing",
        ]
        assert scales["spacing"] == {"4": "1rem"}

    def test_yaml_dict_round_trip(self, alias_store: TokenStore):
        """to_yaml_dict output rebuilds an equal store."""
        rebuilt = TokenStore.from_dict(alias_store.to_yaml_dict())
        assert rebuilt == alias_store

    def test_metadata(self):
        """Metadata summarizes a store."""
        meta = StoreMetadata.from_store(default_store())
        assert meta.name == "mond"
        assert meta.semantic_tokens == len(default_store().semantic_paths())
        assert "primary" in meta.brand_families
        assert meta.scale_tokens > 50


class TestDefaultStore:
    """Tests for the built-in Mond tokens."""

    def test_fixture_values(self):
        """Known regression values."""
        store = default_store()
        assert store.spacing["4"] == "1rem"
        assert store.radii["full"] == "9999px"
        assert store.radii["none"] == "0"

    def test_copies_are_independent(self):
        """Changing one copy of the built-in store leaves later copies intact."""
        store = default_store()
        store.spacing["4"] = "99rem"
        store.brand["primary"]["600"] = "#000000"
        store.semantic.children.pop("text")

        fresh = default_store()
        assert fresh is not store
        assert fresh.spacing["4"] == "1rem"
        assert fresh.brand["primary"]["600"] == "#0284c7"
        assert fresh.find("text.primary") is not None
        assert fresh == default_store()

    def test_source_untouched(self):
        """Building the store does not mutate the literal."""
        assert DEFAULT_TOKENS["semantic"]["text"]["primary"] == {
            "light": "gray.900",
            "dark": "gray.100",
        }


class TestBrandTheme:
    """Tests for BrandTheme model."""

    def test_create(self):
        """Can create a brand with numeric shade keys."""
        brand = BrandTheme.model_validate(
            {"id": "Cypher", "name": "Cypher", "brand": {"primary": {600: "#00ff94"}}}
        )
        assert brand.id == "cypher"
        assert brand.brand["primary"]["600"] == "#00ff94"

    def test_invalid_id(self):
        """Ids must be identifiers."""
        with pytest.raises(ValueError):
            BrandTheme(id="bad id!", name="Bad")

    @pytest.mark.parametrize(
        "name", ["Evil */ body { color: red } /*", "Brace {", "Brace }", "Open /* comment"]
    )
    def test_name_unsafe_in_header(self, name: str):
        """Names that would break out of the header comment are rejected."""
        with pytest.raises(ValueError, match="comment markers or braces"):
            BrandTheme(id="evil", name=name)

    def test_name_with_punctuation(self):
        """Ordinary punctuation is allowed."""
        assert BrandTheme(id="acme", name="Acme * Co. (2026)").name == "Acme * Co. (2026)"


class TestTokenStoreLoader:
    """Tests for TokenStoreLoader."""

    def _write(self, path: Path, data: dict) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(data))
        return path

    def test_builtin_available_without_project(self):
        """The built-in store is always listed."""
        loader = TokenStoreLoader()
        names = [s.name for s in loader.list_stores()]
        assert names == ["mond"]
        assert loader.get_store("mond") == default_store()
        assert loader.get_store("mond") is loader.get_store("mond")

    def test_unknown_store(self, temp_dir: Path):
        """Unknown names return None."""
        loader = TokenStoreLoader(project_path=temp_dir)
        assert loader.get_store("nonexistent") is None

    def test_load_project_store(self, temp_dir: Path):
        """Loads YAML stores with integer keys."""
        self._write(
            temp_dir / "acme.yaml",
            {
                "name": "acme",
                "colors": {"gray": {900: "#111111"}},
                "semantic": {"text": {"primary": {"light": "gray.900", "dark": "#eeeeee"}}},
                "spacing": {4: "1rem"},
            },
        )
        loader = TokenStoreLoader(project_path=temp_dir)
        store = loader.get_store("acme")
        assert store is not None
        assert store.lookup_color("gray.900") == "#111111"
        assert store.spacing == {"4": "1rem"}
        assert {s.name for s in loader.list_stores()} == {"mond", "acme"}

    def test_project_overrides_builtin(self, temp_dir: Path):
        """A project store named 'mond' replaces the built-in."""
        self._write(temp_dir / "mond.yaml", {"name": "mond", "description": "custom"})
        loader = TokenStoreLoader(project_path=temp_dir)
        store = loader.get_store("mond")
        assert store is not None
        assert store.description == "custom"

    def test_name_defaults_to_file_stem(self, temp_dir: Path):
        """Files without a name use the stem."""
        path = self._write(temp_dir / "nameless.yaml", {"spacing": {"1": "0.25rem"}})
        store = TokenStoreLoader().load_file(path)
        assert store.name == "nameless"

    def test_malformed_file_raises(self, temp_dir: Path):
        """load_file raises on malformed content."""
        path = temp_dir / "bad.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(TokenStoreError):
            TokenStoreLoader().load_file(path)

    def test_malformed_file_skipped_in_listing(self, temp_dir: Path):
        """Malformed project files are ignored when listing."""
        (temp_dir / "bad.yaml").write_text("semantic: [1, 2]\n")
        loader = TokenStoreLoader(project_path=temp_dir)
        assert [s.name for s in loader.list_stores()] == ["mond"]
        assert loader.get_store("bad") is None

    def test_copy_to_project(self, temp_dir: Path):
        """The built-in store can be copied and reloaded."""
        loader = TokenStoreLoader(project_path=temp_dir / "tokens")
        path = loader.copy_to_project("mond")
        assert path is not None and path.exists()

        loader.clear_cache()
        copied = loader.get_store("mond")
        assert copied == default_store()

    def test_copy_twice_fails(self, temp_dir: Path):
        """Copying over an existing project store is refused."""
        loader = TokenStoreLoader(project_path=temp_dir)
        loader.copy_to_project("mond")
        with pytest.raises(ValueError):
            loader.copy_to_project("mond")

    def test_copy_unknown(self, temp_dir: Path):
        """Only built-in stores can be copied."""
        loader = TokenStoreLoader(project_path=temp_dir)
        assert loader.copy_to_project("other") is None

    def test_copy_without_project_path(self):
        """Copying needs a project directory."""
        with pytest.raises(ValueError):
            TokenStoreLoader().copy_to_project("mond")

    def test_brands(self, temp_dir: Path):
        """Loads brand themes by stem."""
        self._write(
            temp_dir / "cypher.yaml",
            {"name": "Cypher", "brand": {"primary": {600: "#00ff94"}}},
        )
        loader = TokenStoreLoader(brands_path=temp_dir)
        brand = loader.get_brand("cypher")
        assert brand is not None
        assert brand.id == "cypher"
        assert brand.name == "Cypher"
        assert [b.id for b in loader.list_brands()] == ["cypher"]
        assert loader.get_brand("missing") is None

    def test_malformed_brand(self, temp_dir: Path):
        """Malformed brand files raise TokenStoreError."""
        path = temp_dir / "bad.yaml"
        path.write_text("id: 'bad id!'\nname: Bad\n")
        with pytest.raises(TokenStoreError):
            TokenStoreLoader().load_brand_file(path)

    def test_brand_name_breaking_header(self, temp_dir: Path):
        """Brand files whose name would end the header comment are rejected."""
        path = temp_dir / "evil.yaml"
        path.write_text(yaml.safe_dump({"name": "Evil */ body { color: red } /*"}))
        with pytest.raises(TokenStoreError):
            TokenStoreLoader().load_brand_file(path)
