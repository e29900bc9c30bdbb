"""
Token store models - the immutable input to CSS generation.

The semantic tree is classified once, at construction time, into an
explicit tagged union:

- GroupNode: a named grouping of more nodes
- ThemeVariantLeaf: a value per theme (light/dark)
- PlainLeaf: a single theme-independent value

Traversal dispatches on the node type, so a group that happens to
contain children called 'light' and 'dark' is never mistaken for a leaf.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping, Sequence
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from mond_tokens.constants import (
    BRAND_COLOR_CATEGORY,
    CSS_PREFIX,
    CSS_VAR_PATTERN,
    DEFAULT_STORE_NAME,
    HEADER_UNSAFE_MARKERS,
    STATIC_SCALE_PREFIXES,
    BrandSchemaVersion,
    StoreSchemaVersion,
    Theme,
)

_THEME_KEYS = frozenset(theme.value for theme in Theme)
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_SEPARATORS = re.compile(r"[._\s]+")


class TokenStoreError(ValueError):
    """Raised when token definitions are structurally malformed."""


def to_kebab(segment: str) -> str:
    """Convert a path segment to kebab-case ('backgroundHover' -> 'background-hover')."""
    return _SEPARATORS.sub("-", _CAMEL_BOUNDARY.sub("-", segment)).lower()


def css_var_name(*segments: str) -> str:
    """
    Derive the CSS custom property name for a token path.

    Args:
        segments: Path segments, e.g. ("text", "primary")

    Returns:
        Variable name, e.g. "--mond-text-primary"
    """
    return CSS_PREFIX + "-".join(to_kebab(segment) for segment in segments)


def split_path(path: str | Sequence[str]) -> tuple[str, ...]:
    """Normalize a dotted path or segment sequence to a tuple of segments."""
    if isinstance(path, str):
        return tuple(part for part in path.split(".") if part)
    return tuple(path)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def _stringify(value: Any) -> Any:
    """Recursively coerce mapping keys and numeric leaves to strings (YAML gives ints)."""
    if isinstance(value, Mapping):
        return {str(k): _stringify(v) for k, v in value.items()}
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class GroupNode(BaseModel):
    """Intermediate grouping node in the semantic tree."""

    kind: Literal["group"] = "group"
    children: dict[str, TokenNode] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def get(self, name: str) -> TokenNode | None:
        """Get a direct child by name."""
        return self.children.get(name)


class ThemeVariantLeaf(BaseModel):
    """A token with a distinct value (literal or reference) per theme."""

    kind: Literal["variant"] = "variant"
    light: str | None = None
    dark: str | None = None

    model_config = {"frozen": True}

    def value_for(self, theme: Theme) -> str | None:
        """Get the raw value for a theme, or None if the theme is not defined."""
        return self.light if theme == Theme.LIGHT else self.dark


class PlainLeaf(BaseModel):
    """A theme-independent token value (literal or reference)."""

    kind: Literal["plain"] = "plain"
    value: str

    model_config = {"frozen": True}


TokenNode = Annotated[GroupNode | ThemeVariantLeaf | PlainLeaf, Field(discriminator="kind")]

GroupNode.model_rebuild()


def build_node(raw: Any, path: tuple[str, ...] = ()) -> GroupNode | ThemeVariantLeaf | PlainLeaf:
    """
    Classify a raw nested literal into a typed token node.

    Args:
        raw: String, number, or mapping from the token source
        path: Path of this node (for error messages)

    Returns:
        The typed node

    Raises:
        TokenStoreError: If the value cannot be classified
    """
    dotted = ".".join(path) or "<root>"

    if isinstance(raw, (GroupNode, ThemeVariantLeaf, PlainLeaf)):
        return raw

    if _is_scalar(raw):
        value = str(raw)
        if not value.strip():
            raise TokenStoreError(f"Empty token value at '{dotted}'")
        return PlainLeaf(value=value)

    if isinstance(raw, Mapping):
        keys = {str(k) for k in raw}
        theme_keys = keys & _THEME_KEYS
        if theme_keys and all(_is_scalar(raw[k]) for k in theme_keys):
            extra = keys - _THEME_KEYS
            if extra:
                raise TokenStoreError(
                    f"Theme-variant token '{dotted}' has unexpected keys: {sorted(extra)}"
                )
            values = {k: str(raw[k]) for k in theme_keys}
            for theme_key, value in values.items():
                if not value.strip():
                    raise TokenStoreError(f"Empty '{theme_key}' value at '{dotted}'")
            return ThemeVariantLeaf(**values)

        return GroupNode(
            children={str(k): build_node(v, path + (str(k),)) for k, v in raw.items()}
        )

    raise TokenStoreError(f"Unsupported token value of type {type(raw).__name__} at '{dotted}'")


def iter_leaves(
    node: GroupNode, prefix: tuple[str, ...] = ()
) -> Iterator[tuple[tuple[str, ...], ThemeVariantLeaf | PlainLeaf]]:
    """Yield (path, leaf) for every leaf below a group, depth first."""
    for name, child in node.children.items():
        path = prefix + (name,)
        if isinstance(child, GroupNode):
            yield from iter_leaves(child, path)
        else:
            yield path, child


class TokenStore(BaseModel):
    """
    The complete set of design tokens.

    Contains raw color palettes, the brand palette, the semantic tree,
    and the theme-independent scales.
    """

    # Metadata
    schema_version: StoreSchemaVersion = Field("tokens/v1", alias="schema")
    name: str = Field(DEFAULT_STORE_NAME, description="Store name")
    description: str = Field("", description="Store description")

    # Raw palettes: family -> shade -> color
    colors: dict[str, dict[str, str]] = Field(default_factory=dict)
    brand: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        description="Brand palette, overridable per brand theme",
    )

    # Semantic tree
    semantic: GroupNode = Field(default_factory=GroupNode)

    # Theme-independent scales
    spacing: dict[str, str] = Field(default_factory=dict)
    radii: dict[str, str] = Field(default_factory=dict)
    shadows: dict[str, str] = Field(default_factory=dict)
    font_families: dict[str, str] = Field(default_factory=dict, alias="fontFamilies")
    font_sizes: dict[str, str] = Field(default_factory=dict, alias="fontSizes")
    font_weights: dict[str, str] = Field(default_factory=dict, alias="fontWeights")
    line_heights: dict[str, str] = Field(default_factory=dict, alias="lineHeights")
    letter_spacings: dict[str, str] = Field(default_factory=dict, alias="letterSpacings")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator(
        "colors",
        "brand",
        "spacing",
        "radii",
        "shadows",
        "font_families",
        "font_sizes",
        "font_weights",
        "line_heights",
        "letter_spacings",
        mode="before",
    )
    @classmethod
    def coerce_scalars(cls, v: Any) -> Any:
        """Accept numeric keys and values as written in YAML."""
        return _stringify(v) if v is not None else {}

    @field_validator("semantic", mode="before")
    @classmethod
    def classify_semantic(cls, v: Any) -> Any:
        """Build the tagged-union tree from a raw nested mapping."""
        if v is None:
            return GroupNode()
        if isinstance(v, GroupNode):
            return v
        if not isinstance(v, Mapping):
            raise TokenStoreError("The semantic tree must be a mapping")
        node = build_node(v)
        if not isinstance(node, GroupNode):
            raise TokenStoreError("The semantic tree root must be a group, not a leaf")
        return node

    @model_validator(mode="after")
    def check_variable_names(self) -> TokenStore:
        """Ensure every derived variable name is valid and distinct across the store."""
        seen: dict[str, str] = {}

        def claim(name: str, source: str) -> None:
            if not CSS_VAR_PATTERN.match(name):
                raise TokenStoreError(f"{source} yields invalid variable name '{name}'")
            if name in seen:
                raise TokenStoreError(f"{seen[name]} and {source} both map to '{name}'")
            seen[name] = source

        for family, shades in self.brand.items():
            for shade in shades:
                claim(
                    css_var_name(BRAND_COLOR_CATEGORY, family, shade),
                    f"Brand color '{family}.{shade}'",
                )

        for field_name, category in STATIC_SCALE_PREFIXES.items():
            for key in getattr(self, field_name):
                claim(css_var_name(category, key), f"Scale entry '{field_name}.{key}'")

        for path, _leaf in iter_leaves(self.semantic):
            claim(css_var_name(*path), f"Token '{'.'.join(path)}'")
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TokenStore:
        """
        Build a store from a nested literal structure.

        Raises:
            TokenStoreError: If the structure is malformed
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise TokenStoreError(str(e)) from e

    def find(self, path: str | Sequence[str]) -> GroupNode | ThemeVariantLeaf | PlainLeaf | None:
        """
        Look up a node in the semantic tree.

        Args:
            path: Dotted path ("text.primary") or segments

        Returns:
            The node, or None if any segment is missing
        """
        segments = split_path(path)
        if not segments:
            return None
        node: GroupNode | ThemeVariantLeaf | PlainLeaf = self.semantic
        for segment in segments:
            if not isinstance(node, GroupNode):
                return None
            child = node.get(segment)
            if child is None:
                return None
            node = child
        return node

    def lookup_color(self, reference: str) -> str | None:
        """Look up 'family.shade' in the raw palettes."""
        family, _, shade = reference.partition(".")
        return self.colors.get(family, {}).get(shade)

    def semantic_paths(self) -> list[str]:
        """All dotted leaf paths in the semantic tree."""
        return [".".join(path) for path, _leaf in iter_leaves(self.semantic)]

    def static_scales(self) -> dict[str, dict[str, str]]:
        """Theme-independent scales keyed by CSS variable category."""
        return {
            category: getattr(self, field_name)
            for field_name, category in STATIC_SCALE_PREFIXES.items()
        }

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""

        def dump(node: GroupNode | ThemeVariantLeaf | PlainLeaf) -> Any:
            if isinstance(node, GroupNode):
                return {name: dump(child) for name, child in node.children.items()}
            if isinstance(node, ThemeVariantLeaf):
                return {
                    theme.value: node.value_for(theme)
                    for theme in Theme
                    if node.value_for(theme) is not None
                }
            return node.value

        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "colors": self.colors,
            "brand": self.brand,
            "semantic": dump(self.semantic),
            "spacing": self.spacing,
            "radii": self.radii,
            "shadows": self.shadows,
            "fontFamilies": self.font_families,
            "fontSizes": self.font_sizes,
            "fontWeights": self.font_weights,
            "lineHeights": self.line_heights,
            "letterSpacings": self.letter_spacings,
        }


class BrandTheme(BaseModel):
    """
    A brand identity that overrides the store's brand palette.

    References of the form 'brand.<family>.<shade>' resolve against
    this palette first.
    """

    schema_version: BrandSchemaVersion = Field("brand/v1", alias="schema")
    id: str = Field(..., description="Brand identifier")
    name: str = Field(..., description="Display name")
    description: str = Field("", description="Brand description")
    brand: dict[str, dict[str, str]] = Field(default_factory=dict)

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("brand", mode="before")
    @classmethod
    def coerce_scalars(cls, v: Any) -> Any:
        """Accept numeric shade keys as written in YAML."""
        return _stringify(v) if v is not None else {}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure the name is safe inside the stylesheet header comment."""
        if any(marker in v for marker in HEADER_UNSAFE_MARKERS):
            raise ValueError(f"Brand name may not contain comment markers or braces: {v!r}")
        return v

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Ensure brand id is a valid identifier."""
        if not v or not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError(f"Invalid brand id: {v}")
        return v.lower()


class StoreMetadata(BaseModel):
    """Lightweight metadata for listing token stores."""

    name: str
    description: str
    semantic_tokens: int
    scale_tokens: int
    brand_families: list[str]

    model_config = {"frozen": True}

    @classmethod
    def from_store(cls, store: TokenStore) -> StoreMetadata:
        """Create metadata from a store."""
        return cls(
            name=store.name,
            description=store.description,
            semantic_tokens=len(store.semantic_paths()),
            scale_tokens=sum(len(scale) for scale in store.static_scales().values()),
            brand_families=sorted(store.brand),
        )
