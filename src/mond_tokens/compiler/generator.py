"""
CSS generator - compiles a token store into the theme stylesheet.

The pipeline:
    brand palette → light collection
    semantic tree → light collection (light pass)
    semantic tree → dark collection (dark pass)
    static scales → light collection
    both collections → sorted :root / [data-theme="dark"] blocks
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from mond_tokens.compiler.collection import CSSVariableSet, SkippedToken
from mond_tokens.compiler.flattener import flatten_brand_colors, flatten_static_scales
from mond_tokens.compiler.formatter import format_block, format_header
from mond_tokens.compiler.traverser import traverse
from mond_tokens.constants import DARK_SELECTOR, DEFAULT_INDENT, LIGHT_SELECTOR, Theme
from mond_tokens.models.store import BrandTheme, TokenStore
from mond_tokens.resolver import SemanticResolver

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Both theme collections produced by one generation run."""

    light: CSSVariableSet
    dark: CSSVariableSet

    @property
    def variable_count(self) -> int:
        """Total declarations across both blocks."""
        return len(self.light) + len(self.dark)

    @property
    def skipped(self) -> list[SkippedToken]:
        """Tokens omitted from either block."""
        return [*self.light.skipped, *self.dark.skipped]

    def for_theme(self, theme: Theme | str) -> CSSVariableSet:
        """Get the collection for a theme."""
        return self.light if Theme(theme) == Theme.LIGHT else self.dark


class CSSGenerator:
    """
    Generates the theme stylesheet from a token store.

    Each call builds fresh collections; the generator holds no state
    between runs, so one instance may be reused.
    """

    def __init__(
        self,
        store: TokenStore | None = None,
        brand: BrandTheme | None = None,
        indent: str = DEFAULT_INDENT,
    ):
        """
        Initialize the generator.

        Args:
            store: Token store (defaults to the built-in Mond store)
            brand: Optional brand theme overriding the brand palette
            indent: Indentation for declarations
        """
        self.resolver = SemanticResolver(store, brand)
        self.store = self.resolver.store
        self.brand = brand
        self.indent = indent

    def brand_palette(self) -> dict[str, dict[str, str]]:
        """The store's brand palette with brand theme overrides applied."""
        palette = {family: dict(shades) for family, shades in self.store.brand.items()}
        if self.brand is not None:
            for family, shades in self.brand.brand.items():
                palette.setdefault(family, {}).update(shades)
        return palette

    def build(self) -> GenerationResult:
        """
        Build the light and dark variable collections.

        Returns:
            GenerationResult with both collections and skipped tokens
        """
        light = CSSVariableSet(Theme.LIGHT)
        dark = CSSVariableSet(Theme.DARK)

        # Base brand colors first, ahead of the semantic tokens using them
        flatten_brand_colors(self.brand_palette(), light)

        traverse(self.store.semantic, (), Theme.LIGHT, light, self.resolver)
        traverse(self.store.semantic, (), Theme.DARK, dark, self.resolver)

        flatten_static_scales(self.store, light)

        result = GenerationResult(light=light, dark=dark)
        if result.skipped:
            logger.info(f"Skipped {len(result.skipped)} unresolvable token(s)")
        return result

    def render(self, result: GenerationResult, generated_at: datetime | None = None) -> str:
        """
        Render collections as the final stylesheet.

        Args:
            result: Collections from build()
            generated_at: Timestamp for the header (defaults to now, UTC)

        Returns:
            Complete CSS text
        """
        timestamp = generated_at or datetime.now(UTC)
        brand_name = self.brand.name if self.brand is not None else None
        sections = [
            format_header(timestamp, brand_name),
            format_block(LIGHT_SELECTOR, result.light, self.indent),
            format_block(DARK_SELECTOR, result.dark, self.indent),
        ]
        return "\n\n".join(sections) + "\n"

    def generate(self, generated_at: datetime | None = None) -> str:
        """Build and render the stylesheet."""
        return self.render(self.build(), generated_at)


def generate_css_variables(
    store: TokenStore | None = None, brand: BrandTheme | None = None
) -> GenerationResult:
    """Build the light and dark collections for a store."""
    return CSSGenerator(store, brand).build()


def generate(
    store: TokenStore | None = None,
    *,
    brand: BrandTheme | None = None,
    generated_at: datetime | None = None,
) -> str:
    """
    Generate the complete theme stylesheet.

    Args:
        store: Token store (defaults to the built-in Mond store)
        brand: Optional brand theme
        generated_at: Header timestamp (defaults to now)

    Returns:
        CSS text with a header and the light and dark rule blocks
    """
    return CSSGenerator(store, brand).generate(generated_at)
