#!/usr/bin/env python3
"""
Example: Generating the theme stylesheet.

This demonstrates how semantic tokens resolve per theme, how a brand theme
overrides the brand palette, and how the stylesheet is assembled.

Usage:
    python examples/generate_theme.py
"""

import tempfile
from pathlib import Path

from mond_tokens import (
    BrandTheme,
    CSSGenerator,
    SemanticResolver,
    Theme,
    TokenStoreLoader,
    create_theme_resolver,
)


def main() -> None:
    """Demonstrate token resolution and stylesheet generation."""
    print("Mond Design Tokens Demo")
    print("=" * 40)
    print()

    with tempfile.TemporaryDirectory() as tmp:
        loader = TokenStoreLoader(project_path=Path(tmp) / "tokens")

        # List available stores
        print("Available stores:")
        for meta in loader.list_stores():
            print(f"  {meta.name}: {meta.description}")
            print(f"    Semantic tokens: {meta.semantic_tokens}, Scale tokens: {meta.scale_tokens}")
        print()

        store = loader.get_store("mond")
        if not store:
            print("Failed to load store")
            return

        # Resolve a few tokens in both themes
        resolver = SemanticResolver(store)
        print("Resolved tokens:")
        for path in ["text.primary", "text.accent", "surface.gradient", "effects.focus.ring"]:
            light = resolver.resolve(path, Theme.LIGHT)
            dark = resolver.resolve(path, Theme.DARK)
            print(f"  {path}")
            print(f"    light: {light.value if light.ok else light.error}")
            print(f"    dark:  {dark.value if dark.ok else dark.error}")
        print()

        # Runtime resolver for inline styles
        dark = create_theme_resolver("dark", store)
        print(f"Runtime (dark) border.default: {dark('border.default')}")
        print()

        # Generate with a brand theme
        cypher = BrandTheme(
            id="cypher",
            name="Cypher",
            description="Neon green brand",
            brand={"primary": {"500": "#00ff94", "600": "#00cc76", "700": "#00a35e"}},
        )
        generator = CSSGenerator(store, cypher)
        result = generator.build()
        print(f"Brand '{cypher.name}':")
        print(f"  Light variables: {len(result.light)}")
        print(f"  Dark variables:  {len(result.dark)}")
        print(f"  Skipped:         {len(result.skipped)}")
        print(f"  brand-interactive-background: {result.light.get('--mond-brand-interactive-background')}")
        print()

        output = Path(tmp) / "theme.css"
        css = generator.render(result)
        output.write_text(css, encoding="utf-8")
        print(f"Wrote {output.name} ({len(css) / 1024:.1f} KB)")
        print()
        print("\n".join(css.splitlines()[:16]))
        print("  ...")


if __name__ == "__main__":
    main()
