"""
Mond Tokens - design token resolution and CSS variable generation.

Compiles a hierarchical store of semantic design tokens, some of which
vary by theme, into one deterministic stylesheet of --mond-* custom
properties switched at runtime by a data-theme attribute.
"""

from mond_tokens.compiler import CSSGenerator, GenerationResult, generate, generate_css_variables
from mond_tokens.constants import Theme
from mond_tokens.models import BrandTheme, TokenStore, TokenStoreError
from mond_tokens.resolver import (
    ResolutionError,
    SemanticResolver,
    create_theme_resolver,
    resolve_semantic_token,
)
from mond_tokens.tokens import TokenStoreLoader, default_store

__all__ = [
    "BrandTheme",
    "CSSGenerator",
    "GenerationResult",
    "ResolutionError",
    "SemanticResolver",
    "Theme",
    "TokenStore",
    "TokenStoreError",
    "TokenStoreLoader",
    "create_theme_resolver",
    "default_store",
    "generate",
    "generate_css_variables",
    "resolve_semantic_token",
]
