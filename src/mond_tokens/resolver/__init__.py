"""
Token resolution - turns semantic token paths into CSS values.

Used at build time by the stylesheet generator and at render time
through create_theme_resolver().
"""

from mond_tokens.resolver.resolver import (
    Resolution,
    ResolutionError,
    SemanticResolver,
    create_theme_resolver,
    is_css_literal,
    is_reference,
    resolve_semantic_token,
)

__all__ = [
    "Resolution",
    "ResolutionError",
    "SemanticResolver",
    "create_theme_resolver",
    "is_css_literal",
    "is_reference",
    "resolve_semantic_token",
]
