"""
Compilation pipeline - transforms a token store into a CSS stylesheet.

The pipeline:
    TokenStore (immutable)
    → CSSVariableSet per theme (brand colors, semantic passes, static scales)
    → sorted declarations
    → stylesheet text
"""

from mond_tokens.compiler.collection import CSSVariableSet, SkippedToken
from mond_tokens.compiler.flattener import (
    flatten_brand_colors,
    flatten_scale,
    flatten_static_scales,
)
from mond_tokens.compiler.formatter import format_block, format_header, format_variables
from mond_tokens.compiler.generator import (
    CSSGenerator,
    GenerationResult,
    generate,
    generate_css_variables,
)
from mond_tokens.compiler.traverser import traverse

__all__ = [
    # Collections
    "CSSVariableSet",
    "SkippedToken",
    # Pipeline stages
    "flatten_brand_colors",
    "flatten_scale",
    "flatten_static_scales",
    "format_block",
    "format_header",
    "format_variables",
    "traverse",
    # Orchestration
    "CSSGenerator",
    "GenerationResult",
    "generate",
    "generate_css_variables",
]
