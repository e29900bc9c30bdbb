"""
Design tokens - the built-in Mond store and the loader for project stores.

Tokens come in three kinds: raw palettes, semantic (purpose-based, often
theme-aware) tokens, and theme-independent scales.
"""

from mond_tokens.tokens.defaults import DEFAULT_TOKENS, default_store
from mond_tokens.tokens.loader import TokenStoreLoader

__all__ = [
    "DEFAULT_TOKENS",
    "TokenStoreLoader",
    "default_store",
]
