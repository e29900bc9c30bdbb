"""
Pydantic models for the token system.

This module provides:
- TokenStore: Palettes, semantic tree and static scales
- GroupNode / ThemeVariantLeaf / PlainLeaf: Typed semantic tree nodes
- BrandTheme: Brand palette overrides
- StoreMetadata: Lightweight listing info
"""

from mond_tokens.models.store import (
    BrandTheme,
    GroupNode,
    PlainLeaf,
    StoreMetadata,
    ThemeVariantLeaf,
    TokenNode,
    TokenStore,
    TokenStoreError,
    build_node,
    css_var_name,
    iter_leaves,
    split_path,
)

__all__ = [
    "BrandTheme",
    "GroupNode",
    "PlainLeaf",
    "StoreMetadata",
    "ThemeVariantLeaf",
    "TokenNode",
    "TokenStore",
    "TokenStoreError",
    "build_node",
    "css_var_name",
    "iter_leaves",
    "split_path",
]
