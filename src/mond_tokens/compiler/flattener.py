"""
Static flattener - emits theme-independent tokens into the light collection.

Scales (spacing, radii, shadows, typography) and the brand palette do not
vary by theme, so they are written once at the document root and never
repeated in the dark block.
"""

from __future__ import annotations

from collections.abc import Mapping

from mond_tokens.compiler.collection import CSSVariableSet
from mond_tokens.constants import BRAND_COLOR_CATEGORY, Theme
from mond_tokens.models.store import TokenStore, css_var_name


def _require_light(sink: CSSVariableSet) -> None:
    if sink.theme != Theme.LIGHT:
        raise ValueError("Theme-independent tokens belong in the light collection")


def flatten_scale(category: str, scale: Mapping[str, str], sink: CSSVariableSet) -> None:
    """
    Emit one variable per scale entry.

    Example:
        flatten_scale("spacing", {"4": "1rem"}, light)  # --mond-spacing-4: 1rem
    """
    _require_light(sink)
    for key, value in scale.items():
        sink.set(css_var_name(category, key), value)


def flatten_static_scales(store: TokenStore, sink: CSSVariableSet) -> None:
    """Emit every static scale category of a store."""
    for category, scale in store.static_scales().items():
        flatten_scale(category, scale, sink)


def flatten_brand_colors(
    brand_colors: Mapping[str, Mapping[str, str]], sink: CSSVariableSet
) -> None:
    """
    Emit the raw brand palette as overridable base values.

    Runs before semantic traversal so the base colors are defined
    ahead of the tokens that refer to them.
    """
    _require_light(sink)
    for family, shades in brand_colors.items():
        for shade, value in shades.items():
            sink.set(css_var_name(BRAND_COLOR_CATEGORY, family, shade), value)
