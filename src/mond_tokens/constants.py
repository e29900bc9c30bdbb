"""
Constants and enums for the token system.

No magic strings - use enums and Literal types for constrained values.
"""

import re
from enum import Enum
from typing import Literal


class Theme(str, Enum):
    """Color theme a token is resolved against."""

    LIGHT = "light"
    DARK = "dark"


# Every emitted custom property starts with this
CSS_PREFIX = "--mond-"

# Valid emitted variable name
CSS_VAR_PATTERN = re.compile(r"^--mond-[a-z0-9-]+$")

# Alias chains longer than this are treated as cycles
MAX_ALIAS_DEPTH = 8

DEFAULT_INDENT = "  "

# Theme-independent scale categories, in emission order.
# Store field name -> CSS variable category
STATIC_SCALE_PREFIXES: dict[str, str] = {
    "spacing": "spacing",
    "radii": "radii",
    "shadows": "shadow",
    "font_families": "font-family",
    "font_sizes": "font-size",
    "font_weights": "font-weight",
    "line_heights": "line-height",
    "letter_spacings": "letter-spacing",
}

BRAND_COLOR_CATEGORY = "color-brand"

# Selectors for the two rule blocks
LIGHT_SELECTOR = ':root,\n[data-theme="light"]'
DARK_SELECTOR = '[data-theme="dark"]'

BUILD_COMMAND = "mond-tokens build"

# Text that would end the header comment or open a rule block
HEADER_UNSAFE_MARKERS = ("/*", "*/", "{", "}")

# Built-in store name
DEFAULT_STORE_NAME = "mond"

StoreSchemaVersion = Literal["tokens/v1"]
BrandSchemaVersion = Literal["brand/v1"]


class ErrorMessages:
    """Standardized error messages."""

    PATH_NOT_FOUND = "Token path '{path}' not found."
    THEME_NOT_DEFINED = "Theme '{theme}' not defined for token '{path}'."
    NOT_A_LEAF = "Token path '{path}' is a group, not a value."
    REFERENCE_NOT_FOUND = "Reference '{reference}' not found (from token '{path}')."
    ALIAS_TOO_DEEP = "Alias chain for '{path}' exceeds {depth} levels (cyclic reference?)."
    EMPTY_VALUE = "Token '{path}' resolved to an empty value."
    STORE_NOT_FOUND = "Token store '{name}' not found."
    BRAND_NOT_FOUND = "Brand theme '{name}' not found."
