"""
Formatter - renders variable collections and the stylesheet wrapper.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

from mond_tokens.compiler.collection import CSSVariableSet
from mond_tokens.constants import BUILD_COMMAND, DEFAULT_INDENT, HEADER_UNSAFE_MARKERS


def format_variables(
    collection: CSSVariableSet | Mapping[str, str], indent: str = DEFAULT_INDENT
) -> str:
    """
    Render declarations sorted by variable name.

    Args:
        collection: Variables to render
        indent: Prefix for each line

    Returns:
        One "{indent}{name}: {value};" line per variable
    """
    variables = collection.variables if isinstance(collection, CSSVariableSet) else collection
    return "\n".join(f"{indent}{name}: {variables[name]};" for name in sorted(variables))


def format_block(
    selector: str, collection: CSSVariableSet | Mapping[str, str], indent: str = DEFAULT_INDENT
) -> str:
    """Wrap formatted declarations in a rule block."""
    body = format_variables(collection, indent)
    if not body:
        return f"{selector} {{\n}}"
    return f"{selector} {{\n{body}\n}}"


def format_header(generated_at: datetime, brand_name: str | None = None) -> str:
    """Header comment marking the file as generated."""
    if brand_name and any(marker in brand_name for marker in HEADER_UNSAFE_MARKERS):
        raise ValueError(f"Brand name cannot be placed in a CSS comment: {brand_name!r}")
    lines = [
        "/**",
        " * Mond Design System - Theme CSS Variables",
        " *",
        " * Auto-generated from design tokens.",
        f" * Do not edit this file manually - run '{BUILD_COMMAND}' to regenerate.",
        " *",
    ]
    if brand_name:
        lines.append(f" * Brand: {brand_name}")
    lines.append(f" * Generated: {generated_at.isoformat()}")
    lines.append(" */")
    return "\n".join(lines)
