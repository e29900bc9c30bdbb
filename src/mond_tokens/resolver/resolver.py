"""
Semantic resolver - resolves one token path to a concrete CSS value.

Resolution follows alias chains until a CSS literal is reached:

    text.accent (light) → brand.interactive.background
                        → brand.primary.600
                        → #0284c7

The same resolver backs both the build-time stylesheet generator and the
runtime resolver used for inline styles, so the two never disagree.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from mond_tokens.constants import MAX_ALIAS_DEPTH, ErrorMessages, Theme
from mond_tokens.models.store import (
    BrandTheme,
    GroupNode,
    ThemeVariantLeaf,
    TokenStore,
    split_path,
)

logger = logging.getLogger(__name__)

_REFERENCE = re.compile(r"^[A-Za-z][\w-]*(?:\.[\w-]+)+$")
_EMBEDDED_REFERENCE = re.compile(r"\b([a-z][a-zA-Z]*\.[a-zA-Z0-9.]*[a-zA-Z0-9])\b")
_NUMERIC = re.compile(r"^-?\d+(\.\d+)?(px|rem|em|%|vh|vw|s|ms|deg|fr)?$")

_COLOR_PREFIXES = ("#", "rgb(", "rgba(", "hsl(", "hsla(", "var(")
_GRADIENT_PREFIXES = ("linear-gradient(", "radial-gradient(")
_KEYWORDS = frozenset({"none", "transparent", "currentColor", "inherit", "initial", "unset", "auto"})


class ResolutionError(ValueError):
    """A single token path could not be resolved to a literal."""

    def __init__(self, message: str, path: str = "", theme: Theme | None = None):
        super().__init__(message)
        self.path = path
        self.theme = theme


def is_css_literal(value: str) -> bool:
    """
    Check whether a value is already a terminal CSS value.

    Composite values (box shadows, font stacks) contain whitespace and are
    always literal. Gradients are literal too, but may embed references.
    """
    return (
        value.startswith(_COLOR_PREFIXES)
        or value.startswith(_GRADIENT_PREFIXES)
        or any(ch.isspace() for ch in value)
        or value in _KEYWORDS
        or _NUMERIC.match(value) is not None
        or (len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"")
    )


def is_reference(value: str) -> bool:
    """Check whether a value points at another token ('gray.900', 'brand.primary.600')."""
    return not is_css_literal(value) and _REFERENCE.match(value) is not None


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one token path for one theme."""

    path: str
    theme: Theme
    value: str | None = None
    error: ResolutionError | None = None

    @property
    def ok(self) -> bool:
        """True if a value was resolved."""
        return self.error is None and self.value is not None

    def unwrap(self) -> str:
        """Return the value or raise the resolution error."""
        if self.error is not None:
            raise self.error
        if self.value is None:
            raise ResolutionError(
                ErrorMessages.EMPTY_VALUE.format(path=self.path), path=self.path, theme=self.theme
            )
        return self.value


class SemanticResolver:
    """
    Resolves semantic token paths against a token store.

    The resolver:
    - Selects the theme's value for theme-variant leaves
    - Follows references into the brand palette, raw palettes and semantic tree
    - Resolves references embedded in gradients
    - Bounds alias chains so cycles fail instead of recursing forever
    """

    def __init__(
        self,
        store: TokenStore | None = None,
        brand: BrandTheme | None = None,
        max_depth: int = MAX_ALIAS_DEPTH,
    ):
        """
        Initialize the resolver.

        Args:
            store: Token store (defaults to the built-in Mond store)
            brand: Optional brand theme overriding 'brand.*' references
            max_depth: Maximum alias chain length
        """
        if store is None:
            from mond_tokens.tokens.defaults import default_store

            store = default_store()
        self.store = store
        self.brand = brand
        self.max_depth = max_depth

    def resolve(self, path: str | Sequence[str], theme: Theme | str = Theme.LIGHT) -> Resolution:
        """
        Resolve a token path for a theme.

        Args:
            path: Dotted token path or its segments
            theme: Theme to resolve against

        Returns:
            Resolution carrying either the value or the error
        """
        dotted = ".".join(split_path(path))
        theme = Theme(theme)
        try:
            value = self._resolve_path(dotted, theme, 0, dotted)
        except ResolutionError as e:
            logger.debug(f"Could not resolve '{dotted}' ({theme.value}): {e}")
            return Resolution(path=dotted, theme=theme, error=e)
        return Resolution(path=dotted, theme=theme, value=value)

    def resolve_value(self, path: str | Sequence[str], theme: Theme | str = Theme.LIGHT) -> str:
        """
        Resolve a token path, raising on failure.

        Raises:
            ResolutionError: If the path cannot be resolved
        """
        return self.resolve(path, theme).unwrap()

    def brand_color(self, family: str, shade: str) -> str | None:
        """Look up a brand color, preferring the active brand theme."""
        if self.brand is not None:
            color = self.brand.brand.get(family, {}).get(shade)
            if color is not None:
                return color
        return self.store.brand.get(family, {}).get(shade)

    def _fail(self, message: str, origin: str, theme: Theme) -> ResolutionError:
        return ResolutionError(message, path=origin, theme=theme)

    def _resolve_path(self, path: str, theme: Theme, depth: int, origin: str) -> str:
        node = self.store.find(path)
        if node is None:
            raise self._fail(ErrorMessages.PATH_NOT_FOUND.format(path=path), origin, theme)
        if isinstance(node, GroupNode):
            raise self._fail(ErrorMessages.NOT_A_LEAF.format(path=path), origin, theme)

        if isinstance(node, ThemeVariantLeaf):
            raw = node.value_for(theme)
            if raw is None:
                raise self._fail(
                    ErrorMessages.THEME_NOT_DEFINED.format(theme=theme.value, path=path),
                    origin,
                    theme,
                )
        else:
            raw = node.value

        return self._resolve_value(raw, theme, depth, origin)

    def _resolve_value(self, raw: str, theme: Theme, depth: int, origin: str) -> str:
        if depth > self.max_depth:
            raise self._fail(
                ErrorMessages.ALIAS_TOO_DEEP.format(path=origin, depth=self.max_depth),
                origin,
                theme,
            )

        value = raw.strip()
        if not value:
            raise self._fail(ErrorMessages.EMPTY_VALUE.format(path=origin), origin, theme)

        if value.startswith(_GRADIENT_PREFIXES):
            return _EMBEDDED_REFERENCE.sub(
                lambda m: self._resolve_reference(m.group(1), theme, depth + 1, origin),
                value,
            )

        if is_reference(value):
            return self._resolve_reference(value, theme, depth + 1, origin)

        return value

    def _resolve_reference(self, reference: str, theme: Theme, depth: int, origin: str) -> str:
        segments = reference.split(".")

        # brand.<family>.<shade>
        if segments[0] == "brand" and len(segments) == 3:
            color = self.brand_color(segments[1], segments[2])
            if color is not None:
                return self._resolve_value(color, theme, depth, origin)

        # <family>.<shade>
        if len(segments) == 2:
            color = self.store.lookup_color(reference)
            if color is not None:
                return self._resolve_value(color, theme, depth, origin)

        # Alias to another semantic token
        semantic_path = reference.removeprefix("semantic.")
        if self.store.find(semantic_path) is not None:
            return self._resolve_path(semantic_path, theme, depth, origin)

        raise self._fail(
            ErrorMessages.REFERENCE_NOT_FOUND.format(reference=reference, path=origin),
            origin,
            theme,
        )


def resolve_semantic_token(
    path: str,
    theme: Theme | str = Theme.LIGHT,
    store: TokenStore | None = None,
    brand: BrandTheme | None = None,
) -> str:
    """
    Resolve a single semantic token to its CSS value.

    Example:
        resolve_semantic_token("text.primary", "light")  # '#0f172a'
        resolve_semantic_token("text.primary", "dark")   # '#f1f5f9'

    Raises:
        ResolutionError: If the token cannot be resolved
    """
    return SemanticResolver(store, brand).resolve_value(path, theme)


def create_theme_resolver(
    theme: Theme | str,
    store: TokenStore | None = None,
    brand: BrandTheme | None = None,
    fallback: str | None = None,
) -> Callable[[str], str]:
    """
    Create a resolver bound to one theme, for resolving tokens at render time.

    Args:
        theme: Theme for all resolutions
        store: Token store (defaults to the built-in store)
        brand: Optional brand theme
        fallback: Value returned (with a warning) when resolution fails;
            if None, failures raise ResolutionError

    Returns:
        Function mapping a token path to its CSS value

    Example:
        dark = create_theme_resolver("dark")
        dark("text.primary")  # '#f1f5f9'
    """
    resolver = SemanticResolver(store, brand)
    bound_theme = Theme(theme)

    def resolve(path: str) -> str:
        result = resolver.resolve(path, bound_theme)
        if result.ok:
            return result.unwrap()
        if fallback is None:
            return result.unwrap()
        logger.warning(f"Falling back to {fallback} for '{path}': {result.error}")
        return fallback

    return resolve
