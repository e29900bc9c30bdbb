"""
Tree traverser - walks the semantic tree and resolves every leaf for one theme.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from mond_tokens.compiler.collection import CSSVariableSet
from mond_tokens.constants import Theme
from mond_tokens.models.store import GroupNode, ThemeVariantLeaf, css_var_name
from mond_tokens.resolver import SemanticResolver

logger = logging.getLogger(__name__)


def traverse(
    node: GroupNode,
    path_prefix: Sequence[str],
    theme: Theme,
    sink: CSSVariableSet,
    resolver: SemanticResolver,
) -> None:
    """
    Resolve every leaf below a group into the sink for one theme.

    Theme-variant leaves that fail are logged as warnings; plain leaves that
    fail are treated as not applicable. Either way the failure is recorded
    in sink.skipped and traversal continues.

    Args:
        node: Group to walk
        path_prefix: Path segments leading to the group
        theme: Theme being generated
        sink: Collection for this theme
        resolver: Resolver shared across the pass
    """
    if sink.theme != theme:
        raise ValueError(f"Sink holds '{sink.theme.value}' variables, not '{theme.value}'")

    for name, child in node.children.items():
        path = (*path_prefix, name)

        if isinstance(child, GroupNode):
            traverse(child, path, theme, sink, resolver)
            continue

        result = resolver.resolve(path, theme)
        if result.ok:
            sink.set(css_var_name(*path), result.unwrap())
            continue

        dotted = ".".join(path)
        sink.skip(dotted, str(result.error))
        if isinstance(child, ThemeVariantLeaf):
            logger.warning(f"Failed to resolve semantic token: {dotted} ({theme.value}): {result.error}")
        else:
            logger.debug(f"Skipping non-semantic token: {dotted}")
