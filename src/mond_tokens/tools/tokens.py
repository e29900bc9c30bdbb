"""
Token tools - MCP tools for store discovery and single-token resolution.

Tools for listing stores, browsing token paths, and resolving one
semantic token against a theme.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from mond_tokens.constants import DEFAULT_STORE_NAME, ErrorMessages, Theme
from mond_tokens.models.store import css_var_name, split_path
from mond_tokens.resolver import SemanticResolver
from mond_tokens.tokens import TokenStoreLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_token_tools(
    mcp: ChukMCPServer,
    loader: TokenStoreLoader,
) -> dict[str, Any]:
    """
    Register token discovery and resolution tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The token store loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_stores() -> str:
        """
        List available token stores.

        Returns the built-in store and any project stores with
        basic metadata.

        Returns:
            JSON string with list of store summaries

        Example:
            tokens_list_stores()
        """
        try:
            stores = loader.list_stores()

            return json.dumps(
                {
                    "status": "success",
                    "stores": [s.model_dump() for s in stores],
                    "count": len(stores),
                }
            )
        except Exception as e:
            logger.exception("Failed to list token stores")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_stores"] = tokens_list_stores

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_describe_store(name: str = DEFAULT_STORE_NAME) -> str:
        """
        Get detailed information about a token store.

        Returns palette families, brand families, scale sizes and
        the top-level semantic groups.

        Args:
            name: Store name

        Returns:
            JSON string with store details

        Example:
            tokens_describe_store(name="mond")
        """
        try:
            store = loader.get_store(name)
            if store is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.STORE_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "store": {
                        "name": store.name,
                        "description": store.description,
                        "palettes": sorted(store.colors),
                        "brand_families": sorted(store.brand),
                        "semantic_groups": list(store.semantic.children),
                        "semantic_tokens": len(store.semantic_paths()),
                        "scales": {
                            category: len(scale)
                            for category, scale in store.static_scales().items()
                        },
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe token store")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_describe_store"] = tokens_describe_store

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_paths(
        store: str = DEFAULT_STORE_NAME,
        prefix: str | None = None,
    ) -> str:
        """
        List semantic token paths with their CSS variable names.

        Args:
            store: Store name
            prefix: Optional path prefix filter (e.g., 'text' or 'feedback.error')

        Returns:
            JSON string with matching paths

        Example:
            tokens_list_paths(prefix="surface")
        """
        try:
            store_obj = loader.get_store(store)
            if store_obj is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.STORE_NOT_FOUND.format(name=store)}
                )

            paths = store_obj.semantic_paths()
            if prefix:
                paths = [p for p in paths if p == prefix or p.startswith(f"{prefix}.")]

            return json.dumps(
                {
                    "status": "success",
                    "tokens": [
                        {"path": p, "variable": css_var_name(*split_path(p))} for p in paths
                    ],
                    "count": len(paths),
                }
            )
        except Exception as e:
            logger.exception("Failed to list token paths")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_paths"] = tokens_list_paths

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_resolve(
        path: str,
        theme: str = "light",
        store: str = DEFAULT_STORE_NAME,
        brand: str | None = None,
    ) -> str:
        """
        Resolve one semantic token to its CSS value.

        Uses the same resolution rules as the stylesheet generator,
        so the value always matches the generated CSS variable.

        Args:
            path: Token path (e.g., 'text.primary')
            theme: 'light' or 'dark'
            store: Store name
            brand: Optional brand theme name

        Returns:
            JSON string with the resolved value or the resolution error

        Example:
            tokens_resolve(path="text.primary", theme="dark")
        """
        try:
            store_obj = loader.get_store(store)
            if store_obj is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.STORE_NOT_FOUND.format(name=store)}
                )

            brand_obj = None
            if brand:
                brand_obj = loader.get_brand(brand)
                if brand_obj is None:
                    return json.dumps(
                        {"status": "error", "message": ErrorMessages.BRAND_NOT_FOUND.format(name=brand)}
                    )

            result = SemanticResolver(store_obj, brand_obj).resolve(path, Theme(theme))
            if not result.ok:
                return json.dumps({"status": "error", "path": path, "message": str(result.error)})

            return json.dumps(
                {
                    "status": "success",
                    "path": result.path,
                    "theme": result.theme.value,
                    "variable": css_var_name(*split_path(result.path)),
                    "value": result.value,
                }
            )
        except Exception as e:
            logger.exception("Failed to resolve token")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_resolve"] = tokens_resolve

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_copy_store_to_project(name: str = DEFAULT_STORE_NAME) -> str:
        """
        Copy the built-in token store to the project for customization.

        Args:
            name: Store name

        Returns:
            JSON string with the path of the copied file

        Example:
            tokens_copy_store_to_project(name="mond")
        """
        try:
            path = loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.STORE_NOT_FOUND.format(name=name)}
                )

            return json.dumps({"status": "success", "path": str(path)})
        except Exception as e:
            logger.exception("Failed to copy token store")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_copy_store_to_project"] = tokens_copy_store_to_project

    return tools
