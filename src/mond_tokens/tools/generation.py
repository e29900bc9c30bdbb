"""
Generation tools - MCP tools for building the theme stylesheet.

Tools for previewing and writing the CSS variables file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from mond_tokens.compiler import CSSGenerator
from mond_tokens.constants import DEFAULT_STORE_NAME, ErrorMessages
from mond_tokens.models.store import BrandTheme, TokenStore
from mond_tokens.tokens import TokenStoreLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_generation_tools(
    mcp: ChukMCPServer,
    loader: TokenStoreLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register stylesheet generation tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The token store loader
        output_dir: Directory for generated stylesheets

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def load_inputs(store: str, brand: str | None) -> tuple[TokenStore, BrandTheme | None]:
        store_obj = loader.get_store(store)
        if store_obj is None:
            raise ValueError(ErrorMessages.STORE_NOT_FOUND.format(name=store))
        brand_obj = None
        if brand:
            brand_obj = loader.get_brand(brand)
            if brand_obj is None:
                raise ValueError(ErrorMessages.BRAND_NOT_FOUND.format(name=brand))
        return store_obj, brand_obj

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_generate_css(
        store: str = DEFAULT_STORE_NAME,
        brand: str | None = None,
    ) -> str:
        """
        Generate the theme stylesheet without writing it.

        Args:
            store: Store name
            brand: Optional brand theme name

        Returns:
            JSON string with variable counts, skipped tokens and the CSS text

        Example:
            tokens_generate_css(store="mond")
        """
        try:
            store_obj, brand_obj = load_inputs(store, brand)
            generator = CSSGenerator(store_obj, brand_obj)
            result = generator.build()
            css = generator.render(result)

            return json.dumps(
                {
                    "status": "success",
                    "light_variables": len(result.light),
                    "dark_variables": len(result.dark),
                    "skipped": [
                        {"path": s.path, "theme": s.theme.value, "reason": s.reason}
                        for s in result.skipped
                    ],
                    "css": css,
                }
            )
        except Exception as e:
            logger.exception("Failed to generate CSS")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_generate_css"] = tokens_generate_css

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_write_css(
        store: str = DEFAULT_STORE_NAME,
        brand: str | None = None,
        output_name: str = "theme",
    ) -> str:
        """
        Generate the theme stylesheet and write it to the output directory.

        Args:
            store: Store name
            brand: Optional brand theme name
            output_name: Output filename (without .css extension)

        Returns:
            JSON string with the output path, variable count and size

        Example:
            tokens_write_css(output_name="theme")
        """
        try:
            store_obj, brand_obj = load_inputs(store, brand)
            css = CSSGenerator(store_obj, brand_obj).generate()

            output_dir.mkdir(parents=True, exist_ok=True)
            output_path = output_dir / f"{output_name}.css"
            output_path.write_text(css, encoding="utf-8")

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "variables": css.count("--mond-"),
                    "size_kb": round(len(css) / 1024, 2),
                }
            )
        except Exception as e:
            logger.exception("Failed to write CSS")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_write_css"] = tokens_write_css

    return tools
