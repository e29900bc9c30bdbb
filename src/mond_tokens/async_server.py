#!/usr/bin/env python3
"""
Async Design Tokens MCP Server using chuk-mcp-server

This server provides MCP tools for resolving Mond design tokens and
compiling them into the theme stylesheet of CSS custom properties.

The server provides tools for:
- Listing and describing token stores (built-in and project)
- Resolving single semantic tokens for a theme and brand
- Generating and writing the light/dark theme stylesheet

Project layout (relative to the server root):
    tokens/   project token stores (*.yaml)
    brands/   brand themes (*.yaml)
    dist/     generated stylesheets
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from mond_tokens.tokens import TokenStoreLoader
from mond_tokens.tools import register_generation_tools, register_token_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "mond-tokens"
TOKENS_DIRNAME = "tokens"
BRANDS_DIRNAME = "brands"
OUTPUT_DIRNAME = "dist"


def create_server(root: Path | None = None) -> ChukMCPServer:
    """
    Create the MCP server with all token tools registered.

    Args:
        root: Project root (defaults to the working directory)

    Returns:
        Configured server, ready to run
    """
    root = root or Path.cwd()
    tokens_dir = root / TOKENS_DIRNAME
    brands_dir = root / BRANDS_DIRNAME
    output_dir = root / OUTPUT_DIRNAME

    server = ChukMCPServer(SERVER_NAME)
    loader = TokenStoreLoader(project_path=tokens_dir, brands_path=brands_dir)

    tools = {
        **register_token_tools(server, loader),
        **register_generation_tools(server, loader, output_dir),
    }

    logger.info(f"Mond Tokens MCP Server initialized ({len(tools)} tools)")
    logger.info(f"  Tokens dir: {tokens_dir}")
    logger.info(f"  Brands dir: {brands_dir}")
    logger.info(f"  Output dir: {output_dir}")
    return server
