#!/usr/bin/env python3
"""
Entry point for the Mond Tokens MCP Server.

Usage:
    mond-tokens-mcp                          # stdio, project root = cwd
    mond-tokens-mcp --transport http --port 8000
    mond-tokens-mcp --root ./design-system
"""

import argparse
import asyncio
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(description="Mond Tokens MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument("--port", type=int, default=8000, help="HTTP port (http transport only)")
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Project root holding tokens/, brands/ and dist/ (default: cwd)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point with transport selection."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    # Deferred so that --help works without the server dependency loaded
    from mond_tokens.async_server import create_server

    mcp = create_server(args.root)

    if args.transport == "http":
        logger.info(f"Serving on http:{args.port}")
        asyncio.run(mcp.run_http(port=args.port))
    else:
        logger.info("Serving on stdio")
        asyncio.run(mcp.run_stdio())


if __name__ == "__main__":
    main()
