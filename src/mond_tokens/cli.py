#!/usr/bin/env python3
"""
Command line interface for building the theme stylesheet.

Commands:
    mond-tokens build [--store FILE] [--brand FILE] [--output FILE]
    mond-tokens resolve PATH [--theme dark] [--store FILE] [--brand FILE]
    mond-tokens list [--prefix text] [--store FILE]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mond_tokens.compiler import CSSGenerator
from mond_tokens.constants import Theme
from mond_tokens.models.store import BrandTheme, TokenStore, TokenStoreError, css_var_name
from mond_tokens.resolver import SemanticResolver
from mond_tokens.tokens import TokenStoreLoader, default_store

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("dist") / "theme.css"


def _load_inputs(args: argparse.Namespace) -> tuple[TokenStore, BrandTheme | None]:
    loader = TokenStoreLoader()
    store = loader.load_file(args.store) if args.store else default_store()
    brand = loader.load_brand_file(args.brand) if args.brand else None
    return store, brand


def cmd_build(args: argparse.Namespace) -> int:
    """Generate the stylesheet and write it to disk."""
    store, brand = _load_inputs(args)
    generator = CSSGenerator(store, brand)
    result = generator.build()
    css = generator.render(result)

    output: Path = args.output
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(css, encoding="utf-8")

    logger.info(f"Generated {output}")
    logger.info(f"  Variables: {css.count('--mond-')}")
    logger.info(f"  Size: {len(css) / 1024:.2f} KB")
    for skipped in result.skipped:
        logger.info(f"  Skipped: {skipped.path} ({skipped.theme.value})")
    return 0


def cmd_resolve(args: argparse.Namespace) -> int:
    """Resolve one token and print its value."""
    store, brand = _load_inputs(args)
    result = SemanticResolver(store, brand).resolve(args.path, Theme(args.theme))
    if not result.ok:
        logger.error(str(result.error))
        return 1
    print(result.value)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Print semantic token paths and their variable names."""
    store, _brand = _load_inputs(args)
    for path in store.semantic_paths():
        if args.prefix and not (path == args.prefix or path.startswith(f"{args.prefix}.")):
            continue
        print(f"{path}\t{css_var_name(*path.split('.'))}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mond-tokens", description="Mond design token compiler"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_inputs(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--store", type=Path, help="YAML token store (default: built-in)")
        sub.add_argument("--brand", type=Path, help="YAML brand theme")

    build = subparsers.add_parser("build", help="Generate the theme stylesheet")
    add_inputs(build)
    build.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Output file (default: {DEFAULT_OUTPUT})",
    )
    build.set_defaults(func=cmd_build)

    resolve = subparsers.add_parser("resolve", help="Resolve one token")
    add_inputs(resolve)
    resolve.add_argument("path", help="Token path, e.g. text.primary")
    resolve.add_argument(
        "--theme",
        choices=[t.value for t in Theme],
        default=Theme.LIGHT.value,
        help="Theme (default: light)",
    )
    resolve.set_defaults(func=cmd_resolve)

    list_cmd = subparsers.add_parser("list", help="List semantic token paths")
    add_inputs(list_cmd)
    list_cmd.add_argument("--prefix", help="Only paths under this prefix")
    list_cmd.set_defaults(func=cmd_list)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        return args.func(args)
    except (TokenStoreError, OSError) as e:
        logger.error(f"Failed to {args.command}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
