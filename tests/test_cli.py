"""
Tests for the command line interface.
"""

from pathlib import Path

import yaml

from mond_tokens.cli import DEFAULT_OUTPUT, build_parser, main


class TestParser:
    """Tests for argument parsing."""

    def test_build_defaults(self):
        """Build writes to dist/theme.css by default."""
        args = build_parser().parse_args(["build"])
        assert args.output == DEFAULT_OUTPUT
        assert args.store is None
        assert args.brand is None
        assert args.debug is False

    def test_resolve_theme(self):
        """Resolve takes a path and a theme."""
        args = build_parser().parse_args(["resolve", "text.primary", "--theme", "dark"])
        assert args.path == "text.primary"
        assert args.theme == "dark"


class TestBuild:
    """Tests for the build command."""

    def test_writes_file(self, temp_dir: Path):
        """The stylesheet is written to the output path."""
        output = temp_dir / "out" / "theme.css"
        assert main(["build", "--output", str(output)]) == 0

        css = output.read_text()
        assert css.startswith("/**")
        assert "--mond-spacing-4: 1rem;" in css
        assert css.count("{") == 2

    def test_custom_store(self, temp_dir: Path):
        """A YAML store replaces the built-in tokens."""
        store_file = temp_dir / "mini.yaml"
        store_file.write_text(
            yaml.safe_dump(
                {
                    "semantic": {"text": {"primary": {"light": "#0f172a", "dark": "#f1f5f9"}}},
                    "spacing": {"4": "1rem"},
                }
            )
        )
        output = temp_dir / "theme.css"
        assert main(["build", "--store", str(store_file), "--output", str(output)]) == 0

        css = output.read_text()
        assert css.count("--mond-") == 3
        assert "--mond-text-primary: #f1f5f9;" in css

    def test_brand(self, temp_dir: Path):
        """A brand theme overrides the brand palette."""
        brand_file = temp_dir / "cypher.yaml"
        brand_file.write_text(
            yaml.safe_dump({"name": "Cypher", "brand": {"primary": {"600": "#00cc76"}}})
        )
        output = temp_dir / "theme.css"
        assert main(["build", "--brand", str(brand_file), "--output", str(output)]) == 0
        assert "--mond-color-brand-primary-600: #00cc76;" in output.read_text()

    def test_missing_store_fails(self, temp_dir: Path):
        """Unreadable stores exit with status 1."""
        output = temp_dir / "theme.css"
        code = main(["build", "--store", str(temp_dir / "missing.yaml"), "--output", str(output)])
        assert code == 1
        assert not output.exists()


class TestResolve:
    """Tests for the resolve command."""

    def test_prints_value(self, capsys):
        """The resolved value is printed."""
        assert main(["resolve", "text.primary", "--theme", "dark"]) == 0
        assert capsys.readouterr().out.strip() == "#f1f5f9"

    def test_failure(self, capsys):
        """Unresolvable tokens exit with status 1."""
        assert main(["resolve", "text.nonexistent"]) == 1
        assert capsys.readouterr().out == ""


class TestList:
    """Tests for the list command."""

    def test_prefix(self, capsys):
        """Paths under a prefix are listed with their variables."""
        assert main(["list", "--prefix", "text"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert "text.primary\t--mond-text-primary" in lines
        assert all(line.startswith("text.") for line in lines)


class TestServerParser:
    """Tests for the MCP server entry point arguments."""

    def test_defaults(self):
        """Stdio transport rooted at the working directory."""
        from mond_tokens.server import build_parser as build_server_parser

        args = build_server_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.root is None

    def test_http(self, temp_dir: Path):
        """HTTP transport takes a port and a project root."""
        from mond_tokens.server import build_parser as build_server_parser

        args = build_server_parser().parse_args(
            ["--transport", "http", "--port", "9000", "--root", str(temp_dir)]
        )
        assert args.port == 9000
        assert args.root == temp_dir
