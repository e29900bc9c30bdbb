"""
Pytest configuration and shared fixtures.
"""

import tempfile
from datetime import UTC, datetime
from pathlib import Path

import pytest

from mond_tokens.models import TokenStore


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fixed_time() -> datetime:
    """Stable header timestamp."""
    return datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def minimal_store() -> TokenStore:
    """One theme-aware token and one spacing step."""
    return TokenStore.from_dict(
        {
            "semantic": {"text": {"primary": {"light": "#0f172a", "dark": "#f1f5f9"}}},
            "spacing": {"4": "1rem"},
        }
    )


@pytest.fixture
def alias_store() -> TokenStore:
    """Store exercising palettes, brand references, aliases and failures."""
    return TokenStore.from_dict(
        {
            "name": "alias-test",
            "colors": {
                "gray": {"100": "#f1f5f9", "900": "#0f172a"},
                "blue": {"400": "#38bdf8", "600": "#0284c7"},
            },
            "brand": {"primary": {"500": "#0ea5e9", "600": "#0284c7"}},
            "semantic": {
                "text": {
                    "primary": {"light": "gray.900", "dark": "gray.100"},
                    "link": {"light": "blue.600", "dark": "blue.400"},
                    "accent": {"light": "text.link", "dark": "semantic.text.link"},
                },
                "brand": {
                    "background": {"light": "brand.primary.600", "dark": "brand.primary.500"},
                    "broken": {"light": "brand.primary.950", "dark": "brand.primary.500"},
                },
                "loop": {
                    "a": {"light": "loop.b", "dark": "loop.b"},
                    "b": {"light": "loop.a", "dark": "loop.a"},
                },
                "half": {"light": "#ffffff"},
                "plain": {
                    "none": "none",
                    "transparent": "transparent",
                    "shadow": "0 1px 2px 0 rgba(0, 0, 0, 0.05)",
                    "missing": "gray.950",
                },
                "gradient": {
                    "light": "linear-gradient(135deg, gray.100 0%, blue.600 100%)",
                    "dark": "linear-gradient(135deg, gray.900 0%, nope.1 100%)",
                },
            },
            "spacing": {"0": "0", "4": "1rem"},
            "radii": {"full": "9999px"},
        }
    )
