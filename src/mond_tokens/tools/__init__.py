"""
MCP tool implementations.

Tools are organized by domain:
- tokens - Store discovery and single-token resolution
- generation - Stylesheet generation and export
"""

from mond_tokens.tools.generation import register_generation_tools
from mond_tokens.tools.tokens import register_token_tools

__all__ = [
    "register_generation_tools",
    "register_token_tools",
]
