"""
Built-in Mond design tokens.

This is the single source of truth for the default stylesheet. Values are
kept as a plain nested literal and classified into a TokenStore on first use.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from mond_tokens.models.store import TokenStore

DEFAULT_TOKENS: dict[str, Any] = {
    "schema": "tokens/v1",
    "name": "mond",
    "description": "Mond design system - professional, clean design tokens",
    "colors": {
        "blue": {
            "50": "#f0f9ff",
            "100": "#e0f2fe",
            "200": "#bae6fd",
            "300": "#7dd3fc",
            "400": "#38bdf8",
            "500": "#0ea5e9",
            "600": "#0284c7",
            "700": "#0369a1",
            "800": "#075985",
            "900": "#0c4a6e",
        },
        "gray": {
            "50": "#f8fafc",
            "100": "#f1f5f9",
            "200": "#e2e8f0",
            "300": "#cbd5e1",
            "400": "#94a3b8",
            "500": "#64748b",
            "600": "#475569",
            "700": "#334155",
            "800": "#1e293b",
            "900": "#0f172a",
        },
        "red": {
            "50": "#fef2f2",
            "100": "#fee2e2",
            "200": "#fecaca",
            "300": "#fca5a5",
            "400": "#f87171",
            "500": "#ef4444",
            "600": "#dc2626",
            "700": "#b91c1c",
            "800": "#991b1b",
            "900": "#7f1d1d",
        },
        "green": {
            "50": "#f0fdf4",
            "100": "#dcfce7",
            "200": "#bbf7d0",
            "300": "#86efac",
            "400": "#4ade80",
            "500": "#22c55e",
            "600": "#16a34a",
            "700": "#15803d",
            "800": "#166534",
            "900": "#14532d",
        },
        "amber": {
            "50": "#fffbeb",
            "100": "#fef3c7",
            "200": "#fde68a",
            "300": "#fcd34d",
            "400": "#fbbf24",
            "500": "#f59e0b",
            "600": "#d97706",
            "700": "#b45309",
            "800": "#92400e",
            "900": "#78350f",
        },
        "white": {
            "50": "#ffffff",
            "100": "#fefefe",
            "200": "#fdfdfd",
            "300": "#fcfcfc",
            "400": "#fbfbfb",
            "500": "#fafafa",
            "600": "#f9f9f9",
            "700": "#f8f8f8",
            "800": "#f7f7f7",
            "900": "#f5f5f5",
        },
        "black": {
            "50": "#1a1a1a",
            "100": "#171717",
            "200": "#141414",
            "300": "#111111",
            "400": "#0f0f0f",
            "500": "#0d0d0d",
            "600": "#0b0b0b",
            "700": "#080808",
            "800": "#050505",
            "900": "#000000",
        },
    },
    "brand": {
        "primary": {
            "50": "#f0f9ff",
            "100": "#e0f2fe",
            "200": "#bae6fd",
            "300": "#7dd3fc",
            "400": "#38bdf8",
            "500": "#0ea5e9",
            "600": "#0284c7",
            "700": "#0369a1",
            "800": "#075985",
            "900": "#0c4a6e",
        },
        "secondary": {
            "50": "#f8fafc",
            "100": "#f1f5f9",
            "200": "#e2e8f0",
            "300": "#cbd5e1",
            "400": "#94a3b8",
            "500": "#64748b",
            "600": "#475569",
            "700": "#334155",
            "800": "#1e293b",
            "900": "#0f172a",
        },
        "success": {"400": "#4ade80", "500": "#22c55e", "600": "#16a34a", "700": "#15803d"},
        "warning": {"400": "#fbbf24", "500": "#f59e0b", "600": "#d97706", "700": "#b45309"},
        "error": {"400": "#f87171", "500": "#ef4444", "600": "#dc2626", "700": "#b91c1c"},
    },
    "semantic": {
        "text": {
            "primary": {"light": "gray.900", "dark": "gray.100"},
            "secondary": {"light": "gray.600", "dark": "gray.400"},
            "tertiary": {"light": "gray.500", "dark": "gray.500"},
            "disabled": {"light": "gray.400", "dark": "gray.600"},
            "inverse": {"light": "white.50", "dark": "black.900"},
            "link": {"light": "blue.600", "dark": "blue.400"},
            "success": {"light": "green.600", "dark": "green.400"},
            "warning": {"light": "amber.600", "dark": "amber.400"},
            "error": {"light": "red.600", "dark": "red.400"},
            "accent": {"light": "brand.interactive.background", "dark": "brand.primary.400"},
        },
        "surface": {
            "background": {"light": "white.50", "dark": "black.200"},
            "elevated": {"light": "white.50", "dark": "black.100"},
            "overlay": {"light": "white.100", "dark": "black.50"},
            "card": {"light": "white.50", "dark": "black.100"},
            "input": {"light": "white.50", "dark": "black.100"},
            "disabled": {"light": "gray.100", "dark": "gray.800"},
            "primary": {"light": "white.50", "dark": "black.200"},
            "secondary": {"light": "gray.50", "dark": "black.100"},
            "transparent": "transparent",
            "gradient": {
                "light": "linear-gradient(135deg, white.50 0%, gray.100 100%)",
                "dark": "linear-gradient(135deg, black.200 0%, black.50 100%)",
            },
        },
        "border": {
            "default": {"light": "gray.300", "dark": "gray.600"},
            "subtle": {"light": "gray.200", "dark": "gray.700"},
            "strong": {"light": "gray.400", "dark": "gray.500"},
            "focused": {"light": "brand.primary.500", "dark": "brand.primary.400"},
            "success": {"light": "green.500", "dark": "green.400"},
            "warning": {"light": "amber.500", "dark": "amber.400"},
            "error": {"light": "red.500", "dark": "red.400"},
            "primary": {"light": "gray.400", "dark": "gray.500"},
            "secondary": {"light": "gray.300", "dark": "gray.600"},
            "accent": {"light": "blue.400", "dark": "blue.500"},
        },
        "brand": {
            "interactive": {
                "background": {"light": "brand.primary.600", "dark": "brand.primary.500"},
                "backgroundHover": {"light": "brand.primary.700", "dark": "brand.primary.600"},
                "backgroundPressed": {"light": "brand.primary.800", "dark": "brand.primary.700"},
                "text": {"light": "white.50", "dark": "white.50"},
            },
            "secondary": {
                "background": {"light": "brand.secondary.100", "dark": "brand.secondary.800"},
                "text": {"light": "brand.secondary.900", "dark": "brand.secondary.100"},
            },
        },
        "interactive": {
            "primary": {
                "background": {"light": "blue.600", "dark": "blue.500"},
                "backgroundHover": {"light": "blue.700", "dark": "blue.600"},
                "backgroundPressed": {"light": "blue.800", "dark": "blue.700"},
                "backgroundDisabled": {"light": "gray.300", "dark": "gray.600"},
                "text": {"light": "white.50", "dark": "white.50"},
                "textDisabled": {"light": "gray.500", "dark": "gray.400"},
            },
            "secondary": {
                "background": {"light": "white.50", "dark": "black.200"},
                "backgroundHover": {"light": "gray.100", "dark": "black.100"},
                "backgroundPressed": {"light": "gray.200", "dark": "black.50"},
                "border": {"light": "gray.300", "dark": "gray.600"},
                "borderHover": {"light": "gray.400", "dark": "gray.500"},
                "text": {"light": "gray.900", "dark": "gray.100"},
            },
            "ghost": {
                "background": "transparent",
                "backgroundHover": {"light": "gray.100", "dark": "black.100"},
                "backgroundPressed": {"light": "gray.200", "dark": "black.50"},
                "text": {"light": "gray.700", "dark": "gray.300"},
            },
        },
        "feedback": {
            "success": {
                "background": {"light": "green.50", "dark": "green.900"},
                "border": {"light": "green.200", "dark": "green.700"},
                "text": {"light": "green.800", "dark": "green.200"},
            },
            "warning": {
                "background": {"light": "amber.50", "dark": "amber.900"},
                "border": {"light": "amber.200", "dark": "amber.700"},
                "text": {"light": "amber.800", "dark": "amber.200"},
            },
            "error": {
                "background": {"light": "red.50", "dark": "red.900"},
                "border": {"light": "red.200", "dark": "red.700"},
                "text": {"light": "red.800", "dark": "red.200"},
            },
            "info": {
                "background": {"light": "blue.50", "dark": "blue.900"},
                "border": {"light": "blue.200", "dark": "blue.700"},
                "text": {"light": "blue.800", "dark": "blue.200"},
            },
        },
        "effects": {
            "brand": {
                "glow": {
                    "subtle": "none",
                    "strong": {
                        "light": "0 0 12px rgba(2, 132, 199, 0.35)",
                        "dark": "0 0 16px rgba(56, 189, 248, 0.45)",
                    },
                },
            },
            "focus": {
                "ring": {
                    "light": "0 0 0 3px rgba(2, 132, 199, 0.4)",
                    "dark": "0 0 0 3px rgba(56, 189, 248, 0.5)",
                },
            },
            "overlay": {
                "backdrop": {"light": "rgba(15, 23, 42, 0.5)", "dark": "rgba(0, 0, 0, 0.7)"},
            },
        },
        "layout": {
            "container": {
                "maxWidth": "80rem",
                "padding": {"light": "1rem", "dark": "1rem"},
            },
            "header": {
                "height": {"light": "4rem", "dark": "4rem"},
            },
        },
    },
    "radii": {
        "none": "0",
        "sm": "0.125rem",
        "md": "0.25rem",
        "lg": "0.5rem",
        "xl": "0.75rem",
        "2xl": "1rem",
        "3xl": "1.5rem",
        "full": "9999px",
    },
    "shadows": {
        "sm": "0 1px 2px 0 rgba(0, 0, 0, 0.05)",
        "md": "0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -1px rgba(0, 0, 0, 0.06)",
        "lg": "0 10px 15px -3px rgba(0, 0, 0, 0.1), 0 4px 6px -2px rgba(0, 0, 0, 0.05)",
        "xl": "0 20px 25px -5px rgba(0, 0, 0, 0.1), 0 10px 10px -5px rgba(0, 0, 0, 0.04)",
        "2xl": "0 25px 50px -12px rgba(0, 0, 0, 0.25)",
        "inner": "inset 0 2px 4px 0 rgba(0, 0, 0, 0.06)",
        "none": "none",
    },
    "spacing": {
        "0": "0",
        "1": "0.25rem",
        "2": "0.5rem",
        "3": "0.75rem",
        "4": "1rem",
        "5": "1.25rem",
        "6": "1.5rem",
        "8": "2rem",
        "10": "2.5rem",
        "12": "3rem",
        "16": "4rem",
        "20": "5rem",
        "24": "6rem",
        "32": "8rem",
        "40": "10rem",
        "48": "12rem",
        "56": "14rem",
        "64": "16rem",
    },
    "fontFamilies": {
        "sans": (
            "'DM Sans', ui-sans-serif, system-ui, -apple-system, BlinkMacSystemFont, "
            "'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif"
        ),
        "mono": "'DM Mono', ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace",
    },
    "fontSizes": {
        "xs": "0.75rem",
        "sm": "0.875rem",
        "base": "1rem",
        "lg": "1.125rem",
        "xl": "1.25rem",
        "2xl": "1.5rem",
        "3xl": "1.875rem",
        "4xl": "2.25rem",
        "5xl": "3rem",
        "6xl": "3.75rem",
    },
    "fontWeights": {
        "thin": "100",
        "extralight": "200",
        "light": "300",
        "normal": "400",
        "medium": "500",
        "semibold": "600",
        "bold": "700",
        "extrabold": "800",
        "black": "900",
    },
    "lineHeights": {
        "none": "1",
        "tight": "1.25",
        "snug": "1.375",
        "normal": "1.5",
        "relaxed": "1.625",
        "loose": "2",
    },
    "letterSpacings": {
        "tighter": "-0.05em",
        "tight": "-0.025em",
        "normal": "0",
        "wide": "0.025em",
        "wider": "0.05em",
        "widest": "0.1em",
    },
}


@lru_cache(maxsize=1)
def _builtin_store() -> TokenStore:
    return TokenStore.from_dict(DEFAULT_TOKENS)


def default_store() -> TokenStore:
    """
    Get the built-in Mond token store.

    The tokens are validated once. Each call returns an independent deep
    copy, so changes to one copy never reach another.
    """
    return _builtin_store().model_copy(deep=True)
