"""
Output collections - per-theme CSS variable sets built during generation.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from mond_tokens.constants import Theme


@dataclass(frozen=True)
class SkippedToken:
    """A token left out of the output because it failed to resolve."""

    path: str
    theme: Theme
    reason: str


@dataclass
class CSSVariableSet:
    """
    CSS variable name → resolved value for one theme.

    Insertion order is irrelevant; the formatter sorts on output.
    """

    theme: Theme
    variables: dict[str, str] = field(default_factory=dict)
    skipped: list[SkippedToken] = field(default_factory=list)

    def set(self, name: str, value: str) -> None:
        """Add or replace a variable."""
        self.variables[name] = value

    def get(self, name: str) -> str | None:
        """Get a variable's value."""
        return self.variables.get(name)

    def skip(self, path: str, reason: str) -> None:
        """Record a token that could not be emitted."""
        self.skipped.append(SkippedToken(path=path, theme=self.theme, reason=reason))

    def names(self) -> list[str]:
        """Variable names in output order."""
        return sorted(self.variables)

    def __contains__(self, name: object) -> bool:
        return name in self.variables

    def __len__(self) -> int:
        return len(self.variables)

    def __iter__(self) -> Iterator[str]:
        return iter(self.variables)
