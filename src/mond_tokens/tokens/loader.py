"""
Token store loader - discovers and loads token stores and brand themes.

Stores can come from:
1. Built-in defaults (shipped with package)
2. Project stores (YAML files in the user's tokens directory)

Brand themes are YAML files in the project's brands directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from mond_tokens.constants import DEFAULT_STORE_NAME
from mond_tokens.models.store import BrandTheme, StoreMetadata, TokenStore, TokenStoreError
from mond_tokens.tokens.defaults import default_store

logger = logging.getLogger(__name__)


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path) as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise TokenStoreError(f"{path}: expected a mapping at the top level")
    return data


class TokenStoreLoader:
    """
    Discovers and loads token stores.

    Project stores override the built-in store with the same name.
    """

    def __init__(
        self,
        project_path: Path | None = None,
        brands_path: Path | None = None,
    ):
        """
        Initialize the loader.

        Args:
            project_path: Directory of project token stores (*.yaml)
            brands_path: Directory of brand themes (*.yaml)
        """
        self.project_path = project_path
        self.brands_path = brands_path
        self._cache: dict[str, TokenStore] = {}
        self._brand_cache: dict[str, BrandTheme] = {}

    def list_stores(self) -> list[StoreMetadata]:
        """
        List all available stores.

        Returns the built-in store plus project stores, with project
        stores taking precedence.
        """
        builtin = default_store()
        stores: dict[str, StoreMetadata] = {builtin.name: StoreMetadata.from_store(builtin)}

        if self.project_path and self.project_path.exists():
            for path in sorted(self.project_path.glob("*.yaml")):
                store = self._try_load(path)
                if store:
                    stores[store.name] = StoreMetadata.from_store(store)

        return list(stores.values())

    def get_store(self, name: str = DEFAULT_STORE_NAME) -> TokenStore | None:
        """
        Get a store by name.

        Project stores take precedence over the built-in store.

        Args:
            name: Store name (file stem for project stores)

        Returns:
            TokenStore if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        if self.project_path:
            project_file = self.project_path / f"{name}.yaml"
            if project_file.exists():
                store = self._try_load(project_file)
                if store:
                    self._cache[name] = store
                    return store

        if name == DEFAULT_STORE_NAME:
            store = default_store()
            self._cache[name] = store
            return store

        return None

    def load_file(self, path: Path) -> TokenStore:
        """
        Load a store from a YAML file.

        Raises:
            TokenStoreError: If the file is unreadable or malformed
        """
        try:
            data = _read_yaml(path)
        except (OSError, yaml.YAMLError) as e:
            raise TokenStoreError(f"Cannot read token store {path}: {e}") from e
        data.setdefault("name", path.stem)
        return TokenStore.from_dict(data)

    def save_store(self, store: TokenStore, name: str | None = None) -> Path:
        """
        Write a store to the project directory.

        Args:
            store: Store to save
            name: File stem (defaults to the store name)

        Returns:
            Path to the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        dest_file = self.project_path / f"{name or store.name}.yaml"
        with open(dest_file, "w") as f:
            yaml.safe_dump(store.to_yaml_dict(), f, sort_keys=False, allow_unicode=True)

        self._cache.pop(name or store.name, None)
        return dest_file

    def copy_to_project(self, name: str = DEFAULT_STORE_NAME) -> Path | None:
        """
        Copy the built-in store to the project for customization.

        Args:
            name: Store name

        Returns:
            Path to copied file, or None if there is no such built-in store
        """
        if not self.project_path:
            raise ValueError("No project path configured")
        if name != DEFAULT_STORE_NAME:
            return None

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Token store already exists in project: {name}")

        return self.save_store(default_store(), name)

    def list_brands(self) -> list[BrandTheme]:
        """List brand themes in the brands directory."""
        brands: list[BrandTheme] = []
        if self.brands_path and self.brands_path.exists():
            for path in sorted(self.brands_path.glob("*.yaml")):
                try:
                    brands.append(self.load_brand_file(path))
                except TokenStoreError as e:
                    logger.warning(f"Ignoring brand theme {path.name}: {e}")
        return brands

    def get_brand(self, name: str) -> BrandTheme | None:
        """
        Get a brand theme by file stem.

        Returns:
            BrandTheme if found, None otherwise
        """
        if name in self._brand_cache:
            return self._brand_cache[name]
        if not self.brands_path:
            return None

        brand_file = self.brands_path / f"{name}.yaml"
        if not brand_file.exists():
            return None

        brand = self.load_brand_file(brand_file)
        self._brand_cache[name] = brand
        return brand

    def load_brand_file(self, path: Path) -> BrandTheme:
        """
        Load a brand theme from a YAML file.

        Raises:
            TokenStoreError: If the file is unreadable or malformed
        """
        try:
            data = _read_yaml(path)
            data.setdefault("id", path.stem)
            data.setdefault("name", path.stem)
            return BrandTheme.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            raise TokenStoreError(f"Cannot load brand theme {path}: {e}") from e

    def clear_cache(self) -> None:
        """Clear the store and brand caches."""
        self._cache.clear()
        self._brand_cache.clear()

    def _try_load(self, path: Path) -> TokenStore | None:
        try:
            return self.load_file(path)
        except TokenStoreError as e:
            logger.warning(f"Ignoring token store {path.name}: {e}")
            return None
