"""Configuration management for routesitemap.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from routesitemap.core.splitter import DEFAULT_LIMIT_COUNT_PATHS

CONFIG_FILENAME = "routesitemap.toml"


@dataclass
class SitemapConfig:
    """Sitemap output configuration."""

    hostname: str | None = None
    dest: Path = field(default_factory=lambda: Path("sitemap.xml"))
    public_path: str = "/"
    limit_count_paths: int = DEFAULT_LIMIT_COUNT_PATHS
    strict_params: bool = False


@dataclass
class RoutesConfig:
    """Route source configuration."""

    file: Path | None = None


@dataclass
class FilterConfig:
    """Path filter configuration."""

    rules: list[str] = field(default_factory=list)
    is_valid: bool = False


@dataclass
class Config:
    """Application configuration."""

    sitemap: SitemapConfig
    routes: RoutesConfig
    filter: FilterConfig
    params: dict[str, list[dict[str, object]]]
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for routesitemap.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        """Create config with all defaults."""
        return cls(
            sitemap=SitemapConfig(),
            routes=RoutesConfig(),
            filter=FilterConfig(),
            params={},
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        config_dir = path.parent

        return cls(
            sitemap=cls._parse_sitemap(data.get("sitemap"), config_dir),
            routes=cls._parse_routes(data.get("routes"), config_dir),
            filter=cls._parse_filter(data.get("filter")),
            params=cls._parse_params(data.get("params")),
            config_path=path,
        )

    @classmethod
    def _parse_sitemap(cls, data: object, config_dir: Path) -> SitemapConfig:
        """Parse sitemap configuration section.

        Args:
            data: Raw sitemap section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            SitemapConfig instance
        """
        if data is None:
            return SitemapConfig(dest=config_dir / "sitemap.xml")

        if not isinstance(data, dict):
            raise ValueError("sitemap section must be a dictionary")

        hostname = data.get("hostname")
        if hostname is not None and not isinstance(hostname, str):
            raise ValueError("sitemap.hostname must be a string")

        dest = data.get("dest", "sitemap.xml")
        if not isinstance(dest, str):
            raise ValueError("sitemap.dest must be a string")

        public_path = data.get("public_path", "/")
        if not isinstance(public_path, str):
            raise ValueError("sitemap.public_path must be a string")

        limit = data.get("limit_count_paths", DEFAULT_LIMIT_COUNT_PATHS)
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError("sitemap.limit_count_paths must be a positive integer")

        strict_params = data.get("strict_params", False)
        if not isinstance(strict_params, bool):
            raise ValueError("sitemap.strict_params must be a boolean")

        return SitemapConfig(
            hostname=hostname,
            dest=config_dir / dest,
            public_path=public_path,
            limit_count_paths=limit,
            strict_params=strict_params,
        )

    @classmethod
    def _parse_routes(cls, data: object, config_dir: Path) -> RoutesConfig:
        """Parse routes configuration section."""
        if data is None:
            return RoutesConfig()

        if not isinstance(data, dict):
            raise ValueError("routes section must be a dictionary")

        file = data.get("file")
        if file is None:
            return RoutesConfig()
        if not isinstance(file, str):
            raise ValueError("routes.file must be a string")

        return RoutesConfig(file=config_dir / file)

    @classmethod
    def _parse_filter(cls, data: object) -> FilterConfig:
        """Parse filter configuration section."""
        if data is None:
            return FilterConfig()

        if not isinstance(data, dict):
            raise ValueError("filter section must be a dictionary")

        rules_raw = data.get("rules", [])
        if not isinstance(rules_raw, list):
            raise ValueError("filter.rules must be a list")
        rules: list[str] = []
        for item in rules_raw:
            if not isinstance(item, str):
                raise ValueError("filter.rules items must be strings")
            rules.append(item)

        is_valid = data.get("is_valid", False)
        if not isinstance(is_valid, bool):
            raise ValueError("filter.is_valid must be a boolean")

        return FilterConfig(rules=rules, is_valid=is_valid)

    @classmethod
    def _parse_params(cls, data: object) -> dict[str, list[dict[str, object]]]:
        """Parse params configuration section.

        Keys are paths with dynamic segments, values are arrays of binding
        records. Value types inside records are checked when params are applied.
        """
        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ValueError("params section must be a dictionary")

        params: dict[str, list[dict[str, object]]] = {}
        for path, records in data.items():
            if not isinstance(records, list):
                raise ValueError(f"params.'{path}' must be an array of tables")
            for record in records:
                if not isinstance(record, dict):
                    raise ValueError(f"params.'{path}' items must be tables")
            params[path] = records

        return params

    def with_overrides(
        self,
        *,
        hostname: str | None = None,
        dest: Path | None = None,
        public_path: str | None = None,
        limit_count_paths: int | None = None,
        strict_params: bool | None = None,
        routes_file: Path | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            hostname: Override sitemap.hostname
            dest: Override sitemap.dest
            public_path: Override sitemap.public_path
            limit_count_paths: Override sitemap.limit_count_paths
            strict_params: Override sitemap.strict_params
            routes_file: Override routes.file

        Returns:
            New Config instance with overrides applied
        """
        sitemap = replace(
            self.sitemap,
            hostname=hostname if hostname is not None else self.sitemap.hostname,
            dest=dest if dest is not None else self.sitemap.dest,
            public_path=public_path if public_path is not None else self.sitemap.public_path,
            limit_count_paths=(
                limit_count_paths
                if limit_count_paths is not None
                else self.sitemap.limit_count_paths
            ),
            strict_params=(
                strict_params if strict_params is not None else self.sitemap.strict_params
            ),
        )

        routes = self.routes
        if routes_file is not None:
            routes = replace(self.routes, file=routes_file)

        return replace(self, sitemap=sitemap, routes=routes)
