"""Configuration management for ewiki.

Supports TOML configuration format with auto-discovery. Provider options
(sub_title, fav_icon, logo, css, js) accept plain strings from TOML and
additionally callables when the wiki is configured from Python.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from ewiki.core.media import PASS_THROUGH_MEDIA_TYPES
from ewiki.core.page import DEFAULT_TITLE
from ewiki.core.providers import ProviderFunc

CONFIG_FILENAME = "ewiki.toml"
DEFAULT_ROOT = "/wiki"

ProviderOption = str | ProviderFunc | None

_PROVIDER_KEYS = ("sub_title", "fav_icon", "logo", "css", "js")


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class WikiConfig:
    """Wiki router configuration."""

    source_dir: Path = field(default_factory=lambda: Path.cwd() / "wiki")
    title: str = DEFAULT_TITLE
    root: str = DEFAULT_ROOT
    base_path: str | None = None
    sub_title: ProviderOption = None
    fav_icon: ProviderOption = None
    logo: ProviderOption = None
    css: ProviderOption = None
    js: ProviderOption = None
    pass_through: tuple[str, ...] = PASS_THROUGH_MEDIA_TYPES

    def resolved_source_dir(self) -> Path:
        """Return the canonical absolute wiki root.

        Relative paths are resolved against the current working directory.
        """
        source_dir = self.source_dir
        if not source_dir.is_absolute():
            source_dir = Path.cwd() / source_dir
        return source_dir.resolve()

    def normalized_root(self) -> str:
        """Return the mount prefix with a leading and no trailing slash.

        An empty root falls back to "/wiki"; "/" stays "/".
        """
        root = self.root.strip()
        if not root:
            root = DEFAULT_ROOT
        if not root.startswith("/"):
            root = "/" + root
        return root.rstrip("/") or "/"

    def normalized_base_path(self) -> str:
        """Return the breadcrumb link prefix with leading and trailing slashes.

        Defaults to the mount root.
        """
        base_path = (self.base_path or "").strip()
        if not base_path:
            base_path = self.normalized_root()
        if not base_path.startswith("/"):
            base_path = "/" + base_path
        if not base_path.endswith("/"):
            base_path = base_path + "/"
        return base_path


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    wiki: WikiConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for ewiki.toml in current directory and parents.

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
        """Search for config file in current directory and parents."""
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
        return cls(server=ServerConfig(), wiki=WikiConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            wiki=cls._parse_wiki(data.get("wiki"), config_dir),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_wiki(cls, data: object, config_dir: Path) -> WikiConfig:
        """Parse wiki configuration section.

        Args:
            data: Raw wiki section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            WikiConfig instance
        """
        if data is None:
            return WikiConfig(source_dir=config_dir / "wiki")

        if not isinstance(data, dict):
            raise ValueError("wiki section must be a dictionary")

        source_dir = data.get("source_dir", "wiki")
        if not isinstance(source_dir, str):
            raise ValueError("wiki.source_dir must be a string")

        title = data.get("title", DEFAULT_TITLE)
        if not isinstance(title, str):
            raise ValueError("wiki.title must be a string")

        root = data.get("root", DEFAULT_ROOT)
        if not isinstance(root, str):
            raise ValueError("wiki.root must be a string")

        base_path = data.get("base_path")
        if base_path is not None and not isinstance(base_path, str):
            raise ValueError("wiki.base_path must be a string")

        providers: dict[str, str | None] = {}
        for key in _PROVIDER_KEYS:
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"wiki.{key} must be a string")
            providers[key] = value

        pass_through_raw = data.get("pass_through", list(PASS_THROUGH_MEDIA_TYPES))
        if not isinstance(pass_through_raw, list):
            raise ValueError("wiki.pass_through must be a list")
        for item in pass_through_raw:
            if not isinstance(item, str):
                raise ValueError("wiki.pass_through items must be strings")

        return WikiConfig(
            source_dir=config_dir / source_dir,
            title=title,
            root=root,
            base_path=base_path,
            pass_through=tuple(pass_through_raw),
            **providers,
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        source_dir: Path | None = None,
        root: str | None = None,
        title: str | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            source_dir: Override wiki.source_dir
            root: Override wiki.root
            title: Override wiki.title

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        wiki = self.wiki
        if source_dir is not None or root is not None or title is not None:
            wiki = replace(
                self.wiki,
                source_dir=source_dir if source_dir is not None else self.wiki.source_dir,
                root=root if root is not None else self.wiki.root,
                title=title if title is not None else self.wiki.title,
            )

        return replace(self, server=server, wiki=wiki)
