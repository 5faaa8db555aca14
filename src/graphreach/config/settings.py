"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``GRAPHREACH_*`` prefix
  3. TOML file    — ``graphreach.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` fed by
the walk-up discovery in :mod:`graphreach.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from graphreach.config.discovery import find_config
from graphreach.config.models import GraphConfig, OutputConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``graphreach.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class GraphreachSettings(BaseSettings):
    """Settings for the graphreach CLI, frozen after construction.

    Attributes:
        root: Directory that relative ``[graph] path`` values resolve
            against (parent of ``graphreach.toml``, or CWD).
        config_path: The TOML file in use, or None.
        graph_path: ``--graph`` override for the graph document.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GRAPHREACH_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    graph_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    graph: GraphConfig = Field(default_factory=GraphConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        graph_path: str | None = None,
        **cli_flags: Any,
    ) -> GraphreachSettings:
        """Construct settings from a CLI invocation.

        Discovers ``graphreach.toml`` via walk-up (or explicit
        *config_path*), resolves *root* from the config file's parent
        directory, and merges CLI flags as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(root)

        resolved_root = root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        overrides: dict[str, Any] = dict(cli_flags)
        if graph_path is not None:
            overrides["graph_path"] = Path(graph_path)

        _tls.toml_path = toml_path
        try:
            return cls(root=resolved_root, config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None

    def resolve_graph_path(self) -> Path | None:
        """The graph document to load: ``--graph`` first, then ``[graph] path``."""
        if self.graph_path is not None:
            return self.graph_path
        configured = self.graph.path
        if configured is None:
            return None
        return configured if configured.is_absolute() else self.root / configured
