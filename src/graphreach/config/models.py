"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, graphreach.toml only holds
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    # Relative paths resolve against the directory holding graphreach.toml.
    path: Path | None = None


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)