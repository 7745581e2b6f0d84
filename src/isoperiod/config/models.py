"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, isoperiod.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- isoperiod.toml sections ---


class ParseConfig(BaseModel):
    """[parse] section."""

    model_config = {"frozen": True}

    normalise: bool = True


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=100, ge=40)
