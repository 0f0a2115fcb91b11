"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, puzzlectl.toml only contains
overrides. An empty or missing file gives the standard puzzle setup.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

# --- puzzlectl.toml sections ---


class DialConfig(BaseModel):
    """[dial] section."""

    model_config = {"frozen": True}

    start_position: int = 50
    size: int = Field(default=100, ge=2)

    @model_validator(mode="after")
    def _start_on_dial(self) -> DialConfig:
        if not 0 <= self.start_position < self.size:
            msg = f"start_position must be in [0, {self.size}), got {self.start_position}"
            raise ValueError(msg)
        return self


class InputConfig(BaseModel):
    """[input] section."""

    model_config = {"frozen": True}

    encoding: str = "utf-8"
