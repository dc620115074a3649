"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, labcheck.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TaxConfig(BaseModel):
    """[tax] section."""

    model_config = {"frozen": True}

    default_rate: float = Field(default=12.0, ge=0, allow_inf_nan=False)


class OutputConfig(BaseModel):
    """[output] section.

    ``decimals`` only affects how floats are displayed; calculations are
    never rounded.
    """

    model_config = {"frozen": True}

    decimals: int = Field(default=2, ge=0, le=12)


class LabConfig(BaseModel):
    """Root config model for labcheck.toml."""

    model_config = {"frozen": True}

    tax: TaxConfig = Field(default_factory=TaxConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
