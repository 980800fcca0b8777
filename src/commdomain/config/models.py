"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, commdomain.toml only contains
overrides. Domains themselves are never configurable; the sections are
composed by :class:`commdomain.config.settings.CommDomainSettings`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    width: int = Field(default=100, ge=40)


class VerifyConfig(BaseModel):
    """[verify] section."""

    model_config = {"frozen": True}

    strict: bool = False
