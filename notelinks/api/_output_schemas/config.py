"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class ConfigShowOutput(BaseOutputSchema):
    config_path: str = Field(..., description="Path to the configuration file")
    exists: bool = Field(..., description="Whether the file exists (defaults are shown otherwise)")
    content: dict[str, Any] = Field(..., description="Effective configuration")
