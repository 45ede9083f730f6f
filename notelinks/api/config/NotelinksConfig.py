"""Top-level notelinks configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...constants import CONFIG_FILE_NAME
from ...utils.get_home_dir import get_home_dir
from .LinksConfig import LinksConfig


class NotelinksConfig(BaseModel):
    """Configuration file contents. Every section has defaults."""

    model_config = ConfigDict(extra="forbid")

    os: str | None = Field(None, description="OS profile override (linux, darwin, windows); detected when unset")
    links: LinksConfig = Field(default_factory=LinksConfig)
    citations: dict[str, str] = Field(default_factory=dict, description="Citation key -> substitute reference")

    @field_validator("os")
    @classmethod
    def _validate_os(cls, v: str | None) -> str | None:
        if v is None:
            return None
        from ..osprofile.OSProfile import OSProfile

        if v not in OSProfile.supported():
            raise ValueError(f"Unknown OS profile: {v!r} (supported: {OSProfile.supported()})")
        return v

    @classmethod
    def get_config_path(cls) -> Path:
        """Path to the config file under NOTELINKS_HOME (default ~/.notelinks)."""
        return get_home_dir(CONFIG_FILE_NAME)

    @classmethod
    def load(cls) -> "NotelinksConfig":
        """Load and validate config from file.

        A missing file yields the defaults.

        Raises:
            ValueError: If the file is not valid JSON or fails validation
        """
        path = cls.get_config_path()
        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="python")

    def save(self) -> None:
        """Write the configuration atomically (temp file, then rename)."""
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
