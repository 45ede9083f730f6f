"""Link resolution configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DEFAULT_MAX_DEPTH
from ..link.ResolutionPolicy import RelativeTo, ResolutionPolicy


class LinksConfig(BaseModel):
    """How relative links are resolved and followed."""

    model_config = ConfigDict(extra="forbid")

    root_dir: str | None = Field(None, description="Notebook root directory")
    relative_to: str = Field(RelativeTo.FIRST, description="Anchor for relative links: root, first or current")
    create_dirs: bool = Field(True, description="Create missing directories when following links")
    editor: str | None = Field(None, description="Command that opens notebook documents (e.g. 'nvim')")
    max_depth: int = Field(DEFAULT_MAX_DEPTH, ge=1, description="Maximum nested citation lookups")

    @field_validator("root_dir")
    @classmethod
    def _normalize_root_dir(cls, v: str | None) -> str | None:
        if not v:
            return None
        from .normalize_path import normalize_path

        return str(normalize_path(v))

    @field_validator("editor")
    @classmethod
    def _blank_editor_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()

    def policy(self, relative_to: str | None = None, create_dirs: bool | None = None) -> ResolutionPolicy:
        """Build a resolution policy, with optional per-call overrides."""
        return ResolutionPolicy(
            relative_to=self.relative_to if relative_to is None else relative_to,
            create_dirs=self.create_dirs if create_dirs is None else create_dirs,
        )
