"""Output schemas for link commands."""

from pydantic import Field

from ._base import BaseOutputSchema


class LinkClassifyOutput(BaseOutputSchema):
    reference: str = Field(..., description="Reference as given")
    kind: str = Field(..., description="file, url, citation, anchor or filename")


class LinkResolveOutput(BaseOutputSchema):
    """Output schema for link resolve command.

    ``target`` is empty for kinds that are not resolved on the filesystem.
    """

    reference: str = Field(..., description="Reference as given")
    kind: str = Field(..., description="file, url, citation, anchor or filename")
    relative_to: str = Field(..., description="Anchor policy used")
    target: str = Field(..., description="Resolved path, empty string if not applicable")


class LinkFollowOutput(BaseOutputSchema):
    reference: str = Field(..., description="Reference as given")
    kind: str = Field(..., description="Kind of the reference that was finally handled")
    action: str = Field(..., description="navigate, open, heading, not_found, unresolved, unsupported or error")
    target: str = Field(..., description="Path, URL or anchor acted on, empty string if none")
    line: int | None = Field(None, description="Heading line for anchors, if found")
    via: list[str] = Field(default_factory=list, description="Citations followed to reach the final reference")
