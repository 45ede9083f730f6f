"""Outcome of dispatching one reference."""

from dataclasses import dataclass

from .ReferenceKind import ReferenceKind

ACTION_NAVIGATE = "navigate"
ACTION_OPEN = "open"
ACTION_HEADING = "heading"
ACTION_NOT_FOUND = "not_found"
ACTION_UNRESOLVED = "unresolved"
ACTION_UNSUPPORTED = "unsupported"
ACTION_ERROR = "error"

SUCCESS_ACTIONS = (ACTION_NAVIGATE, ACTION_OPEN, ACTION_HEADING)


@dataclass(frozen=True)
class DispatchResult:
    """What happened to a reference.

    ``reference`` and ``kind`` describe the reference that was finally
    handled; ``via`` lists the citations that led to it, outermost first.
    """

    reference: str
    kind: ReferenceKind
    action: str
    target: str | None = None
    line: int | None = None
    via: tuple[str, ...] = ()

    @property
    def success(self) -> bool:
        return self.action in SUCCESS_ACTIONS

    def to_dict(self) -> dict[str, object]:
        return {
            "reference": self.reference,
            "kind": self.kind.value,
            "action": self.action,
            "target": self.target,
            "line": self.line,
            "via": list(self.via),
        }
