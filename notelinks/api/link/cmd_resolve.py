"""Link resolve API command.

CLI: notelinks link resolve REFERENCE [--from FILE] [--relative-to ANCHOR]

Computes the target path without creating directories or opening anything.
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkResolveOutput
from ..StageResult import StageResult


def cmd_resolve(
    reference: str,
    current_file: str | None = None,
    relative_to: str | None = None,
) -> StageResult:
    """Resolve ``reference`` to a path.

    Args:
        reference: Link target as written in the document
        current_file: Document containing the link
        relative_to: Override the configured anchor (root, first, current)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.NotelinksConfig import NotelinksConfig
        from ._build_context import _build_context
        from .classify_reference import classify_reference
        from .PathResolver import PathResolver
        from .ReferenceKind import ReferenceKind

        kind = classify_reference(reference)

        yield (0.3, "Loading configuration...")
        try:
            config = NotelinksConfig.load()
        except ValueError as e:
            result_obj.output = LinkResolveOutput(
                errors=[str(e)],
                reference=reference,
                kind=kind.value,
                relative_to=relative_to or "",
                target="",
            ).model_dump(mode="python")
            result_obj.result = f"Failed to load config: {e}"
            result_obj.success = False
            return

        ctx = _build_context(config, current_file=current_file, relative_to=relative_to, create_dirs=False)

        yield (0.7, "Resolving reference...")
        if kind not in (ReferenceKind.FILENAME, ReferenceKind.FILE):
            result_obj.output = LinkResolveOutput(
                warnings=[f"{kind.value} references are not resolved on the filesystem"],
                reference=reference,
                kind=kind.value,
                relative_to=ctx.policy.relative_to,
                target="",
            ).model_dump(mode="python")
            result_obj.result = f"{reference} is a {kind.value} reference; nothing to resolve"
            result_obj.success = True
            return

        target = PathResolver(ctx).resolve(reference)
        result_obj.output = LinkResolveOutput(
            reference=reference,
            kind=kind.value,
            relative_to=ctx.policy.relative_to,
            target=target,
        ).model_dump(mode="python")
        result_obj.result = f"Resolved {reference} to {target}"
        result_obj.success = True

    return StageResult(
        announce=f"Resolving {reference}...",
        progress_callback=do_work,
    )
