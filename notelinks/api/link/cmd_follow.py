"""Link follow API command.

CLI: notelinks link follow REFERENCE [--from FILE] [--relative-to ANCHOR] [--create-dirs/--no-create-dirs]
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkFollowOutput
from ..StageResult import StageResult


def cmd_follow(
    reference: str,
    current_file: str | None = None,
    relative_to: str | None = None,
    create_dirs: bool | None = None,
) -> StageResult:
    """Follow ``reference``: navigate, open, jump to a heading or look up a citation.

    Notices raised while following become output warnings.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.NotelinksConfig import NotelinksConfig
        from ._build_context import _build_context
        from .classify_reference import classify_reference
        from .Dispatcher import Dispatcher

        yield (0.2, "Loading configuration...")
        try:
            config = NotelinksConfig.load()
        except ValueError as e:
            result_obj.output = LinkFollowOutput(
                errors=[str(e)],
                reference=reference,
                kind=classify_reference(reference).value,
                action="error",
                target="",
            ).model_dump(mode="python")
            result_obj.result = f"Failed to load config: {e}"
            result_obj.success = False
            return

        notices: list[str] = []
        ctx = _build_context(
            config,
            current_file=current_file,
            relative_to=relative_to,
            create_dirs=create_dirs,
            notify=notices.append,
        )

        yield (0.5, "Following reference...")
        outcome = Dispatcher(ctx).handle_reference(reference)

        result_obj.output = LinkFollowOutput(
            warnings=notices,
            reference=reference,
            kind=outcome.kind.value,
            action=outcome.action,
            target=outcome.target or "",
            line=outcome.line,
            via=list(outcome.via),
        ).model_dump(mode="python")
        result_obj.success = outcome.success
        if outcome.success:
            result_obj.result = f"Followed {reference} ({outcome.action} {outcome.target})"
        else:
            result_obj.result = f"Could not follow {reference} ({outcome.action})"

    return StageResult(
        announce=f"Following {reference}...",
        progress_callback=do_work,
    )
