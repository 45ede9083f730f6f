"""Link classify API command.

CLI: notelinks link classify REFERENCE
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkClassifyOutput
from ..StageResult import StageResult


def cmd_classify(reference: str) -> StageResult:
    """Report which kind of link ``reference`` is."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from .classify_reference import classify_reference

        yield (0.5, "Classifying reference...")
        kind = classify_reference(reference)
        result_obj.output = LinkClassifyOutput(reference=reference, kind=kind.value).model_dump(mode="python")
        result_obj.result = f"{reference} is a {kind.value} reference"
        result_obj.success = True

    return StageResult(
        announce=f"Classifying {reference}...",
        progress_callback=do_work,
    )
