"""Tests for the Dispatcher, including end-to-end link scenarios."""

import shlex
import subprocess

import pytest

from notelinks.api.link.Dispatcher import Dispatcher
from notelinks.api.link.DispatchResult import (
    ACTION_ERROR,
    ACTION_HEADING,
    ACTION_NAVIGATE,
    ACTION_NOT_FOUND,
    ACTION_OPEN,
    ACTION_UNRESOLVED,
)
from notelinks.api.link.ReferenceKind import ReferenceKind


@pytest.mark.unit
class TestScenarios:
    def test_filename_creates_dir_then_navigates(self, make_ctx, runner):
        ctx = make_ctx(relative_to="root", create_dirs=True)

        result = Dispatcher(ctx).handle_reference("projects/todo.md")

        assert result.kind == ReferenceKind.FILENAME
        assert result.action == ACTION_NAVIGATE
        assert runner.run_commands == ["mkdir -p /nb/projects"]
        assert ctx.navigator.visited == ["/nb/projects/todo.md"]

    @pytest.mark.parametrize("relative_to", ["root", "first", "current"])
    def test_url_goes_straight_to_opener(self, make_ctx, runner, relative_to):
        ctx = make_ctx(relative_to=relative_to)

        result = Dispatcher(ctx).handle_reference("https://example.com")

        assert result.kind == ReferenceKind.URL
        assert result.action == ACTION_OPEN
        assert runner.read_commands == []
        assert runner.run_commands == ["xdg-open https://example.com"]
        assert ctx.navigator.visited == []

    def test_url_metacharacters_stay_inside_one_argument(self, make_ctx, runner):
        url = "https://example.com/;echo>/tmp/marker"

        result = Dispatcher(make_ctx()).handle_reference(url)

        assert result.action == ACTION_OPEN
        assert shlex.split(runner.run_commands[0]) == ["xdg-open", url]

    def test_anchor_goes_to_heading_search(self, make_ctx, runner):
        ctx = make_ctx(heading_line=12)

        result = Dispatcher(ctx).handle_reference("#Background")

        assert result.kind == ReferenceKind.ANCHOR
        assert result.action == ACTION_HEADING
        assert result.line == 12
        assert ctx.headings.anchors == ["#Background"]
        assert runner.commands == []

    def test_citation_redispatches_to_file(self, make_ctx, runner):
        runner.files.add("/home/u/papers/smith2020.pdf")
        ctx = make_ctx(citations={"@smith2020": "file:~/papers/smith2020.pdf"})

        result = Dispatcher(ctx).handle_reference("@smith2020")

        assert result.kind == ReferenceKind.FILE
        assert result.action == ACTION_OPEN
        assert result.target == "/home/u/papers/smith2020.pdf"
        assert result.via == ("@smith2020",)
        assert runner.run_commands == ["xdg-open /home/u/papers/smith2020.pdf"]

    def test_missing_file_single_notice(self, make_ctx, runner, notices):
        result = Dispatcher(make_ctx()).handle_reference("file:/abs/missing.pdf")

        assert result.action == ACTION_NOT_FOUND
        assert notices == ["/abs/missing.pdf doesn't seem to exist!"]
        assert runner.run_commands == []


@pytest.mark.unit
class TestCitations:
    def test_key_is_pattern_escaped(self, make_ctx):
        ctx = make_ctx()

        Dispatcher(ctx).handle_reference("@smith-jones.2020")

        assert ctx.citations.keys == ["@smith\\-jones\\.2020"]

    def test_unresolved_is_silent(self, make_ctx, runner, notices):
        result = Dispatcher(make_ctx()).handle_reference("@nobody")

        assert result.action == ACTION_UNRESOLVED
        assert notices == []
        assert runner.commands == []

    def test_citation_to_url(self, make_ctx, runner):
        result = Dispatcher(make_ctx(citations={"@doe": "https://doi.org/10.1/x"})).handle_reference("@doe")

        assert result.kind == ReferenceKind.URL
        assert runner.run_commands == ["xdg-open https://doi.org/10.1/x"]

    def test_citation_to_filename_navigates(self, make_ctx):
        ctx = make_ctx(citations={"@notes": "reading/doe.md"}, create_dirs=False)

        result = Dispatcher(ctx).handle_reference("@notes")

        assert result.action == ACTION_NAVIGATE
        assert ctx.navigator.visited == ["/home/u/notes/reading/doe.md"]

    def test_self_referencing_citation_terminates(self, make_ctx, notices):
        ctx = make_ctx(citations={"@loop": "@loop"}, max_depth=3)

        result = Dispatcher(ctx).handle_reference("@loop")

        assert result.action == ACTION_UNRESOLVED
        assert result.via == ("@loop", "@loop", "@loop")
        assert ctx.citations.keys == ["@loop"] * 4
        assert len(notices) == 1
        assert "nested citations" in notices[0]

    def test_citation_cycle_terminates(self, make_ctx):
        ctx = make_ctx(citations={"@a": "@b", "@b": "@a"}, max_depth=2)

        result = Dispatcher(ctx).handle_reference("@a")

        assert result.action == ACTION_UNRESOLVED
        assert result.via == ("@a", "@b")


class _FailingRunner:
    def read_line(self, command):
        raise OSError("shell missing")

    def run(self, command):
        raise subprocess.SubprocessError("boom")


@pytest.mark.unit
class TestFailures:
    def test_runner_error_becomes_notice(self, make_ctx, notices):
        ctx = make_ctx().replace(runner=_FailingRunner())

        result = Dispatcher(ctx).handle_reference("file:/x.pdf")

        assert result.action == ACTION_ERROR
        assert notices == ["Could not follow file:/x.pdf: shell missing"]

    def test_unsupported_os_url(self, make_ctx, notices):
        result = Dispatcher(make_ctx(os_name="unsupported")).handle_reference("https://example.com")

        assert result.action == "unsupported"
        assert notices == ["Function unavailable for unknown. Please file an issue."]

    def test_result_success_flag(self, make_ctx):
        dispatcher = Dispatcher(make_ctx(create_dirs=False))

        assert dispatcher.handle_reference("a.md").success
        assert not dispatcher.handle_reference("@missing").success

    def test_result_to_dict(self, make_ctx):
        result = Dispatcher(make_ctx(create_dirs=False)).handle_reference("a.md")

        assert result.to_dict() == {
            "reference": "a.md",
            "kind": "filename",
            "action": "navigate",
            "target": "/home/u/notes/a.md",
            "line": None,
            "via": [],
        }
