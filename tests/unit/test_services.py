"""Tests for the default navigator, heading search and citation lookup."""

import pytest

from notelinks.api.escape import pattern_escape
from notelinks.api.link.BufferHistory import BufferHistory
from notelinks.api.link.MappingCitationLookup import MappingCitationLookup
from notelinks.api.link.MarkdownHeadingSearch import MarkdownHeadingSearch, heading_slug
from notelinks.api.osprofile.OSProfile import OSProfile

from ..conftest import RecordingRunner


@pytest.mark.unit
class TestBufferHistory:
    def test_navigation_is_lifo(self):
        history = BufferHistory("/nb/index.md")
        history.navigate_to("/nb/a.md")
        history.navigate_to("/nb/b.md")

        assert history.current_file() == "/nb/b.md"
        assert history.back() == "/nb/a.md"
        assert history.back() == "/nb/index.md"
        assert history.back() is None
        assert history.current_file() == "/nb/index.md"

    def test_editor_command(self):
        runner = RecordingRunner()
        history = BufferHistory("/nb/index.md", runner=runner, profile=OSProfile.get("linux"), editor="nvim")

        history.navigate_to("/nb/My Notes/a.md")

        assert runner.run_commands == ["nvim /nb/My\\ Notes/a.md"]

    def test_editor_path_with_semicolon_is_quoted(self):
        runner = RecordingRunner()
        history = BufferHistory("/nb/index.md", runner=runner, profile=OSProfile.get("linux"), editor="nvim")

        history.navigate_to("/nb/a;rm b.md")

        assert runner.run_commands == ["nvim '/nb/a;rm b.md'"]

    def test_editor_requires_runner_and_profile(self):
        with pytest.raises(ValueError, match="needs both"):
            BufferHistory("/nb/index.md", editor="vim")


@pytest.mark.unit
class TestMarkdownHeadingSearch:
    @pytest.fixture
    def note(self, tmp_path):
        path = tmp_path / "note.md"
        path.write_text(
            "# Title\n"
            "\n"
            "```\n"
            "# Background\n"
            "```\n"
            "## Background\n"
            "text\n"
            "### What's New? ###\n",
            encoding="utf-8",
        )
        return path

    def test_finds_heading_outside_code_fence(self, note):
        search = MarkdownHeadingSearch(lambda: str(note))

        assert search.jump_to_heading("#Background") == 6
        assert search.line == 6

    def test_matches_slug(self, note):
        assert MarkdownHeadingSearch(lambda: str(note)).jump_to_heading("#whats-new") == 8

    def test_missing_heading(self, note):
        assert MarkdownHeadingSearch(lambda: str(note)).jump_to_heading("#Nope") is None

    def test_unreadable_document(self, tmp_path):
        assert MarkdownHeadingSearch(lambda: str(tmp_path / "gone.md")).jump_to_heading("#x") is None

    @pytest.mark.parametrize(
        "text,slug",
        [("Background", "background"), ("What's New?", "whats-new"), ("Step 1: Setup", "step-1-setup")],
    )
    def test_heading_slug(self, text, slug):
        assert heading_slug(text) == slug


@pytest.mark.unit
class TestMappingCitationLookup:
    def test_escaped_key_matches(self):
        lookup = MappingCitationLookup({"smith-jones.2020": "file:~/papers/sj.pdf"})

        assert lookup.resolve_citation("@smith\\-jones\\.2020") == "file:~/papers/sj.pdf"

    def test_keys_may_carry_at_sign(self):
        assert MappingCitationLookup({"@doe": "https://x.org"}).resolve_citation("@doe") == "https://x.org"

    def test_escaped_dot_does_not_match_other_chars(self):
        lookup = MappingCitationLookup({"smithX2020": "wrong"})

        assert lookup.resolve_citation("@smith\\.2020") is None

    def test_unknown_key(self):
        assert MappingCitationLookup().resolve_citation("@nobody") is None

    def test_parentheses_match_literally(self):
        lookup = MappingCitationLookup({"@smith(2020)": "file:/a.pdf", "smith2020": "file:/other.pdf"})

        assert lookup.resolve_citation(pattern_escape("@smith(2020)")) == "file:/a.pdf"

    def test_repeat_chars_match_literally(self):
        lookup = MappingCitationLookup({"c++guide": "file:/b.pdf", "a*": "file:/star.pdf", "aaa": "file:/aaa.pdf"})

        assert lookup.resolve_citation(pattern_escape("@c++guide")) == "file:/b.pdf"
        assert lookup.resolve_citation(pattern_escape("@a*")) == "file:/star.pdf"
        assert lookup.resolve_citation(pattern_escape("@a+")) is None
