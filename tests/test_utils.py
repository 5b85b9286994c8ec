"""Tests for prompt and output helpers."""

import io

import pytest

from rich.console import Console

from binpath.utils import error, info, prompt_index, warn


class TestPromptIndex:
    def test_accepts_number(self, answers):
        answers("3")
        assert prompt_index("Pick:") == 3

    def test_strips_whitespace(self, answers):
        answers("  1 ")
        assert prompt_index("Pick:") == 1

    def test_reprompts_until_valid(self, answers, capsys):
        answers("", "abc", "-1", "1.5", "0")

        assert prompt_index("Pick:") == 0
        assert capsys.readouterr().out.count("Please enter a valid number.") == 4

    @pytest.mark.parametrize("raw", ["1_0", "+1", "١"])
    def test_rejects_non_plain_digits(self, answers, capsys, raw):
        """Underscores, signs and non-ASCII digits are not accepted as indexes."""
        answers(raw, "4")

        assert prompt_index("Pick:") == 4
        assert "Please enter a valid number." in capsys.readouterr().out

    def test_prompt_mentions_cancel(self, answers, capsys):
        answers("0")
        prompt_index("Pick:")
        assert "Pick: (c to cancel)" in capsys.readouterr().out

    def test_cancel(self, answers):
        answers("cancel")
        assert prompt_index("Pick:") is None

    def test_eof(self, answers):
        answers()
        assert prompt_index("Pick:") is None


class TestOutput:
    def test_plain_when_not_a_tty(self, capsys):
        info("[green]done[/green]")
        assert capsys.readouterr().out == "done\n"

    def test_colored_on_terminal(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        buf = io.StringIO()
        monkeypatch.setattr(
            "binpath.utils.console",
            Console(file=buf, force_terminal=True, color_system="standard"),
        )

        info("[green]done[/green]")

        assert "\x1b[" in buf.getvalue()
        assert "done" in buf.getvalue()

    def test_long_lines_not_wrapped(self, capsys):
        line = "x" * 300
        info(line)
        assert capsys.readouterr().out == f"{line}\n"

    def test_messages_go_to_stderr(self, capsys):
        error("boom")
        warn("careful")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Error: boom\nWarning: careful\n"

    def test_error_text_is_not_markup(self, capsys):
        error("bad [red]path[/red]")
        assert capsys.readouterr().err == "Error: bad [red]path[/red]\n"
