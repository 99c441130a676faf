"""Tests for confirmation prompts."""

from __future__ import annotations

import pytest

from portclean.prompts import ask_yes_no, is_affirmative


class TestIsAffirmative:
    """Default-no answer policy."""

    @pytest.mark.parametrize("answer", ["y", "Y", "yes", "YES", "Yes", " y ", "yes\n"])
    def test_affirmative(self, answer) -> None:
        assert is_affirmative(answer)

    @pytest.mark.parametrize("answer", ["", "   ", "n", "N", "no", "yep", "maybe", "1"])
    def test_negative(self, answer) -> None:
        assert not is_affirmative(answer)


class TestAskYesNo:
    """Tests for ask_yes_no."""

    def test_passes_question_through(self) -> None:
        asked = []

        def fake_input(question: str) -> str:
            asked.append(question)
            return "y"

        assert ask_yes_no("Kill it? (y/N) ", input_func=fake_input)
        assert asked == ["Kill it? (y/N) "]

    def test_blank_answer_declines(self) -> None:
        assert not ask_yes_no("Kill it? ", input_func=lambda _question: "")

    def test_end_of_input_declines(self) -> None:
        def closed_stdin(_question: str) -> str:
            raise EOFError

        assert not ask_yes_no("Kill it? ", input_func=closed_stdin)
