"""Tests for the command-line interface."""

import pytest

from roman_calculator.__main__ import main, run_calculation


class TestPrompt:
    """Reading the expression from standard input"""

    def test_prompts_and_prints_result(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("builtins.input", lambda: "3+4")
        main([])
        out = capsys.readouterr().out
        assert out.splitlines() == ["Enter an expression: ", "Result: 7"]

    def test_prints_error_to_stdout(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("builtins.input", lambda: "I+3")
        main([])
        captured = capsys.readouterr()
        assert "Error: Mixed number formats or invalid numbers" in captured.out
        assert captured.err == ""

    def test_end_of_input_exits_quietly(self, monkeypatch) -> None:
        def raise_eof():
            raise EOFError

        monkeypatch.setattr("builtins.input", raise_eof)
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0


class TestArgument:
    """Passing the expression on the command line"""

    def test_roman_expression(self, capsys) -> None:
        main(["X - I"])
        assert capsys.readouterr().out.strip() == "Result: IX"

    def test_does_not_prompt(self, monkeypatch, capsys) -> None:
        def fail():
            raise AssertionError("input() should not be called")

        monkeypatch.setattr("builtins.input", fail)
        main(["10/2"])
        assert capsys.readouterr().out.strip() == "Result: 5"

    def test_result_below_one(self, capsys) -> None:
        main(["I-I"])
        assert capsys.readouterr().out.strip() == "Error: Roman numerals cannot be less than I, got 0"

    @pytest.mark.parametrize("argv", [["-5+3"], ["-I+I"]])
    def test_leading_operator_reported_as_format_error(self, argv, capsys) -> None:
        main(argv)
        captured = capsys.readouterr()
        assert captured.out.startswith("Error: Mixed number formats or invalid numbers")
        assert captured.err == ""

    def test_expression_split_over_arguments(self, capsys) -> None:
        main(["3", "+", "4"])
        assert capsys.readouterr().out.strip() == "Result: 7"


class TestDebugOutput:
    """Debug lines are printed before the result when enabled"""

    def test_debug_lines(self, capsys) -> None:
        run_calculation("V*II", debug=True)
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Debug: left='V' operator='*' right='II'"
        assert lines[1] == "Debug: format=roman operands=(5, 2) value=10"
        assert lines[2] == "Result: X"

    def test_no_debug_lines_on_error(self, capsys) -> None:
        run_calculation("0+1", debug=True)
        out = capsys.readouterr().out
        assert "Debug:" not in out
        assert out.startswith("Error: Numbers must be between 1 and 10 inclusive")
