"""控制台入口测试"""
import io

import main
from core import ExpressionEvaluator


class TestRunConsole:
    def test_lowercase_and_quit(self):
        stdin = io.StringIO("1+1\n7/0\nQUIT\n2+2\n")
        out, err = io.StringIO(), io.StringIO()
        records = main.run_console(ExpressionEvaluator(), show_banner=False,
                                   stdin=stdin, out=out, err=err)
        assert records == [("1+1", "2", None), ("7/0", None, "Division by zero")]
        assert "Result: 2" in out.getvalue()
        assert "Goodbye!" in out.getvalue()
        assert "Result: 4" not in out.getvalue()
        assert err.getvalue() == "Error: Division by zero\n"

    def test_eof_and_blank_lines(self):
        stdin = io.StringIO("\n   \n2*3\n")
        out, err = io.StringIO(), io.StringIO()
        records = main.run_console(ExpressionEvaluator(), show_banner=False,
                                   stdin=stdin, out=out, err=err)
        message = "Invalid expression: 0 values left on the stack, expected 1"
        assert records == [("", None, message), ("   ", None, message), ("2*3", "6", None)]
        assert err.getvalue().splitlines() == [f"Error: {message}"] * 2
        assert "Goodbye!" not in out.getvalue()

    def test_banner(self):
        out = io.StringIO()
        main.run_console(ExpressionEvaluator(), stdin=io.StringIO("quit\n"),
                         out=out, err=io.StringIO())
        assert out.getvalue().startswith("Welcome to the Infix Expression Parser!")


class TestCli:
    def test_one_shot(self, capsys):
        assert main.cli(["1+1==2", "8-4-2"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "Result: true\nResult: 2\n"

    def test_one_shot_failure_exit_status(self, capsys):
        assert main.cli(["1+1", "(1+2"]) == 1
        captured = capsys.readouterr()
        assert "Error: Mismatched parentheses" in captured.err

    def test_extended_merge_flag(self, capsys):
        assert main.cli(["--extended_merge", "5>=5"]) == 0
        assert capsys.readouterr().out == "Result: true\n"

    def test_save_results(self, tmp_path, capsys):
        path = tmp_path / "results.txt"
        main.cli(["--save_results", "--results_path", str(path), "2*3", "1/0"])
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines == [
            "=== Expression Results ===",
            "2*3 -> 6",
            "1/0 -> Error: Division by zero",
        ]
