import io
import logging

from pico.config import Settings
from pico.interpreter import Interpreter
from pico.repl import build_parser, main, run_stream


def run(source, prompt=""):
    interp = Interpreter(Settings(), output=io.StringIO())
    out, err = io.StringIO(), io.StringIO()
    failures = run_stream(interp, io.StringIO(source), out, err, prompt)
    return failures, out.getvalue(), err.getvalue()


def test_results_and_errors_are_reported():
    failures, out, err = run("(+ 1 2)\n(car 5)\n'x")
    assert failures == 1
    assert out == "3\nx\n"
    assert err == "error: car expects a list, got 5\n"


def test_loop_continues_after_syntax_error():
    failures, out, err = run(")\n42")
    assert failures == 1
    assert out == "42\n"
    assert err.startswith("error: Unmatched ')'")


def test_prompt_is_written_before_each_read():
    failures, out, _ = run("1\n", prompt="> ")
    assert failures == 0
    assert out == "> 1\n> \n"


def test_state_persists_across_forms():
    failures, out, _ = run("(defun sq (x) (* x x))\n(sq 7)")
    assert failures == 0
    assert out == "sq\n49\n"


def test_parser_options():
    args = build_parser().parse_args(["--log-level", "debug", "--max-error", "20", "a.pico", "b.pico"])
    assert args.files == ["a.pico", "b.pico"]
    assert args.log_level == "debug"
    assert args.max_error == 20


def test_main_runs_files(tmp_path, capsys):
    first = tmp_path / "first.pico"
    first.write_text("; define\n(setq x 40)\n", encoding="utf-8")
    second = tmp_path / "second.pico"
    second.write_text("(+ x 2)\n", encoding="utf-8")

    assert main([str(first), str(second)]) == 0
    captured = capsys.readouterr()
    assert captured.out == "40\n42\n"
    assert captured.err == ""


def test_main_reports_failures(tmp_path, capsys):
    source = tmp_path / "bad.pico"
    source.write_text("(undefined-fn 1)\n", encoding="utf-8")

    assert main([str(source)]) == 1
    assert "error: No such symbol: undefined-fn" in capsys.readouterr().err


def test_main_logs_each_file(tmp_path, caplog):
    source = tmp_path / "one.pico"
    source.write_text("1", encoding="utf-8")
    with caplog.at_level(logging.INFO, logger="pico.repl"):
        main([str(source)])
    assert f"Evaluating {source}" in caplog.text
