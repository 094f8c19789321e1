import builtins

import pytest

from mal import repl as repl_module
from mal.interpreter import Interpreter
from mal.repl import create_arg_parser, main, repl, run_file


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            item = next(it)
        except StopIteration:
            raise EOFError
        if isinstance(item, BaseException):
            raise item
        return item

    monkeypatch.setattr(builtins, "input", fake_input)


@pytest.fixture(autouse=True)
def _no_readline(monkeypatch):
    # keep the developer's real readline history untouched
    monkeypatch.setattr(repl_module, "READLINE_AVAILABLE", False)


def test_repl_prints_results(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, ["(def! a 4) (* a a)", "(nope)", "a"])
    repl(Interpreter(), "user> ", tmp_path / "hist")
    out = capsys.readouterr().out
    assert out.splitlines() == ["4", "16", "[ERROR] unknown symbol 'nope'", "4", ""]


def test_repl_stops_on_empty_line(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, ["1", "", "2"])
    repl(Interpreter(), "user> ", tmp_path / "hist")
    assert capsys.readouterr().out == "1\n"


def test_repl_survives_interrupt(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, [KeyboardInterrupt(), "(+ 1 1)"])
    repl(Interpreter(), "user> ", tmp_path / "hist")
    assert "2" in capsys.readouterr().out.splitlines()


def test_run_file(tmp_path, capsys):
    script = tmp_path / "prog.mal"
    script.write_text('; greet\n(def! n 3)\n(prn (list n "x"))\n', encoding="utf-8")
    assert run_file(Interpreter(), script) == 0
    assert capsys.readouterr().out == '(3 "x")\n'


def test_run_file_error(tmp_path, capsys):
    script = tmp_path / "bad.mal"
    script.write_text("(+ 1", encoding="utf-8")
    assert run_file(Interpreter(), script) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_main_missing_script(tmp_path, capsys):
    assert main([str(tmp_path / "missing.mal")]) == 1


def test_main_runs_script(tmp_path, capsys):
    script = tmp_path / "ok.mal"
    script.write_text("(println (+ 40 2))", encoding="utf-8")
    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "42\n"


def test_arg_parser_defaults():
    args = create_arg_parser().parse_args([])
    assert args.script is None
    assert args.history is None
    assert args.debug is False


def test_run_file_error_on_too_deep_value(tmp_path, capsys):
    script = tmp_path / "deep.mal"
    lines = ["(def! wrap (fn* (x n) (if (= n 0) x (wrap (list x) (- n 1)))))", "(def! deep (list))"]
    lines += ["(def! deep (wrap deep 20))"] * 150
    lines.append("(deep)")
    script.write_text("\n".join(lines), encoding="utf-8")
    assert run_file(Interpreter(), script) == 1
    assert capsys.readouterr().err == "[ERROR] ... is not a function\n"


def test_main_ignores_unknown_log_level(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("MAL_LOG_LEVEL", "verbose")
    script = tmp_path / "ok.mal"
    script.write_text("(println 1)", encoding="utf-8")
    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "1\n"
