import builtins

import pytest

from lox import LoxConfig, LoxError, run, run_file
from lox.__main__ import main
from lox.errors import ErrorKind
from lox.interpreter import Interpreter
from lox.repl import run_repl


def feed_input(monkeypatch, lines):
    """Replace input() with a scripted sequence that ends in EOF."""
    remaining = list(lines)

    def fake_input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    monkeypatch.setattr(builtins, "input", fake_input)


def test_run_prints_values(capsys):
    run("1 + 2 * 3\n\"a\" + \"b\"")
    assert capsys.readouterr().out.splitlines() == ["7", "ab"]


def test_run_with_output_fn():
    out = []
    run("!nil; !0", output_fn=out.append)
    assert out == ["true", "false"]


def test_run_short_circuits_on_scan_error():
    out = []
    with pytest.raises(LoxError) as exc:
        run("1\n2 ~", output_fn=out.append)
    assert exc.value.kind == ErrorKind.UNEXPECTED_CHAR
    assert exc.value.line == 2
    assert out == []


def test_run_parse_error_executes_nothing():
    out = []
    with pytest.raises(LoxError) as exc:
        run("1; (2", output_fn=out.append)
    assert exc.value.kind == ErrorKind.INVALID_SYNTAX
    assert out == []


def test_run_debug_dumps():
    out = []
    config = LoxConfig(show_tokens=True, show_ast=True)
    run("-1", config=config, output_fn=out.append)
    assert out == ["MINUS '-' L1\nNUMBER '1' 1 L1\nEOF '' L1", "-1", "-1"]


def test_run_reuses_interpreter():
    out = []
    interp = Interpreter(output_fn=out.append)
    run("1", interpreter=interp)
    run("2", interpreter=interp)
    assert out == ["1", "2"]


def test_run_file_success(tmp_path, capsys):
    script = tmp_path / "ok.lox"
    script.write_text("// arithmetic\n(1 + 2) * 3\n10 / 4\n", encoding="utf-8")
    assert run_file(str(script)) == 0
    assert capsys.readouterr().out.splitlines() == ["9", "2.5"]


def test_run_file_syntax_error(tmp_path, capsys):
    script = tmp_path / "bad.lox"
    script.write_text("1 +\n", encoding="utf-8")
    assert run_file(str(script)) == 65
    assert "[line 1] Error at 'end': Invalid syntax: Expect expression." in capsys.readouterr().err


def test_run_file_evaluation_error(tmp_path, capsys):
    script = tmp_path / "bad.lox"
    script.write_text('1;\n-"a"\n', encoding="utf-8")
    assert run_file(str(script)) == 70
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["1"]
    assert "[line 2] Error at '-'" in captured.err


def test_run_file_missing(tmp_path, capsys):
    assert run_file(str(tmp_path / "nope.lox")) == 66
    assert "File not found" in capsys.readouterr().err


def test_cli_runs_script_with_ast(tmp_path, capsys):
    script = tmp_path / "ast.lox"
    script.write_text("1+(2*3)", encoding="utf-8")
    assert main(["--ast", str(script)]) == 0
    assert capsys.readouterr().out.splitlines() == ["1+(2*3)", "7"]


def test_cli_recover_reports_all(tmp_path, capsys):
    script = tmp_path / "errors.lox"
    script.write_text("(1;\n+;\n3", encoding="utf-8")
    assert main(["--recover", str(script)]) == 65
    assert len(capsys.readouterr().err.strip().splitlines()) == 2


def test_repl_prints_and_continues(monkeypatch, capsys):
    feed_input(monkeypatch, ["1 + 1", "", '1 + "a"', "!nil", "exit", "2"])
    run_repl(LoxConfig(prompt=""))
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "2",
        "[line 1] Error at '+': Evaluation failed: Unsupported types for +",
        "true",
    ]


def test_repl_ends_on_eof(monkeypatch, capsys):
    feed_input(monkeypatch, ["help"])
    run_repl(LoxConfig(prompt=""))
    assert "Commands: help, exit" in capsys.readouterr().out


def test_config_from_env():
    config = LoxConfig.from_env({
        "LOX_LOG_LEVEL": "debug",
        "LOX_PROMPT": "lox> ",
        "LOX_PARSE_RECOVERY": "yes",
    })
    assert config.log_level == "DEBUG"
    assert config.prompt == "lox> "
    assert config.recover_parse_errors is True


def test_config_defaults():
    config = LoxConfig.from_env({})
    assert config.prompt == "> "
    assert config.recover_parse_errors is False
    assert LoxConfig(log_level="bogus").logging_level == 30


def test_repl_survives_deep_nesting(monkeypatch, capsys):
    feed_input(monkeypatch, ["(" * 200 + "1" + ")" * 200, "2"])
    run_repl(LoxConfig(prompt=""))
    out = capsys.readouterr().out.splitlines()
    assert "Expression nested too deeply." in out[0]
    assert "2" in out[1:]


def test_run_file_deep_nesting(tmp_path, capsys):
    script = tmp_path / "deep.lox"
    script.write_text("(" * 200 + "1" + ")" * 200, encoding="utf-8")
    assert run_file(str(script)) == 65
    assert "Expression nested too deeply." in capsys.readouterr().err


def test_run_dumps_and_values_use_separate_sinks():
    values, dumps = [], []
    interp = Interpreter(output_fn=values.append)
    run("1+1", interpreter=interp, config=LoxConfig(show_ast=True), output_fn=dumps.append)
    assert dumps == ["1+1"]
    assert values == ["2"]
