import io

import main


def test_runs_file_and_prints_final_stack(tmp_path, capsys):
    source = tmp_path / "prog.ws"
    source.write_text("2 3 + dup +\n", encoding="utf-8")
    assert main.main([str(source), "--debug"]) == 0
    out = capsys.readouterr().out
    assert "Final stack state: [10]" in out


def test_eval_programs_run_before_file(tmp_path, capsys):
    source = tmp_path / "prog.ws"
    source.write_text("+", encoding="utf-8")
    assert main.main(["-e", "1", "-e", "2", str(source), "-d"]) == 0
    assert "Final stack state: [3]" in capsys.readouterr().out


def test_reads_stdin_for_dash(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 dup +"))
    assert main.main(["-", "-d"]) == 0
    assert "Final stack state: [4]" in capsys.readouterr().out


def test_underflow_reports_and_fails(tmp_path, capsys):
    source = tmp_path / "prog.ws"
    source.write_text("1 + 5", encoding="utf-8")
    assert main.main([str(source)]) == 1
    err = capsys.readouterr().err
    assert "Runtime Error: Stack underflow" in err
    assert "Current stack: [1]" in err


def test_unknown_word_is_ignored_unless_strict(tmp_path, capsys):
    source = tmp_path / "prog.ws"
    source.write_text("1 frobnicate", encoding="utf-8")
    assert main.main([str(source)]) == 0
    assert main.main([str(source), "--strict"]) == 1
    assert "Unknown word: 'frobnicate'" in capsys.readouterr().err


def test_float_values(tmp_path, capsys):
    source = tmp_path / "prog.ws"
    source.write_text("1.5 2.5 +", encoding="utf-8")
    assert main.main([str(source), "--float", "-d"]) == 0
    assert "Final stack state: [4.0]" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main.main([str(tmp_path / "missing.ws")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_run_stops_at_first_failing_program(capsys):
    from interpreter import Interpreter
    from core_words import install
    i = install(Interpreter())
    assert main.run(i, ["1", "+", "2"]) is False
    assert i.stack == [1]


def test_division_by_zero_is_reported(capsys):
    from interpreter import Interpreter
    from core_words import install
    i = install(Interpreter())
    assert main.run(i, ["1 0 //"]) is False
    assert "Runtime Error" in capsys.readouterr().err
