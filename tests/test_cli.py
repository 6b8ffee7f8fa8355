import io

import pytest

from amazed.cli import main

LINEAR = "2\n##start\n0 0 0\n1 1 1\n##end\n2 2 2\n0-1\n1-2\n"


def run(monkeypatch, capsys, text, argv=None):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    status = main([] if argv is None else argv)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_solves_linear_maze(monkeypatch, capsys):
    status, out, err = run(monkeypatch, capsys, LINEAR)
    assert status == 0
    assert err == ""
    assert out == (
        "#number_of_robots\n2\n#rooms\n##start\n0 0 0\n1 1 1\n##end\n2 2 2\n"
        "#tunnels\n0-1\n1-2\n#moves\nP1-1 \nP1-2 P2-1 \nP2-2 \n"
    )


def test_help_prints_usage_and_fails(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, LINEAR, ["-h"])
    assert status == 84
    assert out == "USAGE:\n\t./amazed < [your path file]\n"


@pytest.mark.parametrize("argv", [["file.txt"], ["-h", "extra"], ["a", "b"]])
def test_bad_arguments(monkeypatch, capsys, argv):
    status, out, _ = run(monkeypatch, capsys, LINEAR, argv)
    assert status == 84
    assert out == ""


def test_bad_robot_count_reports_line(monkeypatch, capsys):
    status, _, err = run(monkeypatch, capsys, "abc\n##start\n0 0 0\n")
    assert status == 84
    assert err == "an error occured on line : 0\n"


def test_empty_input_reports_line_zero(monkeypatch, capsys):
    status, _, err = run(monkeypatch, capsys, "")
    assert status == 84
    assert "line : 0" in err


def test_missing_end_fails_silently(monkeypatch, capsys):
    status, out, err = run(monkeypatch, capsys, "1\n##start\n0 0 0\n1 1 1\n0-1\n")
    assert status == 84
    assert err == ""
    assert "#moves" not in out


def test_no_path_still_succeeds(monkeypatch, capsys):
    text = "1\n##start\n0 0 0\n1 1 1\n##end\n2 2 2\n0-1\n"
    status, out, err = run(monkeypatch, capsys, text)
    assert status == 0
    assert err == "There is no path from beginning to end.\n"
    assert "#moves" not in out
    assert out.startswith("#number_of_robots\n1\n")


def test_reads_sys_argv_when_none(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["amazed", "-h"])
    monkeypatch.setattr("sys.stdin", io.StringIO(LINEAR))
    assert main() == 84
    assert capsys.readouterr().out.startswith("USAGE:")