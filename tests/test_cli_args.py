import io

import pytest

from jsonnetkit.cli_args import (
    ArgumentError,
    next_arg,
    read_input,
    safe_str_to_int,
    simplify_args,
    write_output_file,
)


@pytest.mark.parametrize(
    "given, expected",
    [
        ([], []),
        (["-a"], ["-a"]),
        (["-a", "-b"], ["-a", "-b"]),
        (["-a", "-c", "-b"], ["-a", "-c", "-b"]),
        (["-abc"], ["-a", "-b", "-c"]),
        (["-acb"], ["-a", "-c", "-b"]),
    ],
)
def test_simplify_args(given, expected):
    assert simplify_args(given) == expected


def test_simplify_args_stops_at_double_dash():
    assert simplify_args(["-ab", "--", "-cd"]) == ["-a", "-b", "--", "-cd"]


def test_simplify_args_keeps_long_options():
    assert simplify_args(["--jpath", "x"]) == ["--jpath", "x"]


def test_next_arg():
    it = iter(["-J", "dir"])
    assert next_arg(it) == "-J"
    assert next_arg(it) == "dir"
    with pytest.raises(ArgumentError, match="Expected another commandline argument."):
        next_arg(it)


@pytest.mark.parametrize("text, expected", [("42", 42), ("-3", -3), ("+7", 7), ("0", 0)])
def test_safe_str_to_int(text, expected):
    assert safe_str_to_int(text) == expected


@pytest.mark.parametrize("text", ["abc", "", " 1", "1.5", "1_000"])
def test_safe_str_to_int_rejects(text):
    with pytest.raises(ArgumentError, match="Invalid integer"):
        safe_str_to_int(text)


def test_read_input_code():
    assert read_input(True, "{a: 1}") == ("{a: 1}", "<cmdline>")


def test_read_input_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("[1, 2]"))
    assert read_input(False, "-") == ("[1, 2]", "<stdin>")


def test_read_input_file(tmp_path):
    path = tmp_path / "in.jsonnet"
    path.write_text("local x = 1;\r\nx\n", encoding="utf-8", newline="")
    assert read_input(False, str(path)) == ("local x = 1;\r\nx\n", str(path))


def test_read_input_missing_file(tmp_path):
    missing = str(tmp_path / "missing.jsonnet")
    with pytest.raises(ArgumentError, match="Opening input file"):
        read_input(False, missing)


def test_write_output_to_stdout(capsys):
    write_output_file("{}\n", "", False)
    assert capsys.readouterr().out == "{}\n"


def test_write_output_creates_dirs(tmp_path):
    target = tmp_path / "a" / "b" / "out.json"
    write_output_file("[]\n", str(target), True)
    assert target.read_text(encoding="utf-8") == "[]\n"


def test_write_output_without_dirs_fails(tmp_path):
    target = tmp_path / "nope" / "out.json"
    with pytest.raises(OSError):
        write_output_file("[]\n", str(target), False)


def test_write_then_read_round_trip(tmp_path):
    target = tmp_path / "round.jsonnet"
    write_output_file("{ x: 1 }\n", str(target), False)
    assert read_input(False, str(target)) == ("{ x: 1 }\n", str(target))