import pytest

from huffpack.cli import UsageError, main, parse_arguments
from huffpack.codec import decode_bytes


def test_parse_encode_defaults_output_to_input():
    assert parse_arguments(["-c", "in.txt"]) == ("-c", "in.txt", "in.txt")


def test_parse_decode_with_output():
    assert parse_arguments(["-d", "in.txt", "out.txt"]) == ("-d", "in.txt", "out.txt")


@pytest.mark.parametrize("option", ["-h", "-help"])
def test_parse_help(option):
    assert parse_arguments([option]) == ("-h", None, None)


@pytest.mark.parametrize("argv", [[], ["-x", "a.txt"], ["-c"], ["-d"]])
def test_parse_invalid(argv):
    with pytest.raises(UsageError):
        parse_arguments(argv)


def test_main_help(capsys):
    assert main(["-help"]) == 0
    assert "-c" in capsys.readouterr().out


def test_main_invalid_arguments(capsys):
    assert main(["-z"]) == 1
    assert "-help" in capsys.readouterr().out


def test_main_encode_then_decode(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    original = b"the quick brown fox jumps over the lazy dog\n" * 20
    (tmp_path / "sample.txt").write_bytes(original)

    assert main(["-c", "sample.txt"]) == 0
    encoded = (tmp_path / "sample.huf").read_bytes()
    assert decode_bytes(encoded) == original

    assert main(["-d", "sample.txt", "restored.txt"]) == 0
    assert (tmp_path / "restored.txt").read_bytes() == original


def test_main_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["-c", "absent.txt"]) == 1
    assert not (tmp_path / "absent.huf").exists()


def test_main_empty_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "empty.txt").write_bytes(b"")
    assert main(["-c", "empty.txt"]) == 1
    assert not (tmp_path / "empty.huf").exists()


def test_main_single_symbol_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "same.txt").write_bytes(b"zzzz")
    assert main(["-c", "same.txt"]) == 1
    assert "dictionary" in capsys.readouterr().err


def test_main_decode_without_encoded_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "plain.txt").write_bytes(b"abc")
    assert main(["-d", "plain.txt", "out.txt"]) == 1


def test_main_decode_corrupt_container(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "plain.txt").write_bytes(b"abc")
    (tmp_path / "plain.huf").write_bytes(b"\x00\x00")
    assert main(["-d", "plain.txt", "out.txt"]) == 1