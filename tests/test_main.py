"""Tests for the command-line entry point."""

import pytest

from pathstream.__main__ import main


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    monkeypatch.setattr("pathstream.config.configure_logging", lambda **kwargs: None)


def test_normalize(capsys):
    assert main(["normalize", "a/./b/../c", "/..", ""]) == 0
    assert capsys.readouterr().out.splitlines() == ["a/c", "/", ""]


def test_join(capsys):
    assert main(["join", "foo/", "/bar"]) == 0
    assert capsys.readouterr().out == "foo/bar\n"


def test_split(capsys):
    assert main(["split", "/usr/lib"]) == 0
    assert capsys.readouterr().out.splitlines() == ["/usr", "lib"]


def test_ls_files(tmp_path, capsys):
    (tmp_path / "sub").mkdir()
    (tmp_path / "top.txt").write_text("x")
    (tmp_path / "sub" / "inner.txt").write_text("y")

    assert main(["ls-files", str(tmp_path)]) == 0
    listed = sorted(capsys.readouterr().out.splitlines())
    assert listed == sorted([str(tmp_path) + "/top.txt", str(tmp_path) + "/sub/inner.txt"])


def test_ls_files_rejects_non_directory(tmp_path, capsys):
    assert main(["ls-files", str(tmp_path / "missing")]) == 1
    assert "not a directory" in capsys.readouterr().err


def test_cat_with_max_size(tmp_path, capsysbinary):
    target = tmp_path / "data.txt"
    target.write_bytes(b"0123456789")
    assert main(["cat", str(target), "--max-size", "3"]) == 0
    assert capsysbinary.readouterr().out == b"012"


def test_cat_missing_file(tmp_path, capsys):
    assert main(["cat", str(tmp_path / "missing")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_command_is_required():
    with pytest.raises(SystemExit):
        main([])
