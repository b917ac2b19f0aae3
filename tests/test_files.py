"""Tests for file collaborators."""
import io

import pytest

from docman.errors import InputUnavailable, OutputUnavailable
from docman.files import load_bibliography, read_text, write_text


def test_read_file(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("héllo [a]\n", encoding="utf-8")
    assert read_text(str(path)) == "héllo [a]\n"


def test_read_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("from stdin"))
    assert read_text("-") == "from stdin"


def test_read_missing(tmp_path):
    with pytest.raises(InputUnavailable) as excinfo:
        read_text(str(tmp_path / "missing.txt"))
    assert "missing.txt" in str(excinfo.value)


def test_read_invalid_utf8(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(InputUnavailable):
        read_text(str(path))


def test_write_file(tmp_path):
    path = tmp_path / "out.txt"
    write_text(str(path), "content")
    assert path.read_text(encoding="utf-8") == "content"


def test_write_stdout(capsys):
    write_text(None, "to stdout")
    assert capsys.readouterr().out == "to stdout"


def test_write_unwritable(tmp_path):
    with pytest.raises(OutputUnavailable):
        write_text(str(tmp_path / "missing-dir" / "out.txt"), "content")


def test_output_error_is_input_error_subclass():
    assert issubclass(OutputUnavailable, InputUnavailable)


def test_load_bibliography_without_path():
    assert load_bibliography(None) == []


def test_load_bibliography(tmp_path):
    path = tmp_path / "refs.json"
    path.write_text('{"items": [{"type": "webpage", "id": "w", "title": "T", "url": "u"}]}', encoding="utf-8")
    assert [c.id for c in load_bibliography(str(path))] == ["w"]
