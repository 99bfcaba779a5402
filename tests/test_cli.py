import io
from pathlib import Path

import pytest

from html_textify import cli
from html_textify.config import Settings


def test_cli_reads_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("<p>Hello <b>world</b></p>"))

    assert cli.main([]) == 0
    assert capsys.readouterr().out == "Hello **world**\n"


def test_cli_strip_mode_with_ignored_tags(tmp_path: Path, capsys) -> None:
    source = tmp_path / "page.html"
    source.write_text("<div>Keep <b>bold</b> &amp; more</div>", encoding="utf-8")

    assert cli.main(["--strip", "--ignore-tags", "B", str(source)]) == 0
    assert capsys.readouterr().out == "Keep <b>bold</b> &amp; more\n"


def test_cli_wrap_words(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("one two three four five"))

    assert cli.main(["--wrap-words", "2", "--wrap-length", "4"]) == 0
    assert capsys.readouterr().out == "one two\nthree four\nfive\n"


def test_cli_rejects_negative_wrap(monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("x"))

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--wrap-length", "-1"])
    assert exc_info.value.code == 2


def test_cli_missing_file_exits_with_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(tmp_path / "missing.html")])
    assert exc_info.value.code == 2


def test_cli_non_utf8_file_exits_with_usage_error(tmp_path: Path) -> None:
    source = tmp_path / "latin1.html"
    source.write_bytes(b"<p>caf\xe9</p>")

    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(source)])
    assert exc_info.value.code == 2


def test_cli_preserve_overrides_strip_setting(monkeypatch, capsys) -> None:
    settings = Settings(_env_file=None, preserve_formatting=False)
    monkeypatch.setattr(cli, "get_settings", lambda: settings)
    monkeypatch.setattr("sys.stdin", io.StringIO("<p>Hello <b>world</b></p>"))

    assert cli.main(["--preserve"]) == 0
    assert capsys.readouterr().out == "Hello **world**\n"

    monkeypatch.setattr("sys.stdin", io.StringIO("<p>Hello <b>world</b></p>"))
    assert cli.main([]) == 0
    assert capsys.readouterr().out == "Hello world\n"


def test_cli_strip_and_preserve_are_exclusive(monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("x"))

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--strip", "--preserve"])
    assert exc_info.value.code == 2
