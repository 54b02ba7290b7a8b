"""Testy thoth.cli — komendy jednorazowe."""

import io

import pytest

from thoth.cli import build_parser, main


class TestParser:
    def test_aliases(self) -> None:
        parser = build_parser()
        assert parser.parse_args(["rule", "1.1"]).number == "1.1"
        assert parser.parse_args(["about", "Exhaust"]).word == "Exhaust"

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestCommands:
    def test_cr(self, document_path, capsys) -> None:
        main(["--document", str(document_path), "cr", "1.1"])
        out = capsys.readouterr().out
        assert "Rule 1.1" in out
        assert "Players may not concede." in out
        assert "In section" in out

    def test_cr_not_found(self, document_path, capsys) -> None:
        main(["--document", str(document_path), "cr", "9.9"])
        assert "Invalid rule number" in capsys.readouterr().out

    def test_cr_malformed_exits(self, document_path, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["--document", str(document_path), "cr", "3.1"])
        assert exc.value.code == 1

    def test_glossary_no_related(self, document_path, capsys) -> None:
        main(["--document", str(document_path), "glossary", "Exhaust", "--no-related"])
        out = capsys.readouterr().out
        assert "Exhaust" in out
        assert "Related rules" not in out

    def test_contents(self, document_path, capsys) -> None:
        main(["--document", str(document_path), "contents"])
        out = capsys.readouterr().out
        assert "Table of contents" in out
        assert "1 - Basics" in out

    def test_version(self, document_path, capsys) -> None:
        main(["--document", str(document_path), "version"])
        assert "0.1.0" in capsys.readouterr().out

    def test_document_from_environment(self, document_path, monkeypatch, capsys) -> None:
        monkeypatch.setenv("THOTH_DOCUMENT", str(document_path))
        main(["cr", "1"])
        assert "Section 1 - Basics" in capsys.readouterr().out

    def test_missing_document_is_fatal(self, tmp_path) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["--document", str(tmp_path / "missing.json"), "contents"])
        assert exc.value.code == 1

    def test_chat(self, document_path, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("??cr 1.2\nnot a command\n??about Exhaust\n"))
        main(["--document", str(document_path), "chat"])
        out = capsys.readouterr().out
        assert "Section 1.2 - Turn" in out
        assert "Related rules" in out
