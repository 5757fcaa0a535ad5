"""
Tests for argument parsing and file resolution in the CLI.
"""

import pytest

from matrix_reloaded import cli
from matrix_reloaded.core.exceptions import NoFileError
from tests.conftest import PICK_DB, write_json


@pytest.fixture
def served(monkeypatch):
    """Replace the server with a recorder."""
    calls = []
    monkeypatch.setattr(cli, "serve", lambda file_path, port: calls.append((file_path, port)))
    return calls


class TestParsePort:

    @pytest.mark.parametrize("value,expected", [
        ("8080", 8080),
        ("3001", 3001),
        ("abc", 3000),
        ("", 3000),
        ("0", 3000),
        ("-5", 3000),
    ])
    def test_parse_port(self, value, expected):
        assert cli.parse_port(value) == expected

    def test_default_port(self):
        assert cli.build_parser().parse_args([]).port == 3000

    def test_long_and_short_flags(self):
        parser = cli.build_parser()
        assert parser.parse_args(["-p", "4000"]).port == 4000
        assert parser.parse_args(["--port", "nope"]).port == 3000


class TestResolveFile:

    def test_explicit_file(self, matrix_file):
        assert cli.resolve_file_path(str(matrix_file)) == matrix_file.resolve()

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            cli.resolve_file_path(str(tmp_path / "missing.json"))

    def test_first_json_in_decisions_dir(self, tmp_path):
        decisions = tmp_path / ".decisions"
        decisions.mkdir()
        write_json(decisions / "b.json", PICK_DB)
        write_json(decisions / "a.json", PICK_DB)
        (decisions / "notes.txt").write_text("x")

        assert cli.resolve_file_path(None, decisions) == (decisions / "a.json").resolve()

    def test_no_decisions_dir(self, tmp_path):
        with pytest.raises(NoFileError):
            cli.resolve_file_path(None, tmp_path / ".decisions")

    def test_empty_decisions_dir(self, tmp_path):
        (tmp_path / ".decisions").mkdir()

        with pytest.raises(NoFileError):
            cli.resolve_file_path(None, tmp_path / ".decisions")


class TestMain:

    def test_instructions(self, capsys, served):
        assert cli.main(["--instructions"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("# Decision Matrix Format")
        assert '"criteria"' in out
        assert served == []

    def test_short_instructions_flag(self, capsys, served):
        assert cli.main(["-i"]) == 0
        assert "## Colors" in capsys.readouterr().out

    def test_help_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--help"])

        assert exc_info.value.code == 0
        assert "--port" in capsys.readouterr().out

    def test_no_file_found(self, tmp_path, monkeypatch, capsys, served):
        monkeypatch.chdir(tmp_path)

        assert cli.main([]) == 1

        err = capsys.readouterr().err
        assert "No decision matrix file found." in err
        assert ".decisions/" in err
        assert served == []

    def test_missing_file(self, tmp_path, capsys, served):
        assert cli.main([str(tmp_path / "missing.json")]) == 1
        assert "File not found" in capsys.readouterr().err
        assert served == []

    def test_serves_explicit_file(self, matrix_file, capsys, served):
        assert cli.main([str(matrix_file), "-p", "4321"]) == 0

        assert served == [(matrix_file.resolve(), 4321)]
        out = capsys.readouterr().out
        assert f"Watching: {matrix_file.resolve()}" in out
        assert "http://localhost:4321" in out

    def test_serves_default_file(self, tmp_path, monkeypatch, served):
        decisions = tmp_path / ".decisions"
        decisions.mkdir()
        write_json(decisions / "db.json", PICK_DB)
        monkeypatch.chdir(tmp_path)

        assert cli.main([]) == 0
        assert served == [((decisions / "db.json").resolve(), 3000)]
