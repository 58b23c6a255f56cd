"""
Tests for the command line entry point.
"""
from pathlib import Path

from docopt import docopt

import main


def parse(*argv):
    return docopt(main.__doc__, argv=list(argv))


class TestResolveConfig:
    """Tests for main.resolve_config."""

    def test_defaults(self, tmp_path, monkeypatch):
        """Test the default paths without a config file."""
        monkeypatch.chdir(tmp_path)

        config = main.resolve_config(parse())

        assert config.working_dir == Path("./")
        assert config.roster_path == Path("test.xlsx")
        assert config.output_file == Path("output.txt")

    def test_flags_override_config(self, tmp_path, monkeypatch):
        """Test that CLI flags win over the config file."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "grader_config.yml").write_text("roster_path: class.xlsx\noutput_file: log.txt\n")

        config = main.resolve_config(parse("-o", "other.txt", "--working-dir", "subs", "-v"))

        assert config.roster_path == Path("class.xlsx")
        assert config.output_file == Path("other.txt")
        assert config.working_dir == Path("subs")
        assert config.verbose is True


class TestMain:
    """Tests for main.main exit codes."""

    def test_missing_config_file(self, tmp_path, capsys):
        """Test that an explicit missing config exits with an error."""
        assert main.main(["--config", str(tmp_path / "nope.yml")]) == 1
        assert "Error loading config" in capsys.readouterr().out

    def test_missing_roster(self, tmp_path, capsys, monkeypatch):
        """Test that a missing roster exits with an error."""
        monkeypatch.chdir(tmp_path)

        assert main.main(["-f", str(tmp_path / "none.xlsx")]) == 1
        assert "Roster not found" in capsys.readouterr().out
