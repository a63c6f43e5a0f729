"""Tests for the azgit command line interface."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from azgit.cli import app
from typer.testing import CliRunner


class TestCli:
    """Test the azgit Typer app."""

    @pytest.fixture
    def home(self):
        """Create a temporary home directory with a .gitconfig."""
        with TemporaryDirectory() as tmpdir:
            home = Path(tmpdir)
            (home / ".gitconfig").write_text("[user]\n\tname = Alice\n\temail = alice@example.com\n")
            yield home

    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_root_bootstraps_and_shows_help(self, runner, home):
        """Test running without a subcommand creates the store and prints help."""
        result = runner.invoke(app, ["--home", str(home)])

        assert result.exit_code == 0
        assert "list" in result.output
        assert (home / ".config" / "azgit" / "config.ini").exists()

    def test_list(self, runner, home):
        """Test list prints the bootstrapped default identity."""
        result = runner.invoke(app, ["--home", str(home), "list"])

        assert result.exit_code == 0
        assert result.output == (
            "List of Identities:\n"
            "\n"
            "Identity [default]:\n"
            "\tName: Alice\n"
            "\tEmail: alice@example.com\n"
            "\n"
        )

    def test_home_from_environment(self, runner, home):
        """Test AZGIT_HOME selects the home directory."""
        result = runner.invoke(app, ["list"], env={"AZGIT_HOME": str(home)})

        assert result.exit_code == 0
        assert "Identity [default]:" in result.output

    def test_missing_gitconfig_fails(self, runner):
        """Test a bootstrap failure exits non-zero with an error message."""
        with TemporaryDirectory() as tmpdir:
            result = runner.invoke(app, ["--home", tmpdir, "list"])

            assert result.exit_code == 1
            assert "Error:" in result.output
            assert ".gitconfig" in result.output
            assert not (Path(tmpdir) / ".config" / "azgit" / "config.ini").exists()

    def test_malformed_store_fails(self, runner, home):
        """Test a malformed store exits non-zero on list."""
        store = home / ".config" / "azgit" / "config.ini"
        store.parent.mkdir(parents=True)
        store.write_text("[work\nname = W\n")

        result = runner.invoke(app, ["--home", str(home), "list"])

        assert result.exit_code == 1
        assert "Failed to parse" in result.output

    def test_unreadable_store_location_fails(self, runner, home, monkeypatch):
        """Test a store that cannot be checked exits non-zero with an error message."""
        store = home / ".config" / "azgit" / "config.ini"
        original_stat = Path.stat

        def denied_stat(self, *args, **kwargs):
            if self == store:
                raise PermissionError(13, "Permission denied", str(self))
            return original_stat(self, *args, **kwargs)

        monkeypatch.setattr(Path, "stat", denied_stat)

        result = runner.invoke(app, ["--home", str(home), "list"])

        assert result.exit_code == 1
        assert "Error: Failed to check identity store" in result.output
