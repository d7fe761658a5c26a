"""Unit tests for the CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from repochain.interfaces.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_env(tmp_path, monkeypatch):
    """Run commands against a temporary base directory with quiet logs."""
    monkeypatch.setenv("REPOCHAIN_BASE_DIR", str(tmp_path))
    monkeypatch.setenv("REPOCHAIN_LOG_LEVEL", "WARNING")
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def declarations(tmp_path):
    path = tmp_path / "repositories.toml"
    path.write_text(
        '[[repositories]]\nkind = "flat_dir"\ndirs = "/tmp/libs"\n\n'
        '[[repositories]]\nkind = "maven_central"\n\n'
        '[[repositories]]\nkind = "flat_dir"\nname = "flatDir"\ndirs = ["/tmp/more"]\n'
    )
    return path


class TestChainCommand:
    """Test the chain command."""

    def test_table(self, declarations):
        """Test the table lists every resolver."""
        result = runner.invoke(app, ["chain", str(declarations)])
        assert result.exit_code == 0
        assert "Resolver chain (3 resolvers)" in result.output
        assert "MavenRepo" in result.output
        assert "flatDir2" in result.output

    def test_json(self, declarations):
        """Test JSON output preserves order."""
        result = runner.invoke(app, ["chain", str(declarations), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [entry["name"] for entry in data] == ["flatDir", "MavenRepo", "flatDir2"]
        assert data[0]["kind"] == "flat_dir"
        assert data[1]["roots"] == ["https://repo1.maven.org/maven2/"]

    def test_invalid_declaration(self, tmp_path):
        """Test invalid declarations exit with an error."""
        path = tmp_path / "bad.toml"
        path.write_text('[[repositories]]\nkind = "maven_repo"\nurls = []\n')
        result = runner.invoke(app, ["chain", str(path)])
        assert result.exit_code == 1
        assert "You must specify the urls" in result.output

    def test_missing_file(self, tmp_path):
        """Test a missing declarations file."""
        result = runner.invoke(app, ["chain", str(tmp_path / "missing.toml")])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestNamesCommand:
    """Test the names command."""

    def test_names(self, declarations):
        """Test names are printed in registration order."""
        result = runner.invoke(app, ["names", str(declarations)])
        assert result.exit_code == 0
        assert result.stdout.split() == ["flatDir", "MavenRepo", "flatDir2"]


class TestConfigOptions:
    """Test the --profile and --env-file options."""

    def test_profile(self, declarations, tmp_path):
        """Test a profile from the config file changes the central name."""
        config = tmp_path / "repochain.toml"
        config.write_text('[profiles.mirror]\nmaven_central_name = "mirror"\n')
        result = runner.invoke(
            app, ["names", str(declarations), "--config", str(config), "--profile", "mirror"]
        )
        assert result.exit_code == 0
        assert result.stdout.split() == ["flatDir", "mirror", "flatDir2"]

    def test_env_file(self, declarations, tmp_path, monkeypatch):
        """Test settings from a .env file are applied."""
        # teardown then removes the variable load_dotenv sets
        monkeypatch.setenv("REPOCHAIN_MAVEN_CENTRAL_NAME", "placeholder")
        monkeypatch.delenv("REPOCHAIN_MAVEN_CENTRAL_NAME")
        env_file = tmp_path / ".env"
        env_file.write_text("REPOCHAIN_MAVEN_CENTRAL_NAME=fromDotenv\n")
        result = runner.invoke(app, ["names", str(declarations), "--env-file", str(env_file)])
        assert result.exit_code == 0
        assert result.stdout.split() == ["flatDir", "fromDotenv", "flatDir2"]

    def test_non_string_name_reported_cleanly(self, tmp_path):
        """Test an integer name in a declaration does not crash the command."""
        path = tmp_path / "repositories.toml"
        path.write_text('[[repositories]]\nkind = "maven_repo"\nname = 5\nurls = ["https://repo.example.com"]\n')
        result = runner.invoke(app, ["names", str(path)])
        assert result.exit_code == 0
        assert result.stdout.split() == ["5"]
