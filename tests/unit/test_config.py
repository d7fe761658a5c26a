"""Unit tests for configuration loading."""

import os
from pathlib import Path

from repochain.config.loader import _substitute_env_vars, load_config
from repochain.config.schema import MAVEN_CENTRAL_URL, AppConfig, LogLevel


class TestAppConfig:
    """Test AppConfig defaults and path handling."""

    def test_defaults(self):
        """Test default well-known names."""
        config = AppConfig()
        assert config.maven_central_url == MAVEN_CENTRAL_URL
        assert config.maven_central_name == "MavenRepo"
        assert config.maven_local_name == "MavenLocal"
        assert config.log_level == LogLevel.INFO

    def test_relative_paths_anchored_at_base_dir(self, tmp_path):
        """Test that relative paths resolve against base_dir."""
        config = AppConfig(base_dir=tmp_path, maven_local_dir=Path("cache"), maven_pom_dir=Path("poms"))
        assert config.maven_local_dir == tmp_path / "cache"
        assert config.maven_pom_dir == tmp_path / "poms"

    def test_env_override(self, monkeypatch):
        """Test environment variables are read."""
        monkeypatch.setenv("REPOCHAIN_MAVEN_CENTRAL_NAME", "central")
        assert AppConfig().maven_central_name == "central"


class TestLoadConfig:
    """Test load_config."""

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test that a missing file is not an error."""
        config = load_config(tmp_path / "missing.toml")
        assert config.maven_central_name == "MavenRepo"

    def test_file_values(self, tmp_path):
        """Test values from a TOML file."""
        path = tmp_path / "repochain.toml"
        path.write_text(f'base_dir = "{tmp_path}"\nmaven_central_url = "https://mirror.example.com/maven2/"\n')
        config = load_config(path)
        assert config.maven_central_url == "https://mirror.example.com/maven2/"
        assert config.base_dir == tmp_path

    def test_profile(self, tmp_path):
        """Test that a profile overrides base values."""
        path = tmp_path / "repochain.toml"
        path.write_text(
            'log_level = "INFO"\n'
            "[profiles.ci]\n"
            'log_level = "WARNING"\n'
            'maven_local_name = "ciLocal"\n'
        )
        config = load_config(path, profile="ci")
        assert config.log_level == LogLevel.WARNING
        assert config.maven_local_name == "ciLocal"

    def test_env_beats_file(self, tmp_path, monkeypatch):
        """Test environment variables override file values."""
        path = tmp_path / "repochain.toml"
        path.write_text('maven_central_name = "fromFile"\n')
        monkeypatch.setenv("REPOCHAIN_MAVEN_CENTRAL_NAME", "fromEnv")
        assert load_config(path).maven_central_name == "fromEnv"

    def test_env_file(self, tmp_path, monkeypatch):
        """Test .env files are loaded."""
        monkeypatch.delenv("REPOCHAIN_MAVEN_LOCAL_NAME", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("REPOCHAIN_MAVEN_LOCAL_NAME=dotenvLocal\n")
        try:
            assert load_config(env_file=env_file).maven_local_name == "dotenvLocal"
        finally:
            os.environ.pop("REPOCHAIN_MAVEN_LOCAL_NAME", None)


class TestSubstituteEnvVars:
    """Test ${VAR} substitution."""

    def test_substitution(self, monkeypatch):
        """Test nested substitution with defaults."""
        monkeypatch.setenv("MIRROR", "https://mirror.example.com")
        data = {"url": "${MIRROR}/maven2", "dirs": ["${LIBS:-libs}"]}
        assert _substitute_env_vars(data) == {
            "url": "https://mirror.example.com/maven2",
            "dirs": ["libs"],
        }

    def test_missing_var_left_in_place(self, monkeypatch):
        """Test unknown variables are kept verbatim."""
        monkeypatch.delenv("REPOCHAIN_UNSET_VAR", raising=False)
        assert _substitute_env_vars("${REPOCHAIN_UNSET_VAR}") == "${REPOCHAIN_UNSET_VAR}"
