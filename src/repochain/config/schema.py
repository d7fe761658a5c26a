"""Configuration schema using Pydantic.

Why this exists:
- Type-safe configuration with validation
- Environment variable support
- One place for the well-known repository names and locations

How to extend:
1. Add new fields to AppConfig
2. Document them in repochain.toml
"""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MAVEN_CENTRAL_URL = "https://repo1.maven.org/maven2/"
DEFAULT_MAVEN_CENTRAL_REPO_NAME = "MavenRepo"
DEFAULT_MAVEN_LOCAL_REPO_NAME = "MavenLocal"
DEFAULT_MAVEN_DEPLOYER_NAME = "mavenDeployer"
DEFAULT_MAVEN_INSTALLER_NAME = "mavenInstaller"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AppConfig(BaseSettings):
    """Main application configuration.

    Loads from:
    1. Config file (TOML)
    2. Environment variables (prefixed with REPOCHAIN_)
    """

    model_config = SettingsConfigDict(
        env_prefix="REPOCHAIN_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    # Application settings
    app_name: str = "repochain"
    log_level: LogLevel = LogLevel.INFO
    json_logs: bool = False
    base_dir: Path = Field(default_factory=Path.cwd)

    # Well-known repositories
    maven_central_url: str = MAVEN_CENTRAL_URL
    maven_central_name: str = DEFAULT_MAVEN_CENTRAL_REPO_NAME
    maven_local_name: str = DEFAULT_MAVEN_LOCAL_REPO_NAME
    maven_local_dir: Path = Field(default=Path.home() / ".m2" / "repository")
    maven_pom_dir: Path = Field(default=Path("build") / "poms")

    @field_validator("maven_central_url")
    @classmethod
    def url_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("maven_central_url cannot be empty")
        return v

    def model_post_init(self, __context: Any) -> None:
        """Expand ~ in paths and anchor relative ones at base_dir."""
        self.base_dir = self.base_dir.expanduser()
        self.maven_local_dir = self.resolve_path(self.maven_local_dir)
        self.maven_pom_dir = self.resolve_path(self.maven_pom_dir)

    def resolve_path(self, path: str | Path) -> Path:
        """Resolve a user supplied path against base_dir."""
        resolved = Path(path).expanduser()
        if not resolved.is_absolute():
            resolved = self.base_dir / resolved
        return resolved
