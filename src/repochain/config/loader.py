"""Configuration loading from files and environment.

Supports:
- TOML config files
- Environment variables (REPOCHAIN_* prefix)
- .env files
- Named profiles
"""

import os
import re
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from repochain.config.schema import AppConfig
from repochain.observability.logging import get_logger

logger = get_logger(__name__)


def _substitute_env_vars(obj: Any) -> Any:
    """Recursively substitute environment variables in a data structure.

    Supports formats:
    - ${VAR_NAME}
    - ${VAR_NAME:-default}

    Args:
        obj: Input data (dict, list, str, etc.)

    Returns:
        Data structure with environment variables substituted
    """
    if isinstance(obj, dict):
        return {k: _substitute_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_substitute_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        def replace_var(match):
            var_expr = match.group(1)
            if ":-" in var_expr:
                var_name, default_value = var_expr.split(":-", 1)
                return os.getenv(var_name.strip(), default_value)
            var_name = var_expr.strip()
            value = os.getenv(var_name)
            if value is None:
                # Leave the reference in place
                logger.warning(
                    "env_var_not_found",
                    var_name=var_name,
                    suggestion="Check that the environment variable is set",
                )
                return match.group(0)
            return value

        return re.sub(r"\$\{([^}]+)\}", replace_var, obj)
    else:
        return obj


def read_toml(path: Path) -> dict[str, Any]:
    """Read a TOML file and substitute environment variable references."""
    with open(path, "rb") as f:
        data = tomllib.load(f)
    return _substitute_env_vars(data)


def load_config(
    config_path: Optional[Path] = None,
    profile: Optional[str] = None,
    env_file: Optional[Path] = None,
) -> AppConfig:
    """Load application configuration.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (profile values override base values)
    3. Defaults

    Args:
        config_path: Path to TOML config file
        profile: Config profile to use (e.g., "ci", "offline")
        env_file: Path to .env file

    Returns:
        Loaded and validated configuration
    """
    if env_file and env_file.exists():
        load_dotenv(env_file)
        logger.info("loaded_env_file", path=str(env_file))

    config_data: dict[str, Any] = {}
    if config_path and config_path.exists():
        config_data = read_toml(config_path)
        logger.info("loaded_config_file", path=str(config_path))

        if profile and profile in config_data.get("profiles", {}):
            profile_data = config_data["profiles"][profile]
            config_data = {**config_data, **profile_data}
            logger.info("applied_profile", profile=profile)

        config_data.pop("profiles", None)

    # Environment variables take precedence over file values
    for key in list(config_data):
        if f"REPOCHAIN_{key}".upper() in {k.upper() for k in os.environ}:
            config_data.pop(key)

    config = AppConfig(**config_data)
    logger.debug(
        "config_loaded",
        log_level=config.log_level.value,
        base_dir=str(config.base_dir),
        maven_central_url=config.maven_central_url,
    )

    return config


def get_default_config_path() -> Path:
    """Get the default config file path.

    Searches in order:
    1. ./repochain.toml
    2. ~/.repochain/config.toml
    3. /etc/repochain/config.toml
    """
    search_paths = [
        Path.cwd() / "repochain.toml",
        Path.home() / ".repochain" / "config.toml",
        Path("/etc/repochain/config.toml"),
    ]

    for path in search_paths:
        if path.exists():
            return path

    return search_paths[0]
