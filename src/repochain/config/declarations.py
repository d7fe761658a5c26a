"""Repository declarations read from a TOML build description.

Example file:

    [[repositories]]
    kind = "flat_dir"
    dirs = "libs"

    [[repositories]]
    kind = "maven_central"

    [[repositories]]
    kind = "ivy"
    name = "company"
    url = "https://ivy.example.com/repo"
    layout = "ivy"

Declarations are applied in file order, so the file order is the resolver
lookup order.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from repochain.config.loader import read_toml
from repochain.observability.logging import get_logger
from repochain.repositories import InvalidUserDataError
from repochain.service.handler import RepositoryHandler

logger = get_logger(__name__)

KINDS = (
    "flat_dir",
    "maven_central",
    "maven_local",
    "maven_repo",
    "maven_deployer",
    "maven_installer",
    "maven",
    "ivy",
)


class Declaration(BaseModel):
    """One [[repositories]] table: a kind plus kind-specific properties."""

    model_config = ConfigDict(extra="allow")

    kind: str = Field(..., description="Repository kind, e.g. maven_central")

    @property
    def properties(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


def load_declarations(path: Path) -> list[Declaration]:
    """Load repository declarations from a TOML file.

    Raises:
        InvalidUserDataError: If the file is malformed or declares an unknown kind
    """
    try:
        data = read_toml(path)
    except (OSError, ValueError) as e:
        raise InvalidUserDataError(f"Cannot read declarations from {path}: {e}") from e

    entries = data.get("repositories", [])
    if not isinstance(entries, list):
        raise InvalidUserDataError("'repositories' must be an array of tables")

    declarations = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict) or "kind" not in entry:
            raise InvalidUserDataError(f"Repository declaration #{index + 1} has no kind")
        if entry["kind"] not in KINDS:
            raise InvalidUserDataError(
                f"Unknown repository kind: '{entry['kind']}'. "
                f"Supported kinds: {', '.join(KINDS)}"
            )
        declarations.append(Declaration(**entry))

    logger.info("declarations_loaded", path=str(path), count=len(declarations))
    return declarations


def _split(properties: dict[str, Any], arg_keys: tuple[str, ...]) -> tuple[dict, dict]:
    args = {k: v for k, v in properties.items() if k in arg_keys}
    rest = {k: v for k, v in properties.items() if k not in arg_keys}
    return args, rest


def apply_declaration(handler: RepositoryHandler, declaration: Declaration) -> Any:
    """Call the builder matching the declaration's kind and return its result."""
    properties = declaration.properties
    kind = declaration.kind

    if kind == "flat_dir":
        return handler.flat_dir_from_map(properties)
    elif kind == "maven_central":
        args, rest = _split(properties, ("name", "urls"))
        if rest:
            raise InvalidUserDataError(
                f"maven_central only takes name and urls, got: {', '.join(sorted(rest))}"
            )
        return handler.maven_central(args)
    elif kind == "maven_local":
        if properties:
            raise InvalidUserDataError(
                f"maven_local takes no properties, got: {', '.join(sorted(properties))}"
            )
        return handler.maven_local()
    elif kind == "maven_repo":
        args, rest = _split(properties, ("name", "urls"))
        return handler.maven_repo(args, rest or None)
    elif kind == "maven_deployer":
        args, rest = _split(properties, ("name",))
        return handler.maven_deployer(args, rest or None)
    elif kind == "maven_installer":
        args, rest = _split(properties, ("name",))
        return handler.maven_installer(args, rest or None)
    elif kind == "maven":
        return handler.maven(properties)
    elif kind == "ivy":
        return handler.ivy(properties)
    else:
        raise InvalidUserDataError(f"Unknown repository kind: '{kind}'")


def apply_declarations(handler: RepositoryHandler, declarations: list[Declaration]) -> list[Any]:
    """Apply declarations in order; stops at the first invalid one."""
    return [apply_declaration(handler, declaration) for declaration in declarations]
