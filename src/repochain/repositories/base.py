"""Abstract base class for artifact repositories.

Why this exists:
- Every declared repository kind expands into resolver entries the same way
- The registrar depends on this interface only, never on concrete kinds

How to extend:
1. Subclass ArtifactRepository
2. Implement create_resolvers()
3. Add a constructor to RepositoryFactory and a builder to RepositoryHandler
"""

from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from repochain.entities import Resolver


def normalize_url(url: object) -> str:
    """Return url as a string that ends with a slash."""
    text = str(url).strip()
    if not text:
        raise InvalidUserDataError("Repository URL cannot be empty")
    return text if text.endswith("/") else text + "/"


class ArtifactRepository(BaseModel, ABC):
    """A user-declared source of artifacts.

    The name may be unset until the repository is registered; registration
    gives it a final name that is unique within its container.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str | None = None
    base_dir: Path = Path(".")

    @abstractmethod
    def create_resolvers(self) -> list[Resolver]:
        """Expand this repository into its resolver entries, in lookup order.

        Raises:
            InvalidUserDataError: If the declaration is incomplete
        """
        pass

    def resolve_dir(self, path: str | Path) -> Path:
        """Resolve a directory against the repository's base directory."""
        resolved = Path(path).expanduser()
        if not resolved.is_absolute():
            resolved = self.base_dir / resolved
        return resolved

    def _require_name(self) -> str:
        if not self.name:
            raise ResolverContractError(
                f"{type(self).__name__} must be named before creating resolvers"
            )
        return self.name


class RepositoryError(Exception):
    """Base exception for repository declaration errors."""

    pass


class InvalidUserDataError(RepositoryError):
    """Raised when a repository declaration is invalid."""

    pass


class ResolverContractError(RepositoryError):
    """Raised when a repository breaks its resolver expansion contract."""

    pass
