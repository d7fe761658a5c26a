"""Unique repository names within a container."""

from collections.abc import Iterator

from repochain.observability.logging import get_logger
from repochain.repositories.base import RepositoryError

logger = get_logger(__name__)


class NameRegistry:
    """Append-only set of names assigned to repositories.

    Names are never released, so a name handed out once stays taken for the
    lifetime of the container.
    """

    def __init__(self) -> None:
        # dict keeps insertion order for iteration
        self._assigned: dict[str, None] = {}

    def find_name(self, requested: str) -> str:
        """Return requested if unused, else the first free `requested2`, `requested3`, ..."""
        if requested not in self._assigned:
            return requested

        index = 2
        while f"{requested}{index}" in self._assigned:
            index += 1
        candidate = f"{requested}{index}"
        logger.debug("repository_name_deduplicated", requested=requested, assigned=candidate)
        return candidate

    def register(self, name: str) -> None:
        """Mark name as assigned.

        Raises:
            NameConflictError: If name was already assigned
        """
        if name in self._assigned:
            raise NameConflictError(f"Repository name '{name}' is already assigned")
        self._assigned[name] = None

    @property
    def assigned_names(self) -> frozenset[str]:
        return frozenset(self._assigned)

    def __contains__(self, name: object) -> bool:
        return name in self._assigned

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._assigned))

    def __len__(self) -> int:
        return len(self._assigned)


class NameConflictError(RepositoryError):
    """Raised when a name is registered twice."""

    pass
