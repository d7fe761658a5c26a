"""Flat directory repository: artifacts looked up by file name in local dirs."""

from pathlib import Path

from pydantic import Field

from repochain.entities import Resolver, ResolverKind
from repochain.repositories.base import ArtifactRepository, InvalidUserDataError

FLAT_DIR_PATTERNS = (
    "[artifact]-[revision](-[classifier]).[ext]",
    "[artifact](-[classifier]).[ext]",
)


class FlatDirectoryRepository(ArtifactRepository):
    """A repository made of one or more plain directories.

    Always expands to exactly one resolver that searches every directory in
    declaration order.
    """

    dirs: list[Path] = Field(default_factory=list)

    def dir(self, path: str | Path) -> None:
        """Add a single directory."""
        self.add_dirs(path)

    def add_dirs(self, *paths: str | Path) -> None:
        """Add directories, keeping declaration order."""
        self.dirs = [*self.dirs, *(Path(p) for p in paths)]

    def create_resolvers(self) -> list[Resolver]:
        if not self.dirs:
            raise InvalidUserDataError(
                "You must specify at least one directory for a flat directory repository."
            )

        roots = [str(self.resolve_dir(d)) for d in self.dirs]
        patterns = [f"{root}/{pattern}" for root in roots for pattern in FLAT_DIR_PATTERNS]
        return [
            Resolver(
                name=self._require_name(),
                kind=ResolverKind.FLAT_DIR,
                roots=roots,
                artifact_patterns=patterns,
            )
        ]
