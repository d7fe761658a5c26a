"""Ivy-style repository with layout and explicit patterns."""

from typing import Literal

from pydantic import Field

from repochain.entities import Credentials, Resolver, ResolverKind
from repochain.repositories.base import ArtifactRepository, InvalidUserDataError, normalize_url

# layout -> (artifact pattern, ivy pattern)
IVY_LAYOUTS: dict[str, tuple[str, str]] = {
    "gradle": (
        "[organisation]/[module]/[revision]/[artifact]-[revision](-[classifier])(.[ext])",
        "[organisation]/[module]/[revision]/ivy-[revision].xml",
    ),
    "maven": (
        "[organisation]/[module]/[revision]/[artifact]-[revision](-[classifier])(.[ext])",
        "[organisation]/[module]/[revision]/ivy-[revision].xml",
    ),
    "ivy": (
        "[organisation]/[module]/[revision]/[type]s/[artifact](.[ext])",
        "[organisation]/[module]/[revision]/[type]s/[artifact](.[ext])",
    ),
}


class IvyArtifactRepository(ArtifactRepository):
    """A generic Ivy repository.

    Resolves from `url` laid out according to `layout`, then from any
    explicit artifact and ivy patterns. When no ivy pattern is given the
    artifact patterns double as ivy patterns.
    """

    url: str | None = None
    layout: Literal["gradle", "maven", "ivy"] = "gradle"
    artifact_patterns: list[str] = Field(default_factory=list)
    ivy_patterns: list[str] = Field(default_factory=list)
    credentials: Credentials = Field(default_factory=Credentials)

    def artifact_pattern(self, pattern: str) -> None:
        """Add an artifact pattern."""
        self.artifact_patterns = [*self.artifact_patterns, pattern]

    def ivy_pattern(self, pattern: str) -> None:
        """Add an ivy descriptor pattern."""
        self.ivy_patterns = [*self.ivy_patterns, pattern]

    def create_resolvers(self) -> list[Resolver]:
        if not self.url and not self.artifact_patterns:
            raise InvalidUserDataError(
                "You must specify a base url or at least one artifact pattern for an Ivy repository."
            )

        roots: list[str] = []
        artifact_patterns: list[str] = []
        ivy_patterns: list[str] = []
        if self.url:
            root = normalize_url(self.url)
            artifact_layout, ivy_layout = IVY_LAYOUTS[self.layout]
            roots.append(root)
            artifact_patterns.append(root + artifact_layout)
            ivy_patterns.append(root + ivy_layout)

        artifact_patterns.extend(self.artifact_patterns)
        ivy_patterns.extend(self.ivy_patterns or self.artifact_patterns)

        has_credentials = self.credentials.username is not None or self.credentials.password is not None
        return [
            Resolver(
                name=self._require_name(),
                kind=ResolverKind.IVY,
                roots=roots,
                artifact_patterns=artifact_patterns,
                ivy_patterns=ivy_patterns,
                m2compatible=self.layout == "maven",
                credentials=self.credentials if has_credentials else None,
            )
        ]
