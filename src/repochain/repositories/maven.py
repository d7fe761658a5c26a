"""Maven-style repositories and publication targets.

- MavenResolverRepository: a fixed root plus extra artifact URLs (central, local, URL)
- MavenArtifactRepository: the generic, fully configurable Maven repository
- MavenDeployer / MavenInstaller: upload and install targets
"""

from pathlib import Path
from typing import ClassVar

from pydantic import Field

from repochain.entities import Credentials, Resolver, ResolverKind
from repochain.repositories.base import ArtifactRepository, InvalidUserDataError, normalize_url

M2_ARTIFACT_PATTERN = "[organisation]/[module]/[revision]/[artifact]-[revision](-[classifier]).[ext]"
M2_POM_PATTERN = "[organisation]/[module]/[revision]/[module]-[revision].pom"


def _maven_resolver(
    name: str,
    root: str,
    extra_urls: list[str],
    credentials: Credentials | None = None,
) -> Resolver:
    """Build an m2-compatible resolver reading poms from root and artifacts from every url."""
    roots = [normalize_url(root), *(normalize_url(url) for url in extra_urls)]
    return Resolver(
        name=name,
        kind=ResolverKind.MAVEN,
        roots=roots,
        artifact_patterns=[f"{url}{M2_ARTIFACT_PATTERN}" for url in roots],
        ivy_patterns=[f"{roots[0]}{M2_POM_PATTERN}"],
        m2compatible=True,
        credentials=credentials,
    )


def _credentials_or_none(credentials: Credentials) -> Credentials | None:
    if credentials.username is None and credentials.password is None:
        return None
    return credentials


class MavenResolverRepository(ArtifactRepository):
    """A Maven repository with a fixed root, used for central, local and URL declarations."""

    root: str
    extra_urls: list[str] = Field(default_factory=list)

    def create_resolvers(self) -> list[Resolver]:
        return [_maven_resolver(self._require_name(), self.root, self.extra_urls)]


class MavenArtifactRepository(ArtifactRepository):
    """A generic Maven repository configured by the build description."""

    url: str | None = None
    artifact_urls: list[str] = Field(default_factory=list)
    credentials: Credentials = Field(default_factory=Credentials)

    def artifact_url(self, *urls: str) -> None:
        """Add URLs to look for artifacts (but not poms) in."""
        self.artifact_urls = [*self.artifact_urls, *urls]

    def create_resolvers(self) -> list[Resolver]:
        if not self.url:
            raise InvalidUserDataError("You must specify a URL for a Maven repository.")
        return [
            _maven_resolver(
                self._require_name(),
                self.url,
                self.artifact_urls,
                _credentials_or_none(self.credentials),
            )
        ]


class _MavenPublisher(ArtifactRepository):
    """Shared fields of the deployer and installer targets."""

    kind: ClassVar[ResolverKind]

    pom_dir: Path = Path("build") / "poms"
    repository_url: str | None = None
    unique_version: bool = True

    def create_resolvers(self) -> list[Resolver]:
        roots = [normalize_url(self.repository_url)] if self.repository_url else []
        return [
            Resolver(
                name=self._require_name(),
                kind=self.kind,
                roots=roots,
                artifact_patterns=[f"{root}{M2_ARTIFACT_PATTERN}" for root in roots],
                m2compatible=True,
                credentials=self._credentials(),
                extra=self._extra(),
            )
        ]

    def _credentials(self) -> Credentials | None:
        return None

    def _extra(self) -> dict:
        return {
            "pom_dir": str(self.resolve_dir(self.pom_dir)),
            "unique_version": self.unique_version,
        }


class MavenDeployer(_MavenPublisher):
    """Upload target for Maven artifacts."""

    kind: ClassVar[ResolverKind] = ResolverKind.MAVEN_DEPLOYER

    snapshot_repository_url: str | None = None
    credentials: Credentials = Field(default_factory=Credentials)

    def _extra(self) -> dict:
        extra = super()._extra()
        if self.snapshot_repository_url:
            extra["snapshot_repository_url"] = normalize_url(self.snapshot_repository_url)
        return extra

    def _credentials(self) -> Credentials | None:
        return _credentials_or_none(self.credentials)


class MavenInstaller(_MavenPublisher):
    """Install target copying Maven artifacts into the local Maven cache."""

    kind: ClassVar[ResolverKind] = ResolverKind.MAVEN_INSTALLER
