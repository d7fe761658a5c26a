"""Repository kinds and the factory that constructs them."""

from repochain.config.schema import AppConfig
from repochain.repositories.base import (
    ArtifactRepository,
    InvalidUserDataError,
    RepositoryError,
    ResolverContractError,
)
from repochain.repositories.flat_dir import FlatDirectoryRepository
from repochain.repositories.ivy import IvyArtifactRepository
from repochain.repositories.maven import (
    MavenArtifactRepository,
    MavenDeployer,
    MavenInstaller,
    MavenResolverRepository,
)


class RepositoryFactory:
    """Constructs default-configured repositories, one constructor per kind.

    Repositories come back unnamed unless a name is passed; the registrar
    assigns the final name. Paths are anchored at `config.base_dir`.

    Example:
        factory = RepositoryFactory(AppConfig())
        repo = factory.create_maven_central_repository("MavenRepo", [])
        repo.create_resolvers()
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def create_flat_dir_repository(self) -> FlatDirectoryRepository:
        return FlatDirectoryRepository(base_dir=self.config.base_dir)

    def create_maven_central_repository(
        self, name: str | None, extra_urls: list[object]
    ) -> MavenResolverRepository:
        return self.create_maven_url_repository(name, self.config.maven_central_url, extra_urls)

    def create_maven_local_repository(self, name: str | None) -> MavenResolverRepository:
        return MavenResolverRepository(
            name=name,
            base_dir=self.config.base_dir,
            root=self.config.maven_local_dir.absolute().as_uri(),
        )

    def create_maven_url_repository(
        self, name: str | None, root: object, extra_urls: list[object]
    ) -> MavenResolverRepository:
        return MavenResolverRepository(
            name=name,
            base_dir=self.config.base_dir,
            root=str(root),
            extra_urls=[str(url) for url in extra_urls],
        )

    def create_maven_deployer(self) -> MavenDeployer:
        return MavenDeployer(base_dir=self.config.base_dir, pom_dir=self.config.maven_pom_dir)

    def create_maven_installer(self) -> MavenInstaller:
        return MavenInstaller(
            base_dir=self.config.base_dir,
            pom_dir=self.config.maven_pom_dir,
            repository_url=self.config.maven_local_dir.absolute().as_uri(),
        )

    def create_maven_repository(self) -> MavenArtifactRepository:
        return MavenArtifactRepository(base_dir=self.config.base_dir)

    def create_ivy_repository(self) -> IvyArtifactRepository:
        return IvyArtifactRepository(base_dir=self.config.base_dir)


__all__ = [
    "ArtifactRepository",
    "FlatDirectoryRepository",
    "InvalidUserDataError",
    "IvyArtifactRepository",
    "MavenArtifactRepository",
    "MavenDeployer",
    "MavenInstaller",
    "MavenResolverRepository",
    "RepositoryError",
    "RepositoryFactory",
    "ResolverContractError",
]
