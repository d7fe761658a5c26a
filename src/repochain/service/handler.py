"""Repository builders.

Each builder constructs a repository through the factory, applies the
caller's configuration and registers the result:

    handler = RepositoryHandler(config)
    handler.flat_dir({"dirs": ["libs"]})
    handler.maven_central()
    handler.maven(lambda repo: setattr(repo, "url", "https://repo.example.com/maven"))

    resolvers = handler.resolvers
"""

import itertools
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Optional

from repochain.config.schema import (
    DEFAULT_MAVEN_DEPLOYER_NAME,
    DEFAULT_MAVEN_INSTALLER_NAME,
    AppConfig,
)
from repochain.core.chain import RepositoryContainer
from repochain.core.configure import configure
from repochain.core.registrar import RepositoryRegistrar
from repochain.entities import Resolver
from repochain.observability.logging import get_logger
from repochain.repositories import (
    ArtifactRepository,
    FlatDirectoryRepository,
    InvalidUserDataError,
    IvyArtifactRepository,
    MavenArtifactRepository,
    MavenDeployer,
    MavenInstaller,
    MavenResolverRepository,
    RepositoryError,
    RepositoryFactory,
)

logger = get_logger(__name__)

# Process-wide source of deployer/installer seed names
_publisher_tokens = itertools.count(1)


def _name_from_map(args: Mapping[str, Any], default_name: Optional[str]) -> Optional[str]:
    name = args.get("name")
    return str(name) if name is not None else default_name


def _list_from_map(args: Mapping[str, Any], key: str) -> list[Any]:
    """Return args[key] as a list; a scalar becomes a one-element list."""
    value = args.get(key)
    if value is None:
        return []
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        return list(value)
    return [value]


class RepositoryHandler:
    """Builders for every repository kind, sharing one container.

    Repositories are registered in call order, and their resolvers are tried
    in that same order.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        factory: Optional[RepositoryFactory] = None,
        container: Optional[RepositoryContainer] = None,
    ):
        """Initialize the handler.

        Args:
            config: Application configuration (defaults to AppConfig())
            factory: Repository factory (defaults to one built from config)
            container: Registration state (defaults to an empty container)
        """
        self.config = config or AppConfig()
        self.factory = factory or RepositoryFactory(self.config)
        self.container = container or RepositoryContainer()
        self.registrar = RepositoryRegistrar(self.container)
        self._repositories: dict[str, ArtifactRepository] = {}

    # Flat directories

    def flat_dir(self, configuration: Any = None) -> FlatDirectoryRepository:
        """Declare a flat directory repository configured by a callback, action or map."""
        repository = configure(self.factory.create_flat_dir_repository(), configuration)
        return self._register(repository, "flatDir")

    def flat_dir_from_map(self, args: Mapping[str, Any]) -> Resolver:
        """Declare a flat directory repository from a property map.

        A scalar `dirs` value is treated as a single directory. Returns the
        repository's only resolver rather than the repository.
        """
        modified_args = dict(args)
        if "dirs" in modified_args:
            modified_args["dirs"] = _list_from_map(modified_args, "dirs")

        repository = configure(self.factory.create_flat_dir_repository(), modified_args)
        resolvers = self._register_resolvers(repository, "flatDir", expected_resolvers=1)
        return resolvers[0]

    # Maven resolvers with a fixed root

    def maven_central(self, args: Optional[Mapping[str, Any]] = None) -> MavenResolverRepository:
        """Declare Maven Central, optionally with extra artifact `urls` and a `name`."""
        args = args or {}
        repository = self.factory.create_maven_central_repository(
            _name_from_map(args, None), _list_from_map(args, "urls")
        )
        return self._register(repository, self.config.maven_central_name)

    def maven_local(self) -> MavenResolverRepository:
        """Declare the local Maven cache."""
        repository = self.factory.create_maven_local_repository(None)
        return self._register(repository, self.config.maven_local_name)

    def maven_repo(
        self, args: Mapping[str, Any], configuration: Any = None
    ) -> MavenResolverRepository:
        """Declare a Maven repository by URL.

        The first of `urls` is the root (and the default name); the rest are
        extra artifact URLs.

        Raises:
            InvalidUserDataError: If no URL is given or the first URL is blank
        """
        urls = _list_from_map(args, "urls")
        if not urls:
            raise InvalidUserDataError("You must specify the urls for a Maven repo.")
        if not str(urls[0]).strip():
            raise InvalidUserDataError("The first url of a Maven repo cannot be blank.")

        repository = self.factory.create_maven_url_repository(
            _name_from_map(args, None), urls[0], urls[1:]
        )
        configure(repository, configuration)
        return self._register(repository, str(urls[0]))

    # Publication targets

    def maven_deployer(
        self, args: Optional[Mapping[str, Any]] = None, configuration: Any = None
    ) -> MavenDeployer:
        """Declare a Maven upload target."""
        args = args or {}
        repository = self.factory.create_maven_deployer()
        seed = f"{DEFAULT_MAVEN_DEPLOYER_NAME}-{next(_publisher_tokens)}"
        repository.name = _name_from_map(args, seed)
        configure(repository, configuration)
        return self._register(repository, seed)

    def maven_installer(
        self, args: Optional[Mapping[str, Any]] = None, configuration: Any = None
    ) -> MavenInstaller:
        """Declare a Maven install target."""
        args = args or {}
        repository = self.factory.create_maven_installer()
        seed = f"{DEFAULT_MAVEN_INSTALLER_NAME}-{next(_publisher_tokens)}"
        repository.name = _name_from_map(args, seed)
        configure(repository, configuration)
        return self._register(repository, seed)

    # Generic repositories

    def maven(self, configuration: Any) -> MavenArtifactRepository:
        """Declare a generic Maven repository."""
        repository = configure(self.factory.create_maven_repository(), configuration)
        return self._register(repository, "maven")

    def ivy(self, configuration: Any) -> IvyArtifactRepository:
        """Declare a generic Ivy repository."""
        repository = configure(self.factory.create_ivy_repository(), configuration)
        return self._register(repository, "ivy")

    # Lookup

    @property
    def resolvers(self) -> list[Resolver]:
        """The resolver chain, in lookup order."""
        return self.container.chain.snapshot()

    @property
    def names(self) -> list[str]:
        """Final repository names, in registration order."""
        return list(self._repositories)

    def find_by_name(self, name: str) -> ArtifactRepository | None:
        return self._repositories.get(name)

    def get_by_name(self, name: str) -> ArtifactRepository:
        """Return the registered repository called name.

        Raises:
            UnknownRepositoryError: If no repository has that name
        """
        repository = self.find_by_name(name)
        if repository is None:
            raise UnknownRepositoryError(f"Repository with name '{name}' not found.")
        return repository

    def __iter__(self) -> Iterator[ArtifactRepository]:
        return iter(list(self._repositories.values()))

    def __len__(self) -> int:
        return len(self._repositories)

    def _register(self, repository, default_name: str):
        self.registrar.register(repository, default_name)
        self._repositories[repository.name] = repository
        return repository

    def _register_resolvers(
        self,
        repository: ArtifactRepository,
        default_name: str,
        expected_resolvers: int | None = None,
    ) -> list[Resolver]:
        resolvers = self.registrar.add_repository(repository, default_name, expected_resolvers)
        self._repositories[repository.name] = repository
        return resolvers


class UnknownRepositoryError(RepositoryError):
    """Raised when looking up a repository name that was never registered."""

    pass
