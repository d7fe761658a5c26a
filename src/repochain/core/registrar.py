"""Repository registration.

Registering a repository:
1. Gives it a name (the default when it has none)
2. Deduplicates that name against the container
3. Expands the repository into resolvers
4. Commits the name and appends the resolvers to the chain

Steps 1-3 have no side effects on the container, so a declaration that fails
to expand leaves names and chain exactly as they were.
"""

from typing import TypeVar

from repochain.core.chain import RepositoryContainer
from repochain.entities import Resolver
from repochain.observability.logging import get_logger
from repochain.repositories.base import ArtifactRepository, ResolverContractError

logger = get_logger(__name__)

R = TypeVar("R", bound=ArtifactRepository)


class RepositoryRegistrar:
    """Registers repositories into a container."""

    def __init__(self, container: RepositoryContainer) -> None:
        self.container = container

    def register(self, repository: R, default_name: str) -> R:
        """Register repository, naming it default_name if it has no name.

        Returns:
            The same repository, now carrying its final unique name
        """
        self.add_repository(repository, default_name)
        return repository

    def add_repository(
        self,
        repository: ArtifactRepository,
        default_name: str,
        expected_resolvers: int | None = None,
    ) -> list[Resolver]:
        """Register repository and return the resolvers appended for it.

        Args:
            repository: Configured repository
            default_name: Name to request when the repository has none
            expected_resolvers: Exact number of resolvers the repository must expand to

        Returns:
            The resolvers appended to the chain, in order

        Raises:
            InvalidUserDataError: If the repository declaration is incomplete
            ResolverContractError: If expected_resolvers does not match the expansion
        """
        names = self.container.names
        previous_name = repository.name
        requested = previous_name or default_name
        final_name = names.find_name(requested)

        repository.name = final_name
        try:
            resolvers = repository.create_resolvers()
            if expected_resolvers is not None and len(resolvers) != expected_resolvers:
                raise ResolverContractError(
                    f"{type(repository).__name__} '{final_name}' created {len(resolvers)} "
                    f"resolvers, expected {expected_resolvers}"
                )
        except Exception:
            repository.name = previous_name
            logger.warning(
                "invalid_repository_declaration",
                repository_type=type(repository).__name__,
                requested_name=requested,
            )
            raise

        names.register(final_name)
        self.container.chain.append(resolvers)
        logger.debug(
            "resolvers_appended",
            name=final_name,
            roots=[root for resolver in resolvers for root in resolver.roots],
        )

        logger.info(
            "repository_registered",
            name=final_name,
            requested_name=requested,
            repository_type=type(repository).__name__,
            resolver_count=len(resolvers),
            chain_length=len(self.container.chain),
        )

        return resolvers
