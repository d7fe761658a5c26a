"""The ordered resolver chain and the container that owns it."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from repochain.core.naming import NameRegistry
from repochain.entities import Resolver


class ResolverChain:
    """Append-only sequence of resolvers, tried by the dependency resolver in order."""

    def __init__(self) -> None:
        self._entries: list[Resolver] = []

    def append(self, entries: Iterable[Resolver]) -> None:
        """Add entries at the tail, keeping their relative order."""
        self._entries.extend(entries)

    def snapshot(self) -> list[Resolver]:
        """Return a copy of the chain in registration order."""
        return list(self._entries)

    def find(self, name: str) -> Resolver | None:
        """Return the first resolver with the given name, if any."""
        for resolver in self._entries:
            if resolver.name == name:
                return resolver
        return None

    def __iter__(self) -> Iterator[Resolver]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class RepositoryContainer:
    """Mutable registration state of one build: assigned names and the resolver chain.

    Not thread-safe; all registrations happen sequentially while the build
    description is evaluated.
    """

    names: NameRegistry = field(default_factory=NameRegistry)
    chain: ResolverChain = field(default_factory=ResolverChain)
