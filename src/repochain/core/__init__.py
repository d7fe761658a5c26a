"""Core registration logic: naming, the resolver chain and the registrar."""

from repochain.core.chain import RepositoryContainer, ResolverChain
from repochain.core.configure import BuilderAction, Callback, ConfigurationError, PropertyMap, configure
from repochain.core.naming import NameConflictError, NameRegistry
from repochain.core.registrar import RepositoryRegistrar

__all__ = [
    "BuilderAction",
    "Callback",
    "ConfigurationError",
    "NameConflictError",
    "NameRegistry",
    "PropertyMap",
    "RepositoryContainer",
    "RepositoryRegistrar",
    "ResolverChain",
    "configure",
]
