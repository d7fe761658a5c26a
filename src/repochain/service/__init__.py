"""Service layer - the repository builders used by build descriptions.

- RepositoryHandler: one builder per repository kind
"""

from repochain.service.handler import RepositoryHandler, UnknownRepositoryError

__all__ = [
    "RepositoryHandler",
    "UnknownRepositoryError",
]
