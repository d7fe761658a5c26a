"""Entities - resolver handles produced by repository declarations.

- Resolver: one low-level entry of the resolution chain
- ResolverKind: what kind of source a resolver reads from
- Credentials: optional username/password for remote roots
"""

from repochain.entities.resolver import Credentials, Resolver, ResolverKind

__all__ = [
    "Credentials",
    "Resolver",
    "ResolverKind",
]
