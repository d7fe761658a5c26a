"""Resolver entity - one entry of the resolution chain."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class ResolverKind(str, Enum):
    """Kinds of low-level resolvers."""

    FLAT_DIR = "flat_dir"
    MAVEN = "maven"
    IVY = "ivy"
    MAVEN_DEPLOYER = "maven_deployer"
    MAVEN_INSTALLER = "maven_installer"


class Credentials(BaseModel):
    """Username/password pair for an authenticated repository."""

    username: str | None = None
    password: str | None = None

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password=***)"


class Resolver(BaseModel):
    """A low-level handle able to locate artifacts for one declaration.

    The dependency resolver tries resolvers in chain order. Two resolvers with
    equal fields are still distinct chain entries.
    """

    name: str = Field(..., description="Name of the owning repository")
    kind: ResolverKind
    roots: list[str] = Field(default_factory=list, description="Base URLs or directories, in lookup order")
    artifact_patterns: list[str] = Field(default_factory=list)
    ivy_patterns: list[str] = Field(default_factory=list)
    m2compatible: bool = False
    credentials: Credentials | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Resolver name cannot be empty")
        return v

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)
