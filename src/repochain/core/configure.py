"""Applying user configuration to a repository before it is registered.

A build description can configure a repository three ways:

    handler.maven(Callback(lambda repo: setattr(repo, "url", "https://repo.example.com")))
    handler.maven(PropertyMap({"url": "https://repo.example.com"}))
    handler.maven(BuilderAction(configure_company_repo))

Plain callables and mappings are accepted as shorthands for Callback and
PropertyMap. All forms go through configure().
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar, Union

from pydantic import BaseModel, ValidationError

from repochain.observability.logging import get_logger
from repochain.repositories.base import InvalidUserDataError

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Callback:
    """Imperative configuration: fn is called with the repository."""

    fn: Callable[[Any], Any]

    def apply(self, target: Any) -> None:
        self.fn(target)


@dataclass(frozen=True)
class BuilderAction:
    """Builder-style configuration function; same contract as Callback."""

    fn: Callable[[Any], None]

    def apply(self, target: Any) -> None:
        self.fn(target)


@dataclass(frozen=True)
class PropertyMap:
    """Declarative configuration: each key is assigned as a property of the repository."""

    values: Mapping[str, Any] = field(default_factory=dict)

    def apply(self, target: Any) -> None:
        fields = type(target).model_fields
        for key, value in self.values.items():
            if key not in fields:
                raise ConfigurationError(
                    f"Could not find property '{key}' on {type(target).__name__}."
                )
            setattr(target, key, value)


Configuration = Union[Callback, PropertyMap, BuilderAction]


def to_configuration(value: Any) -> Configuration | None:
    """Coerce a shorthand (callable, mapping or None) into a Configuration."""
    if value is None or isinstance(value, (Callback, PropertyMap, BuilderAction)):
        return value
    if isinstance(value, Mapping):
        return PropertyMap(dict(value))
    if callable(value):
        return Callback(value)
    raise ConfigurationError(f"Cannot configure a repository with {type(value).__name__}")


def configure(target: T, configuration: Any) -> T:
    """Apply configuration to target and return target.

    Args:
        target: Repository to configure
        configuration: Callback, PropertyMap, BuilderAction, callable, mapping or None

    Returns:
        The same target

    Raises:
        ConfigurationError: If a property is unknown or a value is invalid
    """
    resolved = to_configuration(configuration)
    if resolved is None:
        return target

    try:
        resolved.apply(target)
    except ValidationError as e:
        logger.warning(
            "repository_configuration_invalid",
            repository_type=type(target).__name__,
            error=str(e),
        )
        raise ConfigurationError(
            f"Invalid configuration for {type(target).__name__}: {e}"
        ) from e

    return target


class ConfigurationError(InvalidUserDataError):
    """Raised when configuration cannot be applied to a repository."""

    pass
