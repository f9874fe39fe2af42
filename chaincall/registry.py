"""Registry helpers that expose named lookups of plugin classes."""

from __future__ import annotations

from typing import Generic, TypeVar

from . import errors, logs

log = logs.get(__name__)

T = TypeVar('T')


class Registry(Generic[T]):
    """Keeps a registry of subclasses by name."""

    def __init__(self, name: str, base_type: type[T]) -> None:
        self._name = name
        self._base_type = base_type
        self._registry: dict[str, type[T]] = {}

    def __getitem__(self, name: str) -> type[T]:
        try:
            return self._registry[name]
        except KeyError:
            raise errors.RegistryError(f'{self._name}: unknown name: {name!r}') from None

    def __setitem__(self, name: str, cls: type[T]) -> None:
        if not issubclass(cls, self._base_type):
            raise TypeError(f'{cls.__name__} is not a subclass of {self._base_type.__name__}')
        log.debug('registered %s: %s', self._name, name)
        self._registry[name] = cls

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def names(self) -> tuple[str, ...]:
        """Return all registered names in insertion order."""
        return tuple(self._registry.keys())
