"""Type-keyed DI container. Every registration yields one shared instance."""
from __future__ import annotations

import inspect
from typing import Any, Callable, TypeVar, get_type_hints

T = TypeVar("T")


def _constructor_dependencies(cls: type) -> dict[str, tuple[Any, bool]]:
    """Map each __init__ parameter to (annotated type, has default)."""
    if cls.__init__ is object.__init__:
        return {}
    hints = get_type_hints(cls.__init__)
    deps: dict[str, tuple[Any, bool]] = {}
    for name, param in inspect.signature(cls.__init__).parameters.items():
        if name == "self" or name not in hints:
            continue
        deps[name] = (hints[name], param.default is not inspect.Parameter.empty)
    return deps


class Container:
    """
    Providers are keyed by type (class or protocol). A provider runs at most
    once; its result is cached for later resolves.
    """

    def __init__(self) -> None:
        self._providers: dict[type, Callable[[], Any]] = {}
        self._instances: dict[type, Any] = {}

    def register(self, key: type, provider: Callable[[], Any]) -> None:
        self._providers[key] = provider
        self._instances.pop(key, None)

    def register_instance(self, key: type[T], instance: T) -> None:
        self._providers[key] = lambda: instance
        self._instances[key] = instance

    def register_class(self, cls: type) -> None:
        """Build cls on first resolve; annotated constructor parameters come from the container."""
        self.register(cls, lambda: self._build(cls))

    def has(self, key: type) -> bool:
        return key in self._providers

    def resolve(self, key: type[T]) -> T:
        if key in self._instances:
            return self._instances[key]
        if key not in self._providers:
            raise KeyError(f"No registration for {key!r}")
        instance = self._providers[key]()
        self._instances[key] = instance
        return instance

    def _build(self, cls: type[T]) -> T:
        kwargs = {
            name: self.resolve(dep)
            for name, (dep, optional) in _constructor_dependencies(cls).items()
            if not (optional and not self.has(dep))
        }
        return cls(**kwargs)
