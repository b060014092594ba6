"""
Reducer Registry.

Manages registration and lookup of named reducers, so reducers can be
selected by name from configuration or the command line.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class ReducerSpec:
    """A named reducer with its natural starting accumulator.

    Attributes:
        name: Lookup name
        func: ``func(element, acc) -> new_acc``
        initial: Factory for the default initial accumulator
        description: One-line summary for listings
    """

    name: str
    func: Callable[[Any, Any], Any]
    initial: Callable[[], Any] = field(default=lambda: None)
    description: str = ""

    def default_initial(self) -> Any:
        """Build a fresh default initial accumulator."""
        return self.initial()


class ReducerRegistry:
    """Registry for named reducers.

    Usage:
        # Register a reducer
        registry.register(ReducerSpec("add", lambda x, acc: acc + x, int))

        # Look one up
        spec = registry.get("add")

        # Check availability
        if registry.is_registered("add"):
            ...
    """

    _instance: Optional["ReducerRegistry"] = None
    _reducers: dict[str, ReducerSpec]
    _builtins_loaded: bool

    def __new__(cls) -> "ReducerRegistry":
        """Singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._reducers = {}
            cls._instance._builtins_loaded = False
        return cls._instance

    def register(self, spec: ReducerSpec, replace: bool = False) -> None:
        """Register a reducer.

        Args:
            spec: Reducer to register
            replace: Allow overwriting an existing name

        Raises:
            ValueError: If the name is taken and replace is False
        """
        if not callable(spec.func):
            raise TypeError(f"Reducer {spec.name!r} is not callable")
        self._ensure_builtins()
        if spec.name in self._reducers and not replace:
            raise ValueError(f"Reducer already registered: {spec.name}")
        self._reducers[spec.name] = spec

    def unregister(self, name: str) -> bool:
        """Unregister a reducer.

        Returns:
            True if was registered, False otherwise
        """
        self._ensure_builtins()
        if name in self._reducers:
            del self._reducers[name]
            return True
        return False

    def get(self, name: str) -> ReducerSpec:
        """Get a registered reducer.

        Raises:
            KeyError: If name not registered
        """
        self._ensure_builtins()
        if name not in self._reducers:
            available = ", ".join(sorted(self._reducers)) or "none"
            raise KeyError(f"Reducer not registered: {name} (available: {available})")
        return self._reducers[name]

    def is_registered(self, name: str) -> bool:
        self._ensure_builtins()
        return name in self._reducers

    def names(self) -> list[str]:
        """Registered reducer names, sorted."""
        self._ensure_builtins()
        return sorted(self._reducers)

    def specs(self) -> list[ReducerSpec]:
        """Registered reducers, sorted by name."""
        return [self._reducers[name] for name in self.names()]

    def reset(self) -> None:
        """Remove all registrations. Built-ins come back on next lookup."""
        self._reducers.clear()
        self._builtins_loaded = False

    def _ensure_builtins(self) -> None:
        if self._builtins_loaded:
            return
        from foldkit.reducers.builtin import BUILTIN_REDUCERS

        for spec in BUILTIN_REDUCERS:
            self._reducers.setdefault(spec.name, spec)
        self._builtins_loaded = True


def get_registry() -> ReducerRegistry:
    """Get the global reducer registry."""
    return ReducerRegistry()


def get_reducer(name: str) -> ReducerSpec:
    """Look up a reducer by name in the global registry."""
    return get_registry().get(name)
