from __future__ import annotations

"""
Type-Scoped Instance Registry.

Keeps one process-wide set of live references per tracked type, so a
program can enumerate (or bulk-manage) every active instance of, say,
Logger. Membership is by identity: two distinct instances that compare
equal are two members, and unhashable types are supported. References are
weak: the registry never keeps an instance alive and never closes or
destroys what it tracks.
"""

import threading
import weakref
from typing import Any, ClassVar, Dict, Generic, List, Type, TypeVar

T = TypeVar("T")


class InstanceRegistry(Generic[T]):
    """
    Membership-only collection of live instances of one type.

    Obtain the registry of a type through InstanceRegistry.for_type(cls);
    every call with the same type returns the same registry.
    """

    _registries: ClassVar[Dict[type, "InstanceRegistry[Any]"]] = {}
    _registries_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, tracked_type: Type[T]) -> None:
        self.tracked_type = tracked_type
        self._refs: Dict[int, "weakref.ref[T]"] = {}
        self._lock = threading.Lock()

    @classmethod
    def for_type(cls, tracked_type: Type[T]) -> "InstanceRegistry[T]":
        """
        Return the registry for a type, creating it on first use.

        Args:
            tracked_type: The class whose instances are tracked.

        Returns:
            InstanceRegistry[T]: The registry dedicated to that class.
        """
        with cls._registries_lock:
            registry = cls._registries.get(tracked_type)
            if registry is None:
                registry = cls(tracked_type)
                cls._registries[tracked_type] = registry
            return registry

    @classmethod
    def registered_types(cls) -> List[type]:
        """Return every type that currently has a registry."""
        with cls._registries_lock:
            return list(cls._registries)

    def register(self, instance: T) -> bool:
        """Add an instance. Returns whether it is a member afterwards."""
        key = id(instance)
        with self._lock:
            if self._lookup(key) is not instance:
                self._refs[key] = weakref.ref(instance, self._make_reaper(key))
            return self._lookup(key) is instance

    def unregister(self, instance: T) -> bool:
        """Remove an instance. Returns whether it is absent afterwards."""
        key = id(instance)
        with self._lock:
            if self._lookup(key) is instance:
                del self._refs[key]
            return self._lookup(key) is not instance

    def all(self) -> List[T]:
        """Snapshot of the current members, unordered."""
        with self._lock:
            alive = (ref() for ref in list(self._refs.values()))
            return [obj for obj in alive if obj is not None]

    def size(self) -> int:
        return len(self.all())

    def clear(self) -> None:
        """Forget every member. Instances themselves are left untouched."""
        with self._lock:
            self._refs.clear()

    def _lookup(self, key: int) -> Any:
        ref = self._refs.get(key)
        return ref() if ref is not None else None

    def _make_reaper(self, key: int):
        """Callback dropping a dead reference, unless the id was reused."""
        self_ref = weakref.ref(self)

        def _reap(dead: "weakref.ref[T]") -> None:
            registry = self_ref()
            if registry is not None and registry._refs.get(key) is dead:
                registry._refs.pop(key, None)

        return _reap

    def __contains__(self, instance: object) -> bool:
        with self._lock:
            return self._lookup(id(instance)) is instance

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"InstanceRegistry({self.tracked_type.__name__}, size={self.size()})"
