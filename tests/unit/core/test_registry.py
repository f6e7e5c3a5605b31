from __future__ import annotations

"""
Unit tests for the type-scoped InstanceRegistry.

Verifies:
1. Register/unregister postconditions.
2. One independent registry per type.
3. Snapshots are detached from the live set.
4. References are non-owning.
"""

import gc
from dataclasses import dataclass

from sessionlog.core.registry import InstanceRegistry


class _Tracked:
    pass


class _Other:
    pass


@dataclass(frozen=True)
class _Point:
    x: int


@dataclass
class _Box:
    value: int


def test_register_and_unregister() -> None:
    reg = InstanceRegistry(_Tracked)
    item = _Tracked()

    assert reg.register(item) is True
    assert item in reg
    assert reg.size() == 1

    assert reg.unregister(item) is True
    assert item not in reg
    assert reg.size() == 0


def test_unregister_non_member_is_noop() -> None:
    reg = InstanceRegistry(_Tracked)
    assert reg.unregister(_Tracked()) is True
    assert reg.size() == 0


def test_register_twice_keeps_single_membership() -> None:
    reg = InstanceRegistry(_Tracked)
    item = _Tracked()
    reg.register(item)
    reg.register(item)
    assert len(reg) == 1


def test_for_type_returns_same_registry_per_type() -> None:
    assert InstanceRegistry.for_type(_Tracked) is InstanceRegistry.for_type(_Tracked)
    assert InstanceRegistry.for_type(_Tracked) is not InstanceRegistry.for_type(_Other)
    assert _Tracked in InstanceRegistry.registered_types()


def test_registries_are_independent() -> None:
    tracked = InstanceRegistry.for_type(_Tracked)
    other = InstanceRegistry.for_type(_Other)
    tracked.clear()
    other.clear()

    a = _Tracked()
    tracked.register(a)

    assert tracked.size() == 1
    assert other.size() == 0
    tracked.clear()


def test_all_returns_snapshot() -> None:
    reg = InstanceRegistry(_Tracked)
    a, b = _Tracked(), _Tracked()
    reg.register(a)
    reg.register(b)

    snapshot = reg.all()
    snapshot.remove(a)

    assert snapshot == [b]
    assert sorted(map(id, reg.all())) == sorted([id(a), id(b)])


def test_registry_does_not_keep_instances_alive() -> None:
    reg = InstanceRegistry(_Tracked)
    reg.register(_Tracked())
    gc.collect()
    assert reg.size() == 0


def test_clear_leaves_instances_untouched() -> None:
    reg = InstanceRegistry(_Tracked)
    item = _Tracked()
    item.flag = "kept"
    reg.register(item)

    reg.clear()

    assert reg.size() == 0
    assert item.flag == "kept"


def test_equal_instances_are_distinct_members() -> None:
    """Membership follows identity, not equality."""
    reg = InstanceRegistry(_Point)
    first, second = _Point(1), _Point(1)
    assert first == second

    reg.register(first)
    reg.register(second)
    assert reg.size() == 2

    reg.unregister(first)
    assert first not in reg
    assert second in reg
    assert reg.all()[0] is second


def test_unhashable_instances_are_supported() -> None:
    reg = InstanceRegistry.for_type(_Box)
    reg.clear()
    box = _Box(1)

    assert reg.register(box) is True
    assert box in reg
    assert _Box(1) not in reg
    assert reg.unregister(box) is True
    assert reg.size() == 0


def test_collected_member_is_reaped_from_storage() -> None:
    reg = InstanceRegistry(_Box)
    reg.register(_Box(7))
    gc.collect()
    assert reg._refs == {}
