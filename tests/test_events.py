"""
Tests for the event bridge and the lock wrapper.
"""
import threading

import pytest

from todolist.events import TodoEventBridge, TodoEventType
from todolist.sync import LockedTodoStore


class Recorder:
    """Collects (event_type, kwargs) pairs from subscribe_all."""

    def __init__(self):
        self.events = []

    def __call__(self, event_type, **kwargs):
        self.events.append((event_type, kwargs))

    @property
    def types(self):
        return [e[0] for e in self.events]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Event Bridge Tests
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_add_emits_added(store):
    bridge = TodoEventBridge(store)
    seen = []
    bridge.subscribe(TodoEventType.ADDED, lambda todo: seen.append(todo))

    todo = bridge.add("Write tests")

    assert seen == [todo]
    assert store.list_all() == [todo]


def test_remove_and_toggle_events(abc_store):
    bridge = TodoEventBridge(abc_store)
    rec = Recorder()
    bridge.subscribe_all(rec)

    bridge.toggle(1)
    bridge.remove_by_id(2)
    bridge.remove_by_task("C")

    assert rec.types == [
        TodoEventType.TOGGLED,
        TodoEventType.REMOVED,
        TodoEventType.REMOVED,
    ]
    assert rec.events[0][1]["todo"].is_completed is True
    assert rec.events[1][1]["todo"].task == "B"
    assert rec.events[2][1]["todo"].id == 3


def test_not_found_events(abc_store):
    bridge = TodoEventBridge(abc_store)
    rec = Recorder()
    bridge.subscribe_all(rec)

    assert bridge.remove_by_id(99) is None
    assert bridge.remove_by_task("missing") is None
    assert bridge.toggle(42) is None

    assert rec.types == [TodoEventType.NOT_FOUND] * 3
    assert rec.events[0][1] == {"action": "remove", "todo_id": 99}
    assert rec.events[1][1] == {"action": "remove", "task": "missing"}
    assert rec.events[2][1] == {"action": "toggle", "todo_id": 42}
    assert abc_store.task_names() == ["A", "B", "C"]


def test_clear_emits_count(abc_store):
    bridge = TodoEventBridge(abc_store)
    counts = []
    bridge.subscribe(TodoEventType.CLEARED, lambda count: counts.append(count))

    bridge.toggle(1)
    bridge.toggle(3)
    assert bridge.clear_completed() == 2
    assert counts == [2]


def test_failing_callback_does_not_break_operation(store):
    bridge = TodoEventBridge(store)

    def boom(todo):
        raise RuntimeError("subscriber failure")

    after = []
    bridge.subscribe(TodoEventType.ADDED, boom)
    bridge.subscribe(TodoEventType.ADDED, lambda todo: after.append(todo.id))

    todo = bridge.add("still added")
    assert store.get(todo.id) == todo
    assert after == [todo.id]


def test_subscribe_rejects_unknown_type(store):
    bridge = TodoEventBridge(store)
    with pytest.raises(ValueError):
        bridge.subscribe("todo_exploded", lambda **kw: None)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Lock wrapper Tests
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_locked_store_delegates(abc_store):
    locked = LockedTodoStore(abc_store)
    assert len(locked) == 3
    assert locked.toggle(2).is_completed
    assert locked.count_completed() == 1
    assert locked.count_pending() == 2
    assert [t.id for t in locked.list_completed()] == [2]
    assert [t.id for t in locked.list_pending()] == [1, 3]
    assert locked.clear_completed() == 1
    assert locked.remove_by_task("A").id == 1
    assert locked.remove_by_id(99) is None
    assert locked.get(3).task == "C"
    assert locked.task_names() == ["C"]


def test_locked_store_concurrent_adds_get_unique_ids():
    locked = LockedTodoStore()

    def worker(n):
        for i in range(200):
            locked.add(f"worker {n} item {i}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [t.id for t in locked.list_all()]
    assert len(ids) == 800
    assert sorted(ids) == list(range(1, 801))


def test_bridge_over_locked_store():
    bridge = TodoEventBridge(LockedTodoStore())
    rec = Recorder()
    bridge.subscribe_all(rec)
    bridge.add("A")
    bridge.toggle(1)
    assert rec.types == [TodoEventType.ADDED, TodoEventType.TOGGLED]


def test_bridge_not_found_over_locked_store(abc_store):
    bridge = TodoEventBridge(LockedTodoStore(abc_store))
    rec = Recorder()
    bridge.subscribe_all(rec)

    assert bridge.remove_by_task("missing") is None
    assert bridge.clear_completed() == 0

    assert rec.types == [TodoEventType.NOT_FOUND, TodoEventType.CLEARED]
    assert len(bridge.store) == 3
