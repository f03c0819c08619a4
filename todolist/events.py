"""
Event bridge: runs TodoStore operations and reports each outcome.

Every operation emits exactly one event to the subscribers registered for
its type. A miss (unknown id or task) emits todo_not_found instead of
raising, so callers can print a status line or forward the event.
"""
import logging
from typing import Optional, Dict, Callable, List, Union

from .schema import Todo
from .store import TodoStore
from .sync import LockedTodoStore

logger = logging.getLogger(__name__)


class TodoEventType:
    """All event types the bridge emits."""

    ADDED = "todo_added"
    REMOVED = "todo_removed"
    TOGGLED = "todo_toggled"
    NOT_FOUND = "todo_not_found"
    CLEARED = "completed_cleared"

    @classmethod
    def all_types(cls) -> List[str]:
        return [cls.ADDED, cls.REMOVED, cls.TOGGLED, cls.NOT_FOUND, cls.CLEARED]


class TodoEventBridge:
    """Routes TodoStore operation outcomes to subscriber callbacks."""

    def __init__(self, store: Union[TodoStore, LockedTodoStore]):
        self.store = store
        self.subscribers: Dict[str, list] = {}  # event_type -> list of callbacks
        self._catch_all: List[Callable] = []

    def subscribe(self, event_type: str, callback: Callable) -> None:
        """Register a callback for an event type."""
        if event_type not in TodoEventType.all_types():
            raise ValueError(f"Invalid event_type: {event_type}")
        self.subscribers.setdefault(event_type, []).append(callback)

    def subscribe_all(self, callback: Callable) -> None:
        """Register a callback for every event; it also receives event_type."""
        self._catch_all.append(callback)

    def _emit(self, event_type: str, **kwargs) -> None:
        """Emit an event to all subscribers. Callback errors are logged."""
        for callback in self.subscribers.get(event_type, []):
            try:
                callback(**kwargs)
            except Exception as e:
                logger.error(f"Error in {event_type} callback: {e}")
        for callback in self._catch_all:
            try:
                callback(event_type=event_type, **kwargs)
            except Exception as e:
                logger.error(f"Error in {event_type} callback: {e}")

    def add(self, task: str) -> Todo:
        todo = self.store.add(task)
        self._emit(TodoEventType.ADDED, todo=todo)
        return todo

    def remove_by_id(self, todo_id: int) -> Optional[Todo]:
        removed = self.store.remove_by_id(todo_id)
        if removed is None:
            self._emit(TodoEventType.NOT_FOUND, action="remove", todo_id=todo_id)
        else:
            self._emit(TodoEventType.REMOVED, todo=removed)
        return removed

    def remove_by_task(self, task: str) -> Optional[Todo]:
        removed = self.store.remove_by_task(task)
        if removed is None:
            self._emit(TodoEventType.NOT_FOUND, action="remove", task=task)
        else:
            self._emit(TodoEventType.REMOVED, todo=removed)
        return removed

    def toggle(self, todo_id: int) -> Optional[Todo]:
        updated = self.store.toggle(todo_id)
        if updated is None:
            self._emit(TodoEventType.NOT_FOUND, action="toggle", todo_id=todo_id)
        else:
            self._emit(TodoEventType.TOGGLED, todo=updated)
        return updated

    def clear_completed(self) -> int:
        count = self.store.clear_completed()
        self._emit(TodoEventType.CLEARED, count=count)
        return count
