"""
In-memory todo store.

Keeps Todo records in insertion order and hands out ids from a counter
that only moves forward. Lookups that miss return None; nothing here
raises for an unknown id or task.
"""
import logging
from typing import List, Optional

from .schema import Todo

logger = logging.getLogger(__name__)


class TodoStore:
    """Ordered list of Todo records with monotonic id assignment.

    Not thread-safe; wrap in sync.LockedTodoStore when shared.
    """

    def __init__(self):
        self._todos: List[Todo] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._todos)

    def _index_of(self, todo_id: int) -> int:
        for i, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return i
        return -1

    # ── Mutations ────────────────────────────────────────────────

    def add(self, task: str) -> Todo:
        """Append a new pending Todo and return it."""
        todo = Todo(id=self._next_id, task=task)
        self._next_id += 1
        self._todos.append(todo)
        logger.debug(f"Added todo {todo.id}: {task!r}")
        return todo

    def remove_by_id(self, todo_id: int) -> Optional[Todo]:
        """Remove the Todo with this id. Returns the removed record, or None."""
        index = self._index_of(todo_id)
        if index == -1:
            logger.debug(f"Todo with ID {todo_id} not found")
            return None
        removed = self._todos.pop(index)
        logger.debug(f"Removed todo {removed.id}: {removed.task!r}")
        return removed

    def remove_by_task(self, task: str) -> Optional[Todo]:
        """
        Remove the first Todo whose task text matches exactly.

        Matching is case-sensitive. With duplicate task text only the
        earliest record is removed.
        """
        for i, todo in enumerate(self._todos):
            if todo.task == task:
                removed = self._todos.pop(i)
                logger.debug(f"Removed todo {removed.id}: {task!r}")
                return removed
        logger.debug(f"Todo {task!r} not found")
        return None

    def toggle(self, todo_id: int) -> Optional[Todo]:
        """Flip completion in place. Returns the replacement record, or None."""
        index = self._index_of(todo_id)
        if index == -1:
            logger.debug(f"Todo with ID {todo_id} not found")
            return None
        updated = self._todos[index].toggled()
        self._todos[index] = updated
        logger.debug(f"Toggled todo {updated.id}: {updated.status}")
        return updated

    def clear_completed(self) -> int:
        """Drop every completed Todo. Returns how many were removed."""
        remaining = [t for t in self._todos if not t.is_completed]
        cleared = len(self._todos) - len(remaining)
        self._todos = remaining
        logger.debug(f"Cleared {cleared} completed todos")
        return cleared

    # ── Queries ──────────────────────────────────────────────────

    def get(self, todo_id: int) -> Optional[Todo]:
        index = self._index_of(todo_id)
        return self._todos[index] if index != -1 else None

    def list_all(self) -> List[Todo]:
        """Snapshot of all todos in insertion order."""
        return list(self._todos)

    def list_pending(self) -> List[Todo]:
        return [t for t in self._todos if not t.is_completed]

    def list_completed(self) -> List[Todo]:
        return [t for t in self._todos if t.is_completed]

    def task_names(self) -> List[str]:
        return [t.task for t in self._todos]

    def count_completed(self) -> int:
        return sum(1 for t in self._todos if t.is_completed)

    def count_pending(self) -> int:
        return sum(1 for t in self._todos if not t.is_completed)
