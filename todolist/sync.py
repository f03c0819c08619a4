"""Lock wrapper for a TodoStore shared between threads."""
import threading
from typing import List, Optional

from .schema import Todo
from .store import TodoStore


class LockedTodoStore:
    """
    Same operations as TodoStore, each run under one lock.

    Reads take the lock too, so a snapshot or count never observes a
    half-applied clear_completed.
    """

    def __init__(self, store: Optional[TodoStore] = None):
        self._store = store if store is not None else TodoStore()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def add(self, task: str) -> Todo:
        with self._lock:
            return self._store.add(task)

    def remove_by_id(self, todo_id: int) -> Optional[Todo]:
        with self._lock:
            return self._store.remove_by_id(todo_id)

    def remove_by_task(self, task: str) -> Optional[Todo]:
        with self._lock:
            return self._store.remove_by_task(task)

    def toggle(self, todo_id: int) -> Optional[Todo]:
        with self._lock:
            return self._store.toggle(todo_id)

    def clear_completed(self) -> int:
        with self._lock:
            return self._store.clear_completed()

    def get(self, todo_id: int) -> Optional[Todo]:
        with self._lock:
            return self._store.get(todo_id)

    def list_all(self) -> List[Todo]:
        with self._lock:
            return self._store.list_all()

    def list_pending(self) -> List[Todo]:
        with self._lock:
            return self._store.list_pending()

    def list_completed(self) -> List[Todo]:
        with self._lock:
            return self._store.list_completed()

    def task_names(self) -> List[str]:
        with self._lock:
            return self._store.task_names()

    def count_completed(self) -> int:
        with self._lock:
            return self._store.count_completed()

    def count_pending(self) -> int:
        with self._lock:
            return self._store.count_pending()
