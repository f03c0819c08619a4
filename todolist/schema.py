"""
Todo record schema.

A Todo is an immutable value: completion changes produce a new record
that replaces the old one at the same position in the store.
"""
from dataclasses import dataclass, replace
from typing import Dict, Any


@dataclass(frozen=True)
class Todo:
    """A single task with its identifier and completion flag."""

    id: int                     # Store-assigned, starts at 1, never reused
    task: str                   # Description (empty text is accepted)
    is_completed: bool = False

    def toggled(self) -> "Todo":
        """Return a copy with the completion flag inverted."""
        return replace(self, is_completed=not self.is_completed)

    @property
    def status(self) -> str:
        return "completed" if self.is_completed else "pending"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "task": self.task,
            "is_completed": self.is_completed,
        }

