"""
View Renderer
=============
Read-only side of the app: snapshots the store and derives the numbers
shown on the page.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from tasklist.store import Task, TaskStore


@dataclass(frozen=True)
class TaskStats:
    total: int = 0
    completed: int = 0

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> TaskStats:
        tasks = list(tasks)
        return cls(total=len(tasks), completed=sum(1 for t in tasks if t.completed))

    @property
    def remaining(self) -> int:
        return self.total - self.completed

    @property
    def percentage(self) -> Optional[float]:
        """Completed share in percent; None for an empty list."""
        if self.total == 0:
            return None
        return self.completed / self.total * 100

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "completed": self.completed,
            "remaining": self.remaining,
            "percentage": self.percentage,
        }


class TaskView:
    """Builds the template context from a store snapshot."""

    def __init__(self, store: TaskStore):
        self.store = store

    def context(self) -> dict:
        tasks = self.store.list()
        return {"tasks": tasks, "stats": TaskStats.from_tasks(tasks)}
