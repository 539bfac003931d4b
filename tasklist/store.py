"""
Task Store: In-memory task collection
========================================
The single owner of the task list. Every mutation goes through here.

Components:
    Task       one to-do item (immutable record)
    Outcome    applied, invalid input or unknown id
    OpResult   outcome plus the task it touched
    TaskStore  ordered, lock-guarded collection

Tasks keep insertion order. Ids come from a per-store counter and are
never reused, so two tasks created back to back can never share an id.
Bad input never raises: it comes back as an OpResult the caller can
inspect or ignore.
"""

from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass, replace, asdict
from enum import Enum
from typing import Any, Iterable, Optional


logger = logging.getLogger(__name__)

DEFAULT_SEED = (
    "Learn FastAPI",
    "Build a to-do app",
    "Deploy to production",
)


# ─────────────────────────────────────────────────────────────
#  Records
# ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Task:
    """A single to-do item."""

    id: str
    text: str
    completed: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


class Outcome(str, Enum):
    APPLIED = "applied"
    INVALID = "invalid"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class OpResult:
    """Result of a store mutation.

    `task` is the record that was created, toggled or removed; it is
    None for anything other than APPLIED.
    """

    outcome: Outcome
    task: Optional[Task] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.APPLIED


_INVALID = OpResult(Outcome.INVALID)
_NOT_FOUND = OpResult(Outcome.NOT_FOUND)


# ─────────────────────────────────────────────────────────────
#  Task Store
# ─────────────────────────────────────────────────────────────

class TaskStore:
    """Ordered task collection with a single mutation lock.

    Usage:
        store = TaskStore()
        result = store.add("  buy milk  ")
        store.toggle(result.task.id)
        store.remove(result.task.id)
    """

    def __init__(self, seed: Iterable[str] = DEFAULT_SEED):
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._tasks: list[Task] = []
        for text in seed:
            self.add(text)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    # ── reads ─────────────────────────────────────────────────

    def list(self) -> list[Task]:
        """Snapshot of all tasks in insertion order."""
        with self._lock:
            return list(self._tasks)

    def get(self, task_id: Any) -> Optional[Task]:
        with self._lock:
            index = self._index_of(task_id)
            return None if index is None else self._tasks[index]

    # ── mutations ─────────────────────────────────────────────

    def add(self, text: Any) -> OpResult:
        """Append a task. Empty or whitespace-only text is rejected."""
        if not isinstance(text, str) or not text.strip():
            return _INVALID

        with self._lock:
            task = Task(id=str(next(self._ids)), text=text.strip())
            self._tasks.append(task)
        logger.debug("added task %s", task.id)
        return OpResult(Outcome.APPLIED, task)

    def toggle(self, task_id: Any) -> OpResult:
        """Flip `completed` on the matching task, keeping its position."""
        if not isinstance(task_id, str):
            return _INVALID
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return _NOT_FOUND
            current = self._tasks[index]
            task = replace(current, completed=not current.completed)
            self._tasks[index] = task
        return OpResult(Outcome.APPLIED, task)

    def remove(self, task_id: Any) -> OpResult:
        """Delete the matching task. Remaining tasks keep their order."""
        if not isinstance(task_id, str):
            return _INVALID
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return _NOT_FOUND
            task = self._tasks.pop(index)
        return OpResult(Outcome.APPLIED, task)

    # ── internals ─────────────────────────────────────────────

    def _index_of(self, task_id: Any) -> Optional[int]:
        # caller holds the lock
        if not isinstance(task_id, str):
            return None
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None
