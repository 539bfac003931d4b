"""
Request Handler
===============
Turns one submitted form into exactly one TaskStore mutation.

Fields:
    _action   add | toggle | delete
    text      task text (add)
    id        task id (toggle, delete)

The handler never raises for bad input. Whatever happens, the caller
redirects to `redirect_to` afterwards.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Mapping, Optional

from tasklist.store import TaskStore, OpResult, Outcome


logger = logging.getLogger(__name__)

ACTION_FIELD = "_action"


class Action(str, Enum):
    ADD = "add"
    TOGGLE = "toggle"
    DELETE = "delete"

    @classmethod
    def parse(cls, value: Any) -> Optional[Action]:
        try:
            return cls(value)
        except ValueError:
            return None


class RequestHandler:
    """Dispatches form submissions to a TaskStore."""

    def __init__(self, store: TaskStore, redirect_to: str = "/"):
        self.store = store
        self.redirect_to = redirect_to

    def handle(self, fields: Mapping[str, Any]) -> OpResult:
        action = Action.parse(_field(fields, ACTION_FIELD))

        if action is Action.ADD:
            result = self.store.add(_field(fields, "text"))
        elif action is Action.TOGGLE:
            result = self.store.toggle(_field(fields, "id"))
        elif action is Action.DELETE:
            result = self.store.remove(_field(fields, "id"))
        else:
            result = OpResult(Outcome.INVALID)

        self._log(action, result, fields)
        return result

    def _log(self, action: Optional[Action], result: OpResult, fields: Mapping[str, Any]) -> None:
        name = action.value if action else repr(_field(fields, ACTION_FIELD))
        if result.ok:
            logger.info("%s %s: task %s", name, result.outcome.value, result.task.id)
        else:
            logger.debug("%s %s (id=%r)", name, result.outcome.value, _field(fields, "id"))


def _field(fields: Mapping[str, Any], name: str) -> Optional[str]:
    """Return a form field only when it is a plain string."""
    value = fields.get(name)
    return value if isinstance(value, str) else None
