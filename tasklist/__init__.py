"""
Task List: single-page to-do manager
=======================================
An in-memory task list served as one web page.

Architecture:
    store.py    TaskStore, the only owner and writer of the task list
    handler.py  RequestHandler, one form post to one mutation
    view.py     TaskView and TaskStats, read-only snapshot and counts
    server.py   FastAPI app wiring the three together
"""

__version__ = "0.1.0"

from tasklist.store import Task, TaskStore, Outcome, OpResult
from tasklist.handler import Action, RequestHandler
from tasklist.view import TaskStats, TaskView

__all__ = [
    "Task", "TaskStore", "Outcome", "OpResult",
    "Action", "RequestHandler",
    "TaskStats", "TaskView",
]
