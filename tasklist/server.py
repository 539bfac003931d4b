"""
Task List Server: FastAPI application
========================================
Serves the to-do page and accepts its form posts.

Launch:
    python -m tasklist start        # Via CLI
    python -m tasklist.server       # Direct

Endpoints:
    GET  /                  → Task list page
    POST /                  → Form action (add / toggle / delete), 302 back to /
    GET  /api/tasks         → Tasks and stats as JSON
    GET  /api/tasks/{id}    → One task as JSON
    GET  /api/health        → Liveness and task count
"""

from __future__ import annotations

import logging
import os
import threading
import webbrowser
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from tasklist import __version__
from tasklist.config import ServerConfig
from tasklist.handler import RequestHandler
from tasklist.store import Task, TaskStore
from tasklist.view import TaskStats, TaskView


logger = logging.getLogger(__name__)

PACKAGE_DIR = os.path.dirname(__file__)
STATIC_DIR = os.path.join(PACKAGE_DIR, "static")
TEMPLATES_DIR = os.path.join(PACKAGE_DIR, "templates")

templates = Jinja2Templates(directory=TEMPLATES_DIR)


# ─────────────────────────────────────────────────────────────
#  Response Models
# ─────────────────────────────────────────────────────────────

class TaskOut(BaseModel):
    id: str
    text: str
    completed: bool

    @classmethod
    def from_task(cls, task: Task) -> TaskOut:
        return cls(**task.to_dict())


class StatsOut(BaseModel):
    total: int
    completed: int
    remaining: int
    percentage: Optional[float] = None


class TaskListOut(BaseModel):
    tasks: list[TaskOut]
    stats: StatsOut


# ─────────────────────────────────────────────────────────────
#  App Factory
# ─────────────────────────────────────────────────────────────

def create_app(store: Optional[TaskStore] = None, config: Optional[ServerConfig] = None) -> FastAPI:
    """Build the application around one TaskStore.

    The store lives on `app.state`; routes reach it through the request,
    never through a module global.
    """
    config = config or ServerConfig()
    app = FastAPI(title=config.title, version=__version__)

    app.state.config = config
    app.state.store = store if store is not None else TaskStore()
    app.state.handler = RequestHandler(app.state.store, redirect_to="/")
    app.state.view = TaskView(app.state.store)

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # ── pages ─────────────────────────────────────────────────

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        """Render the task list."""
        context = request.app.state.view.context()
        context["title"] = request.app.state.config.title
        return templates.TemplateResponse(request, "index.html", context)

    @app.post("/")
    async def submit(request: Request):
        """Apply one form action, then redirect back to the list."""
        form = await request.form()
        handler = request.app.state.handler
        handler.handle(form)
        return RedirectResponse(url=handler.redirect_to, status_code=302)

    # ── REST API ──────────────────────────────────────────────

    @app.get("/api/tasks", response_model=TaskListOut)
    async def api_tasks(request: Request):
        """Return every task plus derived stats."""
        tasks = request.app.state.store.list()
        stats = TaskStats.from_tasks(tasks)
        return TaskListOut(
            tasks=[TaskOut.from_task(t) for t in tasks],
            stats=StatsOut(**stats.to_dict()),
        )

    @app.get("/api/tasks/{task_id}", response_model=TaskOut)
    async def api_task(task_id: str, request: Request):
        task = request.app.state.store.get(task_id)
        if task is None:
            raise HTTPException(status_code=404, detail=f"No task with id {task_id!r}")
        return TaskOut.from_task(task)

    @app.get("/api/health")
    async def api_health(request: Request):
        return JSONResponse({"status": "ok", "tasks": len(request.app.state.store)})

    logger.debug("app created with %d seed tasks", len(app.state.store))
    return app


# ─────────────────────────────────────────────────────────────
#  Startup
# ─────────────────────────────────────────────────────────────

def run_server(config: Optional[ServerConfig] = None, store: Optional[TaskStore] = None):
    """Launch the task list server and block until it stops."""
    import uvicorn

    config = config or ServerConfig.from_env()
    app = create_app(store=store, config=config)

    if config.open_browser:
        def _open():
            import time
            time.sleep(1.5)
            webbrowser.open(config.url)
        threading.Thread(target=_open, daemon=True).start()

    print(f"\n─── {config.title} ───")
    print(f"  {config.url}")
    print(f"  Press Ctrl+C to stop\n")

    logger.info("serving on %s:%d", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level)


if __name__ == "__main__":
    run_server()
