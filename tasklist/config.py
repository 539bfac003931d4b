"""
Server Configuration
====================
Host, port and logging settings for the web server. Values come from
defaults, then TASKLIST_* environment variables, then CLI flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional


LOG_LEVELS = ("critical", "error", "warning", "info", "debug")

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ServerConfig:
    """Settings for `run_server`."""

    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "info"       # one of LOG_LEVELS
    open_browser: bool = False
    title: str = "To-Do App"      # page heading and <title>

    def __post_init__(self):
        if not 0 < self.port < 65536:
            raise ValueError(f"port out of range: {self.port}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ServerConfig:
        env = os.environ if environ is None else environ
        defaults = cls()

        port = env.get("TASKLIST_PORT")
        try:
            port = int(port) if port else defaults.port
        except ValueError:
            raise ValueError(f"TASKLIST_PORT is not a number: {port!r}") from None

        browser = env.get("TASKLIST_OPEN_BROWSER")
        return cls(
            host=env.get("TASKLIST_HOST") or defaults.host,
            port=port,
            log_level=(env.get("TASKLIST_LOG_LEVEL") or defaults.log_level).lower(),
            open_browser=browser.strip().lower() in _TRUE if browser else defaults.open_browser,
        )

    def override(self, **changes) -> ServerConfig:
        """Copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @property
    def url(self) -> str:
        host = "localhost" if self.host in ("0.0.0.0", "127.0.0.1") else self.host
        return f"http://{host}:{self.port}"
