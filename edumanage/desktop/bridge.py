# edumanage/desktop/bridge.py
"""IPC bridge between the desktop shell and its UI process.

Only the channels in ``ALLOWED_CHANNELS`` can be registered or invoked;
anything else is rejected with ``ChannelNotAllowedError``.
"""
import inspect
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Protocol

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from ..core.config import settings
from ..core.database import get_engine, health_check_db

logger = logging.getLogger(__name__)

ALLOWED_CHANNELS = frozenset({
    "get-app-path",
    "get-database-connection",
    "execute-query",
    "read-file",
    "write-file",
    "minimize",
    "maximize",
    "close",
    "show-notification",
})


class ChannelNotAllowedError(Exception):
    def __init__(self, channel: str):
        self.channel = channel
        super().__init__(f"IPC channel not allowed: {channel}")


class ChannelNotRegisteredError(Exception):
    def __init__(self, channel: str):
        self.channel = channel
        super().__init__(f"No handler registered for IPC channel: {channel}")


class PathOutsideDataDirError(PermissionError):
    pass


class WindowController(Protocol):
    def minimize(self) -> None: ...
    def maximize(self) -> None: ...
    def close(self) -> None: ...


class Notifier(Protocol):
    def notify(self, title: str, body: str = "") -> None: ...


class WindowState:
    """Window controller for headless runs; records the last requested state."""

    def __init__(self):
        self.state = "normal"

    def minimize(self):
        self.state = "minimized"

    def maximize(self):
        # Maximize toggles, as on the desktop shell
        self.state = "normal" if self.state == "maximized" else "maximized"

    def close(self):
        self.state = "closed"


class LogNotifier:
    def notify(self, title: str, body: str = ""):
        logger.info(f"Notification: {title} - {body}")


class DesktopBridge:
    def __init__(self):
        self._handlers: Dict[str, Callable[..., Any]] = {}

    def register(self, channel: str, handler: Callable[..., Any]):
        if channel not in ALLOWED_CHANNELS:
            raise ChannelNotAllowedError(channel)
        self._handlers[channel] = handler

    def handle(self, channel: str):
        """Decorator form of ``register``."""
        def decorator(func):
            self.register(channel, func)
            return func
        return decorator

    @property
    def channels(self):
        return sorted(self._handlers)

    async def invoke(self, channel: str, *args: Any) -> Any:
        if channel not in ALLOWED_CHANNELS:
            logger.warning(f"Rejected IPC call on channel {channel!r}")
            raise ChannelNotAllowedError(channel)
        handler = self._handlers.get(channel)
        if handler is None:
            raise ChannelNotRegisteredError(channel)
        result = handler(*args)
        if inspect.isawaitable(result):
            result = await result
        return result


def resolve_data_path(data_dir: Path, file_path: str) -> Path:
    """Resolve ``file_path`` under ``data_dir``; refuse anything that escapes it."""
    root = data_dir.resolve()
    candidate = (root / file_path).resolve()
    if not candidate.is_relative_to(root):
        raise PathOutsideDataDirError(f"Path outside app data directory: {file_path}")
    return candidate


def create_bridge(
    app_path: str = ".",
    data_dir: Optional[str] = None,
    window: Optional[WindowController] = None,
    notifier: Optional[Notifier] = None,
    engine: Optional[AsyncEngine] = None,
) -> DesktopBridge:
    """Bridge with a handler for every allowed channel."""
    bridge = DesktopBridge()
    window = window or WindowState()
    notifier = notifier or LogNotifier()
    data_root = Path(data_dir or settings.app_data_dir)

    def _engine() -> AsyncEngine:
        return engine or get_engine()

    @bridge.handle("get-app-path")
    def get_app_path():
        return str(Path(app_path).resolve())

    @bridge.handle("get-database-connection")
    async def get_database_connection():
        if await health_check_db(_engine()):
            return {"success": True, "message": "Database verbinding succesvol"}
        return {"success": False, "message": "Database niet bereikbaar"}

    @bridge.handle("execute-query")
    async def execute_query(query: str, params: Optional[dict] = None):
        logger.debug(f"Executing query from UI: {query}")
        try:
            async with _engine().begin() as conn:
                result = await conn.execute(text(query), params or {})
                rows = [dict(row._mapping) for row in result] if result.returns_rows else []
        except SQLAlchemyError as e:
            logger.error(f"UI query failed: {e}")
            return {"success": False, "error": str(getattr(e, "orig", None) or e)}
        return {"success": True, "data": rows}

    @bridge.handle("read-file")
    def read_file(file_path: str) -> str:
        return resolve_data_path(data_root, file_path).read_text(encoding="utf-8")

    @bridge.handle("write-file")
    def write_file(file_path: str, data: str):
        target = resolve_data_path(data_root, file_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(data, encoding="utf-8")
        return {"success": True, "path": str(target)}

    bridge.register("minimize", window.minimize)
    bridge.register("maximize", window.maximize)
    bridge.register("close", window.close)

    @bridge.handle("show-notification")
    def show_notification(options: dict):
        title = (options or {}).get("title")
        if not title:
            raise ValueError("Notification requires a title")
        notifier.notify(title, options.get("body", ""))
        return {"success": True}

    return bridge
