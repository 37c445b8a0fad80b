"""Unit tests for the desktop IPC bridge."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import text

from edumanage.desktop import (
    ALLOWED_CHANNELS,
    ChannelNotAllowedError,
    ChannelNotRegisteredError,
    DesktopBridge,
    PathOutsideDataDirError,
    WindowState,
    create_bridge,
)


@pytest.fixture
def window():
    return WindowState()


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def bridge(tmp_path, engine, window, notifier):
    return create_bridge(
        app_path=str(tmp_path),
        data_dir=str(tmp_path / "data"),
        window=window,
        notifier=notifier,
        engine=engine,
    )


class TestAllowList:
    def test_every_allowed_channel_has_a_handler(self, bridge):
        assert bridge.channels == sorted(ALLOWED_CHANNELS)

    async def test_unknown_channel_is_rejected(self, bridge):
        with pytest.raises(ChannelNotAllowedError, match="delete-everything"):
            await bridge.invoke("delete-everything")

    def test_cannot_register_unknown_channel(self):
        with pytest.raises(ChannelNotAllowedError):
            DesktopBridge().register("open-external", lambda url: None)

    async def test_allowed_but_unregistered_channel(self):
        with pytest.raises(ChannelNotRegisteredError):
            await DesktopBridge().invoke("minimize")


class TestAppChannels:
    async def test_get_app_path(self, bridge, tmp_path):
        assert await bridge.invoke("get-app-path") == str(tmp_path.resolve())

    async def test_window_controls(self, bridge, window):
        await bridge.invoke("maximize")
        assert window.state == "maximized"

        await bridge.invoke("maximize")
        assert window.state == "normal"

        await bridge.invoke("minimize")
        assert window.state == "minimized"

        await bridge.invoke("close")
        assert window.state == "closed"

    async def test_show_notification(self, bridge, notifier):
        result = await bridge.invoke("show-notification", {"title": "Nieuwe student", "body": "Fatima is ingeschreven"})

        assert result == {"success": True}
        notifier.notify.assert_called_once_with("Nieuwe student", "Fatima is ingeschreven")

    async def test_notification_requires_title(self, bridge):
        with pytest.raises(ValueError):
            await bridge.invoke("show-notification", {"body": "zonder titel"})


class TestDatabaseChannels:
    async def test_get_database_connection(self, bridge):
        result = await bridge.invoke("get-database-connection")

        assert result["success"] is True

    async def test_execute_select(self, bridge, student):
        result = await bridge.invoke(
            "execute-query",
            "SELECT student_id, first_name FROM students WHERE id = :id",
            {"id": student.id},
        )

        assert result == {"success": True, "data": [{"student_id": "ST-0001", "first_name": "Ahmed"}]}

    async def test_execute_write(self, bridge, engine, program):
        result = await bridge.invoke(
            "execute-query",
            "UPDATE programs SET duration = :duration",
            {"duration": 5},
        )

        assert result == {"success": True, "data": []}
        async with engine.connect() as conn:
            duration = (await conn.execute(text("SELECT duration FROM programs"))).scalar()
        assert duration == 5

    async def test_execute_invalid_sql(self, bridge):
        result = await bridge.invoke("execute-query", "SELECT * FROM nowhere")

        assert result["success"] is False
        assert "nowhere" in result["error"]


class TestFileChannels:
    async def test_write_then_read(self, bridge, tmp_path):
        result = await bridge.invoke("write-file", "exports/klas-8a.csv", "id,naam\n1,Ahmed\n")

        assert result["success"] is True
        assert (tmp_path / "data" / "exports" / "klas-8a.csv").is_file()
        assert await bridge.invoke("read-file", "exports/klas-8a.csv") == "id,naam\n1,Ahmed\n"

    async def test_paths_outside_data_dir_are_refused(self, bridge):
        with pytest.raises(PathOutsideDataDirError):
            await bridge.invoke("read-file", "../../etc/passwd")

        with pytest.raises(PathOutsideDataDirError):
            await bridge.invoke("write-file", "/tmp/elsewhere.txt", "x")

    async def test_missing_file(self, bridge):
        with pytest.raises(FileNotFoundError):
            await bridge.invoke("read-file", "missing.txt")
