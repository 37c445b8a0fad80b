from .bridge import (
    ALLOWED_CHANNELS,
    ChannelNotAllowedError,
    ChannelNotRegisteredError,
    DesktopBridge,
    PathOutsideDataDirError,
    WindowState,
    create_bridge,
)

__all__ = [
    "ALLOWED_CHANNELS",
    "ChannelNotAllowedError",
    "ChannelNotRegisteredError",
    "DesktopBridge",
    "PathOutsideDataDirError",
    "WindowState",
    "create_bridge",
]
