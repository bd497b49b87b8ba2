"""
Module: exporter.delivery.clipboard

Purpose:
    System clipboard access through Qt.

    Qt aborts the whole process (qFatal) when it cannot load a platform
    plugin, so the display is checked before any Qt object is created
    and a headless session fails with DeliveryError instead.

    On X11 the clipboard content belongs to the process that set it. When
    this module had to start its own QGuiApplication (a CLI run, not a
    running GUI), the text is only available until the process exits
    unless a clipboard manager takes it over; a warning is logged then.

Key Functions:
    - display_available(): Can Qt open a platform here?
    - qt_clipboard_writer(): Put text on the clipboard (raises on failure)
    - copy_to_clipboard(): One attempt, returns success

Dependencies:
    - PySide6: QGuiApplication clipboard (imported on first use so that
      headless callers never load QtGui)
"""

from __future__ import annotations

import logging
import os
import sys

from ..errors import DeliveryError

logger = logging.getLogger(__name__)

# Platforms with a native windowing system (no DISPLAY needed)
_NATIVE_GUI_PLATFORMS = ("win32", "darwin")
_DISPLAY_VARIABLES = ("DISPLAY", "WAYLAND_DISPLAY")


def display_available() -> bool:
    """
    Check whether Qt can open a GUI platform in this process.

    An explicit QT_QPA_PLATFORM is trusted. Windows and macOS always have
    one; other Unix systems need an X11 or Wayland display.
    """
    if os.environ.get("QT_QPA_PLATFORM"):
        return True
    if sys.platform in _NATIVE_GUI_PLATFORMS:
        return True
    return any(os.environ.get(name) for name in _DISPLAY_VARIABLES)


def qt_clipboard_writer(text: str) -> None:
    """
    Write text to the system clipboard.

    Reuses the running Qt application when there is one, otherwise
    starts a minimal QGuiApplication for the write.

    Raises:
        DeliveryError: If there is no display, the clipboard is
            unavailable, or it did not take the text
    """
    if not display_available():
        raise DeliveryError("No display available for the system clipboard")

    from PySide6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    owns_app = app is None
    if owns_app:
        app = QGuiApplication(sys.argv[:1])

    clipboard = app.clipboard()
    if clipboard is None:
        raise DeliveryError("System clipboard is not available")

    clipboard.setText(text)
    if clipboard.text() != text:
        raise DeliveryError("Clipboard did not accept the text")

    if owns_app and app.platformName() == "xcb":
        logger.warning(
            "Clipboard text is held by this process and is lost when it exits "
            "unless a clipboard manager is running"
        )


def copy_to_clipboard(text: str) -> bool:
    """
    Copy text to the system clipboard.

    Args:
        text: Text to copy

    Returns:
        True on success, False if the write failed (logged, never raised)
    """
    try:
        qt_clipboard_writer(text)
    except Exception as e:
        logger.warning(f"Copy to clipboard failed: {e}")
        return False
    logger.info(f"Copied {len(text)} characters to clipboard")
    return True
