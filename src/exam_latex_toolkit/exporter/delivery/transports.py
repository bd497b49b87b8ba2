"""
Module: exporter.delivery.transports

Purpose:
    Side-effecting delivery of an assembled export. Every transport
    reports success as a bool and never raises; failures are logged.

Key Classes:
    - Transport: Abstract base
    - ClipboardTransport: Main document to the system clipboard
    - BrowserFormTransport: Remote editor import in a new browser tab
    - HttpFormTransport: Headless POST of the same form

Key Functions:
    - transport_for(): Default transport for a CopyConfig
    - deliver(): Deliver a result through the configured transport

Dependencies:
    - httpx: Headless form POST
    - webbrowser (std): Opening the submission page
    - PySide6 (via delivery.clipboard): Clipboard access
"""

from __future__ import annotations

import atexit
import logging
import tempfile
import threading
import time
import webbrowser
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Dict, Optional

import httpx

from ..config import CopyConfig, CopyMethod
from ..errors import DeliveryError
from ..models import ExportResult
from .clipboard import qt_clipboard_writer
from .payload import (
    DEFAULT_ENDPOINT,
    DEFAULT_ENGINE,
    FormSubmission,
    build_remote_submission,
    form_data,
    render_form_html,
)

logger = logging.getLogger(__name__)

HTTP_TIMEOUT = 30.0
FORM_CLEANUP_DELAY = 60.0
FORM_EXIT_GRACE = 3.0

# Submission pages still on disk: path -> earliest monotonic removal time
_pending_forms: Dict[Path, float] = {}
_pending_lock = threading.Lock()


def _remove_form(path: Path) -> None:
    with _pending_lock:
        _pending_forms.pop(path, None)
    path.unlink(missing_ok=True)


def _remove_pending_forms() -> None:
    """
    Remove every submission page still on disk.

    Runs at interpreter exit, so a CLI run that exits right after opening
    the browser leaves nothing behind. Waits until each page's grace
    period has passed so the browser can still load it.
    """
    with _pending_lock:
        pending = dict(_pending_forms)
        _pending_forms.clear()
    if not pending:
        return

    wait = max(pending.values()) - time.monotonic()
    if wait > 0:
        time.sleep(wait)
    for path in pending:
        path.unlink(missing_ok=True)


atexit.register(_remove_pending_forms)


class Transport(ABC):
    """
    Delivers an ExportResult somewhere.

    Subclasses implement _send() and may raise; deliver() turns any
    failure into False.
    """

    name = "transport"

    def deliver(self, result: ExportResult) -> bool:
        """
        Deliver an export.

        Args:
            result: Assembled export

        Returns:
            True when the side effect was performed
        """
        try:
            self._send(result)
        except Exception as e:
            logger.warning(f"Delivery via {self.name} failed: {e}")
            return False
        logger.info(f"Delivered {', '.join(result.names)} via {self.name}")
        return True

    @abstractmethod
    def _send(self, result: ExportResult) -> None:
        """
        Perform the side effect.

        Raises:
            DeliveryError: (or any other exception) on failure
        """


class ClipboardTransport(Transport):
    """
    Copy the main document to the clipboard.

    Attributes:
        writer: Callable that puts text on the clipboard and raises on
            failure; defaults to the Qt clipboard
    """

    name = "clipboard"

    def __init__(self, writer: Callable[[str], None] = qt_clipboard_writer):
        self.writer = writer

    def _send(self, result: ExportResult) -> None:
        self.writer(result.text)


class _FormTransport(Transport):
    """Shared endpoint / engine handling for remote editor transports."""

    def __init__(self, endpoint: str = DEFAULT_ENDPOINT, engine: str = DEFAULT_ENGINE):
        self.endpoint = endpoint
        self.engine = engine

    def submission_for(self, result: ExportResult) -> FormSubmission:
        return build_remote_submission(result, endpoint=self.endpoint, engine=self.engine)


class BrowserFormTransport(_FormTransport):
    """
    Open the remote editor in a new browser tab.

    Writes a self-submitting form to a temporary HTML file and opens it.
    Fire-and-forget: the editor's response is never seen. The file is
    removed after cleanup_delay seconds, or at interpreter exit once
    exit_grace seconds have passed since it was opened, whichever comes
    first.
    """

    name = "browser"

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        engine: str = DEFAULT_ENGINE,
        *,
        opener: Callable[..., bool] = webbrowser.open,
        cleanup_delay: Optional[float] = FORM_CLEANUP_DELAY,
        exit_grace: float = FORM_EXIT_GRACE,
    ):
        super().__init__(endpoint, engine)
        self.opener = opener
        self.cleanup_delay = cleanup_delay
        self.exit_grace = exit_grace

    def _send(self, result: ExportResult) -> None:
        page = render_form_html(self.submission_for(result))

        with tempfile.NamedTemporaryFile(
            "w", suffix=".html", prefix="latex-export-", delete=False, encoding="utf-8"
        ) as handle:
            handle.write(page)
            path = Path(handle.name)

        logger.debug(f"Wrote submission form to {path}")
        try:
            opened = self.opener(path.as_uri(), new=2)
        except Exception:
            path.unlink(missing_ok=True)
            raise
        if not opened:
            path.unlink(missing_ok=True)
            raise DeliveryError("No web browser could be opened")

        self._schedule_cleanup(path)

    def _schedule_cleanup(self, path: Path) -> None:
        with _pending_lock:
            _pending_forms[path] = time.monotonic() + self.exit_grace
        if self.cleanup_delay is None:
            return
        timer = threading.Timer(self.cleanup_delay, _remove_form, args=(path,))
        timer.daemon = True
        timer.start()


class HttpFormTransport(_FormTransport):
    """
    POST the form directly with httpx, without a browser.

    The response body is not read; only the status is checked.

    Attributes:
        client: Optional httpx.Client to reuse (one is created per
            delivery otherwise)
        timeout: Request timeout in seconds for the created client
    """

    name = "http"

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        engine: str = DEFAULT_ENGINE,
        *,
        client: Optional[httpx.Client] = None,
        timeout: float = HTTP_TIMEOUT,
    ):
        super().__init__(endpoint, engine)
        self.client = client
        self.timeout = timeout

    def _send(self, result: ExportResult) -> None:
        submission = self.submission_for(result)
        data = form_data(submission)

        if self.client is not None:
            response = self.client.post(submission.action, data=data)
        else:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(submission.action, data=data)

        logger.debug(f"{submission.action} answered {response.status_code}")
        if response.status_code >= 400:
            raise DeliveryError(f"{submission.action} rejected the submission: HTTP {response.status_code}")


def transport_for(config: CopyConfig) -> Transport:
    """Default transport for the configured copy method."""
    if config.copy_method is CopyMethod.REMOTE_SUBMIT:
        return BrowserFormTransport()
    return ClipboardTransport()


def deliver(
    result: ExportResult,
    config: CopyConfig,
    transport: Optional[Transport] = None,
) -> bool:
    """
    Deliver an export through the given or configured transport.

    Returns:
        True on success (never raises)
    """
    transport = transport or transport_for(config)
    return transport.deliver(result)
