"""
Module: exporter.delivery

Purpose:
    Getting an assembled export out of the process: clipboard, browser
    form submission or headless HTTP post.

Submodules:
    - payload: Pure form / data URI builders
    - transports: Side-effecting transports (never raise)
    - clipboard: Qt clipboard access
"""

from .clipboard import copy_to_clipboard
from .payload import (
    DEFAULT_ENDPOINT,
    DEFAULT_ENGINE,
    FormSubmission,
    build_remote_submission,
    encode_data_uri,
    form_data,
    render_form_html,
)
from .transports import (
    BrowserFormTransport,
    ClipboardTransport,
    HttpFormTransport,
    Transport,
    deliver,
    transport_for,
)

__all__ = [
    # Payload
    "DEFAULT_ENDPOINT",
    "DEFAULT_ENGINE",
    "FormSubmission",
    "build_remote_submission",
    "encode_data_uri",
    "form_data",
    "render_form_html",
    # Transports
    "BrowserFormTransport",
    "ClipboardTransport",
    "HttpFormTransport",
    "Transport",
    "copy_to_clipboard",
    "deliver",
    "transport_for",
]
