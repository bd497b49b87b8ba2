"""
Module: exporter.delivery.payload

Purpose:
    Build the form submission accepted by a remote LaTeX editor's import
    endpoint (Overleaf ``/docs``). Pure functions, no I/O.

    Multi-file export:
        snip_uri[]  = data:application/x-tex;base64,<main.tex>
        snip_uri[]  = data:application/x-tex;base64,<problemlab.tex>
        snip_name[] = main.tex
        snip_name[] = problemlab.tex
        engine      = xelatex

    Single-file export:
        snip   = <raw LaTeX>
        engine = xelatex

Key Classes:
    - FormSubmission: action, method, target and ordered fields

Key Functions:
    - encode_data_uri(): UTF-8 base64 data URI for one file
    - build_remote_submission(): ExportResult -> FormSubmission
    - render_form_html(): Self-submitting HTML page
    - form_data(): Fields grouped by name for an httpx form post
"""

from __future__ import annotations

import base64
import html
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..models import ExportResult

DEFAULT_ENDPOINT = "https://www.overleaf.com/docs"
DEFAULT_ENGINE = "xelatex"
TEX_MEDIA_TYPE = "application/x-tex"

FIELD_SNIP = "snip"
FIELD_SNIP_URI = "snip_uri[]"
FIELD_SNIP_NAME = "snip_name[]"
FIELD_ENGINE = "engine"


@dataclass(frozen=True)
class FormSubmission:
    """
    An HTML form post (immutable).

    Attributes:
        action: Endpoint URL
        method: HTTP method, always POST
        target: Browsing context, "_blank" opens a new tab
        fields: (name, value) pairs in submission order; names repeat
            for array fields
    """

    action: str
    fields: Tuple[Tuple[str, str], ...]
    method: str = "POST"
    target: str = "_blank"

    def values(self, name: str) -> list[str]:
        """All values submitted under a field name, in order."""
        return [value for key, value in self.fields if key == name]


def encode_data_uri(text: str, media_type: str = TEX_MEDIA_TYPE) -> str:
    """
    Encode text as a base64 data URI.

    Example:
        >>> encode_data_uri("hi")
        'data:application/x-tex;base64,aGk='
    """
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return f"data:{media_type};base64,{encoded}"


def build_remote_submission(
    result: ExportResult,
    *,
    endpoint: str = DEFAULT_ENDPOINT,
    engine: str = DEFAULT_ENGINE,
) -> FormSubmission:
    """
    Build the form fields for a remote editor import.

    Multi-file results send every file as a data URI followed by every
    file name; a single file is sent raw.

    Args:
        result: Assembled export
        endpoint: Import endpoint URL
        engine: LaTeX engine the editor should compile with

    Returns:
        FormSubmission ready for a transport
    """
    fields: list[Tuple[str, str]] = []

    if result.is_multi_file:
        fields.extend((FIELD_SNIP_URI, encode_data_uri(f.content)) for f in result.files)
        fields.extend((FIELD_SNIP_NAME, f.name) for f in result.files)
    else:
        fields.append((FIELD_SNIP, result.text))

    fields.append((FIELD_ENGINE, engine))
    return FormSubmission(action=endpoint, fields=tuple(fields))


def form_data(submission: FormSubmission) -> Dict[str, List[str]]:
    """
    Group the fields by name for an httpx ``data=`` post.

    Names keep their first-seen order and values their submission order,
    so the encoded body matches what a browser sends for the form.
    """
    data: Dict[str, List[str]] = {}
    for name, value in submission.fields:
        data.setdefault(name, []).append(value)
    return data


def render_form_html(submission: FormSubmission) -> str:
    """
    Render a page that posts the form as soon as it loads.

    All attribute values are HTML-escaped.
    """
    inputs = "\n".join(
        f'    <input type="hidden" name="{html.escape(name)}" value="{html.escape(value)}">'
        for name, value in submission.fields
    )
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        '<head><meta charset="utf-8"><title>Opening editor…</title></head>\n'
        '<body onload="document.forms[0].submit()">\n'
        f'  <form method="{html.escape(submission.method)}" '
        f'action="{html.escape(submission.action)}" '
        f'target="{html.escape(submission.target)}">\n'
        f"{inputs}\n"
        "    <noscript><button type=\"submit\">Open</button></noscript>\n"
        "  </form>\n"
        "</body>\n"
        "</html>\n"
    )
