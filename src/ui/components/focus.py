"""
Keyboard focus helper.

Streamlit has no focus API, so a zero-height HTML component runs a short
script against the parent document.
"""

import json

import streamlit.components.v1 as components

from src.core.models import FocusRequest


def focus_script(label: str, request: FocusRequest) -> str:
    """Build the script that focuses the input whose aria-label is *label*."""
    selector = json.dumps(f'input[aria-label="{label}"]')
    focus = f"const el = window.parent.document.querySelector({selector}); if (el) el.focus();"
    if request == FocusRequest.next_paint:
        focus = f"window.requestAnimationFrame(() => {{ {focus} }});"
    return f"<script>{focus}</script>"


def apply_focus_request(label: str, request: FocusRequest) -> None:
    """Move focus to the labelled input if a request is pending."""
    if request == FocusRequest.none:
        return
    components.html(focus_script(label, request), height=0)
