"""
Binding between ``st.session_state`` and the page controller.

Streamlit widgets own their values under a session-state key. Whenever a
controller action rewrites the draft or the search query, the matching
widget keys must be rewritten too, inside the same callback, before the
widgets are drawn again.
"""

from datetime import date

import streamlit as st

from src.core.models import DRAFT_FIELDS
from src.services.controller import WeighbridgeController

CONTROLLER_KEY = "weigh_controller"
SEARCH_KEY = "search_query"


def form_key(field: str) -> str:
    return f"form_{field}"


def parse_iso_date(value: str) -> date | None:
    """Return a ``date`` for a ``YYYY-MM-DD`` string, ``None`` when blank/invalid."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def get_controller() -> WeighbridgeController:
    """Return this browser session's controller, creating it on first run."""
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = WeighbridgeController()
        sync_widgets()
    return st.session_state[CONTROLLER_KEY]


def sync_widgets() -> None:
    """Copy the controller's draft and search query into widget state."""
    controller: WeighbridgeController = st.session_state[CONTROLLER_KEY]
    for field in DRAFT_FIELDS:
        value = getattr(controller.draft, field)
        st.session_state[form_key(field)] = parse_iso_date(value) if field == "date" else value
    st.session_state[SEARCH_KEY] = controller.search_query


def run_action(action_name: str, *args) -> None:
    """Widget callback: call a controller method, then refresh widget state."""
    controller = get_controller()
    getattr(controller, action_name)(*args)
    sync_widgets()


def on_field_change(field: str) -> None:
    """Widget callback: push one form widget's value into the draft."""
    value = st.session_state[form_key(field)]
    if field == "date":
        value = value.isoformat() if value else ""
    get_controller().update_field(field, value)


def on_search_change() -> None:
    get_controller().set_search_query(st.session_state[SEARCH_KEY])
