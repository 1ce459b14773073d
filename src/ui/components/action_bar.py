"""
Top bar: search box, toolbar buttons and the notification badge.
"""

import streamlit as st

from src.ui.session import SEARCH_KEY, get_controller, on_search_change, run_action

# (label, controller method)
TOOLBAR_ACTIONS: tuple[tuple[str, str], ...] = (
    ("Add", "begin_new"),
    ("Edit", "edit_selected"),
    ("Delete", "delete_selected"),
    ("Reload", "reload_seed"),
    ("Relay", "relay"),
)


def render_action_bar() -> None:
    """Render the search input and one button per toolbar action."""
    search_col, actions_col = st.columns([2, 3])
    with search_col:
        st.text_input(
            "Search",
            key=SEARCH_KEY,
            placeholder="Search caravan records…",
            on_change=on_search_change,
            label_visibility="collapsed",
        )
    with actions_col:
        cols = st.columns(len(TOOLBAR_ACTIONS))
        for col, (label, action) in zip(cols, TOOLBAR_ACTIONS):
            with col:
                st.button(
                    label,
                    key=f"toolbar_{action}",
                    on_click=run_action,
                    args=(action,),
                    use_container_width=True,
                )

    render_notification_badge()


@st.fragment(run_every=1.0)
def render_notification_badge() -> None:
    """Show the current notification; reruns every second so it can expire."""
    message = get_controller().notification
    if message:
        st.info(message)
