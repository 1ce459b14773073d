"""
Caravan Weigh Streamlit UI — single-page entry point.

Run with: ``streamlit run src/ui/app.py``
"""

# ---------------------------------------------------------------------------
# Ensure project root is on sys.path so ``from src.xxx`` imports work.
# Streamlit replaces sys.path[0] with the script directory (src/ui/),
# which removes the project root needed for absolute ``src.*`` imports.
# ---------------------------------------------------------------------------
import sys  # noqa: E402
from pathlib import Path  # noqa: E402

_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import logging  # noqa: E402

import streamlit as st  # noqa: E402

from src.core.config import get_settings  # noqa: E402
from src.ui.components.action_bar import render_action_bar  # noqa: E402
from src.ui.components.entry_form import PLATE_LABEL, render_entry_form  # noqa: E402
from src.ui.components.focus import apply_focus_request  # noqa: E402
from src.ui.components.record_table import render_record_table  # noqa: E402
from src.ui.session import get_controller  # noqa: E402

_settings = get_settings()
logging.basicConfig(
    level=_settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title=_settings.app_title,
    page_icon="\U0001f42a",
    layout="wide",
)

controller = get_controller()

# ---------------------------------------------------------------------------
# Header + toolbar
# ---------------------------------------------------------------------------
st.title(f"\U0001f42a {_settings.app_title}")
st.caption(_settings.app_tagline)

render_action_bar()

# ---------------------------------------------------------------------------
# Form + table
# ---------------------------------------------------------------------------
render_entry_form()
render_record_table()

apply_focus_request(PLATE_LABEL, controller.consume_focus_request())
