"""
Record table display component.

Each row is a set of columns; clicking the plate number toggles the row's
selection, the Edit / Delete buttons act on that row only.
"""

import streamlit as st

from src.core.models import FilteredRow
from src.core.utils import format_grouped
from src.services.controller import NO_MATCHES_TEXT
from src.ui.session import get_controller, run_action

COLUMNS: tuple[str, ...] = (
    "Plate_Number",
    "Yuk_bilan",
    "Sana (Date)",
    "Yuksiz",
    "Sof_Vazin",
    "Price",
    "Check",
    "Actions",
)
COLUMN_WIDTHS = [2, 1.2, 1.2, 1.2, 1.2, 1.2, 1.2, 2]


def _cell(text: str, highlighted: bool) -> None:
    st.markdown(f":orange[{text}]" if highlighted else text)


def render_record_row(row: FilteredRow, selected: bool) -> None:
    """Render one record with its select toggle and row actions."""
    record = row.record
    cols = st.columns(COLUMN_WIDTHS, vertical_alignment="center")
    with cols[0]:
        st.button(
            f"▶ {record.plate_number}" if selected else record.plate_number,
            key=f"select_{record.id}",
            type="primary" if selected else "secondary",
            on_click=run_action,
            args=("select", record.id),
            use_container_width=True,
        )
    values = (
        format_grouped(record.yuk_bilan),
        record.date,
        format_grouped(record.yuksiz),
        format_grouped(record.sof_vazin),
        format_grouped(record.summa),
        record.check_number,
    )
    for col, value in zip(cols[1:7], values):
        with col:
            _cell(value, row.highlighted)
    with cols[7]:
        edit_col, delete_col = st.columns(2)
        with edit_col:
            st.button(
                "Edit",
                key=f"edit_{record.id}",
                on_click=run_action,
                args=("begin_edit", record),
            )
        with delete_col:
            st.button(
                "Delete",
                key=f"delete_{record.id}",
                on_click=run_action,
                args=("delete", record.id),
            )


def render_record_table() -> None:
    """Render the header row and every record matching the search."""
    controller = get_controller()
    rows = controller.filtered_rows

    with st.container(border=True):
        header = st.columns(COLUMN_WIDTHS)
        for col, title in zip(header, COLUMNS):
            with col:
                st.markdown(f"**{title}**")
        st.divider()

        if not rows:
            st.caption(NO_MATCHES_TEXT)
            return

        for row in rows:
            render_record_row(row, selected=row.record.id == controller.selected_id)
