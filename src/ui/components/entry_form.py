"""
Weighing entry form.

Plain widgets (not ``st.form``) so the derived net weight follows every
edit of the gross and tare fields.
"""

import streamlit as st

from src.ui.session import form_key, get_controller, on_field_change, run_action

PLATE_LABEL = "Plate Number"


def _text_field(label: str, field: str, placeholder: str = "") -> None:
    st.text_input(
        label,
        key=form_key(field),
        placeholder=placeholder,
        on_change=on_field_change,
        args=(field,),
    )


def render_entry_form() -> None:
    """Render the seven form fields plus the submit and clear buttons."""
    controller = get_controller()

    with st.container(border=True):
        row1 = st.columns(4)
        with row1[0]:
            _text_field(PLATE_LABEL, "plate_number", placeholder="UZ 01 A000")
        with row1[1]:
            _text_field("Yuk bilan (Kg)", "yuk_bilan", placeholder="0")
        with row1[2]:
            _text_field("Yuksiz (Kg)", "yuksiz", placeholder="0")
        with row1[3]:
            st.text_input(
                "Sof Vazin (Kg)",
                value=controller.net_weight_display,
                disabled=True,
                help="Gross minus tare, never below zero",
            )

        row2 = st.columns(3)
        with row2[0]:
            st.date_input(
                "Date",
                key=form_key("date"),
                format="YYYY-MM-DD",
                on_change=on_field_change,
                args=("date",),
            )
        with row2[1]:
            _text_field("Summa", "summa", placeholder="0")
        with row2[2]:
            _text_field("Add-on Check Number", "check_number", placeholder="auto")

        submit_col, clear_col, _ = st.columns([1, 1, 4])
        with submit_col:
            st.button(
                controller.submit_label,
                key="form_submit",
                type="primary",
                on_click=run_action,
                args=("submit",),
                use_container_width=True,
            )
        with clear_col:
            st.button(
                "Clear",
                key="form_clear",
                on_click=run_action,
                args=("clear_form",),
                use_container_width=True,
            )
