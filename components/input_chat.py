"""Single-line chat input."""

import streamlit as st

from config.settings import settings


def render_input_chat() -> str:
    """
    Render the question input.

    Returns:
        The text currently typed. Nothing submits it.
    """
    return st.text_input(
        "Pregunta",
        key=settings.input.input_key,
        label_visibility="collapsed",
        placeholder=settings.input.placeholder,
    )
