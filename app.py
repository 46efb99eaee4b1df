"""
Chatvez
Charlemos con Chávez: chat page front-end
"""

import sys
from pathlib import Path

import streamlit as st

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import settings
from components.sidebar import render_sidebar
from components.disclaimer import render_disclaimer
from components.input_chat import render_input_chat
from utils.logger import get_logger

# Page configuration - must be first Streamlit command
st.set_page_config(
    page_title=settings.page.page_title,
    page_icon=settings.page.page_icon,
    layout=settings.page.layout,
    initial_sidebar_state=settings.page.initial_sidebar_state,
)

logger = get_logger("app")


def inject_custom_css():
    """Inject the page stylesheet, keyed on the containers' st-key-* classes."""
    st.markdown(
        """
        <style>
        #MainMenu, footer {visibility: hidden;}

        .st-key-content-disclaimer {
            text-align: center;
            align-items: center;
            padding: 24px 16px;
        }

        .st-key-content-disclaimer h1 {
            font-size: 2.2rem;
            font-weight: 700;
            color: #d62828;
        }

        .st-key-content-disclaimer [data-testid="stImage"] img {
            border-radius: 50%;
            box-shadow: 0 8px 24px rgba(0, 0, 0, 0.25);
        }

        .st-key-content-disclaimer p {
            color: #475569;
            font-size: 0.95rem;
            line-height: 1.6;
            max-width: 560px;
            margin: 0 auto;
        }

        .st-key-components {
            position: fixed;
            bottom: 24px;
            left: 50%;
            transform: translateX(-50%);
            width: min(720px, calc(100vw - 32px));
            z-index: 50;
        }

        .st-key-inputBar {
            background: #ffffff;
            border: 1px solid rgba(15, 23, 42, 0.12);
            border-radius: 14px;
            padding: 8px 10px;
            box-shadow: 0 12px 32px rgba(15, 23, 42, 0.12);
        }

        .st-key-send_button button {
            background: #d62828;
            color: #ffffff;
            font-weight: 700;
            border: none;
            border-radius: 10px;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def render_input_bar():
    """Render the input row: question input and the send button."""
    with st.container(key="components"):
        with st.container(key="inputBar"):
            col_input, col_send = st.columns([8, 1], vertical_alignment="center")
            with col_input:
                render_input_chat()
            with col_send:
                # No on_click handler; a click only reruns the script.
                st.button(settings.input.send_label, key=settings.input.send_key)


def main():
    """Main application entry point."""
    inject_custom_css()

    render_sidebar()
    render_disclaimer()
    render_input_bar()

    logger.debug("Page rendered")


if __name__ == "__main__":
    main()
