"""Sidebar component with static branding."""

import streamlit as st

from config.settings import settings
from utils.logger import get_logger

logger = get_logger("components.sidebar")


def render_sidebar() -> None:
  """Render the branding panel. Holds no widgets."""
  config = settings.sidebar

  with st.sidebar:
    st.markdown(
        f"""
            <div class="sidebar-brand" style="
                padding: 16px 0;
                border-bottom: 1px solid rgba(255, 255, 255, 0.1);
                margin-bottom: 20px;
            ">
                <h1 style="
                    font-size: 22px;
                    font-weight: 700;
                    color: #d62828;
                    margin: 0;
                    letter-spacing: -0.5px;
                ">{config.app_name}</h1>
                <p style="
                    font-size: 12px;
                    color: #94a3b8;
                    margin: 4px 0 0 0;
                ">{config.tagline}</p>
            </div>
            """,
        unsafe_allow_html=True,
    )

    st.markdown("##### Acerca de")
    st.caption(config.about)

  logger.debug("Rendered sidebar")
