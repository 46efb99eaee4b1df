"""Disclaimer panel shown above the chat input."""

import streamlit as st

from config.settings import settings
from utils.logger import get_logger

logger = get_logger("components.disclaimer")


def render_disclaimer() -> None:
    """Render the heading, portrait and explanatory paragraph."""
    config = settings.disclaimer

    with st.container(key="content-disclaimer"):
        st.title(config.title)

        if config.image_path.is_file():
            st.image(str(config.image_path), width=config.image_width)
        else:
            logger.warning("Disclaimer image not found: %s", config.image_path)

        st.markdown(config.body)

    logger.debug("Rendered disclaimer")
