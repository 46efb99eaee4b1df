# Components module
from .sidebar import render_sidebar
from .disclaimer import render_disclaimer
from .input_chat import render_input_chat

__all__ = ["render_sidebar", "render_disclaimer", "render_input_chat"]
