"""Tests for the composed chat page."""

import pytest
from streamlit.testing.v1 import AppTest

from config.settings import settings


@pytest.fixture
def app(app_path):
    """Run the full page once."""
    at = AppTest.from_file(app_path, default_timeout=10)
    at.run()
    return at


def _rendered_text(at):
    return (
        [t.value for t in at.title]
        + [m.value for m in at.markdown]
        + [c.value for c in at.caption]
    )


class TestComposition:
    """The page holds exactly one of each part."""

    def test_runs_without_exception(self, app):
        assert not app.exception

    def test_single_sidebar_panel(self, app):
        brand = [m for m in app.sidebar.markdown if settings.sidebar.app_name in m.value]
        assert len(brand) == 1
        assert [c.value for c in app.sidebar.caption] == [settings.sidebar.about]

    def test_single_disclaimer(self, app, find_images):
        assert [t.value for t in app.title] == ["Charlemos con Chávez"]
        bodies = [m for m in app.main.markdown if m.value == settings.disclaimer.body]
        assert len(bodies) == 1
        assert len(find_images(app.main)) == 1
        assert find_images(app.sidebar) == []

    def test_single_input_and_send_button(self, app):
        assert len(app.text_input) == 1
        assert len(app.button) == 1

        text_input = app.text_input(key=settings.input.input_key)
        assert text_input.value == ""
        assert text_input.placeholder == settings.input.placeholder

        send = app.button(key=settings.input.send_key)
        assert send.label == "S"


class TestSendButton:
    """The send button has no handler attached."""

    def test_click_changes_nothing(self, app):
        before = _rendered_text(app)
        keys_before = set(app.session_state.filtered_state)

        app.button(key=settings.input.send_key).click().run()

        assert not app.exception
        assert _rendered_text(app) == before
        assert set(app.session_state.filtered_state) == keys_before

    def test_click_with_text_typed_keeps_page_unchanged(self, app):
        before = _rendered_text(app)
        keys_before = set(app.session_state.filtered_state)

        app.text_input(key=settings.input.input_key).input("¿Qué opinas del béisbol?").run()
        app.button(key=settings.input.send_key).click().run()

        assert not app.exception
        assert _rendered_text(app) == before
        assert app.text_input(key=settings.input.input_key).value == "¿Qué opinas del béisbol?"
        assert set(app.session_state.filtered_state) == keys_before
        assert len(app.text_input) == 1
        assert len(app.button) == 1
