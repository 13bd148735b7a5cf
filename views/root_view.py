"""
Root View - the Star Wars app page.

Shows the app heading and, once the character list has loaded, the list
itself. Nothing is shown while loading or after a failed load.
"""

from typing import Optional

import streamlit as st

from controllers.root_controller import RootController
from views.components.character_list import render_character_list

TITLE = "Star Wars App"


class RootView:
    """View for the root page."""

    def __init__(self, controller: Optional[RootController] = None):
        self.controller = controller or RootController()

    def render(self) -> None:
        """Render the root page."""
        st.header(TITLE)

        state = self.controller.ensure_loaded()

        if state.is_loaded:
            render_character_list(state.people)
