"""
Root Controller - manages the one-shot character load for the root view.

This controller handles:
- Creating the view state on mount
- Running the fetch as an explicit async task
- Applying results only while the state is still mounted
- Disposing the state on unmount

Fetch failures are logged and otherwise ignored: the view simply stays
empty for the rest of the mount.
"""

import asyncio
import logging
from typing import MutableMapping, Optional

import streamlit as st

from models.view_state import ViewState
from services.swapi_service import SwapiService, SwapiError

logger = logging.getLogger(__name__)

STATE_KEY = "root"


class RootController:
    """
    Controller for the root view's character list.

    Streamlit has no unmount callback, so `unmount` is the explicit disposal
    hook for callers that tear the view down. A load still in flight then
    lands on the disposed state and is dropped.
    """

    def __init__(
        self,
        service: Optional[SwapiService] = None,
        session_state: Optional[MutableMapping] = None,
    ):
        self.service = service or SwapiService()
        self.session_state = st.session_state if session_state is None else session_state

    # ==========================================
    # Lifecycle
    # ==========================================

    @property
    def state(self) -> Optional[ViewState]:
        """Current view state, or None when not mounted."""
        return self.session_state.get(STATE_KEY)

    def mount(self) -> ViewState:
        """Create the view state if this is the first render of the mount."""
        if STATE_KEY not in self.session_state:
            self.session_state[STATE_KEY] = ViewState()
            logger.debug("Root view mounted")
        return self.session_state[STATE_KEY]

    def unmount(self) -> None:
        """Dispose the view state; a fetch still in flight will be discarded."""
        state = self.session_state.pop(STATE_KEY, None)
        if state is not None:
            state.dispose()
            logger.debug("Root view unmounted")

    # ==========================================
    # Loading
    # ==========================================

    async def load(self) -> None:
        """
        Fetch the character list and store it in the view state.

        The state object is captured before the await, so a result that
        arrives after unmount lands on the disposed state and is dropped.
        """
        state = self.state
        if state is None:
            return

        state.mark_fetch_started()
        task = asyncio.create_task(self.service.fetch_people())

        try:
            people = await task
        except SwapiError as e:
            logger.warning(f"Character fetch failed, list stays empty: {e}")
            return

        if state.apply_results(people):
            logger.debug(f"Root view loaded with {len(people)} characters")
        else:
            logger.info("Discarding character results for a disposed or loaded view")

    def ensure_loaded(self) -> ViewState:
        """
        Mount and run the load once per mount.

        Streamlit reruns the script on every interaction; only the first run
        of a mount issues the request, whether or not it succeeded.
        """
        state = self.mount()
        if not state.fetch_started:
            asyncio.run(self.load())
        return state
