"""
View State - the single piece of mutable state owned by the root view.

Lifecycle for one mount:

    EMPTY --(fetch resolves, state still alive)--> LOADED

LOADED is terminal. A failed fetch leaves the state EMPTY for the rest of
the mount. Once disposed, late results are discarded.
"""

from dataclasses import dataclass
from enum import Enum

from models.character import CharacterCollection


class LoadStatus(str, Enum):
    """Load status of the character collection."""
    EMPTY = "empty"
    LOADED = "loaded"


@dataclass
class ViewState:
    """State held by the root view for the lifetime of one mount."""
    people: CharacterCollection = ()
    status: LoadStatus = LoadStatus.EMPTY
    alive: bool = True
    fetch_started: bool = False

    @property
    def is_loaded(self) -> bool:
        return self.status is LoadStatus.LOADED

    def mark_fetch_started(self) -> None:
        self.fetch_started = True

    def apply_results(self, people: CharacterCollection) -> bool:
        """
        Store fetched results and move to LOADED.

        Returns:
            True if the state was updated, False if the result was dropped
            because the state is disposed or already loaded.
        """
        if not self.alive or self.is_loaded:
            return False
        self.people = tuple(people)
        self.status = LoadStatus.LOADED
        return True

    def dispose(self) -> None:
        """Mark the state as unmounted so late results are ignored."""
        self.alive = False
