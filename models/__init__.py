"""
Models layer - typed data structures for characters and view state.
"""

from models.character import CharacterRecord, CharacterCollection, PeoplePage
from models.view_state import ViewState, LoadStatus

__all__ = [
    # Characters
    "CharacterRecord",
    "CharacterCollection",
    "PeoplePage",
    # View state
    "ViewState",
    "LoadStatus",
]
