"""
Character list component.

Pure projection of a character collection into display lines.
"""

from typing import Sequence

import streamlit as st

from models.character import CharacterRecord

HEADING = "List of Characters"


def format_character_line(person: CharacterRecord) -> str:
    """Format one character as 'Name: <name>, birth_year <birth_year>'."""
    return f"Name: {person.name}, birth_year {person.birth_year}"


def character_lines(people: Sequence[CharacterRecord]) -> list[str]:
    """One display line per character, in input order."""
    return [format_character_line(person) for person in people]


def render_character_list(people: Sequence[CharacterRecord]):
    """
    Render the character list under its heading.

    Lines go through st.text so names are shown verbatim; markdown would
    interpret $, ~~, |, entities and emoji shortcodes in API data.

    Args:
        people: Characters to list; an empty sequence renders the heading only
    """
    st.header(HEADING)

    # Items are identified by position; records carry no id
    for line in character_lines(people):
        st.text(line)
