"""
Reusable UI components.
"""

from views.components.character_list import (
    render_character_list,
    character_lines,
    format_character_line,
)

__all__ = [
    "render_character_list",
    "character_lines",
    "format_character_line",
]
