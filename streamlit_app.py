"""
Star Wars App - Home Page

Fetches the public SWAPI character list once per session and shows it
as a list of names and birth years.
"""

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="Star Wars App",
    page_icon="⭐",
    layout="centered"
)

from config import configure_logging, get_settings
from views.root_view import RootView

configure_logging(get_settings().log_level)

view = RootView()
view.render()
