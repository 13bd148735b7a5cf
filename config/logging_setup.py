"""
Logging configuration for the Streamlit entry point.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once per process.

    Streamlit re-executes the app script on every rerun, so repeated calls
    must not stack handlers. basicConfig is a no-op once the root logger
    has a handler.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
