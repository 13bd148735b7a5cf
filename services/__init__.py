"""
Services layer - pure business logic, no Streamlit dependencies.
"""

from services.swapi_service import SwapiService, SwapiError

__all__ = [
    "SwapiService",
    "SwapiError",
]
