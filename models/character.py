"""
Character - Pydantic models for the SWAPI people payload.

Only the two fields the list displays are declared. Everything else the
API sends (height, films, homeworld, ...) is dropped on parse.
"""

from pydantic import BaseModel, Field


class CharacterRecord(BaseModel):
    """A single character as returned by SWAPI."""
    name: str = Field(..., description="Display name (e.g., 'Luke Skywalker')")
    birth_year: str = Field(..., description="Birth year as SWAPI writes it (e.g., '19BBY')")

    class Config:
        extra = "ignore"
        frozen = True


# Ordered as returned by the API; duplicates are kept
CharacterCollection = tuple[CharacterRecord, ...]


class PeoplePage(BaseModel):
    """Response envelope of GET /api/people."""
    results: list[CharacterRecord]

    class Config:
        extra = "ignore"

    def to_collection(self) -> CharacterCollection:
        """Freeze the results into an immutable collection."""
        return tuple(self.results)
