"""
SWAPI client for the public Star Wars character list.

SWAPI Documentation: https://swapi.dev/documentation

Endpoints used:
- GET /api/people/ - First page of characters ({"count", "next", "results": [...]})

No authentication, headers or query parameters are sent.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from config.settings import get_settings
from models.character import CharacterCollection, PeoplePage

logger = logging.getLogger(__name__)


class SwapiError(Exception):
    """Raised when the character list cannot be fetched or parsed."""


class SwapiService:
    """Async client for the SWAPI people endpoint."""

    def __init__(
        self,
        url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = get_settings()
        self.url = url or self.settings.swapi_people_url
        self._transport = transport

    async def fetch_people(self) -> CharacterCollection:
        """
        Fetch the character list.

        Returns:
            The `results` collection in API order

        Raises:
            SwapiError: On network failure, non-2xx status, malformed JSON,
                or records missing `name`/`birth_year`
        """
        logger.info(f"Fetching characters from {self.url}")

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.http_timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()

            page = PeoplePage.model_validate(response.json())

        except httpx.HTTPStatusError as e:
            raise SwapiError(f"SWAPI error (HTTP {e.response.status_code})") from e
        except httpx.RequestError as e:
            raise SwapiError(f"Could not reach SWAPI: {e}") from e
        except ValidationError as e:
            raise SwapiError(f"Unexpected SWAPI payload: {e.error_count()} invalid field(s)") from e
        except ValueError as e:
            raise SwapiError(f"SWAPI returned malformed JSON: {e}") from e

        people = page.to_collection()
        logger.info(f"Fetched {len(people)} characters")
        return people
