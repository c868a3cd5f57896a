"""Suggestion service implementation."""

from typing import Any, Optional

import httpx
from pydantic import ValidationError

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ..interfaces import ISuggestionService
from ..models import SuggestionResponse


class SuggestionService(ISuggestionService, LoggerMixin):
    """Client for the title suggestion list service.

    Every failure (transport error, timeout, non-success status or a body
    that does not decode) degrades to an empty response.
    """

    def __init__(
        self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> None:
        """Initialize suggestion service.

        Args:
            config: Application configuration.
            transport: Optional httpx transport, used by tests.
        """
        self._config = config
        self._suggestion_config = config.suggestions
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def find_suggestions(self, search: str) -> SuggestionResponse:
        """Find title suggestions for a search literal.

        Args:
            search: Search literal, usually "Title (Year)".

        Returns:
            Suggestion response without unmatched entries.
        """
        try:
            response = await self._get_client().get(
                self._suggestion_config.base_url, params={"normalizedInput": search}
            )
        except httpx.HTTPError as e:
            self.logger.warning(f"Suggestion lookup failed for '{search}': {e}")
            return SuggestionResponse()

        if not response.is_success:
            self.logger.warning(
                f"Suggestion service returned {response.status_code} for '{search}'"
            )
            return SuggestionResponse()

        try:
            result = SuggestionResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            self.logger.warning(f"Malformed suggestion response for '{search}': {e}")
            return SuggestionResponse()

        result.purge_failures()
        self.logger.debug(f"{len(result.suggestions)} suggestions for '{search}'")
        return result

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client.

        Returns:
            HTTP client.
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._suggestion_config.timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "SuggestionService":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
