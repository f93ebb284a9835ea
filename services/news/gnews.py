"""
GNews search backend.

GET https://gnews.io/api/v4/search?q=...&lang=..&country=..&max=..&apikey=...
No retries: a failed search is reported to the user, who can search again.
"""

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from .base import NewsArticle, NewsBackend, NewsSearchError

logger = logging.getLogger(__name__)

GNEWS_SEARCH_URL = "https://gnews.io/api/v4/search"


class GNewsBackend(NewsBackend):
    """
    Search backend for the GNews v4 API.

    Args:
        lang:        Article language filter
        country:     Country filter
        max_results: Number of articles requested
        timeout_s:   Request timeout
        client:      Optional shared AsyncClient (not closed here)
    """

    def __init__(
        self,
        lang: str = "ja",
        country: str = "jp",
        max_results: int = 10,
        timeout_s: float = 15.0,
        search_url: str = GNEWS_SEARCH_URL,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.lang = lang
        self.country = country
        self.max_results = max_results
        self.timeout_s = timeout_s
        self.search_url = search_url
        self._client = client

    async def _get(self, params: dict) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(self.search_url, params=params, timeout=self.timeout_s)
        async with httpx.AsyncClient(timeout=self.timeout_s) as client:
            return await client.get(self.search_url, params=params)

    async def search(self, keyword: str, api_key: Optional[str] = None) -> List[NewsArticle]:
        if not api_key:
            raise NewsSearchError("GNews API key is not configured on the server.")

        params = {
            "q": keyword,
            "lang": self.lang,
            "country": self.country,
            "max": str(self.max_results),
            "apikey": api_key,
        }

        try:
            response = await self._get(params)
        except httpx.TimeoutException as e:
            raise NewsSearchError(f"GNews API request timed out after {self.timeout_s}s") from e
        except httpx.RequestError as e:
            # str(e) may embed the request URL, which carries the key
            raise NewsSearchError(f"GNews API request failed: {type(e).__name__}") from e

        if response.status_code != 200:
            raise NewsSearchError(
                f"GNews API request failed: {response.status_code} "
                f"{self._error_detail(response)}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise NewsSearchError("GNews API returned invalid JSON") from e

        articles: List[NewsArticle] = []
        for raw in data.get("articles") or []:
            try:
                articles.append(NewsArticle.model_validate(raw))
            except ValidationError:
                logger.warning("Skipping malformed GNews article", extra={"keyword": keyword})

        logger.info(f"GNews returned {len(articles)} articles", extra={"keyword": keyword})
        return articles

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            errors = response.json().get("errors")
        except (ValueError, AttributeError):
            return "Unknown error"
        if isinstance(errors, list) and errors:
            return ", ".join(str(e) for e in errors)
        if isinstance(errors, dict) and errors:
            return ", ".join(str(v) for v in errors.values())
        return "Unknown error"
