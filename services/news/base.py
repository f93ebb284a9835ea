"""
News search abstract interface.

Role: keyword → list of article metadata only.

Rules:
- Pure pass-through (no ranking, no summarization)
- No state between calls
- Failures raise NewsSearchError with a human-readable message
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel


class NewsSearchError(Exception):
    """News provider request failed."""
    pass


class NewsSource(BaseModel):
    name: Optional[str] = None
    url: Optional[str] = None


class NewsArticle(BaseModel):
    """One article as returned to the front-end."""

    title: str
    url: str
    description: Optional[str] = None
    content: Optional[str] = None
    image: Optional[str] = None
    publishedAt: Optional[str] = None
    source: Optional[NewsSource] = None


class NewsBackend(ABC):
    """
    Abstract news search boundary.
    Handlers must depend ONLY on this interface.
    """

    @abstractmethod
    async def search(self, keyword: str, api_key: Optional[str] = None) -> List[NewsArticle]:
        """
        Search articles for a keyword.

        Args:
            keyword: Free-text search query
            api_key: Provider key (backends that need none ignore it)

        Returns:
            Articles in provider order (possibly empty)

        Raises:
            NewsSearchError: provider or network failure
        """
        raise NotImplementedError
