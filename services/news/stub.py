"""
Stub news backend for testing and offline development.

Deterministic, fast, and never touches the network.
"""

from typing import List, Optional

from .base import NewsArticle, NewsBackend, NewsSource


class StubNewsBackend(NewsBackend):
    """Returns a fixed set of articles built from the keyword."""

    def __init__(self, count: int = 3):
        self.count = count

    async def search(self, keyword: str, api_key: Optional[str] = None) -> List[NewsArticle]:
        return [
            NewsArticle(
                title=f"{keyword} headline {i}",
                url=f"https://news.example.com/{i}",
                description=f"Stub article {i} about {keyword}",
                publishedAt="2024-01-01T00:00:00Z",
                source=NewsSource(name="Stub News", url="https://news.example.com"),
            )
            for i in range(1, self.count + 1)
        ]
