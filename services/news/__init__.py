"""
News search service exports.
"""

from .base import NewsArticle, NewsBackend, NewsSearchError, NewsSource
from .gnews import GNewsBackend
from .stub import StubNewsBackend

__all__ = [
    "NewsArticle",
    "NewsBackend",
    "NewsSearchError",
    "NewsSource",
    "GNewsBackend",
    "StubNewsBackend",
]
