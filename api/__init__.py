"""
HTTP handlers - FastAPI routers for the front-end.

Includes:
- news.py: News search proxy
- articles.py: Article summary and question answering
"""

from api.news import router as news_router
from api.articles import router as articles_router

__all__ = ["news_router", "articles_router"]
