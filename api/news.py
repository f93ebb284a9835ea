"""
News search handler.

POST /api/fetch-news {"keyword": "..."} → [article, ...]
Pure I/O: validation, one backend call, error mapping.
"""

import logging

from fastapi import APIRouter, Depends, Request

from config import Config
from infra import InfraBootstrap
from services.news import NewsSearchError

from .common import BadRequest, error_response, get_infrastructure, read_json_body, require_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["news"])


@router.post("/fetch-news")
async def fetch_news(request: Request, infra: InfraBootstrap = Depends(get_infrastructure)):
    """
    Search news articles for a keyword.

    Returns:
        200 with a JSON list of articles
        400 if keyword is missing or not a string
        500 if the news key is unset or the provider fails
    """
    try:
        payload = await read_json_body(request)
        keyword = require_text(payload, "keyword", "A search keyword is required.")
    except BadRequest as e:
        return error_response(400, str(e))

    api_key = Config.gnews_api_key()
    if not api_key and infra.config.news_backend != "stub":
        return error_response(500, "GNews API key is not configured on the server.")

    try:
        articles = await infra.get_news_backend().search(keyword.strip(), api_key=api_key)
    except NewsSearchError as e:
        logger.error(f"News search failed: {e}", extra={"keyword": keyword})
        return error_response(500, str(e))

    return [article.model_dump(exclude_none=True) for article in articles]
