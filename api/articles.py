"""
AI article handlers.

POST /api/summarize-article {"articleText"}             → {"summary", "model", "apiVersion"}
POST /api/answer-question  {"articleText", "question"}  → {"answer", "model", "apiVersion"}

Both go through the ModelBackend, which finds a working Gemini model on
every call. Any generation failure becomes a 500 with a readable message.
"""

import logging

from fastapi import APIRouter, Depends, Request

from config import Config
from inference import GenerationResult
from infra import InfraBootstrap
from prompting import build_answer_prompt, build_summary_prompt

from .common import BadRequest, error_response, get_infrastructure, read_json_body, require_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["ai"])


def _result_body(key: str, result: GenerationResult) -> dict:
    return {
        key: result.text.strip(),
        "model": result.model,
        "apiVersion": result.version.value,
    }


async def _generate(infra: InfraBootstrap, prompt: str, task: str):
    """Run the backend; returns a GenerationResult or an error JSONResponse."""
    api_key = Config.gemini_api_key()
    if not api_key and infra.config.llm_backend != "stub":
        return error_response(500, "Gemini API key is not configured on the server.")

    try:
        return await infra.get_llm_backend().generate(api_key, prompt)
    except Exception as e:
        logger.error(f"Gemini API error during {task}: {e}", exc_info=True, extra={"task": task})
        return error_response(500, f"AI API error: {e}")


@router.post("/summarize-article")
async def summarize_article(request: Request, infra: InfraBootstrap = Depends(get_infrastructure)):
    """
    Summarize article text as structured Markdown.

    Returns:
        200 {"summary", "model", "apiVersion"}
        400 if articleText is missing
        500 if the key is unset or generation fails
    """
    try:
        payload = await read_json_body(request)
        article_text = require_text(payload, "articleText", "Article text is required to summarize.")
    except BadRequest as e:
        return error_response(400, str(e))

    prompt = build_summary_prompt(article_text, max_chars=Config.MAX_ARTICLE_CHARS)
    result = await _generate(infra, prompt, task="summarize")
    if not isinstance(result, GenerationResult):
        return result

    return _result_body("summary", result)


@router.post("/answer-question")
async def answer_question(request: Request, infra: InfraBootstrap = Depends(get_infrastructure)):
    """
    Answer a question about an article.

    Returns:
        200 {"answer", "model", "apiVersion"}
        400 if articleText or question is missing, or question is too long
        500 if the key is unset or generation fails
    """
    try:
        payload = await read_json_body(request)
        article_text = require_text(payload, "articleText", "Article text is required to answer a question.")
        question = require_text(
            payload,
            "question",
            "A question is required.",
            max_chars=Config.MAX_QUESTION_CHARS,
        )
    except BadRequest as e:
        return error_response(400, str(e))

    prompt = build_answer_prompt(article_text, question, max_chars=Config.MAX_ARTICLE_CHARS)
    result = await _generate(infra, prompt, task="answer")
    if not isinstance(result, GenerationResult):
        return result

    return _result_body("answer", result)
