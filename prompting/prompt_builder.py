"""
Prompt Builder Layer
====================

Assembles the single-turn prompts sent to the model backend.

Invariants:
- article text is capped at MAX_ARTICLE_CHARS before injection
- the question is never truncated (handlers reject over-long questions)
- prompts are plain text; the backend wraps them as the sole user part
"""

# ≈4k tokens of article is enough for a summary and keeps latency low
MAX_ARTICLE_CHARS: int = 15000

_TRUNCATION_MARKER = "\n[...]"

SUMMARY_INSTRUCTIONS = (
    "Summarize the following article as structured Markdown. "
    "Use headings, bold text and bullet lists so the most important points "
    "can be grasped at a glance. Write the summary in the same language as "
    "the article."
)

ANSWER_INSTRUCTIONS = (
    "Answer the question using only the article below. "
    "If the article does not contain the answer, say so plainly instead of "
    "guessing. Answer in the same language as the question."
)


def clip_article(article_text: str, max_chars: int = MAX_ARTICLE_CHARS) -> str:
    """Strip the article and cut it to max_chars, marking the cut."""
    text = article_text.strip()
    if len(text) <= max_chars:
        return text
    return text[:max_chars].rstrip() + _TRUNCATION_MARKER


def build_summary_prompt(article_text: str, max_chars: int = MAX_ARTICLE_CHARS) -> str:
    """
    Build the summarization prompt.

    Args:
        article_text: Extracted article body
        max_chars:    Article character budget

    Returns:
        Prompt text ending with the (possibly clipped) article
    """
    return f"{SUMMARY_INSTRUCTIONS}\n\nArticle:\n{clip_article(article_text, max_chars)}"


def build_answer_prompt(
    article_text: str,
    question: str,
    max_chars: int = MAX_ARTICLE_CHARS,
) -> str:
    """Build the question-answering prompt."""
    return (
        f"{ANSWER_INSTRUCTIONS}\n\n"
        f"Article:\n{clip_article(article_text, max_chars)}\n\n"
        f"Question:\n{question.strip()}\n\n"
        f"Answer:"
    )
