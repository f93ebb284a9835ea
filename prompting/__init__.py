"""
Prompt Builder layer.

Exports the summary and question-answering prompt assemblers.
"""

from .prompt_builder import MAX_ARTICLE_CHARS, build_answer_prompt, build_summary_prompt, clip_article

__all__ = ["MAX_ARTICLE_CHARS", "build_answer_prompt", "build_summary_prompt", "clip_article"]
