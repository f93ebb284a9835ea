"""
Infrastructure configuration system.

Environment-based backend selection with sensible defaults.
Tests and CI select the stub backends; production uses Gemini and GNews.
"""

import os
from typing import List, Literal
from dataclasses import dataclass, field

from inference import GeminiClient, ModelBackend, ModelSelector, StubModelBackend, PREFERRED_MODELS
from inference.gemini import GEMINI_BASE_URL
from services.news import GNewsBackend, NewsBackend, StubNewsBackend


LLMBackendType = Literal["stub", "gemini"]
NewsBackendType = Literal["stub", "gnews"]


def _parse_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class InfraConfig:
    """Infrastructure configuration from environment."""

    # LLM
    llm_backend: LLMBackendType = "gemini"
    gemini_base_url: str = GEMINI_BASE_URL
    gemini_list_timeout_s: float = 15.0
    gemini_generate_timeout_s: float = 30.0
    gemini_generate_retries: int = 3
    gemini_backoff_base_ms: int = 800
    gemini_preferred_models: List[str] = field(default_factory=lambda: list(PREFERRED_MODELS))

    # News
    news_backend: NewsBackendType = "gnews"
    gnews_lang: str = "ja"
    gnews_country: str = "jp"
    gnews_max_results: int = 10
    gnews_timeout_s: float = 15.0

    @classmethod
    def from_env(cls) -> "InfraConfig":
        """
        Load configuration from environment variables.

        Defaults reproduce the production behaviour:
        - LLM: gemini (v1beta then v1, 3 retries, 800 ms backoff base)
        - News: gnews (Japanese articles from Japan, 10 per search)
        """
        preferred = _parse_list(os.getenv("GEMINI_PREFERRED_MODELS", ""))
        return cls(
            # LLM Configuration
            llm_backend=os.getenv("LLM_BACKEND", "gemini").lower(),  # type: ignore
            gemini_base_url=os.getenv("GEMINI_BASE_URL", GEMINI_BASE_URL),
            gemini_list_timeout_s=float(os.getenv("GEMINI_LIST_TIMEOUT_S", "15")),
            gemini_generate_timeout_s=float(os.getenv("GEMINI_GENERATE_TIMEOUT_S", "30")),
            gemini_generate_retries=int(os.getenv("GEMINI_GENERATE_RETRIES", "3")),
            gemini_backoff_base_ms=int(os.getenv("GEMINI_BACKOFF_BASE_MS", "800")),
            gemini_preferred_models=preferred or list(PREFERRED_MODELS),

            # News Configuration
            news_backend=os.getenv("NEWS_BACKEND", "gnews").lower(),  # type: ignore
            gnews_lang=os.getenv("GNEWS_LANG", "ja"),
            gnews_country=os.getenv("GNEWS_COUNTRY", "jp"),
            gnews_max_results=int(os.getenv("GNEWS_MAX", "10")),
            gnews_timeout_s=float(os.getenv("GNEWS_TIMEOUT_S", "15")),
        )

    def create_llm_backend(self) -> ModelBackend:
        """Create LLM backend instance based on configuration."""
        if self.llm_backend == "stub":
            return StubModelBackend()
        # Default to gemini
        client = GeminiClient(
            base_url=self.gemini_base_url,
            list_timeout_s=self.gemini_list_timeout_s,
            generate_timeout_s=self.gemini_generate_timeout_s,
            generate_retries=self.gemini_generate_retries,
            base_delay_ms=self.gemini_backoff_base_ms,
        )
        return ModelSelector(client=client, preferred_models=self.gemini_preferred_models)

    def create_news_backend(self) -> NewsBackend:
        """Create news backend instance based on configuration."""
        if self.news_backend == "stub":
            return StubNewsBackend()
        # Default to gnews
        return GNewsBackend(
            lang=self.gnews_lang,
            country=self.gnews_country,
            max_results=self.gnews_max_results,
            timeout_s=self.gnews_timeout_s,
        )


def get_config() -> InfraConfig:
    """Get infrastructure configuration from the current environment."""
    return InfraConfig.from_env()
