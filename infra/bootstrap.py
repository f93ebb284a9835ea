"""
Infrastructure initialization and bootstrap.

Singleton pattern for creating all service backends from configuration.
The backends hold configuration only, never per-request state, so sharing
them across concurrent requests is safe.
"""

from typing import Optional

from inference import ModelBackend
from services.news import NewsBackend

from .config import InfraConfig, get_config


class InfraBootstrap:
    """
    Bootstrap infrastructure based on configuration.

    Singleton pattern - single instance per process.
    """

    _instance: Optional["InfraBootstrap"] = None

    def __init__(self, config: Optional[InfraConfig] = None):
        """Initialize bootstrap with configuration."""
        self.config = config or get_config()
        self.llm_backend = self.config.create_llm_backend()
        self.news_backend = self.config.create_news_backend()

    @classmethod
    def get_instance(cls, config: Optional[InfraConfig] = None) -> "InfraBootstrap":
        """
        Get singleton instance.

        Args:
            config: Optional custom configuration (only used first time)

        Returns:
            Singleton InfraBootstrap instance
        """
        if cls._instance is None:
            cls._instance = cls(config)
        return cls._instance

    @classmethod
    def reset(cls):
        """Reset singleton (for testing)."""
        cls._instance = None

    def get_llm_backend(self) -> ModelBackend:
        """Get LLM backend."""
        return self.llm_backend

    def get_news_backend(self) -> NewsBackend:
        """Get news backend."""
        return self.news_backend

    def __repr__(self) -> str:
        """String representation showing configured backends."""
        return (
            f"InfraBootstrap(llm={self.config.llm_backend}, "
            f"news={self.config.news_backend})"
        )


def bootstrap_infrastructure(config: Optional[InfraConfig] = None) -> InfraBootstrap:
    """
    Bootstrap all infrastructure backends.

    Args:
        config: Optional custom configuration

    Returns:
        InfraBootstrap instance with all backends initialized
    """
    return InfraBootstrap.get_instance(config)
