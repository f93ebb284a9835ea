"""
Infrastructure module exports.

Configuration and bootstrap for all service backends.
"""

from .config import InfraConfig, get_config, LLMBackendType, NewsBackendType
from .bootstrap import InfraBootstrap, bootstrap_infrastructure

__all__ = [
    "InfraConfig",
    "get_config",
    "LLMBackendType",
    "NewsBackendType",
    "InfraBootstrap",
    "bootstrap_infrastructure",
]
