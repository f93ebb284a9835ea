"""
Configuration management for NewsLens.

Loads environment variables from .env file and provides typed access to configuration.
API keys are NOT cached here: handlers read them per request so a rotated
key takes effect without a restart.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)


class Config:
    """Configuration class for NewsLens."""

    # Server
    APP_PORT = int(os.getenv("APP_PORT", "8000"))
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Comma-separated; "*" allows any origin
    CORS_ALLOW_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
        if origin.strip()
    ]

    # Request limits
    MAX_ARTICLE_CHARS = int(os.getenv("MAX_ARTICLE_CHARS", "15000"))
    MAX_QUESTION_CHARS = int(os.getenv("MAX_QUESTION_CHARS", "1000"))

    REQUIRED_SECRETS = ["GEMINI_API_KEY", "GNEWS_API_KEY"]

    @staticmethod
    def gemini_api_key() -> str:
        return os.getenv("GEMINI_API_KEY", "")

    @staticmethod
    def gnews_api_key() -> str:
        return os.getenv("GNEWS_API_KEY", "")

    @classmethod
    def missing_secrets(cls) -> list:
        return [key for key in cls.REQUIRED_SECRETS if not os.getenv(key)]

    @classmethod
    def validate(cls) -> bool:
        """Validate that required configuration is set."""
        return not cls.missing_secrets()


if __name__ == "__main__":
    # Test configuration loading
    print("Configuration loaded:")
    print(f"  Gemini API Key: {'✓ Set' if Config.gemini_api_key() else '✗ Missing'}")
    print(f"  GNews API Key: {'✓ Set' if Config.gnews_api_key() else '✗ Missing'}")
    print(f"  App Port: {Config.APP_PORT}")
    print(f"  Environment: {Config.ENVIRONMENT}")
    print(f"\n  Validation: {'✓ PASSED' if Config.validate() else '✗ FAILED'}")
