"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    TESTING = _flag("TESTING", "false")
    DEBUG = _flag("DEBUG", "false")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Postgresql Database settings (Prisma reads DATABASE_URL itself)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Redis change feed
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    FEED_CHANNEL_PREFIX: str = os.getenv("FEED_CHANNEL_PREFIX", "conv")

    # Generation backend: "openai" talks to an OpenAI-compatible endpoint
    # directly, "http" posts {"prompt": ...} to a hosted generate function
    GENERATION_BACKEND: str = os.getenv("GENERATION_BACKEND", "openai")
    GENERATION_ENDPOINT_URL: str = os.getenv("GENERATION_ENDPOINT_URL", "")
    GENERATION_API_KEY: str = os.getenv("GENERATION_API_KEY", "")

    # OpenAI-compatible provider (DeepSeek by default)
    OPENAI_KEY = os.getenv("OPENAI_API_KEY", "")
    OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.deepseek.com/v1")
    GENERATION_MODEL = os.getenv("GENERATION_MODEL", "deepseek-v3")
    GENERATION_TEMPERATURE = float(os.getenv("GENERATION_TEMPERATURE", "0.2"))
    GENERATION_MAX_TOKENS = int(os.getenv("GENERATION_MAX_TOKENS", "4000"))

    # Transport settings (the core itself never adds a timeout)
    LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "120"))
    LLM_CONNECT_TIMEOUT = float(os.getenv("LLM_CONNECT_TIMEOUT", "10"))
    LLM_MAX_RETRIES = int(os.getenv("LLM_MAX_RETRIES", "2"))

    # Circuit breaker around the LLM provider
    LLM_CB_FAILURE_THRESHOLD = int(os.getenv("LLM_CB_FAILURE_THRESHOLD", "5"))
    LLM_CB_RECOVERY_TIMEOUT = int(os.getenv("LLM_CB_RECOVERY_TIMEOUT", "30"))


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    LOG_LEVEL = "WARNING"


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("PROMPTCRAFT_ENV", "development")
    return config.get(env, config["default"])
