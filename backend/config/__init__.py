import logging

from .settings import settings, Settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("veritrace")

from .constants import (
    LLM_CONFIG,
    RETRY_CONFIG,
    CIRCUIT_CONFIG,
    TEXT_RULES,
    URL_RULES,
    MEDIA_RULES,
    COERCION_DEFAULTS,
    VALIDATION_LIMITS,
)

def check_api_keys_on_startup():
    """Log whether the remote assessor can be used."""
    if settings.OPENROUTER_API_KEY:
        logger.info("OPENROUTER_API_KEY configured; remote assessment enabled (model=%s).", settings.OPENROUTER_MODEL)
    else:
        logger.warning("Missing API key: OPENROUTER_API_KEY. Running in heuristic fallback mode.")

__all__ = [
    "logger",
    "settings",
    "Settings",
    "check_api_keys_on_startup",
    "LLM_CONFIG",
    "RETRY_CONFIG",
    "CIRCUIT_CONFIG",
    "TEXT_RULES",
    "URL_RULES",
    "MEDIA_RULES",
    "COERCION_DEFAULTS",
    "VALIDATION_LIMITS",
]
