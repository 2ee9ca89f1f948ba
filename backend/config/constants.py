from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class LLMConfig:
    TEMPERATURE: float = 0.2
    RESPONSE_FORMAT: str = "json_object"

@dataclass(frozen=True)
class RetryConfig:
    """Retries for transient connection failures on the remote call."""
    MAX_ATTEMPTS: int = 2
    BASE_DELAY: float = 0.5
    MAX_DELAY: float = 4.0
    EXPONENTIAL_BASE: float = 2.0

    def delay_for(self, attempt: int) -> float:
        """Backoff before retry number attempt (0-based), capped at MAX_DELAY."""
        return min(self.BASE_DELAY * (self.EXPONENTIAL_BASE ** attempt), self.MAX_DELAY)

@dataclass(frozen=True)
class CircuitConfig:
    FAILURE_THRESHOLD: int = 5
    RECOVERY_TIMEOUT: float = 60.0

@dataclass(frozen=True)
class TextRules:
    BASELINE_SCORE: int = 85
    SUSPICIOUS_KEYWORDS: Tuple[str, ...] = (
        "breaking", "exclusive", "shocking", "unbelievable", "doctors hate", "secret"
    )
    KEYWORD_PENALTY: int = 15
    KEYWORD_CONFIDENCE: float = 0.7
    MIN_LENGTH: int = 50
    SHORT_TEXT_PENALTY: int = 10
    SHORT_TEXT_CONFIDENCE: float = 0.6
    BREAKDOWN: Tuple[float, float, float] = (0.8, 0.1, 0.1)

@dataclass(frozen=True)
class UrlRules:
    BASELINE_SCORE: int = 70
    TRUSTED_DOMAINS: Tuple[str, ...] = ("reuters.com", "bbc.com", "ap.org", "npr.org")
    SUSPICIOUS_DOMAINS: Tuple[str, ...] = ("fakenews.com", "clickbait.net")
    TRUSTED_BONUS: int = 20
    SUSPICIOUS_PENALTY: int = 30
    SUSPICIOUS_CONFIDENCE: float = 0.8
    BREAKDOWN: Tuple[float, float, float] = (0.9, 0.05, 0.05)

@dataclass(frozen=True)
class MediaRules:
    FAKE_THRESHOLD: float = 0.8
    UNCERTAIN_THRESHOLD: float = 0.3
    SCORE_REAL: int = 85
    SCORE_UNCERTAIN: int = 50
    SCORE_FAKE: int = 15
    BREAKDOWN: Tuple[float, float, float] = (0.7, 0.2, 0.1)

@dataclass(frozen=True)
class CoercionDefaults:
    """Substitutes for missing or non-numeric fields in a remote payload."""
    SCORE: float = 60.0
    CLAIM_CONFIDENCE: float = 0.6
    SOURCE_CREDIBILITY: float = 0.8
    TRUSTED: float = 0.7
    NEUTRAL: float = 0.2
    SUSPICIOUS: float = 0.1
    SUMMARY: str = "Analysis complete."
    SOURCE_TITLE: str = "Source"

@dataclass(frozen=True)
class ValidationLimits:
    MAX_CONTENT_LENGTH: int = 20000
    MAX_URL_LENGTH: int = 2048
    DEFAULT_RECENT_LIMIT: int = 10
    DEFAULT_OWNER_LIMIT: int = 50
    MAX_LIST_LIMIT: int = 100

LLM_CONFIG = LLMConfig()
RETRY_CONFIG = RetryConfig()
CIRCUIT_CONFIG = CircuitConfig()
TEXT_RULES = TextRules()
URL_RULES = UrlRules()
MEDIA_RULES = MediaRules()
COERCION_DEFAULTS = CoercionDefaults()
VALIDATION_LIMITS = ValidationLimits()
