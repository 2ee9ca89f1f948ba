from typing import Optional

from config import CIRCUIT_CONFIG, settings, logger
from exceptions import CircuitBreakerOpenException, LLMException
from models import Assessed, AssessmentOutcome, Unavailable
from prompts import build_messages
from utils.circuit_breaker import CircuitBreaker
from utils.parsing import parse_json_object
from .coercion import coerce_result
from .llm import call_openrouter


class RemoteAssessor:
    """
    Asks a remote language model for a credibility assessment.

    `assess` never raises: every failure (missing key, timeout, HTTP error,
    malformed reply, open circuit) is reported as Unavailable.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        breaker: Optional[CircuitBreaker] = None,
    ):
        self.api_key = api_key
        self.model = model or settings.OPENROUTER_MODEL
        self.endpoint = endpoint or settings.OPENROUTER_ENDPOINT
        self.timeout = timeout or settings.REMOTE_TIMEOUT_SECONDS
        self.breaker = breaker or CircuitBreaker(
            failure_threshold=CIRCUIT_CONFIG.FAILURE_THRESHOLD,
            recovery_timeout=CIRCUIT_CONFIG.RECOVERY_TIMEOUT,
            expected_exception=LLMException,
            name="openrouter",
        )

    @classmethod
    def from_settings(cls) -> "RemoteAssessor":
        return cls(
            api_key=settings.OPENROUTER_API_KEY,
            model=settings.OPENROUTER_MODEL,
            endpoint=settings.OPENROUTER_ENDPOINT,
            timeout=settings.REMOTE_TIMEOUT_SECONDS,
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def assess(self, input_type: str, content: str) -> AssessmentOutcome:
        if not self.configured:
            return Unavailable("not_configured")

        try:
            text = await self.breaker.call(
                call_openrouter,
                build_messages(input_type, content),
                api_key=self.api_key,
                model=self.model,
                endpoint=self.endpoint,
                timeout=self.timeout,
            )
        except CircuitBreakerOpenException:
            return Unavailable("circuit_open")
        except LLMException as e:
            logger.warning("Remote assessment unavailable for %s input: %s", input_type, e.reason)
            return Unavailable(e.reason)
        except Exception as e:
            logger.exception("Unexpected error during remote assessment.")
            return Unavailable(f"unexpected_error:{type(e).__name__}")

        try:
            payload = parse_json_object(text)
            if payload is None:
                logger.error("Could not parse JSON object from remote assessment: %s", text[:500])
                return Unavailable("invalid_json")
            return Assessed(coerce_result(payload))
        except Exception:
            # Pathological replies (deep nesting, huge literals) still count as unusable JSON.
            logger.exception("Remote assessment reply could not be interpreted.")
            return Unavailable("invalid_json")
