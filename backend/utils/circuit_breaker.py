import asyncio
import time
from enum import Enum
from typing import Awaitable, Callable, Any, Optional

from config import logger, CIRCUIT_CONFIG
from exceptions import CircuitBreakerOpenException

class CircuitState(Enum):
    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"

class CircuitBreaker:
    """Stops calling a failing service until a recovery window has passed."""

    def __init__(
        self,
        failure_threshold: int = CIRCUIT_CONFIG.FAILURE_THRESHOLD,
        recovery_timeout: float = CIRCUIT_CONFIG.RECOVERY_TIMEOUT,
        expected_exception: type = Exception,
        name: Optional[str] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.failure_threshold = failure_threshold
        self.recovery_timeout = recovery_timeout
        self.expected_exception = expected_exception
        self.name = name or "unnamed"
        self._clock = clock
        
        self._failure_count = 0
        self._opened_at: Optional[float] = None
        self._state = CircuitState.CLOSED
        self._lock = asyncio.Lock()

    @property
    def state(self) -> CircuitState:
        return self._state
    
    @property
    def failure_count(self) -> int:
        return self._failure_count

    async def call(self, func: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        async with self._lock:
            if self._state == CircuitState.OPEN:
                if self._recovery_elapsed():
                    logger.info(
                        "Circuit breaker %s: probing with a half-open call", self.name,
                        extra={"circuit_breaker": self.name, "state": "half_open"}
                    )
                    self._state = CircuitState.HALF_OPEN
                else:
                    logger.warning(
                        "Circuit breaker %s is open, rejecting call", self.name,
                        extra={"circuit_breaker": self.name, "failure_count": self._failure_count}
                    )
                    raise CircuitBreakerOpenException(self.name, self._failure_count)

        try:
            result = await func(*args, **kwargs)
        except self.expected_exception:
            await self._record_failure()
            raise
        await self._record_success()
        return result

    def _recovery_elapsed(self) -> bool:
        return (
            self._opened_at is not None
            and self._clock() - self._opened_at >= self.recovery_timeout
        )

    async def _record_success(self):
        async with self._lock:
            if self._state == CircuitState.HALF_OPEN:
                logger.info("Circuit breaker %s: recovered, closing circuit", self.name)
            self._failure_count = 0
            self._opened_at = None
            self._state = CircuitState.CLOSED

    async def _record_failure(self):
        async with self._lock:
            self._failure_count += 1
            if self._state == CircuitState.HALF_OPEN or self._failure_count >= self.failure_threshold:
                logger.error(
                    "Circuit breaker %s: opening circuit after %d failures", self.name, self._failure_count,
                    extra={"circuit_breaker": self.name, "threshold": self.failure_threshold}
                )
                self._state = CircuitState.OPEN
                self._opened_at = self._clock()
