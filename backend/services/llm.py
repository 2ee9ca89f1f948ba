from typing import Dict, Any, List, Optional
import httpx

from config import LLM_CONFIG, settings, logger
from exceptions import LLMException
from utils.retry import async_retry


@async_retry(exceptions=(httpx.ConnectError, httpx.RemoteProtocolError))
async def _post_completion(endpoint: str, headers: Dict[str, str], body: Dict[str, Any], timeout: float) -> Dict[str, Any]:
    async with httpx.AsyncClient(timeout=timeout) as client:
        response = await client.post(endpoint, headers=headers, json=body)
        response.raise_for_status()
        return response.json()


async def call_openrouter(
    messages: List[Dict[str, str]],
    api_key: str,
    model: Optional[str] = None,
    endpoint: Optional[str] = None,
    timeout: Optional[float] = None,
) -> str:
    """
    Send a chat completion request and return the assistant message text.
    Raises:
        LLMException: with reason timeout, http_error, transport_error, invalid_json or invalid_envelope
    """
    if not api_key:
        raise LLMException("not_configured", recoverable=False)

    endpoint = endpoint or settings.OPENROUTER_ENDPOINT
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
        "HTTP-Referer": settings.APP_REFERER,
        "X-Title": settings.APP_TITLE,
    }
    body = {
        "model": model or settings.OPENROUTER_MODEL,
        "messages": messages,
        "temperature": LLM_CONFIG.TEMPERATURE,
        "response_format": {"type": LLM_CONFIG.RESPONSE_FORMAT},
    }

    try:
        data = await _post_completion(endpoint, headers, body, timeout or settings.REMOTE_TIMEOUT_SECONDS)
    except httpx.TimeoutException as e:
        logger.warning("OpenRouter request timed out for URL %s: %s", endpoint, e)
        raise LLMException("timeout", recoverable=True)
    except httpx.HTTPStatusError as e:
        logger.error("OpenRouter HTTP error %s: %s", e.response.status_code, e.response.text)
        raise LLMException("http_error", recoverable=True)
    except httpx.RequestError as e:
        logger.error("OpenRouter request error for URL %s: %s", endpoint, e)
        raise LLMException("transport_error", recoverable=True)
    except ValueError as e:
        logger.error("OpenRouter returned a non-JSON body: %s", e)
        raise LLMException("invalid_json", recoverable=True)

    try:
        text = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        text = None
    if not isinstance(text, str) or not text.strip():
        logger.error("OpenRouter response has no message content: %s", str(data)[:500])
        raise LLMException("invalid_envelope", recoverable=True)
    return text
