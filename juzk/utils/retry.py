"""
Retry with exponential backoff for the AI assistant's OpenAI calls.

Only transient failures are retried: rate limits, timeouts, dropped
connections and 5xx responses. Authentication or bad-request errors surface
on the first attempt so the caller can fall back immediately.
"""

import functools
import time

import openai

from juzk.config.logging_config import setup_logger

logger = setup_logger(__name__)

DEFAULT_RETRIES = 3
DEFAULT_INITIAL_DELAY = 1.0
DEFAULT_MAX_DELAY = 30.0
DEFAULT_BACKOFF = 2.0

TRANSIENT_ERRORS = (
    openai.RateLimitError,
    openai.APIConnectionError,  # includes APITimeoutError
    openai.InternalServerError,
)

_TRANSIENT_MARKERS = ("429", "rate limit", "timeout", "timed out", "503")


def is_transient(exc: BaseException) -> bool:
    """OpenAI transient error types, or any error whose message looks like one (proxies, raw httpx)."""
    if isinstance(exc, TRANSIENT_ERRORS):
        return True
    msg = str(exc).lower()
    return any(marker in msg for marker in _TRANSIENT_MARKERS)


def with_retry(
    retries: int = DEFAULT_RETRIES,
    initial_delay: float = DEFAULT_INITIAL_DELAY,
    max_delay: float = DEFAULT_MAX_DELAY,
    backoff: float = DEFAULT_BACKOFF,
):
    """Decorator: call again on transient errors, sleeping initial_delay * backoff**n (capped at max_delay)."""

    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            delay = initial_delay
            attempt = 0
            while True:
                try:
                    return fn(*args, **kwargs)
                except Exception as e:
                    if attempt >= retries or not is_transient(e):
                        raise
                    attempt += 1
                    logger.warning(
                        "%s failed (%s), retry %s/%s in %.1fs", fn.__name__, type(e).__name__, attempt, retries, delay
                    )
                    time.sleep(delay)
                    delay = min(delay * backoff, max_delay)

        return wrapper

    return decorator
