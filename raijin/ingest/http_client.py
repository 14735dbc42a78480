"""JSON GET with retry and rate limit handling, shared by the API clients."""

import logging
import time
from typing import Any

import httpx

logger = logging.getLogger(__name__)

RETRY_STATUSES = (429, 500, 502, 503, 504)


def get_json(
    url: str,
    params: dict[str, Any] | None = None,
    user_agent: str = "raijin/0.1.0",
    timeout: float = 20.0,
    max_retries: int = 2,
    retry_base_delay: float = 1.0,
) -> Any:
    """GET ``url`` and decode JSON.

    Retries on 429/5xx and transport errors with exponential backoff; the
    final failure is raised.
    """
    headers = {"User-Agent": user_agent, "Accept": "application/json"}

    last_error: Exception | None = None
    for attempt in range(max_retries + 1):
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=timeout)
            if resp.status_code in RETRY_STATUSES and attempt < max_retries:
                delay = retry_base_delay * (2**attempt)
                logger.warning(
                    "%s returned %d, retrying in %.1fs (attempt %d/%d)",
                    url, resp.status_code, delay, attempt + 1, max_retries,
                )
                time.sleep(delay)
                continue
            resp.raise_for_status()
            return resp.json()
        except httpx.RequestError as e:
            last_error = e
            if attempt < max_retries:
                delay = retry_base_delay * (2**attempt)
                logger.warning("Request error, retrying in %.1fs: %s", delay, e)
                time.sleep(delay)
                continue
            raise

    assert last_error is not None
    raise last_error
