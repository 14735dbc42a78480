"""ViewBits moon phase API client."""

import logging

from raijin.config.schema import HttpConfig
from raijin.ingest.http_client import get_json

logger = logging.getLogger(__name__)


class MoonPhaseClient:
    def __init__(self, http: HttpConfig | None = None):
        self.http = http or HttpConfig()

    def get_phases(self, start_date: str) -> list[dict]:
        """Fetch phases for ``start_date`` (YYYY-MM-DD) and the following days."""
        url = f"{self.http.moon_phase_url}/v1/moonphase"
        data = get_json(
            url,
            params={"startdate": start_date},
            user_agent=self.http.user_agent,
            timeout=self.http.timeout_seconds,
            max_retries=self.http.max_retries,
            retry_base_delay=self.http.retry_base_delay,
        )
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of moon phases, got {type(data).__name__}")
        return data
