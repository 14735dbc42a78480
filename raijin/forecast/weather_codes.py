"""WMO weather code -> condition text lookup."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

logger = logging.getLogger(__name__)

UNKNOWN_CONDITION = "Unknown"


class WeatherCodeTable:
    """Immutable code table, loaded once and passed to the normalizer.

    Providers add codes from time to time, so an unknown code resolves to
    UNKNOWN_CONDITION instead of failing.
    """

    def __init__(self, codes: Mapping[str, str]):
        self._codes = MappingProxyType(dict(codes))

    @classmethod
    def from_file(cls, path: str | Path) -> "WeatherCodeTable":
        with open(path) as f:
            return cls(json.load(f))

    def resolve(self, code: int) -> str:
        condition = self._codes.get(str(code))
        if condition is None:
            logger.debug("Unknown weather code %s", code)
            return UNKNOWN_CONDITION
        return condition

    def __len__(self) -> int:
        return len(self._codes)
