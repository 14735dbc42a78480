"""Moon phase selection for tonight's pane."""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from raijin.models.forecast import MoonPhaseEntry
from raijin.models.payload import MoonPhasePayload

# ViewBits returns today followed by the next days; tonight's phase sits in
# the fourth slot.
TONIGHT_OFFSET = 3


class InsufficientMoonDataError(ValueError):
    """Raised when the moon phase series is too short to contain tonight."""


def select_tonight(phases: Sequence[MoonPhaseEntry]) -> MoonPhaseEntry:
    """Return tonight's entry.

    Never falls back to the last available entry: that would show the
    phase of a different night.
    """
    if len(phases) <= TONIGHT_OFFSET:
        raise InsufficientMoonDataError(
            f"Need at least {TONIGHT_OFFSET + 1} moon phase entries, "
            f"got {len(phases)}"
        )
    return phases[TONIGHT_OFFSET]


def parse_moon_phases(raw: Iterable[Mapping[str, Any]]) -> list[MoonPhaseEntry]:
    """Validate the upstream moon phase list into entries, preserving order."""
    entries: list[MoonPhaseEntry] = []
    for item in raw:
        try:
            payload = MoonPhasePayload.model_validate(item)
        except ValidationError as e:
            raise ValueError(f"Invalid moon phase entry {item!r}: {e}") from e
        entries.append(
            MoonPhaseEntry(
                date=payload.date,
                phase=payload.phase,
                illumination=payload.illumination,
            )
        )
    return entries
