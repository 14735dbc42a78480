"""Display formatting for temperatures and probabilities."""

DEGREE = "°"
PERCENT = "%"
MISSING = "--"


def _compact(value: float) -> str:
    """Shortest text that parses back to the same float: 10.0 -> '10'."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        text = "0"
    return text


def format_temperature(value: float) -> str:
    return f"{_compact(value)}{DEGREE}"


def format_percentage(value: float | None) -> str:
    if value is None:
        return MISSING
    return f"{value:.0f}{PERCENT}"


def parse_temperature(text: str) -> float:
    """Inverse of format_temperature. Raises ValueError on malformed input."""
    return float(text.removesuffix(DEGREE))
