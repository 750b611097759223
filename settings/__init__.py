"""Application settings."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent

# Data source (path or http(s) URL)
DATA_SOURCE = os.getenv("GOVOS_DATA_SOURCE", str(ROOT_DIR / "data" / "seed.json"))


def seconds_or_none(name: str, raw: str) -> float | None:
    """Parse a timeout in seconds; 0 means no timeout. Raises ValueError naming the variable."""
    try:
        seconds = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None
    return seconds or None


# Non-numeric values fail at import with the variable name in the message
HTTP_TIMEOUT = seconds_or_none("GOVOS_HTTP_TIMEOUT", os.getenv("GOVOS_HTTP_TIMEOUT", "30"))

# Logging
LOG_DIR = Path("logs")

# Display
GA_STATUS = "GA"
NOT_AVAILABLE = "N/A"
ASSEMBLY_NAME_SUFFIX = " Assembly"
METRIC_COMPACT_THRESHOLD = 1000
DESCRIPTION_PREVIEW_LENGTH = 100
