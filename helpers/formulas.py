"""Pure math and formatting formulas - no dependencies, easily testable."""
import re
from decimal import ROUND_HALF_UP, Decimal

EXCELLENT = "excellent"
GOOD = "good"
FAIR = "fair"
POOR = "poor"

# (lower bound inclusive, band), highest first
EQUITY_BANDS = ((0.95, EXCELLENT), (0.85, GOOD), (0.75, FAIR))


def round_half_up(value: float, digits: int = 0) -> Decimal:
    """Round the exact binary value half away from zero (no banker's rounding)."""
    return Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


def fixed(value: float, digits: int = 0) -> str:
    """Fixed-point string with `digits` decimals."""
    return f"{round_half_up(value, digits):.{digits}f}"


def mean(values: list[float]) -> float | None:
    """Arithmetic mean, None for an empty list."""
    return sum(values) / len(values) if values else None


def rate(part: float, whole: float) -> float:
    """part / whole with the denominator floored at 1."""
    return part / max(1, whole)


def equity_band(value: float) -> str:
    """Parity index -> excellent / good / fair / poor."""
    for lower, band in EQUITY_BANDS:
        if value >= lower:
            return band
    return POOR


def format_number(n: int | float) -> str:
    """Plain number string; whole floats lose their trailing .0."""
    if isinstance(n, float) and n.is_integer():
        return str(int(n))
    return str(n)


def format_compact(n: int | float) -> str:
    """1234 -> 1K, 2500000 -> 2.5M, 999 -> 999."""
    if n >= 1_000_000:
        return f"{fixed(n / 1_000_000, 1)}M"
    if n >= 1_000:
        return f"{fixed(n / 1_000)}K"
    return format_number(n)


def format_percent(fraction: float) -> str:
    """0.734 -> 73%."""
    return f"{fixed(fraction * 100)}%"


def whole_percent(fraction: float) -> int:
    """0.734 -> 73."""
    return int(round_half_up(fraction * 100))


def humanize(key: str) -> str:
    """snake_case key -> Title Case Words."""
    return re.sub(r"\b\w", lambda m: m.group().upper(), key.replace("_", " "), flags=re.ASCII)
