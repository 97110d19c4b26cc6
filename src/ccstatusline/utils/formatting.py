"""Text formatting for token counts, percentages and durations."""

from decimal import ROUND_HALF_UP, Decimal


def format_tokens(count: int | float) -> str:
    """Format a token count: 500, 18.6k, 1.2M."""
    if count <= 0:
        return "0"
    if count >= 1_000_000:
        return f"{count / 1_000_000:.1f}M"
    if count >= 1000:
        return f"{count / 1000:.1f}k"
    return str(int(count))


def format_percentage(value: float) -> str:
    """One decimal place, halves rounded up (26.25 -> 26.3%).

    Rounds the exact binary value, so 0.15 (stored just below) gives 0.1%.
    """
    rounded = Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{rounded}%"


def format_duration_ms(duration_ms: int) -> str:
    """Format a duration: <1m, 45m, 2hr, 1hr 30m."""
    total_minutes = int(duration_ms // 60_000)
    if total_minutes < 1:
        return "<1m"

    hours, minutes = divmod(total_minutes, 60)
    if hours == 0:
        return f"{minutes}m"
    if minutes == 0:
        return f"{hours}hr"
    return f"{hours}hr {minutes}m"


def format_cost(usd: float) -> str:
    return f"${usd:.2f}"
