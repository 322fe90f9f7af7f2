def format_number(num: float | int | None) -> str:
    """Format large numbers with K, M, B suffixes"""
    if num is None:
        return "N/A"
    if num >= 1_000_000_000:
        return f"{num / 1_000_000_000:.1f}B"
    elif num >= 1_000_000:
        return f"{num / 1_000_000:.0f}M"
    elif num >= 1_000:
        return f"{num / 1_000:.0f}K"
    else:
        return str(int(num))


def format_price(price: float) -> str:
    return f"${price:.2f}"


def format_change(change_percent: float) -> str:
    return f"{change_percent:.2f}%"


def format_volume(volume: int) -> str:
    """Format a volume with thousands separators (e.g. 1,234,567)."""
    return f"{volume:,}"
