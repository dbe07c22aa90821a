"""Number formatting shared by labels, axes and tooltips."""


def _format_compact(value: float, decimals: int) -> str:
    """Format large magnitudes as 1.5K, 2.3M, 4.0B."""
    abs_value = abs(value)
    sign = "-" if value < 0 else ""
    for threshold, suffix in ((1e9, "B"), (1e6, "M"), (1e3, "K")):
        if abs_value >= threshold:
            return f"{sign}{abs_value / threshold:.{decimals}f}{suffix}"
    return f"{value:.{decimals}f}"


def format_value(value: float, format_type: str = "decimal", decimals: int = 2) -> str:
    """Return value rendered as decimal, integer, percentage or compact text."""
    if format_type == "integer":
        return f"{value:.0f}"
    if format_type == "percentage":
        return f"{value * 100:.{decimals}f}%"
    if format_type == "compact":
        return _format_compact(value, decimals)
    return f"{value:.{decimals}f}"


def truncate_text(text: str, max_len: int) -> str:
    """Truncate text with ellipsis when it exceeds max_len."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
