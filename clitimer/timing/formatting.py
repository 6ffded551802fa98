"""Human-readable durations and the built-in timer layouts."""

BANNER = "-" * 41

# (lower bound in seconds, scale, unit), checked from the smallest band up
_BANDS = (
    (1e-6, 1e9, "ns"),
    (1e-3, 1e6, "us"),
    (1.0, 1e3, "ms"),
)


def format_time(seconds: float) -> str:
    """Format a duration with an automatically chosen unit.

    Each band includes its lower bound, so exactly 1e-3 seconds is "1 ms".
    The value keeps five significant digits, printf "%.5g" style.

    Args:
        seconds: Duration in seconds. Negative values keep their sign.

    Returns:
        String such as "123.45 us" or "12346 s".
    """
    for upper, scale, unit in _BANDS:
        if seconds < upper:
            return _render(seconds * scale, unit)
    return _render(seconds, "s")


def _render(value: float, unit: str) -> str:
    return "%.5g %s" % (value, unit)


def simple(title: str, time: str) -> str:
    """Default layout: "title: time"."""
    return f"{title}: {time}"


def big(title: str, time: str) -> str:
    """Three-line banner with dashed rules above and below."""
    return "\n".join([BANNER, f"| {title} | Time = {time}", BANNER])
