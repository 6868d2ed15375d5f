"""Human-readable labels for hovered segments."""

import math

from bundleburst.config import SIZE_UNITS

PERCENTAGE_FLOOR = 0.1
PERCENTAGE_FLOOR_LABEL = "< 0.1%"


def to_precision(value: float, digits: int = 3) -> str:
    """Format a number to significant digits, keeping trailing zeros.

    Mirrors the JavaScript Number.prototype.toPrecision output, e.g.
    50 -> "50.0", 100 -> "100", 0.05 -> "0.0500".
    """
    if value == 0:
        return "0." + "0" * (digits - 1) if digits > 1 else "0"
    if not math.isfinite(value):
        return str(value)

    mantissa, _, exp_text = f"{value:.{digits - 1}e}".partition("e")
    exponent = int(exp_text)
    if exponent < -6 or exponent >= digits:
        sign = "+" if exponent >= 0 else "-"
        return f"{mantissa}e{sign}{abs(exponent)}"
    return f"{value:.{digits - 1 - exponent}f}"


def format_percentage(value: float, total: float) -> str:
    """Share of the total as a 3-significant-digit percentage label.

    Anything that rounds below 0.1% collapses to the literal "< 0.1%".
    """
    ratio = value / total if total else 0.0
    text = to_precision(100 * ratio, 3)
    if float(text) < PERCENTAGE_FLOOR:
        return PERCENTAGE_FLOOR_LABEL
    return f"{text}%"


def format_size(value: float) -> str:
    """Byte count with two decimals and a KiB/MiB/GiB suffix.

    Divisors are decimal (1e3, 1e6, 1e9). Values below 1000 get no suffix.
    """
    for threshold, divisor, unit in SIZE_UNITS:
        if value >= threshold:
            return f"{value / divisor:.2f} {unit}"
    return f"{value:.2f}"
