import math
import re

_NUMBER_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+))")


def _leading_number(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if value is None:
        return None
    match = _NUMBER_RE.match(str(value))
    if not match:
        return None
    return float(match.group(1))


def to_float(value, default=None):
    """Parse the leading number of `value` ("145", "145.5lbs", 145)."""
    number = _leading_number(value)
    if number is None or (isinstance(number, float) and math.isnan(number)):
        return default
    return number


def to_int(value, default=None):
    """Parse the leading integer of `value`. Ranges like "3-5" give 3."""
    number = _leading_number(value)
    if number is None:
        return default
    return int(number)


def round_half_up(value):
    return int(math.floor(value + 0.5))


def key_text(value):
    """Render a value the way it appears in a suggestion key."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_name(name):
    return (name or "").strip().lower()
