from decimal import Decimal
from typing import Iterable

def normalize_words(text: str) -> str:
    """
    Minimal normalization before a lookup:
    - trim surrounding whitespace
    - drop a leading "///" marker users copy from the map app
    Casing is preserved; the service compares words as returned.
    """
    return text.strip().lstrip("/").strip()

def fmt_number(value: float) -> str:
    """
    Shortest round-tripping decimal in positional notation (never "1e-05"),
    with no trailing ".0" on whole numbers.
    """
    if float(value).is_integer():
        return str(int(value))
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text

def join_csv(values: Iterable) -> str:
    """Comma-join for the service's list parameters."""
    return ",".join(v if isinstance(v, str) else fmt_number(v) for v in values)
