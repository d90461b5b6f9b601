"""Rule-based total amount extraction."""
from __future__ import annotations

import re
from typing import Optional, Tuple

_NUMBER = r"([$€₹]?\s?\d{1,6}[,.]\d{2})"

# Tried in order on every line; "subtotal" must never count as a total.
TOTAL_PATTERNS: Tuple[re.Pattern[str], ...] = (
    re.compile(
        r"(?:(?<!sub)total|amount due|balance|debit|grand total|final total)[\s:]*" + _NUMBER,
        re.IGNORECASE | re.ASCII,
    ),
    re.compile(_NUMBER + r"\s*total", re.IGNORECASE | re.ASCII),
    re.compile(r"(?<!sub)total\s*" + _NUMBER, re.IGNORECASE | re.ASCII),
)


def _normalise_number(text: str) -> Optional[float]:
    digits = re.sub(r"[^0-9]", "", text)
    if len(digits) < 3:
        return None
    # The last two digits are always the fraction, whichever separator OCR produced.
    return float(f"{digits[:-2]}.{digits[-2:]}")


def _match_line(line: str) -> Optional[float]:
    for pattern in TOTAL_PATTERNS:
        match = pattern.search(line)
        if match and match.group(1):
            return _normalise_number(match.group(1))
    return None


def extract_amount(text: Optional[str]) -> Optional[float]:
    """Return the total nearest the bottom of the receipt, or ``None``."""

    if not text:
        return None
    for line in reversed(text.split("\n")):
        value = _match_line(line)
        if value is not None:
            return value
    return None


__all__ = ["TOTAL_PATTERNS", "extract_amount"]
