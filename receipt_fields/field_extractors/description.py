"""Merchant description extraction using keyword context and layout heuristics."""
from __future__ import annotations

import re
from typing import Iterable, Optional, Tuple

BUSINESS_KEYWORD = re.compile(
    r"(?:store|shop|business|company|restaurant|cafe|market|mall|outlet)[\s:]+([^\n]+)",
    re.IGNORECASE,
)
ROLE_KEYWORD = re.compile(r"(?:merchant|vendor|seller)[\s:]+([^\n]+)", re.IGNORECASE)
BUSINESS_SUFFIX = re.compile(
    r"^([A-Z\s&]+(?:STORE|SHOP|MART|MALL|RESTAURANT|MARKET|OUTLET|LTD|INC|LLC|BROTHERS))$"
)

CONTEXT_PATTERNS: Tuple[re.Pattern[str], ...] = (BUSINESS_KEYWORD, ROLE_KEYWORD, BUSINESS_SUFFIX)

UPPERCASE_NAME = re.compile(r"^[A-Z\s&]+$")
FALLBACK_SKIP_WORDS = ("TOTAL", "AMOUNT", "DATE", "RECEIPT")


def _from_context(lines: Iterable[str]) -> Optional[str]:
    for line in lines:
        stripped = line.strip()
        for pattern in CONTEXT_PATTERNS:
            match = pattern.search(stripped)
            if not match:
                continue
            candidate = match.group(1).strip()
            if 3 < len(candidate) < 100:
                return candidate
    return None


def _from_uppercase_line(lines: Iterable[str]) -> Optional[str]:
    for line in lines:
        trimmed = line.strip()
        if not 5 < len(trimmed) < 50:
            continue
        if not UPPERCASE_NAME.match(trimmed):
            continue
        if any(word in trimmed for word in FALLBACK_SKIP_WORDS):
            continue
        return trimmed
    return None


def extract_description(text: Optional[str]) -> Optional[str]:
    """Return the merchant name printed on the receipt, or ``None``.

    Lines that name the business through a keyword ("Store: ...",
    "Vendor: ...") or end in a business suffix win first. Otherwise the first
    plausible all-caps heading is used.
    """

    if not text:
        return None
    lines = text.split("\n")
    return _from_context(lines) or _from_uppercase_line(lines)


__all__ = ["CONTEXT_PATTERNS", "extract_description"]
