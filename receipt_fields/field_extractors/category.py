"""Keyword based spending category classification."""
from __future__ import annotations

from typing import Mapping, Optional, Tuple

from ..taxonomy import CATEGORY_KEYWORDS


def extract_category(
    text: Optional[str],
    taxonomy: Mapping[str, Tuple[str, ...]] = CATEGORY_KEYWORDS,
) -> Optional[str]:
    """Return the first category whose keywords appear in ``text``.

    Categories and keywords are checked in declaration order, so a receipt
    mentioning both "milk" and "pizza" is filed under groceries.
    """

    if not text:
        return None
    lowered = text.lower()
    for category, keywords in taxonomy.items():
        if any(keyword in lowered for keyword in keywords):
            return category
    return None


__all__ = ["extract_category"]
