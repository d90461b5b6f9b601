"""Spending categories and the keywords that identify them on a receipt."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# Declaration order is the classification priority.
CATEGORY_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "groceries": (
            "grocery",
            "supermarket",
            "food",
            "vegetables",
            "fruits",
            "dairy",
            "store",
            "general store",
            "milk",
            "bread",
            "noodles",
            "cheese",
        ),
        "restaurants": ("restaurant", "cafe", "dining", "food", "meal", "lunch", "dinner"),
        "transportation": ("fuel", "gas", "petrol", "diesel", "uber", "taxi", "transport"),
        "shopping": ("clothing", "apparel", "fashion", "shoes", "accessories", "mall"),
        "utilities": ("electricity", "water", "gas", "internet", "phone", "utility"),
        "entertainment": ("movie", "cinema", "theater", "concert", "show", "entertainment"),
        "healthcare": ("pharmacy", "medical", "doctor", "hospital", "clinic", "medicine"),
    }
)

CATEGORY_NAMES: Tuple[str, ...] = tuple(CATEGORY_KEYWORDS)


def is_known_category(name: object) -> bool:
    return isinstance(name, str) and name in CATEGORY_KEYWORDS


__all__ = ["CATEGORY_KEYWORDS", "CATEGORY_NAMES", "is_known_category"]
