"""Assemble the individual field extractors into one receipt result."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .field_extractors import extract_amount, extract_category, extract_date, extract_description
from .field_extractors.date import DEFAULT_DATE_ORDER
from .taxonomy import is_known_category

LOGGER = logging.getLogger(__name__)

RECEIPT_TRANSACTION_TYPE = "expense"


@dataclass(frozen=True)
class ExtractionResult:
    """Fields recovered from one receipt; every field may be missing."""

    amount: Optional[float] = None
    date: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    type: str = RECEIPT_TRANSACTION_TYPE
    has_text: bool = True

    def __post_init__(self) -> None:
        if self.category is not None and not is_known_category(self.category):
            raise ValueError(f"unknown category: {self.category}")

    @property
    def is_empty(self) -> bool:
        return not any((self.amount is not None, self.date, self.description, self.category))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "amount": self.amount,
            "date": self.date,
            "description": self.description,
            "category": self.category,
            "type": self.type,
        }


def extract_fields(text: Optional[str], date_order: str = DEFAULT_DATE_ORDER) -> ExtractionResult:
    """Run every field extractor over raw OCR ``text``.

    Blank input yields an all-empty result with ``has_text`` set to ``False``
    so callers can tell an unreadable image from a receipt with no matches.
    """

    if not text or not text.strip():
        LOGGER.info("Receipt text is empty; skipping field extraction")
        return ExtractionResult(has_text=False)

    result = ExtractionResult(
        amount=extract_amount(text),
        date=extract_date(text, date_order=date_order),
        description=extract_description(text),
        category=extract_category(text),
    )
    LOGGER.debug("Extracted receipt fields: %s", result.to_dict())
    return result


__all__ = ["ExtractionResult", "RECEIPT_TRANSACTION_TYPE", "extract_fields"]
