"""Field extraction helpers for structured receipt data."""
from .amount import extract_amount
from .category import extract_category
from .date import extract_date
from .description import extract_description

__all__ = ["extract_amount", "extract_category", "extract_date", "extract_description"]
