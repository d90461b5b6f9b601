"""Receipt field extraction for the personal finance tracker."""
from .extraction import ExtractionResult, extract_fields
from .taxonomy import CATEGORY_KEYWORDS, CATEGORY_NAMES

__all__ = ["CATEGORY_KEYWORDS", "CATEGORY_NAMES", "ExtractionResult", "extract_fields"]
