from __future__ import annotations

import pytest

from receipt_fields.field_extractors import extract_category
from receipt_fields.taxonomy import CATEGORY_KEYWORDS, CATEGORY_NAMES, is_known_category


def test_declared_order_breaks_ties() -> None:
    assert extract_category("1 Pizza 9.99\n1 Milk 2.00") == "groceries"


def test_shared_keyword_goes_to_first_category() -> None:
    assert extract_category("FAST FOOD") == "groceries"
    assert extract_category("Gas station") == "transportation"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Dinner for two", "restaurants"),
        ("UBER TRIP", "transportation"),
        ("Running SHOES", "shopping"),
        ("Electricity bill", "utilities"),
        ("CINEMA CITY", "entertainment"),
        ("City Pharmacy", "healthcare"),
    ],
)
def test_categories(text: str, expected: str) -> None:
    assert extract_category(text) == expected


def test_no_keyword() -> None:
    assert extract_category("Invoice 42\nTOTAL 10.00") is None
    assert extract_category("") is None


def test_taxonomy_is_read_only() -> None:
    assert CATEGORY_NAMES == (
        "groceries",
        "restaurants",
        "transportation",
        "shopping",
        "utilities",
        "entertainment",
        "healthcare",
    )
    with pytest.raises(TypeError):
        CATEGORY_KEYWORDS["misc"] = ("misc",)  # type: ignore[index]
    assert is_known_category("groceries")
    assert not is_known_category("misc")


def test_custom_taxonomy() -> None:
    taxonomy = {"office": ("paper", "toner")}
    assert extract_category("A4 PAPER", taxonomy=taxonomy) == "office"
