"""Transaction request models pre-filled from receipt extraction."""
from __future__ import annotations

import datetime as dt
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .extraction import ExtractionResult

TransactionType = Literal["income", "expense"]


def _strip_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


class TransactionCreate(BaseModel):
    """Payload accepted when a transaction is created."""

    type: TransactionType
    category: str = Field(min_length=1)
    amount: float = Field(ge=0.01)
    date: dt.date
    description: Optional[str] = None

    @field_validator("category")
    @classmethod
    def _category_not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("category must not be blank")
        return stripped

    @field_validator("description")
    @classmethod
    def _trim_description(cls, value: Optional[str]) -> Optional[str]:
        return _strip_text(value)


class TransactionDraft(BaseModel):
    """Transaction form state shown to the user for review."""

    type: TransactionType = "expense"
    category: Optional[str] = None
    amount: Optional[float] = None
    date: Optional[dt.date] = None
    description: Optional[str] = None

    @property
    def missing_fields(self) -> list[str]:
        return [name for name in ("category", "amount", "date") if getattr(self, name) is None]

    def to_create(self) -> TransactionCreate:
        """Validate the reviewed draft into a creation payload."""

        return TransactionCreate.model_validate(self.model_dump())


def draft_from_extraction(result: ExtractionResult) -> TransactionDraft:
    return TransactionDraft(
        type=result.type,
        category=result.category,
        amount=result.amount,
        date=result.date,
        description=_strip_text(result.description),
    )


__all__ = ["TransactionCreate", "TransactionDraft", "draft_from_extraction"]
