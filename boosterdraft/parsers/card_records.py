"""
Card record import.

Card records arrive already parsed from the asset pipeline as JSON objects:

    {"id": 10201, "cost": 2, "name": "Forest Archer", "text": "...", "max_copies": 3}

Records are validated before any Card is built.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from boosterdraft.models.card import MAX_CARD_ID, Card, CardRarity


class CardRecordError(ValueError):
    """Raised when a card record fails validation."""

    def __init__(self, index: int, detail: str) -> None:
        self.index = index
        self.detail = detail
        super().__init__(f"Invalid card record at index {index}: {detail}")


class CardRecord(BaseModel):
    """One card as delivered by the asset pipeline."""

    id: int = Field(..., gt=0, le=MAX_CARD_ID)
    cost: int = Field(..., ge=0)
    name: str = Field(..., min_length=1)
    text: str = ""
    max_copies: int = Field(default=3, ge=0, le=3)

    @field_validator("id")
    @classmethod
    def _rarity_digit_known(cls, value: int) -> int:
        if (value // 10) % 10 > max(CardRarity):
            raise ValueError(f"rarity digit of {value} is not a known rarity")
        return value

    def to_card(self) -> Card:
        return Card(
            card_id=self.id,
            cost=self.cost,
            name=self.name,
            text=self.text,
            max_copies=self.max_copies,
        )


def parse_card_records(raw: list[dict[str, Any]]) -> list[Card]:
    """
    Validate raw records and build cards.

    Raises:
        CardRecordError: On the first invalid record
    """
    cards: list[Card] = []
    for index, item in enumerate(raw):
        try:
            record = CardRecord.model_validate(item)
        except ValidationError as e:
            raise CardRecordError(index, str(e)) from e
        cards.append(record.to_card())
    return cards


def load_card_records(path: Path) -> list[Card]:
    """
    Load cards from a JSON array file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        CardRecordError: If the file is not a JSON array or a record is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Card record file not found at {path}")

    with open(path, encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise CardRecordError(-1, f"expected a JSON array, got {type(raw).__name__}")

    return parse_card_records(raw)
