"""
Card metadata.

A card's class, pack, rarity and sub id are all encoded in its 5-digit id
``CPPRS`` (Neutral ids carry a leading zero, e.g. 01321 == 1321):

    C  = class  (id // 10000)
    PP = pack   ((id // 100) % 100)
    R  = rarity ((id // 10) % 10)
    S  = sub id (id % 10)

    21322 -> Royal / pack 13 / Gold / sub id 2

INVARIANTS:
- Cards are frozen once created
- Derived attributes are computed from card_id, never stored
- The class and rarity digits of card_id map onto CardClass / CardRarity
"""

from dataclasses import dataclass
from enum import IntEnum


class CardClass(IntEnum):
    """Class a card belongs to (leading digit of the card id)."""

    NEUTRAL = 0
    ELF = 1
    ROYAL = 2
    WITCH = 3
    DRAGON = 4
    NIGHTMARE = 5
    BISHOP = 6
    NEMESIS = 7


class CardRarity(IntEnum):
    """Rarity tier (tens digit of the card id). Ordered Bronze < Legend."""

    BRONZE = 0
    SILVER = 1
    GOLD = 2
    LEGEND = 3


# Display names shown on the class selection screen
CLASS_DISPLAY_NAMES: dict[CardClass, str] = {
    CardClass.NEUTRAL: "ニュートラル",
    CardClass.ELF: "エルフ",
    CardClass.ROYAL: "ロイヤル",
    CardClass.WITCH: "ウィッチ",
    CardClass.DRAGON: "ドラゴン",
    CardClass.NIGHTMARE: "ナイトメア",
    CardClass.BISHOP: "ビショップ",
    CardClass.NEMESIS: "ネメシス",
}

# Classes a player can draft (Neutral is always mixed in, never chosen)
PLAYABLE_CLASSES: tuple[CardClass, ...] = tuple(c for c in CardClass if c != CardClass.NEUTRAL)

# Largest id whose leading digit is still a known class
MAX_CARD_ID = (max(CardClass) + 1) * 10000 - 1


@dataclass(frozen=True, slots=True)
class Card:
    """
    A single card definition.

    Attributes:
        card_id: 5-digit id encoding class, pack, rarity and sub id
        cost: Play cost (>= 0)
        name: Display name
        text: Effect text
        max_copies: Design-time copy cap (0-3)
    """

    card_id: int
    cost: int
    name: str
    text: str = ""
    max_copies: int = 3

    def __post_init__(self) -> None:
        """Reject ids whose digits do not decode to a class and rarity."""
        if not 0 < self.card_id <= MAX_CARD_ID:
            raise ValueError(f"Card id {self.card_id} is outside 1..{MAX_CARD_ID}")
        if (self.card_id // 10) % 10 > max(CardRarity):
            raise ValueError(f"Card id {self.card_id} has no valid rarity digit")
        if self.cost < 0:
            raise ValueError(f"Card {self.card_id} has negative cost {self.cost}")
        if not 0 <= self.max_copies <= 3:
            raise ValueError(f"Card {self.card_id} has invalid max_copies {self.max_copies}")

    @property
    def class_type(self) -> CardClass:
        return CardClass(self.card_id // 10000)

    @property
    def pack_number(self) -> int:
        return (self.card_id // 100) % 100

    @property
    def rarity(self) -> CardRarity:
        return CardRarity((self.card_id // 10) % 10)

    @property
    def sub_id(self) -> int:
        """Last digit, disambiguates cards sharing class/pack/rarity."""
        return self.card_id % 10

    @property
    def sort_key(self) -> tuple[int, int]:
        """Deck ordering: cost ascending, then id ascending."""
        return (self.cost, self.card_id)

    def describe(self) -> str:
        """Multi-line summary for debug logging."""
        return (
            "[Card Info]\n"
            f"ID: {self.card_id}\n"
            f"Class: {self.class_type.name.title()}\n"
            f"Pack: {self.pack_number}\n"
            f"Rarity: {self.rarity.name.title()}\n"
            f"Name: {self.name}\n"
            f"Text: {self.text}\n"
            f"Max Copies: {self.max_copies}"
        )
