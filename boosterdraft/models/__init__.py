from boosterdraft.models.card import (
    CLASS_DISPLAY_NAMES,
    MAX_CARD_ID,
    PLAYABLE_CLASSES,
    Card,
    CardClass,
    CardRarity,
)
from boosterdraft.models.catalog import (
    CardCatalog,
    DuplicateCardError,
    WeightProfile,
    new_catalog,
)
from boosterdraft.models.deck import DeckAccumulator, PickedCardEntry

__all__ = [
    "CLASS_DISPLAY_NAMES",
    "Card",
    "CardCatalog",
    "CardClass",
    "CardRarity",
    "DeckAccumulator",
    "DuplicateCardError",
    "MAX_CARD_ID",
    "PLAYABLE_CLASSES",
    "PickedCardEntry",
    "WeightProfile",
    "new_catalog",
]
