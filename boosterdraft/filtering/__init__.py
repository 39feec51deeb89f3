"""
Card filtering over a catalog.

Filters only ever read the catalog; supply 0 cards are excluded.
"""

from boosterdraft.filtering.card_query import cards_by_class, cards_by_rarity

__all__ = [
    "cards_by_class",
    "cards_by_rarity",
]
