"""
Card Filter Query: supply-aware read-only filters over a catalog.

INVARIANTS:
- Cards with current supply 0 never appear in a result
- Results keep catalog order
- Filters are pure (no catalog mutation)
"""

from boosterdraft.models.card import Card, CardClass, CardRarity
from boosterdraft.models.catalog import CardCatalog


def cards_by_class(catalog: CardCatalog, *classes: CardClass) -> list[Card]:
    """
    Cards belonging to any of the given classes with supply > 0.

    Returns an empty list when no class is given.
    """
    if not classes:
        return []

    wanted = set(classes)
    return [
        card
        for card in catalog
        if card.class_type in wanted and catalog.get_available(card.card_id) > 0
    ]


def cards_by_rarity(catalog: CardCatalog, *rarities: CardRarity) -> list[Card]:
    """
    Cards of any of the given rarities with supply > 0.

    Returns an empty list when no rarity is given.
    """
    if not rarities:
        return []

    wanted = set(rarities)
    return [
        card
        for card in catalog
        if card.rarity in wanted and catalog.get_available(card.card_id) > 0
    ]
