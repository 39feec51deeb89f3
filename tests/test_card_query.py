"""
Tests for the supply-aware card filters.

These tests verify:
- Class and rarity selection
- Supply 0 cards are excluded
- Catalog order is preserved
- Empty selectors give empty results
"""

import pytest

from boosterdraft.filtering.card_query import cards_by_class, cards_by_rarity
from boosterdraft.models.card import Card, CardClass, CardRarity
from boosterdraft.models.catalog import CardCatalog, WeightProfile


@pytest.fixture
def catalog() -> CardCatalog:
    return CardCatalog(
        [
            Card(card_id=10110, cost=2, name="Elf Silver"),
            Card(card_id=1100, cost=1, name="Neutral Bronze"),
            Card(card_id=40100, cost=3, name="Dragon Bronze"),
            Card(card_id=10100, cost=1, name="Elf Bronze"),
            Card(card_id=20130, cost=9, name="Royal Legend", max_copies=0),
        ],
        weights=WeightProfile(),
    )


class TestCardsByClass:
    def test_single_class(self, catalog: CardCatalog) -> None:
        result = cards_by_class(catalog, CardClass.ELF)
        assert [c.card_id for c in result] == [10110, 10100]

    def test_multiple_classes_keep_catalog_order(self, catalog: CardCatalog) -> None:
        result = cards_by_class(catalog, CardClass.ELF, CardClass.NEUTRAL)
        assert [c.card_id for c in result] == [10110, 1100, 10100]

    def test_zero_supply_excluded(self, catalog: CardCatalog) -> None:
        catalog.set_available(10100, 0)
        result = cards_by_class(catalog, CardClass.ELF)
        assert [c.card_id for c in result] == [10110]

    def test_max_copies_zero_excluded_from_start(self, catalog: CardCatalog) -> None:
        assert cards_by_class(catalog, CardClass.ROYAL) == []

    def test_no_classes(self, catalog: CardCatalog) -> None:
        assert cards_by_class(catalog) == []

    def test_does_not_mutate_catalog(self, catalog: CardCatalog) -> None:
        before = [catalog.get_available(c.card_id) for c in catalog]
        cards_by_class(catalog, CardClass.ELF, CardClass.DRAGON)
        after = [catalog.get_available(c.card_id) for c in catalog]
        assert before == after


class TestCardsByRarity:
    def test_single_rarity(self, catalog: CardCatalog) -> None:
        result = cards_by_rarity(catalog, CardRarity.BRONZE)
        assert [c.card_id for c in result] == [1100, 40100, 10100]

    def test_multiple_rarities(self, catalog: CardCatalog) -> None:
        result = cards_by_rarity(catalog, CardRarity.SILVER, CardRarity.LEGEND)
        # Royal Legend has no supply
        assert [c.card_id for c in result] == [10110]

    def test_supply_restored_card_returns(self, catalog: CardCatalog) -> None:
        catalog.set_available(20130, 1)
        result = cards_by_rarity(catalog, CardRarity.LEGEND)
        assert [c.card_id for c in result] == [20130]

    def test_no_rarities(self, catalog: CardCatalog) -> None:
        assert cards_by_rarity(catalog) == []
