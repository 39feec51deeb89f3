"""
Tests for the Deck Accumulator.

INVARIANT: one entry per card id.
INVARIANT: entries stay sorted by (cost, card_id) after every insert.
"""

import random

from boosterdraft.models.card import Card, CardClass
from boosterdraft.models.deck import DeckAccumulator, PickedCardEntry


def entry_ids(deck: DeckAccumulator) -> list[tuple[int, int]]:
    return [(e.card.card_id, e.count) for e in deck.entries()]


class TestAddPickedCard:
    def test_same_instance_twice_merges(self) -> None:
        card = Card(card_id=10100, cost=2, name="Elf Scout")
        deck = DeckAccumulator()

        deck.add_picked_card(card)
        deck.add_picked_card(card)

        assert entry_ids(deck) == [(10100, 2)]

    def test_equal_id_different_instance_merges(self) -> None:
        deck = DeckAccumulator()

        deck.add_picked_card(Card(card_id=10100, cost=2, name="Elf Scout"))
        deck.add_picked_card(Card(card_id=10100, cost=2, name="Elf Scout"))

        assert entry_ids(deck) == [(10100, 2)]

    def test_none_is_ignored(self) -> None:
        deck = DeckAccumulator()
        deck.add_picked_card(None)
        assert deck.entries() == []

    def test_sorted_by_cost_then_id(self) -> None:
        deck = DeckAccumulator()
        deck.add_picked_cards(
            [
                Card(card_id=10120, cost=3, name="c"),
                Card(card_id=10110, cost=1, name="b"),
                Card(card_id=10100, cost=3, name="a"),
                Card(card_id=1100, cost=1, name="n"),
            ]
        )

        assert [e.card.card_id for e in deck.entries()] == [1100, 10110, 10100, 10120]

    def test_sorted_after_every_insert(self) -> None:
        rng = random.Random(3)
        cards = [
            Card(card_id=10100 + (i % 4) * 10 + i // 4, cost=rng.randint(0, 9), name=str(i))
            for i in range(12)
        ]
        deck = DeckAccumulator()

        for card in cards:
            deck.add_picked_card(card)
            keys = [e.card.sort_key for e in deck.entries()]
            assert keys == sorted(keys)

    def test_entries_returns_copy(self) -> None:
        deck = DeckAccumulator()
        deck.add_picked_card(Card(card_id=10100, cost=1, name="a"))

        deck.entries().clear()

        assert len(deck.entries()) == 1


class TestAggregates:
    def test_totals(self) -> None:
        deck = DeckAccumulator()
        a = Card(card_id=10100, cost=1, name="a")
        b = Card(card_id=10110, cost=2, name="b")
        deck.add_picked_cards([a, a, b])

        assert deck.total_cards() == 3
        assert deck.unique_cards() == 2
        assert deck.count_of(a) == 2
        assert deck.count_of(Card(card_id=10120, cost=1, name="z")) == 0

    def test_cost_curve(self) -> None:
        deck = DeckAccumulator()
        deck.add_picked_cards(
            [
                Card(card_id=10100, cost=0, name="a"),
                Card(card_id=10110, cost=2, name="b"),
                Card(card_id=10110, cost=2, name="b"),
                Card(card_id=10120, cost=12, name="c"),
            ]
        )

        curve = deck.cost_curve()

        assert len(curve) == 11
        assert curve[0] == 1
        assert curve[2] == 2
        assert curve[10] == 1
        assert sum(curve) == deck.total_cards()

    def test_entry_defaults_to_one(self) -> None:
        entry = PickedCardEntry(card=Card(card_id=10100, cost=1, name="a"))
        assert entry.count == 1


class TestReset:
    def test_reset_clears_entries_and_class(self) -> None:
        deck = DeckAccumulator()
        deck.selected_class = CardClass.ELF
        deck.add_picked_card(Card(card_id=10100, cost=1, name="a"))

        deck.reset_deck()

        assert deck.entries() == []
        assert deck.selected_class is None
        assert deck.total_cards() == 0
