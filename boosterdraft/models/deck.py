from collections.abc import Iterable
from dataclasses import dataclass

from boosterdraft.config import MAX_CURVE_COST
from boosterdraft.models.card import Card, CardClass


@dataclass
class PickedCardEntry:
    """A drafted card and how many copies of it were picked."""

    card: Card
    count: int = 1


class DeckAccumulator:
    """
    The deck being drafted.

    Entries are unique per card id and kept sorted by (cost, card_id).
    Two Card objects with the same id count as the same card.
    """

    def __init__(self) -> None:
        self._entries: list[PickedCardEntry] = []
        self.selected_class: CardClass | None = None

    def add_picked_card(self, card: Card | None) -> None:
        """Add one copy of card, merging with an existing entry for its id."""
        if card is None:
            return

        for entry in self._entries:
            if entry.card.card_id == card.card_id:
                entry.count += 1
                break
        else:
            self._entries.append(PickedCardEntry(card=card))

        # list.sort is stable, so equal keys keep insertion order
        self._entries.sort(key=lambda e: e.card.sort_key)

    def add_picked_cards(self, cards: Iterable[Card | None]) -> None:
        for card in cards:
            self.add_picked_card(card)

    def entries(self) -> list[PickedCardEntry]:
        """Current entries, sorted by (cost, card_id)."""
        return list(self._entries)

    def count_of(self, card: Card) -> int:
        for entry in self._entries:
            if entry.card.card_id == card.card_id:
                return entry.count
        return 0

    def total_cards(self) -> int:
        """Total cards across all copies."""
        return sum(entry.count for entry in self._entries)

    def unique_cards(self) -> int:
        return len(self._entries)

    def cost_curve(self, max_cost: int = MAX_CURVE_COST) -> list[int]:
        """
        Card counts per cost, index = cost.

        Costs above max_cost are counted in the last bucket.
        """
        curve = [0] * (max_cost + 1)
        for entry in self._entries:
            curve[min(entry.card.cost, max_cost)] += entry.count
        return curve

    def reset_deck(self) -> None:
        """Forget every pick and the selected class."""
        self._entries.clear()
        self.selected_class = None
