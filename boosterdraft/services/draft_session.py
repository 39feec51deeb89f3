"""
Draft Session: one player's run through a draft.

Flow:
1. select_class() grants the class pick (2 Gold/Legend cards) and deals
   the first offer
2. Each offer is 4 cards split into a left and a right pair
3. pick(side) adds that pair to the deck and deals the next offer
4. redraw() re-deals the current pick while redraws remain
5. After 19 picks the session is complete (2 + 19 x 2 = 40 cards)

The session owns no global state; the catalog is passed in and shared.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum

from boosterdraft.models.card import Card, CardClass, CardRarity
from boosterdraft.models.catalog import CardCatalog
from boosterdraft.models.deck import DeckAccumulator
from boosterdraft.services.lottery import pick_class_cards, pick_main_class_cards
from boosterdraft.services.pick_sequence import PickSequenceManager

logger = logging.getLogger(__name__)


class PickSide(str, Enum):
    """Which pair of an offer the player takes."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class PickOffer:
    """Cards dealt for one pick, as two pairs."""

    pick_number: int
    rarities: tuple[CardRarity, ...]
    left: tuple[Card, ...] = field(default_factory=tuple)
    right: tuple[Card, ...] = field(default_factory=tuple)

    def cards_for(self, side: PickSide) -> tuple[Card, ...]:
        return self.left if side == PickSide.LEFT else self.right

    def all_cards(self) -> tuple[Card, ...]:
        return self.left + self.right

    def is_empty(self) -> bool:
        return not self.left and not self.right


def split_offer(cards: list[Card]) -> tuple[tuple[Card, ...], tuple[Card, ...]]:
    """Split dealt cards into (left, right): first half and the rest."""
    half = (len(cards) + 1) // 2
    return tuple(cards[:half]), tuple(cards[half:])


class DraftSession:
    """
    Drives catalog, pick sequence and deck through one draft.

    Usage:
        session = DraftSession(catalog, rng=random.Random(7))
        session.select_class(CardClass.ELF)
        while not session.is_complete:
            session.pick(PickSide.LEFT)
        entries = session.deck.entries()
    """

    def __init__(
        self,
        catalog: CardCatalog,
        rng: random.Random | None = None,
        deck: DeckAccumulator | None = None,
        sequence: PickSequenceManager | None = None,
    ) -> None:
        self.catalog = catalog
        self.rng = rng
        self.deck = deck if deck is not None else DeckAccumulator()
        self.sequence = sequence if sequence is not None else PickSequenceManager()
        self._offer: PickOffer | None = None

    @property
    def selected_class(self) -> CardClass | None:
        return self.deck.selected_class

    @property
    def offer(self) -> PickOffer | None:
        """The offer currently on the table, if any."""
        return self._offer

    @property
    def is_complete(self) -> bool:
        return self.sequence.is_complete

    def select_class(self, card_class: CardClass) -> list[Card]:
        """
        Start a new draft for card_class.

        Resets deck and sequence, grants the class pick and deals the first
        offer.

        Returns:
            The class pick cards added to the deck
        """
        self.deck.reset_deck()
        self.sequence.reset_sequence()
        self.deck.selected_class = card_class
        self.sequence.set_current_redraw(self.catalog, card_class)

        class_cards = pick_class_cards(self.catalog, card_class, self.rng)
        self.deck.add_picked_cards(class_cards)

        logger.info(
            "draft_started",
            extra={
                "card_class": card_class.name,
                "class_cards": [c.card_id for c in class_cards],
                "redraws": self.sequence.current_redraw_count,
            },
        )

        self.deal()
        return class_cards

    def _deal_with(self, rarities: tuple[CardRarity, ...]) -> PickOffer | None:
        if self.deck.selected_class is None or not rarities:
            self._offer = None
            return None

        cards = pick_main_class_cards(
            self.catalog, self.deck.selected_class, rarities, rng=self.rng
        )
        left, right = split_offer(cards)
        self._offer = PickOffer(
            pick_number=self.sequence.current_pick_number,
            rarities=rarities,
            left=left,
            right=right,
        )
        if len(cards) == 0:
            logger.warning(
                "empty_offer",
                extra={"pick": self._offer.pick_number, "rarities": [r.name for r in rarities]},
            )
        return self._offer

    def deal(self) -> PickOffer | None:
        """
        Deal the offer for the next pick.

        Returns None when no class is selected or the draft is complete.
        """
        return self._deal_with(self.sequence.next_pick_rarities())

    def pick(self, side: PickSide) -> list[Card]:
        """
        Take one side of the current offer.

        Returns:
            Cards added to the deck; empty when there is no offer to pick from
        """
        if self._offer is None or self.is_complete:
            logger.warning("pick_without_offer", extra={"side": side.value})
            return []

        chosen = list(self._offer.cards_for(side))
        self.deck.add_picked_cards(chosen)
        self.sequence.increment_pick()
        self._offer = None

        logger.debug(
            "card_pair_picked",
            extra={
                "side": side.value,
                "cards": [c.card_id for c in chosen],
                "remaining": self.sequence.remaining_picks(),
            },
        )

        if not self.is_complete:
            self.deal()
        return chosen

    def redraw(self) -> PickOffer | None:
        """
        Re-deal the current pick, spending one redraw.

        Returns None (offer unchanged) when the draft is complete, nothing is
        on the table, or no redraws remain.
        """
        if self.is_complete or self._offer is None:
            return None
        if not self.sequence.consume_redraw():
            logger.info("redraw_refused", extra={"pick": self.sequence.current_pick_number})
            return None
        return self._deal_with(self.sequence.redraw_rarities())
