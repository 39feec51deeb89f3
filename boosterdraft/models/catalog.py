"""
Card Catalog: card list plus mutable draft configuration.

The catalog owns three pieces of mutable state that operators tune between
draws:
- Supply table: card_id -> copies that may currently be offered
- Weight configuration: per-rarity multipliers, latest-pack and neutral modifiers
- Redraw allowances: class -> redraws granted per draft

INVARIANTS:
- Card ids are unique within a catalog (enforced at construction)
- Every setter is total: values are normalized (clamped), never rejected
- Supply values are always within [0, 3], allowances within [0, 99], weights >= 0
- NaN counts as 0; infinities land on the nearest bound
- Changes are visible to the very next lottery call (no snapshots)
"""

import logging
import math
from collections.abc import Callable, Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from boosterdraft.config import (
    DEFAULT_DECKABLE_COPIES,
    MAX_DECKABLE_COPIES,
    MAX_REDRAW_ALLOWANCE,
    MIN_DECKABLE_COPIES,
    settings,
)
from boosterdraft.models.card import CLASS_DISPLAY_NAMES, Card, CardClass, CardRarity

logger = logging.getLogger(__name__)


class DuplicateCardError(ValueError):
    """Raised when two cards in a catalog share an id."""

    def __init__(self, card_id: int, first_name: str, second_name: str) -> None:
        self.card_id = card_id
        self.first_name = first_name
        self.second_name = second_name
        super().__init__(
            f"Card id {card_id} is used by both '{first_name}' and '{second_name}'"
        )


class WeightProfile(BaseModel):
    """
    Complete lottery weight configuration.

    Used by configuration tooling to read or replace every weight in one
    call instead of poking catalog internals.
    """

    model_config = ConfigDict(frozen=True)

    bronze: float = Field(default=1.0, ge=0.0)
    silver: float = Field(default=1.0, ge=0.0)
    gold: float = Field(default=1.5, ge=0.0)
    legend: float = Field(default=2.0, ge=0.0)
    latest_pack: float = Field(default=1.2, ge=0.0)
    neutral: float = Field(default=0.1, ge=0.0)

    @classmethod
    def from_settings(cls) -> "WeightProfile":
        """Build the profile configured through environment/settings."""
        return cls(
            bronze=settings.bronze_weight,
            silver=settings.silver_weight,
            gold=settings.gold_weight,
            legend=settings.legend_weight,
            latest_pack=settings.latest_pack_weight,
            neutral=settings.neutral_weight,
        )

    def rarity_weights(self) -> dict[CardRarity, float]:
        """Per-rarity multipliers keyed by CardRarity."""
        return {
            CardRarity.BRONZE: self.bronze,
            CardRarity.SILVER: self.silver,
            CardRarity.GOLD: self.gold,
            CardRarity.LEGEND: self.legend,
        }


def _clamp_count(value: float, low: int, high: int) -> int:
    # NaN counts as the floor; infinities land on the nearest bound
    if isinstance(value, float) and not math.isfinite(value):
        return low if math.isnan(value) or value < 0 else high
    return max(low, min(high, int(value)))


def _clamp_copies(value: int) -> int:
    return _clamp_count(value, MIN_DECKABLE_COPIES, MAX_DECKABLE_COPIES)


def _clamp_weight(value: float) -> float:
    # NaN and infinities cannot take part in a cumulative draw
    value = float(value)
    if not math.isfinite(value):
        return 0.0
    return max(0.0, value)


class CardCatalog:
    """
    All cards available to the draft, with their supply and weights.

    Usage:
        catalog = new_catalog(cards)
        catalog.set_available_by_rarity(CardRarity.LEGEND, 1)
        catalog.set_weight(CardRarity.GOLD, 3.0)
    """

    def __init__(
        self,
        cards: Iterable[Card],
        weights: WeightProfile | None = None,
        default_redraw_allowance: int | None = None,
    ) -> None:
        self._cards: tuple[Card, ...] = tuple(cards)
        self._by_id: dict[int, Card] = {}
        for card in self._cards:
            existing = self._by_id.get(card.card_id)
            if existing is not None:
                raise DuplicateCardError(card.card_id, existing.name, card.name)
            self._by_id[card.card_id] = card

        self._supply: dict[int, int] = {c.card_id: _clamp_copies(c.max_copies) for c in self._cards}

        profile = weights if weights is not None else WeightProfile.from_settings()
        self._rarity_weights: dict[CardRarity, float] = {}
        self._latest_pack_weight = 0.0
        self._neutral_weight = 0.0
        self.apply_weight_profile(profile)

        if default_redraw_allowance is None:
            default_redraw_allowance = settings.default_redraw_allowance
        self._default_redraw_allowance = _clamp_count(
            default_redraw_allowance, 0, MAX_REDRAW_ALLOWANCE
        )
        self._redraw_allowances: dict[CardClass, int] = {}

    # -------------------------------------------------------------------------
    # Card access
    # -------------------------------------------------------------------------

    @property
    def cards(self) -> tuple[Card, ...]:
        """All cards, in construction order."""
        return self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._by_id

    def get_card(self, card_id: int) -> Card | None:
        return self._by_id.get(card_id)

    def find_cards(self, predicate: Callable[[Card], bool]) -> list[Card]:
        """All cards matching predicate, ignoring supply."""
        return [card for card in self._cards if predicate(card)]

    @property
    def latest_pack_number(self) -> int:
        """
        Highest pack number present in the catalog.

        Recomputed on every access (O(n)); 0 for an empty catalog.
        """
        return max((card.pack_number for card in self._cards), default=0)

    @staticmethod
    def class_display_name(card_class: CardClass) -> str:
        return CLASS_DISPLAY_NAMES.get(card_class, card_class.name.title())

    # -------------------------------------------------------------------------
    # Supply
    # -------------------------------------------------------------------------

    def get_available(self, card_id: int) -> int:
        """
        Copies of a card that may currently be offered.

        Returns DEFAULT_DECKABLE_COPIES for ids the table has no entry for.
        """
        return self._supply.get(card_id, DEFAULT_DECKABLE_COPIES)

    def set_available(self, card_id: int, value: int) -> None:
        """Set supply for one card id, clamped to [0, 3]. Unknown ids are inserted."""
        self._supply[card_id] = _clamp_copies(value)

    def _set_available_where(self, predicate: Callable[[Card], bool], value: int, group: str) -> int:
        touched = 0
        for card in self._cards:
            if predicate(card):
                self.set_available(card.card_id, value)
                touched += 1

        logger.debug(
            "supply_bulk_update",
            extra={"group": group, "value": _clamp_copies(value), "cards": touched},
        )
        return touched

    def set_available_by_class(self, card_class: CardClass, value: int) -> int:
        """Set supply for every card of a class. Returns the number of cards touched."""
        return self._set_available_where(
            lambda c: c.class_type == card_class, value, f"class:{card_class.name}"
        )

    def set_available_by_pack(self, pack_number: int, value: int) -> int:
        """Set supply for every card of a pack. Returns the number of cards touched."""
        return self._set_available_where(
            lambda c: c.pack_number == pack_number, value, f"pack:{pack_number}"
        )

    def set_available_by_rarity(self, rarity: CardRarity, value: int) -> int:
        """Set supply for every card of a rarity. Returns the number of cards touched."""
        return self._set_available_where(
            lambda c: c.rarity == rarity, value, f"rarity:{rarity.name}"
        )

    def set_available_by_cost(self, cost: int, value: int) -> int:
        """Set supply for every card with a given cost. Returns the number of cards touched."""
        return self._set_available_where(lambda c: c.cost == cost, value, f"cost:{cost}")

    def reset_all_available(self) -> None:
        """Restore every card's supply to its design-time max_copies."""
        for card in self._cards:
            self.set_available(card.card_id, card.max_copies)

    def set_all_unavailable(self) -> None:
        """Remove every card from the lottery (supply 0)."""
        for card in self._cards:
            self.set_available(card.card_id, 0)

    # -------------------------------------------------------------------------
    # Weights
    # -------------------------------------------------------------------------

    def get_weight(self, rarity: CardRarity) -> float:
        return self._rarity_weights.get(rarity, 0.0)

    def set_weight(self, rarity: CardRarity, value: float) -> None:
        """Set a rarity multiplier. Negative and non-finite values become 0."""
        self._rarity_weights[rarity] = _clamp_weight(value)

    @property
    def latest_pack_weight(self) -> float:
        return self._latest_pack_weight

    def set_latest_pack_weight(self, value: float) -> None:
        self._latest_pack_weight = _clamp_weight(value)

    @property
    def neutral_weight(self) -> float:
        return self._neutral_weight

    def set_neutral_weight(self, value: float) -> None:
        self._neutral_weight = _clamp_weight(value)

    def weight_profile(self) -> WeightProfile:
        """Snapshot of the current weight configuration."""
        return WeightProfile(
            bronze=self.get_weight(CardRarity.BRONZE),
            silver=self.get_weight(CardRarity.SILVER),
            gold=self.get_weight(CardRarity.GOLD),
            legend=self.get_weight(CardRarity.LEGEND),
            latest_pack=self._latest_pack_weight,
            neutral=self._neutral_weight,
        )

    def apply_weight_profile(self, profile: WeightProfile) -> None:
        """Replace every weight with the values from profile."""
        for rarity, weight in profile.rarity_weights().items():
            self.set_weight(rarity, weight)
        self.set_latest_pack_weight(profile.latest_pack)
        self.set_neutral_weight(profile.neutral)

    # -------------------------------------------------------------------------
    # Redraw allowances
    # -------------------------------------------------------------------------

    def get_redraw_allowance(self, card_class: CardClass) -> int:
        return self._redraw_allowances.get(card_class, self._default_redraw_allowance)

    def set_redraw_allowance(self, card_class: CardClass, value: int) -> None:
        """Set redraws granted to a class, clamped to [0, MAX_REDRAW_ALLOWANCE]."""
        self._redraw_allowances[card_class] = _clamp_count(value, 0, MAX_REDRAW_ALLOWANCE)


def new_catalog(cards: Iterable[Card]) -> CardCatalog:
    """
    Build a catalog with default weights and full supply.

    Args:
        cards: Parsed card records

    Returns:
        CardCatalog with each card's supply seeded from its max_copies

    Raises:
        DuplicateCardError: If two cards share an id
    """
    catalog = CardCatalog(cards)
    logger.info(
        "catalog_created",
        extra={"cards": len(catalog), "latest_pack": catalog.latest_pack_number},
    )
    return catalog
