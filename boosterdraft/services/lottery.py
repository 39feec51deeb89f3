"""
Booster Lottery: weighted rarity-then-card draws.

Every draw runs in two stages:
1. Roulette-wheel draw of a rarity tier, weighted by the catalog's rarity weights
2. Roulette-wheel draw of a card of that tier, weighted by latest-pack and
   neutral-class modifiers

When every requested rarity runs dry, the request is widened with the lowest
rarity not yet requested (Bronze < Silver < Gold < Legend) and the whole draw
restarts. After all four tiers have been requested, whatever the final pass
collected is returned.

INVARIANTS:
- A draw never returns the same card twice
- len(result) <= count and <= number of eligible cards in the class pool
- At most three expansions per call (four rarity tiers), so draws always end
- No exceptions: bad arguments give [], exhaustion gives a partial result
"""

import logging
import random
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from boosterdraft.config import METRICS_HISTORY_LIMIT, settings
from boosterdraft.filtering.card_query import cards_by_class
from boosterdraft.models.card import Card, CardClass, CardRarity
from boosterdraft.models.catalog import CardCatalog

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Shared source used when callers do not inject their own generator
_shared_rng = random.Random()

# Rarities the class pick draws from
CLASS_PICK_RARITIES: tuple[CardRarity, ...] = (CardRarity.GOLD, CardRarity.LEGEND)


@dataclass
class LotteryMetrics:
    """Metrics recorded per draw call."""

    requested_count: int = 0
    requested_rarities: tuple[CardRarity, ...] = ()
    final_rarities: tuple[CardRarity, ...] = ()
    pool_size: int = 0
    expansions: int = 0
    returned_count: int = 0


# Module-level metrics accumulator, oldest entries dropped past the limit
_metrics_history: deque[LotteryMetrics] = deque(maxlen=METRICS_HISTORY_LIMIT)


def get_lottery_metrics() -> list[LotteryMetrics]:
    """Get recorded metrics, oldest first."""
    return list(_metrics_history)


def reset_lottery_metrics() -> None:
    """Reset metrics history (for testing)."""
    _metrics_history.clear()


# =============================================================================
# ROULETTE-WHEEL SAMPLING
# =============================================================================


def _roulette(weighted: Sequence[tuple[T, float]], rng: random.Random) -> T | None:
    """
    Pick one item by cumulative weight.

    Draws u uniformly from [0, total) and returns the first item whose
    running sum satisfies u <= cumulative. Items with weight <= 0 never win.
    Returns None when no item has positive weight.
    """
    positive = [(item, weight) for item, weight in weighted if weight > 0]
    if not positive:
        return None

    total = sum(weight for _, weight in positive)
    draw_value = rng.random() * total

    cumulative = 0.0
    for item, weight in positive:
        cumulative += weight
        if draw_value <= cumulative:
            return item

    # Float rounding can leave draw_value a hair above the final sum
    return positive[-1][0]


def weighted_rarity_draw(
    catalog: CardCatalog,
    rarities: Sequence[CardRarity],
    rng: random.Random | None = None,
) -> CardRarity | None:
    """
    Draw one rarity using the catalog's rarity weights.

    Returns None when every rarity in the set has weight 0.
    """
    if rng is None:
        rng = _shared_rng
    return _roulette([(rarity, catalog.get_weight(rarity)) for rarity in rarities], rng)


def card_weight(card: Card, catalog: CardCatalog, latest_pack: int | None = None) -> float:
    """
    Lottery weight of a single card.

    1.0, times latest_pack_weight for cards of the newest pack,
    times neutral_weight for Neutral cards.
    """
    if latest_pack is None:
        latest_pack = catalog.latest_pack_number

    weight = 1.0
    if card.pack_number == latest_pack:
        weight *= catalog.latest_pack_weight
    if card.class_type == CardClass.NEUTRAL:
        weight *= catalog.neutral_weight
    return weight


def weighted_card_draw(
    catalog: CardCatalog,
    cards: Sequence[Card],
    rng: random.Random | None = None,
    latest_pack: int | None = None,
) -> Card | None:
    """
    Draw one card weighted by card_weight().

    Returns None when cards is empty or every card weighs 0.
    """
    if rng is None:
        rng = _shared_rng
    if latest_pack is None:
        latest_pack = catalog.latest_pack_number
    return _roulette([(card, card_weight(card, catalog, latest_pack)) for card in cards], rng)


# =============================================================================
# DRAW
# =============================================================================


def _next_expansion(requested: Sequence[CardRarity]) -> CardRarity | None:
    """Lowest rarity tier not yet requested, or None when all four are in."""
    for rarity in sorted(CardRarity):
        if rarity not in requested:
            return rarity
    return None


def _draw_pass(
    catalog: CardCatalog,
    pool: Sequence[Card],
    count: int,
    rarities: Sequence[CardRarity],
    rng: random.Random,
    latest_pack: int,
) -> list[Card]:
    """
    One pass of the two-stage draw over a fixed rarity request.

    Stops when count cards are picked or every rarity has been dropped.
    """
    picked: list[Card] = []
    picked_ids: set[int] = set()
    remaining = list(rarities)

    while len(picked) < count and remaining:
        selected = weighted_rarity_draw(catalog, remaining, rng)
        if selected is None:
            # Only zero-weight rarities are left; none of them can ever be drawn
            remaining = [r for r in remaining if catalog.get_weight(r) > 0]
            continue

        candidates = [
            card for card in pool if card.rarity == selected and card.card_id not in picked_ids
        ]
        card = weighted_card_draw(catalog, candidates, rng, latest_pack)
        if card is None:
            # Tier exhausted for this pool (or every candidate weighs 0)
            remaining.remove(selected)
            continue

        picked.append(card)
        picked_ids.add(card.card_id)

    return picked


def draw(
    catalog: CardCatalog,
    count: int,
    classes: Sequence[CardClass],
    rarities: Sequence[CardRarity],
    rng: random.Random | None = None,
) -> list[Card]:
    """
    Draw up to count distinct cards of the given classes and rarities.

    Args:
        catalog: Catalog providing cards, supply and weights
        count: Number of cards wanted (> 0)
        classes: Classes the cards may belong to
        rarities: Rarity tiers to draw from, in priority order
        rng: Random source; defaults to the module's shared generator

    Returns:
        Distinct cards in draw order. Fewer than count when the pool is
        exhausted even after widening to all four rarities; empty on invalid
        arguments.
    """
    if count <= 0 or not classes or not rarities:
        return []
    if rng is None:
        rng = _shared_rng

    pool = cards_by_class(catalog, *dict.fromkeys(classes))
    requested = list(dict.fromkeys(rarities))
    metrics = LotteryMetrics(
        requested_count=count,
        requested_rarities=tuple(requested),
        pool_size=len(pool),
    )
    latest_pack = catalog.latest_pack_number

    while True:
        picked = _draw_pass(catalog, pool, count, requested, rng, latest_pack)
        if len(picked) >= count:
            break

        expansion = _next_expansion(requested)
        if expansion is None:
            logger.warning(
                "lottery_exhausted",
                extra={"requested": count, "returned": len(picked), "pool": len(pool)},
            )
            break

        requested.append(expansion)
        metrics.expansions += 1
        logger.debug(
            "rarity_expanded",
            extra={"added": expansion.name, "rarities": [r.name for r in requested]},
        )

    metrics.final_rarities = tuple(requested)
    metrics.returned_count = len(picked)
    _metrics_history.append(metrics)

    logger.info(
        "lottery_draw",
        extra={
            "requested": count,
            "returned": len(picked),
            "classes": [c.name for c in classes],
            "rarities": [r.name for r in metrics.requested_rarities],
            "expansions": metrics.expansions,
        },
    )

    return picked


def pick_class_cards(
    catalog: CardCatalog,
    card_class: CardClass,
    rng: random.Random | None = None,
) -> list[Card]:
    """Gold/Legend cards granted on class selection, drawn from Neutral + card_class."""
    return draw(
        catalog,
        settings.class_pick_size,
        (CardClass.NEUTRAL, card_class),
        CLASS_PICK_RARITIES,
        rng,
    )


def pick_main_class_cards(
    catalog: CardCatalog,
    card_class: CardClass,
    rarities: Sequence[CardRarity],
    count: int | None = None,
    rng: random.Random | None = None,
) -> list[Card]:
    """
    Cards offered for one pick, drawn from Neutral + card_class.

    Returns an empty list when rarities is empty (draft already finished).
    """
    if count is None:
        count = settings.pick_offer_size
    return draw(catalog, count, (CardClass.NEUTRAL, card_class), rarities, rng)
