import random
from collections.abc import Callable

import pytest

from boosterdraft.models.card import Card, CardClass, CardRarity
from boosterdraft.models.catalog import CardCatalog, WeightProfile
from boosterdraft.services import lottery as lottery_module

CardFactory = Callable[..., Card]


def card_id_for(card_class: CardClass, pack: int, rarity: CardRarity, sub_id: int = 0) -> int:
    """Compose a card id from its encoded parts."""
    return card_class * 10000 + pack * 100 + rarity * 10 + sub_id


@pytest.fixture(autouse=True)
def clear_lottery_metrics():
    """Keep lottery metrics from leaking between tests."""
    lottery_module.reset_lottery_metrics()
    yield
    lottery_module.reset_lottery_metrics()


@pytest.fixture
def make_card() -> CardFactory:
    """Factory building a card from its id parts."""

    def _make(
        card_class: CardClass,
        pack: int = 1,
        rarity: CardRarity = CardRarity.BRONZE,
        sub_id: int = 0,
        cost: int = 1,
        max_copies: int = 3,
    ) -> Card:
        card_id = card_id_for(card_class, pack, rarity, sub_id)
        return Card(
            card_id=card_id,
            cost=cost,
            name=f"{card_class.name.title()} {rarity.name.title()} {pack}-{sub_id}",
            text="",
            max_copies=max_copies,
        )

    return _make


@pytest.fixture
def default_weights() -> WeightProfile:
    """Weights fixed to the documented defaults, independent of environment."""
    return WeightProfile()


@pytest.fixture
def rich_catalog(make_card: CardFactory, default_weights: WeightProfile) -> CardCatalog:
    """
    Every class x packs 1-2 x every rarity x 4 sub ids.

    Large enough that no draw in a full draft ever runs dry.
    """
    cards = [
        make_card(card_class, pack, rarity, sub_id, cost=(sub_id + rarity) % 8)
        for card_class in CardClass
        for pack in (1, 2)
        for rarity in CardRarity
        for sub_id in range(4)
    ]
    return CardCatalog(cards, weights=default_weights, default_redraw_allowance=3)


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator so draws are reproducible."""
    return random.Random(1234)


class FixedRandom(random.Random):
    """Generator whose random() always returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__()
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def fixed_random() -> Callable[[float], random.Random]:
    return FixedRandom
