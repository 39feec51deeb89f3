"""
Pick Sequence: which rarities each pick of a draft offers.

A draft is 19 picks long. PICK_SCHEDULE maps the 1-based pick number to the
rarity tiers offered at that pick; it is fixed and never mutated.

State machine:
    pick_index 0 (nothing picked) -> ... -> 19 (terminal, draft complete)

The manager also tracks how many redraws remain for the active class.
"""

from types import MappingProxyType

from boosterdraft.config import MAX_PICK_COUNT, settings
from boosterdraft.models.card import CardClass, CardRarity
from boosterdraft.models.catalog import CardCatalog

_B = CardRarity.BRONZE
_S = CardRarity.SILVER
_G = CardRarity.GOLD
_L = CardRarity.LEGEND

PICK_SCHEDULE: MappingProxyType[int, tuple[CardRarity, ...]] = MappingProxyType(
    {
        1: (_B,),
        2: (_S,),
        3: (_B,),
        4: (_S,),
        5: (_B,),
        6: (_G,),
        7: (_B,),
        8: (_S,),
        9: (_B,),
        10: (_S,),
        11: (_G, _L),
        12: (_B,),
        13: (_S,),
        14: (_B,),
        15: (_G,),
        16: (_B, _S),
        17: (_S, _G),
        18: (_B, _S, _G),
        19: (_L,),
    }
)


class PickSequenceManager:
    """
    Tracks progress through the 19-pick schedule and the redraw budget.

    Usage:
        sequence = PickSequenceManager()
        rarities = sequence.next_pick_rarities()
        ...  # offer cards, player picks
        sequence.increment_pick()
    """

    def __init__(self) -> None:
        self._pick_index = 0
        self._current_redraw_count = settings.default_redraw_allowance

    @property
    def pick_index(self) -> int:
        """Picks completed so far (0..19)."""
        return self._pick_index

    @property
    def current_pick_number(self) -> int:
        """1-based number of the pick being offered, as shown to players."""
        return min(self._pick_index + 1, MAX_PICK_COUNT)

    @property
    def max_pick_count(self) -> int:
        return MAX_PICK_COUNT

    @property
    def is_complete(self) -> bool:
        return self._pick_index >= MAX_PICK_COUNT

    @property
    def current_redraw_count(self) -> int:
        return self._current_redraw_count

    def next_pick_rarities(self) -> tuple[CardRarity, ...]:
        """Rarities for the upcoming pick; empty once all 19 picks are done."""
        return PICK_SCHEDULE.get(self._pick_index + 1, ())

    def redraw_rarities(self) -> tuple[CardRarity, ...]:
        """Rarities for a redraw: the same schedule entry as the pick being redrawn."""
        return self.next_pick_rarities()

    def increment_pick(self) -> None:
        """Advance one pick; saturates at the final pick."""
        if self._pick_index < MAX_PICK_COUNT:
            self._pick_index += 1

    def remaining_picks(self) -> int:
        return max(0, MAX_PICK_COUNT - self._pick_index)

    def reset_sequence(self) -> None:
        self._pick_index = 0

    def set_current_redraw(self, catalog: CardCatalog | None, card_class: CardClass) -> None:
        """Load the redraw allowance configured for card_class."""
        if catalog is None:
            self._current_redraw_count = settings.default_redraw_allowance
        else:
            self._current_redraw_count = catalog.get_redraw_allowance(card_class)

    def consume_redraw(self) -> bool:
        """
        Use one redraw.

        Returns:
            True if a redraw was available, False if the count was already 0
        """
        if self._current_redraw_count <= 0:
            self._current_redraw_count = 0
            return False
        self._current_redraw_count -= 1
        return True
