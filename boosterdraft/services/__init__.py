"""
BoosterDraft services.

Draft logic: the booster lottery, the pick schedule and the draft session.
"""

from boosterdraft.services.draft_session import (
    DraftSession,
    PickOffer,
    PickSide,
    split_offer,
)
from boosterdraft.services.lottery import (
    CLASS_PICK_RARITIES,
    LotteryMetrics,
    card_weight,
    draw,
    get_lottery_metrics,
    pick_class_cards,
    pick_main_class_cards,
    reset_lottery_metrics,
    weighted_card_draw,
    weighted_rarity_draw,
)
from boosterdraft.services.pick_sequence import PICK_SCHEDULE, PickSequenceManager

__all__ = [
    # Lottery
    "CLASS_PICK_RARITIES",
    "LotteryMetrics",
    "card_weight",
    "draw",
    "get_lottery_metrics",
    "pick_class_cards",
    "pick_main_class_cards",
    "reset_lottery_metrics",
    "weighted_card_draw",
    "weighted_rarity_draw",
    # Pick schedule
    "PICK_SCHEDULE",
    "PickSequenceManager",
    # Session
    "DraftSession",
    "PickOffer",
    "PickSide",
    "split_offer",
]
