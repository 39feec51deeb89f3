"""
Numeric text input for the weight and redraw settings screens.

Text fields are sanitized as the operator types and parsed when editing
ends. Blank or unparsable text never reaches the catalog: the value already
stored is kept instead.
"""

import math

from boosterdraft.models.card import CardClass, CardRarity
from boosterdraft.models.catalog import CardCatalog

# Weight fields hold e.g. "1.25"; redraw fields at most "99"
MAX_DECIMAL_INPUT_LENGTH = 5
MAX_INTEGER_INPUT_LENGTH = 2


def sanitize_decimal_input(text: str, max_length: int = MAX_DECIMAL_INPUT_LENGTH) -> str:
    """Keep digits and the first '.', truncated to max_length."""
    kept: list[str] = []
    has_decimal = False
    for char in text:
        if char.isdigit():
            kept.append(char)
        elif char == "." and not has_decimal:
            kept.append(char)
            has_decimal = True
    return "".join(kept)[:max_length]


def sanitize_integer_input(text: str, max_length: int = MAX_INTEGER_INPUT_LENGTH) -> str:
    """Keep digits only, truncated to max_length."""
    return "".join(char for char in text if char.isdigit())[:max_length]


def parse_float_input(text: str | None, fallback: float) -> float:
    """Parse a float, returning fallback for blank, malformed or non-finite text."""
    if text is None or not text.strip():
        return fallback
    try:
        value = float(text)
    except ValueError:
        return fallback
    if not math.isfinite(value):
        return fallback
    return value


def parse_int_input(text: str | None, fallback: int) -> int:
    """Parse an int, returning fallback for blank or malformed text."""
    if text is None or not text.strip():
        return fallback
    try:
        return int(text)
    except ValueError:
        return fallback


def apply_weight_inputs(
    catalog: CardCatalog,
    *,
    bronze: str | None = None,
    silver: str | None = None,
    gold: str | None = None,
    legend: str | None = None,
    latest_pack: str | None = None,
    neutral: str | None = None,
) -> None:
    """
    Apply weight text fields to the catalog.

    Fields left as None are not touched; blank or malformed fields keep the
    stored weight.
    """
    rarity_fields = {
        CardRarity.BRONZE: bronze,
        CardRarity.SILVER: silver,
        CardRarity.GOLD: gold,
        CardRarity.LEGEND: legend,
    }
    for rarity, text in rarity_fields.items():
        if text is not None:
            catalog.set_weight(rarity, parse_float_input(text, catalog.get_weight(rarity)))

    if latest_pack is not None:
        catalog.set_latest_pack_weight(parse_float_input(latest_pack, catalog.latest_pack_weight))
    if neutral is not None:
        catalog.set_neutral_weight(parse_float_input(neutral, catalog.neutral_weight))


def apply_redraw_input(catalog: CardCatalog, card_class: CardClass, text: str | None) -> int:
    """
    Apply a redraw-allowance text field for one class.

    Returns:
        The allowance stored after applying the input
    """
    current = catalog.get_redraw_allowance(card_class)
    catalog.set_redraw_allowance(card_class, parse_int_input(text, current))
    return catalog.get_redraw_allowance(card_class)
