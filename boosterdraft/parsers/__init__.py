from boosterdraft.parsers.card_records import (
    CardRecord,
    CardRecordError,
    load_card_records,
    parse_card_records,
)
from boosterdraft.parsers.numeric_input import (
    apply_redraw_input,
    apply_weight_inputs,
    parse_float_input,
    parse_int_input,
    sanitize_decimal_input,
    sanitize_integer_input,
)

__all__ = [
    "CardRecord",
    "CardRecordError",
    "apply_redraw_input",
    "apply_weight_inputs",
    "load_card_records",
    "parse_card_records",
    "parse_float_input",
    "parse_int_input",
    "sanitize_decimal_input",
    "sanitize_integer_input",
]
