from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="BOOSTERDRAFT_")

    app_name: str = "BoosterDraft"
    debug: bool = False

    # Default lottery weights (operators can change them per catalog at runtime)
    bronze_weight: float = 1.0
    silver_weight: float = 1.0
    gold_weight: float = 1.5
    legend_weight: float = 2.0
    latest_pack_weight: float = 1.2
    neutral_weight: float = 0.1

    default_redraw_allowance: int = 3

    # Cards dealt per pick (split into a left and a right pair)
    pick_offer_size: int = 4

    # Gold/Legend cards granted when a class is selected
    class_pick_size: int = 2

    deck_size: int = 40


settings = Settings()


# =============================================================================
# GAME CONSTANTS
# =============================================================================

# Supply values are clamped into [MIN_DECKABLE_COPIES, MAX_DECKABLE_COPIES]
MIN_DECKABLE_COPIES = 0
MAX_DECKABLE_COPIES = 3

# Supply reported for ids the catalog has never seen
DEFAULT_DECKABLE_COPIES = 3

# Number of picks in one draft
MAX_PICK_COUNT = 19

# Highest cost bucket tracked by the deck cost curve (higher costs fold into it)
MAX_CURVE_COST = 10

# Redraw allowances are clamped into [0, MAX_REDRAW_ALLOWANCE] (two-digit input field)
MAX_REDRAW_ALLOWANCE = 99

# Lottery metrics kept in memory; older entries are dropped first
METRICS_HISTORY_LIMIT = 1000
