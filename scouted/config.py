from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =============================================================================
# UPSTREAM CONSTANTS
# =============================================================================

CDRAGON_BASE = "https://raw.communitydragon.org/latest"
DDRAGON_BASE = "https://ddragon.leagueoflegends.com"

# Hashed CDragon tag ids for Silver, Gold, Prismatic. These are not
# guaranteed stable across sets, so Settings lets them be overridden.
DEFAULT_AUGMENT_TIER_TAGS: dict[str, int] = {
    "{d11fd6d5}": 1,
    "{ce1fd21c}": 2,
    "{cf1fd3af}": 3,
}


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "Scouted"
    debug: bool = False

    cdragon_base: str = CDRAGON_BASE
    ddragon_base: str = DDRAGON_BASE
    locale: str = "en_us"

    user_agent: str = "Scouted/1.0"
    fetch_retries: int = 2
    fetch_backoff_seconds: float = 0.5
    fetch_timeout_seconds: float = 30.0

    # JSON in the environment, e.g. AUGMENT_TIER_TAGS='{"{d11fd6d5}": 1}'
    augment_tier_tags: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_AUGMENT_TIER_TAGS)
    )

    output_path: str = "data/scouted.json"


settings = Settings()
