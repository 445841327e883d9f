from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from match_analyzer.domain.enums import StatResolution


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MATCH_ANALYZER_",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Match data CSV
    csv_encoding: str = "utf-8"
    csv_delimiter: str = Field(default=",", min_length=1, max_length=1)

    # Only `kills` was ever wired up in the historical resolver; `kills_only`
    # reproduces that behaviour for comparison runs.
    stat_resolution: StatResolution = StatResolution.COMPLETE


settings = Settings()
