"""
Configuration settings for Fourier Fit.

Uses Pydantic Settings to load environment variables for logging, file
locations, sampling assumptions and the default filter parameters offered
by the CLI.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Files
    data_file: str = Field("data/weights.csv", alias="DATA_FILE")
    results_dir: str = Field("results", alias="RESULTS_DIR")

    # Sampling: one weigh-in per day, so frequencies read as cycles/day
    sample_rate: float = Field(1.0, alias="SAMPLE_RATE")
    bode_points: int = Field(100, alias="BODE_POINTS")

    # Filter defaults
    default_filter: str = Field("butterworth", alias="DEFAULT_FILTER")
    cutoff_period_days: float = Field(4.2, alias="CUTOFF_PERIOD_DAYS")
    filter_order: int = Field(4, alias="FILTER_ORDER")
    ripple_db: float = Field(5.0, alias="RIPPLE_DB")
    attenuation_db: float = Field(40.0, alias="ATTENUATION_DB")
    candle_length: str = Field("weekly", alias="CANDLE_LENGTH")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
