"""
Logbook Shared Config
Environment configuration management using Pydantic
"""

from functools import lru_cache

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = ConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application
    app_env: str = "development"
    debug: bool = True
    log_level: str = "INFO"
    json_logs: bool = False
    service_name: str = "logbook-ocr"
    service_port: int = 8000

    # Content classifier
    ocr_min_content_length: int = 10
    ocr_min_word_count: int = 3
    ocr_date_prefix_min_remainder: int = 20

    # Parser escalation
    ocr_header_proximity_window: int = 15
    ocr_structured_min_days: int = 3
    ocr_context_max_days: int = 2
    ocr_context_min_text_length: int = 500

    # Warnings
    ocr_short_content_length: int = 20

    # Confidence weights
    ocr_confidence_text_weight: float = 0.30
    ocr_confidence_pages_weight: float = 0.20
    ocr_confidence_blocks_weight: float = 0.20
    ocr_confidence_medium_length_weight: float = 0.15
    ocr_confidence_long_length_weight: float = 0.15
    ocr_confidence_medium_length: int = 100
    ocr_confidence_long_length: int = 500

    # Input guard for the HTTP surface
    ocr_max_text_chars: int = 15000


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
