from dataclasses import dataclass
from functools import lru_cache

from shared.utils.config import get_settings


@dataclass(frozen=True)
class OCRParserConfig:
    service_name: str = "logbook-ocr"
    environment: str = "development"
    log_level: str = "INFO"
    json_logs: bool = False
    # --- classifier ---
    min_content_length: int = 10
    min_word_count: int = 3
    date_prefix_min_remainder: int = 20
    # --- escalation ---
    header_proximity_window: int = 15
    structured_min_days: int = 3
    context_max_days: int = 2
    context_min_text_length: int = 500
    # --- warnings ---
    short_content_length: int = 20
    # --- confidence ---
    confidence_text_weight: float = 0.30
    confidence_pages_weight: float = 0.20
    confidence_blocks_weight: float = 0.20
    confidence_medium_length_weight: float = 0.15
    confidence_long_length_weight: float = 0.15
    confidence_medium_length: int = 100
    confidence_long_length: int = 500
    # --- http ---
    max_text_chars: int = 15000


@lru_cache()
def get_ocr_config() -> OCRParserConfig:
    settings = get_settings()
    return OCRParserConfig(
        service_name=settings.service_name,
        environment=settings.app_env,
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        min_content_length=settings.ocr_min_content_length,
        min_word_count=settings.ocr_min_word_count,
        date_prefix_min_remainder=settings.ocr_date_prefix_min_remainder,
        header_proximity_window=settings.ocr_header_proximity_window,
        structured_min_days=settings.ocr_structured_min_days,
        context_max_days=settings.ocr_context_max_days,
        context_min_text_length=settings.ocr_context_min_text_length,
        short_content_length=settings.ocr_short_content_length,
        confidence_text_weight=settings.ocr_confidence_text_weight,
        confidence_pages_weight=settings.ocr_confidence_pages_weight,
        confidence_blocks_weight=settings.ocr_confidence_blocks_weight,
        confidence_medium_length_weight=settings.ocr_confidence_medium_length_weight,
        confidence_long_length_weight=settings.ocr_confidence_long_length_weight,
        confidence_medium_length=settings.ocr_confidence_medium_length,
        confidence_long_length=settings.ocr_confidence_long_length,
        max_text_chars=settings.ocr_max_text_chars,
    )
