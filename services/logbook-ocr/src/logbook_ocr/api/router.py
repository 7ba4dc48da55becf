import time
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from logbook_ocr import __version__
from logbook_ocr.api.schemas import (
    StructureMetadata,
    StructureRequest,
    StructureResponse,
)
from logbook_ocr.application.annotation import (
    resolve_annotation,
    truncate_annotation,
)
from logbook_ocr.application.orchestrator import LogbookOCRExtractor
from logbook_ocr.core.config import get_ocr_config
from logbook_ocr.core.metrics import (
    DAYS_FOUND,
    EXTRACTIONS_TOTAL,
    metrics as business_metrics,
)
from shared.utils.logger import get_logger_with_context

router = APIRouter()
config = get_ocr_config()
extractor = LogbookOCRExtractor(config)


@router.get("/health", tags=["health"])
async def health() -> dict:
    return {
        "status": "healthy",
        "service": config.service_name,
        "version": __version__,
        "environment": config.environment,
    }


@router.get("/metrics", tags=["health"])
async def metrics() -> PlainTextResponse:
    return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@router.post(
    "/ocr/structure",
    response_model=StructureResponse,
    response_model_by_alias=True,
    tags=["ocr"],
)
def structure_annotation(request: StructureRequest) -> StructureResponse:
    start = time.perf_counter()
    log = get_logger_with_context(__name__, week_number=request.week_number)

    annotation = resolve_annotation(request.annotation)
    original_length = len(annotation.text)
    annotation, truncated = truncate_annotation(annotation, config.max_text_chars)
    if truncated:
        log.warning(
            f"Annotation of {original_length} chars truncated to "
            f"{config.max_text_chars}"
        )

    result, strategy = extractor.extract_annotation(annotation)
    days_found = len(result.activities.populated_days())

    duration = time.perf_counter() - start
    EXTRACTIONS_TOTAL.labels(strategy=strategy, success=str(result.success)).inc()
    DAYS_FOUND.observe(days_found)
    business_metrics.log_extraction(
        strategy, days_found, result.confidence, week_number=request.week_number
    )

    return StructureResponse(
        success=result.success,
        full_text=result.full_text,
        activities=result.activities.as_dict(),
        confidence=result.confidence,
        warnings=result.warnings,
        metadata=StructureMetadata(
            week_number=request.week_number,
            processing_time=round(duration * 1000),
            timestamp=datetime.now(timezone.utc).isoformat(),
            days_found=days_found,
            strategy=strategy,
            truncated=truncated,
        ),
    )
