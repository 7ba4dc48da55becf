import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from logbook_ocr import __version__
from logbook_ocr.api.router import router as api_router
from logbook_ocr.core.config import get_ocr_config
from logbook_ocr.core.metrics import REQUEST_COUNT, REQUEST_LATENCY, metrics
from shared.utils.config import get_settings
from shared.utils.errors import LogbookError
from shared.utils.logger import get_logger
from shared.utils.logging_config import setup_logging

config = get_ocr_config()
setup_logging(config.service_name, log_level=config.log_level, json_logs=config.json_logs)
logger = get_logger(__name__)

app = FastAPI(
    title="Logbook OCR",
    description="Structures OCR output of weekly logbook pages into weekday activities.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_api_calls(request: Request, call_next):
    start = time.perf_counter()
    path, method = request.url.path, request.method
    try:
        response = await call_next(request)
    except Exception:
        REQUEST_COUNT.labels(method=method, endpoint=path, status="500").inc()
        raise
    duration = time.perf_counter() - start
    REQUEST_COUNT.labels(
        method=method, endpoint=path, status=str(response.status_code)
    ).inc()
    REQUEST_LATENCY.labels(method=method, endpoint=path).observe(duration)
    metrics.log_api_call(path, method, response.status_code, round(duration * 1000, 2))
    return response


@app.exception_handler(LogbookError)
async def logbook_error_handler(request: Request, exc: LogbookError) -> JSONResponse:
    logger.warning(f"{exc.error_code} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


app.include_router(api_router)


@app.get("/")
async def root() -> dict:
    return {
        "service": config.service_name,
        "status": "operational",
        "docs": "/docs",
    }


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "logbook_ocr.main:app",
        host="0.0.0.0",
        port=settings.service_port,
        reload=settings.debug,
    )
