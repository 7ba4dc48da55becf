from prometheus_client import Counter, Histogram

from shared.utils.logging_config import MetricsLogger

metrics = MetricsLogger("logbook-ocr")

REQUEST_COUNT = Counter(
    "logbook_ocr_requests_total",
    "Total number of requests",
    ["method", "endpoint", "status"],
)

REQUEST_LATENCY = Histogram(
    "logbook_ocr_request_latency_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)

EXTRACTIONS_TOTAL = Counter(
    "logbook_ocr_extractions_total",
    "Structured extractions by winning strategy",
    ["strategy", "success"],
)

DAYS_FOUND = Histogram(
    "logbook_ocr_days_found",
    "Weekdays populated per extraction",
    buckets=(0, 1, 2, 3, 4, 5),
)
