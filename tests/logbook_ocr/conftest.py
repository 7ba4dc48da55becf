from typing import Any

import pytest

from logbook_ocr.core.config import OCRParserConfig


def _block(text: str) -> dict[str, Any]:
    return {
        "paragraphs": [
            {
                "words": [
                    {"symbols": [{"text": char} for char in word]}
                    for word in line.split()
                ]
            }
            for line in text.splitlines()
        ]
    }


def build_vision_annotation(*blocks: str, text: str | None = None) -> dict[str, Any]:
    """fullTextAnnotation-shaped dict with one page and one block per argument"""
    annotation: dict[str, Any] = {"pages": [{"blocks": [_block(b) for b in blocks]}]}
    if text is not None:
        annotation["text"] = text
    return annotation


@pytest.fixture(scope="module")
def config() -> OCRParserConfig:
    return OCRParserConfig()


@pytest.fixture(scope="module")
def weekly_page() -> dict[str, Any]:
    return build_vision_annotation(
        "Monday 12/06/2025",
        "Configured the staging server and deployed the API.",
        "Tuesday",
        "Wrote integration tests for the payment service.",
        "Wednesday",
        "Documented the deployment process for the team.",
        "Supervisor's signature",
    )


@pytest.fixture(scope="module")
def vision_annotation():
    return build_vision_annotation
