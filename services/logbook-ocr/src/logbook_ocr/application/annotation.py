"""
Logbook OCR - Annotation models
Flat and hierarchical OCR output, resolved once into a tagged union.
"""

from typing import Any, Iterator, Literal, Mapping, Union

import pydantic
from pydantic import BaseModel, Field, TypeAdapter, field_validator

from shared.models import ExtractionIssue
from shared.utils.errors import AnnotationContractError
from shared.utils.logger import get_logger

logger = get_logger(__name__)


class _Node(BaseModel):
    """Vision nodes carry bounding boxes, languages and confidences we ignore"""

    model_config = pydantic.ConfigDict(extra="ignore", frozen=True)


class Symbol(_Node):
    text: str = ""

    @field_validator("text", mode="before")
    @classmethod
    def none_as_empty_text(cls, value: Any) -> Any:
        return "" if value is None else value


class Word(_Node):
    symbols: list[Symbol] = Field(default_factory=list)

    @field_validator("symbols", mode="before")
    @classmethod
    def none_as_empty_symbols(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def text(self) -> str:
        return "".join(symbol.text for symbol in self.symbols)


class Paragraph(_Node):
    words: list[Word] = Field(default_factory=list)

    @field_validator("words", mode="before")
    @classmethod
    def none_as_empty_words(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def text(self) -> str:
        return " ".join(word.text for word in self.words if word.text)


class Block(_Node):
    paragraphs: list[Paragraph] = Field(default_factory=list)

    @field_validator("paragraphs", mode="before")
    @classmethod
    def none_as_empty_paragraphs(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def text(self) -> str:
        return "\n".join(
            paragraph.text for paragraph in self.paragraphs if paragraph.text
        ).strip()


class Page(_Node):
    blocks: list[Block] = Field(default_factory=list)

    @field_validator("blocks", mode="before")
    @classmethod
    def none_as_empty_blocks(cls, value: Any) -> Any:
        return [] if value is None else value


class FlatAnnotation(BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    kind: Literal["flat"] = "flat"
    text: str = ""

    @property
    def has_pages(self) -> bool:
        return False

    @property
    def has_blocks(self) -> bool:
        return False


class StructuredAnnotation(BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    kind: Literal["structured"] = "structured"
    text: str = ""
    pages: list[Page] = Field(default_factory=list)

    @property
    def has_pages(self) -> bool:
        return len(self.pages) > 0

    @property
    def has_blocks(self) -> bool:
        return any(page.blocks for page in self.pages)

    def iter_blocks(self) -> Iterator[Block]:
        for page in self.pages:
            yield from page.blocks


AnyAnnotation = Union[FlatAnnotation, StructuredAnnotation]

_PAGES = TypeAdapter(list[Page])


def block_text(block: Block) -> str:
    """Paragraphs joined by newlines, words by spaces, symbols concatenated"""
    return block.text


def _unwrap_vision_response(raw: Mapping[str, Any]) -> Mapping[str, Any]:
    # Accept a whole images:annotate response as well as the bare annotation
    responses = raw.get("responses")
    if isinstance(responses, list) and responses and isinstance(responses[0], Mapping):
        raw = responses[0]
    if "fullTextAnnotation" in raw:
        inner = raw.get("fullTextAnnotation")
        return inner if isinstance(inner, Mapping) else {}
    return raw


def resolve_annotation(
    raw: Union[str, Mapping[str, Any], FlatAnnotation, StructuredAnnotation, None],
) -> AnyAnnotation:
    """
    Decide once whether the OCR output is flat text or a page hierarchy.

    Missing or null nested fields count as empty. A hierarchy of the wrong
    shape is dropped and the text is parsed as flat. Only a missing root, or a
    root that is not text, a mapping or an annotation, is a caller error.
    """
    if raw is None:
        raise AnnotationContractError(
            "OCR annotation is required", details={"received": "None"}
        )

    if isinstance(raw, (FlatAnnotation, StructuredAnnotation)):
        return raw

    if isinstance(raw, str):
        return FlatAnnotation(text=raw)

    if isinstance(raw, BaseModel):
        raw = raw.model_dump(by_alias=True)

    if not isinstance(raw, Mapping):
        raise AnnotationContractError(
            "OCR annotation must be text or an annotation object",
            details={"received": type(raw).__name__},
        )

    raw = _unwrap_vision_response(raw)

    text = raw.get("text")
    if not isinstance(text, str):
        if text is not None:
            logger.warning(
                f"{ExtractionIssue.MALFORMED_ANNOTATION.value}: "
                f"text field is {type(text).__name__}, treating as empty"
            )
        text = ""

    raw_pages = raw.get("pages")
    if not raw_pages:
        return FlatAnnotation(text=text)

    try:
        pages = _PAGES.validate_python(raw_pages)
    except pydantic.ValidationError as exc:
        logger.warning(
            f"{ExtractionIssue.MALFORMED_ANNOTATION.value}: "
            f"ignoring page structure ({exc.error_count()} errors)"
        )
        return FlatAnnotation(text=text)

    annotation = StructuredAnnotation(text=text, pages=pages)
    if not text:
        # Some producers only fill the hierarchy
        derived = "\n".join(
            block.text for block in annotation.iter_blocks() if block.text
        )
        annotation = annotation.model_copy(update={"text": derived})
    return annotation


def truncate_annotation(
    annotation: AnyAnnotation, max_chars: int
) -> tuple[AnyAnnotation, bool]:
    """
    Cap an annotation at ``max_chars`` characters of text.

    For a page hierarchy, blocks are kept in document order while their
    combined text fits, so parsers never walk more than the capped text.
    Returns the annotation and whether anything was cut.
    """
    update: dict[str, Any] = {}
    if len(annotation.text) > max_chars:
        update["text"] = annotation.text[:max_chars]

    if isinstance(annotation, StructuredAnnotation):
        budget = max_chars
        cut = False
        pages: list[Page] = []
        for page in annotation.pages:
            kept: list[Block] = []
            for block in page.blocks:
                size = len(block.text)
                if cut or size > budget:
                    cut = True
                    break
                kept.append(block)
                # blocks are joined with a newline in the derived text
                budget -= size + 1
            pages.append(page.model_copy(update={"blocks": kept}))
        if cut:
            update["pages"] = pages

    if not update:
        return annotation, False
    return annotation.model_copy(update=update), True
