from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field


class StructureRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Plain text, a fullTextAnnotation, or a whole images:annotate response
    annotation: Union[str, Dict[str, Any], None] = None
    week_number: Union[int, str, None] = Field(default=None, alias="weekNumber")


class StructureMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    week_number: Union[int, str, None] = Field(default=None, alias="weekNumber")
    processing_time: int = Field(alias="processingTime")
    timestamp: str
    days_found: int = Field(alias="daysFound")
    strategy: str
    truncated: bool = False


class StructureResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    full_text: str = Field(alias="fullText")
    activities: Dict[str, str]
    confidence: float
    warnings: List[str]
    metadata: StructureMetadata
