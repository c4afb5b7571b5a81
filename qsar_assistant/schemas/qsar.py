from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional, Tuple, Union

RiskCategory = Literal["low", "moderate", "high", "very_high"]
EndpointCategory = Literal["acute", "irritation", "sensitization", "environmental", "physicochemical"]


# -------------------------------
# Catalog entries
# -------------------------------
class EndpointDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name_es: str
    name_en: str
    description_es: str
    oecd_guideline: Optional[str] = None
    category: EndpointCategory


class Prediction(BaseModel):
    model_config = ConfigDict(frozen=True)

    # int first so LD50 values like 636 stay integers after validation
    value: Union[int, float, str]
    unit: str = ""
    confidence: float = Field(ge=0.0, le=1.0)
    category: RiskCategory


# -------------------------------
# Interpreter output
# -------------------------------
class QSARQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    substance: str
    endpoints: Tuple[str, ...]
    language: Literal["es", "en"] = "es"
    query_type: Literal["natural", "structured"] = "natural"


class QueryValidation(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    suggestions: Tuple[str, ...] = ()


# -------------------------------
# Lookup output
# -------------------------------
class QSARResult(BaseModel):
    endpoint: str
    endpoint_code: str
    substance: str
    prediction: Prediction
    source: Literal["database", "simulated"]
    explanation_es: str
    regulatory_relevance_es: str
    similar_substances: List[str] = []
    timestamp: str


# -------------------------------
# HTTP request / response bodies
# -------------------------------
class ChatRequest(BaseModel):
    message: Optional[str] = None


class ChatSuccessResponse(BaseModel):
    type: Literal["success"] = "success"
    query: QSARQuery
    results: List[QSARResult]
    response_es: str
    timestamp: str


class ChatValidationErrorResponse(BaseModel):
    type: Literal["validation_error"] = "validation_error"
    suggestions: List[str]
    examples: List[str]


class SimulatorStats(BaseModel):
    known_substances: int
    supported_endpoints: int
    version: str


class ExamplesResponse(BaseModel):
    examples: List[str]
    available_substances: List[str]
    simulator_stats: SimulatorStats


class ReportRequest(BaseModel):
    substance: Optional[str] = None
    results: Optional[List[QSARResult]] = None
    user_query: Optional[str] = None


class ReportResponse(BaseModel):
    success: bool
    pdf_url: str
    content_preview: str
    generated_at: str
