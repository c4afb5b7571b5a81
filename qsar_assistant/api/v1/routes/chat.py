from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from loguru import logger

from qsar_assistant.api.v1.dependencies import get_parser, get_simulator
from qsar_assistant.api.v1.nlp_utils import SpanishQSARParser
from qsar_assistant.api.v1.response_formatter import format_spanish_response
from qsar_assistant.models.qsar.predictor import QSARToolboxSimulator, utc_timestamp
from qsar_assistant.schemas.qsar import (
    ChatRequest,
    ChatSuccessResponse,
    ChatValidationErrorResponse,
)

MAX_EXAMPLES_ON_ERROR = 3

router = APIRouter()


@router.post("/chat", response_model=ChatSuccessResponse | ChatValidationErrorResponse)
def chat(
    req: ChatRequest,
    parser: SpanishQSARParser = Depends(get_parser),
    simulator: QSARToolboxSimulator = Depends(get_simulator),
):
    """
    Answer a Spanish toxicology question.

    Returns either a `success` payload with one result per endpoint, or a
    `validation_error` payload with hints and example queries when the
    substance cannot be identified. Callers branch on `type`.
    """
    if not req.message:
        return JSONResponse(status_code=400, content={"error": "Mensaje requerido"})

    validation = parser.validate_query(req.message)
    if not validation.valid:
        logger.warning(f"Query not understood: {req.message!r}")
        return ChatValidationErrorResponse(
            suggestions=list(validation.suggestions),
            examples=parser.get_example_queries()[:MAX_EXAMPLES_ON_ERROR],
        )

    query = parser.parse_query(req.message)
    results = simulator.predict_toxicity(query.substance, query.endpoints)

    return ChatSuccessResponse(
        query=query,
        results=results,
        response_es=format_spanish_response(query, results),
        timestamp=utc_timestamp(),
    )
