from typing import List

from fastapi import APIRouter, Depends

from qsar_assistant.api.v1.dependencies import get_catalog, get_parser, get_simulator
from qsar_assistant.api.v1.nlp_utils import SpanishQSARParser
from qsar_assistant.models.qsar.catalog import QSARCatalog
from qsar_assistant.models.qsar.predictor import QSARToolboxSimulator
from qsar_assistant.schemas.qsar import EndpointDefinition, ExamplesResponse, SimulatorStats

router = APIRouter()


@router.get("/examples", response_model=ExamplesResponse)
def list_examples(
    parser: SpanishQSARParser = Depends(get_parser),
    simulator: QSARToolboxSimulator = Depends(get_simulator),
):
    """Example queries, known substances and simulator metadata."""
    return ExamplesResponse(
        examples=parser.get_example_queries(),
        available_substances=simulator.get_available_substances(),
        simulator_stats=SimulatorStats(**simulator.get_simulator_stats()),
    )


@router.get("/endpoints", response_model=List[EndpointDefinition])
def list_endpoints(catalog: QSARCatalog = Depends(get_catalog)):
    return list(catalog.endpoints)
