from fastapi import Request

from qsar_assistant.api.v1.nlp_utils import SpanishQSARParser
from qsar_assistant.models.qsar.catalog import QSARCatalog
from qsar_assistant.models.qsar.predictor import QSARToolboxSimulator


# Services are built once in create_app() and kept on app.state
def get_catalog(request: Request) -> QSARCatalog:
    return request.app.state.catalog


def get_parser(request: Request) -> SpanishQSARParser:
    return request.app.state.parser


def get_simulator(request: Request) -> QSARToolboxSimulator:
    return request.app.state.simulator
