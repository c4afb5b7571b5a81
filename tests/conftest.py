import numpy as np
import pytest
from fastapi.testclient import TestClient

from qsar_assistant.api.v1.nlp_utils import SpanishQSARParser
from qsar_assistant.main import create_app
from qsar_assistant.models.qsar.catalog import build_default_catalog
from qsar_assistant.models.qsar.predictor import QSARToolboxSimulator, SimulatedPredictor


class FixedRng:
    """Stands in for numpy's Generator: every draw returns the same value."""

    def __init__(self, r: float):
        self.r = r

    def random(self):
        return self.r

    def uniform(self, low, high):
        return low + self.r * (high - low)


@pytest.fixture(scope="session")
def catalog():
    return build_default_catalog()


@pytest.fixture
def parser(catalog):
    return SpanishQSARParser(catalog)


@pytest.fixture
def simulator(catalog):
    return QSARToolboxSimulator(catalog, fallback=SimulatedPredictor(rng=np.random.default_rng(1234)))


@pytest.fixture
def client(catalog, simulator):
    app = create_app(catalog=catalog, simulator=simulator)
    return TestClient(app)


@pytest.fixture
def fixed_rng():
    return FixedRng
