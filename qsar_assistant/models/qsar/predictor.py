import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional, Protocol, Sequence, Tuple, Union

import numpy as np
from loguru import logger

from qsar_assistant.models.qsar.catalog import QSARCatalog
from qsar_assistant.models.qsar.explanations import (
    get_explanation,
    get_regulatory_relevance,
    get_simulated_explanation,
)
from qsar_assistant.schemas.qsar import Prediction, QSARResult

MAX_SIMILAR_SUBSTANCES = 3


class Predictor(Protocol):
    def predict(self, endpoint_code: str, substance: str) -> Optional[Prediction]:
        ...


# -------------------------------
# Deterministic lookup
# -------------------------------
class TablePredictor:
    """Returns the pre-authored prediction for a known (substance, endpoint) pair."""

    def __init__(self, catalog: QSARCatalog):
        self.catalog = catalog

    def predict(self, endpoint_code: str, substance: str) -> Optional[Prediction]:
        table = self.catalog.substances.get(substance.lower().strip())
        if table is None:
            return None
        return table.get(endpoint_code)


# -------------------------------
# Randomized fallback
# -------------------------------
@dataclass(frozen=True)
class SimulationProfile:
    value: Callable[[float], Union[int, float, str]]
    unit: str
    confidence_low: float
    confidence_span: float
    # (threshold, category) checked in order as `r > threshold`; last entry is the floor
    buckets: Tuple[Tuple[float, str], ...]

    @property
    def confidence_range(self) -> Tuple[float, float]:
        return self.confidence_low, self.confidence_low + self.confidence_span

    def category(self, r: float) -> str:
        for threshold, category in self.buckets:
            if r > threshold:
                return category
        return self.buckets[-1][1]


def _pick(choices: Sequence[str]) -> Callable[[float], str]:
    return lambda r: choices[min(int(r * len(choices)), len(choices) - 1)]


def _one_decimal(x: float) -> Union[int, float]:
    # 501.0 renders as "501", not "501.0"
    v = round(x, 1)
    return int(v) if v.is_integer() else v


_STANDARD = ((0.7, "low"), (0.4, "moderate"), (-1.0, "high"))
_STRICT = ((0.75, "low"), (0.5, "moderate"), (-1.0, "high"))

SIMULATION_PROFILES = {
    "acute_oral": SimulationProfile(
        value=lambda r: int(round(300 + r * 5000)), unit="mg/kg",
        confidence_low=0.60, confidence_span=0.30, buckets=_STANDARD,
    ),
    "acute_dermal": SimulationProfile(
        value=lambda r: int(round(2000 + r * 18000)), unit="mg/kg",
        confidence_low=0.55, confidence_span=0.35,
        buckets=((0.8, "low"), (0.5, "moderate"), (-1.0, "high")),
    ),
    "acute_inhalation": SimulationProfile(
        value=lambda r: int(round(1000 + r * 60000)), unit="mg/m³",
        confidence_low=0.58, confidence_span=0.32, buckets=_STANDARD,
    ),
    "skin_irritation": SimulationProfile(
        value=_pick(["No irritante", "Ligeramente irritante", "Irritante", "Corrosivo"]), unit="",
        confidence_low=0.50, confidence_span=0.40,
        buckets=((0.75, "low"), (0.5, "moderate"), (0.25, "high"), (-1.0, "very_high")),
    ),
    "eye_irritation": SimulationProfile(
        value=_pick(["No irritante", "Irritante leve", "Irritante moderado", "Irritante severo"]), unit="",
        confidence_low=0.52, confidence_span=0.38, buckets=_STRICT,
    ),
    "skin_sensitization": SimulationProfile(
        value=_pick(["No sensibilizante", "Sensibilizante débil", "Sensibilizante", "Sensibilizante fuerte"]),
        unit="", confidence_low=0.48, confidence_span=0.42, buckets=_STANDARD,
    ),
    "bioaccumulation": SimulationProfile(
        value=lambda r: _one_decimal(1 + r * 1000), unit="BCF",
        confidence_low=0.45, confidence_span=0.45,
        buckets=((0.8, "low"), (0.6, "moderate"), (-1.0, "high")),
    ),
    "biodegradation": SimulationProfile(
        value=_pick(["Fácilmente biodegradable", "Biodegradable", "Lentamente biodegradable", "No biodegradable"]),
        unit="", confidence_low=0.50, confidence_span=0.35, buckets=_STRICT,
    ),
}

UNAVAILABLE_PREDICTION = Prediction(value="No disponible", unit="", confidence=0.30, category="low")


class SimulatedPredictor:
    """
    Fabricates a plausible prediction from a single uniform draw.

    Intentionally non-deterministic unless a seeded generator is passed in.
    The draw fixes value, confidence and risk bucket together, so a result
    is internally consistent even though it is made up.
    """

    def __init__(self, rng: np.random.Generator | None = None, seed: int | None = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def predict(self, endpoint_code: str, substance: str) -> Optional[Prediction]:
        profile = SIMULATION_PROFILES.get(endpoint_code)
        if profile is None:
            return UNAVAILABLE_PREDICTION

        r = float(self.rng.random())
        return Prediction(
            value=profile.value(r),
            unit=profile.unit,
            confidence=profile.confidence_low + r * profile.confidence_span,
            category=profile.category(r),
        )


# -------------------------------
# Simulator facade
# -------------------------------
def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class QSARToolboxSimulator:
    """
    Stands in for a QSAR Toolbox backend: table lookup first, simulated
    fallback second, plus explanation and regulatory text per endpoint.
    """

    def __init__(
        self,
        catalog: QSARCatalog,
        primary: Predictor | None = None,
        fallback: Predictor | None = None,
        latency: Tuple[float, float] = (0.0, 0.0),
        sleep: Callable[[float], None] = time.sleep,
        latency_rng: np.random.Generator | None = None,
    ):
        self.catalog = catalog
        self.primary = primary if primary is not None else TablePredictor(catalog)
        self.fallback = fallback if fallback is not None else SimulatedPredictor()
        self.latency = latency
        self.sleep = sleep
        # Latency only, never the fallback's generator
        self._latency_rng = latency_rng if latency_rng is not None else np.random.default_rng()

    def _simulate_latency(self) -> None:
        low, high = self.latency
        if high <= 0:
            return
        self.sleep(float(self._latency_rng.uniform(low, high)))

    def predict_toxicity(self, substance: str, endpoints: Sequence[str]) -> List[QSARResult]:
        self._simulate_latency()

        results = []
        for endpoint_code in endpoints:
            endpoint = self.catalog.get_endpoint(endpoint_code)
            if endpoint is None:
                logger.debug(f"Skipping unknown endpoint code: {endpoint_code}")
                continue

            prediction = self.primary.predict(endpoint_code, substance)
            if prediction is not None:
                source = "database"
                explanation = get_explanation(endpoint_code, prediction)
            else:
                source = "simulated"
                prediction = self.fallback.predict(endpoint_code, substance) or UNAVAILABLE_PREDICTION
                explanation = get_simulated_explanation(substance)

            results.append(QSARResult(
                endpoint=endpoint.name_es,
                endpoint_code=endpoint_code,
                substance=substance,
                prediction=prediction,
                source=source,
                explanation_es=explanation,
                regulatory_relevance_es=get_regulatory_relevance(endpoint, prediction),
                similar_substances=self.get_similar_substances(substance),
                timestamp=utc_timestamp(),
            ))

        logger.debug(f"Predicted {len(results)} endpoint(s) for {substance!r}")
        return results

    def get_similar_substances(self, substance: str) -> List[str]:
        key = substance.lower().strip()
        others = [name for name in self.catalog.substance_names if name != key]
        return others[:MAX_SIMILAR_SUBSTANCES]

    def get_available_substances(self) -> List[str]:
        return list(self.catalog.substance_names)

    def get_simulator_stats(self) -> dict:
        return {
            "known_substances": len(self.catalog.substances),
            "supported_endpoints": len(self.catalog.endpoints),
            "version": self.catalog.version,
        }
