from contextlib import asynccontextmanager

import numpy as np

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from qsar_assistant.core.config import Settings, settings
from qsar_assistant.api.v1.router import api_router
from qsar_assistant.api.v1.nlp_utils import SpanishQSARParser
from qsar_assistant.core.middleware import (
    configure_logging,
    exception_middleware,
    logging_middleware,
    validation_exception_handler,
)
from qsar_assistant.models.qsar.catalog import QSARCatalog, build_default_catalog
from qsar_assistant.models.qsar.predictor import QSARToolboxSimulator, SimulatedPredictor


@asynccontextmanager
async def lifespan(app: FastAPI):
    stats = app.state.simulator.get_simulator_stats()
    logger.info(
        f"Starting {app.title} v{app.version}: "
        f"{stats['known_substances']} substances, {stats['supported_endpoints']} endpoints"
    )
    yield
    logger.info("Shutting down")


def create_app(
    config: Settings = settings,
    catalog: QSARCatalog | None = None,
    simulator: QSARToolboxSimulator | None = None,
) -> FastAPI:
    """
    Build the API with explicitly constructed services.

    Tests pass their own `simulator` (zero latency, seeded fallback) instead
    of patching module globals.
    """
    configure_logging(config.log_level)

    catalog = catalog or build_default_catalog(version=config.simulator_version)
    if simulator is None:
        # Latency draws use their own generator so a seed fixes the predictions alone
        simulator = QSARToolboxSimulator(
            catalog,
            fallback=SimulatedPredictor(rng=np.random.default_rng(config.random_seed)),
            latency=(config.simulated_latency_min, config.simulated_latency_max),
        )

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.catalog = catalog
    app.state.parser = SpanishQSARParser(catalog)
    app.state.simulator = simulator

    origins = config.cors_origins.split(",") if config.cors_origins != "*" else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.middleware("http")(exception_middleware)
    app.middleware("http")(logging_middleware)

    app.include_router(
        api_router,
        prefix="/api/v1"
    )

    @app.get("/health", tags=["Health"])
    def health_check():
        return {
            "status": "ok",
            "environment": config.app_env
        }

    return app


app = create_app()
