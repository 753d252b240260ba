from fastapi import FastAPI

from homestay.api.v1.router import router as v1_router
from homestay.core.config import settings
from homestay.core.db import engine
from homestay.core.logging import setup_logging
from homestay.core.telemetry import setup_telemetry
from homestay.graphql.router import graphql_router


def create_app() -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(title="Homestay API", version="0.1.0")

    if settings.telemetry_enabled:
        setup_telemetry(app, engine)

    app.include_router(v1_router)
    app.include_router(graphql_router, prefix="/graphql")
    return app


app = create_app()
