import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import load_settings
from .routes import router as recommendation_router


def create_app() -> FastAPI:
    settings = load_settings()

    logging.basicConfig(level=settings.log_level)
    logging.info("Exam recommendation service starting")

    app = FastAPI(title="Exam Recommendation Service")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(recommendation_router)
    return app


app = create_app()
