"""
FastAPI application exposing the diff parser.
"""
from fastapi import FastAPI

from difflines import __version__
from difflines.routes.diff_routes import router as diff_router
from difflines.utils.logging_utils import logger


def create_app() -> FastAPI:
    app = FastAPI(
        title="difflines API",
        description="Parse unified diffs into numbered, normalized line records",
        version=__version__,
    )
    app.include_router(diff_router)
    logger.debug("difflines API routes registered")
    return app


app = create_app()
