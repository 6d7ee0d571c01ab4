import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from app.api import api_router
from app.config import Settings, settings as default_settings
from app.registry import StudentNotFoundError, StudentRegistry
from app.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, registry: Optional[StudentRegistry] = None) -> FastAPI:
    """Build the application around its own student registry."""
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.app_name,
        description="In-memory CRUD API over student records",
        version=settings.app_version,
        debug=settings.debug,
        docs_url=settings.docs_url,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.registry = registry if registry is not None else StudentRegistry(first_id=settings.first_id)

    app.include_router(api_router)

    @app.exception_handler(StudentNotFoundError)
    async def student_not_found_handler(request: Request, exc: StudentNotFoundError):
        return PlainTextResponse("Not Found", status_code=404)

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "message": f"Welcome to {settings.app_name}",
            "docs": settings.docs_url,
        }

    @app.get("/health", include_in_schema=False)
    async def health_check():
        return {"status": "healthy", "students": len(app.state.registry)}

    return app


app = create_app()


if __name__ == "__main__":
    logger.info("API running on http://localhost:%d", default_settings.port)
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
