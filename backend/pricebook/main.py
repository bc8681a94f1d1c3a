"""
FastAPI application entry point.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pricebook.config import settings
from pricebook.api.error_handlers import register_error_handlers
from pricebook.api.router import api_router
from pricebook.logging_config import configure_logging


def create_app() -> FastAPI:
    """Build the application: logging, CORS, error handlers and routes."""
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        description="Per-user categories and items with a uniform error contract",
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include API router
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    def read_root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": "1.0.0",
            "status": "running"
        }

    @app.get("/api/v1/health")
    def health_check():
        """Health check endpoint."""
        return {
            "status": "ok",
            "app_name": settings.app_name
        }

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run("pricebook.main:app", host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
