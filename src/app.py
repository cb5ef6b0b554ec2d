"""Portfolio Contact Service - FastAPI server for the portfolio contact form."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.shared.contact.config import ContactSettings
from src.shared.contact.routes import INTERNAL_ERROR_MESSAGE, router as contact_router
from src.shared.contact.service import ContactService

STATUS_MESSAGES = {
    404: "Not found",
    405: "Method not allowed",
}


def _cors_headers(request: Request, allowed_origins: list) -> dict:
    """CORS headers for error responses, which bypass the middleware."""
    headers = {}
    origin = request.headers.get("origin")
    if origin in allowed_origins:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Access-Control-Allow-Credentials"] = "true"
        headers["Access-Control-Allow-Methods"] = "*"
        headers["Access-Control-Allow-Headers"] = "*"
    return headers


def create_app(
    settings: Optional[ContactSettings] = None,
    contact_service: Optional[ContactService] = None,
) -> FastAPI:
    """Composition root: builds the app and the process-wide contact service."""
    settings = settings or ContactSettings.from_env()

    app = FastAPI(
        title="Portfolio Contact Service",
        description="Contact form API for the portfolio website",
        version="0.1.0"
    )
    app.state.settings = settings
    app.state.contact_service = contact_service or ContactService(settings)

    if not settings.email_configured:
        logging.info("RESEND_API_KEY not set; contact notifications will be logged only")

    app.include_router(contact_router)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Render HTTP errors as {"message": ...} with CORS headers."""
        if isinstance(exc.detail, dict):
            content = exc.detail
        elif exc.status_code in STATUS_MESSAGES:
            # Framework-raised 404/405 carry Starlette's default phrases
            default_phrase = exc.detail in (None, "Not Found", "Method Not Allowed")
            content = {"message": STATUS_MESSAGES[exc.status_code] if default_phrase else str(exc.detail)}
        else:
            content = {"message": str(exc.detail)}

        return JSONResponse(
            status_code=exc.status_code,
            content=content,
            headers={**(exc.headers or {}), **_cors_headers(request, settings.cors_origins)},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Last-resort handler: generic 500, detail only in development."""
        logging.error(f"Unhandled exception: {str(exc)}", exc_info=True)

        content = {"message": INTERNAL_ERROR_MESSAGE}
        if settings.is_development:
            content["error"] = str(exc)

        return JSONResponse(
            status_code=500,
            content=content,
            headers=_cors_headers(request, settings.cors_origins),
        )

    @app.get("/")
    async def root():
        return {"message": "Portfolio Contact API is running", "status": "ok"}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


app = create_app()
