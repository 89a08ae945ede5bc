import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request, responses
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

import handler as hlp
from api.v1.router import contact, health, quote, upload, uploads_router
from config.setting import Settings, settings
from core.setup import ServiceSetup
from error import ResourceNotFoundError, ServerError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-site",
}


def create_app(app_settings: Settings = None, services: ServiceSetup = None) -> FastAPI:
    app_settings = app_settings or settings
    services = services or ServiceSetup(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        services.startup()
        logger.info(f"Caperone API ready on port {app_settings.PORT}")
        yield

    app = FastAPI(
        title="Caperone API",
        version="1.0.0",
        description="Contact, upload and shipping quote backend for the Caperone site",
        lifespan=lifespan,
    )
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    app.add_exception_handler(ValidationError, hlp.validation_error_handler)
    app.add_exception_handler(RequestValidationError, hlp.validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, hlp.validation_http_exceptions_handler)
    app.add_exception_handler(ServerError, hlp.server_error_handler)

    app.include_router(health, prefix=app_settings.API_PREFIX)
    app.include_router(contact, prefix=app_settings.API_PREFIX)
    app.include_router(quote, prefix=app_settings.API_PREFIX)
    app.include_router(upload, prefix=app_settings.API_PREFIX)
    app.include_router(uploads_router, prefix=app_settings.UPLOAD_URL_PREFIX)

    public_dir = Path(app_settings.PUBLIC_DIR)

    # Registered last so every API route wins over the static fallback
    @app.get("/{full_path:path}", include_in_schema=False)
    def static_fallback(full_path: str):
        request_path = f"/{full_path}"
        if request_path == app_settings.API_PREFIX or request_path.startswith(f"{app_settings.API_PREFIX}/"):
            raise ResourceNotFoundError()

        root = public_dir.resolve()
        candidate = (root / full_path).resolve()
        if candidate.is_file() and root in candidate.parents:
            return responses.FileResponse(candidate)

        index = root / "index.html"
        if index.is_file():
            return responses.FileResponse(index)
        return responses.PlainTextResponse("Not found", status_code=404)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
