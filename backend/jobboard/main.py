import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import auth as auth_api
from .api import job as job_api
from .config import FRONTEND_ORIGINS, HOST, LOG_LEVEL, PORT, SERVICE_NAME
from .services.credential_store import CredentialStore
from .utils.error_handlers import AppError, create_error_response, get_error_message

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError):
    """Map credential store errors to their status code and message."""
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return create_error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTPException (unknown routes, wrong methods) with the same body shape."""
    message = exc.detail if isinstance(exc.detail, str) else get_error_message("not_found")
    return create_error_response(exc.status_code, message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON or wrongly typed fields are a client error, not a 422."""
    # Only field locations are logged; the raw input may hold a password.
    fields = [".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()]
    logger.warning("Request validation failed on %s: %s", request.url.path, fields)
    return create_error_response(400, get_error_message("validation_error"))


async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors globally."""
    logger.exception("Unhandled exception: %s", exc)
    return create_error_response(500, get_error_message("server_error"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s listening on http://%s:%d", SERVICE_NAME, HOST, PORT)
    logger.info("Use POST requests to /register and /login")
    logger.info("Use GET requests to /jobs to retrieve job listings")
    yield
    logger.info("%s stopped with %d registered users", SERVICE_NAME, len(app.state.credential_store))


def create_app(store: CredentialStore | None = None) -> FastAPI:
    app = FastAPI(title=SERVICE_NAME, lifespan=lifespan)

    # One store per app; it lives and dies with the process.
    app.state.credential_store = store if store is not None else CredentialStore()

    app.include_router(auth_api.router)
    app.include_router(job_api.router)

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {
            "status": "ok",
            "service": SERVICE_NAME,
        }

    # Without an explicit origin list any frontend may call the API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=FRONTEND_ORIGINS or ["*"],
        allow_credentials=bool(FRONTEND_ORIGINS),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on the configured host and port."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
