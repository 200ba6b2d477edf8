import sys
import os
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.exceptions import HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from siglon.shared.config import Settings
from siglon.shared.errors import SiglonError
from siglon.shared.response import success_response, error_response
from siglon.shared.seed import seed_data
from siglon.shared.store import create_store
from siglon.auth.router import router as auth_router
from siglon.reports.router import router as reports_router
from siglon.events.router import router as events_router
from siglon.news.router import router as news_router
from siglon.knowledge.router import router as knowledge_router
from siglon.map.router import router as map_router
from siglon.notifications.router import router as notifications_router

logger = logging.getLogger("siglon")


def configure_logging(level="INFO"):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )


def create_app(settings=None, store=None) -> FastAPI:
    """
    Build the API. The store is created from settings at startup unless one is passed in.
    """
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.store is None:
            app.state.store = create_store(settings)
        await app.state.store.open()
        if settings.seed_data:
            await seed_data(app.state.store)
        logger.info(f"SIGLON API started with {settings}")
        yield
        await app.state.store.close()

    app = FastAPI(title="SIGLON Landslide Information API", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(SiglonError)
    async def siglon_error_handler(request, exc: SiglonError):
        return error_response(exc.message, exc.status_code)

    @app.exception_handler(HTTPException)
    async def http_error_handler(request, exc: HTTPException):
        response = error_response(str(exc.detail), exc.status_code)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request, exc: RequestValidationError):
        errors = [
            {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        return error_response("Invalid request", 422, data=errors)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return error_response("Internal server error", 500)

    # Include routers
    app.include_router(auth_router, prefix="/api/auth")
    app.include_router(reports_router, prefix="/api/reports")
    app.include_router(events_router, prefix="/api/events")
    app.include_router(news_router, prefix="/api/news")
    app.include_router(knowledge_router, prefix="/api/knowledge")
    app.include_router(map_router, prefix="/api/map")
    app.include_router(notifications_router, prefix="/api/notifications")

    @app.get("/health", tags=["meta"])
    async def health():
        return success_response({"store": settings.store_backend}, "ok")

    return app


_settings = Settings()
configure_logging(_settings.log_level)
app = create_app(_settings)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
