# polyfaq/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from polyfaq.config import Settings, settings as default_settings
from polyfaq.database.connection import build_engine, build_session_factory, init_db
from polyfaq.exceptions import FAQValidationError, PersistenceError
from polyfaq.services.cache_service import CacheService
from polyfaq.services.faq_service import FAQService
from polyfaq.services.faq_store import FAQStore
from polyfaq.services.translation_service import TranslationService
from polyfaq.utils.logging import setup_logging
from polyfaq.api.routes import faqs

logger = logging.getLogger(__name__)

INTERNAL_ERROR = {"error": "Internal Server Error"}


def create_app(
    settings: Settings | None = None,
    *,
    engine=None,
    cache_client=None,
    translator: TranslationService | None = None,
) -> FastAPI:
    """
    Builds the API. Database engine, Redis client and translator are created
    in the lifespan unless passed in, and released on shutdown.
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting up %s...", settings.APP_NAME)
        db_engine = engine if engine is not None else build_engine(settings.DATABASE_URL)
        init_db(db_engine)

        if cache_client is not None:
            cache = CacheService(
                cache_client,
                prefix=settings.CACHE_KEY_PREFIX,
                ttl_seconds=settings.CACHE_TTL_SECONDS,
            )
        else:
            cache = CacheService.from_settings(settings)

        app.state.faq_service = FAQService(
            store=FAQStore(build_session_factory(db_engine)),
            cache=cache,
            translator=translator or TranslationService(settings.TRANSLATION_SOURCE_LANGUAGE),
            target_languages=settings.TARGET_LANGUAGES,
            default_language=settings.DEFAULT_LANGUAGE,
            invalidate_on_create=settings.CACHE_INVALIDATE_ON_CREATE,
        )
        logger.info("Startup complete.")
        try:
            yield
        finally:
            logger.info("Shutting down, releasing cache and database clients.")
            await cache.close()
            if engine is None:
                db_engine.dispose()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Error mapping ---

    @app.exception_handler(FAQValidationError)
    async def faq_validation_handler(request: Request, exc: FAQValidationError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(PersistenceError)
    async def persistence_handler(request: Request, exc: PersistenceError):
        # Cause already logged by the store, never sent to the client
        return JSONResponse(status_code=500, content=INTERNAL_ERROR)

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content=INTERNAL_ERROR)

    # Register Routes
    app.include_router(faqs.router, prefix=settings.API_PREFIX, tags=["FAQs"])

    @app.get("/")
    def health_check():
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
