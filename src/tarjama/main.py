from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tarjama import config
from tarjama.errors import TranslationStoreError
from tarjama.routers import router as translations_router
from tarjama.store import TranslationStore


async def handle_store_error(request: Request, exc: TranslationStoreError):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


def create_app(translations_file: str | None = None, upload_dir: str | None = None) -> FastAPI:
    """
    Build the API app.

    Args:
        translations_file: JSON store file (defaults to TRANSLATIONS_FILE)
        upload_dir: Temporary upload directory (defaults to UPLOAD_DIR)
    """
    translations_file = translations_file or config.TRANSLATIONS_FILE
    upload_dir = upload_dir or config.UPLOAD_DIR

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load the store on startup"""
        print("🚀 Loading translations...")
        app.state.store = TranslationStore(translations_file)
        app.state.upload_dir = upload_dir
        print("✅ Translation store ready")

        yield

        print("🔌 Shutting down...")

    app = FastAPI(
        title="Tarjama",
        description="English/Arabic translation key-value store",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TranslationStoreError, handle_store_error)

    # Root endpoint
    @app.get("/")
    async def root():
        return {
            "message": "Tarjama translation store",
            "version": "1.0.0",
            "docs": "/docs",
            "endpoints": {
                "translations": "/api/translations",
                "upload_json": "/api/upload-json",
                "upload_excel": "/api/upload-excel",
                "bulk_update": "/api/bulk-update",
            },
        }

    # Include routers
    app.include_router(
        translations_router,
        prefix="/api",
        tags=["translations"],
    )

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "service": "Tarjama"}

    return app


app = create_app()


def run():
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
