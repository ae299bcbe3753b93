from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from alunos_api.api.router import api_router
from alunos_api.core.config import Settings, settings as default_settings
from alunos_api.core.database import Database
from alunos_api.core.handlers import register_exception_handlers
from alunos_api.core.logging import logger, setup_logging


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    The connection pool is opened when the app starts serving and disposed
    when it stops; endpoints reach it through ``app.state.db``.
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Connecting to {settings.safe_database_url()}")
        db = Database(settings)
        app.state.db = db
        if not await db.check_connection():
            logger.warning("Database unreachable at startup; requests will fail until it is back")
        if settings.DB_CREATE_TABLES:
            await db.create_tables()
        try:
            yield
        finally:
            await db.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="API para gerenciamento de alunos de uma escola",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        docs_url=settings.DOCS_URL,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/", include_in_schema=False)
    async def root():
        """
        Health check endpoint
        """
        return {
            "message": "Bem-vindo à API de Alunos",
            "docs": settings.DOCS_URL,
            "version": settings.APP_VERSION
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
