from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.api.error_handlers import register_error_handlers
from app.core.config import settings
from app.core.database.db import engine
from app.core.database.base import Base
from app.core.logging import setup_logging

# Models must be imported so their tables are registered on Base.metadata
import categories.domain.models  # noqa: F401
import users.models.user  # noqa: F401

# Routers
from categories.routers import categories_router

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: dev-friendly table creation (replace with Alembic in prod)
    setup_logging(settings.log_level, settings.log_format)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    # Shutdown
    await engine.dispose()



app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    debug=settings.debug,
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

register_error_handlers(app)


@app.get("/health", tags=["system"])
async def health():
    return {"status": "ok"}


# Categories
app.include_router(categories_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.app_host, port=settings.app_port)
