import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from app.config import Settings, get_settings
from app.core.constants import DEFAULT_DASHBOARD_PATH, STATIC_DIR, TEMPLATES_DIR
from app.core.logging import setup_logging
from app.core.responses import register_exception_handlers
from app.database import engine, init_db
from app.routers import (
    dashboard_router,
    health_router,
    inventory_router,
    transactions_router,
)

setup_logging()
settings: Settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    init_db(engine)
    logger.info("Connected to %s database", engine.dialect.name)
    try:
        yield
    finally:
        engine.dispose()
        logger.info("Database connections closed")


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
register_exception_handlers(app)

app.include_router(health_router)
app.include_router(dashboard_router)
app.include_router(transactions_router)
app.include_router(inventory_router)


@app.get("/", include_in_schema=False)
def root():
    return RedirectResponse(url=DEFAULT_DASHBOARD_PATH, status_code=302)


__all__ = ["app", "root"]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
