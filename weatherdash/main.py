import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from weatherdash.core.config import settings
from weatherdash.core.logging_config import configure_logging
from weatherdash.db.init_db import init_db
from weatherdash.api import dashboard, devices, weather_listener

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)

if settings.CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

app.include_router(weather_listener.router)
app.include_router(dashboard.router)
app.include_router(devices.router)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "database error"})


@app.get("/health", tags=["meta"])
def health():
    return {"status": "ok", "app": settings.APP_NAME}


@app.on_event("startup")
def on_startup():
    if settings.CREATE_TABLES_ON_STARTUP:
        init_db()
    logger.info("%s started", settings.APP_NAME)
