# api/main.py
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware

from catalog.errors import DataIntegrityError
from catalog.sa.database import db
from api.routes.base import error_response
from api.routes.catalog import routers

logger = logging.getLogger(__name__)

DEFAULT_ORIGINS = "http://localhost:5173,http://localhost:4173,http://127.0.0.1:5173,http://localhost"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
    db.init_db()
    yield
    db.dispose()


app = FastAPI(title="BookStudio Catalog", lifespan=lifespan)

# CORS configuration
origins = [o.strip() for o in os.getenv("BOOKSTUDIO_CORS_ORIGINS", DEFAULT_ORIGINS).split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DataIntegrityError)
async def data_integrity_handler(request: Request, exc: DataIntegrityError):
    logger.error(f"Data integrity fault on {request.method} {request.url.path}: {exc}")
    return error_response(
        "Internal data integrity error.", "server_error", status.HTTP_500_INTERNAL_SERVER_ERROR
    )


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "bookstudio-catalog"}


for router in routers:
    app.include_router(router)
