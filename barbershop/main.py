# barbershop/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from .config import AUTO_CREATE_TABLES, CORS_ORIGINS, HOST, LOG_LEVEL, PORT
from .db import create_tables
from .errors import BookingError
from .routers import (
    appointments_routes,
    auth_routes,
    barbers_routes,
    services_routes,
    users_routes,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if AUTO_CREATE_TABLES:
        create_tables()
        logger.info("Database tables created")
    yield


app = FastAPI(title="Barbershop Booking API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.exception_handler(BookingError)
async def booking_error_handler(request: Request, exc: BookingError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    else:
        logger.warning(
            "%s %s rejected (%s): %s", request.method, request.url.path, exc.status_code, exc.detail
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


app.include_router(auth_routes.router)
app.include_router(users_routes.router)
app.include_router(barbers_routes.router)
app.include_router(services_routes.router)
app.include_router(appointments_routes.router)


@app.get("/health")
def health_check():
    return {"status": "ok"}


def run():
    uvicorn.run(app, host=HOST, port=PORT)
