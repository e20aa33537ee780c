from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from branchdesk.api.v1.router import api_router
from branchdesk.core.config import settings
from branchdesk.core.logging_config import ACCESS_LOGGER_NAME, configure_logging
from branchdesk.services.store import BranchStore, EmployeeStore

logger = logging.getLogger(__name__)
access_logger = logging.getLogger(ACCESS_LOGGER_NAME)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    application.state.branch_store = BranchStore()
    application.state.employee_store = EmployeeStore()
    logger.info("%s %s started", settings.APP_NAME, settings.APP_VERSION)
    yield
    application.state.branch_store.clear()
    application.state.employee_store.clear()


configure_logging(settings)

app = FastAPI(
    title=settings.APP_NAME,
    description="In-memory CRUD API for branches and employees",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    if settings.ACCESS_LOG:
        client = request.client.host if request.client else "-"
        access_logger.info(
            '%s "%s %s" %d %.1fms',
            client,
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Bad Request"},
    )


app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": settings.APP_NAME}
