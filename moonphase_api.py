"""FastAPI application reporting the lunar phase."""

from __future__ import annotations

import json
import logging
import os
import time
from contextlib import asynccontextmanager
from datetime import UTC, date, datetime
from datetime import time as dt_time
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from models import ErrorResponse, HealthResponse, PhaseResponse, TonightResponse
from moonphase.lines import (
    LineSourceError,
    available_resources,
    random_exclamation,
    random_quote,
    resolve_strings_dir,
)
from moonphase.phase import LunarPhase, lunar_phase_at, lunar_phase_tonight

logging.basicConfig(level=logging.INFO, format="%(message)s")
LOGGER = logging.getLogger("moonphase-api")

APP_DESCRIPTION = "Tonight's lunar phase from the mean synodic month"

DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]

STRINGS_DIR: Optional[Path] = None


def _cors_origins() -> List[str]:
    configured = os.environ.get("MOONPHASE_CORS_ORIGINS", "")
    extra = [origin.strip() for origin in configured.split(",") if origin.strip()]
    return DEFAULT_CORS_ORIGINS + extra


@asynccontextmanager
async def lifespan(app: FastAPI):
    global STRINGS_DIR
    strings_dir = resolve_strings_dir()
    try:
        resources = available_resources(strings_dir)
    except LineSourceError as exc:
        LOGGER.error(json.dumps({"event": "strings_unavailable", "error": str(exc)}))
        raise
    STRINGS_DIR = strings_dir
    LOGGER.info(
        json.dumps(
            {"event": "startup", "strings_dir": str(strings_dir), "resources": resources}
        )
    )
    yield


app = FastAPI(
    title="Moonphase API",
    description=APP_DESCRIPTION,
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _strings_dir() -> Path:
    return STRINGS_DIR if STRINGS_DIR is not None else resolve_strings_dir()


def _phase_fields(phase: LunarPhase) -> dict:
    return {
        "date_value": phase.evaluated.date(),
        "time": phase.evaluated.strftime("%H:%M:%S"),
        "julian_date": phase.julian_date,
        "phase_id": phase.bucket,
        "phase": phase.name,
        "icon": phase.icon,
    }


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    payload = ErrorResponse(code=code, error=message)
    LOGGER.error(json.dumps({"event": "error", "code": code, "message": message}))
    return JSONResponse(status_code=status_code, content=payload.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # "query.hour: Input should be less than or equal to 23"
    messages = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return _error_response(422, "validation_error", messages)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Routing errors (unknown path, wrong method) arrive here as well.
    return _error_response(exc.status_code, f"http_{exc.status_code}", str(exc.detail))


@app.exception_handler(LineSourceError)
async def line_source_exception_handler(
    request: Request, exc: LineSourceError
) -> JSONResponse:
    return _error_response(500, "strings_unavailable", str(exc))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled exception", exc_info=exc)
    return _error_response(500, "internal_error", "Unhandled server error")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    strings_dir = _strings_dir()
    return HealthResponse(
        ok=True,
        strings_dir=str(strings_dir),
        resources=available_resources(strings_dir),
    )


@app.get(
    "/phase",
    response_model=PhaseResponse,
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def phase_endpoint(
    date_value: date = Query(..., alias="date", description="Calendar date (YYYY-MM-DD)"),
    hour: int = Query(12, ge=0, le=23, description="Hour of the day"),
    minute: int = Query(0, ge=0, le=59, description="Minute of the hour"),
    second: int = Query(0, ge=0, le=59, description="Second of the minute"),
) -> PhaseResponse:
    start_time = time.perf_counter()
    evaluated = datetime.combine(date_value, dt_time(hour, minute, second))
    phase = lunar_phase_at(evaluated)
    response = PhaseResponse(**_phase_fields(phase))

    duration_ms = (time.perf_counter() - start_time) * 1000.0
    LOGGER.info(
        json.dumps(
            {
                "event": "phase",
                "date": date_value.isoformat(),
                "time": response.time,
                "phase_id": phase.bucket,
                "duration_ms": round(duration_ms, 3),
            }
        )
    )
    return response


@app.get(
    "/tonight",
    response_model=TonightResponse,
    responses={500: {"model": ErrorResponse}},
)
def tonight_endpoint() -> TonightResponse:
    start_time = time.perf_counter()
    now = datetime.now(UTC)
    phase = lunar_phase_tonight(now)
    strings_dir = _strings_dir()
    response = TonightResponse(
        **_phase_fields(phase),
        exclamation=random_exclamation(strings_dir),
        quote=random_quote(strings_dir),
    )

    duration_ms = (time.perf_counter() - start_time) * 1000.0
    LOGGER.info(
        json.dumps(
            {
                "event": "tonight",
                "now": now.isoformat(),
                "phase_id": phase.bucket,
                "duration_ms": round(duration_ms, 3),
            }
        )
    )
    return response
