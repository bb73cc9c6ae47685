"""
Kanji Number: FastAPI Server
============================

HTTP surface for converting between integers and Japanese numerals.

Endpoints:
    POST /parse             Kanji numerals → integer
    POST /format            Integer → kanji numerals
    POST /find              Locate and parse numerals inside free text
    POST /find/file         Same as /find for an uploaded UTF-8 text file
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Configuration (environment or .env):
    KANJI_NUMBER_MAX_TEXT_LENGTH   Longest accepted text, default 4096
    KANJI_NUMBER_LOG_LEVEL         Logging level, default INFO
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from enum import Enum
from typing import Callable

from fastapi import FastAPI, HTTPException, UploadFile
from pydantic import BaseModel, Field

import kanji_number
from kanji_number import (
    KanjiNumberError,
    SearchResult,
    find_all,
    format_bigint,
    format_int,
    format_serial_int,
    format_uint,
    parse_bigint,
    parse_int,
    parse_serial_int,
    parse_uint,
)
from kanji_number.magnitudes import big_magnitudes

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

logging.basicConfig(level=os.environ.get("KANJI_NUMBER_LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = int(os.environ.get("KANJI_NUMBER_MAX_TEXT_LENGTH", "4096"))
MAX_UPLOAD_BYTES = 1_048_576


# ─── Application Lifespan (pre-warm magnitudes) ─────────────────────

_ready = False


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the arbitrary-precision magnitude table on startup."""
    global _ready  # noqa: PLW0603
    tiers = big_magnitudes().tiers
    logger.info("Magnitude table ready (%d tiers)", len(tiers))
    _ready = True
    yield
    _ready = False


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Kanji Number API",
    description=(
        "Convert integers to Japanese numerals and back. "
        "Strict grammar validation, daiji support, and numbers up to the "
        "無量大数 tier (below 10^72)."
    ),
    version=kanji_number.__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class NumberKind(str, Enum):
    INT = "int"  # signed 64-bit
    UINT = "uint"  # unsigned 64-bit
    BIGINT = "bigint"  # |v| < 10^72
    SERIAL = "serial"  # one kanji per decimal digit, signed 64-bit


_PARSERS: dict[NumberKind, Callable[[str], int]] = {
    NumberKind.INT: parse_int,
    NumberKind.UINT: parse_uint,
    NumberKind.BIGINT: parse_bigint,
    NumberKind.SERIAL: parse_serial_int,
}

_FORMATTERS: dict[NumberKind, Callable[[int], str]] = {
    NumberKind.INT: format_int,
    NumberKind.UINT: format_uint,
    NumberKind.BIGINT: format_bigint,
    NumberKind.SERIAL: format_serial_int,
}


class ParseRequest(BaseModel):
    """Request body for the /parse endpoint."""

    text: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="Kanji numerals only, optionally prefixed with '-'.",
        json_schema_extra={"example": "一万二千三百四十五"},
    )
    kind: NumberKind = NumberKind.BIGINT


class ParseResponse(BaseModel):
    text: str
    kind: NumberKind
    value: int
    decimal: str = Field(description="The value as a decimal string (safe for JSON clients)")


class FormatRequest(BaseModel):
    """Request body for the /format endpoint."""

    value: int = Field(..., json_schema_extra={"example": 12345})
    kind: NumberKind = NumberKind.BIGINT


class FormatResponse(BaseModel):
    value: int
    kind: NumberKind
    text: str


class FindRequest(BaseModel):
    """Request body for the /find endpoint."""

    text: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        json_schema_extra={"example": "代金は金壱萬円、納期は三十日です。"},
    )


class FindResponse(BaseModel):
    count: int
    error_count: int
    results: list[SearchResult]

    model_config = {"json_schema_extra": {"example": {
        "count": 2,
        "error_count": 0,
        "results": [
            {"start": 4, "end": 6, "text": "壱萬", "value": 10000, "error": None},
            {"start": 11, "end": 13, "text": "三十", "value": 30, "error": None},
        ],
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str
    magnitude_tiers: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _require_ready() -> None:
    if not _ready:
        raise HTTPException(status_code=503, detail="Magnitude table not initialised")


def _conversion_error(e: KanjiNumberError) -> HTTPException:
    """Map a conversion failure to a 422 with its machine-readable code."""
    return HTTPException(
        status_code=422,
        detail={"code": e.code, "message": str(e), "details": e.details},
    )


def _build_find_response(results: list[SearchResult]) -> FindResponse:
    return FindResponse(
        count=len(results),
        error_count=sum(1 for r in results if r.error is not None),
        results=results,
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/parse",
    summary="Parse kanji numerals into an integer",
    tags=["Conversion"],
    responses={
        422: {"description": "Text is not a valid numeral for the requested kind"},
        503: {"description": "Service not yet initialised"},
    },
)
def parse_numeral(request: ParseRequest) -> ParseResponse:
    """Parse `text` with the parser for `kind`.

    On failure the 422 detail carries one of the codes `EMPTY`,
    `UNEXPECTED_EOF`, `OVERFLOW`, `INVALID_ENCODING`, `INVALID_SEQUENCE`,
    `UNEXPECTED_RUNE`.
    """
    _require_ready()
    try:
        value = _PARSERS[request.kind](request.text)
    except KanjiNumberError as e:
        logger.info("Rejected %r as %s: %s", request.text, request.kind.value, e.code)
        raise _conversion_error(e)
    return ParseResponse(text=request.text, kind=request.kind, value=value, decimal=str(value))


@app.post(
    "/format",
    summary="Format an integer as kanji numerals",
    tags=["Conversion"],
    responses={
        422: {"description": "Value is outside the range of the requested kind"},
        503: {"description": "Service not yet initialised"},
    },
)
def format_numeral(request: FormatRequest) -> FormatResponse:
    """Return the canonical numeral string of `value`."""
    _require_ready()
    try:
        text = _FORMATTERS[request.kind](request.value)
    except KanjiNumberError as e:
        raise _conversion_error(e)
    return FormatResponse(value=request.value, kind=request.kind, text=text)


@app.post(
    "/find",
    summary="Find numerals in free text",
    tags=["Search"],
    responses={503: {"description": "Service not yet initialised"}},
)
def find_numerals(request: FindRequest) -> FindResponse:
    """Return every numeral span in `text` with its value or error code."""
    _require_ready()
    return _build_find_response(find_all(request.text))


@app.post(
    "/find/file",
    summary="Find numerals in an uploaded text file",
    tags=["Search"],
    responses={
        413: {"description": "File too large (max 1 MB)"},
        400: {"description": "File is not valid UTF-8 text"},
        503: {"description": "Service not yet initialised"},
    },
)
async def find_numerals_in_file(file: UploadFile) -> FindResponse:
    """Upload a UTF-8 `.txt` file (up to 1 MB) and search it for numerals."""
    _require_ready()
    if file.size and file.size > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="File too large (max 1 MB)")

    content = await file.read()
    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="File too large (max 1 MB)")
    try:
        raw_text = content.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File must be UTF-8 encoded text")

    return _build_find_response(find_all(raw_text))


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Service not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    _require_ready()
    return HealthResponse(
        status="healthy",
        version=kanji_number.__version__,
        magnitude_tiers=len(big_magnitudes().tiers),
    )
