"""
Amount Converter — FastAPI Server
=================================

RESTful API for converting free-form amounts.

Endpoints:
    POST /convert           Convert an amount (currency, distance or plain number)
    GET  /classify          Show the detected marker and payload for an amount
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from amount_converter import __version__
from amount_converter.config import Settings, load_settings
from amount_converter.converter import AmountConverter
from amount_converter.exceptions import AmountConversionError, DispatchError
from amount_converter.models import ConversionRequest, ConversionResult, Marker

load_dotenv()


# ─── Application Lifespan ───────────────────────────────────────────

_converter: AmountConverter | None = None
_settings: Settings | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load settings and build the shared converter on startup."""
    global _converter, _settings  # noqa: PLW0603
    _settings = load_settings()
    _converter = AmountConverter()
    yield
    _converter = None
    _settings = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Amount Converter API",
    description=(
        "Converts dollars ⇄ yen at a given rate, metric ⇄ imperial distances, "
        "and plain numbers between comma grouping and 万/億 magnitude words."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Response Schemas ───────────────────────────────────────────────


class ClassificationOut(BaseModel):
    amount: str
    marker: Marker
    payload: str


class HealthResponse(BaseModel):
    status: str
    version: str
    default_rate: float
    use_large_units: bool


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_converter() -> tuple[AmountConverter, Settings]:
    if _converter is None or _settings is None:
        raise HTTPException(status_code=503, detail="Converter not initialised")
    return _converter, _settings


def _error_response(error: AmountConversionError) -> HTTPException:
    """Map a conversion error to an HTTP error with a structured body."""
    status = 500 if isinstance(error, DispatchError) else 422
    return HTTPException(
        status_code=status,
        detail={"code": error.code, "message": error.message, "details": error.details},
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert an amount",
    tags=["Conversion"],
    responses={
        422: {"description": "Amount is not a number, or the rate is invalid"},
        500: {"description": "Amount classified with an unknown marker"},
        503: {"description": "Converter not yet initialised"},
    },
)
def convert_amount(request: ConversionRequest) -> ConversionResult:
    """Convert a currency amount, a distance, or a plain number.

    - **"$100000"** → yen, formatted per `use_large_units`
    - **"100000円"** → dollars, formatted per `use_large_units`
    - **"5km"** → miles (and cm/in, m/ft likewise)
    - **"12345"** → "1.23万", and **"1.23万"** → "12,300"

    `rate` and `use_large_units` default to the server configuration.
    """
    converter, settings = _get_converter()
    rate = request.rate if request.rate is not None else settings.default_rate
    use_large_units = (
        request.use_large_units if request.use_large_units is not None else settings.use_large_units
    )

    marker, payload = converter.classify(request.amount)
    try:
        result = converter.convert(request.amount, rate, use_large_units)
    except AmountConversionError as e:
        raise _error_response(e)

    return ConversionResult(amount=request.amount, marker=marker, payload=payload, result=result)


@app.get(
    "/classify",
    summary="Detect the currency/unit marker of an amount",
    tags=["Conversion"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def classify_amount(amount: str = Query(..., description="Free-form amount, e.g. '100 yen'")) -> ClassificationOut:
    """Return the marker ("" when none) and the payload left after removing it."""
    converter, _ = _get_converter()
    marker, payload = converter.classify(amount)
    return ClassificationOut(amount=amount, marker=marker, payload=payload)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    _, settings = _get_converter()
    return HealthResponse(
        status="healthy",
        version=__version__,
        default_rate=settings.default_rate,
        use_large_units=settings.use_large_units,
    )
