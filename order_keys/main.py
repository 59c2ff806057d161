from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from . import __version__
from .config import configure_logging, load_settings
from .digits import get_digits
from .errors import KeyspaceExhausted, OrderKeyError
from .integer import validate_order_key
from .jitter import KeyGenerator
from .schemas import (
    ErrorEnvelope,
    Health,
    KeyBatchIn,
    KeyBetweenIn,
    KeyOut,
    KeyPartsOut,
    KeysOut,
    KeyValidateIn,
    Version,
)

logger = logging.getLogger(__name__)

settings = load_settings()
generator = KeyGenerator(digits=get_digits(settings.digits), jitter_bits=settings.jitter_bits)

app = FastAPI(title="Order Keys API", version=__version__)


# === Helpers ===


def generator_for(jitter_bits: int | None) -> KeyGenerator:
    if jitter_bits is None:
        return generator
    return KeyGenerator(
        digits=generator.digits,
        jitter_bits=jitter_bits,
        random_bit=generator.random_bit,
    )


@app.exception_handler(OrderKeyError)
def order_key_error_handler(request: Request, exc: OrderKeyError) -> JSONResponse:
    status = 409 if isinstance(exc, KeyspaceExhausted) else 400
    logger.warning("%s %s rejected: %s (%s)", request.method, request.url.path, exc.code, exc)
    body = ErrorEnvelope(code=exc.code, message=str(exc))
    return JSONResponse(status_code=status, content=body.model_dump(exclude_none=True))


# === Health & metadata ===


@app.get("/v1/health", response_model=Health)
def health() -> Health:
    return Health()


@app.get("/v1/version", response_model=Version)
def version() -> Version:
    return Version(version=__version__)


# === Key endpoints ===


@app.post("/v1/keys:between", response_model=KeyOut)
def generate_key(payload: KeyBetweenIn) -> KeyOut:
    key = generator_for(payload.jitterBits).between(payload.low, payload.high)
    return KeyOut(key=key)


@app.post("/v1/keys:batch", response_model=KeysOut)
def generate_keys(payload: KeyBatchIn) -> KeysOut:
    if payload.count > settings.max_batch:
        raise HTTPException(status_code=400, detail="batch_too_large")
    keys = generator_for(payload.jitterBits).n_between(payload.low, payload.high, payload.count)
    return KeysOut(keys=keys)


@app.post("/v1/keys:validate", response_model=KeyPartsOut)
def validate_key(payload: KeyValidateIn) -> KeyPartsOut:
    integer_part, fraction = validate_order_key(payload.key, generator.digits)
    return KeyPartsOut(key=payload.key, integerPart=integer_part, fractionalPart=fraction)


def run() -> None:
    import uvicorn

    configure_logging(settings)
    logger.info(
        "serving order keys on %s:%s (base %d, jitter bits %d)",
        settings.host,
        settings.port,
        generator.digits.base,
        generator.jitter_bits,
    )
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
