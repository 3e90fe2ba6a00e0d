from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from transitnet.adapters.api.controllers.network import router as network_router
from transitnet.domain.exceptions import AvailabilityError, FormatError

app = FastAPI(title="transitnet")
app.include_router(network_router)


@app.exception_handler(FormatError)
async def format_error_handler(request: Request, exc: FormatError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(AvailabilityError)
async def availability_error_handler(
    request: Request, exc: AvailabilityError
) -> JSONResponse:
    logging.getLogger("uvicorn.error").warning(
        "Network document unavailable: %s", exc, extra={"path": str(request.url.path)}
    )
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON so clients can display them."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("TRANSITNET_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, RuntimeError):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
