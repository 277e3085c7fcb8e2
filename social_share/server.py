"""FastAPI endpoint exposing the generator."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict

import uvicorn
from fastapi import Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import load_config
from .service import handle_generate

LOGGER = logging.getLogger(__name__)

UNPARSEABLE_MESSAGE = "Unable to parse request payload."

app = FastAPI(title="Social Share Generator")


@app.exception_handler(RequestValidationError)
async def unparseable_payload(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or non-object JSON is a 400, keeping 422 for "no usable content"."""
    LOGGER.info("Rejected unparseable payload on %s", request.url.path)
    return JSONResponse(status_code=400, content={"message": UNPARSEABLE_MESSAGE})


@app.get("/healthz")
def healthz() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/api/generate")
def generate_posts(payload: Dict[str, Any] = Body(...)) -> JSONResponse:
    """Validation happens in the service layer so every entry point answers alike."""
    response = handle_generate(payload, config=load_config())
    return JSONResponse(status_code=response.status, content=response.body)


def run() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
    )
    uvicorn.run(app, host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8000")))


__all__ = ["UNPARSEABLE_MESSAGE", "app", "run"]
