"""FastAPI gateway for the external image generation API.

Endpoints:
- GET /health
- GET /api/models
- POST /api/generate  { "prompt": "...", "style": "...", "aspectRatio": "...", "quality": "...", "model": "..." }
- OPTIONS /api/generate
"""
from __future__ import annotations
import logging
from typing import Any

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from imagegen_gateway.catalog.model_selector import catalog_as_dicts
from imagegen_gateway.common.config import load_config
from imagegen_gateway.common.errors import (
    GatewayError,
    InternalError,
    PromptValidationError,
    RequestBodyError,
)
from imagegen_gateway.common.gateway import generate_image
from imagegen_gateway.common.logging_setup import setup_logging
from imagegen_gateway.common.schema import GenerationRequest, GenerationResult

LOGGER = logging.getLogger("imagegen.serve.app")

CONFIG = load_config()
setup_logging(CONFIG.log_level)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

app = FastAPI()

@app.on_event("startup")
def _check_config_on_startup() -> None:
    """Warn early if the upstream credentials are not configured."""
    if not CONFIG.api_key:
        LOGGER.warning("IMAGEGEN_API_KEY is not set; upstream calls will likely be rejected")
    LOGGER.info("Forwarding generation requests to %s", CONFIG.upstream_url)

@app.exception_handler(RequestValidationError)
async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report a blank prompt ahead of any other invalid field."""
    raw = exc.body if isinstance(exc.body, dict) else {}
    prompt = raw.get("prompt")
    err: GatewayError
    if prompt is None or (isinstance(prompt, str) and not prompt.strip()):
        err = PromptValidationError()
    else:
        err = RequestBodyError(details=str(exc.errors()))
    return JSONResponse(err.to_body(), status_code=err.status_code)

@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "model": CONFIG.default_model}

@app.get("/api/models")
def models() -> list[dict[str, Any]]:
    return catalog_as_dicts()


@app.post("/api/generate", response_model=GenerationResult)
def generate(body: GenerationRequest) -> Any:
    try:
        return generate_image(body, CONFIG)
    except GatewayError as e:
        return JSONResponse(e.to_body(), status_code=e.status_code)
    except httpx.HTTPError as e:
        LOGGER.error("Upstream request failed: %s", e)
        err = InternalError(str(e))
        return JSONResponse(err.to_body(), status_code=err.status_code)
    except Exception as e:
        LOGGER.exception("Image generation error")
        err = InternalError(str(e))
        return JSONResponse(err.to_body(), status_code=err.status_code)


@app.options("/api/generate")
def generate_preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)
