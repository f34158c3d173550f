"""Forward a generation request to the upstream API and map its answer.

Raises ``GatewayError`` subclasses for every failure the caller should see;
the HTTP layer and the CLI both build on :func:`generate_image`.
"""
from __future__ import annotations
import logging
import time
from typing import Any

import httpx

from imagegen_gateway.common.config import GatewayConfig
from imagegen_gateway.common.errors import (
    ExtractionError,
    PromptValidationError,
    UpstreamError,
)
from imagegen_gateway.common.extract import extract_image_url
from imagegen_gateway.common.prompts import compose_prompt
from imagegen_gateway.common.schema import (
    GenerationRequest,
    GenerationResult,
    GenerationSettings,
)

LOGGER = logging.getLogger("imagegen.gateway")


def build_payload(model: str, enhanced_prompt: str) -> dict[str, Any]:
    return {
        "model": model,
        "messages": [{"role": "user", "content": enhanced_prompt}],
    }


def generate_image(body: GenerationRequest, config: GatewayConfig) -> GenerationResult:
    """
    Compose the prompt, call the backend once and extract the image URL.

    Args:
        body: Incoming request.
        config: Upstream endpoint, credentials and defaults.

    Returns:
        Successful generation result.
    """
    if not body.prompt or not body.prompt.strip():
        raise PromptValidationError()

    model = body.model or config.default_model
    enhanced = compose_prompt(body.prompt, body.style, body.aspect_ratio, body.quality)
    LOGGER.debug("Enhanced prompt for %s: %s", model, enhanced)

    start = time.time()
    with httpx.Client(timeout=config.timeout, follow_redirects=True) as client:
        r = client.post(
            config.upstream_url,
            headers=config.headers(),
            json=build_payload(model, enhanced),
        )
    latency = int((time.time() - start) * 1000)

    if not r.is_success:
        LOGGER.error("AI API error: %s %s", r.status_code, r.text)
        raise UpstreamError(r.status_code, r.text)

    data = r.json()
    image_url = extract_image_url(data)
    if not image_url:
        LOGGER.error("No image URL found in response: %s", data)
        raise ExtractionError(data)

    LOGGER.info("Generated image with %s in %sms", model, latency)
    return GenerationResult(
        image_url=image_url,
        prompt=enhanced,
        original_prompt=body.prompt,
        settings=GenerationSettings(
            style=body.style,
            aspect_ratio=body.aspect_ratio,
            quality=body.quality,
            model=model,
        ),
        timestamp=int(time.time() * 1000),
    )
