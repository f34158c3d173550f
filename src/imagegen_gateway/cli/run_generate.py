"""Command line client: generate one image through the upstream API."""
from __future__ import annotations
import argparse
import logging
import sys

import httpx

from imagegen_gateway.catalog.model_selector import ModelSelector
from imagegen_gateway.common.config import load_config
from imagegen_gateway.common.errors import GatewayError
from imagegen_gateway.common.gateway import generate_image
from imagegen_gateway.common.logging_setup import setup_logging
from imagegen_gateway.common.prompts import ASPECT_RATIO_CLAUSES, STYLE_MODIFIERS
from imagegen_gateway.common.schema import GenerationRequest

LOGGER = logging.getLogger("imagegen.cli")

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Generate an image via the configured backend")
    ap.add_argument("--prompt", help="Image prompt")
    ap.add_argument("--style", default="", help=f"One of: {', '.join(STYLE_MODIFIERS)}")
    ap.add_argument("--aspect-ratio", default="square", help=f"One of: {', '.join(ASPECT_RATIO_CLAUSES)}")
    ap.add_argument("--quality", default="standard", help="high or standard")
    ap.add_argument("--model", default=None, help="Model id from the catalog")
    ap.add_argument("--config", default=None, help="YAML config path")
    ap.add_argument("--list-models", action="store_true", help="Show the model catalog and exit")
    return ap

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)
    setup_logging(cfg.log_level)

    chosen: list[str] = []
    selector = ModelSelector(cfg.default_model, chosen.append)

    if args.list_models:
        print(selector.render())
        return 0
    if not args.prompt:
        LOGGER.error("--prompt is required")
        return 2

    if args.model and not selector.select(args.model):
        LOGGER.error("Model %s is not available", args.model)
        return 2
    model = chosen[-1] if chosen else cfg.default_model

    request = GenerationRequest(
        prompt=args.prompt,
        style=args.style,
        aspect_ratio=args.aspect_ratio,
        quality=args.quality,
        model=model,
    )
    try:
        result = generate_image(request, cfg)
    except GatewayError as e:
        LOGGER.error("%s: %s (retryable=%s)", e.error, e.details, e.retryable)
        return 1
    except httpx.HTTPError as e:
        LOGGER.error("Upstream request failed: %s", e)
        return 1
    except ValueError as e:
        LOGGER.error("Malformed upstream response: %s", e)
        return 1

    LOGGER.info("Prompt: %s", result.prompt)
    print(result.image_url)
    return 0

if __name__ == "__main__":
    sys.exit(main())
