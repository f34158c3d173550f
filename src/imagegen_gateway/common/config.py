"""Gateway configuration, read once at process start.

Values come from an optional YAML file (path in ``IMAGEGEN_CONFIG``) and are
overridden by ``IMAGEGEN_*`` environment variables.
"""
from __future__ import annotations
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

DEFAULT_UPSTREAM_URL = "https://oi-server.onrender.com/chat/completions"
DEFAULT_MODEL = "replicate/black-forest-labs/flux-1.1-pro"

_ENV_KEYS = {
    "upstream_url": "IMAGEGEN_UPSTREAM_URL",
    "api_key": "IMAGEGEN_API_KEY",
    "customer_id": "IMAGEGEN_CUSTOMER_ID",
    "default_model": "IMAGEGEN_DEFAULT_MODEL",
    "timeout": "IMAGEGEN_TIMEOUT",
    "log_level": "IMAGEGEN_LOG_LEVEL",
}


@dataclass(frozen=True)
class GatewayConfig:
    """Upstream endpoint, credentials and defaults for the gateway."""
    upstream_url: str = DEFAULT_UPSTREAM_URL
    api_key: str = ""
    customer_id: str = ""
    default_model: str = DEFAULT_MODEL
    timeout: float = 120.0
    log_level: str = "INFO"

    def headers(self) -> dict[str, str]:
        """Headers sent with every upstream request."""
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        if self.customer_id:
            headers["CustomerId"] = self.customer_id
        return headers


def load_cfg(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _coerce(values: dict[str, Any]) -> dict[str, Any]:
    known = {k: v for k, v in values.items() if k in _ENV_KEYS and v is not None}
    if "timeout" in known:
        known["timeout"] = float(known["timeout"])
    for key in ("upstream_url", "api_key", "customer_id", "default_model", "log_level"):
        if key in known:
            known[key] = str(known[key])
    return known


def load_config(path: str | None = None) -> GatewayConfig:
    """
    Build the gateway configuration.

    Args:
        path: Optional YAML file. Defaults to ``$IMAGEGEN_CONFIG`` when set.

    Returns:
        Frozen configuration; environment variables win over file values.
    """
    cfg = GatewayConfig()
    path = path or os.getenv("IMAGEGEN_CONFIG")
    if path:
        if not Path(path).exists():
            raise FileNotFoundError(f"Gateway config not found at {path}")
        cfg = replace(cfg, **_coerce(load_cfg(path)))

    env = {field: os.getenv(var) for field, var in _ENV_KEYS.items()}
    return replace(cfg, **_coerce(env))
