from __future__ import annotations

from pathlib import Path

import pytest

from imagegen_gateway.common.config import DEFAULT_MODEL, DEFAULT_UPSTREAM_URL, load_config

_VARS = (
    "IMAGEGEN_CONFIG", "IMAGEGEN_UPSTREAM_URL", "IMAGEGEN_API_KEY", "IMAGEGEN_CUSTOMER_ID",
    "IMAGEGEN_DEFAULT_MODEL", "IMAGEGEN_TIMEOUT", "IMAGEGEN_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in _VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults() -> None:
    cfg = load_config()
    assert cfg.upstream_url == DEFAULT_UPSTREAM_URL
    assert cfg.default_model == DEFAULT_MODEL
    assert cfg.api_key == ""
    assert cfg.timeout == 120.0


def test_yaml_then_env_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "gateway.yaml"
    path.write_text("upstream_url: https://a.test/v1\ncustomer_id: cus_1\ntimeout: 30\nunknown: 1\n")
    monkeypatch.setenv("IMAGEGEN_CONFIG", str(path))
    monkeypatch.setenv("IMAGEGEN_CUSTOMER_ID", "cus_env")
    cfg = load_config()
    assert cfg.upstream_url == "https://a.test/v1"
    assert cfg.customer_id == "cus_env"
    assert cfg.timeout == 30.0


def test_missing_config_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "absent.yaml"))


def test_headers_include_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IMAGEGEN_API_KEY", "secret")
    monkeypatch.setenv("IMAGEGEN_CUSTOMER_ID", "cus_x")
    headers = load_config().headers()
    assert headers["Authorization"] == "Bearer secret"
    assert headers["CustomerId"] == "cus_x"
    assert headers["Content-Type"] == "application/json"
