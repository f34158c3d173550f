from __future__ import annotations

import pytest

import imagegen_gateway.serve.server as server


def test_server_launches_uvicorn(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[list[str]] = []
    monkeypatch.setattr(server.subprocess, "run", lambda cmd, check: seen.append(cmd))
    monkeypatch.setenv("IMAGEGEN_PORT", "9100")
    server.main()
    cmd = seen[0]
    assert cmd[1:4] == ["-m", "uvicorn", "imagegen_gateway.serve.fastapi_app:app"]
    assert cmd[cmd.index("--port") + 1] == "9100"
