from __future__ import annotations

from typing import Any


class FakeResponse:
    def __init__(self, json_data: Any = None, status_code: int = 200, text: str = "", invalid_json: bool = False) -> None:
        self._json = json_data
        self.invalid_json = invalid_json
        self.status_code = status_code
        self.text = text

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._json


def make_client(response: FakeResponse, calls: list[dict[str, Any]] | None = None) -> type:
    """Build an httpx.Client stand-in that always answers with ``response``."""

    class _FakeClient:
        def __init__(self, timeout: float | int | None = None, follow_redirects: bool = False) -> None:  # signature-compatible
            self.timeout = timeout
            self.follow_redirects = follow_redirects

        def __enter__(self) -> "_FakeClient":
            return self

        def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
            return None

        def post(self, url: str, headers: dict[str, str] | None = None, json: Any = None) -> FakeResponse:  # noqa: A002
            if calls is not None:
                calls.append({"url": url, "headers": headers, "json": json, "timeout": self.timeout,
                              "follow_redirects": self.follow_redirects})
            return response

    return _FakeClient
