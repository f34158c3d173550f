from __future__ import annotations

from imagegen_gateway.common.extract import (
    extract_image_url,
    from_content_match,
    from_content_verbatim,
    from_image_url_field,
    from_raw_string,
    from_url_field,
)


def _chat(content: object) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def test_content_is_image_url() -> None:
    assert extract_image_url(_chat("https://x.com/a.png")) == "https://x.com/a.png"


def test_url_embedded_in_content_text() -> None:
    payload = _chat("Here is your image: https://cdn.example.com/out/1.WEBP enjoy")
    assert from_content_match(payload) == "https://cdn.example.com/out/1.WEBP"
    assert extract_image_url(payload) == "https://cdn.example.com/out/1.WEBP"


def test_content_starting_with_http_used_verbatim() -> None:
    payload = _chat("https://example.com/render?id=42 \n")
    assert from_content_match(payload) is None
    assert from_content_verbatim(payload) == "https://example.com/render?id=42"
    assert extract_image_url(payload) == "https://example.com/render?id=42"


def test_top_level_url_field() -> None:
    assert extract_image_url({"url": "https://x.com/b.jpg"}) == "https://x.com/b.jpg"


def test_image_url_field() -> None:
    payload = {"image_url": "https://x.com/c.gif"}
    assert from_url_field(payload) is None
    assert from_image_url_field(payload) == "https://x.com/c.gif"
    assert extract_image_url(payload) == "https://x.com/c.gif"


def test_raw_string_payload() -> None:
    assert from_raw_string("https://x.com/d") == "https://x.com/d"
    assert extract_image_url("https://x.com/d") == "https://x.com/d"
    assert extract_image_url("not a url") is None


def test_content_without_url_falls_through_to_url_field() -> None:
    payload = _chat("Sorry, I cannot do that")
    payload["url"] = "https://x.com/e.png"
    assert extract_image_url(payload) == "https://x.com/e.png"


def test_malformed_shapes_yield_none() -> None:
    for payload in (None, [], {}, {"choices": []}, {"choices": ["x"]},
                    {"choices": [{"message": None}]}, _chat(None), _chat(42),
                    {"url": 5}, {"url": ""}):
        assert extract_image_url(payload) is None
