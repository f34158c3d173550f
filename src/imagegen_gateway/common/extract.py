"""Image URL extraction from upstream generation responses.

The backend answers in several shapes, so extraction is a chain of small
rules tried in order; the first one returning a URL wins.
"""
from __future__ import annotations
import re
from typing import Any, Callable

IMAGE_URL_RE = re.compile(r"https?://[^\s]+\.(?:jpg|jpeg|png|gif|webp)", re.IGNORECASE)

Extractor = Callable[[Any], str | None]


def _message_content(payload: Any) -> str | None:
    """Return ``choices[0].message.content`` when present and a string."""
    if not isinstance(payload, dict):
        return None
    choices = payload.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if isinstance(content, str) and content:
        return content
    return None


def from_content_match(payload: Any) -> str | None:
    content = _message_content(payload)
    if content is None:
        return None
    match = IMAGE_URL_RE.search(content)
    return match.group(0) if match else None


def from_content_verbatim(payload: Any) -> str | None:
    content = _message_content(payload)
    if content is not None and content.startswith("http"):
        return content.strip()
    return None


def _top_level_field(name: str) -> Extractor:
    def extract(payload: Any) -> str | None:
        if isinstance(payload, dict):
            value = payload.get(name)
            if isinstance(value, str) and value:
                return value
        return None

    extract.__name__ = f"from_{name}_field"
    return extract


from_url_field = _top_level_field("url")
from_image_url_field = _top_level_field("image_url")


def from_raw_string(payload: Any) -> str | None:
    if isinstance(payload, str) and payload.startswith("http"):
        return payload
    return None


EXTRACTORS: tuple[Extractor, ...] = (
    from_content_match,
    from_content_verbatim,
    from_url_field,
    from_image_url_field,
    from_raw_string,
)


def extract_image_url(payload: Any) -> str | None:
    """
    Find the generated image URL in an upstream payload.

    Args:
        payload: Decoded JSON body returned by the backend.

    Returns:
        The first URL produced by ``EXTRACTORS``, or None.
    """
    for extractor in EXTRACTORS:
        url = extractor(payload)
        if url:
            return url
    return None
