"""Prompt enhancement helpers.

The enhanced prompt is the trimmed user prompt followed by a style clause, a
quality clause and an aspect-ratio clause, in that order.
"""
from __future__ import annotations
from types import MappingProxyType
from typing import Mapping

STYLE_MODIFIERS: Mapping[str, str] = MappingProxyType({
    "photorealistic": "photorealistic, highly detailed, professional photography",
    "artistic": "artistic, creative, stylized, beautiful art",
    "minimalist": "minimalist, clean, simple, elegant design",
    "vintage": "vintage style, retro, aged, nostalgic",
    "cyberpunk": "cyberpunk, neon, futuristic, sci-fi",
    "fantasy": "fantasy art, magical, ethereal, mystical",
    "abstract": "abstract art, modern, contemporary, conceptual",
})

HIGH_QUALITY_CLAUSE = ", ultra high quality, 8k resolution, masterpiece"
STANDARD_QUALITY_CLAUSE = ", high quality, detailed"

ASPECT_RATIO_CLAUSES: Mapping[str, str] = MappingProxyType({
    "portrait": ", vertical composition, portrait orientation",
    "landscape": ", horizontal composition, landscape orientation",
    "square": ", square composition, balanced framing",
    "widescreen": ", cinematic wide shot, panoramic view",
})


def quality_clause(quality: str) -> str:
    """Return the clause for a quality setting; empty quality adds nothing."""
    if not quality:
        return ""
    if quality == "high":
        return HIGH_QUALITY_CLAUSE
    return STANDARD_QUALITY_CLAUSE


def compose_prompt(
    prompt: str,
    style: str = "",
    aspect_ratio: str = "square",
    quality: str = "standard",
) -> str:
    """
    Compose the enhanced prompt sent to the generation backend.

    Args:
        prompt: Raw user prompt.
        style: Style key; unknown values are ignored.
        aspect_ratio: Aspect-ratio key; unknown values are ignored.
        quality: "high" for the ultra clause, anything else non-empty for the
            standard clause.

    Returns:
        Enhanced prompt.
    """
    enhanced = prompt.strip()
    if style in STYLE_MODIFIERS:
        enhanced += f", {STYLE_MODIFIERS[style]}"
    enhanced += quality_clause(quality)
    enhanced += ASPECT_RATIO_CLAUSES.get(aspect_ratio, "")
    return enhanced
