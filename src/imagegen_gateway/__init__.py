"""
Image Generation Gateway package.

Provides:
- Prompt composition from fixed style/quality/aspect-ratio modifiers
- FastAPI gateway forwarding prompts to an external image generation API
- Static model catalog and selector, plus a command line client
"""
