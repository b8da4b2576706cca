"""Graphic Generator Service

Single entry point for turning (prompt, color) into a HUD graphic.

Today the graphic comes from the deterministic templates in
``svg_templates``; the payload is built alongside it so a real generative
backend can take over later without changing callers.
"""
import logging

from models.graphic import GeneratedGraphic, GenerateResponse
from services.payload_builder import build_payload
from services.template_router import template_router

logger = logging.getLogger(__name__)


class GraphicGenerator:
    """Selects a template for the prompt and renders it."""

    def __init__(self, router=None):
        self.router = router or template_router

    def generate(self, prompt: str, color: str) -> GeneratedGraphic:
        kind, render = self.router.route(prompt)
        logger.debug(f"[GENERATE] template={kind.value} prompt_len={len(prompt)}")
        return render(prompt, color)

    def generate_with_payload(self, prompt: str, color: str) -> GenerateResponse:
        """Graphic plus the independently built payload."""
        payload = build_payload(prompt, color)
        graphic = self.generate(prompt, color)
        return GenerateResponse(graphic=graphic, payload=payload)


# Singleton instance
graphic_generator = GraphicGenerator()


def generate(prompt: str, color: str) -> GeneratedGraphic:
    return graphic_generator.generate(prompt, color)
