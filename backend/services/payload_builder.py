"""Generation payload builder.

Describes the style intent of a request for a future generative backend.
The payload is returned next to the graphic but never feeds the templates.
"""
from models.graphic import GenerationPayload, TargetFormat


STYLE_DIRECTIVE = (
    "dystopian, minimal, HUD-like, generous negative space, thin luminous lines, "
    "subtle motion, presentation-ready overlay"
)

MOOD = "precise, cinematic, systems-oriented, ledger-inspired"


def build_payload(prompt: str, color: str) -> GenerationPayload:
    """Build the payload. Inputs pass through verbatim, empty strings included."""
    return GenerationPayload(
        prompt=prompt,
        color=color,
        style_directives=[STYLE_DIRECTIVE],
        mood=MOOD,
        target_format=TargetFormat.SVG,
    )
