"""HUD SVG Template System

Pure-SVG compositions for prompt-driven graphics. Every template draws
foreground content into the shared 1200x720 document built by
``wrap_document`` and returns a finished ``GeneratedGraphic``.

=============================================================================
CANVAS
=============================================================================

- viewBox 0 0 1200 720, centre (600, 360)
- ambient glow rect: x 120-1080, y 80-640
- ruled frame: horizontal rules at y=120 / y=600 (x 160-1040),
  vertical rules at x=180 / x=1020 (y 140-580)
- header text sits at (160, 160), prompt caption at (160, 188)

=============================================================================
TEMPLATES
=============================================================================
1. Network:  11 nodes on an oscillating elliptical orbit, woven links
2. Timeline: 5 numbered beacons (T0..T4) on a horizontal track
3. Funnel:   three nested funnel outlines around a central target
4. Abstract: 5 interference rings + 8 radial shards (fallback)

The accent color is threaded through every stroke, fill and gradient stop.
Prompt and color are escaped before they reach the markup; the color of a
normal CSS value (hex, rgb(), named) passes through unchanged.
"""

import html
import math
import time
from typing import Callable, Dict, List

from config import settings
from models.graphic import GeneratedGraphic, TemplateKind
from services.geometry import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    CENTER_X,
    CENTER_Y,
    fmt,
    linear_x,
    radial_point,
    wedge_vertices,
)


HEADER_FONT = "'Share Tech Mono', 'DM Mono', monospace"
CAPTION_FONT = "'Inter', 'Space Grotesk', sans-serif"
LABEL_FONT = "'Share Tech Mono', monospace"
NUMBER_FONT = "'Space Grotesk', 'Inter', sans-serif"

NETWORK_NODE_COUNT = 11
NETWORK_LINK_STEP = 3     # each node links to the node 3 positions ahead
NETWORK_CONTROL_STEP = 6  # bending through the node 6 positions ahead

TIMELINE_STEPS = ["T0", "T1", "T2", "T3", "T4"]
TIMELINE_MARKER_RADIUS = 32
TIMELINE_CONNECTOR_LENGTH = 126

ABSTRACT_RING_COUNT = 5
ABSTRACT_SHARD_COUNT = 8


def escape_attr(value: str) -> str:
    """Escape a value for use inside a double-quoted attribute."""
    return html.escape(str(value), quote=True)


def prompt_caption(prompt: str, max_chars: int = None) -> str:
    """First ``max_chars`` characters of the prompt plus an ellipsis, escaped.

    The cut is on code points, so multi-byte characters are never split,
    but words may be.
    """
    if max_chars is None:
        max_chars = settings.prompt_preview_chars
    return html.escape(f"{prompt[:max_chars]}...")


def wrap_document(content: str, color: str, title: str) -> str:
    """Wrap template content in the shared HUD canvas.

    Provides the ``glow`` gradient and ``softGlow`` filter that templates
    reference by id, the translucent glow panel and the ruled frame.
    """
    c = escape_attr(color)
    t = escape_attr(title)
    return f'''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {CANVAS_WIDTH} {CANVAS_HEIGHT}" width="{CANVAS_WIDTH}" height="{CANVAS_HEIGHT}" role="img" aria-label="{t}">
  <title>{t}</title>
  <defs>
    <radialGradient id="glow" cx="50%" cy="50%" r="70%">
      <stop offset="0%" stop-color="{c}" stop-opacity="0.35" />
      <stop offset="70%" stop-color="{c}" stop-opacity="0.05" />
      <stop offset="100%" stop-color="{c}" stop-opacity="0" />
    </radialGradient>
    <filter id="softGlow" x="-50%" y="-50%" width="200%" height="200%">
      <feGaussianBlur stdDeviation="6" result="blur" />
      <feMerge>
        <feMergeNode in="blur" />
        <feMergeNode in="SourceGraphic" />
      </feMerge>
    </filter>
  </defs>
  <rect width="{CANVAS_WIDTH}" height="{CANVAS_HEIGHT}" fill="none" />
  <g fill="url(#glow)" opacity="0.65">
    <rect x="120" y="80" width="960" height="560" rx="24" />
  </g>
  <g stroke="{c}" stroke-width="1" opacity="0.4">
    <path d="M160 120 H1040" />
    <path d="M160 600 H1040" />
    <path d="M180 140 V580" />
    <path d="M1020 140 V580" />
  </g>
  {content}
</svg>'''


class HudTemplateBuilder:
    """Builds the four HUD compositions from a prompt and an accent color."""

    def __init__(self, preview_chars: int = None):
        if preview_chars is None:
            preview_chars = settings.prompt_preview_chars
        self.preview_chars = preview_chars

    def _header(self, label: str, prompt: str, color: str) -> str:
        """Header label plus the truncated prompt caption."""
        return f'''<text x="160" y="160" fill="{color}" font-family="{HEADER_FONT}" font-size="16" letter-spacing="2">{label}</text>
    <text x="160" y="188" fill="{color}" opacity="0.7" font-family="{CAPTION_FONT}" font-size="14">{prompt_caption(prompt, self.preview_chars)}</text>'''

    def _compose(self, body: List[str], header: str) -> str:
        joined = "\n      ".join(body)
        return f'''
    <g filter="url(#softGlow)">
      {joined}
    </g>
    {header}
  '''

    def _graphic(self, kind: TemplateKind, content: str, color: str, prompt: str,
                 title: str, tags: List[str], style_description: str) -> GeneratedGraphic:
        return GeneratedGraphic(
            svg=wrap_document(content, color, title),
            title=title,
            tags=tags,
            style_description=style_description,
            color=color,
            prompt=prompt,
            created_at=int(time.time() * 1000),
            template=kind,
        )

    # =========================================================================
    # Network
    # =========================================================================

    def render_network(self, prompt: str, color: str) -> GeneratedGraphic:
        """Layered orbital network: 11 nodes with woven quadratic links."""
        c = escape_attr(color)
        points = [radial_point(i, NETWORK_NODE_COUNT) for i in range(NETWORK_NODE_COUNT)]

        links = []
        for i, start in enumerate(points):
            end = points[(i + NETWORK_LINK_STEP) % NETWORK_NODE_COUNT]
            control = points[(i + NETWORK_CONTROL_STEP) % NETWORK_NODE_COUNT]
            links.append(
                f'<path d="M{start.svg()} Q{control.svg()} {end.svg()}" stroke="{c}" '
                f'stroke-width="1.25" stroke-opacity="0.55" fill="none" />'
            )

        nodes = []
        for i, point in enumerate(points):
            size = 8 + (i % 4)
            nodes.append(
                f'<circle data-role="node" cx="{fmt(point.x)}" cy="{fmt(point.y)}" r="{size}" '
                f'fill="{c}" fill-opacity="0.6" stroke="{c}" stroke-opacity="0.8" stroke-width="1.2" />'
            )

        content = self._compose(links + nodes, self._header("NETWORK FIELD", prompt, c))
        return self._graphic(
            TemplateKind.NETWORK, content, color, prompt,
            title="Network schematic",
            tags=["network", "graph", "interconnected"],
            style_description="Layered orbital network with glowing links and clustered nodes",
        )

    # =========================================================================
    # Timeline
    # =========================================================================

    def render_timeline(self, prompt: str, color: str) -> GeneratedGraphic:
        """Linear track with numbered milestone beacons and dashed connectors."""
        c = escape_attr(color)
        y = CENTER_Y

        connectors = []
        for index in range(len(TIMELINE_STEPS) - 1):
            x = linear_x(index) + TIMELINE_MARKER_RADIUS
            connectors.append(
                f'<path d="M{fmt(x)} {y} L{fmt(x + TIMELINE_CONNECTOR_LENGTH)} {y}" stroke="{c}" '
                f'stroke-width="1.2" stroke-dasharray="6 6" />'
            )

        steps = []
        for index, label in enumerate(TIMELINE_STEPS):
            x = fmt(linear_x(index))
            steps.append(f'''<g data-role="step">
        <circle cx="{x}" cy="{y}" r="{TIMELINE_MARKER_RADIUS}" fill="none" stroke="{c}" stroke-width="1.8" />
        <circle cx="{x}" cy="{y}" r="6" fill="{c}" />
        <text x="{x}" y="{y}" fill="#0f0f0f" font-family="{NUMBER_FONT}" font-size="14" font-weight="600" text-anchor="middle" dy="5">{index + 1}</text>
        <text x="{x}" y="{y + 50}" fill="{c}" opacity="0.75" font-family="{LABEL_FONT}" font-size="13" text-anchor="middle">{label}</text>
      </g>''')

        baseline = f'<path d="M180 {y} H1020" stroke="{c}" stroke-width="0.8" stroke-opacity="0.45" />'
        content = self._compose(
            [baseline] + connectors + steps,
            self._header("TIMELINE / PROGRESSION", prompt, c),
        )
        return self._graphic(
            TemplateKind.TIMELINE, content, color, prompt,
            title="Timeline progression",
            tags=["timeline", "steps", "sequence"],
            style_description="Linear HUD track with milestone beacons and dotted connective tissue",
        )

    # =========================================================================
    # Funnel
    # =========================================================================

    def render_funnel(self, prompt: str, color: str) -> GeneratedGraphic:
        """Nested funnel cross-section with a target and a venting trail.

        The shape coordinates are fixed; only the color varies.
        """
        c = escape_attr(color)
        body = [
            f'<path d="M380 220 L820 220 L660 520 L540 520 Z" fill="none" stroke="{c}" stroke-width="1.6" />',
            f'<path d="M420 260 L780 260 L640 480 L580 480 Z" fill="{c}" fill-opacity="0.06" stroke="{c}" stroke-width="1.1" />',
            f'<path d="M460 300 L740 300 L630 440 L610 440 Z" fill="{c}" fill-opacity="0.08" />',
            f'<circle data-role="target" cx="{CENTER_X}" cy="{CENTER_Y}" r="12" fill="{c}" />',
            f'<circle cx="{CENTER_X}" cy="{CENTER_Y}" r="38" stroke="{c}" stroke-dasharray="10 8" fill="none" />',
            f'<path d="M{CENTER_X} {CENTER_Y} L{CENTER_X} 520" stroke="{c}" stroke-width="1.2" stroke-dasharray="4 6" />',
        ]
        content = self._compose(body, self._header("FLOW / FUNNEL", prompt, c))
        return self._graphic(
            TemplateKind.FUNNEL, content, color, prompt,
            title="Signal funnel",
            tags=["funnel", "flow", "conversion"],
            style_description="Layered funnel geometry with concentric resonance and venting trail",
        )

    # =========================================================================
    # Abstract (fallback)
    # =========================================================================

    def render_abstract(self, prompt: str, color: str) -> GeneratedGraphic:
        """Radial interference rings overlaid with vector shards."""
        c = escape_attr(color)

        rings = []
        for i in range(ABSTRACT_RING_COUNT):
            radius = 70 + i * 40
            rings.append(
                f'<circle data-role="ring" cx="{CENTER_X}" cy="{CENTER_Y}" r="{radius}" stroke="{c}" '
                f'stroke-width="{fmt(1 + i * 0.4)}" stroke-opacity="{0.8 - i * 0.12:.2f}" fill="none" />'
            )

        shards = []
        for i in range(ABSTRACT_SHARD_COUNT):
            angle = (math.pi * 2 * i) / ABSTRACT_SHARD_COUNT
            apex, base_a, base_b = wedge_vertices(angle)
            shards.append(
                f'<path data-role="shard" d="M{apex.svg(" ")} L{base_a.svg(" ")} L{base_b.svg(" ")} Z" '
                f'fill="{c}" fill-opacity="0.08" stroke="{c}" stroke-width="0.9" />'
            )

        core = [
            f'<circle cx="{CENTER_X}" cy="{CENTER_Y}" r="14" fill="{c}" />',
            f'<circle cx="{CENTER_X}" cy="{CENTER_Y}" r="48" stroke="{c}" stroke-dasharray="6 10" fill="none" />',
        ]
        content = self._compose(rings + shards + core, self._header("ABSTRACT VECTOR CORE", prompt, c))
        return self._graphic(
            TemplateKind.ABSTRACT, content, color, prompt,
            title="Abstract signal",
            tags=["abstract", "geometric", "oscillation"],
            style_description="Radial interference pattern with layered vector shards",
        )

    def renderers(self) -> Dict[TemplateKind, Callable[[str, str], GeneratedGraphic]]:
        """Map each template kind to its bound render method."""
        return {
            TemplateKind.NETWORK: self.render_network,
            TemplateKind.TIMELINE: self.render_timeline,
            TemplateKind.FUNNEL: self.render_funnel,
            TemplateKind.ABSTRACT: self.render_abstract,
        }


# Singleton instance
hud_templates = HudTemplateBuilder()
