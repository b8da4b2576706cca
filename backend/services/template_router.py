"""Template Router

Routes a free-text prompt to one of the four HUD templates.

Rules are an ordered list of (pattern, template) pairs evaluated first-match
wins, with Abstract as the terminal fallback. Matching is case-insensitive
substring search with no word boundaries ("phaser" matches "phase").
Priority: Network > Timeline > Funnel > Abstract.
"""
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from models.graphic import GeneratedGraphic, TemplateKind
from services.svg_templates import hud_templates


@dataclass(frozen=True)
class RoutingRule:
    """A keyword pattern that selects a template."""
    template: TemplateKind
    keywords: Tuple[str, ...]
    pattern: re.Pattern

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _rule(template: TemplateKind, *keywords: str) -> RoutingRule:
    # Lowercase match only: IGNORECASE folds "ſ" into "s"
    pattern = re.compile("|".join(re.escape(k) for k in keywords))
    return RoutingRule(template, keywords, pattern)


# Evaluated in this order; the first rule that matches wins
ROUTING_RULES: Tuple[RoutingRule, ...] = (
    _rule(TemplateKind.NETWORK, "network", "graph", "mesh", "grid", "interconnect"),
    _rule(TemplateKind.TIMELINE, "timeline", "roadmap", "progress", "phase"),
    _rule(TemplateKind.FUNNEL, "funnel", "flow", "pipeline", "stream"),
)

FALLBACK_TEMPLATE = TemplateKind.ABSTRACT


def classify(prompt: str) -> TemplateKind:
    """Pick the template for a prompt. Total over all strings."""
    lower = prompt.lower()
    for rule in ROUTING_RULES:
        if rule.matches(lower):
            return rule.template
    return FALLBACK_TEMPLATE


# Catalogue entries, in routing priority order
TEMPLATE_CATALOGUE: List[Dict[str, object]] = [
    {
        "kind": TemplateKind.NETWORK,
        "title": "Network schematic",
        "tags": ["network", "graph", "interconnected"],
    },
    {
        "kind": TemplateKind.TIMELINE,
        "title": "Timeline progression",
        "tags": ["timeline", "steps", "sequence"],
    },
    {
        "kind": TemplateKind.FUNNEL,
        "title": "Signal funnel",
        "tags": ["funnel", "flow", "conversion"],
    },
    {
        "kind": TemplateKind.ABSTRACT,
        "title": "Abstract signal",
        "tags": ["abstract", "geometric", "oscillation"],
    },
]


class TemplateRouter:
    """Routes prompts to template renderers."""

    def __init__(self):
        self.rules = ROUTING_RULES
        self.renderers = hud_templates.renderers()

    def route(self, prompt: str) -> Tuple[TemplateKind, Callable[[str, str], GeneratedGraphic]]:
        """Route a prompt to its template.

        Returns: (template_kind, render_function)
        """
        kind = classify(prompt)
        return kind, self.renderers[kind]

    def get_renderer(self, kind: TemplateKind) -> Optional[Callable[[str, str], GeneratedGraphic]]:
        return self.renderers.get(kind)

    def list_templates(self) -> List[Dict[str, object]]:
        """Template catalogue with the keywords that select each one."""
        keywords = {rule.template: list(rule.keywords) for rule in self.rules}
        return [
            {
                "kind": entry["kind"].value,
                "title": entry["title"],
                "tags": list(entry["tags"]),
                "keywords": keywords.get(entry["kind"], []),
                "fallback": entry["kind"] == FALLBACK_TEMPLATE,
            }
            for entry in TEMPLATE_CATALOGUE
        ]


# Singleton instance
template_router = TemplateRouter()
