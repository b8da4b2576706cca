"""Tests for prompt-to-template routing."""

from __future__ import annotations

import pytest

from models.graphic import TemplateKind
from services.template_router import ROUTING_RULES, classify, template_router


class TestClassify:
    """Keyword routing with Network > Timeline > Funnel > Abstract priority."""

    @pytest.mark.parametrize(
        "prompt",
        ["network of interconnected nodes", "MESH overlay", "Knowledge Graph", "grid", "Interconnect"],
    )
    def test_network_keywords_any_case(self, prompt):
        assert classify(prompt) == TemplateKind.NETWORK

    @pytest.mark.parametrize("prompt", ["our roadmap for next quarter", "Phase two", "progress bar", "TIMELINE"])
    def test_timeline_keywords(self, prompt):
        assert classify(prompt) == TemplateKind.TIMELINE

    @pytest.mark.parametrize("prompt", ["3-step funnel diagram with arrows", "data pipeline", "upstream", "Flow"])
    def test_funnel_keywords(self, prompt):
        assert classify(prompt) == TemplateKind.FUNNEL

    def test_no_word_boundaries(self):
        """Keywords match inside longer words."""
        assert classify("phaser array") == TemplateKind.TIMELINE
        assert classify("overflowing") == TemplateKind.FUNNEL

    def test_network_beats_timeline(self):
        assert classify("timeline of the network") == TemplateKind.NETWORK

    def test_timeline_beats_funnel(self):
        assert classify("roadmap with a flow stage") == TemplateKind.TIMELINE

    def test_network_beats_funnel(self):
        assert classify("stream mesh") == TemplateKind.NETWORK

    def test_fallback_is_abstract(self):
        assert classify("the color of silence") == TemplateKind.ABSTRACT

    def test_empty_prompt_is_abstract(self):
        assert classify("") == TemplateKind.ABSTRACT

    def test_rules_are_ordered(self):
        assert [rule.template for rule in ROUTING_RULES] == [
            TemplateKind.NETWORK,
            TemplateKind.TIMELINE,
            TemplateKind.FUNNEL,
        ]


class TestTemplateRouter:
    def test_route_returns_matching_renderer(self):
        kind, render = template_router.route("mesh")
        assert kind == TemplateKind.NETWORK
        assert render("mesh", "#fff").template == TemplateKind.NETWORK

    def test_every_kind_has_a_renderer(self):
        for kind in TemplateKind:
            assert template_router.get_renderer(kind) is not None

    def test_catalogue_in_priority_order(self):
        templates = template_router.list_templates()
        assert [t["kind"] for t in templates] == ["network", "timeline", "funnel", "abstract"]
        assert templates[0]["keywords"] == ["network", "graph", "mesh", "grid", "interconnect"]
        assert templates[-1]["fallback"] is True
        assert templates[-1]["keywords"] == []


class TestUnicodeMatching:
    """Only the lowercased prompt is matched; no Unicode case folding."""

    @pytest.mark.parametrize("prompt", ["ſtream", "meſh", "progreſs"])
    def test_long_s_does_not_match_s(self, prompt):
        assert classify(prompt) == TemplateKind.ABSTRACT

    def test_uppercase_still_matches(self):
        assert classify("STREAM") == TemplateKind.FUNNEL
