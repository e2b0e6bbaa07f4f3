"""Tests for the rule-based suggestion classifier."""

import pytest

from app.schemas.knowledge import KnowledgeItem
from app.services.classifier import (
    FALLBACK_RULE,
    GENERIC_TEMPLATE,
    PRICING_TEMPLATE,
    PRODUCT_TEMPLATE,
    TIMELINE_TEMPLATE,
    ClassificationRule,
    KeywordRuleClassifier,
    classify,
)


class TestRuleSelection:
    @pytest.mark.parametrize("message", ["Jaka jest cena?", "Ile to koszt?", "Potrzebna wycena sklepu"])
    def test_pricing(self, message):
        result = classify(message)
        assert result.confidence == 92
        assert result.intent == "pricing"
        assert result.draft_text == PRICING_TEMPLATE

    @pytest.mark.parametrize("message", ["Ile czasu to zajmie?", "Jaki termin?", "realizacja projektu"])
    def test_timeline(self, message):
        result = classify(message)
        assert result.confidence == 88
        assert result.draft_text == TIMELINE_TEMPLATE

    @pytest.mark.parametrize("message", ["Czy ta usługa jest dostępna?", "Send me an offer", "nowy produkt"])
    def test_product(self, message):
        result = classify(message)
        assert result.confidence == 85
        assert result.draft_text == PRODUCT_TEMPLATE

    def test_fallback(self):
        result = classify("dzień dobry")
        assert result.confidence == 78
        assert result.intent == "general"
        assert "Nardos House" in result.draft_text

    def test_empty_message_falls_back(self):
        assert classify("").confidence == 78


class TestRulePriority:
    def test_pricing_beats_product(self):
        result = classify("Jaka jest cena, jaka usługa?")
        assert result.intent == "pricing"
        assert result.confidence == 92

    def test_pricing_beats_timeline(self):
        assert classify("termin i koszt").confidence == 92

    def test_timeline_beats_product(self):
        assert classify("produkt - jaki termin?").confidence == 88


class TestCaseFolding:
    def test_uppercase_keyword(self):
        assert classify("WYCENA STRONY").confidence == 92

    def test_uppercase_polish_letter(self):
        assert classify("USŁUGA").confidence == 85

    def test_substring_match(self):
        # "cenach" contains "cena"
        assert classify("Pytanie o cenach").confidence == 92


class TestDeterminism:
    def test_same_input_same_output(self):
        first = classify("Jaka jest wycena strony?")
        second = classify("Jaka jest wycena strony?")
        assert first == second

    def test_knowledge_does_not_change_result(self):
        classifier = KeywordRuleClassifier()
        items = [KnowledgeItem(id="k1", title="Cennik", content="produkt 100 zł")]
        assert classifier.classify("dzień dobry", items) == classifier.classify("dzień dobry")


class TestCustomClassifier:
    def test_company_name_in_generic_reply(self):
        result = KeywordRuleClassifier(company_name="Studio X").classify("hej")
        assert result.draft_text == GENERIC_TEMPLATE.format(company_name="Studio X")

    def test_custom_rules_in_order(self):
        rules = (
            ClassificationRule("urgent", ("pilne",), "Odpowiemy dziś.", 99),
            ClassificationRule("pricing", ("cena",), "Cennik w załączniku.", 90),
        )
        classifier = KeywordRuleClassifier(rules=rules)
        assert classifier.classify("pilne: cena").intent == "urgent"
        assert classifier.classify("cena").draft_text == "Cennik w załączniku."
        assert classifier.classify("nic").intent == FALLBACK_RULE.intent

    def test_rejects_out_of_range_confidence(self):
        with pytest.raises(ValueError):
            KeywordRuleClassifier(rules=(ClassificationRule("bad", ("x",), "t", 101),))
