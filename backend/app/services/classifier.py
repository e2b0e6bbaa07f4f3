"""Rule-based draft suggestion classifier.

Turns an inquiry message into a draft reply and a fixed confidence score.
Rules are checked in order against the case-folded message and the first
rule with a matching keyword wins, so specific intents (price, schedule)
sit before the generic service-interest rule.

Confidence is the score attached to the matched rule, not a probability.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from ..schemas.knowledge import KnowledgeItem

PRICING_TEMPLATE = (
    "Dziękuję za zapytanie o wycenę! Na podstawie Państwa wymagań szacunkowy koszt "
    "wynosi 8,000-15,000 zł. Oferujemy bezpłatną konsultację, aby dokładnie omówić "
    "szczegóły projektu. Czy moglibyśmy umówić się na rozmowę?"
)

TIMELINE_TEMPLATE = (
    "Dziękuję za zapytanie dotyczące czasu realizacji. Przewidywany czas wykonania "
    "wynosi 6-8 tygodni, w zależności od zakresu projektu. Możemy zacząć pracę już w "
    "styczniu 2025. Czy chcieliby Państwo omówić harmonogram szczegółowo?"
)

PRODUCT_TEMPLATE = (
    "Dziękuję za zainteresowanie naszymi usługami! Oferujemy kompleksowe rozwiązania "
    "including projektowanie stron internetowych, sklepy online, branding i SEO. "
    "Chętnie przedstawimy szczegółową ofertę dostosowaną do Państwa potrzeb."
)

GENERIC_TEMPLATE = (
    "Dziękuję za wiadomość! Cieszę się, że są Państwo zainteresowani współpracą z "
    "{company_name}. Chętnie odpowiem na wszystkie pytania i przedstawię szczegółową "
    "propozycję. Czy moglibyśmy umówić się na rozmowę telefoniczną?"
)


@dataclass(frozen=True)
class Suggestion:
    """Classifier output: the draft reply and the matched rule's score."""

    draft_text: str
    confidence: int
    intent: str


@dataclass(frozen=True)
class ClassificationRule:
    """Matches when any keyword occurs in the case-folded message."""

    intent: str
    keywords: tuple[str, ...]
    template: str
    confidence: int

    def matches(self, folded_text: str) -> bool:
        return any(keyword in folded_text for keyword in self.keywords)


class SuggestionClassifier(Protocol):
    """Anything that can turn inquiry text into a draft suggestion."""

    def classify(
        self, text: str, knowledge: Sequence[KnowledgeItem] | None = None
    ) -> Suggestion: ...


DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("pricing", ("cena", "koszt", "wycena"), PRICING_TEMPLATE, 92),
    ClassificationRule("timeline", ("czas", "termin", "realizacja"), TIMELINE_TEMPLATE, 88),
    ClassificationRule("product", ("usługa", "offer", "produkt"), PRODUCT_TEMPLATE, 85),
)

FALLBACK_RULE = ClassificationRule("general", (), GENERIC_TEMPLATE, 78)


class KeywordRuleClassifier:
    """Ordered keyword rules with a fallback; deterministic and free of I/O."""

    def __init__(
        self,
        rules: Sequence[ClassificationRule] = DEFAULT_RULES,
        fallback: ClassificationRule = FALLBACK_RULE,
        company_name: str = "Nardos House",
    ):
        for rule in (*rules, fallback):
            if not 0 <= rule.confidence <= 100:
                raise ValueError(f"Rule {rule.intent!r} confidence must be within 0-100")
        self.rules = tuple(rules)
        self.fallback = fallback
        self.company_name = company_name

    def classify(
        self, text: str, knowledge: Sequence[KnowledgeItem] | None = None
    ) -> Suggestion:
        """Return the suggestion of the first matching rule.

        ``knowledge`` is accepted so callers can pass the knowledge base
        along; rule selection does not consult it yet.
        """
        folded = (text or "").casefold()
        rule = next((r for r in self.rules if r.matches(folded)), self.fallback)
        return Suggestion(
            draft_text=rule.template.format(company_name=self.company_name),
            confidence=rule.confidence,
            intent=rule.intent,
        )


_default_classifier = KeywordRuleClassifier()


def classify(text: str) -> Suggestion:
    """Classify text with the default rule set."""
    return _default_classifier.classify(text)
