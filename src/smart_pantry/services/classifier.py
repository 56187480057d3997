"""Keyword rules mapping category text to storage and shelf-life advice.

Rules are evaluated in order and the first rule with a keyword contained in
the lower-cased category text wins. Storage and expiration rules are
independent tables with their own keyword groups and ordering.
"""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class KeywordRule:
    """Advice returned when any keyword occurs in the category text."""

    keywords: tuple[str, ...]
    advice: str

    def matches(self, category: str) -> bool:
        """Return whether the lower-cased category contains a keyword."""
        return any(keyword in category for keyword in self.keywords)


STORAGE_FALLBACK = "Store in a cool, dry place. Check packaging for exact instructions."

STORAGE_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        ("fruit", "vegetable", "produce", "groente"),
        "Store in the fridge in an open container. Wash only before use.",
    ),
    KeywordRule(
        ("meat", "vlees", "chicken", "beef", "pork", "lamb"),
        "Store in the fridge (0–4°C) and use within 1–2 days after opening.",
    ),
    KeywordRule(
        ("fish", "vis", "seafood"),
        "Store in the fridge (0–3°C) and use within 1 day after opening.",
    ),
    KeywordRule(
        ("dairy", "zuivel", "cheese", "kaas", "yogurt", "milk", "melk"),
        "Keep refrigerated (0–6°C) and use within a few days after opening.",
    ),
    KeywordRule(
        ("chocolate", "chocolade"),
        "Store in a cool, dark place, do not refrigerate.",
    ),
    KeywordRule(
        ("bread", "brood", "bakery", "bakkerij"),
        "Store at room temperature in the bag. Freezing extends shelf life.",
    ),
)

EXPIRATION_FALLBACK = "A few days after opening (refrigerated). Check packaging."

EXPIRATION_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(("meat", "vlees", "chicken"), "1–2 days after opening in the fridge."),
    KeywordRule(("fish", "vis"), "1 day after opening in the fridge."),
    KeywordRule(
        ("yogurt", "cheese", "kaas", "dairy", "zuivel"),
        "3–5 days after opening (refrigerated).",
    ),
    KeywordRule(
        ("juice", "sap", "beverage", "drink"),
        "3–7 days after opening in the fridge.",
    ),
    KeywordRule(
        ("sauce", "saus", "condiment"),
        "1–3 months after opening in the fridge.",
    ),
)


def first_match(
    rules: Sequence[KeywordRule], category_text: str | None, fallback: str
) -> str:
    """Return the advice of the first matching rule, or the fallback."""
    category = (category_text or "").lower()
    for rule in rules:
        if rule.matches(category):
            return rule.advice
    return fallback


def classify_storage(category_text: str | None) -> str:
    """Return a storage tip for the category text."""
    return first_match(STORAGE_RULES, category_text, STORAGE_FALLBACK)


def classify_expiration_after_opening(category_text: str | None) -> str:
    """Return a shelf-life estimate after opening for the category text."""
    return first_match(EXPIRATION_RULES, category_text, EXPIRATION_FALLBACK)
