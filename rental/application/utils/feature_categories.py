from __future__ import annotations

# Evaluated top to bottom; first match wins.
FEATURE_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("ac", "climate"), "climate"),
    (("bluetooth", "carplay", "android"), "connectivity"),
    (("seat", "family"), "seating"),
    (("auto", "manual"), "transmission"),
    (("electric", "hybrid"), "electric"),
    (("diesel", "petrol"), "fuel"),
    (("audio", "sound"), "audio"),
)

DEFAULT_CATEGORY = "general"


def feature_category(name: str) -> str:
    lower = (name or "").lower()
    for keywords, category in FEATURE_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return category
    return DEFAULT_CATEGORY
