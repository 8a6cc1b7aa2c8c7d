# brandpalette/tones.py
"""
Brand tone tables: saturation/lightness biases and font pairings.
Missing tone means TRUSTWORTHY.
"""

from dataclasses import dataclass
from typing import List

from .models import BrandTone, Typography

DEFAULT_TONE = BrandTone.TRUSTWORTHY

GOOGLE_FONTS = "https://fonts.googleapis.com/css2?"


@dataclass(frozen=True)
class ToneModifier:
    saturation: float
    lightness: float
    contrast: float


T = BrandTone
TONE_MODIFIERS = {
    T.CONSERVATIVE: ToneModifier(0.7, 0.4, 1.2),
    T.MODERN: ToneModifier(0.9, 0.5, 1.1),
    T.PLAYFUL: ToneModifier(1.1, 0.6, 1.0),
    T.PREMIUM: ToneModifier(0.8, 0.35, 1.4),
    T.ECO: ToneModifier(0.9, 0.5, 1.1),
    T.TRUSTWORTHY: ToneModifier(0.75, 0.45, 1.15),
    T.ENERGETIC: ToneModifier(1.0, 0.55, 1.05),
    T.MINIMAL: ToneModifier(0.85, 0.5, 1.3),
    T.ARTISAN: ToneModifier(0.95, 0.45, 1.2),
    T.TECHIE: ToneModifier(0.9, 0.5, 1.1),
    T.HEALTHCARE: ToneModifier(0.8, 0.5, 1.1),
    T.FINANCE: ToneModifier(0.7, 0.4, 1.2),
    T.HOSPITALITY: ToneModifier(0.9, 0.5, 1.1),
    T.EDUCATION: ToneModifier(0.85, 0.5, 1.1),
    T.CONSTRUCTION: ToneModifier(0.9, 0.45, 1.15),
    T.LEGAL: ToneModifier(0.75, 0.4, 1.25),
    T.NONPROFIT: ToneModifier(0.85, 0.5, 1.1),
    T.RESTAURANT: ToneModifier(0.9, 0.5, 1.1),
    T.RETAIL: ToneModifier(0.95, 0.5, 1.05),
    T.BEAUTY: ToneModifier(1.0, 0.55, 1.0),
    T.FITNESS: ToneModifier(0.95, 0.5, 1.1),
    T.AUTOMOTIVE: ToneModifier(0.9, 0.45, 1.15),
    T.REAL_ESTATE: ToneModifier(0.85, 0.5, 1.1),
}


def _pair(headline, headline_weights, body, body_weights, families):
    return Typography(
        headline=headline,
        headline_weights=tuple(headline_weights),
        body=body,
        body_weights=tuple(body_weights),
        links=(f"{GOOGLE_FONTS}{families}&display=swap",),
    )


TYPOGRAPHY_SUGGESTIONS = {
    T.CONSERVATIVE: _pair("Libre Baskerville", [400, 700], "Source Sans 3", [400, 600],
                          "family=Libre+Baskerville:wght@400;700&family=Source+Sans+3:wght@400;600"),
    T.MODERN: _pair("Inter", [400, 600], "Roboto Slab", [400, 500],
                    "family=Inter:wght@400;600&family=Roboto+Slab:wght@400;500"),
    T.PLAYFUL: _pair("Baloo 2", [400, 700], "Nunito", [400, 600],
                     "family=Baloo+2:wght@400;700&family=Nunito:wght@400;600"),
    T.PREMIUM: _pair("Playfair Display", [400, 700], "Inter", [400, 500],
                     "family=Playfair+Display:wght@400;700&family=Inter:wght@400;500"),
    T.ECO: _pair("Source Serif 4", [400, 600], "Inter", [400, 500],
                 "family=Source+Serif+4:wght@400;600&family=Inter:wght@400;500"),
    T.TRUSTWORTHY: _pair("Source Sans 3", [400, 600], "Source Sans 3", [400, 500],
                         "family=Source+Sans+3:wght@400;500;600"),
    T.ENERGETIC: _pair("Righteous", [400], "Mulish", [400, 600],
                       "family=Righteous&family=Mulish:wght@400;600"),
    T.MINIMAL: _pair("Inter", [400, 500], "Inter", [400, 500],
                     "family=Inter:wght@400;500"),
    T.ARTISAN: _pair("Crimson Text", [400, 600], "Source Sans 3", [400, 500],
                     "family=Crimson+Text:wght@400;600&family=Source+Sans+3:wght@400;500"),
    T.TECHIE: _pair("Space Grotesk", [400, 700], "Inter", [400, 500],
                    "family=Space+Grotesk:wght@400;700&family=Inter:wght@400;500"),
    T.HEALTHCARE: _pair("Poppins", [400, 600], "Source Sans 3", [400, 500],
                        "family=Poppins:wght@400;600&family=Source+Sans+3:wght@400;500"),
    T.FINANCE: _pair("Source Sans 3", [400, 600], "Source Sans 3", [400, 500],
                     "family=Source+Sans+3:wght@400;500;600"),
    T.HOSPITALITY: _pair("Playfair Display", [400, 600], "Inter", [400, 500],
                         "family=Playfair+Display:wght@400;600&family=Inter:wght@400;500"),
    T.EDUCATION: _pair("Inter", [400, 600], "Source Sans 3", [400, 500],
                       "family=Inter:wght@400;600&family=Source+Sans+3:wght@400;500"),
    T.CONSTRUCTION: _pair("Oswald", [400, 600], "Source Sans 3", [400, 500],
                          "family=Oswald:wght@400;600&family=Source+Sans+3:wght@400;500"),
    T.LEGAL: _pair("Libre Baskerville", [400, 700], "Work Sans", [400, 500],
                   "family=Libre+Baskerville:wght@400;700&family=Work+Sans:wght@400;500"),
    T.NONPROFIT: _pair("Source Sans 3", [400, 600], "Inter", [400, 500],
                       "family=Source+Sans+3:wght@400;600&family=Inter:wght@400;500"),
    T.RESTAURANT: _pair("Playfair Display", [400, 700], "Inter", [400, 500],
                        "family=Playfair+Display:wght@400;700&family=Inter:wght@400;500"),
    T.RETAIL: _pair("Inter", [400, 600], "Inter", [400, 500],
                    "family=Inter:wght@400;500;600"),
    T.BEAUTY: _pair("Playfair Display", [400, 600], "Inter", [400, 500],
                    "family=Playfair+Display:wght@400;600&family=Inter:wght@400;500"),
    T.FITNESS: _pair("Oswald", [400, 600], "Inter", [400, 500],
                     "family=Oswald:wght@400;600&family=Inter:wght@400;500"),
    T.AUTOMOTIVE: _pair("Inter", [400, 600], "Source Sans 3", [400, 500],
                        "family=Inter:wght@400;600&family=Source+Sans+3:wght@400;500"),
    T.REAL_ESTATE: _pair("Source Sans 3", [400, 600], "Inter", [400, 500],
                         "family=Source+Sans+3:wght@400;600&family=Inter:wght@400;500"),
}
del T


def resolve_tone(tone=None) -> BrandTone:
    """None or an unrecognised value -> DEFAULT_TONE."""
    if tone is None:
        return DEFAULT_TONE
    try:
        return BrandTone(tone)
    except ValueError:
        return DEFAULT_TONE


def tone_modifier(tone=None) -> ToneModifier:
    return TONE_MODIFIERS[resolve_tone(tone)]


def typography_suggestion(tone=None) -> Typography:
    return TYPOGRAPHY_SUGGESTIONS[resolve_tone(tone)]


def list_tones() -> List[str]:
    return [t.value for t in BrandTone]
