# brandpalette/industries.py
"""
Industry -> hue band lookup.

Each industry owns one HueRule. Beauty, restaurant and nonprofit get a
second look at tone/context before falling back to their table entry; any
industry string we do not recognise resolves to TECHNOLOGY.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, List

from .models import BrandTone, ContextData

logger = logging.getLogger(__name__)


class Industry(str, Enum):
    HEALTHCARE = "healthcare"
    CONSTRUCTION = "construction"
    LEGAL = "legal"
    FINANCE = "finance"
    BEAUTY = "beauty"
    RESTAURANT = "restaurant"
    TECHNOLOGY = "technology"
    EDUCATION = "education"
    REAL_ESTATE = "real_estate"
    NONPROFIT = "nonprofit"
    HOSPITALITY = "hospitality"
    RETAIL = "retail"
    FITNESS = "fitness"
    AUTOMOTIVE = "automotive"


FALLBACK_INDUSTRY = Industry.TECHNOLOGY


@dataclass(frozen=True)
class HueRule:
    base_hue: Tuple[int, int]       # inclusive band, degrees
    accent_hue: Optional[int]
    neutral_hue: int


INDUSTRY_HUES = {
    Industry.HEALTHCARE: HueRule((195, 210), 165, 200),     # cool gray
    Industry.CONSTRUCTION: HueRule((25, 40), 200, 30),      # warm gray
    Industry.LEGAL: HueRule((210, 230), 350, 210),          # slate
    Industry.FINANCE: HueRule((205, 225), 135, 200),
    Industry.BEAUTY: HueRule((320, 340), 260, 0),           # jewel tones
    Industry.RESTAURANT: HueRule((10, 20), 120, 40),        # natural gray
    Industry.TECHNOLOGY: HueRule((200, 220), 260, 210),
    Industry.EDUCATION: HueRule((200, 210), 40, 0),
    Industry.REAL_ESTATE: HueRule((200, 210), 25, 30),      # stone
    Industry.NONPROFIT: HueRule((280, 300), 160, 0),
    Industry.HOSPITALITY: HueRule((25, 45), 45, 30),
    Industry.RETAIL: HueRule((0, 30), 200, 0),
    Industry.FITNESS: HueRule((120, 140), 45, 0),
    Industry.AUTOMOTIVE: HueRule((0, 15), 200, 210),
}

# tone-driven overrides
BEAUTY_PASTEL = HueRule((260, 280), 320, 0)
NONPROFIT_GREEN = HueRule((160, 180), 120, 0)

BEAUTY_PASTEL_TONES = {BrandTone.PLAYFUL, BrandTone.MINIMAL}
NONPROFIT_GREEN_TONES = {BrandTone.ECO, BrandTone.TRUSTWORTHY}


def _coerce_tone(tone) -> Optional[BrandTone]:
    if tone is None:
        return None
    try:
        return BrandTone(tone)
    except ValueError:
        return None


def resolve_industry(industry: str) -> Industry:
    """Case/spacing-insensitive industry match; unknown strings -> TECHNOLOGY."""
    key = re.sub(r"[\s\-]+", "_", (industry or "").strip().lower())
    try:
        return Industry(key)
    except ValueError:
        logger.debug(f"Unknown industry {industry!r}, using {FALLBACK_INDUSTRY.value}")
        return FALLBACK_INDUSTRY


def beauty_hues(tone=None) -> HueRule:
    if _coerce_tone(tone) in BEAUTY_PASTEL_TONES:
        return BEAUTY_PASTEL
    return INDUSTRY_HUES[Industry.BEAUTY]


def restaurant_hues(context: Optional[ContextData] = None) -> HueRule:
    # context is accepted so a cuisine lookup can slot in here; no
    # context currently changes the band
    return INDUSTRY_HUES[Industry.RESTAURANT]


def nonprofit_hues(tone=None) -> HueRule:
    if _coerce_tone(tone) in NONPROFIT_GREEN_TONES:
        return NONPROFIT_GREEN
    return INDUSTRY_HUES[Industry.NONPROFIT]


def get_industry_hues(industry: str, tone=None, context: Optional[ContextData] = None) -> HueRule:
    resolved = resolve_industry(industry)
    if resolved is Industry.BEAUTY:
        return beauty_hues(tone)
    if resolved is Industry.RESTAURANT:
        return restaurant_hues(context)
    if resolved is Industry.NONPROFIT:
        return nonprofit_hues(tone)
    return INDUSTRY_HUES[resolved]


def list_industries() -> List[str]:
    """Display names for autocomplete ("real estate" rather than "real_estate")."""
    return [ind.value.replace("_", " ") for ind in Industry]
