from brandpalette.industries import (
    BEAUTY_PASTEL,
    INDUSTRY_HUES,
    NONPROFIT_GREEN,
    Industry,
    get_industry_hues,
    list_industries,
    resolve_industry,
)
from brandpalette.models import BrandTone, ContextData
from brandpalette.tones import (
    TONE_MODIFIERS,
    TYPOGRAPHY_SUGGESTIONS,
    list_tones,
    tone_modifier,
    typography_suggestion,
)

# ─── Industry hues ───────────────────────────────────────────────────────────

def test_unknown_industry_falls_back_to_technology():
    assert get_industry_hues("not-a-real-industry") == get_industry_hues("technology")
    assert get_industry_hues("") == INDUSTRY_HUES[Industry.TECHNOLOGY]


def test_industry_lookup_is_case_insensitive():
    assert get_industry_hues("HealthCare") == INDUSTRY_HUES[Industry.HEALTHCARE]
    assert resolve_industry("  LEGAL ") is Industry.LEGAL


def test_real_estate_display_name_resolves():
    assert resolve_industry("real estate") is Industry.REAL_ESTATE
    assert resolve_industry("Real-Estate") is Industry.REAL_ESTATE


def test_every_industry_has_a_rule():
    assert set(INDUSTRY_HUES) == set(Industry)
    for rule in INDUSTRY_HUES.values():
        lo, hi = rule.base_hue
        assert 0 <= lo <= hi < 360
        assert 0 <= rule.neutral_hue < 360


def test_beauty_tone_override():
    assert get_industry_hues("beauty", BrandTone.PLAYFUL) == BEAUTY_PASTEL
    assert get_industry_hues("beauty", "minimal") == BEAUTY_PASTEL
    assert get_industry_hues("beauty", BrandTone.PREMIUM) == INDUSTRY_HUES[Industry.BEAUTY]
    assert get_industry_hues("beauty") == INDUSTRY_HUES[Industry.BEAUTY]


def test_nonprofit_tone_override():
    assert get_industry_hues("nonprofit", BrandTone.ECO) == NONPROFIT_GREEN
    assert get_industry_hues("nonprofit", BrandTone.TRUSTWORTHY) == NONPROFIT_GREEN
    assert get_industry_hues("nonprofit", BrandTone.MODERN) == INDUSTRY_HUES[Industry.NONPROFIT]


def test_restaurant_context_keeps_base_band():
    ctx = ContextData(business_name="Trattoria", notes="wood-fired pizza")
    assert get_industry_hues("restaurant", None, ctx) == INDUSTRY_HUES[Industry.RESTAURANT]


def test_tone_does_not_affect_other_industries():
    assert get_industry_hues("finance", BrandTone.PLAYFUL) == INDUSTRY_HUES[Industry.FINANCE]


def test_list_industries():
    names = list_industries()
    assert len(names) == 14
    assert "real estate" in names
    assert "technology" in names

# ─── Tones ───────────────────────────────────────────────────────────────────

def test_every_tone_has_modifier_and_typography():
    assert set(TONE_MODIFIERS) == set(BrandTone)
    assert set(TYPOGRAPHY_SUGGESTIONS) == set(BrandTone)
    assert len(list_tones()) == 23


def test_default_tone_is_trustworthy():
    assert tone_modifier() == TONE_MODIFIERS[BrandTone.TRUSTWORTHY]
    assert typography_suggestion(None).headline == "Source Sans 3"


def test_tone_accepts_plain_strings():
    assert tone_modifier("playful").saturation == 1.1
    assert typography_suggestion("techie").headline == "Space Grotesk"


def test_typography_links_point_at_google_fonts():
    for typo in TYPOGRAPHY_SUGGESTIONS.values():
        assert typo.links
        assert all(link.startswith("https://fonts.googleapis.com/css2?") for link in typo.links)
        assert typo.headline_weights and typo.body_weights
