# brandpalette/harmony.py
"""
Harmony schemes: pick one (tone-biased) and derive the five role colors
from a base hue.
"""

from enum import Enum
from typing import Dict

from .colors import create_color, hsl_to_hex
from .models import BrandTone, Color
from .seeded_random import SeededRandom
from .tones import ToneModifier


class Harmony(str, Enum):
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"


ALL_HARMONIES = [
    Harmony.ANALOGOUS,
    Harmony.COMPLEMENTARY,
    Harmony.TRIADIC,
    Harmony.SPLIT_COMPLEMENTARY,
]

# tones with a restricted set of schemes; everything else draws from ALL_HARMONIES
TONE_HARMONIES = {
    BrandTone.PLAYFUL: [Harmony.TRIADIC, Harmony.SPLIT_COMPLEMENTARY],
    BrandTone.ENERGETIC: [Harmony.TRIADIC, Harmony.SPLIT_COMPLEMENTARY],
    BrandTone.CONSERVATIVE: [Harmony.ANALOGOUS, Harmony.COMPLEMENTARY],
    BrandTone.PREMIUM: [Harmony.ANALOGOUS, Harmony.COMPLEMENTARY],
    BrandTone.MINIMAL: [Harmony.ANALOGOUS],
    BrandTone.TECHIE: [Harmony.ANALOGOUS],
}


def select_harmony(tone, rng: SeededRandom) -> Harmony:
    options = ALL_HARMONIES
    if tone is not None:
        try:
            options = TONE_HARMONIES.get(BrandTone(tone), ALL_HARMONIES)
        except ValueError:
            pass
    if len(options) == 1:
        # single-scheme tones consume no draw
        return options[0]
    return rng.pick(options)


def generate_color(hue: float, saturation: float, lightness: float, role: str) -> Color:
    return create_color(hsl_to_hex(hue, saturation, lightness), role)


def generate_harmonious_colors(base_hue: int, accent_hint: int, neutral_hue: int,
                               modifier: ToneModifier, harmony: Harmony,
                               rng: SeededRandom) -> Dict[str, Color]:
    secondary_hue = base_hue
    accent_hue = accent_hint

    if harmony is Harmony.ANALOGOUS:
        secondary_hue = (base_hue + rng.next_int(-30, 30)) % 360
        accent_hue = (base_hue + rng.next_int(30, 60)) % 360
    elif harmony is Harmony.COMPLEMENTARY:
        secondary_hue = (base_hue + 180) % 360
    elif harmony is Harmony.TRIADIC:
        secondary_hue = (base_hue + 120) % 360
        accent_hue = (base_hue + 240) % 360
    elif harmony is Harmony.SPLIT_COMPLEMENTARY:
        secondary_hue = (base_hue + 150 + rng.next_int(-30, 30)) % 360
        accent_hue = (base_hue + 210 + rng.next_int(-30, 30)) % 360

    sat, light = modifier.saturation, modifier.lightness
    return {
        "primary": generate_color(base_hue, sat, light, "primary"),
        "secondary": generate_color(secondary_hue, sat * 0.9, light * 1.1, "secondary"),
        "accent": generate_color(accent_hue, sat * 1.2, light * 0.9, "accent"),
        "neutral": generate_color(neutral_hue, 0.3, 0.6, "neutral"),
        "background": generate_color(neutral_hue, 0.2, 0.9, "background"),
    }
