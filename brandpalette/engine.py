# brandpalette/engine.py
"""
PaletteEngine: turns a GenerateInput into three Palette variants.

Each call builds its own SeededRandom from input.seed (0 when unset), so the
same input always yields the same palettes and an engine instance carries no
state between calls. The order of random draws per palette is fixed:

    base hue -> harmony scheme -> harmony offsets -> name adjective
    -> icon style -> imagery (2 adjectives + subject) -> logo prompt shuffle
"""

import logging
from typing import List

from .accessibility import adjust_for_theme, ensure_accessibility
from .harmony import generate_harmonious_colors, select_harmony
from .industries import get_industry_hues
from .models import GenerateInput, GenerateResponse, Palette, BrandTone
from .seeded_random import SeededRandom
from .tones import tone_modifier, typography_suggestion

logger = logging.getLogger(__name__)

PALETTE_COUNT = 3
LOGO_PROMPT_COUNT = 3

NAME_ADJECTIVES = ["Modern", "Classic", "Bold", "Clean", "Warm", "Cool", "Vibrant", "Subtle"]

ICON_STYLES = ["outline", "rounded", "sharp", "geometric", "handcrafted"]

IMAGERY_ADJECTIVES = [
    "warm", "cool", "vibrant", "muted", "natural", "minimal",
    "organic", "geometric", "textured", "clean", "bold", "soft",
]
IMAGERY_SUBJECTS = [
    "wood grain micro texture", "soft fabric folds", "geometric patterns",
    "natural light shadows", "handcrafted details", "minimalist forms",
]


def _tone_label(tone, default: str) -> str:
    if tone is None:
        return default
    return tone.value if isinstance(tone, BrandTone) else str(tone)


def _title_words(industry: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in industry.split(" "))


class PaletteEngine:
    def generate_palettes(self, data: GenerateInput) -> List[Palette]:
        seed = data.seed or 0
        rng = SeededRandom(seed)
        palettes = [self._generate_single(data, seed, rng) for _ in range(PALETTE_COUNT)]
        logger.info(f"Generated {len(palettes)} palettes for industry={data.industry!r} seed={seed}")
        return palettes

    def generate(self, data: GenerateInput) -> GenerateResponse:
        return GenerateResponse(input=data, palettes=self.generate_palettes(data))

    # ---------- single palette ----------
    def _generate_single(self, data: GenerateInput, seed: int, rng: SeededRandom) -> Palette:
        context = data.context if data.use_context else None
        rule = get_industry_hues(data.industry, data.brand_tone, context)
        modifier = tone_modifier(data.brand_tone)

        base_hue = rng.next_int(rule.base_hue[0], rule.base_hue[1])
        accent_hint = rule.accent_hue if rule.accent_hue is not None else (base_hue + 180) % 360

        harmony = select_harmony(data.brand_tone, rng)
        colors = generate_harmonious_colors(base_hue, accent_hint, rule.neutral_hue, modifier, harmony, rng)
        colors = adjust_for_theme(colors, data.theme_preference)
        colors = ensure_accessibility(colors)
        logger.debug(f"base_hue={base_hue} harmony={harmony.value} primary={colors['primary'].hex}")

        name = self._palette_name(data.industry, rng)
        typography = typography_suggestion(data.brand_tone)
        icon_style = rng.pick(ICON_STYLES)
        imagery = self._imagery(rng)
        logo_prompts = self._logo_prompts(data.industry, data.brand_tone, rng)

        return Palette(
            name=name,
            roles=colors,
            typography=typography,
            icon_style=icon_style,
            imagery=imagery,
            logo_prompts=logo_prompts,
            seed_back=seed,
        )

    def _palette_name(self, industry: str, rng: SeededRandom) -> str:
        return f"{rng.pick(NAME_ADJECTIVES)} {_title_words(industry)}"

    def _imagery(self, rng: SeededRandom) -> List[str]:
        first = rng.pick(IMAGERY_ADJECTIVES)
        second = rng.pick([a for a in IMAGERY_ADJECTIVES if a != first])
        subject = rng.pick(IMAGERY_SUBJECTS)
        return [f"{first} {second} {subject}"]

    def _logo_prompts(self, industry: str, tone, rng: SeededRandom) -> List[str]:
        prompts = [
            f"Monogram combining {industry} initials with geometric elements",
            f"Abstract symbol representing {industry} values and {_tone_label(tone, 'modern')} aesthetic",
            "Lettermark with custom typography and subtle icon integration",
            f"Symbolic mark using {industry}-related metaphors",
            f"Minimalist icon with {_tone_label(tone, 'clean')} lines and forms",
        ]
        return rng.shuffle(prompts)[:LOGO_PROMPT_COUNT]


def generate_palettes(data: GenerateInput) -> List[Palette]:
    return PaletteEngine().generate_palettes(data)
