# brandpalette/accessibility.py
"""
Post-processing that pulls a generated role set toward WCAG AA and
color-blind safety.

Corrections are bounded and deterministic:
  - theme adjustment: forces the background for light/dark themes
  - contrast: single pass, at most one lightness shift per foreground role
  - distinguishability: bounded iteration, not single pass. The accent hue is
    rotated in 60 degree steps (at most MAX_ACCENT_ROTATIONS) until primary
    and accent separate; when the first step already separates them the
    result is the same as a single rotation

None of this raises on a shortfall; the best-effort palette is returned and
the remaining gap is logged at DEBUG.
"""

import logging
from typing import Dict

from .colors import (
    colors_are_distinguishable,
    contrast_ratio,
    distinguishability,
    meets_aa,
    MIN_DELTA_E,
)
from .harmony import generate_color
from .models import Color, ThemePreference

logger = logging.getLogger(__name__)

FOREGROUND_ROLES = ("primary", "secondary", "accent", "neutral")

THEME_BACKGROUND_LIGHTNESS = {
    ThemePreference.LIGHT: 0.95,
    ThemePreference.DARK: 0.10,
}
THEME_BACKGROUND_DESATURATION = 0.2

# neutral theme: one gentle nudge before enforcement
NEUTRAL_NUDGE = 0.10
NEUTRAL_NUDGE_RANGE = (0.20, 0.80)

CONTRAST_SHIFT = 0.15
CONTRAST_SHIFT_RANGE = (0.15, 0.85)

ACCENT_ROTATION = 60
MAX_ACCENT_ROTATIONS = 5


def _resolve_theme(theme) -> ThemePreference:
    if theme is None:
        return ThemePreference.NEUTRAL
    try:
        return ThemePreference(theme)
    except ValueError:
        return ThemePreference.NEUTRAL


def _shift_lightness(color: Color, delta: float, bounds) -> Color:
    hue, sat, light = color.hsl
    lo, hi = bounds
    new_light = max(lo, min(hi, light / 100.0 + delta))
    return generate_color(hue, sat / 100.0, new_light, color.role)


def _nudge_low_contrast(colors: Dict[str, Color], delta: float, bounds) -> Dict[str, Color]:
    out = dict(colors)
    bg_lum = out["background"].luminance
    step = -delta if bg_lum > 0.5 else delta
    for role in FOREGROUND_ROLES:
        color = out[role]
        ratio = contrast_ratio(color.luminance, bg_lum)
        if not meets_aa(ratio):
            out[role] = _shift_lightness(color, step, bounds)
            logger.debug(f"{role} {color.hex} at {ratio:.2f}:1 -> {out[role].hex}")
    return out


def adjust_for_theme(colors: Dict[str, Color], theme=None) -> Dict[str, Color]:
    theme = _resolve_theme(theme)
    if theme is ThemePreference.NEUTRAL:
        # background stays as generated
        return _nudge_low_contrast(colors, NEUTRAL_NUDGE, NEUTRAL_NUDGE_RANGE)

    out = dict(colors)
    bg = out["background"]
    out["background"] = generate_color(
        bg.hsl[0],
        bg.hsl[1] / 100.0 * THEME_BACKGROUND_DESATURATION,
        THEME_BACKGROUND_LIGHTNESS[theme],
        "background",
    )
    return out


def enforce_contrast(colors: Dict[str, Color]) -> Dict[str, Color]:
    """One lightness shift for every foreground role short of AA against the background."""
    out = _nudge_low_contrast(colors, CONTRAST_SHIFT, CONTRAST_SHIFT_RANGE)
    bg_lum = out["background"].luminance
    short = [r for r in FOREGROUND_ROLES if not meets_aa(contrast_ratio(out[r].luminance, bg_lum))]
    if short:
        logger.debug(f"Still below AA after contrast shift: {short}")
    return out


def repair_distinguishability(colors: Dict[str, Color]) -> Dict[str, Color]:
    """
    If primary and accent collapse under simulated color blindness, rotate the
    accent hue by 60 degrees. Further 60 degree steps are tried only while the
    pair is still indistinguishable; if no rotation clears the threshold the
    rotation with the largest worst-case delta-E is kept.
    """
    primary, accent = colors["primary"], colors["accent"]
    if colors_are_distinguishable(primary.hex, accent.hex):
        return colors

    hue, sat, light = accent.hsl
    best, best_score = None, -1.0
    for step in range(1, MAX_ACCENT_ROTATIONS + 1):
        candidate = generate_color((hue + ACCENT_ROTATION * step) % 360, sat / 100.0, light / 100.0, "accent")
        score = distinguishability(primary.hex, candidate.hex)
        if score > best_score:
            best, best_score = candidate, score
        if score >= MIN_DELTA_E:
            break

    if best_score < MIN_DELTA_E:
        logger.debug(f"Accent {best.hex} still close to primary {primary.hex} (dE={best_score:.1f})")
    out = dict(colors)
    out["accent"] = best
    return out


def ensure_accessibility(colors: Dict[str, Color]) -> Dict[str, Color]:
    return repair_distinguishability(enforce_contrast(colors))
