# brandpalette/colors.py
"""
Color math for the palette engine.

- hex / rgb / hsl conversions
- WCAG relative luminance, contrast ratio, AA/AAA checks
- color-blindness simulation (protanopia / deuteranopia / tritanopia)
- CIEDE2000 difference in CIELAB, used for the distinguishability test
- create_color: the only place a Color is built

Every Color field is derived from its hex here, so downstream renderers
should call these functions instead of re-deriving values themselves.
"""

import colorsys
import math
import re
from typing import Iterable, Tuple

import cv2
import numpy as np

from .exceptions import InvalidColorError
from .models import Color, TextColor

HEX_RE = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)

AA_NORMAL, AA_LARGE = 4.5, 3.0
AAA_NORMAL, AAA_LARGE = 7.0, 4.5

# minimum CIEDE2000 difference for two colors to count as distinguishable
MIN_DELTA_E = 15.0

WHITE_LUMINANCE = 1.0
BLACK_LUMINANCE = 0.0

# ---------- Color-blindness transforms (rows produce r', g', b') ----------
CVD_MATRICES = {
    "protanopia": np.array([
        [0.567, 0.433, 0.0],
        [0.558, 0.442, 0.0],
        [0.0, 0.242, 0.758],
    ]),
    "deuteranopia": np.array([
        [0.625, 0.375, 0.0],
        [0.7, 0.3, 0.0],
        [0.0, 0.3, 0.7],
    ]),
    "tritanopia": np.array([
        [0.95, 0.05, 0.0],
        [0.0, 0.433, 0.567],
        [0.0, 0.475, 0.525],
    ]),
}
CVD_KINDS = tuple(CVD_MATRICES)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


# ---------- Conversions ----------
def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    m = HEX_RE.match(hex_color) if isinstance(hex_color, str) else None
    if not m:
        raise InvalidColorError(hex_color)
    return tuple(int(part, 16) for part in m.groups())


def rgb_to_hex(r, g, b) -> str:
    clamped = [max(0, min(255, _round_half_up(c))) for c in (r, g, b)]
    return "#%02x%02x%02x" % tuple(clamped)


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """Hue in degrees [0, 360), saturation and lightness in percent."""
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    mx, mn = max(r, g, b), min(r, g, b)
    h = s = 0.0
    l = (mx + mn) / 2
    if mx != mn:
        d = mx - mn
        s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif mx == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6
    return (_round_half_up(h * 360) % 360, _round_half_up(s * 100), _round_half_up(l * 100))


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """hue in degrees, saturation/lightness as fractions (clamped to [0, 1])."""
    saturation = max(0.0, min(1.0, saturation))
    lightness = max(0.0, min(1.0, lightness))
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, lightness, saturation)
    return rgb_to_hex(r * 255, g * 255, b * 255)


# ---------- WCAG ----------
def _linearize(c: int) -> float:
    c = c / 255.0
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(lum1: float, lum2: float) -> float:
    lighter, darker = max(lum1, lum2), min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def meets_aa(ratio: float, is_large_text: bool = False) -> bool:
    return ratio >= (AA_LARGE if is_large_text else AA_NORMAL)


def meets_aaa(ratio: float, is_large_text: bool = False) -> bool:
    return ratio >= (AAA_LARGE if is_large_text else AAA_NORMAL)


def best_text_color(background_luminance: float) -> TextColor:
    return TextColor.DARK if background_luminance > 0.5 else TextColor.LIGHT


# ---------- Color-blindness simulation ----------
def simulate_color_blindness(hex_color: str, kind: str) -> str:
    """
    Linear approximation of how `hex_color` looks under a color deficiency.
    Returns the simulated color as hex.
    """
    matrix = CVD_MATRICES.get(kind)
    if matrix is None:
        raise ValueError(f"unknown color deficiency: {kind!r}")
    rgb = np.asarray(hex_to_rgb(hex_color), dtype=np.float64) / 255.0
    sim = matrix @ rgb
    return rgb_to_hex(*(sim * 255.0))


# ---------- CIELAB / CIEDE2000 ----------
def _hexes_to_lab(hexes: Iterable[str]) -> np.ndarray:
    """sRGB hexes -> (N, 3) CIELAB (D65), L in [0, 100]."""
    rgb = np.asarray([hex_to_rgb(h) for h in hexes], dtype=np.float32) / 255.0
    lab = cv2.cvtColor(rgb.reshape(1, -1, 3), cv2.COLOR_RGB2LAB)
    return lab.reshape(-1, 3).astype(np.float64)


def _ciede2000(lab1: np.ndarray, lab2: np.ndarray) -> np.ndarray:
    L1, a1, b1 = lab1[:, 0], lab1[:, 1], lab1[:, 2]
    L2, a2, b2 = lab2[:, 0], lab2[:, 1], lab2[:, 2]

    c_bar = (np.hypot(a1, b1) + np.hypot(a2, b2)) / 2.0
    c_bar7 = c_bar ** 7
    g = 0.5 * (1.0 - np.sqrt(c_bar7 / (c_bar7 + 25.0 ** 7)))
    a1p, a2p = (1.0 + g) * a1, (1.0 + g) * a2
    c1p, c2p = np.hypot(a1p, b1), np.hypot(a2p, b2)
    h1p = np.degrees(np.arctan2(b1, a1p)) % 360.0
    h2p = np.degrees(np.arctan2(b2, a2p)) % 360.0

    chroma_prod = c1p * c2p
    has_hue = chroma_prod > 1e-12

    dLp = L2 - L1
    dCp = c2p - c1p
    dhp = h2p - h1p
    dhp = np.where(dhp > 180.0, dhp - 360.0, dhp)
    dhp = np.where(dhp < -180.0, dhp + 360.0, dhp)
    dhp = np.where(has_hue, dhp, 0.0)
    dHp = 2.0 * np.sqrt(chroma_prod) * np.sin(np.radians(dhp) / 2.0)

    L_bar = (L1 + L2) / 2.0
    C_bar = (c1p + c2p) / 2.0
    h_sum = h1p + h2p
    h_bar = np.where(
        np.abs(h1p - h2p) <= 180.0,
        h_sum / 2.0,
        np.where(h_sum < 360.0, (h_sum + 360.0) / 2.0, (h_sum - 360.0) / 2.0),
    )
    h_bar = np.where(has_hue, h_bar, h_sum)

    t = (1.0
         - 0.17 * np.cos(np.radians(h_bar - 30.0))
         + 0.24 * np.cos(np.radians(2.0 * h_bar))
         + 0.32 * np.cos(np.radians(3.0 * h_bar + 6.0))
         - 0.20 * np.cos(np.radians(4.0 * h_bar - 63.0)))
    d_theta = 30.0 * np.exp(-(((h_bar - 275.0) / 25.0) ** 2))
    C_bar7 = C_bar ** 7
    r_c = 2.0 * np.sqrt(C_bar7 / (C_bar7 + 25.0 ** 7))
    r_t = -np.sin(np.radians(2.0 * d_theta)) * r_c

    l_term = (L_bar - 50.0) ** 2
    s_l = 1.0 + (0.015 * l_term) / np.sqrt(20.0 + l_term)
    s_c = 1.0 + 0.045 * C_bar
    s_h = 1.0 + 0.015 * C_bar * t

    dl, dc, dh = dLp / s_l, dCp / s_c, dHp / s_h
    return np.sqrt(dl * dl + dc * dc + dh * dh + r_t * dc * dh)


def delta_e(hex_a: str, hex_b: str) -> float:
    """CIEDE2000 difference between two sRGB hex colors."""
    lab = _hexes_to_lab([hex_a, hex_b])
    return float(_ciede2000(lab[:1], lab[1:])[0])


def distinguishability(hex_a: str, hex_b: str) -> float:
    """Smallest delta-E between the two colors across all simulated deficiencies."""
    sims_a = [simulate_color_blindness(hex_a, kind) for kind in CVD_KINDS]
    sims_b = [simulate_color_blindness(hex_b, kind) for kind in CVD_KINDS]
    lab = _hexes_to_lab(sims_a + sims_b)
    n = len(CVD_KINDS)
    return float(np.min(_ciede2000(lab[:n], lab[n:])))


def colors_are_distinguishable(hex_a: str, hex_b: str) -> bool:
    return distinguishability(hex_a, hex_b) >= MIN_DELTA_E


# ---------- Color construction ----------
def create_color(hex_color: str, role: str) -> Color:
    rgb = hex_to_rgb(hex_color)
    hsl = rgb_to_hsl(*rgb)
    luminance = relative_luminance(*rgb)
    text_on = best_text_color(luminance)
    if text_on is TextColor.LIGHT:
        contrast = contrast_ratio(luminance, WHITE_LUMINANCE)
    else:
        contrast = contrast_ratio(luminance, BLACK_LUMINANCE)
    return Color(
        role=role,
        hex=rgb_to_hex(*rgb),
        rgb=rgb,
        hsl=hsl,
        luminance=luminance,
        text_on=text_on,
        contrast_on_text=contrast,
    )
