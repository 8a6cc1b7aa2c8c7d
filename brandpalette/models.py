from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import List, Dict, Any, Mapping, Optional, Tuple


class BrandTone(str, Enum):
    CONSERVATIVE = "conservative"
    MODERN = "modern"
    PLAYFUL = "playful"
    PREMIUM = "premium"
    ECO = "eco"
    TRUSTWORTHY = "trustworthy"
    ENERGETIC = "energetic"
    MINIMAL = "minimal"
    ARTISAN = "artisan"
    TECHIE = "techie"
    HEALTHCARE = "healthcare"
    FINANCE = "finance"
    HOSPITALITY = "hospitality"
    EDUCATION = "education"
    CONSTRUCTION = "construction"
    LEGAL = "legal"
    NONPROFIT = "nonprofit"
    RESTAURANT = "restaurant"
    RETAIL = "retail"
    BEAUTY = "beauty"
    FITNESS = "fitness"
    AUTOMOTIVE = "automotive"
    REAL_ESTATE = "real_estate"


class ThemePreference(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    NEUTRAL = "neutral"


class TextColor(str, Enum):
    LIGHT = "light"
    DARK = "dark"


ROLES = ("primary", "secondary", "accent", "neutral", "background")


@dataclass(frozen=True)
class Color:
    role: str
    hex: str                        # "#rrggbb"
    rgb: Tuple[int, int, int]       # 0-255
    hsl: Tuple[int, int, int]       # hue 0-359, sat/light 0-100
    luminance: float                # WCAG relative luminance
    text_on: TextColor              # readable text polarity on this color
    contrast_on_text: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "role": self.role,
            "hex": self.hex,
            "rgb": list(self.rgb),
            "hsl": list(self.hsl),
            "luminance": self.luminance,
            "textOn": self.text_on.value,
            "contrastOnText": self.contrast_on_text,
        }


@dataclass(frozen=True)
class Typography:
    headline: str
    headline_weights: Tuple[int, ...]
    body: str
    body_weights: Tuple[int, ...]
    links: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "headline": self.headline,
            "headlineWeights": list(self.headline_weights),
            "body": self.body,
            "bodyWeights": list(self.body_weights),
            "links": list(self.links),
        }


@dataclass(frozen=True)
class Palette:
    name: str
    roles: Mapping[str, Color]      # exactly the ROLES keys
    typography: Typography
    icon_style: str
    imagery: Tuple[str, ...]
    logo_prompts: Tuple[str, ...]   # 3 concepts
    seed_back: int

    def __post_init__(self):
        # read-only views so a built palette cannot be edited in place
        object.__setattr__(self, "roles", MappingProxyType(dict(self.roles)))
        object.__setattr__(self, "imagery", tuple(self.imagery))
        object.__setattr__(self, "logo_prompts", tuple(self.logo_prompts))

    @property
    def swatches(self) -> List[Color]:
        return [self.roles[role] for role in ROLES]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "roles": {role: self.roles[role].to_dict() for role in ROLES},
            "swatches": [c.to_dict() for c in self.swatches],
            "typography": self.typography.to_dict(),
            "iconStyle": self.icon_style,
            "imagery": list(self.imagery),
            "logoPrompts": list(self.logo_prompts),
            "seedBack": self.seed_back,
        }


@dataclass(frozen=True)
class ContextData:
    business_name: Optional[str] = None
    tagline: Optional[str] = None
    values: Optional[str] = None
    audience: Optional[str] = None
    competitors: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        raw = {
            "businessName": self.business_name,
            "tagline": self.tagline,
            "values": self.values,
            "audience": self.audience,
            "competitors": self.competitors,
            "notes": self.notes,
        }
        return {k: v for k, v in raw.items() if v is not None}


@dataclass(frozen=True)
class GenerateInput:
    industry: str
    brand_tone: Optional[BrandTone] = None
    theme_preference: Optional[ThemePreference] = None
    seed: Optional[int] = None
    use_context: bool = False
    context: Optional[ContextData] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"industry": self.industry}
        if self.brand_tone is not None:
            out["brandTone"] = BrandTone(self.brand_tone).value
        if self.theme_preference is not None:
            out["themePreference"] = ThemePreference(self.theme_preference).value
        if self.seed is not None:
            out["seed"] = self.seed
        out["useContext"] = self.use_context
        if self.context is not None:
            out["context"] = self.context.to_dict()
        return out


@dataclass(frozen=True)
class GenerateResponse:
    input: GenerateInput
    palettes: List[Palette] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input": self.input.to_dict(),
            "palettes": [p.to_dict() for p in self.palettes],
        }
