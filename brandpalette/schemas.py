# brandpalette/schemas.py
"""Request models for the HTTP boundary. The engine itself never validates."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .models import BrandTone, ContextData, GenerateInput, ThemePreference


class ContextIn(BaseModel):
    businessName: Optional[str] = None
    tagline: Optional[str] = None
    values: Optional[str] = None
    audience: Optional[str] = None
    competitors: Optional[str] = None
    notes: Optional[str] = None

    def to_context(self) -> ContextData:
        return ContextData(
            business_name=self.businessName,
            tagline=self.tagline,
            values=self.values,
            audience=self.audience,
            competitors=self.competitors,
            notes=self.notes,
        )


class GenerateRequest(BaseModel):
    industry: str
    brandTone: Optional[BrandTone] = None
    themePreference: Optional[ThemePreference] = None
    seed: Optional[int] = Field(default=None, ge=0)
    useContext: bool = False
    context: Optional[ContextIn] = None

    @field_validator("industry")
    @classmethod
    def industry_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Industry is required and must be a string")
        return v

    def to_input(self, seed: int) -> GenerateInput:
        return GenerateInput(
            industry=self.industry,
            brand_tone=self.brandTone,
            theme_preference=self.themePreference,
            seed=seed,
            use_context=self.useContext,
            context=self.context.to_context() if self.context else None,
        )
