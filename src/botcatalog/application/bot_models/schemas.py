"""
Input schemas for the bot-model use cases.

Keys arrive in camelCase (``technicalSpecification``); attributes are
snake_case. Unknown keys are ignored, list fields default to empty lists and
optional fields stay ``None`` when absent.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat
from pydantic.alias_generators import to_camel

from botcatalog.core.validation import required_text, slug_text
from botcatalog.domain import PricingModel, Scalability


BotModelName = required_text("Bot model name is required")
Description = required_text("Description is required")
Slug = slug_text("Slug must be lowercase with hyphens")
NicheName = required_text("Niche name is required")
NicheSlug = slug_text("Niche slug must be lowercase with hyphens")
Platform = required_text("Platform is required")


class InputSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict:
        """camelCase dict without unset optionals, as adapters usually want it."""
        return self.model_dump(by_alias=True, exclude_none=True)


class NicheInput(InputSchema):
    name: NicheName
    slug: NicheSlug
    description: Optional[str] = None
    target_audience: Optional[str] = None
    common_use_cases: List[str] = Field(default_factory=list)
    is_active: StrictBool = True
    created_at: Optional[datetime] = None


class PerformanceMetricsInput(InputSchema):
    response_time: Optional[StrictFloat] = Field(default=None, gt=0)
    uptime: Optional[StrictFloat] = Field(default=None, ge=0, le=100)
    scalability: Optional[Scalability] = None


class TechnicalSpecificationInput(InputSchema):
    platform: Platform
    technology_stack: List[str] = Field(default_factory=list)
    integration_points: List[str] = Field(default_factory=list)
    performance_metrics: Optional[PerformanceMetricsInput] = None
    security_features: List[str] = Field(default_factory=list)
    compliance: List[str] = Field(default_factory=list)
    estimated_development_time: Optional[StrictFloat] = Field(default=None, gt=0)
    maintenance_requirements: Optional[str] = None


class StoreBotModelInput(InputSchema):
    name: BotModelName
    description: Description
    slug: Slug
    niche: NicheInput
    technical_specification: TechnicalSpecificationInput
    target_audience: Optional[str] = None
    key_features: List[str] = Field(default_factory=list)
    use_cases: List[str] = Field(default_factory=list)
    pricing_model: PricingModel = "one-time"
    tags: List[str] = Field(default_factory=list)


# Reduced schema used by the simple use case.


class SimpleNicheInput(InputSchema):
    name: NicheName
    slug: NicheSlug


class SimpleTechnicalSpecificationInput(InputSchema):
    platform: Platform


class SimpleStoreBotModelInput(InputSchema):
    name: BotModelName
    description: Description
    slug: Slug
    niche: SimpleNicheInput
    technical_specification: SimpleTechnicalSpecificationInput
    target_audience: Optional[str] = None
    key_features: List[str] = Field(default_factory=list)
    use_cases: List[str] = Field(default_factory=list)
    pricing_model: PricingModel = "one-time"
    tags: List[str] = Field(default_factory=list)
