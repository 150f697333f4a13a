"""
BotModel aggregate: a catalog entry describing a bot that can be built for a niche.

A model starts as a draft. Activation requires at least one key feature and
one use case, and an active model has to keep both.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from botcatalog.core.modeling import Aggregate, action, invariant, violation
from botcatalog.core.validation import required_text, slug_text, uuid_text

from .niche import Niche
from .technical_specification import TechnicalSpecification

PricingModel = Literal["one-time", "subscription", "usage-based"]
BotModelStatus = Literal["draft", "active", "archived"]

BotModelId = uuid_text("Bot model id must be a UUID")
BotModelName = required_text("Bot model name is required")
Description = required_text("Description is required")
Slug = slug_text("Slug must be lowercase with hyphens")


class BotModel(Aggregate):
    id: BotModelId
    name: BotModelName
    description: Description
    slug: Slug
    niche: Niche
    technical_specification: TechnicalSpecification
    target_audience: Optional[str] = None
    key_features: List[str] = Field(default_factory=list)
    use_cases: List[str] = Field(default_factory=list)
    pricing_model: PricingModel = "one-time"
    status: BotModelStatus = "draft"
    tags: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    # computed

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    @property
    def is_draft(self) -> bool:
        return self.status == "draft"

    @property
    def is_archived(self) -> bool:
        return self.status == "archived"

    @property
    def feature_count(self) -> int:
        return len(self.key_features)

    @property
    def use_case_count(self) -> int:
        return len(self.use_cases)

    # invariants

    @invariant
    def _active_model_is_complete(self) -> None:
        if self.status == "active" and not self.key_features:
            raise violation("Active bot model must have at least one key feature")
        if self.status == "active" and not self.use_cases:
            raise violation("Active bot model must have at least one use case")

    # actions

    @action
    def update_name(self, new_name: str) -> None:
        if len(new_name) < 1:
            raise violation("Bot model name cannot be empty")
        self.name = new_name

    @action
    def update_description(self, new_description: str) -> None:
        if len(new_description) < 1:
            raise violation("Description cannot be empty")
        self.description = new_description

    @action
    def update_niche(self, new_niche: Niche) -> None:
        self.niche = new_niche

    @action
    def update_technical_specification(self, new_spec: TechnicalSpecification) -> None:
        self.technical_specification = new_spec

    @action
    def add_feature(self, feature: str) -> None:
        if len(feature) < 1:
            raise violation("Feature cannot be empty")
        self.key_features.append(feature)

    @action
    def remove_feature(self, feature: str) -> None:
        self.key_features = [f for f in self.key_features if f != feature]

    @action
    def add_use_case(self, use_case: str) -> None:
        if len(use_case) < 1:
            raise violation("Use case cannot be empty")
        self.use_cases.append(use_case)

    @action
    def remove_use_case(self, use_case: str) -> None:
        self.use_cases = [uc for uc in self.use_cases if uc != use_case]

    @action
    def activate(self) -> None:
        if not self.key_features:
            raise violation("Cannot activate bot model without key features")
        if not self.use_cases:
            raise violation("Cannot activate bot model without use cases")
        self.status = "active"

    @action
    def archive(self) -> None:
        self.status = "archived"

    @action
    def add_tag(self, tag: str) -> None:
        if len(tag) < 1:
            raise violation("Tag cannot be empty")
        if tag not in self.tags:
            self.tags.append(tag)

    @action
    def remove_tag(self, tag: str) -> None:
        self.tags = [t for t in self.tags if t != tag]
