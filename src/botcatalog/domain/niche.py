"""
Niche value object: the market segment a bot model targets.
"""

from datetime import datetime
from typing import Optional, Tuple

from pydantic import Field, StrictBool

from botcatalog.core.modeling import ValueObject
from botcatalog.core.validation import required_text, slug_text

NicheName = required_text("Niche name is required")
NicheSlug = slug_text("Slug must be lowercase with hyphens")


class Niche(ValueObject):
    name: NicheName
    slug: NicheSlug
    description: Optional[str] = None
    target_audience: Optional[str] = None
    common_use_cases: Tuple[str, ...] = ()
    is_active: StrictBool = True
    created_at: datetime = Field(default_factory=datetime.now)
