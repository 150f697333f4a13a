"""
Technical specification value objects.
"""

from typing import Literal, Optional, Tuple

from pydantic import Field, StrictFloat

from botcatalog.core.modeling import ValueObject
from botcatalog.core.validation import required_text

Scalability = Literal["low", "medium", "high"]

Platform = required_text("Platform is required")


class PerformanceMetrics(ValueObject):
    response_time: Optional[StrictFloat] = Field(default=None, gt=0)  # milliseconds
    uptime: Optional[StrictFloat] = Field(default=None, ge=0, le=100)  # percent
    scalability: Optional[Scalability] = None


class TechnicalSpecification(ValueObject):
    platform: Platform
    technology_stack: Tuple[str, ...] = ()
    integration_points: Tuple[str, ...] = ()
    performance_metrics: Optional[PerformanceMetrics] = None
    security_features: Tuple[str, ...] = ()
    compliance: Tuple[str, ...] = ()
    estimated_development_time: Optional[StrictFloat] = Field(default=None, gt=0)  # hours
    maintenance_requirements: Optional[str] = None
