"""RMS capacity planning library initialization."""

from .aggregator import IntervalDemandAggregator
from .analysis import ImpactStatus, ImpactSummary, summarize_impact
from .config import PlanningConfig
from .exceptions import PlanningError
from .models import (
    Scenario,
    ResourcePool,
    ImpactResult,
    DemandPoint,
    ShortageAlert,
    ItemType
)
from .session import PlanningSession
from .timeline import DemandTimeline

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "IntervalDemandAggregator",
    "DemandTimeline",
    "PlanningSession",
    "PlanningConfig",
    "PlanningError",
    "Scenario",
    "ResourcePool",
    "ImpactResult",
    "DemandPoint",
    "ShortageAlert",
    "ItemType",
    "ImpactStatus",
    "ImpactSummary",
    "summarize_impact"
]
