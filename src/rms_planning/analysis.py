"""Presentation helpers for impact results."""

from dataclasses import dataclass
from enum import Enum

from .models import ImpactResult


class ImpactStatus(str, Enum):
    """Headline state of a planning view."""
    WAITING = "waiting"
    SUFFICIENT = "sufficient"
    OVERSUBSCRIBED = "oversubscribed"


@dataclass(frozen=True)
class ImpactSummary:
    """Display-ready view of an impact result."""
    status: ImpactStatus
    shortage_units: int
    utilization_display: float
    utilization_bar: float


def summarize_impact(result: ImpactResult, scenario_count: int) -> ImpactSummary:
    """Classify an impact result for display.

    An oversubscribed pool takes precedence; otherwise an empty working set
    is still waiting for input.
    """
    if result.is_oversubscribed:
        status = ImpactStatus.OVERSUBSCRIBED
    elif scenario_count > 0:
        status = ImpactStatus.SUFFICIENT
    else:
        status = ImpactStatus.WAITING

    display = result.utilization_display
    return ImpactSummary(
        status=status,
        shortage_units=max(0, -result.remaining_capacity),
        utilization_display=display,
        utilization_bar=min(100.0, display)
    )
