"""Event definitions for planning sessions."""

from enum import Enum
from typing import Dict, Any, Optional
from dataclasses import dataclass, field
from datetime import datetime, timezone

class EventType(str, Enum):
    """Types of planning session events."""
    # Working set events
    SCENARIO_ADDED = "scenario_added"
    SCENARIO_REMOVED = "scenario_removed"
    SCENARIOS_CLEARED = "scenarios_cleared"

    # Snapshot events
    POOL_REFRESHED = "pool_refreshed"

    # Computation events
    IMPACT_COMPUTED = "impact_computed"

@dataclass
class SessionEvent:
    """Event emitted by a planning session."""
    type: EventType
    scenario_count: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    scenario_id: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
