"""Interactive "what-if" planning session."""

from typing import Callable, List, Optional, Tuple
import logging

from .aggregator import IntervalDemandAggregator
from .config import PlanningConfig
from .events import EventType, SessionEvent
from .exceptions import ScenarioNotFoundError, SnapshotError
from .models import Scenario, ResourcePool, ImpactResult, DemandPoint, DateLike
from .timeline import DemandTimeline
from .validation import ScenarioValidator, PoolValidator

EventHandler = Callable[[SessionEvent], None]


class PlanningSession:
    """Working set of scenarios evaluated against the latest pool snapshot.

    The session owns the mutable state a planning view needs between
    interactions; impact is recomputed from scratch on every request.
    """

    def __init__(
        self,
        config: Optional[PlanningConfig] = None,
        pool: Optional[ResourcePool] = None
    ):
        self.config = config or PlanningConfig()
        self.aggregator = IntervalDemandAggregator(self.config.aggregation)
        self.timeline_builder = DemandTimeline(self.config.timeline)
        self.validator = ScenarioValidator(self.config.validation)
        self.pool = pool
        self._scenarios: List[Scenario] = []
        self._handlers: List[EventHandler] = []
        self.logger = logging.getLogger("rms_planning.session")

    @property
    def scenarios(self) -> Tuple[Scenario, ...]:
        return tuple(self._scenarios)

    def __len__(self) -> int:
        return len(self._scenarios)

    def add_handler(self, handler: EventHandler) -> None:
        """Register a callable notified of every session event."""
        self._handlers.append(handler)

    def _emit(self, event_type: EventType, scenario_id: Optional[str] = None, **details) -> None:
        event = SessionEvent(
            type=event_type,
            scenario_count=len(self._scenarios),
            scenario_id=scenario_id,
            details=details or None
        )
        for handler in self._handlers:
            handler(event)

    def add_scenario(self, scenario: Scenario) -> Scenario:
        """Add a scenario to the working set."""
        if self.config.validation.enabled:
            self.validator.validate(scenario)

        self._scenarios.append(scenario)
        self.logger.debug(
            f"Added scenario {scenario.scenario_id}: {scenario.quantity} units "
            f"{scenario.start.isoformat()} to {scenario.end.isoformat()}"
        )
        self._emit(EventType.SCENARIO_ADDED, scenario.scenario_id)
        return scenario

    def remove_scenario(self, scenario_id: str) -> Scenario:
        """Remove a scenario from the working set by id."""
        for index, scenario in enumerate(self._scenarios):
            if scenario.scenario_id == scenario_id:
                del self._scenarios[index]
                self._emit(EventType.SCENARIO_REMOVED, scenario_id)
                return scenario
        raise ScenarioNotFoundError(f"Scenario not found: {scenario_id}")

    def clear(self) -> None:
        """Discard every scenario."""
        self._scenarios.clear()
        self._emit(EventType.SCENARIOS_CLEARED)

    def refresh_pool(self, pool: ResourcePool) -> None:
        """Replace the pool snapshot with a newer one."""
        if self.config.validation.enabled:
            PoolValidator.validate_pool(pool)
        self.pool = pool
        self._emit(
            EventType.POOL_REFRESHED,
            total_capacity=pool.total_capacity,
            available_capacity=pool.available_capacity
        )

    def _require_pool(self) -> ResourcePool:
        if self.pool is None:
            raise SnapshotError("No resource pool snapshot has been supplied")
        return self.pool

    def impact(self) -> ImpactResult:
        """Compute the impact of the current working set."""
        result = self.aggregator.compute_impact(self._scenarios, self._require_pool())
        self._emit(
            EventType.IMPACT_COMPUTED,
            peak_demand=result.peak_demand,
            remaining_capacity=result.remaining_capacity
        )
        return result

    def timeline(self, start: DateLike, days: Optional[int] = None) -> List[DemandPoint]:
        """Project the working set day by day from ``start``."""
        return self.timeline_builder.project(self._scenarios, self._require_pool(), start, days)
