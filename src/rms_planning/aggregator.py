"""Peak simultaneous-demand aggregation over date-ranged scenarios."""

from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
import logging

from .config import AggregationConfig, PEAK_STRATEGIES
from .models import Scenario, ResourcePool, ImpactResult
from .exceptions import ConfigurationError

ONE_DAY = timedelta(days=1)


class IntervalDemandAggregator:
    """Computes peak demand and capacity impact for a set of scenarios.

    The aggregator is stateless apart from its configuration: every call
    receives the scenario list and pool snapshot explicitly and returns a
    freshly computed value. Business sanity (positive quantities, ordered
    ranges) is not checked here; inputs flow through arithmetically.
    """

    def __init__(self, config: Optional[AggregationConfig] = None):
        self.config = config or AggregationConfig()
        if self.config.strategy not in PEAK_STRATEGIES:
            raise ConfigurationError(
                f"Unknown peak strategy '{self.config.strategy}'. "
                f"Must be one of: {', '.join(PEAK_STRATEGIES)}"
            )
        self.logger = logging.getLogger("rms_planning.aggregator")

    @property
    def strategy(self) -> str:
        return self.config.strategy

    @staticmethod
    def critical_dates(scenarios: Iterable[Scenario]) -> List[date]:
        """Sorted union of every scenario start and end date."""
        dates = set()
        for scenario in scenarios:
            dates.add(scenario.start)
            dates.add(scenario.end)
        return sorted(dates)

    @staticmethod
    def demand_at(scenarios: Iterable[Scenario], day: date) -> int:
        """Sum of quantities of every scenario active on ``day``."""
        return sum(s.quantity for s in scenarios if s.contains(day))

    def demand_profile(self, scenarios: Iterable[Scenario]) -> Dict[date, int]:
        """Instantaneous demand at each critical date, ordered by date."""
        scenarios = list(scenarios)
        if self.config.strategy == "sweep_line":
            return self._sweep_line_profile(scenarios)
        return self._critical_date_profile(scenarios)

    def _critical_date_profile(self, scenarios: Sequence[Scenario]) -> Dict[date, int]:
        return {
            day: self.demand_at(scenarios, day)
            for day in self.critical_dates(scenarios)
        }

    def _sweep_line_profile(self, scenarios: Sequence[Scenario]) -> Dict[date, int]:
        # Demand switches on at start and off the day after end. Inverted
        # ranges contain no date, so they add no events.
        events: List[Tuple[date, int]] = []
        for scenario in scenarios:
            if scenario.end < scenario.start:
                continue
            events.append((scenario.start, scenario.quantity))
            if scenario.end < date.max:
                events.append((scenario.end + ONE_DAY, -scenario.quantity))
        events.sort(key=lambda event: event[0])

        profile: Dict[date, int] = {}
        running = 0
        index = 0
        for day in self.critical_dates(scenarios):
            while index < len(events) and events[index][0] <= day:
                running += events[index][1]
                index += 1
            profile[day] = running
        return profile

    def compute_peak_demand(self, scenarios: Iterable[Scenario]) -> int:
        """Maximum simultaneous demand across all critical dates.

        Returns 0 for an empty scenario set. The running maximum starts at
        0, so a set whose demand is never positive also yields 0.
        """
        profile = self.demand_profile(scenarios)
        peak = max([0, *profile.values()])
        self.logger.debug(
            f"Peak demand {peak} over {len(profile)} critical dates ({self.strategy})"
        )
        return peak

    def peak_dates(self, scenarios: Iterable[Scenario]) -> List[date]:
        """Critical dates at which the peak demand is attained."""
        profile = self.demand_profile(scenarios)
        if not profile:
            return []
        peak = max([0, *profile.values()])
        return [day for day, demand in profile.items() if demand == peak]

    def compute_impact(
        self,
        scenarios: Iterable[Scenario],
        pool: ResourcePool
    ) -> ImpactResult:
        """Derive capacity-impact metrics for ``scenarios`` against ``pool``."""
        profile = self.demand_profile(scenarios)
        peak = max([0, *profile.values()])
        peak_dates = tuple(day for day, demand in profile.items() if demand == peak)

        remaining = pool.available_capacity - peak
        if pool.total_capacity > 0:
            utilization = (peak / pool.total_capacity) * 100
        else:
            utilization = 0.0

        if remaining < 0:
            self.logger.info(
                f"Scenarios oversubscribe the pool by {-remaining} units"
            )

        return ImpactResult(
            peak_demand=peak,
            remaining_capacity=remaining,
            utilization_delta=utilization,
            peak_dates=peak_dates,
            display_precision=self.config.display_precision
        )
