"""Day-by-day availability projection and shortage detection."""

from datetime import date, timedelta
from typing import Iterable, List, Optional
import numpy as np
import pandas as pd

from .config import TimelineConfig
from .models import Scenario, ResourcePool, DemandPoint, ShortageAlert, DateLike, parse_date
from .exceptions import ValidationRangeError


class DemandTimeline:
    """Projects scenario demand onto a calendar window.

    Where the aggregator only answers "what is the worst day", the timeline
    answers "what does every day in the window look like", which is what the
    availability heatmap renders.
    """

    def __init__(self, config: Optional[TimelineConfig] = None):
        self.config = config or TimelineConfig()

    def daily_demand(
        self,
        scenarios: Iterable[Scenario],
        start: date,
        days: int
    ) -> np.ndarray:
        """Demand for each of ``days`` consecutive days from ``start``."""
        if days <= 0:
            raise ValidationRangeError(f"Window must be > 0 days, got {days}")
        if days > (date.max - start).days + 1:
            raise ValidationRangeError(
                f"Window of {days} days from {start.isoformat()} runs past {date.max.isoformat()}"
            )

        last = start + timedelta(days=days - 1)
        deltas = np.zeros(days + 1, dtype=np.int64)
        for scenario in scenarios:
            lo = max(scenario.start, start)
            hi = min(scenario.end, last)
            # Inverted ranges and ranges outside the window clip to nothing
            if lo > hi:
                continue
            deltas[(lo - start).days] += scenario.quantity
            deltas[(hi - start).days + 1] -= scenario.quantity

        return np.cumsum(deltas[:days])

    def project(
        self,
        scenarios: Iterable[Scenario],
        pool: ResourcePool,
        start: DateLike,
        days: Optional[int] = None
    ) -> List[DemandPoint]:
        """Project demand and remaining availability for each day."""
        start = parse_date(start)
        days = self.config.window_days if days is None else days
        demand = self.daily_demand(list(scenarios), start, days)

        return [
            DemandPoint(
                day=start + timedelta(days=offset),
                demand=int(value),
                available=pool.available_capacity - int(value),
                total=pool.total_capacity
            )
            for offset, value in enumerate(demand)
        ]

    def detect_shortages(
        self,
        points: Iterable[DemandPoint],
        item_type_id: Optional[int] = None
    ) -> List[ShortageAlert]:
        """Alert on every day whose availability drops below the threshold."""
        threshold = self.config.shortage_threshold
        return [
            ShortageAlert(
                day=point.day,
                shortage_count=threshold - point.available,
                total_needed=point.demand,
                total_owned=point.total,
                item_type_id=item_type_id
            )
            for point in points
            if point.available < threshold
        ]

    @staticmethod
    def to_dataframe(points: Iterable[DemandPoint]) -> pd.DataFrame:
        """Tabulate projected points for reporting."""
        df = pd.DataFrame(
            [
                {
                    "day": point.day,
                    "demand": point.demand,
                    "available": point.available,
                    "total": point.total,
                }
                for point in points
            ],
            columns=["day", "demand", "available", "total"]
        )
        total = df["total"].astype(float)
        df["utilization"] = np.where(
            total > 0, df["demand"] / total.where(total > 0, 1.0) * 100, 0.0
        )
        return df
