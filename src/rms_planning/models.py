"""Data models for capacity planning."""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Any, Optional, Tuple, Union

from .validation import Validator
from .exceptions import ValidationTypeError

DateLike = Union[date, datetime, str]


def parse_date(value: DateLike) -> date:
    """Coerce a date, datetime or ISO ``YYYY-MM-DD`` string to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        # Drop a time-of-day suffix such as "T10:00:00Z"
        if len(text) > 10 and text[10] in "T ":
            text = text[:10]
        try:
            return date.fromisoformat(text)
        except ValueError:
            raise ValidationTypeError(f"Invalid ISO date: {value!r}")
    raise ValidationTypeError(
        f"Expected date or ISO string, got {type(value).__name__}"
    )


@dataclass(frozen=True)
class Scenario:
    """A hypothetical demand event over an inclusive date range."""
    quantity: int
    start: date
    end: date
    item_type_id: Optional[int] = None
    label: str = ""
    scenario_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def contains(self, day: date) -> bool:
        """Check whether ``day`` falls within ``[start, end]``."""
        return self.start <= day <= self.end

    @property
    def duration_days(self) -> int:
        """Inclusive length in days, 0 for an inverted range."""
        return max(0, (self.end - self.start).days + 1)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "scenario_id": self.scenario_id,
            "quantity": self.quantity,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "item_type_id": self.item_type_id,
            "label": self.label,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Scenario':
        """Create from dictionary.

        Accepts ``start``/``end`` as well as the ``startDate``/``endDate``
        keys used by the planning UI.
        """
        start = data.get("start", data.get("startDate"))
        end = data.get("end", data.get("endDate"))
        if start is None or end is None:
            raise ValidationTypeError("Scenario requires both a start and an end date")

        quantity = data.get("quantity")
        if isinstance(quantity, str):
            try:
                quantity = int(quantity)
            except ValueError:
                raise ValidationTypeError(f"Invalid quantity: {quantity!r}")
        Validator.validate_type(quantity, int)

        kwargs = {}
        if data.get("scenario_id") is not None:
            kwargs["scenario_id"] = str(data["scenario_id"])
        elif data.get("id") is not None:
            kwargs["scenario_id"] = str(data["id"])

        return cls(
            quantity=quantity,
            start=parse_date(start),
            end=parse_date(end),
            item_type_id=data.get("item_type_id"),
            label=data.get("label", ""),
            **kwargs
        )


@dataclass(frozen=True)
class ResourcePool:
    """Baseline capacity a set of scenarios is evaluated against."""
    total_capacity: int
    available_capacity: int
    item_type_id: Optional[int] = None


@dataclass(frozen=True)
class ImpactResult:
    """Result of one aggregation pass."""
    peak_demand: int
    remaining_capacity: int
    utilization_delta: float
    peak_dates: Tuple[date, ...] = ()
    display_precision: int = 1

    @property
    def utilization_display(self) -> float:
        """Utilization delta rounded for display."""
        return round(self.utilization_delta, self.display_precision)

    @property
    def is_oversubscribed(self) -> bool:
        """True when peak demand exceeds available capacity."""
        return self.remaining_capacity < 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "peak_demand": self.peak_demand,
            "remaining_capacity": self.remaining_capacity,
            "utilization_delta": self.utilization_delta,
            "peak_dates": [d.isoformat() for d in self.peak_dates],
        }


@dataclass(frozen=True)
class DemandPoint:
    """Projected demand and availability on a single day."""
    day: date
    demand: int
    available: int
    total: int


@dataclass(frozen=True)
class ShortageAlert:
    """A day whose projected availability falls below the threshold."""
    day: date
    shortage_count: int
    total_needed: int
    total_owned: int
    item_type_id: Optional[int] = None


@dataclass(frozen=True)
class ItemType:
    """Catalog item type a scenario can move."""
    id: int
    name: str
    category: str = ""
