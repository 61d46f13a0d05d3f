"""Parsing of Backend API payloads into planning inputs."""

from typing import Any, Dict, List, Mapping, Optional

from .models import ResourcePool, ItemType
from .exceptions import SnapshotError


def _as_count(value: Any, key: str) -> int:
    # Missing or null counters mean zero units
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        raise SnapshotError(f"Invalid count for '{key}': {value!r}")


def pool_from_dashboard_stats(
    payload: Mapping[str, Any],
    item_type_id: Optional[int] = None
) -> ResourcePool:
    """Build a pool snapshot from a ``/v1/dashboard/stats`` response.

    Total capacity is ``total_assets``; available capacity is the
    ``available`` entry of ``assets_by_status``.
    """
    if not isinstance(payload, Mapping):
        raise SnapshotError(
            f"Dashboard stats must be an object, got {type(payload).__name__}"
        )

    by_status = payload.get("assets_by_status") or {}
    if not isinstance(by_status, Mapping):
        raise SnapshotError("'assets_by_status' must be an object")

    return ResourcePool(
        total_capacity=_as_count(payload.get("total_assets"), "total_assets"),
        available_capacity=_as_count(by_status.get("available"), "assets_by_status.available"),
        item_type_id=item_type_id
    )


def pool_from_availability_point(
    payload: Mapping[str, Any],
    item_type_id: Optional[int] = None
) -> ResourcePool:
    """Build a pool snapshot from one ``/v1/intelligence/availability`` entry."""
    if not isinstance(payload, Mapping):
        raise SnapshotError(
            f"Availability point must be an object, got {type(payload).__name__}"
        )
    return ResourcePool(
        total_capacity=_as_count(payload.get("total"), "total"),
        available_capacity=_as_count(payload.get("available"), "available"),
        item_type_id=item_type_id
    )


def item_types_from_catalog(payload: Optional[List[Dict[str, Any]]]) -> List[ItemType]:
    """Parse a ``/v1/catalog/item-types`` response."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise SnapshotError(
            f"Item type catalog must be a list, got {type(payload).__name__}"
        )

    item_types = []
    for entry in payload:
        if not isinstance(entry, Mapping) or entry.get("id") is None:
            raise SnapshotError(f"Item type entry without id: {entry!r}")
        try:
            item_type_id = int(entry["id"])
        except (TypeError, ValueError):
            raise SnapshotError(f"Invalid item type id: {entry['id']!r}")
        item_types.append(
            ItemType(
                id=item_type_id,
                name=entry.get("name") or "",
                category=entry.get("category") or ""
            )
        )
    return item_types
