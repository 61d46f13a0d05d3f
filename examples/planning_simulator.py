"""
"What-if" planning example for the RMS planning library.
This example demonstrates:
- Building a pool snapshot from a dashboard stats payload
- Modelling fleet movements as scenarios in a planning session
- Reading peak impact, a day-by-day projection and shortage alerts
"""

from datetime import date

from rms_planning import PlanningSession, PlanningConfig, Scenario, summarize_impact
from rms_planning.config import TimelineConfig
from rms_planning.events import SessionEvent
from rms_planning.snapshot import pool_from_dashboard_stats, item_types_from_catalog


def log_event(event: SessionEvent) -> None:
    print(f"  [{event.type.value}] scenarios={event.scenario_count}")


def main():
    stats_payload = {
        "total_assets": 100,
        "assets_by_status": {"available": 40, "rented": 52, "maintenance": 8},
    }
    catalog_payload = [
        {"id": 1, "name": "Mini Excavator", "category": "earthmoving"},
        {"id": 2, "name": "Scissor Lift", "category": "access"},
    ]

    item_types = item_types_from_catalog(catalog_payload)
    excavator = item_types[0]

    config = PlanningConfig(
        name="Depot North",
        timeline=TimelineConfig(window_days=12)
    )
    session = PlanningSession(config=config, pool=pool_from_dashboard_stats(stats_payload, excavator.id))
    session.add_handler(log_event)

    print("Adding movement scenarios...")
    session.add_scenario(Scenario(
        quantity=10, start=date(2024, 1, 1), end=date(2024, 1, 5),
        item_type_id=excavator.id, label="Highway resurfacing"
    ))
    session.add_scenario(Scenario(
        quantity=35, start=date(2024, 1, 3), end=date(2024, 1, 10),
        item_type_id=excavator.id, label="Stadium groundworks"
    ))

    impact = session.impact()
    summary = summarize_impact(impact, len(session))

    print(f"\nBaseline availability: {session.pool.available_capacity}")
    print(f"Peak demand:           {impact.peak_demand}")
    print(f"Simulated remainder:   {impact.remaining_capacity}")
    print(f"Utilization increase:  {summary.utilization_display}%")
    print(f"Status:                {summary.status.value}")
    print(f"Peak dates:            {', '.join(d.isoformat() for d in impact.peak_dates)}")

    points = session.timeline(date(2024, 1, 1))
    print("\nProjection:")
    print(session.timeline_builder.to_dataframe(points).to_string(index=False))

    for alert in session.timeline_builder.detect_shortages(points, excavator.id):
        print(f"Shortage on {alert.day.isoformat()}: {alert.shortage_count} units short "
              f"({alert.total_needed} needed, {alert.total_owned} owned)")


if __name__ == "__main__":
    main()
