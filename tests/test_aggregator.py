"""
Test suite for peak-demand aggregation.

Covers the worked planning examples, the overlap properties the planning
view relies on, and equivalence of the two peak strategies.
"""

import sys
from pathlib import Path
import itertools
import unittest
from datetime import date

import numpy as np

# Add the src directory to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rms_planning.aggregator import IntervalDemandAggregator
from rms_planning.config import AggregationConfig
from rms_planning.exceptions import ConfigurationError
from rms_planning.models import Scenario, ResourcePool


def scenario(quantity, start, end):
    return Scenario(quantity=quantity, start=date.fromisoformat(start), end=date.fromisoformat(end))


def random_scenarios(rng, count):
    scenarios = []
    for _ in range(count):
        offset = int(rng.integers(0, 30))
        length = int(rng.integers(0, 10))
        start = date(2024, 3, 1).toordinal() + offset
        scenarios.append(
            Scenario(
                quantity=int(rng.integers(1, 20)),
                start=date.fromordinal(start),
                end=date.fromordinal(start + length)
            )
        )
    return scenarios


class TestWorkedExamples(unittest.TestCase):
    """Concrete planning examples with known answers."""

    def setUp(self):
        self.aggregator = IntervalDemandAggregator()

    def test_overlapping_scenarios(self):
        pool = ResourcePool(total_capacity=100, available_capacity=40)
        scenarios = [
            scenario(10, "2024-01-01", "2024-01-05"),
            scenario(15, "2024-01-03", "2024-01-10"),
        ]

        profile = self.aggregator.demand_profile(scenarios)
        self.assertEqual(profile, {
            date(2024, 1, 1): 10,
            date(2024, 1, 3): 25,
            date(2024, 1, 5): 25,
            date(2024, 1, 10): 15,
        })

        result = self.aggregator.compute_impact(scenarios, pool)
        self.assertEqual(result.peak_demand, 25)
        self.assertEqual(result.remaining_capacity, 15)
        self.assertAlmostEqual(result.utilization_delta, 25.0)
        self.assertEqual(result.peak_dates, (date(2024, 1, 3), date(2024, 1, 5)))
        self.assertFalse(result.is_oversubscribed)

    def test_oversubscription(self):
        pool = ResourcePool(total_capacity=50, available_capacity=20)
        result = self.aggregator.compute_impact([scenario(30, "2024-02-01", "2024-02-02")], pool)

        self.assertEqual(result.peak_demand, 30)
        self.assertEqual(result.remaining_capacity, -10)
        self.assertAlmostEqual(result.utilization_delta, 60.0)
        self.assertTrue(result.is_oversubscribed)

    def test_empty_scenario_set(self):
        pool = ResourcePool(total_capacity=10, available_capacity=10)
        result = self.aggregator.compute_impact([], pool)

        self.assertEqual(result.peak_demand, 0)
        self.assertEqual(result.remaining_capacity, 10)
        self.assertEqual(result.utilization_delta, 0)
        self.assertEqual(result.peak_dates, ())
        self.assertEqual(self.aggregator.compute_peak_demand([]), 0)

    def test_disjoint_scenarios_do_not_stack(self):
        scenarios = [
            scenario(5, "2024-01-01", "2024-01-02"),
            scenario(7, "2024-01-05", "2024-01-06"),
        ]
        self.assertEqual(self.aggregator.compute_peak_demand(scenarios), 7)

    def test_touching_endpoints_overlap(self):
        # Both ranges are inclusive, so a shared boundary day counts twice
        scenarios = [
            scenario(4, "2024-01-01", "2024-01-03"),
            scenario(6, "2024-01-03", "2024-01-04"),
        ]
        self.assertEqual(self.aggregator.compute_peak_demand(scenarios), 10)


class TestEdgeCases(unittest.TestCase):
    """Inputs the aggregator accepts without validating."""

    def setUp(self):
        self.aggregator = IntervalDemandAggregator()

    def test_inverted_range_contributes_nothing(self):
        inverted = scenario(50, "2024-01-10", "2024-01-01")
        normal = scenario(3, "2024-01-01", "2024-01-10")

        self.assertEqual(self.aggregator.compute_peak_demand([inverted]), 0)
        self.assertEqual(self.aggregator.compute_peak_demand([inverted, normal]), 3)
        # Its boundaries still count as critical dates
        self.assertEqual(
            self.aggregator.critical_dates([inverted]),
            [date(2024, 1, 1), date(2024, 1, 10)]
        )

    def test_negative_quantity_reduces_overlap(self):
        scenarios = [
            scenario(10, "2024-01-01", "2024-01-10"),
            scenario(-4, "2024-01-05", "2024-01-06"),
        ]
        profile = self.aggregator.demand_profile(scenarios)
        self.assertEqual(profile[date(2024, 1, 5)], 6)
        self.assertEqual(self.aggregator.compute_peak_demand(scenarios), 10)

    def test_only_negative_demand_floors_at_zero(self):
        scenarios = [scenario(-5, "2024-01-01", "2024-01-02")]
        self.assertEqual(self.aggregator.compute_peak_demand(scenarios), 0)
        self.assertEqual(self.aggregator.peak_dates(scenarios), [])

    def test_zero_total_capacity(self):
        pool = ResourcePool(total_capacity=0, available_capacity=0)
        result = self.aggregator.compute_impact([scenario(5, "2024-01-01", "2024-01-01")], pool)

        self.assertEqual(result.utilization_delta, 0.0)
        self.assertEqual(result.remaining_capacity, -5)

    def test_display_rounding_keeps_full_precision(self):
        pool = ResourcePool(total_capacity=3, available_capacity=3)
        result = self.aggregator.compute_impact([scenario(1, "2024-01-01", "2024-01-01")], pool)

        self.assertAlmostEqual(result.utilization_delta, 100 / 3)
        self.assertEqual(result.utilization_display, 33.3)

    def test_accepts_generators(self):
        scenarios = (scenario(2, "2024-01-01", "2024-01-02") for _ in range(3))
        self.assertEqual(self.aggregator.compute_peak_demand(scenarios), 6)

    def test_unknown_strategy_rejected(self):
        with self.assertRaises(ConfigurationError):
            IntervalDemandAggregator(AggregationConfig(strategy="per_day"))


class TestProperties(unittest.TestCase):
    """Overlap properties checked over randomized scenario sets."""

    def setUp(self):
        self.rng = np.random.default_rng(42)
        self.scan = IntervalDemandAggregator()
        self.sweep = IntervalDemandAggregator(AggregationConfig(strategy="sweep_line"))

    def test_peak_is_non_negative_and_attains_single_scenarios(self):
        for _ in range(50):
            scenarios = random_scenarios(self.rng, 6)
            peak = self.scan.compute_peak_demand(scenarios)
            self.assertGreaterEqual(peak, 0)
            self.assertGreaterEqual(peak, max(s.quantity for s in scenarios))

    def test_adding_a_scenario_never_decreases_peak(self):
        for _ in range(50):
            scenarios = random_scenarios(self.rng, 5)
            before = self.scan.compute_peak_demand(scenarios[:-1])
            after = self.scan.compute_peak_demand(scenarios)
            self.assertGreaterEqual(after, before)

    def test_order_independence(self):
        scenarios = random_scenarios(self.rng, 5)
        expected = self.scan.compute_peak_demand(scenarios)
        for permutation in itertools.permutations(scenarios):
            self.assertEqual(self.scan.compute_peak_demand(permutation), expected)
            self.assertEqual(self.sweep.compute_peak_demand(permutation), expected)

    def test_impact_is_idempotent(self):
        scenarios = random_scenarios(self.rng, 8)
        pool = ResourcePool(total_capacity=120, available_capacity=70)
        self.assertEqual(
            self.scan.compute_impact(scenarios, pool),
            self.scan.compute_impact(scenarios, pool)
        )

    def test_strategies_agree(self):
        pool = ResourcePool(total_capacity=80, available_capacity=30)
        for _ in range(100):
            scenarios = random_scenarios(self.rng, int(self.rng.integers(0, 12)))
            scenarios.append(scenario(9, "2024-03-20", "2024-03-10"))
            self.assertEqual(
                self.scan.demand_profile(scenarios),
                self.sweep.demand_profile(scenarios)
            )
            self.assertEqual(
                self.scan.compute_impact(scenarios, pool),
                self.sweep.compute_impact(scenarios, pool)
            )

    def test_sweep_handles_last_representable_date(self):
        scenarios = [Scenario(quantity=4, start=date(9999, 12, 30), end=date.max)]
        self.assertEqual(self.sweep.compute_peak_demand(scenarios), 4)
        self.assertEqual(self.scan.compute_peak_demand(scenarios), 4)


if __name__ == "__main__":
    unittest.main()
