"""
Fleet Performance Metrics
=========================

Folds trip records into summary statistics for one truck, one driver or the
whole fleet:
1. Volumes (distance, fuel, trip count)
2. Money (fuel cost, total cost, revenue, result)
3. Ratios (cost per km, L/100 km, margin)

Every figure is recomputed from the records passed in; nothing is cached
between calls because the record set changes as entries are edited.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Callable, Dict, Iterable, Optional

from models import CostModel, DEFAULT_COST_MODEL, FleetSnapshot, TripRecord, Truck

TruckResolver = Callable[[str], Optional[Truck]]


@dataclass
class FleetStats:
    """
    Aggregate activity and financial figures for a set of trip records.
    All money in the same currency unit (TND).
    """
    trip_count: int = 0
    total_distance: float = 0.0       # km
    total_fuel: float = 0.0           # litres
    total_fuel_cost: float = 0.0
    total_cost: float = 0.0
    total_revenue: float = 0.0

    result: float = 0.0               # revenue - cost
    cost_per_km: float = 0.0
    consumption_rate: float = 0.0     # litres per 100 km
    performance_ratio: float = 0.0    # result as % of revenue, signed

    def calculate_ratios(self) -> None:
        """Derive result and ratios from the totals; zero denominators give 0."""
        self.result = self.total_revenue - self.total_cost
        if self.total_distance > 0:
            self.cost_per_km = self.total_cost / self.total_distance
            self.consumption_rate = (self.total_fuel / self.total_distance) * 100
        else:
            self.cost_per_km = 0.0
            self.consumption_rate = 0.0
        if self.total_revenue > 0:
            self.performance_ratio = (self.result / self.total_revenue) * 100
        else:
            self.performance_ratio = 0.0

    @property
    def is_profitable(self) -> bool:
        return self.result >= 0

    def to_dict(self) -> Dict[str, float]:
        """Convert stats to dictionary for reporting."""
        return asdict(self)

    def print_summary(self, title: str = "FLEET") -> None:
        """Print a formatted summary of the stats."""
        print("\n" + "=" * 60)
        print(f"{title} PERFORMANCE SUMMARY")
        print("=" * 60)

        print("\n🚛 ACTIVITY")
        print(f"  • Trips: {self.trip_count}")
        print(f"  • Distance: {self.total_distance:,.0f} km")
        print(f"  • Fuel: {self.total_fuel:,.1f} L ({self.consumption_rate:.1f} L/100km)")

        print("\n💰 FINANCIALS")
        print(f"  • Revenue: {self.total_revenue:,.2f} TND")
        print(f"  • Total Cost: {self.total_cost:,.2f} TND (fuel {self.total_fuel_cost:,.2f})")
        print(f"  • Cost per km: {self.cost_per_km:.2f} TND/km")
        print(f"  • Result: {self.result:,.2f} TND {'✅' if self.is_profitable else '❌'}")
        print(f"  • Performance: {self.performance_ratio:.1f}%")
        print("=" * 60)


def summarize(records: Iterable[TripRecord],
              cost_model: CostModel = DEFAULT_COST_MODEL,
              truck_resolver: Optional[TruckResolver] = None) -> FleetStats:
    """
    Aggregate a pre-filtered set of trip records.

    Args:
        records: Records of one truck, one driver, one day...
        cost_model: Prices each record
        truck_resolver: Maps a truck id to its Truck, or None when unknown.
                        The truck is resolved per record since a driver's
                        records may span several trucks.

    Returns:
        FleetStats; all zeros for an empty input.
    """
    if truck_resolver is None:
        truck_resolver = lambda _truck_id: None  # noqa: E731

    stats = FleetStats()
    for record in records:
        costs = cost_model.cost(record, truck_resolver(record.truck_id))
        stats.trip_count += 1
        stats.total_distance += record.distance
        stats.total_fuel += record.fuel_quantity
        stats.total_fuel_cost += costs.fuel_cost
        stats.total_cost += costs.total
        stats.total_revenue += record.revenue

    stats.calculate_ratios()
    return stats


class FleetStatsCalculator:
    """
    Binds a FleetSnapshot and a CostModel so display layers can ask for
    per-truck and per-driver stats by id.
    """

    def __init__(self, snapshot: FleetSnapshot, cost_model: CostModel = DEFAULT_COST_MODEL):
        self.snapshot = snapshot
        self.cost_model = cost_model

    def summarize(self, records: Iterable[TripRecord]) -> FleetStats:
        return summarize(records, self.cost_model, self.snapshot.truck)

    def truck_stats(self, truck_id: str) -> FleetStats:
        return self.summarize(self.snapshot.records_for_truck(truck_id))

    def driver_stats(self, driver_id: str) -> FleetStats:
        return self.summarize(self.snapshot.records_for_driver(driver_id))

    def fleet_stats(self) -> FleetStats:
        return self.summarize(self.snapshot.records)

    def all_truck_stats(self) -> Dict[str, FleetStats]:
        return {truck_id: self.truck_stats(truck_id) for truck_id in self.snapshot.trucks}

    def all_driver_stats(self) -> Dict[str, FleetStats]:
        return {driver_id: self.driver_stats(driver_id) for driver_id in self.snapshot.drivers}
