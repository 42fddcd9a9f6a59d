"""
Canonical fleet entities: trucks, drivers and daily trip records.
File: src/models/fleet.py
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple


class VehicleCategory(Enum):
    """Body type of a truck."""
    PLATEAU = "PLATEAU"   # flatbed
    BENNE = "BENNE"       # tipper
    CITERNE = "CITERNE"   # tanker

    @classmethod
    def from_label(cls, label: Optional[str]) -> 'VehicleCategory':
        """Spreadsheet label to category; blank or unlisted labels give PLATEAU."""
        if not label:
            return cls.PLATEAU
        try:
            return cls(label.strip().upper())
        except ValueError:
            return cls.PLATEAU


@dataclass
class Truck:
    """A truck and its fixed-cost profile, charged on every trip record."""
    id: str
    plate: str                       # registration, natural key during ingestion
    category: VehicleCategory = VehicleCategory.PLATEAU
    daily_fixed_charge: float = 0.0
    insurance_share: float = 0.0
    tax_share: float = 0.0
    personnel_charge: float = 0.0

    @property
    def fixed_cost_bundle(self) -> float:
        return self.daily_fixed_charge + self.insurance_share + self.tax_share + self.personnel_charge


@dataclass
class Driver:
    id: str
    name: str
    truck_id: Optional[str] = None   # assigned truck, if any


@dataclass
class TripRecord:
    """One day's activity entry for one truck."""
    id: str
    date: str                        # YYYY-MM-DD
    truck_id: str
    driver_id: Optional[str] = None
    destination: str = ""
    distance: float = 0.0            # km
    fuel_quantity: float = 0.0       # litres
    fuel_unit_price: float = 0.0
    maintenance_cost: float = 0.0
    revenue: float = 0.0
    remarks: str = ""

    # structured trajectory, when the entry form captured it
    origin_region: Optional[str] = None
    origin_sub_region: Optional[str] = None
    region: Optional[str] = None
    sub_region: Optional[str] = None

    @property
    def is_activity(self) -> bool:
        """False for a non-activity day (no distance, no fuel, no revenue)."""
        return not (self.distance == 0 and self.fuel_quantity == 0 and self.revenue == 0)

    @property
    def month(self) -> str:
        return self.date[:7]

    def trajectory(self) -> Tuple[Optional[str], Optional[str], Optional[str], Optional[str]]:
        return (self.origin_region, self.origin_sub_region, self.region, self.sub_region)


@dataclass
class FleetSnapshot:
    """
    Read-only view of the current entity set handed over by the record store.

    Lookups return None for unknown ids; an orphaned record (its truck was
    deleted) is a normal situation, not an error.
    """
    trucks: Dict[str, Truck] = field(default_factory=dict)
    drivers: Dict[str, Driver] = field(default_factory=dict)
    records: List[TripRecord] = field(default_factory=list)

    @classmethod
    def from_entities(cls,
                      trucks: Iterable[Truck] = (),
                      drivers: Iterable[Driver] = (),
                      records: Iterable[TripRecord] = ()) -> 'FleetSnapshot':
        return cls(
            trucks={t.id: t for t in trucks},
            drivers={d.id: d for d in drivers},
            records=list(records),
        )

    # lookups ---------------------------------------------------------------
    def truck(self, truck_id: Optional[str]) -> Optional[Truck]:
        if truck_id is None:
            return None
        return self.trucks.get(truck_id)

    def driver(self, driver_id: Optional[str]) -> Optional[Driver]:
        if driver_id is None:
            return None
        return self.drivers.get(driver_id)

    def driver_for_truck(self, truck_id: str) -> Optional[Driver]:
        """First driver assigned to the truck, used to prefill new entries."""
        for driver in self.drivers.values():
            if driver.truck_id == truck_id:
                return driver
        return None

    # filters ---------------------------------------------------------------
    def records_for_truck(self, truck_id: str) -> List[TripRecord]:
        return [r for r in self.records if r.truck_id == truck_id]

    def records_for_driver(self, driver_id: str) -> List[TripRecord]:
        return [r for r in self.records if r.driver_id == driver_id]

    def records_on(self, date: str) -> List[TripRecord]:
        return [r for r in self.records if r.date == date]

    def records_in_month(self, year: int, month: int) -> List[TripRecord]:
        key = f"{year:04d}-{month:02d}"
        return [r for r in self.records if r.month == key]

    def months(self) -> List[str]:
        """Months with at least one record, newest first."""
        return sorted({r.month for r in self.records}, reverse=True)
