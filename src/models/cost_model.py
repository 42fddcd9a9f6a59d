"""
Operating cost of a single trip record.
File: src/models/cost_model.py
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .fleet import Truck, TripRecord


@dataclass(frozen=True)
class CostBreakdown:
    """Cost components of one trip record, all in the fleet's currency (TND)."""
    fuel_cost: float = 0.0
    daily_fixed_charge: float = 0.0
    insurance_share: float = 0.0
    tax_share: float = 0.0
    personnel_charge: float = 0.0
    maintenance_cost: float = 0.0

    @property
    def fixed_cost(self) -> float:
        return self.daily_fixed_charge + self.insurance_share + self.tax_share + self.personnel_charge

    @property
    def total(self) -> float:
        return self.fuel_cost + self.fixed_cost + self.maintenance_cost


class CostModel:
    """
    Prices a trip record against its truck's fixed-cost profile.

    The full fixed-cost bundle is charged to every record of the truck,
    including several records of the same truck on the same day; it is
    not prorated.  A record whose truck cannot be resolved (truck is None)
    gets no fixed cost.
    """

    def cost(self, record: TripRecord, truck: Optional[Truck]) -> CostBreakdown:
        fuel_cost = record.fuel_quantity * record.fuel_unit_price
        if truck is None:
            return CostBreakdown(fuel_cost=fuel_cost, maintenance_cost=record.maintenance_cost)

        return CostBreakdown(
            fuel_cost=fuel_cost,
            daily_fixed_charge=truck.daily_fixed_charge,
            insurance_share=truck.insurance_share,
            tax_share=truck.tax_share,
            personnel_charge=truck.personnel_charge,
            maintenance_cost=record.maintenance_cost,
        )

    def result(self, record: TripRecord, truck: Optional[Truck]) -> float:
        """Revenue minus total cost for one record."""
        return record.revenue - self.cost(record, truck).total


DEFAULT_COST_MODEL = CostModel()
