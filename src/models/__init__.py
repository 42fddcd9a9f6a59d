"""
Models package initialization.
File: src/models/__init__.py

Imports all model classes for easy access:
from models import Truck, Driver, TripRecord, FleetSnapshot, CostModel
"""

# Import all classes from individual modules
from .fleet import (
    VehicleCategory,
    Truck,
    Driver,
    TripRecord,
    FleetSnapshot
)

from .cost_model import (
    CostBreakdown,
    CostModel,
    DEFAULT_COST_MODEL
)

# Make all classes available at package level
__all__ = [
    # Entities
    'VehicleCategory',
    'Truck',
    'Driver',
    'TripRecord',
    'FleetSnapshot',

    # Costing
    'CostBreakdown',
    'CostModel',
    'DEFAULT_COST_MODEL'
]
