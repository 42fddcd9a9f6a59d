"""
Geography helpers.
File: src/utils/__init__.py

from utils import estimate_location, estimate_distance
"""

from .geography import (
    GeoPoint,
    coordinate_of,
    governorates,
    delegations,
    canonical_region,
    parse_destination,
    estimate_location,
)

from .distance_matrix import (
    RegionDistanceMatrix,
    RoundTrip,
    haversine_km,
    road_distance,
    estimate_distance,
    estimate_region_distance,
    estimate_round_trip,
    ROAD_FACTOR,
)

__all__ = [
    'GeoPoint',
    'coordinate_of',
    'governorates',
    'delegations',
    'canonical_region',
    'parse_destination',
    'estimate_location',
    'RegionDistanceMatrix',
    'RoundTrip',
    'haversine_km',
    'road_distance',
    'estimate_distance',
    'estimate_region_distance',
    'estimate_round_trip',
    'ROAD_FACTOR',
]
