from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import numpy as np

from .geography import GeoPoint, coordinate_of, estimate_location, governorates

EARTH_RADIUS_KM = 6371.0
ROAD_FACTOR = 1.35              # great-circle ➜ approximate driving distance

SAME_PLACE_KM = 10              # same governorate, same delegation
MIN_INTRA_REGION_KM = 15        # floor between two delegations of one governorate
SAME_REGION_KM = 20             # governorate-level shortcut, no delegation detail
UNESTIMATED_KM = 0              # unknown location; caller falls back to manual entry


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def haversine_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in kilometres."""
    lat1, lat2 = math.radians(a.lat), math.radians(b.lat)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.lon - a.lon)
    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


def road_distance(a: GeoPoint, b: GeoPoint) -> int:
    """Great-circle distance times ROAD_FACTOR, rounded to whole km."""
    return round_half_up(haversine_km(a, b) * ROAD_FACTOR)


def estimate_distance(region_a: Optional[str], sub_a: Optional[str],
                      region_b: Optional[str], sub_b: Optional[str]) -> int:
    """
    One-way road distance estimate between two (governorate, delegation) places.

    Returns 0 when either governorate is unknown.  Never raises.
    """
    point_a = estimate_location(region_a, sub_a)
    point_b = estimate_location(region_b, sub_b)
    if point_a is None or point_b is None:
        return UNESTIMATED_KM

    if region_a == region_b:
        if (sub_a or None) == (sub_b or None):
            return SAME_PLACE_KM
        return max(MIN_INTRA_REGION_KM, road_distance(point_a, point_b))

    return road_distance(point_a, point_b)


def estimate_region_distance(region_a: Optional[str], region_b: Optional[str]) -> int:
    """Governorate-to-governorate estimate, used when delegations are not requested."""
    point_a = coordinate_of(region_a)
    point_b = coordinate_of(region_b)
    if point_a is None or point_b is None:
        return UNESTIMATED_KM
    if region_a == region_b:
        return SAME_REGION_KM
    return road_distance(point_a, point_b)


@dataclass(frozen=True)
class RoundTrip:
    outbound_km: int
    return_km: int

    @property
    def total_km(self) -> int:
        return self.outbound_km + self.return_km


def estimate_round_trip(origin_region: Optional[str], origin_sub: Optional[str],
                        dest_region: Optional[str], dest_sub: Optional[str]) -> RoundTrip:
    """Out-and-back estimate; the return leg mirrors the outbound one."""
    outbound = estimate_distance(origin_region, origin_sub, dest_region, dest_sub)
    return RoundTrip(outbound_km=outbound, return_km=outbound)


class RegionDistanceMatrix:
    """Lazily built governorate-to-governorate road-distance matrix.

    Row/column order follows ``ids`` (sorted governorate names by default).
    The matrix is computed on first access, or read from a NumPy ``.npz``
    archive holding two arrays:
    * **ids** – governorate names
    * **dist** – road kilometres between them
    """

    def __init__(self, path: str | Path | None = None, regions: Optional[List[str]] = None):
        self.path = Path(path) if path is not None else None
        self._ids: List[str] | None = list(regions) if regions is not None else None
        self._dist: np.ndarray | None = None
        self._index: dict | None = None

    @classmethod
    def load(cls, path: str | Path) -> 'RegionDistanceMatrix':
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Distance matrix not found: {path}")
        matrix = cls(path)
        matrix._ensure()
        return matrix

    # ------------------------------------------------------------------ internals
    def _ensure(self):
        if self._dist is not None:
            return
        if self.path is not None and self.path.exists():
            data = np.load(self.path)
            self._ids = [str(x) for x in data["ids"]]
            self._dist = data["dist"]
        else:
            if self._ids is None:
                self._ids = governorates()
            n = len(self._ids)
            dist = np.zeros((n, n), dtype=np.float32)
            for i in range(n):
                for j in range(i, n):
                    d = estimate_region_distance(self._ids[i], self._ids[j])
                    dist[i, j] = d
                    dist[j, i] = d
            self._dist = dist
        self._index = {name: i for i, name in enumerate(self._ids)}

    # ------------------------------------------------------------------ api
    @property
    def ids(self) -> List[str]:
        self._ensure()
        return list(self._ids)

    @property
    def matrix(self) -> np.ndarray:
        self._ensure()
        return self._dist

    def dist(self, region_a: str, region_b: str) -> float:  # km
        """Matrix lookup; 0 for names outside the matrix."""
        self._ensure()
        i = self._index.get(region_a)
        j = self._index.get(region_b)
        if i is None or j is None:
            return float(UNESTIMATED_KM)
        return float(self._dist[i, j])

    def save(self, path: str | Path | None = None) -> Path:
        self._ensure()
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("No output path given for distance matrix")
        target.parent.mkdir(parents=True, exist_ok=True)
        np.savez_compressed(target, ids=np.array(self._ids), dist=self._dist)
        return target
