"""
Governorate lookup and reproducible delegation coordinates.
File: src/utils/geography.py

Only governorates have a curated coordinate.  A delegation gets a
"fake GPS" point: the governorate seat displaced by 5-30 km in a direction
derived from the (governorate, delegation) name pair.  The hash and PRNG
below must stay bit-for-bit identical, otherwise every stored distance
suggestion changes:

  * seed   = FNV-1a 32-bit over UTF-8 of ``"<region>|<sub_region>"``
  * u1, u2 = one xorshift32 step (13, 17, 5) on ``seed`` and on
             ``seed ^ 0x9e3779b9``, divided by 2**32
  * angle  = u1 * 2π,  radius = 5 + u2 * 25 km
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .tunisia_locations import DELEGATIONS, GOVERNORATE_ALIASES, GOVERNORATE_COORDINATES

# hashing / PRNG constants ------------------------------------------------------
FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
GOLDEN_GAMMA = 0x9E3779B9
UINT32_MASK = 0xFFFFFFFF
UINT32_RANGE = 2 ** 32

# jitter geometry ---------------------------------------------------------------
KM_PER_DEGREE = 111.0
MIN_JITTER_KM = 5.0
MAX_JITTER_KM = 30.0
MIN_COS_LATITUDE = 0.2


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lon: float


# ------------------------------------------------------------------ GeoIndex
def coordinate_of(region: Optional[str]) -> Optional[GeoPoint]:
    """Curated coordinate of a governorate, or None when the name is unknown."""
    if not region:
        return None
    coords = GOVERNORATE_COORDINATES.get(region)
    if coords is None:
        return None
    return GeoPoint(*coords)


def governorates() -> List[str]:
    return sorted(GOVERNORATE_COORDINATES)


def delegations(region: Optional[str]) -> List[str]:
    return list(DELEGATIONS.get(region, ())) if region else []


def canonical_region(name: Optional[str]) -> Optional[str]:
    """Map a free-text governorate name onto the table's spelling."""
    if not name:
        return None
    name = name.strip()
    if name in GOVERNORATE_COORDINATES:
        return name
    return GOVERNORATE_ALIASES.get(name)


def parse_destination(text: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """
    Split a destination label into (region, sub_region).

    Labels are written ``"Delegation, Governorate"`` or just ``"Governorate"``.
    Returns (None, None) when no known governorate can be read from the text.
    """
    if not text or not text.strip():
        return None, None

    parts = [p.strip() for p in text.split(",") if p.strip()]
    if len(parts) >= 2:
        region = canonical_region(parts[-1])
        if region is not None:
            return region, ", ".join(parts[:-1])
        return None, None

    label = parts[0]
    region = canonical_region(label)
    if region is not None:
        return region, None
    # a bare delegation name: find the governorate that owns it
    for gov, subs in DELEGATIONS.items():
        if label in subs:
            return gov, label
    return None, None


# ------------------------------------------------------------------ deterministic jitter
def fnv1a_32(text: str) -> int:
    h = FNV_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * FNV_PRIME) & UINT32_MASK
    return h


def xorshift32(state: int) -> int:
    x = state & UINT32_MASK
    x ^= (x << 13) & UINT32_MASK
    x ^= x >> 17
    x ^= (x << 5) & UINT32_MASK
    return x


def seeded_uniforms(region: str, sub_region: str) -> Tuple[float, float]:
    """Two uniform values in [0, 1) fixed by the name pair."""
    seed = fnv1a_32(f"{region}|{sub_region}")
    u1 = xorshift32(seed) / UINT32_RANGE
    u2 = xorshift32(seed ^ GOLDEN_GAMMA) / UINT32_RANGE
    return u1, u2


def jitter_offset(region: str, sub_region: str) -> Tuple[float, float]:
    """Return (angle_rad, radius_km) of the delegation's displacement."""
    u1, u2 = seeded_uniforms(region, sub_region)
    angle = u1 * 2 * math.pi
    radius = MIN_JITTER_KM + u2 * (MAX_JITTER_KM - MIN_JITTER_KM)
    return angle, radius


def estimate_location(region: Optional[str], sub_region: Optional[str] = None) -> Optional[GeoPoint]:
    """
    Reproducible coordinate for a (governorate, delegation) pair.

    Unknown governorate -> None.  No delegation -> the governorate seat.
    Otherwise the seat displaced by ``jitter_offset``; the same pair always
    yields the same point.
    """
    base = coordinate_of(region)
    if base is None:
        return None
    if not sub_region:
        return base

    angle, radius = jitter_offset(region, sub_region)
    d_north_km = radius * math.cos(angle)
    d_east_km = radius * math.sin(angle)

    cos_lat = max(MIN_COS_LATITUDE, math.cos(math.radians(base.lat)))
    return GeoPoint(
        lat=base.lat + d_north_km / KM_PER_DEGREE,
        lon=base.lon + d_east_km / (KM_PER_DEGREE * cos_lat),
    )
