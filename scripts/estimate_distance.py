#!/usr/bin/env python3
"""
Suggest a kilometre figure for a trip.

Usage (from repo root):
    python3 scripts/estimate_distance.py Gabès Tunis --origin-sub "Gabès Sud" --dest-sub "La Marsa"
    python3 scripts/estimate_distance.py Sfax Sousse --one-way
"""

import sys
import argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from utils import estimate_location, estimate_round_trip  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description='Estimate road distance between two places')
    parser.add_argument('origin_region')
    parser.add_argument('dest_region')
    parser.add_argument('--origin-sub', default='', help='Origin delegation')
    parser.add_argument('--dest-sub', default='', help='Destination delegation')
    parser.add_argument('--one-way', action='store_true',
                        help='Print only the outbound distance')
    args = parser.parse_args()

    origin = estimate_location(args.origin_region, args.origin_sub or None)
    dest = estimate_location(args.dest_region, args.dest_sub or None)
    if origin is None or dest is None:
        unknown = args.origin_region if origin is None else args.dest_region
        print(f"⚠ Unknown governorate: {unknown}; enter the distance manually")
        return 1

    trip = estimate_round_trip(args.origin_region, args.origin_sub or None,
                               args.dest_region, args.dest_sub or None)

    origin_name = args.origin_sub or args.origin_region
    dest_name = args.dest_sub or args.dest_region
    print(f"🚀 {origin_name} ({origin.lat:.4f}, {origin.lon:.4f}) → "
          f"📍 {dest_name} ({dest.lat:.4f}, {dest.lon:.4f})")
    print(f"  • Aller:  {trip.outbound_km} km")
    if not args.one_way:
        print(f"  • Retour: {trip.return_km} km")
        print(f"  • Total:  {trip.total_km} km")
    return 0


if __name__ == "__main__":
    sys.exit(main())
