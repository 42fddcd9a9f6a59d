#!/usr/bin/env python3
"""
Governorate Distance Matrix Generation
======================================

Builds the governorate-to-governorate road-distance estimate matrix
(great-circle × 1.35 road factor) and writes:
- data/region_dist_matrix.npz  (ids + dist arrays)
- region_matrix_report.md      (longest / shortest links)

Usage (from repo root):
    python3 scripts/generate_distance_matrix.py [--output PATH] [--top N]
"""

import sys
import argparse
from pathlib import Path

import numpy as np


def setup_path():
    """Add src to Python path."""
    src_path = Path(__file__).parent.parent / "src"
    if src_path.exists():
        sys.path.insert(0, str(src_path))
        return True
    return False


def create_analysis_report(matrix, top_n: int = 10) -> str:
    """Create markdown summary of the matrix."""
    ids = matrix.ids
    dist = matrix.matrix
    n = len(ids)

    pairs = [(ids[i], ids[j], float(dist[i, j])) for i in range(n) for j in range(i + 1, n)]
    pairs.sort(key=lambda p: p[2])
    off_diagonal = dist[~np.eye(n, dtype=bool)]

    markdown = f"""
# Governorate Distance Matrix

| Metric | Value |
|--------|-------|
| Governorates | {n} |
| Pairs | {len(pairs)} |
| Average distance | {off_diagonal.mean():.1f} km |
| Max distance | {off_diagonal.max():.0f} km |

## Shortest {top_n} links

| From | To | Road km |
|------|----|---------|
"""
    for a, b, d in pairs[:top_n]:
        markdown += f"| {a} | {b} | {d:.0f} |\n"

    markdown += f"\n## Longest {top_n} links\n\n| From | To | Road km |\n|------|----|---------|\n"
    for a, b, d in reversed(pairs[-top_n:]):
        markdown += f"| {a} | {b} | {d:.0f} |\n"

    return markdown


def main():
    """Generate governorate distance matrix."""
    parser = argparse.ArgumentParser(description='Generate governorate road-distance matrix')
    parser.add_argument('--output', type=Path, default=None,
                        help='Output .npz path (default: <project-root>/data/region_dist_matrix.npz)')
    parser.add_argument('--top', type=int, default=10,
                        help='Number of pairs listed in the report (default: 10)')
    args = parser.parse_args()

    setup_path()
    from utils.distance_matrix import RegionDistanceMatrix, ROAD_FACTOR

    print("🗺️ GOVERNORATE DISTANCE MATRIX GENERATION")
    print("=" * 60)
    print(f"Strategy: Haversine × {ROAD_FACTOR} road factor")
    print("=" * 60)

    project_root = Path(__file__).parent.parent
    output = args.output or project_root / "data" / "region_dist_matrix.npz"

    try:
        matrix = RegionDistanceMatrix()
        print(f"✅ Built {len(matrix.ids)}×{len(matrix.ids)} matrix")

        dist_path = matrix.save(output)
        print(f"✅ Saved distance matrix: {dist_path}")

        report_path = project_root / "region_matrix_report.md"
        with open(report_path, 'w', encoding='utf-8') as f:
            f.write(create_analysis_report(matrix, args.top))
        print(f"✅ Analysis report saved: {report_path}")

        return 0

    except Exception as e:
        print(f"❌ Error: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
