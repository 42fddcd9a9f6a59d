#!/usr/bin/env python3
"""
Fleet Performance Report
========================

Loads a canonical export (trucks.csv, drivers.csv, records.csv) and prints:
1. Fleet-wide summary
2. Per-truck and per-driver result / cost per km / performance
3. Monthly per-truck table (latest month unless --month is given)

Usage (from repo root):
    python3 scripts/fleet_report.py data/export [--month 2025-03] [--charts out/]
"""

import sys
import argparse
from pathlib import Path

import pandas as pd


def setup_path():
    """Add src to Python path."""
    src_path = Path(__file__).parent.parent / "src"
    if src_path.exists():
        sys.path.insert(0, str(src_path))
        return True
    return False


def stats_table(stats_by_id, names) -> pd.DataFrame:
    rows = []
    for entity_id, stats in stats_by_id.items():
        if stats.trip_count == 0:
            continue
        rows.append({
            'name': names.get(entity_id, entity_id),
            'trips': stats.trip_count,
            'km': round(stats.total_distance),
            'L/100km': round(stats.consumption_rate, 1),
            'cost/km': round(stats.cost_per_km, 2),
            'result': round(stats.result, 2),
            'perf %': round(stats.performance_ratio, 1),
        })
    if not rows:
        return pd.DataFrame()
    return pd.DataFrame(rows).sort_values('result', ascending=False)


def main():
    parser = argparse.ArgumentParser(description='Print fleet performance report')
    parser.add_argument('export_dir', type=Path, help='Directory with trucks/drivers/records CSVs')
    parser.add_argument('--month', type=str, default=None, help='Month as YYYY-MM')
    parser.add_argument('--charts', type=Path, default=None, help='Write PNG charts to this directory')
    args = parser.parse_args()

    setup_path()
    from data_utils import load_fleet_snapshot
    from fleet_metrics import FleetStatsCalculator
    import reports

    print("🚛 FLEET PERFORMANCE REPORT")
    print("=" * 60)

    try:
        snapshot = load_fleet_snapshot(args.export_dir)
        calc = FleetStatsCalculator(snapshot)

        calc.fleet_stats().print_summary("FLEET")

        plates = {t.id: t.plate for t in snapshot.trucks.values()}
        names = {d.id: d.name for d in snapshot.drivers.values()}

        print("\n📊 TRUCKS")
        print(stats_table(calc.all_truck_stats(), plates).to_string(index=False))
        print("\n👤 DRIVERS")
        print(stats_table(calc.all_driver_stats(), names).to_string(index=False))

        month = args.month or (snapshot.months()[0] if snapshot.months() else None)
        if month is None:
            print("\n⚠ No records, no monthly report")
            return 0

        year, mon = (int(x) for x in month.split('-'))
        monthly = reports.monthly_truck_report(snapshot, year, mon)
        totals = reports.monthly_totals(monthly)
        print(f"\n📅 MONTHLY REPORT {month}")
        print(monthly.drop(columns=['truck_id']).to_string(index=False))
        print(f"  TOTAL: {totals['distance']:,.0f} km, {totals['cost']:,.2f} TND cost, "
              f"{totals['revenue']:,.2f} TND revenue, result {totals['result']:,.2f} TND")

        if args.charts:
            import fleet_viz
            args.charts.mkdir(parents=True, exist_ok=True)
            month_records = snapshot.records_in_month(year, mon)
            fig = fleet_viz.plot_cost_breakdown(reports.cost_breakdown(snapshot, month_records),
                                                title=f"Costs {month}")
            fig.savefig(args.charts / f"costs_{month}.png", dpi=150, bbox_inches='tight')
            fig = fleet_viz.plot_truck_performance(reports.truck_performance(snapshot, month_records),
                                                   title=f"Result per truck {month}")
            fig.savefig(args.charts / f"trucks_{month}.png", dpi=150, bbox_inches='tight')
            days = sorted({r.date for r in month_records})
            fig = fleet_viz.plot_daily_trend(snapshot, days)
            fig.savefig(args.charts / f"trend_{month}.png", dpi=150, bbox_inches='tight')
            print(f"✅ Charts saved in {args.charts}")

        return 0

    except Exception as e:
        print(f"❌ Error: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
