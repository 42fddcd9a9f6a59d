"""
Dashboard and reporting tables built from a FleetSnapshot.
File: src/reports.py

Every function is pure: it reads the snapshot, prices records through the
CostModel and returns a tidy DataFrame or a plain dict.  Nothing is cached;
call again after the record set changes.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import pandas as pd

from fleet_metrics import summarize
from models import CostModel, DEFAULT_COST_MODEL, FleetSnapshot, TripRecord
from utils.distance_matrix import round_half_up

EFFICIENT_COST_PER_KM = 2.0     # TND/km; below this a day is flagged efficient
UNKNOWN_DRIVER = "Inconnu"

DAILY_COLUMNS = ['record_id', 'plate', 'driver', 'destination', 'distance',
                 'fuel', 'cost', 'revenue', 'result']
MONTHLY_COLUMNS = ['truck_id', 'plate', 'distance', 'fuel', 'fuel_cost',
                   'cost', 'revenue', 'result']
COST_CATEGORIES = ['fuel', 'fixed_charge', 'insurance', 'tax', 'maintenance', 'personnel']


# ------------------------------------------------------------------ daily dashboard
def daily_summary(snapshot: FleetSnapshot, date: str,
                  cost_model: CostModel = DEFAULT_COST_MODEL) -> pd.DataFrame:
    """One row per record of the day, with cost and result."""
    rows = []
    for record in snapshot.records_on(date):
        truck = snapshot.truck(record.truck_id)
        driver = snapshot.driver(record.driver_id)
        cost = cost_model.cost(record, truck).total
        rows.append(dict(
            record_id=record.id,
            plate=truck.plate if truck else '-',
            driver=driver.name if driver else '-',
            destination=record.destination or '-',
            distance=record.distance,
            fuel=record.fuel_quantity,
            cost=cost,
            revenue=record.revenue,
            result=record.revenue - cost,
        ))
    return pd.DataFrame(rows, columns=DAILY_COLUMNS)


def daily_kpis(snapshot: FleetSnapshot, date: str,
               cost_model: CostModel = DEFAULT_COST_MODEL) -> Dict[str, float]:
    """
    KPI cards for one day.

    ``trips`` counts only records that moved (distance > 0), unlike
    FleetStats.trip_count which counts every record.
    """
    records = snapshot.records_on(date)
    stats = summarize(records, cost_model, snapshot.truck)
    return {
        'date': date,
        'total_distance': stats.total_distance,
        'total_fuel': stats.total_fuel,
        'total_fuel_cost': stats.total_fuel_cost,
        'total_cost': stats.total_cost,
        'total_revenue': stats.total_revenue,
        'result': stats.result,
        'cost_per_km': stats.cost_per_km,
        'trips': sum(1 for r in records if r.distance > 0),
        'efficient': stats.cost_per_km < EFFICIENT_COST_PER_KM,
    }


def cost_breakdown(snapshot: FleetSnapshot, records: Iterable[TripRecord],
                   cost_model: CostModel = DEFAULT_COST_MODEL) -> pd.Series:
    """Total spend per cost category over the given records."""
    totals = dict.fromkeys(COST_CATEGORIES, 0.0)
    for record in records:
        c = cost_model.cost(record, snapshot.truck(record.truck_id))
        totals['fuel'] += c.fuel_cost
        totals['fixed_charge'] += c.daily_fixed_charge
        totals['insurance'] += c.insurance_share
        totals['tax'] += c.tax_share
        totals['maintenance'] += c.maintenance_cost
        totals['personnel'] += c.personnel_charge
    return pd.Series(totals, name='cost')


def truck_performance(snapshot: FleetSnapshot, records: Iterable[TripRecord],
                      cost_model: CostModel = DEFAULT_COST_MODEL) -> pd.Series:
    """Result per plate, best first.  Records of deleted trucks are skipped."""
    results: Dict[str, float] = {}
    for record in records:
        truck = snapshot.truck(record.truck_id)
        if truck is None:
            continue
        results[truck.plate] = results.get(truck.plate, 0.0) + cost_model.result(record, truck)
    series = pd.Series(results, name='result', dtype=float)
    return series.sort_values(ascending=False)


# ------------------------------------------------------------------ monthly report
def monthly_truck_report(snapshot: FleetSnapshot, year: int, month: int,
                         cost_model: CostModel = DEFAULT_COST_MODEL) -> pd.DataFrame:
    """
    One row per truck active in the month (distance or revenue > 0).
    Grand totals are available through ``monthly_totals``.
    """
    month_records = snapshot.records_in_month(year, month)
    rows = []
    for truck_id, truck in snapshot.trucks.items():
        records = [r for r in month_records if r.truck_id == truck_id]
        stats = summarize(records, cost_model, snapshot.truck)
        if stats.total_distance <= 0 and stats.total_revenue <= 0:
            continue
        rows.append(dict(
            truck_id=truck_id,
            plate=truck.plate,
            distance=stats.total_distance,
            fuel=stats.total_fuel,
            fuel_cost=stats.total_fuel_cost,
            cost=stats.total_cost,
            revenue=stats.total_revenue,
            result=stats.result,
        ))
    return pd.DataFrame(rows, columns=MONTHLY_COLUMNS)


def monthly_totals(report: pd.DataFrame) -> pd.Series:
    numeric = [c for c in MONTHLY_COLUMNS if c not in ('truck_id', 'plate')]
    if report.empty:
        return pd.Series(0.0, index=numeric)
    return report[numeric].sum()


# ------------------------------------------------------------------ route statistics
def _route_records(snapshot: FleetSnapshot, from_region, from_sub, to_region, to_sub) -> List[TripRecord]:
    key = (from_region, from_sub, to_region, to_sub)
    return [r for r in snapshot.records if r.trajectory() == key]


def driver_rank_for_route(snapshot: FleetSnapshot, driver_id: str,
                          from_region: str, from_sub: Optional[str],
                          to_region: str, to_sub: Optional[str],
                          cost_model: CostModel = DEFAULT_COST_MODEL) -> Optional[Dict[str, int]]:
    """
    Rank of the driver among all drivers of the route by average result.
    None when the route has no records or the driver never drove it.
    """
    records = _route_records(snapshot, from_region, from_sub, to_region, to_sub)
    per_driver: Dict[str, List[float]] = {}
    for r in records:
        truck = snapshot.truck(r.truck_id)
        if truck is None:
            continue
        per_driver.setdefault(r.driver_id, []).append(cost_model.result(r, truck))

    if driver_id not in per_driver:
        return None
    ranking = sorted(per_driver, key=lambda d: sum(per_driver[d]) / len(per_driver[d]), reverse=True)
    return {'rank': ranking.index(driver_id) + 1, 'total': len(ranking)}


def driver_trajectory_stats(snapshot: FleetSnapshot, driver_id: str,
                            from_region: str, from_sub: Optional[str],
                            to_region: str, to_sub: Optional[str],
                            cost_model: CostModel = DEFAULT_COST_MODEL) -> Dict:
    """Historical averages of one driver on one route."""
    records = [r for r in _route_records(snapshot, from_region, from_sub, to_region, to_sub)
               if r.driver_id == driver_id]
    if not records:
        return {
            'trip_count': 0, 'avg_distance': 0, 'avg_fuel': 0, 'avg_cost': 0,
            'avg_revenue': 0, 'avg_result': 0, 'best': None, 'worst': None,
            'last_trip': None, 'rank': None, 'driver_name': None,
        }

    driver = snapshot.driver(driver_id)
    stats = summarize(records, cost_model, snapshot.truck)
    n = stats.trip_count

    per_trip = sorted(
        (
            {
                'date': r.date,
                'result': cost_model.result(r, snapshot.truck(r.truck_id)),
                'distance': r.distance,
                'fuel': r.fuel_quantity,
            }
            for r in records
        ),
        key=lambda t: t['result'],
        reverse=True,
    )

    return {
        'trip_count': n,
        'avg_distance': round_half_up(stats.total_distance / n),
        'avg_fuel': round(stats.total_fuel / n, 1),
        'avg_cost': round(stats.total_cost / n, 2),
        'avg_revenue': round(stats.total_revenue / n, 2),
        'avg_result': round(stats.result / n, 2),
        'best': per_trip[0],
        'worst': per_trip[-1],
        'last_trip': max(r.date for r in records),
        'rank': driver_rank_for_route(snapshot, driver_id, from_region, from_sub,
                                      to_region, to_sub, cost_model),
        'driver_name': driver.name if driver else UNKNOWN_DRIVER,
    }


def truck_trajectory_stats(snapshot: FleetSnapshot, truck_id: str,
                           from_region: str, from_sub: Optional[str],
                           to_region: str, to_sub: Optional[str]) -> Dict:
    """Average distance and fuel of one truck on one route."""
    truck = snapshot.truck(truck_id)
    records = [r for r in _route_records(snapshot, from_region, from_sub, to_region, to_sub)
               if r.truck_id == truck_id]
    plate = truck.plate if truck else UNKNOWN_DRIVER
    if not records:
        return {'trip_count': 0, 'avg_distance': 0, 'avg_fuel': 0,
                'avg_consumption': 0, 'plate': plate}

    stats = summarize(records)
    n = stats.trip_count
    return {
        'trip_count': n,
        'avg_distance': round_half_up(stats.total_distance / n),
        'avg_fuel': round(stats.total_fuel / n, 1),
        'avg_consumption': round(stats.consumption_rate, 2),  # L/100km
        'plate': plate,
    }


def route_comparison(snapshot: FleetSnapshot,
                     from_region: str, from_sub: Optional[str],
                     to_region: str, to_sub: Optional[str],
                     cost_model: CostModel = DEFAULT_COST_MODEL) -> pd.DataFrame:
    """All drivers of a route side by side, best average result first."""
    columns = ['driver_id', 'driver', 'trip_count', 'avg_distance', 'avg_fuel',
               'avg_revenue', 'avg_cost', 'avg_result']
    records = _route_records(snapshot, from_region, from_sub, to_region, to_sub)

    by_driver: Dict[Optional[str], List[TripRecord]] = {}
    for r in records:
        by_driver.setdefault(r.driver_id, []).append(r)

    rows = []
    for driver_id, driver_records in by_driver.items():
        stats = summarize(driver_records, cost_model, snapshot.truck)
        n = stats.trip_count
        driver = snapshot.driver(driver_id)
        rows.append(dict(
            driver_id=driver_id,
            driver=driver.name if driver else UNKNOWN_DRIVER,
            trip_count=n,
            avg_distance=stats.total_distance / n,
            avg_fuel=stats.total_fuel / n,
            avg_revenue=stats.total_revenue / n,
            avg_cost=stats.total_cost / n,
            avg_result=stats.result / n,
        ))

    df = pd.DataFrame(rows, columns=columns)
    return df.sort_values('avg_result', ascending=False).reset_index(drop=True)
