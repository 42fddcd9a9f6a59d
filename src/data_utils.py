from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

import schema as S
from models import Driver, FleetSnapshot, TripRecord, Truck, VehicleCategory

TRUCK_DEFAULTS = {
    S.FIXED_CHARGE: S.DEFAULT_FIXED_CHARGE,
    S.INSURANCE: S.DEFAULT_INSURANCE,
    S.TAX: S.DEFAULT_TAX,
    S.PERSONNEL: S.DEFAULT_PERSONNEL,
}

RECORD_DEFAULTS = {
    S.DISTANCE: 0.0,
    S.FUEL_QTY: 0.0,
    S.FUEL_PRICE: S.DEFAULT_FUEL_PRICE,
    S.MAINTENANCE: 0.0,
    S.REVENUE: 0.0,
}

TEXT_COLUMNS = [S.DESTINATION, S.REMARKS, S.ORIGIN_REGION, S.ORIGIN_SUB, S.DEST_REGION, S.DEST_SUB]


def load_raw_data(path: str | Path) -> pd.DataFrame:
    """
    Load one canonical CSV into a DataFrame.
    Identifier columns are kept as strings.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Canonical export file not found: {path}")
    id_cols = {c: str for c in (S.TRUCK_ID, S.DRIVER_ID, S.RECORD_ID)}
    return pd.read_csv(path, dtype=id_cols, keep_default_na=True)


def clean_columns(df: pd.DataFrame, defaults: dict) -> pd.DataFrame:
    """
    Coerce numeric columns and substitute the ingestion defaults for
    missing or non-numeric cells.
    """
    df = df.copy()
    for col, default in defaults.items():
        if col not in df.columns:
            df[col] = default
        df[col] = pd.to_numeric(df[col], errors='coerce').fillna(default).astype(float)
    return df


def _text(value) -> Optional[str]:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    text = str(value).strip()
    return text or None


def trucks_from_frame(df: pd.DataFrame) -> List[Truck]:
    df = clean_columns(df, TRUCK_DEFAULTS)
    trucks = []
    for _, row in df.iterrows():
        trucks.append(Truck(
            id=str(row[S.TRUCK_ID]),
            plate=_text(row.get(S.PLATE)) or str(row[S.TRUCK_ID]),
            category=VehicleCategory.from_label(_text(row.get(S.CATEGORY))),
            daily_fixed_charge=row[S.FIXED_CHARGE],
            insurance_share=row[S.INSURANCE],
            tax_share=row[S.TAX],
            personnel_charge=row[S.PERSONNEL],
        ))
    return trucks


def drivers_from_frame(df: pd.DataFrame) -> List[Driver]:
    """Drivers keyed by name: a repeated name keeps its first row, nameless rows are dropped."""
    df = df.copy()
    df[S.DRIVER_NAME] = df[S.DRIVER_NAME].map(_text)
    df = df[df[S.DRIVER_NAME].notna()]
    df = df.drop_duplicates(subset=[S.DRIVER_NAME], keep='first')
    return [
        Driver(
            id=str(row[S.DRIVER_ID]),
            name=row[S.DRIVER_NAME],
            truck_id=_text(row.get(S.TRUCK_ID)),
        )
        for _, row in df.iterrows()
    ]


def records_from_frame(df: pd.DataFrame) -> List[TripRecord]:
    """Build trip records, dropping non-activity days (no km, no fuel, no revenue)."""
    df = clean_columns(df, RECORD_DEFAULTS)
    active = ~((df[S.DISTANCE] == 0) & (df[S.FUEL_QTY] == 0) & (df[S.REVENUE] == 0))
    df = df[active]

    records = []
    for _, row in df.iterrows():
        text = {col: _text(row.get(col)) for col in TEXT_COLUMNS}
        records.append(TripRecord(
            id=str(row[S.RECORD_ID]),
            date=str(pd.Timestamp(row[S.DATE]).strftime('%Y-%m-%d')),
            truck_id=str(row[S.TRUCK_ID]),
            driver_id=_text(row.get(S.DRIVER_ID)),
            destination=text[S.DESTINATION] or "",
            distance=row[S.DISTANCE],
            fuel_quantity=row[S.FUEL_QTY],
            fuel_unit_price=row[S.FUEL_PRICE],
            maintenance_cost=row[S.MAINTENANCE],
            revenue=row[S.REVENUE],
            remarks=text[S.REMARKS] or "",
            origin_region=text[S.ORIGIN_REGION],
            origin_sub_region=text[S.ORIGIN_SUB],
            region=text[S.DEST_REGION],
            sub_region=text[S.DEST_SUB],
        ))
    return records


def load_fleet_snapshot(directory: str | Path) -> FleetSnapshot:
    """
    Load trucks.csv, drivers.csv and records.csv from a canonical export
    directory into a FleetSnapshot.
    """
    directory = Path(directory)
    trucks = trucks_from_frame(load_raw_data(directory / S.TRUCKS_FILE))
    drivers = drivers_from_frame(load_raw_data(directory / S.DRIVERS_FILE))
    records = records_from_frame(load_raw_data(directory / S.RECORDS_FILE))
    print(f"Loaded {len(trucks)} trucks, {len(drivers)} drivers, {len(records)} records from {directory}")
    return FleetSnapshot.from_entities(trucks, drivers, records)


def records_to_frame(records: Iterable[TripRecord]) -> pd.DataFrame:
    """Inverse of records_from_frame, one row per record."""
    rows = [
        {
            S.RECORD_ID: r.id,
            S.DATE: r.date,
            S.TRUCK_ID: r.truck_id,
            S.DRIVER_ID: r.driver_id,
            S.DESTINATION: r.destination,
            S.DISTANCE: r.distance,
            S.FUEL_QTY: r.fuel_quantity,
            S.FUEL_PRICE: r.fuel_unit_price,
            S.MAINTENANCE: r.maintenance_cost,
            S.REVENUE: r.revenue,
            S.REMARKS: r.remarks,
            S.ORIGIN_REGION: r.origin_region,
            S.ORIGIN_SUB: r.origin_sub_region,
            S.DEST_REGION: r.region,
            S.DEST_SUB: r.sub_region,
        }
        for r in records
    ]
    columns = [S.RECORD_ID, S.DATE, S.TRUCK_ID, S.DRIVER_ID, S.DESTINATION, S.DISTANCE,
               S.FUEL_QTY, S.FUEL_PRICE, S.MAINTENANCE, S.REVENUE, S.REMARKS] + TEXT_COLUMNS[2:]
    return pd.DataFrame(rows, columns=columns)
