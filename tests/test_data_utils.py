"""
Test suite for the canonical CSV loader
File: tests/test_data_utils.py
"""

import pandas as pd
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.append(str(Path(__file__).parent.parent / "src"))

import schema as S
from data_utils import (
    clean_columns,
    drivers_from_frame,
    load_fleet_snapshot,
    load_raw_data,
    records_from_frame,
    records_to_frame,
    trucks_from_frame,
)
from models import VehicleCategory


TRUCKS_CSV = """truck_id,plate,category,daily_fixed_charge,insurance_share,tax_share,personnel_charge
t3,5305 TU 236,PLATEAU,80,20,20,80
t1,8565 TU 257,benne,400,,20,n/a
"""

DRIVERS_CSV = """driver_id,name,truck_id
d1,Ali,t3
d2,Sami,
d3, Ali ,t1
"""

RECORDS_CSV = """record_id,date,truck_id,driver_id,destination,distance_km,fuel_litres,fuel_unit_price,maintenance_cost,revenue,remarks,origin_region,origin_sub_region,region,sub_region
R1,2025-03-01,t3,d1,"La Marsa, Tunis",200,50,2,10,500,,Gabès,Gabès Sud,Tunis,La Marsa
R2,2025-03-01,t1,d2,,0,0,,0,0,repos,,,,
R3,2025-03-02,t1,,Sfax,120,30,,,250,,,,Sfax,
"""


@pytest.fixture
def export_dir(tmp_path):
    (tmp_path / S.TRUCKS_FILE).write_text(TRUCKS_CSV, encoding="utf-8")
    (tmp_path / S.DRIVERS_FILE).write_text(DRIVERS_CSV, encoding="utf-8")
    (tmp_path / S.RECORDS_FILE).write_text(RECORDS_CSV, encoding="utf-8")
    return tmp_path


class TestLoadRawData:

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_raw_data(tmp_path / "nope.csv")

    def test_ids_kept_as_strings(self, export_dir):
        df = load_raw_data(export_dir / S.RECORDS_FILE)
        assert df[S.RECORD_ID].tolist() == ["R1", "R2", "R3"]
        assert all(isinstance(v, str) for v in df[S.TRUCK_ID])


class TestCleanColumns:

    def test_defaults_fill_missing_and_bad_cells(self):
        df = pd.DataFrame({S.FUEL_PRICE: [2.5, None, "abc"]})
        out = clean_columns(df, {S.FUEL_PRICE: 2.0, S.REVENUE: 0.0})

        assert out[S.FUEL_PRICE].tolist() == [2.5, 2.0, 2.0]
        assert out[S.REVENUE].tolist() == [0.0, 0.0, 0.0]

    def test_input_frame_untouched(self):
        df = pd.DataFrame({S.FUEL_PRICE: [None]})
        clean_columns(df, {S.FUEL_PRICE: 2.0})
        assert df[S.FUEL_PRICE].isna().all()


class TestFrameConversion:

    def test_trucks(self, export_dir):
        trucks = {t.id: t for t in trucks_from_frame(load_raw_data(export_dir / S.TRUCKS_FILE))}

        assert trucks["t3"].fixed_cost_bundle == pytest.approx(200)
        assert trucks["t1"].category == VehicleCategory.BENNE
        # empty / unreadable cells fall back to ingestion defaults
        assert trucks["t1"].insurance_share == S.DEFAULT_INSURANCE
        assert trucks["t1"].personnel_charge == S.DEFAULT_PERSONNEL

    def test_tanker_category(self):
        df = pd.DataFrame([{S.TRUCK_ID: "t4", S.PLATE: "1 TU 1", S.CATEGORY: "citerne "}])
        assert trucks_from_frame(df)[0].category == VehicleCategory.CITERNE

    def test_unlisted_category_falls_back_to_plateau(self):
        df = pd.DataFrame([
            {S.TRUCK_ID: "t5", S.PLATE: "2 TU 2", S.CATEGORY: "FRIGO"},
            {S.TRUCK_ID: "t6", S.PLATE: "3 TU 3", S.CATEGORY: None},
        ])
        trucks = trucks_from_frame(df)

        assert [t.category for t in trucks] == [VehicleCategory.PLATEAU, VehicleCategory.PLATEAU]

    def test_nameless_drivers_dropped(self):
        df = pd.DataFrame([
            {S.DRIVER_ID: "d1", S.DRIVER_NAME: "Ali", S.TRUCK_ID: "t3"},
            {S.DRIVER_ID: "d2", S.DRIVER_NAME: None, S.TRUCK_ID: None},
            {S.DRIVER_ID: "d3", S.DRIVER_NAME: "   ", S.TRUCK_ID: None},
            {S.DRIVER_ID: "d4", S.DRIVER_NAME: float("nan"), S.TRUCK_ID: None},
        ])
        drivers = drivers_from_frame(df)

        assert [d.id for d in drivers] == ["d1"]
        assert all(d.name != "nan" for d in drivers)

    def test_duplicate_driver_names_collapse(self, export_dir):
        drivers = drivers_from_frame(load_raw_data(export_dir / S.DRIVERS_FILE))

        assert [d.id for d in drivers] == ["d1", "d2"]
        assert drivers[0].truck_id == "t3"
        assert drivers[1].truck_id is None

    def test_non_activity_rows_dropped(self, export_dir):
        records = records_from_frame(load_raw_data(export_dir / S.RECORDS_FILE))

        assert [r.id for r in records] == ["R1", "R3"]

    def test_record_fields(self, export_dir):
        r1, r3 = records_from_frame(load_raw_data(export_dir / S.RECORDS_FILE))

        assert r1.date == "2025-03-01"
        assert r1.destination == "La Marsa, Tunis"
        assert r1.trajectory() == ("Gabès", "Gabès Sud", "Tunis", "La Marsa")
        assert r3.driver_id is None
        assert r3.fuel_unit_price == S.DEFAULT_FUEL_PRICE
        assert r3.maintenance_cost == 0
        assert r3.trajectory() == (None, None, "Sfax", None)

    def test_records_to_frame(self, export_dir):
        records = records_from_frame(load_raw_data(export_dir / S.RECORDS_FILE))
        df = records_to_frame(records)

        assert df[S.RECORD_ID].tolist() == ["R1", "R3"]
        assert df[S.DISTANCE].tolist() == [200, 120]
        assert S.DEST_SUB in df.columns


class TestLoadFleetSnapshot:

    def test_snapshot(self, export_dir, capsys):
        snapshot = load_fleet_snapshot(export_dir)

        assert set(snapshot.trucks) == {"t3", "t1"}
        assert len(snapshot.drivers) == 2
        assert len(snapshot.records) == 2
        assert "Loaded 2 trucks" in capsys.readouterr().out

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_fleet_snapshot(tmp_path / "missing")
