"""
Smoke tests for the dashboard charts
File: tests/test_fleet_viz.py
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.append(str(Path(__file__).parent.parent / "src"))

import fleet_viz
from models import FleetSnapshot, TripRecord, Truck


class TestFleetCharts:

    def setup_method(self):
        truck = Truck(id="t3", plate="5305 TU 236", daily_fixed_charge=80,
                      insurance_share=20, tax_share=20, personnel_charge=80)
        records = [
            TripRecord(id="R1", date="2025-03-01", truck_id="t3", distance=200,
                       fuel_quantity=50, fuel_unit_price=2, maintenance_cost=10, revenue=500),
            TripRecord(id="R2", date="2025-03-02", truck_id="t3", distance=80,
                       fuel_quantity=20, fuel_unit_price=2, revenue=100),
        ]
        self.snapshot = FleetSnapshot.from_entities([truck], [], records)

    def teardown_method(self):
        plt.close('all')

    def test_cost_breakdown_pie(self):
        breakdown = pd.Series({'fuel': 100.0, 'fixed_charge': 80.0, 'insurance': 20.0,
                               'tax': 20.0, 'maintenance': 0.0, 'personnel': 80.0})
        fig = fleet_viz.plot_cost_breakdown(breakdown, title="Mars 2025")

        ax = fig.axes[0]
        assert ax.get_title() == "Mars 2025"
        labels = [t.get_text() for t in ax.texts]
        assert "Gasoil" in labels
        assert "Maintenance" not in labels      # zero slices are left out

    def test_cost_breakdown_empty(self):
        fig = fleet_viz.plot_cost_breakdown(pd.Series({'fuel': 0.0}))
        assert "No costs" in [t.get_text() for t in fig.axes[0].texts]

    def test_truck_performance_colors(self):
        results = pd.Series({"8565 TU 257": 288.0, "5305 TU 236": -40.0})
        fig = fleet_viz.plot_truck_performance(results)

        bars = fig.axes[0].patches
        assert len(bars) == 2
        assert matplotlib.colors.to_hex(bars[0].get_facecolor()) == fleet_viz.PROFIT_COLOR
        assert matplotlib.colors.to_hex(bars[1].get_facecolor()) == fleet_viz.LOSS_COLOR

    def test_daily_trend(self):
        fig = fleet_viz.plot_daily_trend(self.snapshot, ["2025-03-01", "2025-03-02"])

        ax_money, ax_km = fig.axes
        assert ax_money.get_title() == "Daily Trend (2025-03-01 → 2025-03-02)"
        revenue_line = ax_money.get_lines()[0]
        assert list(revenue_line.get_ydata()) == pytest.approx([500, 100])
        assert len(ax_km.patches) == 2

    def test_daily_trend_custom_title(self):
        fig = fleet_viz.plot_daily_trend(self.snapshot, ["2025-03-01"], title="Semaine 9")
        assert fig.axes[0].get_title() == "Semaine 9"
