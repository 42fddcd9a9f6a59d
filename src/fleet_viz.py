"""
Fleet Dashboard Charts
======================

Matplotlib figures for the dashboard:
- Cost split per category
- Result per truck (green profit, red loss)
- Daily distance / cost / revenue trend

Functions return the Figure; saving or showing it is up to the caller.
"""

from typing import Iterable, Optional

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from fleet_metrics import summarize
from models import CostModel, DEFAULT_COST_MODEL, FleetSnapshot

PROFIT_COLOR = '#10b981'
LOSS_COLOR = '#ef4444'

CATEGORY_LABELS = {
    'fuel': 'Gasoil',
    'fixed_charge': 'Charges fixes',
    'insurance': 'Assurance',
    'tax': 'Taxe',
    'maintenance': 'Maintenance',
    'personnel': 'Personnel',
}


def plot_cost_breakdown(breakdown: pd.Series, title: str = "Cost Breakdown"):
    """Pie chart of ``reports.cost_breakdown`` output."""
    fig, ax = plt.subplots(figsize=(8, 8))
    data = breakdown[breakdown > 0]
    if data.empty:
        ax.text(0.5, 0.5, "No costs", ha='center', va='center')
        ax.axis('off')
    else:
        labels = [CATEGORY_LABELS.get(k, k) for k in data.index]
        ax.pie(data.values, labels=labels, autopct='%1.1f%%',
               colors=sns.color_palette("husl", len(data)))
    ax.set_title(title)
    return fig


def plot_truck_performance(results: pd.Series, title: str = "Result per Truck"):
    """Horizontal bars of ``reports.truck_performance`` output."""
    fig, ax = plt.subplots(figsize=(10, max(3, 0.4 * len(results) + 1)))
    colors = [PROFIT_COLOR if v >= 0 else LOSS_COLOR for v in results.values]
    ax.barh(list(results.index), results.values, color=colors)
    ax.axvline(0, color='black', linewidth=0.8)
    ax.invert_yaxis()
    ax.set_xlabel("Result (TND)")
    ax.set_title(title)
    ax.grid(True, axis='x', alpha=0.3)
    fig.tight_layout()
    return fig


def plot_daily_trend(snapshot: FleetSnapshot, dates: Iterable[str],
                     cost_model: CostModel = DEFAULT_COST_MODEL,
                     title: Optional[str] = None):
    """Line chart of daily distance, cost and revenue over the given dates."""
    dates = list(dates)
    rows = []
    for date in dates:
        stats = summarize(snapshot.records_on(date), cost_model, snapshot.truck)
        rows.append({'date': date, 'distance': stats.total_distance,
                     'cost': stats.total_cost, 'revenue': stats.total_revenue})
    df = pd.DataFrame(rows, columns=['date', 'distance', 'cost', 'revenue'])

    fig, (ax_money, ax_km) = plt.subplots(2, 1, figsize=(12, 8), sharex=True)
    ax_money.plot(df['date'], df['revenue'], marker='o', color=PROFIT_COLOR, label='Revenue')
    ax_money.plot(df['date'], df['cost'], marker='o', color=LOSS_COLOR, label='Cost')
    ax_money.set_ylabel("TND")
    ax_money.legend()
    ax_money.grid(True, alpha=0.3)

    ax_km.bar(df['date'], df['distance'], alpha=0.7)
    ax_km.set_ylabel("km")
    ax_km.grid(True, alpha=0.3)
    plt.setp(ax_km.get_xticklabels(), rotation=45)

    if title is None:
        title = f"Daily Trend ({dates[0]} → {dates[-1]})" if dates else "Daily Trend"
    ax_money.set_title(title)
    fig.tight_layout()
    return fig
