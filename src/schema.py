"""Central place for column‑name constants so tests, loaders and reports
   all stay in sync.

‼️  **Edit here once** if the canonical export schema changes.  All downstream
    code (including tests) should import from this module instead of
    hard‑coding strings.  """

# ────────────────────────────────────────────────────────────────────────────
# File names inside a canonical export directory
# ────────────────────────────────────────────────────────────────────────────

TRUCKS_FILE  = "trucks.csv"
DRIVERS_FILE = "drivers.csv"
RECORDS_FILE = "records.csv"

# ────────────────────────────────────────────────────────────────────────────
# trucks.csv
# ────────────────────────────────────────────────────────────────────────────

TRUCK_ID        = "truck_id"
PLATE           = "plate"               # registration, e.g. "8565 TU 257"
CATEGORY        = "category"            # PLATEAU | BENNE
FIXED_CHARGE    = "daily_fixed_charge"
INSURANCE       = "insurance_share"
TAX             = "tax_share"
PERSONNEL       = "personnel_charge"

# ────────────────────────────────────────────────────────────────────────────
# drivers.csv
# ────────────────────────────────────────────────────────────────────────────

DRIVER_ID   = "driver_id"
DRIVER_NAME = "name"
# drivers.csv also carries TRUCK_ID for the assigned truck (may be empty)

# ────────────────────────────────────────────────────────────────────────────
# records.csv (one row per truck‑day entry; also carries TRUCK_ID, DRIVER_ID)
# ────────────────────────────────────────────────────────────────────────────

RECORD_ID     = "record_id"
DATE          = "date"                # YYYY-MM-DD
DESTINATION   = "destination"         # "Delegation, Governorate"
DISTANCE      = "distance_km"
FUEL_QTY      = "fuel_litres"
FUEL_PRICE    = "fuel_unit_price"
MAINTENANCE   = "maintenance_cost"
REVENUE       = "revenue"
REMARKS       = "remarks"
ORIGIN_REGION = "origin_region"
ORIGIN_SUB    = "origin_sub_region"
DEST_REGION   = "region"
DEST_SUB      = "sub_region"

# ────────────────────────────────────────────────────────────────────────────
# Ingestion defaults for missing / non‑numeric cells.  Applied by the loader,
# never by the cost engine.
# ────────────────────────────────────────────────────────────────────────────

DEFAULT_FUEL_PRICE   = 2.0
DEFAULT_FIXED_CHARGE = 80.0
DEFAULT_INSURANCE    = 20.0
DEFAULT_TAX          = 20.0
DEFAULT_PERSONNEL    = 80.0
