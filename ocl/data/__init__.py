"""
OCL Data

Reference data and loaders for the rate table and pricing configuration.

Structure:
    - reference/: Static reference data (rates.json, weight rules, fuel, tax)
    - models.py:  Typed rate table
"""

import json
from functools import lru_cache
from pathlib import Path

import polars as pl

from shared.config import get_settings

from .models import RateCard, RateTable, ServiceType
from .reference import REFERENCE_DIR, RATES_FILE
from .reference.billable_weight import (
    DIM_FACTOR,
    UNIT_MULTIPLIERS,
    OTHER_UNIT_MULTIPLIER,
    DEFAULT_UNIT,
    WEIGHT_DECIMALS,
)
from .reference.tax import (
    GST_RATE,
    CGST_RATE,
    SGST_RATE,
    IGST_RATE,
    AWB_CHARGE,
    DEFAULT_BILLER_STATE,
    BILLER_GSTIN,
    QUOTE_VALIDITY_DAYS,
)


DEFAULT_ZONE = "national"
DEFAULT_SERVICE_TYPE = "standard"


def load_rates(path: Path | str | None = None) -> RateTable:
    """
    Load and validate a rate table.

    Args:
        path: JSON file in the rates.json layout. Defaults to OCL_RATES_PATH
              when set, else the packaged table.

    Returns:
        RateTable with zones, service types and rate cards

    Raises:
        ValueError: If the file does not describe a valid rate table
    """
    if path is None:
        path = get_settings().rates_path
    if path is None:
        return _load_default_rates()
    return _read_rates(Path(path))


@lru_cache(maxsize=1)
def _load_default_rates() -> RateTable:
    return _read_rates(RATES_FILE)


def _read_rates(path: Path) -> RateTable:
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    return RateTable.model_validate(raw)


def rates_frame(table: RateTable | None = None) -> pl.DataFrame:
    """
    Rate table in long format, ready for joining.

    One row per (service_type, zone, slab). A final open-ended row per
    zone/service carries the additional per-kg rate above the last slab.

    Returns:
        DataFrame with columns:
            - service_type, zone
            - weight_lower: Lower bound of weight bracket (exclusive)
            - weight_upper: Upper bound of weight bracket (inclusive, inf for overflow)
            - rate: Slab amount (last slab amount for the overflow row)
            - additional_per_kg: Per started kg above weight_lower (0 except overflow)
            - delivery_days
    """
    if table is None:
        table = load_rates()
    rows = []
    for service_type, cards in table.rates.items():
        delivery_days = table.service_types[service_type].delivery_days
        for zone, card in cards.items():
            lower = 0.0
            for upper, amount in card.slabs:
                rows.append((service_type, zone, lower, float(upper), float(amount), 0.0, delivery_days))
                lower = float(upper)
            rows.append((
                service_type, zone, lower, float("inf"),
                float(card.slabs[-1][1]), float(card.additional_per_kg), delivery_days,
            ))

    return pl.DataFrame(
        rows,
        schema={
            "service_type": pl.Utf8,
            "zone": pl.Utf8,
            "weight_lower": pl.Float64,
            "weight_upper": pl.Float64,
            "rate": pl.Float64,
            "additional_per_kg": pl.Float64,
            "delivery_days": pl.Utf8,
        },
        orient="row",
    )


__all__ = [
    # Loaders
    "load_rates",
    "rates_frame",
    "REFERENCE_DIR",
    "RATES_FILE",
    # Models
    "RateTable",
    "RateCard",
    "ServiceType",
    # Defaults
    "DEFAULT_ZONE",
    "DEFAULT_SERVICE_TYPE",
    # Billable weight config
    "DIM_FACTOR",
    "UNIT_MULTIPLIERS",
    "OTHER_UNIT_MULTIPLIER",
    "DEFAULT_UNIT",
    "WEIGHT_DECIMALS",
    # Tax and invoice config
    "GST_RATE",
    "CGST_RATE",
    "SGST_RATE",
    "IGST_RATE",
    "AWB_CHARGE",
    "DEFAULT_BILLER_STATE",
    "BILLER_GSTIN",
    "QUOTE_VALIDITY_DAYS",
]
