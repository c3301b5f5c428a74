"""
OCL Batch Shipping Cost Calculator

DataFrame in, DataFrame out. The input can come from any source (booking
export, CSV, manual creation) as long as it contains the required columns.
The output is the same DataFrame with calculation columns and costs appended.
Row for row, the results match ocl.rate_calculator.calculate_shipping_rate.

REQUIRED INPUT COLUMNS
----------------------
    zone                - Zone key from the rate table (e.g. "national")
    service_type        - Service key (standard, priority, express)
    length              - Parcel length
    breadth             - Parcel breadth
    height              - Parcel height
    actual_weight       - Actual weight in kg

OPTIONAL INPUT COLUMNS
----------------------
    unit                - Dimension unit (cm, mm, anything else = inches);
                          defaults to cm

OUTPUT COLUMNS ADDED
--------------------
    supplement_shipments() adds:
        - volumetric_weight, uses_volumetric_weight, chargeable_weight

    calculate() adds:
        - cost_base, cost_fuel, cost_subtotal, cost_gst, cost_total
        - delivery_days
        - calculator_version

USAGE
-----
    from ocl.calculate_costs import calculate_costs
    result = calculate_costs(df)
"""

import polars as pl

from .version import VERSION
from .data import (
    DIM_FACTOR,
    UNIT_MULTIPLIERS,
    OTHER_UNIT_MULTIPLIER,
    DEFAULT_UNIT,
    WEIGHT_DECIMALS,
    RateTable,
    rates_frame,
)
from .surcharges import FUEL, GST


REQUIRED_COLUMNS = [
    "zone",
    "service_type",
    "length",
    "breadth",
    "height",
    "actual_weight",
]


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(
    df: pl.DataFrame,
    rates: RateTable | None = None
) -> pl.DataFrame:
    """
    Calculate shipping costs for a shipment DataFrame.

    This is the main entry point. Takes raw shipment data and returns
    the same DataFrame with all calculation columns and costs appended.

    Args:
        df: Raw shipment DataFrame with required columns (see module docstring)
        rates: Rate table (load_rates() if not provided)

    Returns:
        DataFrame with supplemented weights and costs
    """
    df = supplement_shipments(df)
    df = calculate(df, rates)
    return df


# =============================================================================
# SUPPLEMENT SHIPMENTS
# =============================================================================

def supplement_shipments(df: pl.DataFrame) -> pl.DataFrame:
    """
    Supplement shipment data with weight calculations.

    Args:
        df: Raw shipment DataFrame

    Returns:
        DataFrame with added columns:
            - volumetric_weight, uses_volumetric_weight, chargeable_weight

    Raises:
        ValueError: If required columns are missing or any dimension is negative
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required column(s): {', '.join(missing)}")

    if "unit" not in df.columns:
        df = df.with_columns(pl.lit(DEFAULT_UNIT).alias("unit"))

    negative = df.filter(
        pl.any_horizontal(
            pl.col(c).cast(pl.Float64) < 0 for c in ("length", "breadth", "height")
        )
    ).height
    if negative > 0:
        raise ValueError(f"{negative} shipment(s) have negative dimensions")

    df = _add_volumetric_weight(df)
    df = _add_chargeable_weight(df)

    return df


def _unit_multiplier() -> pl.Expr:
    """Cubic unit to cubic centimetre factor; unknown units count as inches."""
    unit = pl.col("unit").fill_null(DEFAULT_UNIT).str.to_lowercase()
    expr = pl.lit(OTHER_UNIT_MULTIPLIER)
    for name, multiplier in UNIT_MULTIPLIERS.items():
        expr = pl.when(unit == name).then(pl.lit(multiplier)).otherwise(expr)
    return expr


def _add_volumetric_weight(df: pl.DataFrame) -> pl.DataFrame:
    """
    Volumetric weight = L x B x H x unit multiplier / DIM_FACTOR.

    Rounded to 2 decimals before comparing against actual weight.
    """
    return df.with_columns(
        (
            pl.col("length").cast(pl.Float64) *
            pl.col("breadth").cast(pl.Float64) *
            pl.col("height").cast(pl.Float64) *
            _unit_multiplier() / DIM_FACTOR
        )
        .round(WEIGHT_DECIMALS)
        .alias("volumetric_weight")
    )


def _add_chargeable_weight(df: pl.DataFrame) -> pl.DataFrame:
    """Chargeable weight is the greater of actual and volumetric weight."""
    return df.with_columns([
        (pl.col("volumetric_weight") > pl.col("actual_weight"))
        .alias("uses_volumetric_weight"),

        pl.max_horizontal(pl.col("actual_weight").cast(pl.Float64), "volumetric_weight")
        .round(WEIGHT_DECIMALS)
        .alias("chargeable_weight"),
    ])


# =============================================================================
# CALCULATE COSTS
# =============================================================================

def calculate(df: pl.DataFrame, rates: RateTable | None = None) -> pl.DataFrame:
    """
    Calculate shipping costs for supplemented shipments.

    Args:
        df: Supplemented shipment DataFrame from supplement_shipments
        rates: Rate table (load_rates() if not provided)

    Returns:
        DataFrame with costs and totals

    Processing order:
        1. Base rate        - slab lookup by zone, service and chargeable weight
        2. Fuel surcharge   - percentage of base rate
        3. Subtotal         - base + fuel
        4. GST              - 18% of subtotal
        5. Total            - subtotal + GST
    """
    df = _lookup_base_rate(df, rates)
    df = _apply_fuel(df)
    df = _calculate_subtotal(df)
    df = _apply_gst(df)
    df = _calculate_total(df)
    df = _stamp_version(df)
    return df


def _lookup_base_rate(df: pl.DataFrame, rates: RateTable | None) -> pl.DataFrame:
    """
    Look up base rate by zone, service and weight bracket.

    Brackets are (weight_lower, weight_upper]. The open-ended bracket above
    the last slab adds additional_per_kg per started kg.
    """
    input_count = len(df)
    table = rates_frame(rates)

    df = df.with_row_index("_row_id")

    df = (
        df
        .join(table, on=["zone", "service_type"], how="left")
        .filter(
            (pl.col("chargeable_weight") > pl.col("weight_lower")) &
            (pl.col("chargeable_weight") <= pl.col("weight_upper"))
        )
        .with_columns(
            (
                pl.col("rate") +
                (pl.col("chargeable_weight") - pl.col("weight_lower"))
                .round(WEIGHT_DECIMALS)
                .ceil() *
                pl.col("additional_per_kg")
            )
            .round(2)
            .alias("cost_base")
        )
    )

    output_count = len(df)
    if output_count < input_count:
        missing_count = input_count - output_count
        raise ValueError(
            f"{missing_count} shipment(s) have no matching rate bracket. "
            f"Check zone, service_type and chargeable_weight values "
            f"(weight must be greater than 0)."
        )

    df = df.drop(["weight_lower", "weight_upper", "rate", "additional_per_kg"])
    df = df.sort("_row_id").drop("_row_id")

    return df


def _apply_fuel(df: pl.DataFrame) -> pl.DataFrame:
    """Apply fuel surcharge as percentage of base rate.

    Rate configured in data/reference/fuel.py.
    """
    return df.with_columns(FUEL.expression().alias("cost_fuel"))


def _calculate_subtotal(df: pl.DataFrame) -> pl.DataFrame:
    """Calculate cost_subtotal as base rate plus fuel."""
    return df.with_columns(
        pl.sum_horizontal("cost_base", "cost_fuel").round(2).alias("cost_subtotal")
    )


def _apply_gst(df: pl.DataFrame) -> pl.DataFrame:
    """Apply 18% GST on the subtotal."""
    return df.with_columns(GST.expression().alias("cost_gst"))


def _calculate_total(df: pl.DataFrame) -> pl.DataFrame:
    """Calculate cost_total as subtotal plus GST."""
    return df.with_columns(
        pl.sum_horizontal("cost_subtotal", "cost_gst").round(2).alias("cost_total")
    )


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "calculate_costs",
    "supplement_shipments",
    "calculate",
    "REQUIRED_COLUMNS",
]
