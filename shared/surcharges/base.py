"""
Surcharge Base Class

Shared base class for all surcharges applied on top of base freight.
"""

from abc import ABC
import polars as pl


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def round_money(expr: pl.Expr) -> pl.Expr:
    """Round a money expression to paise (2 decimals)."""
    return expr.round(2)


# =============================================================================
# BASE CLASS
# =============================================================================

class Surcharge(ABC):
    """
    Base class for all surcharges.

    Attributes:
        IDENTITY
            name            - Short code (e.g., "FUEL", "GST")

        PRICING
            list_rate       - Published rate; a fraction of the base when
                              is_percentage, otherwise a flat rupee amount
            discount        - Decimal discount (0.25 = 25% off)
            is_percentage   - True if charged as a share of base_column

        APPLICATION
            base_column     - Column the percentage is applied to
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str

    # -------------------------------------------------------------------------
    # PRICING
    # -------------------------------------------------------------------------
    list_rate: float
    discount: float = 0.0
    is_percentage: bool = True

    # -------------------------------------------------------------------------
    # APPLICATION
    # -------------------------------------------------------------------------
    base_column: str = "cost_base"

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def rate(cls) -> float:
        """Rate after discount."""
        return cls.list_rate * (1 - cls.discount)

    @classmethod
    def amount(cls, base: float) -> float:
        """Surcharge for a single shipment, rounded to 2 decimals."""
        if cls.is_percentage:
            return round(base * cls.rate(), 2)
        return round(cls.rate(), 2)

    @classmethod
    def expression(cls) -> pl.Expr:
        """Polars expression computing the surcharge for each row."""
        if cls.is_percentage:
            return round_money(pl.col(cls.base_column) * pl.lit(cls.rate()))
        return pl.lit(round(cls.rate(), 2))
