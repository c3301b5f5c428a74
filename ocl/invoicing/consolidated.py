"""
Consolidated Invoice Arithmetic

Totals for a corporate customer's consolidated invoice, built from the
consignments returned by the settlement endpoint.

CHARGES
-------
    line amount      = AWB charge (50) + freight charges, per consignment
    total amount     = sum of line amounts
    fuel charge      = FUEL rate x total freight
    subtotal         = total amount + fuel charge
    GST              = CGST 9% + SGST 9% when biller and customer are in the
                       same state, IGST 18% otherwise
    grand total      = subtotal + GST
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Mapping

import polars as pl

from ocl.data import DEFAULT_BILLER_STATE
from ocl.surcharges import AWB, FUEL, gst_components


# =============================================================================
# TYPES
# =============================================================================

@dataclass(frozen=True)
class InvoiceItem:
    """One consignment on a consolidated invoice."""

    consignment_number: int
    booking_date: str
    service_type: str
    destination: str
    weight: float
    freight_charges: float
    awb_number: str | None = None

    @classmethod
    def from_api(cls, record: Mapping[str, Any]) -> "InvoiceItem":
        """Build from a settlement shipment record (camelCase keys)."""
        return cls(
            consignment_number=int(record.get("consignmentNumber") or 0),
            booking_date=str(record.get("bookingDate") or ""),
            service_type=str(record.get("serviceType") or ""),
            destination=str(record.get("destination") or ""),
            weight=float(record.get("weight") or 0),
            freight_charges=float(record.get("freightCharges") or 0),
            awb_number=record.get("awbNumber"),
        )


@dataclass(frozen=True)
class InvoiceTotals:
    total_bills: int
    total_freight: float
    total_awb: float
    total_amount: float
    fuel_charge: float
    subtotal: float
    cgst: float
    sgst: float
    igst: float
    grand_total: float

    @property
    def gst(self) -> float:
        return round(self.cgst + self.sgst + self.igst, 2)


@dataclass(frozen=True)
class InvoiceDocument:
    """Everything printed on a consolidated invoice."""

    invoice_number: str
    invoice_date: date
    invoice_period: str
    corporate_name: str
    corporate_address: str
    items: tuple[InvoiceItem, ...] = ()
    corporate_gst_number: str = ""
    corporate_state: str = ""
    corporate_contact: str = ""
    corporate_email: str = ""
    biller_state: str = DEFAULT_BILLER_STATE

    @property
    def totals(self) -> InvoiceTotals:
        return calculate_invoice_totals(self.items, self.biller_state, self.corporate_state)


# =============================================================================
# LINE ITEMS
# =============================================================================

def invoice_frame(items: Iterable[InvoiceItem]) -> pl.DataFrame:
    """
    Invoice lines as a DataFrame.

    Returns:
        DataFrame with one row per consignment and columns:
            consignment_number, booking_date, service_type, destination,
            awb_number, weight, freight_charges, cost_awb, line_amount
    """
    rows = [
        {
            "consignment_number": item.consignment_number,
            "booking_date": item.booking_date,
            "service_type": item.service_type,
            "destination": item.destination,
            "awb_number": item.awb_number,
            "weight": float(item.weight),
            "freight_charges": float(item.freight_charges),
        }
        for item in items
    ]
    df = pl.DataFrame(
        rows,
        schema={
            "consignment_number": pl.Int64,
            "booking_date": pl.Utf8,
            "service_type": pl.Utf8,
            "destination": pl.Utf8,
            "awb_number": pl.Utf8,
            "weight": pl.Float64,
            "freight_charges": pl.Float64,
        },
    )
    return df.with_columns(
        AWB.expression().cast(pl.Float64).alias("cost_awb"),
    ).with_columns(
        (pl.col("cost_awb") + pl.col("freight_charges")).alias("line_amount"),
    )


# =============================================================================
# TOTALS
# =============================================================================

def calculate_invoice_totals(
    items: Iterable[InvoiceItem],
    biller_state: str = DEFAULT_BILLER_STATE,
    customer_state: str = "",
) -> InvoiceTotals:
    """
    Totals for a consolidated invoice.

    Args:
        items: Consignments on the invoice
        biller_state: State OCL bills from
        customer_state: State of the corporate customer (place of supply);
            empty means inter-state

    Returns:
        InvoiceTotals; amounts rounded to 2 decimals
    """
    lines = invoice_frame(items)
    sums = lines.select(
        pl.len().alias("total_bills"),
        pl.col("freight_charges").sum().alias("total_freight"),
        pl.col("cost_awb").sum().alias("total_awb"),
        pl.col("line_amount").sum().alias("total_amount"),
    ).row(0, named=True)

    total_freight = round(sums["total_freight"] or 0.0, 2)
    total_amount = round(sums["total_amount"] or 0.0, 2)
    fuel_charge = FUEL.amount(total_freight)
    subtotal = round(total_amount + fuel_charge, 2)

    taxes = {"CGST": 0.0, "SGST": 0.0, "IGST": 0.0}
    for component in gst_components(biller_state, customer_state):
        taxes[component.name] = component.amount(subtotal)

    grand_total = round(subtotal + sum(taxes.values()), 2)

    return InvoiceTotals(
        total_bills=int(sums["total_bills"]),
        total_freight=total_freight,
        total_awb=round(sums["total_awb"] or 0.0, 2),
        total_amount=total_amount,
        fuel_charge=fuel_charge,
        subtotal=subtotal,
        cgst=taxes["CGST"],
        sgst=taxes["SGST"],
        igst=taxes["IGST"],
        grand_total=grand_total,
    )


# =============================================================================
# NUMBERING AND DATES
# =============================================================================

def financial_year(on: date) -> tuple[int, int]:
    """Indian financial year (April to March) containing `on`."""
    start = on.year if on.month >= 4 else on.year - 1
    return start, start + 1


def financial_year_invoice_number(on: date, serial: int) -> str:
    """Invoice number in the form YY-YY/NNNNN, e.g. 25-26/00042."""
    if serial < 0:
        raise ValueError(f"serial must not be negative, got {serial}")
    start, end = financial_year(on)
    return f"{start % 100:02d}-{end % 100:02d}/{serial:05d}"


def format_invoice_date(value: date | str | None) -> str:
    """dd/mm/yyyy, or "-" for missing or unparseable dates."""
    if not value:
        return "-"
    if isinstance(value, str):
        try:
            value = date.fromisoformat(value[:10])
        except ValueError:
            return "-"
    return value.strftime("%d/%m/%Y")


def invoice_period(on: date) -> str:
    """First to last day of the month containing `on`."""
    last_day = calendar.monthrange(on.year, on.month)[1]
    first = on.replace(day=1)
    last = on.replace(day=last_day)
    return f"{format_invoice_date(first)} - {format_invoice_date(last)}"


# =============================================================================
# AMOUNTS
# =============================================================================

_ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
]
_TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]


def _below_hundred(n: int) -> str:
    if n < 20:
        return _ONES[n]
    return f"{_TENS[n // 10]} {_ONES[n % 10]}".strip()


def _below_thousand(n: int) -> str:
    hundreds, rest = divmod(n, 100)
    parts = []
    if hundreds:
        parts.append(f"{_ONES[hundreds]} Hundred")
    if rest:
        parts.append(_below_hundred(rest))
    return " ".join(parts)


def amount_in_words(amount: float) -> str:
    """
    Rupee amount in words using the Indian system, rounded to whole rupees.

    1,23,45,678 -> "One Crore Twenty Three Lakh Forty Five Thousand Six
    Hundred Seventy Eight Rupees Only". Zero is "Zero".
    """
    rupees = int(round(amount))
    if rupees < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    if rupees == 0:
        return "Zero"
    return _indian_words(rupees) + " Rupees Only"


def _indian_words(n: int) -> str:
    crores, rest = divmod(n, 10_000_000)
    lakhs, rest = divmod(rest, 100_000)
    thousands, rest = divmod(rest, 1_000)

    parts = []
    if crores:
        # 100 crore and above: "One Hundred Crore"
        parts.append(f"{_indian_words(crores)} Crore")
    if lakhs:
        parts.append(f"{_below_hundred(lakhs)} Lakh")
    if thousands:
        parts.append(f"{_below_hundred(thousands)} Thousand")
    if rest:
        parts.append(_below_thousand(rest))
    return " ".join(parts)


def format_inr(amount: float) -> str:
    """Rupees with Indian digit grouping, rounded to whole rupees: 123456.7 -> "₹1,23,457.00"."""
    rupees = int(round(amount))
    sign = "-" if rupees < 0 else ""
    digits = str(abs(rupees))
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups + [tail])
    return f"{sign}₹{digits}.00"


__all__ = [
    "InvoiceItem",
    "InvoiceTotals",
    "InvoiceDocument",
    "invoice_frame",
    "calculate_invoice_totals",
    "financial_year",
    "financial_year_invoice_number",
    "format_invoice_date",
    "invoice_period",
    "amount_in_words",
    "format_inr",
]
