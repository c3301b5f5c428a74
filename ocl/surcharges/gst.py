"""
Goods and Services Tax (GST, CGST, SGST, IGST)

GST is charged on the subtotal (base freight + fuel). Quotes show a single
18% line; invoices split it by place of supply.
"""

from shared.surcharges import Surcharge
from ocl.data.reference import tax


class GST(Surcharge):
    """Combined 18% GST on the subtotal."""

    name = "GST"
    list_rate = tax.GST_RATE
    base_column = "cost_subtotal"


class CGST(Surcharge):
    """Central GST, intra-state supply."""

    name = "CGST"
    list_rate = tax.CGST_RATE
    base_column = "cost_subtotal"


class SGST(Surcharge):
    """State GST, intra-state supply."""

    name = "SGST"
    list_rate = tax.SGST_RATE
    base_column = "cost_subtotal"


class IGST(Surcharge):
    """Integrated GST, inter-state supply."""

    name = "IGST"
    list_rate = tax.IGST_RATE
    base_column = "cost_subtotal"


def gst_components(biller_state: str, customer_state: str) -> list[type[Surcharge]]:
    """
    GST components for a place of supply.

    Same state (case-insensitive) splits into CGST + SGST; anything else,
    including an unknown customer state, is charged IGST.
    """
    if biller_state.strip().lower() == (customer_state or "").strip().lower():
        return [CGST, SGST]
    return [IGST]
