"""
OCL Surcharges

Charges applied on top of base freight.

    FUEL    - percentage of base freight (quotes and invoices)
    GST     - 18% of subtotal on quotes
    CGST, SGST / IGST - GST split by place of supply on invoices
    AWB     - flat per-consignment charge on invoices
"""

from .fuel import FUEL
from .gst import GST, CGST, SGST, IGST, gst_components
from .awb import AWB

__all__ = [
    "FUEL",
    "GST",
    "CGST",
    "SGST",
    "IGST",
    "AWB",
    "gst_components",
]
