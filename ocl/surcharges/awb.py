"""
Air Waybill Charge (AWB)

Flat document charge per consignment on consolidated invoices.
"""

from shared.surcharges import Surcharge
from ocl.data.reference import tax


class AWB(Surcharge):
    """Flat per-consignment AWB charge."""

    name = "AWB"
    list_rate = tax.AWB_CHARGE
    is_percentage = False
