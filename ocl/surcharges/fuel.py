"""
Fuel Surcharge (FUEL)

Percentage of base freight. Rate configured in data/reference/fuel.py.
"""

from shared.surcharges import Surcharge
from ocl.data.reference import fuel


class FUEL(Surcharge):
    """Fuel surcharge on base freight."""

    # Identity
    name = "FUEL"

    # Pricing
    list_rate = fuel.LIST_RATE
    discount = fuel.DISCOUNT
    is_percentage = True

    # Applied to base freight only
    base_column = "cost_base"
