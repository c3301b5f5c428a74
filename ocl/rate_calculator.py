"""
OCL Rate Calculator

Single-shipment pricing. Given parcel dimensions and actual weight, work out
the volumetric and chargeable weight, look up the base amount in the rate
table for the zone and service, then add the fuel surcharge and 18% GST.

PRICING STEPS
-------------
    1. volumetric_weight = L x B x H (in cm) / 5000
    2. chargeable_weight = max(actual_weight, volumetric_weight)
    3. base_amount       = slab amount for (zone, service, chargeable_weight),
                           plus additional_per_kg per started kg above the
                           last slab
    4. fuel_surcharge    = FUEL rate x base_amount
    5. subtotal          = base_amount + fuel_surcharge
    6. gst               = 18% x subtotal
    7. total             = subtotal + gst

The batch equivalent for DataFrames is ocl.calculate_costs.

USAGE
-----
    from ocl.rate_calculator import quote_shipment
    quote = quote_shipment(length=30, breadth=20, height=10, actual_weight=2.5)
    quote.breakdown.total
    quote.with_service("express").breakdown.total
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from typing import Any

from .data import (
    DEFAULT_SERVICE_TYPE,
    DEFAULT_UNIT,
    DEFAULT_ZONE,
    DIM_FACTOR,
    OTHER_UNIT_MULTIPLIER,
    QUOTE_VALIDITY_DAYS,
    UNIT_MULTIPLIERS,
    WEIGHT_DECIMALS,
    RateTable,
    load_rates,
)
from .surcharges import FUEL, GST


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class RateBreakdown:
    """Price breakdown for one shipment, all amounts in rupees."""

    base_amount: float
    fuel_surcharge: float
    subtotal: float
    gst: float
    total: float
    zone: str
    service: str
    delivery_days: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "baseAmount": self.base_amount,
            "fuelSurcharge": self.fuel_surcharge,
            "subtotal": self.subtotal,
            "gst": self.gst,
            "total": self.total,
            "zone": self.zone,
            "service": self.service,
            "deliveryDays": self.delivery_days,
        }


# =============================================================================
# WEIGHTS
# =============================================================================

def _to_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field_name} must be a number, got {value!r}") from None
    if math.isnan(number) or math.isinf(number):
        raise ValueError(f"{field_name} must be a finite number, got {value!r}")
    return number


def unit_multiplier(unit: str | None) -> float:
    """Factor converting cubic `unit` to cubic centimetres, as the booking forms do."""
    return UNIT_MULTIPLIERS.get((unit or DEFAULT_UNIT).lower(), OTHER_UNIT_MULTIPLIER)


def calculate_volumetric_weight(
    length: Any,
    breadth: Any,
    height: Any,
    unit: str = DEFAULT_UNIT,
) -> float:
    """
    Volumetric weight in kg: L x B x H x unit multiplier / DIM_FACTOR.

    Missing dimensions (None or "") give 0, matching an incomplete form.

    Raises:
        ValueError: If a dimension is not numeric or is negative
    """
    dims = (length, breadth, height)
    if any(d is None or d == "" for d in dims):
        return 0.0

    l, b, h = (
        _to_number(d, name) for d, name in zip(dims, ("length", "breadth", "height"))
    )
    if min(l, b, h) < 0:
        raise ValueError("Dimensions must not be negative")

    return round(l * b * h * unit_multiplier(unit) / DIM_FACTOR, WEIGHT_DECIMALS)


def calculate_chargeable_weight(actual_weight: Any, volumetric_weight: Any) -> float:
    """Greater of actual and volumetric weight, in kg."""
    actual = _to_number(actual_weight, "actual_weight")
    volumetric = _to_number(volumetric_weight, "volumetric_weight")
    if actual < 0 or volumetric < 0:
        raise ValueError("Weights must not be negative")
    return round(max(actual, volumetric), WEIGHT_DECIMALS)


# =============================================================================
# RATE LOOKUP
# =============================================================================

def lookup_base_amount(
    weight: float,
    zone: str,
    service_type: str,
    rates: RateTable,
) -> float:
    """
    Base amount for a chargeable weight.

    The first slab whose upper bound is >= weight wins. Above the last slab,
    each started kg adds the card's additional_per_kg.
    """
    card = rates.card(zone, service_type)
    for upper, amount in card.slabs:
        if weight <= upper:
            return float(amount)

    last_upper, last_amount = card.slabs[-1]
    extra_kg = math.ceil(round(weight - last_upper, WEIGHT_DECIMALS))
    return float(last_amount + extra_kg * card.additional_per_kg)


def calculate_shipping_rate(
    weight: Any,
    zone: str = DEFAULT_ZONE,
    service_type: str = DEFAULT_SERVICE_TYPE,
    rates: RateTable | None = None,
) -> RateBreakdown:
    """
    Price a shipment by chargeable weight, zone and service.

    Args:
        weight: Chargeable weight in kg
        zone: Zone key from the rate table (e.g. "national")
        service_type: Service key from the rate table (e.g. "standard")
        rates: Rate table (load_rates() if not provided)

    Returns:
        RateBreakdown with base, fuel surcharge, subtotal, GST and total

    Raises:
        ValueError: On non-numeric or non-positive weight, unknown zone or
            unknown service type
    """
    chargeable = _to_number(weight, "weight")
    if chargeable <= 0:
        raise ValueError(f"weight must be greater than 0, got {weight!r}")

    if rates is None:
        rates = load_rates()

    base_amount = lookup_base_amount(chargeable, zone, service_type, rates)
    fuel_surcharge = FUEL.amount(base_amount)
    subtotal = round(base_amount + fuel_surcharge, 2)
    gst = GST.amount(subtotal)
    total = round(subtotal + gst, 2)

    service = rates.service_types[service_type]
    return RateBreakdown(
        base_amount=round(base_amount, 2),
        fuel_surcharge=fuel_surcharge,
        subtotal=subtotal,
        gst=gst,
        total=total,
        zone=zone,
        service=service.name,
        delivery_days=service.delivery_days,
    )


# =============================================================================
# QUOTES
# =============================================================================

@dataclass(frozen=True)
class ShipmentQuote:
    """
    A priced parcel. Dimensions and weights are stored as entered; changing
    the service produces a new quote via with_service().
    """

    length: float
    breadth: float
    height: float
    actual_weight: float
    zone: str = DEFAULT_ZONE
    service_type: str = DEFAULT_SERVICE_TYPE
    unit: str = DEFAULT_UNIT
    from_pincode: str = ""
    to_pincode: str = ""
    rates: RateTable | None = field(default=None, repr=False, compare=False)

    volumetric_weight: float = field(init=False)
    chargeable_weight: float = field(init=False)
    breakdown: RateBreakdown = field(init=False)

    def __post_init__(self) -> None:
        volumetric = calculate_volumetric_weight(self.length, self.breadth, self.height, self.unit)
        actual = _to_number(self.actual_weight, "actual_weight")
        if actual <= 0:
            raise ValueError(f"actual_weight must be greater than 0, got {self.actual_weight!r}")
        chargeable = calculate_chargeable_weight(actual, volumetric)
        breakdown = calculate_shipping_rate(chargeable, self.zone, self.service_type, self.rates)

        object.__setattr__(self, "volumetric_weight", volumetric)
        object.__setattr__(self, "chargeable_weight", chargeable)
        object.__setattr__(self, "breakdown", breakdown)

    def with_service(self, service_type: str) -> "ShipmentQuote":
        """Same parcel priced for another service."""
        return replace(self, service_type=service_type)

    def with_zone(self, zone: str) -> "ShipmentQuote":
        """Same parcel priced for another zone."""
        return replace(self, zone=zone)


def quote_shipment(
    length: Any,
    breadth: Any,
    height: Any,
    actual_weight: Any,
    zone: str = DEFAULT_ZONE,
    service_type: str = DEFAULT_SERVICE_TYPE,
    unit: str = DEFAULT_UNIT,
    from_pincode: str = "",
    to_pincode: str = "",
    rates: RateTable | None = None,
) -> ShipmentQuote:
    """
    Price a parcel from its raw form values.

    Raises:
        ValueError: On missing, non-numeric or non-positive dimensions or weight
    """
    dims = []
    for value, name in ((length, "length"), (breadth, "breadth"), (height, "height")):
        number = _to_number(value, name)
        if number <= 0:
            raise ValueError(f"{name} must be greater than 0, got {value!r}")
        dims.append(number)

    return ShipmentQuote(
        length=dims[0],
        breadth=dims[1],
        height=dims[2],
        actual_weight=_to_number(actual_weight, "actual_weight"),
        zone=zone,
        service_type=service_type,
        unit=unit,
        from_pincode=from_pincode,
        to_pincode=to_pincode,
        rates=rates,
    )


def compare_services(quote: ShipmentQuote) -> dict[str, RateBreakdown]:
    """Breakdown for every service type in the rate table, same parcel and zone."""
    rates = quote.rates if quote.rates is not None else load_rates()
    return {
        service_type: quote.with_service(service_type).breakdown
        for service_type in rates.service_types
        if _zone_priced(rates, quote.zone, service_type)
    }


def _zone_priced(rates: RateTable, zone: str, service_type: str) -> bool:
    return zone in rates.rates.get(service_type, {})


def export_quote(quote: ShipmentQuote, generated_at: datetime | None = None) -> dict[str, Any]:
    """
    JSON-serialisable quote document, valid for QUOTE_VALIDITY_DAYS.
    """
    generated_at = generated_at or datetime.now(timezone.utc)
    valid_until = generated_at + timedelta(days=QUOTE_VALIDITY_DAYS)

    return {
        "quote": {
            "fromPincode": quote.from_pincode,
            "toPincode": quote.to_pincode,
            "dimensions": {
                "length": quote.length,
                "breadth": quote.breadth,
                "height": quote.height,
                "unit": quote.unit,
            },
            "volumetricWeight": quote.volumetric_weight,
            "actualWeight": quote.actual_weight,
            "chargeableWeight": quote.chargeable_weight,
            "serviceType": quote.service_type,
            "zone": quote.breakdown.zone,
            "deliveryDays": quote.breakdown.delivery_days,
        },
        "breakdown": quote.breakdown.to_dict(),
        "generatedAt": generated_at.isoformat(),
        "validUntil": valid_until.isoformat(),
    }


__all__ = [
    "RateBreakdown",
    "ShipmentQuote",
    "calculate_volumetric_weight",
    "calculate_chargeable_weight",
    "calculate_shipping_rate",
    "lookup_base_amount",
    "quote_shipment",
    "compare_services",
    "export_quote",
    "unit_multiplier",
]
