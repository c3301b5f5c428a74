"""
Rate Table Models

Typed view of rates.json. The JSON keeps the camelCase keys used by the
booking site; the models accept both spellings.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ServiceType(BaseModel):
    """A service level offered to customers (standard, priority, express)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    delivery_days: str = Field(alias="deliveryDays")


class RateCard(BaseModel):
    """
    Weight slabs for one zone and service.

    slabs: ordered (upper_kg, amount) pairs. A weight falls in the first
        slab whose upper bound is >= the weight.
    additional_per_kg: charged per started kg above the final slab.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    slabs: list[tuple[float, float]] = Field(min_length=1)
    additional_per_kg: float = Field(alias="additionalPerKg", ge=0)

    @field_validator("slabs")
    @classmethod
    def _ascending(cls, slabs: list[tuple[float, float]]) -> list[tuple[float, float]]:
        uppers = [upper for upper, _ in slabs]
        if any(u <= 0 for u in uppers):
            raise ValueError("slab upper bounds must be positive")
        if uppers != sorted(set(uppers)):
            raise ValueError("slab upper bounds must be strictly ascending")
        if any(amount < 0 for _, amount in slabs):
            raise ValueError("slab amounts must not be negative")
        return slabs

    @property
    def max_slab_weight(self) -> float:
        return self.slabs[-1][0]


class RateTable(BaseModel):
    """Zones, service types and the rate card for every service/zone pair."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    zones: dict[str, str]
    service_types: dict[str, ServiceType] = Field(alias="serviceTypes")
    rates: dict[str, dict[str, RateCard]]

    @model_validator(mode="after")
    def _complete(self) -> "RateTable":
        for service, cards in self.rates.items():
            if service not in self.service_types:
                raise ValueError(f"rates reference unknown service type '{service}'")
            for zone in cards:
                if zone not in self.zones:
                    raise ValueError(f"rates for '{service}' reference unknown zone '{zone}'")
        return self

    def card(self, zone: str, service_type: str) -> RateCard:
        """
        Rate card for a zone and service.

        Raises:
            ValueError: If the zone or service type is unknown or unpriced
        """
        if service_type not in self.service_types:
            known = ", ".join(sorted(self.service_types))
            raise ValueError(f"Unknown service type '{service_type}'. Expected one of: {known}")
        if zone not in self.zones:
            known = ", ".join(sorted(self.zones))
            raise ValueError(f"Unknown zone '{zone}'. Expected one of: {known}")
        try:
            return self.rates[service_type][zone]
        except KeyError:
            raise ValueError(f"No rates for zone '{zone}' with service '{service_type}'") from None
