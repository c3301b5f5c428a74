"""
Tracker Steps

The eight customer-facing shipment steps and the mapping from backend
statuses (coarse enum and free-text currentStatus) to a step.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TrackerStep:
    key: str
    title: str


TRACKER_STEPS: tuple[TrackerStep, ...] = (
    TrackerStep("booked", "Booked"),
    TrackerStep("pickup_assigned", "Pickup"),
    TrackerStep("picked_up", "Picked"),
    TrackerStep("origin_hub", "Origin Hub"),
    TrackerStep("in_transit", "Transit"),
    TrackerStep("destination_hub", "Dest. Hub"),
    TrackerStep("out_for_delivery", "Out for Delivery"),
    TrackerStep("delivered", "Delivered"),
)

STEP_KEYS: tuple[str, ...] = tuple(step.key for step in TRACKER_STEPS)
STEP_INDEX: dict[str, int] = {key: index for index, key in enumerate(STEP_KEYS)}
STEP_TITLES: dict[str, str] = {step.key: step.title for step in TRACKER_STEPS}

DEFAULT_STEP = "booked"

# Coarse backend status -> furthest step it implies
BACKEND_STATUS_PROGRESS: dict[str, str] = {
    "pending": "booked",
    "confirmed": "origin_hub",
    "in_transit": "in_transit",
    "delivered": "delivered",
    "cancelled": "booked",
}

# Free-text currentStatus matching, checked in order; first hit wins.
_CURRENT_STATUS_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("delivered", ("delivered",)),
    ("out_for_delivery", ("out for delivery", "out_for_delivery")),
    ("destination_hub", ("destination hub", "destination_hub")),
    ("in_transit", ("in transit", "in_transit", "transit")),
    ("origin_hub", ("origin hub", "origin_hub", "reached hub", "reached-hub")),
    ("picked_up", ("picked up", "picked_up", "picked")),
    ("pickup_assigned", ("pickup", "assigned")),
    ("booked", ("cancelled", "cancel")),
)

_ORIGIN_SIDE_STEPS = frozenset({"booked", "pickup_assigned", "picked_up", "origin_hub"})
IN_TRANSIT_LOCATION = "In Transit"


def step_index(key: str | None) -> int:
    """Position of a step in TRACKER_STEPS; 0 for unknown keys."""
    return STEP_INDEX.get(key or "", 0)


def step_key_from_current_status(current_status: str | None) -> str:
    """Map a free-text status such as "Out for Delivery" or "reached-hub" to a step key."""
    if not current_status:
        return DEFAULT_STEP
    text = current_status.lower()
    for key, needles in _CURRENT_STATUS_RULES:
        if any(needle in text for needle in needles):
            return key
    return DEFAULT_STEP


def progress_step_key(status: str | None, current_status: str | None = None) -> str:
    """Current step: the free-text status wins over the coarse backend status."""
    if current_status:
        return step_key_from_current_status(current_status)
    return BACKEND_STATUS_PROGRESS.get(status or "", DEFAULT_STEP)


def max_step_index(status: str | None, current_status: str | None = None) -> int:
    return step_index(progress_step_key(status, current_status))


def has_reached_step(
    status: str | None,
    step_key: str,
    current_status: str | None = None,
) -> bool:
    return step_index(step_key) <= max_step_index(status, current_status)


def step_location(step_key: str, origin_location: str, destination_location: str) -> str:
    """Where a parcel is while at a step: origin side, in transit, or destination side."""
    if step_key in _ORIGIN_SIDE_STEPS:
        return origin_location
    if step_key == "in_transit":
        return IN_TRANSIT_LOCATION
    return destination_location
