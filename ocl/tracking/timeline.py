"""
Tracking Timelines

Turns a booking record, as returned by the customer-booking and tracking
endpoints, into the step timeline shown to customers.

Booking records are plain dicts straight from the API JSON. Dates arrive
either as ISO strings or as Mongo extended JSON ({"$date": "..."}).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

import polars as pl

from .steps import (
    STEP_INDEX,
    STEP_KEYS,
    STEP_TITLES,
    TRACKER_STEPS,
    max_step_index,
    progress_step_key,
    step_location,
)


NOT_AVAILABLE = "Not available"
CANCELLED = "Cancelled"


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class TimelineItem:
    key: str
    status: str
    location: str
    timestamp: str | None
    completed: bool = False


@dataclass(frozen=True)
class Order:
    """A booking as listed on the customer's orders page."""

    id: str
    tracking_number: str
    customer_name: str
    origin: str
    destination: str
    service: str
    current_status: str
    current_location: str
    order_date: str
    timeline: list[TimelineItem] = field(default_factory=list)

    def step(self, key: str) -> TimelineItem | None:
        return next((item for item in self.timeline if item.key == key), None)


@dataclass(frozen=True)
class TrackingData:
    """A booking as shown on the public tracking card; timeline has every step."""

    tracking_number: str
    status: str
    estimated_delivery: str
    current_location: str
    used_at: str
    timeline: list[TimelineItem] = field(default_factory=list)


# =============================================================================
# DATE HELPERS
# =============================================================================

def _parse(value: str) -> datetime | None:
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def extract_date(value: Any) -> str | None:
    """
    Date string from an ISO string or {"$date": "..."}.

    Returns None for missing values and strings that are not valid dates.
    """
    if not value:
        return None
    if isinstance(value, str):
        return value if _parse(value) is not None else None
    if isinstance(value, Mapping):
        inner = value.get("$date")
        if isinstance(inner, str) and inner:
            return inner
    return None


def _dated_entries(
    entries: Iterable[Mapping[str, Any]] | None,
    field_name: str,
) -> list[tuple[datetime, str]]:
    """(parsed, raw) dates of the entries, oldest first."""
    dated = []
    for entry in entries or ():
        raw = extract_date(entry.get(field_name) or entry.get("assignedAt"))
        if raw is None:
            continue
        parsed = _parse(raw)
        if parsed is not None:
            dated.append((parsed, raw))
    return sorted(dated, key=lambda pair: pair[0])


def latest_timestamp(
    entries: Iterable[Mapping[str, Any]] | None,
    field_name: str = "timestamp",
) -> str | None:
    """Newest date among entries, reading field_name and falling back to assignedAt."""
    dated = _dated_entries(entries, field_name)
    return dated[-1][1] if dated else None


# =============================================================================
# FORMATTING
# =============================================================================

def format_city_state(city: str | None, state: str | None) -> str:
    if city and state:
        return f"{city}, {state}"
    return city or state or NOT_AVAILABLE


def format_service_type(service_type: str | None) -> str:
    """Title-case a service key, e.g. same_day express -> Same Day Express."""
    if not service_type:
        return "Standard"
    words = service_type.replace("_", " ").split(" ")
    return " ".join(w[0].upper() + w[1:] for w in words if w).strip()


def normalize_status(current_status: str) -> str:
    """Title-case each word, splitting on spaces and underscores."""
    words = re.split(r"[\s_]+", current_status.strip())
    return " ".join(w[:1].upper() + w[1:].lower() for w in words if w)


def _format_delivery_date(value: str) -> str:
    parsed = _parse(value)
    if parsed is None:
        return NOT_AVAILABLE
    return parsed.strftime("%d %b %Y")


# =============================================================================
# TIMELINE
# =============================================================================

def _locations(booking: Mapping[str, Any]) -> tuple[str, str]:
    origin = booking.get("origin") or {}
    destination = booking.get("destination") or {}
    return (
        format_city_state(origin.get("city"), origin.get("state")),
        format_city_state(destination.get("city"), destination.get("state")),
    )


def _completed_assignment_at(booking: Mapping[str, Any]) -> str | None:
    assigned = booking.get("assigned") or []
    if any(a.get("currentAssignment") == "Completed" for a in assigned):
        return latest_timestamp(assigned, "assignedAt")
    return None


def step_timestamps(booking: Mapping[str, Any]) -> dict[str, str | None]:
    """
    Timestamp for each step, derived from the booking's own event fields.

    A step without evidence in the record maps to None.
    """
    delivered = booking.get("delivered") or {}
    reached_hub = booking.get("reachedHub") or []

    # Any hub scan stamps both hub steps with the latest scan.
    hub_at = latest_timestamp(reached_hub)

    return {
        "booked": extract_date(booking.get("BookedAt")) or extract_date(booking.get("createdAt")),
        "pickup_assigned": extract_date(booking.get("assignedCourierBoyAt")),
        "picked_up": extract_date(booking.get("PickedUpAt")),
        "origin_hub": hub_at or extract_date(booking.get("ReceivedAt")),
        "in_transit": latest_timestamp(booking.get("intransit")) or _completed_assignment_at(booking),
        "destination_hub": hub_at or _completed_assignment_at(booking),
        "out_for_delivery": latest_timestamp(booking.get("OutForDelivery"), "assignedAt"),
        "delivered": extract_date(delivered.get("deliveredAt")) or extract_date(delivered.get("timestamp")),
    }


def build_order_timeline(booking: Mapping[str, Any]) -> list[TimelineItem]:
    """
    Steps the booking has reached, in order.

    A step is included when the status implies it was reached or when the
    record carries its own timestamp for it.
    """
    origin, destination = _locations(booking)
    timestamps = step_timestamps(booking)
    reached = max_step_index(booking.get("status"), booking.get("currentStatus"))

    timeline = []
    for step in TRACKER_STEPS:
        timestamp = timestamps[step.key]
        if STEP_INDEX[step.key] <= reached or timestamp:
            timeline.append(TimelineItem(
                key=step.key,
                status=step.title,
                location=step_location(step.key, origin, destination),
                timestamp=timestamp,
                completed=bool(timestamp),
            ))
    return timeline


def tracking_number_for(booking: Mapping[str, Any]) -> str:
    """Booking reference, else consignment number, else the record id."""
    reference = booking.get("bookingReference")
    if reference:
        return str(reference)
    consignment = booking.get("consignmentNumber")
    if isinstance(consignment, int) and not isinstance(consignment, bool):
        return str(consignment)
    return str(booking.get("_id", ""))


def display_status(booking: Mapping[str, Any]) -> str:
    """Cancelled; else the normalised currentStatus; else the step title."""
    if booking.get("status") == "cancelled":
        return CANCELLED
    current_status = booking.get("currentStatus")
    if current_status:
        return normalize_status(current_status)
    return STEP_TITLES[progress_step_key(booking.get("status"))]


def current_location(booking: Mapping[str, Any]) -> str:
    origin, destination = _locations(booking)
    if booking.get("status") == "cancelled":
        return origin
    key = progress_step_key(booking.get("status"), booking.get("currentStatus"))
    return step_location(key, origin, destination)


def _created_at(booking: Mapping[str, Any]) -> str:
    return extract_date(booking.get("createdAt")) or datetime.now(timezone.utc).isoformat()


def map_booking_to_order(booking: Mapping[str, Any]) -> Order:
    origin, destination = _locations(booking)
    recipient = (booking.get("destination") or {}).get("name")

    return Order(
        id=str(booking.get("_id", "")),
        tracking_number=tracking_number_for(booking),
        customer_name=recipient or "Recipient",
        origin=origin,
        destination=destination,
        service=format_service_type(booking.get("serviceType")),
        current_status=display_status(booking),
        current_location=current_location(booking),
        order_date=_created_at(booking),
        timeline=build_order_timeline(booking),
    )


def map_booking_to_tracking_data(booking: Mapping[str, Any]) -> TrackingData:
    """Tracking card data; unlike the order timeline, every step is listed."""
    origin, destination = _locations(booking)
    reached = {item.key: item for item in build_order_timeline(booking)}

    timeline = []
    for step in TRACKER_STEPS:
        entry = reached.get(step.key)
        timestamp = entry.timestamp if entry else None
        timeline.append(TimelineItem(
            key=step.key,
            status=step.title,
            location=entry.location if entry else step_location(step.key, origin, destination),
            timestamp=timestamp,
            completed=bool(timestamp),
        ))

    delivered = booking.get("delivered") or {}
    delivered_at = extract_date(delivered.get("deliveredAt")) or extract_date(delivered.get("timestamp"))

    return TrackingData(
        tracking_number=tracking_number_for(booking),
        status=display_status(booking),
        estimated_delivery=_format_delivery_date(delivered_at) if delivered_at else NOT_AVAILABLE,
        current_location=current_location(booking),
        used_at=_created_at(booking),
        timeline=timeline,
    )


# =============================================================================
# SUMMARIES
# =============================================================================

def status_counts(bookings: Iterable[Mapping[str, Any]]) -> pl.DataFrame:
    """
    Number of bookings at each step, in step order.

    Cancelled bookings are counted on their own "cancelled" row at the end.

    Returns:
        DataFrame with columns: step, title, count
    """
    keys = [
        "cancelled" if b.get("status") == "cancelled"
        else progress_step_key(b.get("status"), b.get("currentStatus"))
        for b in bookings
    ]

    steps = pl.DataFrame({
        "step": list(STEP_KEYS) + ["cancelled"],
        "title": [STEP_TITLES[k] for k in STEP_KEYS] + [CANCELLED],
        "_order": list(range(len(STEP_KEYS) + 1)),
    })
    counts = (
        pl.DataFrame({"step": keys}, schema={"step": pl.Utf8})
        .group_by("step")
        .agg(pl.len().cast(pl.Int64).alias("count"))
    )

    return (
        steps
        .join(counts, on="step", how="left")
        .with_columns(pl.col("count").fill_null(0))
        .sort("_order")
        .drop("_order")
    )


__all__ = [
    "TimelineItem",
    "Order",
    "TrackingData",
    "extract_date",
    "latest_timestamp",
    "format_city_state",
    "format_service_type",
    "normalize_status",
    "step_timestamps",
    "build_order_timeline",
    "tracking_number_for",
    "display_status",
    "current_location",
    "map_booking_to_order",
    "map_booking_to_tracking_data",
    "status_counts",
]
