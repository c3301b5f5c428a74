"""
OCL Tracking

Maps backend shipment statuses onto the eight customer-facing tracker steps
and builds step timelines from booking records.
"""

from .steps import (
    TrackerStep,
    TRACKER_STEPS,
    STEP_KEYS,
    STEP_TITLES,
    BACKEND_STATUS_PROGRESS,
    step_index,
    step_key_from_current_status,
    progress_step_key,
    max_step_index,
    has_reached_step,
    step_location,
)
from .timeline import (
    TimelineItem,
    Order,
    TrackingData,
    extract_date,
    latest_timestamp,
    build_order_timeline,
    map_booking_to_order,
    map_booking_to_tracking_data,
    status_counts,
)

__all__ = [
    "TrackerStep",
    "TRACKER_STEPS",
    "STEP_KEYS",
    "STEP_TITLES",
    "BACKEND_STATUS_PROGRESS",
    "step_index",
    "step_key_from_current_status",
    "progress_step_key",
    "max_step_index",
    "has_reached_step",
    "step_location",
    "TimelineItem",
    "Order",
    "TrackingData",
    "extract_date",
    "latest_timestamp",
    "build_order_timeline",
    "map_booking_to_order",
    "map_booking_to_tracking_data",
    "status_counts",
]
