"""
Unit Tests for Tracking Steps and Timelines
"""

import pytest

from ocl.tracking import (
    STEP_KEYS,
    TRACKER_STEPS,
    build_order_timeline,
    extract_date,
    has_reached_step,
    latest_timestamp,
    map_booking_to_order,
    map_booking_to_tracking_data,
    max_step_index,
    progress_step_key,
    status_counts,
    step_index,
    step_key_from_current_status,
    step_location,
)
from ocl.tracking.timeline import (
    format_service_type,
    normalize_status,
    step_timestamps,
)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def booking():
    """Booking picked up and scanned at the origin hub."""
    return {
        "_id": "665f1c2e9b1e8a0012345678",
        "bookingReference": "OCL2501001",
        "consignmentNumber": 100234,
        "status": "confirmed",
        "serviceType": "express",
        "origin": {"name": "Ritu Das", "city": "Guwahati", "state": "Assam"},
        "destination": {"name": "Arjun Rao", "city": "Bengaluru", "state": "Karnataka"},
        "createdAt": "2025-01-01T08:00:00.000Z",
        "assignedCourierBoyAt": {"$date": "2025-01-01T09:00:00.000Z"},
        "PickedUpAt": "2025-01-01T11:30:00.000Z",
        "reachedHub": [{"timestamp": "2025-01-01T16:00:00.000Z"}],
    }


# =============================================================================
# STEPS
# =============================================================================

class TestSteps:

    def test_step_order_and_titles(self):
        assert STEP_KEYS == (
            "booked", "pickup_assigned", "picked_up", "origin_hub",
            "in_transit", "destination_hub", "out_for_delivery", "delivered",
        )
        assert [s.title for s in TRACKER_STEPS] == [
            "Booked", "Pickup", "Picked", "Origin Hub",
            "Transit", "Dest. Hub", "Out for Delivery", "Delivered",
        ]

    def test_step_index(self):
        assert step_index("booked") == 0
        assert step_index("delivered") == 7
        assert step_index("unknown") == 0
        assert step_index(None) == 0


class TestStepKeyFromCurrentStatus:

    @pytest.mark.parametrize("text,expected", [
        ("Delivered", "delivered"),
        ("Out for Delivery", "out_for_delivery"),
        ("out_for_delivery", "out_for_delivery"),
        ("Reached Destination Hub", "destination_hub"),
        ("In Transit", "in_transit"),
        ("intransit", "in_transit"),
        ("reached-hub", "origin_hub"),
        ("Origin Hub", "origin_hub"),
        ("Picked Up", "picked_up"),
        ("Pickup Scheduled", "pickup_assigned"),
        ("courier assigned", "pickup_assigned"),
        ("Cancelled", "booked"),
        ("booked", "booked"),
        ("something else", "booked"),
        ("", "booked"),
        (None, "booked"),
    ])
    def test_mapping(self, text, expected):
        assert step_key_from_current_status(text) == expected


class TestProgress:

    @pytest.mark.parametrize("status,expected", [
        ("pending", "booked"),
        ("confirmed", "origin_hub"),
        ("in_transit", "in_transit"),
        ("delivered", "delivered"),
        ("cancelled", "booked"),
        ("mystery", "booked"),
        (None, "booked"),
    ])
    def test_backend_status(self, status, expected):
        assert progress_step_key(status) == expected

    def test_current_status_wins(self):
        assert progress_step_key("confirmed", "Out for Delivery") == "out_for_delivery"
        assert max_step_index("pending", "In Transit") == 4

    def test_has_reached_step(self):
        assert has_reached_step("in_transit", "picked_up")
        assert has_reached_step("in_transit", "in_transit")
        assert not has_reached_step("pending", "picked_up")
        assert has_reached_step("pending", "delivered", current_status="Delivered")

    def test_step_location(self):
        assert step_location("picked_up", "Guwahati", "Bengaluru") == "Guwahati"
        assert step_location("origin_hub", "Guwahati", "Bengaluru") == "Guwahati"
        assert step_location("in_transit", "Guwahati", "Bengaluru") == "In Transit"
        assert step_location("destination_hub", "Guwahati", "Bengaluru") == "Bengaluru"
        assert step_location("delivered", "Guwahati", "Bengaluru") == "Bengaluru"


# =============================================================================
# DATES
# =============================================================================

class TestDates:

    def test_extract_iso_string(self):
        assert extract_date("2025-01-02T10:00:00Z") == "2025-01-02T10:00:00Z"

    def test_extract_mongo_date(self):
        assert extract_date({"$date": "2025-01-02T10:00:00Z"}) == "2025-01-02T10:00:00Z"

    @pytest.mark.parametrize("value", [None, "", "not a date", {"$date": ""}, {}, 42])
    def test_extract_invalid(self, value):
        assert extract_date(value) is None

    def test_latest_timestamp_falls_back_to_assigned_at(self):
        entries = [
            {"timestamp": "2025-01-01T10:00:00Z"},
            {"assignedAt": "2025-01-03T10:00:00Z"},
            {"timestamp": "2025-01-02T10:00:00Z"},
        ]
        assert latest_timestamp(entries) == "2025-01-03T10:00:00Z"

    def test_latest_timestamp_empty(self):
        assert latest_timestamp([]) is None
        assert latest_timestamp(None) is None


# =============================================================================
# TIMELINES
# =============================================================================

class TestTimeline:

    def test_steps_up_to_status(self, booking):
        timeline = build_order_timeline(booking)
        assert [item.key for item in timeline] == [
            "booked", "pickup_assigned", "picked_up", "origin_hub", "destination_hub",
        ]

    def test_timestamps_from_booking_fields(self, booking):
        timeline = {item.key: item for item in build_order_timeline(booking)}
        assert timeline["booked"].timestamp == "2025-01-01T08:00:00.000Z"
        assert timeline["pickup_assigned"].timestamp == "2025-01-01T09:00:00.000Z"
        assert timeline["picked_up"].timestamp == "2025-01-01T11:30:00.000Z"
        assert timeline["origin_hub"].timestamp == "2025-01-01T16:00:00.000Z"
        assert all(item.completed for item in timeline.values())

    def test_reached_step_without_timestamp(self, booking):
        del booking["reachedHub"]
        origin_hub = build_order_timeline(booking)[-1]
        assert origin_hub.key == "origin_hub"
        assert origin_hub.timestamp is None
        assert origin_hub.completed is False

    def test_step_with_own_timestamp_included(self, booking):
        booking["status"] = "pending"
        booking["delivered"] = {"deliveredAt": "2025-01-04T12:00:00Z"}
        keys = [item.key for item in build_order_timeline(booking)]
        assert keys[-1] == "delivered"

    def test_hub_steps_use_latest_scan(self, booking):
        booking["reachedHub"] = [
            {"timestamp": "2025-01-03T07:00:00Z"},
            {"timestamp": "2025-01-01T16:00:00Z"},
        ]
        stamps = step_timestamps(booking)
        assert stamps["origin_hub"] == "2025-01-03T07:00:00Z"
        assert stamps["destination_hub"] == "2025-01-03T07:00:00Z"

    def test_single_hub_scan_stamps_destination_hub(self, booking):
        stamps = step_timestamps(booking)
        assert stamps["origin_hub"] == "2025-01-01T16:00:00.000Z"
        assert stamps["destination_hub"] == "2025-01-01T16:00:00.000Z"

    def test_destination_hub_from_completed_assignment(self, booking):
        del booking["reachedHub"]
        booking["assigned"] = [
            {"currentAssignment": "Completed", "assignedAt": "2025-01-02T09:00:00Z"},
        ]
        stamps = step_timestamps(booking)
        assert stamps["origin_hub"] is None
        assert stamps["destination_hub"] == "2025-01-02T09:00:00Z"

    def test_locations(self, booking):
        timeline = {item.key: item for item in build_order_timeline(booking)}
        assert timeline["booked"].location == "Guwahati, Assam"


class TestMapBooking:

    def test_order(self, booking):
        order = map_booking_to_order(booking)
        assert order.tracking_number == "OCL2501001"
        assert order.customer_name == "Arjun Rao"
        assert order.origin == "Guwahati, Assam"
        assert order.destination == "Bengaluru, Karnataka"
        assert order.service == "Express"
        assert order.current_status == "Origin Hub"
        assert order.current_location == "Guwahati, Assam"
        assert order.order_date == "2025-01-01T08:00:00.000Z"
        assert order.step("picked_up") is not None
        assert order.step("delivered") is None

    def test_tracking_number_fallbacks(self, booking):
        del booking["bookingReference"]
        assert map_booking_to_order(booking).tracking_number == "100234"
        del booking["consignmentNumber"]
        assert map_booking_to_order(booking).tracking_number == "665f1c2e9b1e8a0012345678"

    def test_current_status_is_title_cased(self, booking):
        booking["currentStatus"] = "out_for_delivery"
        order = map_booking_to_order(booking)
        assert order.current_status == "Out For Delivery"
        assert order.current_location == "Bengaluru, Karnataka"

    def test_cancelled(self, booking):
        booking["status"] = "cancelled"
        booking["currentStatus"] = "In Transit"
        order = map_booking_to_order(booking)
        assert order.current_status == "Cancelled"
        assert order.current_location == "Guwahati, Assam"

    def test_missing_locations(self, booking):
        booking["origin"] = {"city": "Guwahati"}
        booking["destination"] = {}
        order = map_booking_to_order(booking)
        assert order.origin == "Guwahati"
        assert order.destination == "Not available"
        assert order.customer_name == "Recipient"

    def test_tracking_data_lists_every_step(self, booking):
        data = map_booking_to_tracking_data(booking)
        assert [item.key for item in data.timeline] == list(STEP_KEYS)
        completed = [item.key for item in data.timeline if item.completed]
        assert completed == ["booked", "pickup_assigned", "picked_up", "origin_hub", "destination_hub"]
        assert data.estimated_delivery == "Not available"
        assert data.used_at == "2025-01-01T08:00:00.000Z"

    def test_tracking_data_delivered(self, booking):
        booking["status"] = "delivered"
        booking["delivered"] = {"deliveredAt": {"$date": "2025-01-05T12:00:00Z"}}
        data = map_booking_to_tracking_data(booking)
        assert data.status == "Delivered"
        assert data.estimated_delivery == "05 Jan 2025"
        assert data.timeline[-1].completed is True


class TestFormatting:

    def test_format_service_type(self):
        assert format_service_type("same_day express") == "Same Day Express"
        assert format_service_type(None) == "Standard"

    def test_normalize_status(self):
        assert normalize_status("IN_TRANSIT") == "In Transit"
        assert normalize_status("  picked   up ") == "Picked Up"


# =============================================================================
# SUMMARIES
# =============================================================================

class TestStatusCounts:

    def test_counts_in_step_order(self):
        bookings = [
            {"status": "delivered"},
            {"status": "pending"},
            {"status": "pending", "currentStatus": "Out for Delivery"},
            {"status": "cancelled"},
            {"status": "delivered"},
        ]
        df = status_counts(bookings)
        assert df.columns == ["step", "title", "count"]
        assert df["step"].to_list() == list(STEP_KEYS) + ["cancelled"]
        counts = dict(zip(df["step"].to_list(), df["count"].to_list()))
        assert counts["delivered"] == 2
        assert counts["booked"] == 1
        assert counts["out_for_delivery"] == 1
        assert counts["cancelled"] == 1
        assert counts["in_transit"] == 0

    def test_no_bookings(self):
        df = status_counts([])
        assert df["count"].sum() == 0
        assert len(df) == len(STEP_KEYS) + 1
