"""
Unit Tests for the Tracking Script
"""

import sys

import pytest

from ocl.client.models import CustomerBooking, MovementEvent
from ocl.scripts import track


class FakeTrackingService:

    def __init__(self, booking, events=()):
        self.booking = booking
        self.events = list(events)

    def track(self, number):
        return CustomerBooking.model_validate(self.booking)

    def movement_history(self, number):
        return self.events


@pytest.fixture
def booking():
    return {
        "_id": "665f1c2e9b1e8a0012345678",
        "consignmentNumber": 100234,
        "status": "confirmed",
        "origin": {"city": "Guwahati", "state": "Assam"},
        "destination": {"city": "Bengaluru", "state": "Karnataka"},
        "createdAt": "2025-01-01T08:00:00.000Z",
        "reachedHub": [{"timestamp": "2025-01-01T16:00:00.000Z"}],
    }


def run_track(monkeypatch, service, *argv):
    monkeypatch.setattr(track, "TrackingService", lambda: service)
    monkeypatch.setattr(sys, "argv", ["ocl-track", *argv])
    track.main()


class TestTrackScript:

    def test_confirmed_booking_is_at_origin_hub(self, monkeypatch, capsys, booking):
        run_track(monkeypatch, FakeTrackingService(booking), "100234", "--no-history")
        out = capsys.readouterr().out
        assert "Status:   Origin Hub" in out
        assert "Location: Guwahati, Assam" in out

    def test_timeline_lists_timestamps(self, monkeypatch, capsys, booking):
        run_track(monkeypatch, FakeTrackingService(booking), "100234", "--no-history")
        lines = capsys.readouterr().out.splitlines()
        origin_hub = next(line for line in lines if "Origin Hub" in line and "[" in line)
        assert origin_hub.strip().startswith("[x]")
        assert "2025-01-01T16:00:00.000Z" in origin_hub
        delivered = next(line for line in lines if "Delivered" in line)
        assert delivered.strip().startswith("[ ]")

    def test_movement_history(self, monkeypatch, capsys, booking):
        events = [MovementEvent(
            status="reached_hub",
            label="Reached hub",
            timestamp="2025-01-01T16:00:00.000Z",
            location="Guwahati Hub",
        )]
        run_track(monkeypatch, FakeTrackingService(booking, events), "100234")
        out = capsys.readouterr().out
        assert "Movement history:" in out
        assert "Reached hub (Guwahati Hub)" in out
