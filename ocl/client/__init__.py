"""
OCL API Client

Endpoint wrappers over the shared HTTP client (shared.api). Each service
takes an ApiClient; without one it uses the process-wide default client.

    from ocl.client import TrackingService
    booking = TrackingService().track("100234")
"""

from .admin import AdminService
from .bookings import BookingService
from .complaints import ComplaintService
from .couriers import CourierService
from .medicine import MedicineService
from .tracking import TrackingService
from .models import (
    Pagination,
    CustomerBooking,
    MovementEvent,
    CourierApplication,
    Complaint,
    ComplaintStats,
    InvoiceShipment,
    ConsolidatedInvoice,
    SettlementItem,
    SettlementSummary,
)

__all__ = [
    "AdminService",
    "BookingService",
    "ComplaintService",
    "CourierService",
    "MedicineService",
    "TrackingService",
    "Pagination",
    "CustomerBooking",
    "MovementEvent",
    "CourierApplication",
    "Complaint",
    "ComplaintStats",
    "InvoiceShipment",
    "ConsolidatedInvoice",
    "SettlementItem",
    "SettlementSummary",
]
