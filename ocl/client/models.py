"""
API Models

Pydantic views of the records returned by the OCL REST API. The API speaks
camelCase with Mongo "_id" keys; models accept those and expose snake_case
attributes. Unknown fields are kept on booking records so the tracking
mappers still see every event field.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ocl.invoicing import InvoiceDocument, InvoiceItem, financial_year_invoice_number, invoice_period
from ocl.tracking import Order, TrackingData, map_booking_to_order, map_booking_to_tracking_data
from shared.config import get_settings


class ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# =============================================================================
# PAGINATION
# =============================================================================

class Pagination(ApiModel):
    """
    Page information for list endpoints.

    Complaint lists report currentPage/totalPages/totalCount, courier lists
    report page/pages/total; both map onto the same fields.
    """

    page: int = Field(default=1, validation_alias=AliasChoices("page", "currentPage"))
    pages: int = Field(default=1, validation_alias=AliasChoices("pages", "totalPages"))
    total: int = Field(default=0, validation_alias=AliasChoices("total", "totalCount"))
    limit: int | None = None
    has_next: bool = Field(default=False, alias="hasNext")
    has_prev: bool = Field(default=False, alias="hasPrev")


# =============================================================================
# BOOKINGS AND TRACKING
# =============================================================================

class CustomerBooking(ApiModel):
    """A customer or tracking booking record."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(default="", alias="_id")
    booking_reference: str | None = Field(default=None, alias="bookingReference")
    consignment_number: int | str | None = Field(default=None, alias="consignmentNumber")
    status: str | None = None
    current_status: str | None = Field(default=None, alias="currentStatus")
    service_type: str | None = Field(default=None, alias="serviceType")
    origin: dict[str, Any] = Field(default_factory=dict)
    destination: dict[str, Any] = Field(default_factory=dict)

    def record(self) -> dict[str, Any]:
        """The booking as the API sent it, camelCase keys included."""
        return self.model_dump(by_alias=True)

    def to_order(self) -> Order:
        return map_booking_to_order(self.record())

    def to_tracking_data(self) -> TrackingData:
        return map_booking_to_tracking_data(self.record())


class MovementEvent(ApiModel):
    status: str
    label: str
    timestamp: str
    location: str | None = None
    description: str | None = None


# =============================================================================
# COURIERS
# =============================================================================

class CourierApplication(ApiModel):
    """A courier boy registration awaiting (or past) admin review."""

    id: str = Field(alias="_id")
    full_name: str = Field(default="", alias="fullName")
    designation: str = ""
    email: str = ""
    phone: str = ""
    locality: str = ""
    building: str = ""
    landmark: str = ""
    pincode: str = ""
    area: str = ""
    aadhar_card: str = Field(default="", alias="aadharCard")
    aadhar_card_url: str = Field(default="", alias="aadharCardUrl")
    pan_card: str = Field(default="", alias="panCard")
    pan_card_url: str = Field(default="", alias="panCardUrl")
    vehicle_type: str = Field(default="", alias="vehicleType")
    license_number: str = Field(default="", alias="licenseNumber")
    status: str = "pending"
    is_verified: bool = Field(default=False, alias="isVerified")
    type: str | None = None
    registration_date: str | None = Field(default=None, alias="registrationDate")
    created_at: str | None = Field(default=None, alias="createdAt")


# =============================================================================
# COMPLAINTS
# =============================================================================

class Complaint(ApiModel):
    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    name: str
    email: str
    phone: str | None = None
    subject: str
    category: str
    message: str
    priority: str = "Medium"
    source: str = "public"
    status: str = "Open"
    response: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")


class ComplaintStats(ApiModel):
    total: int = 0
    open: int = 0
    in_progress: int = Field(default=0, alias="inProgress")
    resolved: int = 0
    closed: int = 0
    by_status: list[dict[str, Any]] = Field(default_factory=list, alias="byStatus")
    by_category: list[dict[str, Any]] = Field(default_factory=list, alias="byCategory")


# =============================================================================
# INVOICES AND SETTLEMENTS
# =============================================================================

class InvoiceShipment(ApiModel):
    id: str | None = Field(default=None, alias="_id")
    consignment_number: int = Field(alias="consignmentNumber")
    booking_reference: str | None = Field(default=None, alias="bookingReference")
    booking_date: str | None = Field(default=None, alias="bookingDate")
    destination: str = "N/A"
    service_type: str = Field(default="NON-DOX", alias="serviceType")
    weight: float = 0.0
    freight_charges: float = Field(default=0.0, alias="freightCharges")
    total_amount: float = Field(default=0.0, alias="totalAmount")
    awb_number: str | None = Field(default=None, alias="awbNumber")

    def to_item(self) -> InvoiceItem:
        return InvoiceItem(
            consignment_number=self.consignment_number,
            booking_date=self.booking_date or "",
            service_type=self.service_type,
            destination=self.destination,
            weight=self.weight,
            freight_charges=self.freight_charges,
            awb_number=self.awb_number,
        )


class ConsolidatedInvoice(ApiModel):
    """Unpaid FP shipments of one corporate, as returned by the settlement endpoint."""

    id: str = Field(default="", alias="_id")
    invoice_number: str | None = Field(default=None, alias="invoiceNumber")
    corporate_id: str | None = Field(default=None, alias="corporateId")
    company_name: str = Field(default="Unknown Company", alias="companyName")
    company_address: str = Field(default="Unknown Address", alias="companyAddress")
    gst_number: str = Field(default="", alias="gstNumber")
    state: str = ""
    contact_number: str = Field(default="", alias="contactNumber")
    email: str = ""
    invoice_date: str | None = Field(default=None, alias="invoiceDate")
    shipments: list[InvoiceShipment] = Field(default_factory=list)
    status: str = "unpaid"
    due_date: str | None = Field(default=None, alias="dueDate")

    def to_document(self, biller_state: str | None = None, serial: int | None = None) -> InvoiceDocument:
        """
        Printable invoice for these shipments.

        The invoice is dated from invoiceDate (today when absent). A serial
        renumbers it in the financial year of that date; otherwise the
        number sent by the API is kept. The biller state defaults to the
        configured one.
        """
        on = _to_date(self.invoice_date)
        if serial is not None or not self.invoice_number:
            number = financial_year_invoice_number(on, serial if serial is not None else 1)
        else:
            number = self.invoice_number
        return InvoiceDocument(
            invoice_number=number,
            invoice_date=on,
            invoice_period=invoice_period(on),
            corporate_name=self.company_name,
            corporate_address=self.company_address,
            items=tuple(s.to_item() for s in self.shipments),
            corporate_gst_number=self.gst_number,
            corporate_state=self.state,
            corporate_contact=self.contact_number,
            corporate_email=self.email,
            biller_state=biller_state or get_settings().biller_state,
        )


def _to_date(value: str | None) -> date:
    if value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            pass
    return date.today()


class SettlementItem(ApiModel):
    """A medicine consignment in a monthly settlement."""

    id: str = Field(alias="_id")
    consignment_number: int = Field(alias="consignmentNumber")
    sender_name: str = Field(default="", alias="senderName")
    receiver_name: str = Field(default="", alias="receiverName")
    paid_by: str = Field(default="sender", alias="paidBy")
    cost: float = 0.0
    is_paid: bool = Field(default=False, alias="isPaid")
    created_at: str | None = Field(default=None, alias="createdAt")


class SettlementSummary(ApiModel):
    total: float = 0.0
    ocl_charge: float | None = Field(default=None, alias="oclCharge")


__all__ = [
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
