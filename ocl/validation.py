"""
Booking Form Validation

Checks for the address and shipment steps of a booking before it is sent
to the API. Address and shipment data are plain mappings keyed like the
booking form fields (mobile_number, name, email, pincode, gst_number;
nature_of_consignment, actual_weight, dimensions).
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Mapping


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MOBILE_PATTERN = re.compile(r"^[6-9]\d{9}$")
PINCODE_PATTERN = re.compile(r"^\d{6}$")
GSTIN_PATTERN = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z]{1}[1-9A-Z]{1}Z[0-9A-Z]{1}$")


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


# =============================================================================
# FIELD CHECKS
# =============================================================================

def validate_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def validate_mobile_number(mobile: str) -> bool:
    """Indian 10-digit mobile starting 6-9; spaces, dashes and the like are ignored."""
    return bool(MOBILE_PATTERN.match(re.sub(r"\D", "", mobile)))


def validate_pincode(pincode: str) -> bool:
    return bool(PINCODE_PATTERN.match(pincode))


def validate_gst_number(gst: str | None) -> bool:
    """15-character GSTIN, case-insensitive. GST is optional, so empty passes."""
    if not gst:
        return True
    return bool(GSTIN_PATTERN.match(gst.upper()))


# =============================================================================
# FORM STEPS
# =============================================================================

def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return str(value).strip() if value is not None else ""


def validate_address(data: Mapping[str, Any]) -> ValidationResult:
    """Origin or destination address step; both follow the same rules."""
    errors = []

    mobile = _text(data, "mobile_number")
    if not mobile:
        errors.append(FieldError("mobile_number", "Mobile number is required"))
    elif not validate_mobile_number(mobile):
        errors.append(FieldError("mobile_number", "Invalid mobile number format"))

    if not _text(data, "name"):
        errors.append(FieldError("name", "Name is required"))

    email = _text(data, "email")
    if email and not validate_email(email):
        errors.append(FieldError("email", "Invalid email format"))

    pincode = _text(data, "pincode")
    if not pincode:
        errors.append(FieldError("pincode", "Pincode is required"))
    elif not validate_pincode(pincode):
        errors.append(FieldError("pincode", "Invalid pincode format (6 digits required)"))

    gst_number = _text(data, "gst_number")
    if gst_number and not validate_gst_number(gst_number):
        errors.append(FieldError("gst_number", "Invalid GST number format"))

    return ValidationResult(errors)


def validate_shipment(data: Mapping[str, Any]) -> ValidationResult:
    errors = []

    if not _text(data, "nature_of_consignment"):
        errors.append(FieldError("nature_of_consignment", "Nature of consignment is required"))

    actual_weight = _text(data, "actual_weight")
    if not actual_weight:
        errors.append(FieldError("actual_weight", "Actual weight is required"))
    else:
        try:
            weight = float(actual_weight)
        except ValueError:
            weight = math.nan
        if math.isnan(weight) or weight <= 0:
            errors.append(FieldError("actual_weight", "Invalid weight value"))

    if not data.get("dimensions"):
        errors.append(FieldError("dimensions", "At least one dimension is required"))

    return ValidationResult(errors)


def field_error(errors: list[FieldError], field_name: str) -> str | None:
    """Message of the first error for a field, if any."""
    return next((e.message for e in errors if e.field == field_name), None)


__all__ = [
    "FieldError",
    "ValidationResult",
    "validate_email",
    "validate_mobile_number",
    "validate_pincode",
    "validate_gst_number",
    "validate_address",
    "validate_shipment",
    "field_error",
]
