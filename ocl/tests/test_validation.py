"""
Unit Tests for Booking Form Validation
"""

import pytest

from ocl.validation import (
    field_error,
    validate_address,
    validate_email,
    validate_gst_number,
    validate_mobile_number,
    validate_pincode,
    validate_shipment,
)


@pytest.fixture
def address():
    return {
        "name": "Ritu Das",
        "mobile_number": "98640 12345",
        "email": "ritu@example.in",
        "pincode": "781001",
        "gst_number": "",
    }


@pytest.fixture
def shipment():
    return {
        "nature_of_consignment": "NON-DOX",
        "actual_weight": "2.5",
        "dimensions": [{"length": 30, "breadth": 20, "height": 10}],
    }


class TestFieldChecks:

    @pytest.mark.parametrize("email,valid", [
        ("ritu@example.in", True),
        ("a.b@c.co", True),
        ("no-at-sign.in", False),
        ("two words@example.in", False),
        ("missing@tld", False),
    ])
    def test_email(self, email, valid):
        assert validate_email(email) is valid

    @pytest.mark.parametrize("mobile,valid", [
        ("9864012345", True),
        ("98640-12345", True),
        ("6000000000", True),
        ("5864012345", False),
        ("986401234", False),
        ("98640123456", False),
    ])
    def test_mobile_number(self, mobile, valid):
        assert validate_mobile_number(mobile) is valid

    @pytest.mark.parametrize("pincode,valid", [
        ("781001", True),
        ("78100", False),
        ("7810011", False),
        ("78100A", False),
    ])
    def test_pincode(self, pincode, valid):
        assert validate_pincode(pincode) is valid

    @pytest.mark.parametrize("gst,valid", [
        ("", True),
        (None, True),
        ("18AACCO3877C1ZE", True),
        ("18aacco3877c1ze", True),
        ("18AACCO3877C0ZE", False),
        ("18AACCO3877C1XE", False),
        ("18AACCO3877", False),
    ])
    def test_gst_number(self, gst, valid):
        assert validate_gst_number(gst) is valid


class TestValidateAddress:

    def test_valid(self, address):
        result = validate_address(address)
        assert result.is_valid
        assert result.errors == []

    def test_required_fields(self):
        result = validate_address({"name": " ", "mobile_number": "", "pincode": ""})
        assert not result.is_valid
        assert field_error(result.errors, "name") == "Name is required"
        assert field_error(result.errors, "mobile_number") == "Mobile number is required"
        assert field_error(result.errors, "pincode") == "Pincode is required"

    def test_invalid_formats(self, address):
        address.update(mobile_number="12345", email="bad", pincode="12", gst_number="XYZ")
        result = validate_address(address)
        assert [e.field for e in result.errors] == ["mobile_number", "email", "pincode", "gst_number"]
        assert field_error(result.errors, "pincode") == "Invalid pincode format (6 digits required)"

    def test_email_optional(self, address):
        address["email"] = ""
        assert validate_address(address).is_valid


class TestValidateShipment:

    def test_valid(self, shipment):
        assert validate_shipment(shipment).is_valid

    def test_required_fields(self):
        result = validate_shipment({"nature_of_consignment": "", "actual_weight": "", "dimensions": []})
        assert [e.field for e in result.errors] == ["nature_of_consignment", "actual_weight", "dimensions"]
        assert field_error(result.errors, "actual_weight") == "Actual weight is required"

    @pytest.mark.parametrize("weight", ["0", "-2", "heavy", "nan"])
    def test_invalid_weight(self, shipment, weight):
        shipment["actual_weight"] = weight
        result = validate_shipment(shipment)
        assert field_error(result.errors, "actual_weight") == "Invalid weight value"

    def test_field_error_missing(self, shipment):
        assert field_error(validate_shipment(shipment).errors, "actual_weight") is None
